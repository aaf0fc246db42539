from pathlib import Path
from typing import Iterable, List, Optional, Union

from .bridges import find_bridges
from .connectivity import is_connected
from .graph import EdgeDefinition, Graph


def format_graph(graph: Graph) -> str:
    """Serialise ``graph`` as NEL text. Edge weights are not written."""

    lines = [f"n {node.index} {node.name}" for node in graph.nodes]
    lines.extend(
        f"e {edge.source_index} {edge.destination_index} {edge.name}" for edge in graph.edges
    )
    lines.append(f"g {graph.name}")
    return "\n".join(lines) + "\n"


def save_graph(graph: Graph, path: Union[str, Path]) -> Path:
    """Write ``graph`` to ``path``, adding ``.nel`` when the file name has no extension."""

    target = Path(path)
    if "." not in target.name:
        target = target.with_name(target.name + ".nel")
    target.write_text(format_graph(graph), encoding="utf-8")
    return target


def format_report(graph: Graph, bridges: Optional[Iterable[EdgeDefinition]] = None) -> str:
    """Render the connectivity / bridges analysis report."""

    found: List[EdgeDefinition] = list(find_bridges(graph) if bridges is None else bridges)
    lines = [
        f"Graph connectivity: {is_connected(graph)}",
        f"Graph bridges: {len(found)}",
    ]
    lines.extend(str(edge) for edge in found)
    return "\n".join(lines) + "\n"


def write_report(graph: Graph, path: Union[str, Path]) -> Path:
    target = Path(path)
    target.write_text(format_report(graph), encoding="utf-8")
    return target


def format_nodes(graph: Graph) -> str:
    lines = [f"Graph {graph.name}"]
    lines.extend(str(node) for node in graph.nodes)
    return "\n".join(lines) + "\n"
