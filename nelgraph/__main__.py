import argparse
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from nelgraph import (
    Graph,
    GraphIndexError,
    GraphLayout,
    GraphNode,
    LayoutOptions,
    NelFormatError,
    breadth_first,
    default_layout,
    find_bridges,
    format_nodes,
    format_report,
    generate_tikz_document,
    layout_frames,
    minimal_distance,
    read_graph,
    save_graph,
)

logger = logging.getLogger(__name__)

DEFAULT_INPUTS = ("input.txt", "input.nel")
DEFAULT_REPORT = "output.txt"


class CommandError(Exception):
    """Raised by a handler when the request cannot be carried out on the loaded graph."""


@dataclass
class CommandContext:
    """State handed to every command handler."""

    args: argparse.Namespace
    graph: Optional[Graph] = None
    output: List[str] = field(default_factory=list)

    def emit(self, text: str = "") -> None:
        self.output.append(text)
        print(text)


@dataclass(frozen=True)
class Command:
    name: str
    help: str
    handler: Callable[[CommandContext], None]
    configure: Callable[[argparse.ArgumentParser], None]
    requires_graph: bool = True
    # Load edges exactly as written, ignoring --oriented.
    keeps_direction: bool = False


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _resolve_report_input(path: Optional[str]) -> Path:
    if path:
        return Path(path)
    for candidate in DEFAULT_INPUTS:
        if Path(candidate).exists():
            logger.info("No input given; using %s", candidate)
            return Path(candidate)
    raise SystemExit(f"No input file given and none of {', '.join(DEFAULT_INPUTS)} exists")


def _resolve_node(graph: Graph, name: str) -> GraphNode:
    node = graph.find_node(name, ignore_case=True)
    if node is None:
        raise CommandError(f"No node named {name!r} in graph {graph.name!r}")
    return node


def _emit_positions(context: CommandContext, layout: GraphLayout) -> None:
    for node, (x, y) in layout.items():
        context.emit(f"  {node.index} {node.name}: ({x}, {y})")


def _write_tikz(context: CommandContext, layout: GraphLayout, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Writing TikZ document to %s", path)
    path.write_text(generate_tikz_document(layout), encoding="utf-8")
    context.emit(f"TikZ document written to {path}")


def _report_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("path", nargs="?", help="NEL file (default: input.txt or input.nel)")
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_REPORT,
        help=f"Report destination (default: {DEFAULT_REPORT})",
    )


def _run_report(context: CommandContext) -> None:
    graph = context.graph
    assert graph is not None
    # find_bridges may reorder per-node edge lists.
    bridges = list(find_bridges(graph.copy()))
    logger.info("Found %d bridge(s) in graph %r", len(bridges), graph.name)
    report = format_report(graph, bridges)
    output_path = Path(context.args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(report, encoding="utf-8")
    context.emit(f"Report written to {output_path}")


def _path_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("path", help="NEL file to load")


def _run_print(context: CommandContext) -> None:
    assert context.graph is not None
    context.emit(format_nodes(context.graph).rstrip("\n"))


def _canvas_args(parser: argparse.ArgumentParser) -> None:
    _path_args(parser)
    parser.add_argument("--width", type=int, default=1024, help="Image width (default: 1024)")
    parser.add_argument("--height", type=int, default=1024, help="Image height (default: 1024)")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of centring when all nodes share a coordinate",
    )


def _layout_args(parser: argparse.ArgumentParser) -> None:
    _canvas_args(parser)
    parser.add_argument(
        "--iterations",
        type=int,
        default=1,
        help="Force simulation iterations (default: 1)",
    )
    parser.add_argument(
        "--tikz-output-path",
        help="Write a standalone TikZ document of the layout to the given path",
    )


def _run_layout(context: CommandContext) -> None:
    args = context.args
    graph = context.graph
    assert graph is not None
    options = LayoutOptions(
        iterations=args.iterations,
        degenerate="error" if args.strict else "center",
    )
    layout = default_layout(graph, (args.width, args.height), options=options)
    context.emit(f"Layout of graph {graph.name} ({args.width}x{args.height}):")
    _emit_positions(context, layout)

    if args.tikz_output_path:
        _write_tikz(context, layout, Path(args.tikz_output_path))


def _frames_args(parser: argparse.ArgumentParser) -> None:
    _canvas_args(parser)
    parser.add_argument(
        "--frames",
        type=int,
        default=10,
        help="Animation frame count; frame i runs i iterations (default: 10)",
    )
    parser.add_argument(
        "--tikz-output-dir",
        help="Write one standalone TikZ document per frame into the given directory",
    )


def _run_frames(context: CommandContext) -> None:
    args = context.args
    graph = context.graph
    assert graph is not None
    options = LayoutOptions(degenerate="error" if args.strict else "center")
    count = 0
    for count, layout in enumerate(
        layout_frames(graph, (args.width, args.height), args.frames, options=options), start=1
    ):
        context.emit(f"Frame {count}:")
        _emit_positions(context, layout)
        if args.tikz_output_dir:
            _write_tikz(context, layout, Path(args.tikz_output_dir) / f"frame_{count:03d}.tex")
    context.emit(f"{count} frame(s) of graph {graph.name}")


def _distance_args(parser: argparse.ArgumentParser) -> None:
    _path_args(parser)
    parser.add_argument("start", type=int, help="Start node index")
    parser.add_argument("end", type=int, help="End node index")


def _run_distance(context: CommandContext) -> None:
    args = context.args
    graph = context.graph
    assert graph is not None
    weighted = minimal_distance(graph, args.start, args.end)
    hops = breadth_first(graph, args.start)[args.end]
    context.emit(f"Hops {args.start}->{args.end}: {hops}")
    context.emit(f"Weighted distance {args.start}->{args.end}: {weighted}")


def _save_args(parser: argparse.ArgumentParser) -> None:
    _path_args(parser)
    parser.add_argument("output", help="Destination NEL file (.nel added if no extension)")


def _run_save(context: CommandContext) -> None:
    assert context.graph is not None
    target = save_graph(context.graph, context.args.output)
    context.emit(f"Graph saved to {target}")


def _create_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("name", help="Graph name")
    parser.add_argument("output", help="Destination NEL file (.nel added if no extension)")


def _run_create(context: CommandContext) -> None:
    graph = Graph(name=context.args.name)
    context.graph = graph
    target = save_graph(graph, context.args.output)
    context.emit(f"Empty graph {graph.name} saved to {target}")


def _edit_args(parser: argparse.ArgumentParser) -> None:
    _path_args(parser)
    parser.add_argument(
        "-o",
        "--output",
        help="Destination NEL file (default: overwrite the input)",
    )


def _save_edit(context: CommandContext) -> None:
    assert context.graph is not None
    target = save_graph(context.graph, context.args.output or context.args.path)
    context.emit(f"Graph saved to {target}")


def _add_node_args(parser: argparse.ArgumentParser) -> None:
    _edit_args(parser)
    parser.add_argument("name", help="Name of the new node")


def _run_add_node(context: CommandContext) -> None:
    assert context.graph is not None
    node = context.graph.add_node(context.args.name)
    context.emit(f"Node {node.name!r} added at index {node.index}")
    _save_edit(context)


def _node_pair_args(parser: argparse.ArgumentParser) -> None:
    _edit_args(parser)
    parser.add_argument("source", help="Name of the source node")
    parser.add_argument("destination", help="Name of the destination node")


def _add_edge_args(parser: argparse.ArgumentParser) -> None:
    _node_pair_args(parser)
    parser.add_argument("--name", help="Edge name (default: v<edge count>)")


def _run_add_edge(context: CommandContext) -> None:
    graph = context.graph
    assert graph is not None
    source = _resolve_node(graph, context.args.source)
    destination = _resolve_node(graph, context.args.destination)
    edge = graph.add_edge(source.index, destination.index, context.args.name)
    context.emit(f"Edge {edge} added")
    _save_edit(context)


def _run_remove_edge(context: CommandContext) -> None:
    graph = context.graph
    assert graph is not None
    source = _resolve_node(graph, context.args.source)
    destination = _resolve_node(graph, context.args.destination)
    if not graph.remove_edge(source.index, destination.index):
        raise CommandError(f"No edge from {source.name!r} to {destination.name!r}")
    context.emit(f"Edge {source.name}->{destination.name} removed")
    _save_edit(context)


def _remove_node_args(parser: argparse.ArgumentParser) -> None:
    _edit_args(parser)
    parser.add_argument("name", help="Name of the node to remove")


def _run_remove_node(context: CommandContext) -> None:
    graph = context.graph
    assert graph is not None
    node = _resolve_node(graph, context.args.name)
    name = node.name
    graph.remove_node(node.index)
    context.emit(f"Node {name!r} removed")
    _save_edit(context)


COMMANDS: Dict[str, Command] = {
    command.name: command
    for command in (
        Command("report", "Write connectivity and bridge report", _run_report, _report_args),
        Command("print", "Print nodes and their successors", _run_print, _path_args),
        Command("layout", "Compute a force-directed layout", _run_layout, _layout_args),
        Command("frames", "Compute one layout per animation frame", _run_frames, _frames_args),
        Command("distance", "Hop and weighted distance between nodes", _run_distance, _distance_args),
        Command("save", "Re-save a graph in NEL form", _run_save, _save_args),
        Command(
            "create", "Write an empty named graph", _run_create, _create_args, requires_graph=False
        ),
        Command(
            "add-node", "Append a node and save", _run_add_node, _add_node_args, keeps_direction=True
        ),
        Command(
            "add-edge",
            "Add an edge between named nodes and save",
            _run_add_edge,
            _add_edge_args,
            keeps_direction=True,
        ),
        Command(
            "remove-node",
            "Remove a named node and save",
            _run_remove_node,
            _remove_node_args,
            keeps_direction=True,
        ),
        Command(
            "remove-edge",
            "Remove the first edge between named nodes and save",
            _run_remove_edge,
            _node_pair_args,
            keeps_direction=True,
        ),
    )
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Analyse and lay out NEL graphs")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--oriented",
        action="store_true",
        help="Load edges as directed instead of adding mirror edges",
    )
    subparsers = parser.add_subparsers(dest="command")
    for command in COMMANDS.values():
        sub = subparsers.add_parser(command.name, help=command.help)
        command.configure(sub)
    return parser


def run(argv: Optional[Sequence[str]] = None) -> CommandContext:
    """Parse ``argv``, load the graph and dispatch to the registered command."""

    parser = build_parser()
    raw = list(sys.argv[1:] if argv is None else argv)
    args = parser.parse_args(raw)
    if args.command is None:
        args = parser.parse_args([*raw, "report"])

    _configure_logging(args.log_level)
    command = COMMANDS[args.command]
    context = CommandContext(args=args)

    if command.requires_graph:
        path = _resolve_report_input(args.path) if command.name == "report" else Path(args.path)
        try:
            context.graph = read_graph(path, oriented=args.oriented or command.keeps_direction)
        except (OSError, NelFormatError) as exc:
            logger.error("Could not load graph from %s: %s", path, exc)
            raise SystemExit(1) from exc

    try:
        command.handler(context)
    except (CommandError, GraphIndexError, ValueError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc
    return context


def main(argv: Optional[Sequence[str]] = None) -> None:
    run(argv)


if __name__ == "__main__":
    main(sys.argv[1:])
