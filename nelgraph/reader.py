"""Reader for the line-oriented NEL (node / edge / graph) text format."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from .graph import DEFAULT_GRAPH_NAME, EdgeDefinition, Graph

logger = logging.getLogger(__name__)

NODE = "n"
EDGE = "e"
GRAPH = "g"
COMMENT = "#"


class NelFormatError(ValueError):
    """Raised for a malformed or unrecognised line; the whole read is aborted."""

    def __init__(self, line_no: int, message: str):
        super().__init__(f"[line {line_no}] {message}")
        self.line_no = line_no


def _token_type(line: str) -> Optional[str]:
    if not line.strip():
        return None
    return line[0].lower()


def _parse_int(token: str, line_no: int, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise NelFormatError(line_no, f"{what} must be an integer, got {token!r}") from None


def _parse_weight(token: str, line_no: int) -> float:
    try:
        weight = float(token)
    except ValueError:
        raise NelFormatError(line_no, f"edge weight must be a number, got {token!r}") from None
    if math.isnan(weight) or weight < 0:
        raise NelFormatError(line_no, f"edge weight must be non-negative, got {token!r}")
    return weight


def _resolve(rename: Dict[int, int], raw: int, line_no: int) -> int:
    try:
        return rename[raw]
    except KeyError:
        raise NelFormatError(line_no, f"edge references undeclared node {raw}") from None


def load_graph_lines(lines: Iterable[str], oriented: bool = False) -> Graph:
    """Build a graph from NEL ``lines``.

    Raw node indices may be sparse; they are renumbered in order of
    appearance. A ``g`` line names the graph and ends the read. Unless
    ``oriented`` is set, every edge is followed by its mirror edge with the
    same name and weight.
    """

    graph = Graph()
    rename: Dict[int, int] = {}

    for line_no, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")
        kind = _token_type(line)
        if kind is None or kind == COMMENT:
            continue
        tokens: List[str] = line.split()

        if kind == NODE:
            if len(tokens) < 3:
                raise NelFormatError(line_no, "node line needs an index and a name")
            raw = _parse_int(tokens[1], line_no, "node index")
            if raw in rename:
                raise NelFormatError(line_no, f"node {raw} declared twice")
            rename[raw] = len(graph)
            graph.add_node(tokens[2])
        elif kind == EDGE:
            if len(tokens) == 5:
                weight = _parse_weight(tokens[3], line_no)
            elif len(tokens) == 4:
                weight = 1.0
            else:
                raise NelFormatError(
                    line_no, f"edge line needs 3 or 4 fields after the prefix, got {len(tokens) - 1}"
                )
            source = _resolve(rename, _parse_int(tokens[1], line_no, "edge source"), line_no)
            destination = _resolve(rename, _parse_int(tokens[2], line_no, "edge destination"), line_no)
            edge = EdgeDefinition(source, destination, tokens[-1], weight)
            graph.add_edge_definition(edge)
            if not oriented:
                graph.add_edge_definition(edge.reversed())
        elif kind == GRAPH:
            if len(tokens) >= 2:
                graph.name = tokens[1]
            logger.info(
                "Read graph %r: %d node(s), %d edge(s)", graph.name, len(graph), graph.edge_count
            )
            return graph
        else:
            raise NelFormatError(line_no, f"unknown token {tokens[0]!r}")

    graph.name = DEFAULT_GRAPH_NAME
    logger.info(
        "Read unnamed graph: %d node(s), %d edge(s)", len(graph), graph.edge_count
    )
    return graph


def parse_graph(text: str, oriented: bool = False) -> Graph:
    return load_graph_lines(text.splitlines(), oriented=oriented)


def read_graph(path: Union[str, Path], oriented: bool = False) -> Graph:
    logger.info("Reading graph from %s (oriented=%s)", path, oriented)
    with open(path, encoding="utf-8") as fin:
        return load_graph_lines(fin, oriented=oriented)


__all__ = ["NelFormatError", "load_graph_lines", "parse_graph", "read_graph"]
