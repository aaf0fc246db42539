"""Directed weighted graph stored as a dense, index-addressed node arena."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field, replace
from typing import Iterator, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

DEFAULT_GRAPH_NAME = "G"


class GraphIndexError(IndexError):
    """Raised when a node index lies outside ``[0, len(graph))``."""


@dataclass(frozen=True)
class EdgeDefinition:
    """Oriented edge owned by the outgoing list of its source node."""

    source_index: int
    destination_index: int
    name: str
    weight: float = 1.0

    def reversed(self) -> "EdgeDefinition":
        return replace(
            self,
            source_index=self.destination_index,
            destination_index=self.source_index,
        )

    def __str__(self) -> str:
        return f"{self.name}: {self.source_index}-{self.destination_index}"


@dataclass(eq=False)
class GraphNode:
    name: str
    index: int = -1
    outgoing_edges: List[EdgeDefinition] = field(default_factory=list)
    graph: Optional["Graph"] = field(default=None, repr=False)

    @property
    def incoming_edges(self) -> Iterator[EdgeDefinition]:
        """Yield, for every node of the parent graph, its first edge targeting ``self``."""

        if self.graph is None:
            return
        for node in self.graph.nodes:
            for edge in node.outgoing_edges:
                if edge.destination_index == self.index:
                    yield edge
                    break

    def __str__(self) -> str:
        targets = []
        for edge in self.outgoing_edges:
            if self.graph is not None and 0 <= edge.destination_index < len(self.graph):
                targets.append(self.graph[edge.destination_index].name)
            else:
                targets.append("")
        return f"{self.name}: [{','.join(targets)}]"


class Graph:
    """Ordered sequence of nodes; a node's position in it is its index.

    Indices are positional, not identities: removing a node renumbers every
    later node and every edge endpoint that pointed past it.
    """

    def __init__(self, nodes: Sequence[GraphNode] = (), name: str = DEFAULT_GRAPH_NAME):
        self.name = name
        self._nodes: List[GraphNode] = []
        for node in nodes:
            self._attach(node)

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> GraphNode:
        return self._nodes[index]

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(name={self.name!r}, nodes={len(self._nodes)}, edges={self.edge_count})"

    @property
    def nodes(self) -> Tuple[GraphNode, ...]:
        return tuple(self._nodes)

    @property
    def edges(self) -> Iterator[EdgeDefinition]:
        """Every edge of the graph, grouped by source node in index order."""

        for node in self._nodes:
            yield from node.outgoing_edges

    @property
    def edge_count(self) -> int:
        return sum(len(node.outgoing_edges) for node in self._nodes)

    def _attach(self, node: GraphNode) -> GraphNode:
        node.index = len(self._nodes)
        node.graph = self
        self._nodes.append(node)
        return node

    def _check_edge(self, edge: EdgeDefinition) -> None:
        count = len(self._nodes)
        if not 0 <= edge.source_index < count or not 0 <= edge.destination_index < count:
            raise GraphIndexError(
                f"edge {edge} references a node outside [0, {count})"
            )
        if edge.weight < 0:
            raise ValueError(f"edge {edge} has negative weight {edge.weight}")

    def check_index(self, index: int) -> None:
        if not 0 <= index < len(self._nodes):
            raise GraphIndexError(f"node index {index} outside [0, {len(self._nodes)})")

    def add_node(self, name: str) -> GraphNode:
        return self._attach(GraphNode(name))

    def add_edge(
        self,
        source: int,
        destination: int,
        name: Optional[str] = None,
        weight: float = 1.0,
    ) -> EdgeDefinition:
        if not name:
            name = f"v{self.edge_count}"
        edge = EdgeDefinition(source, destination, name, float(weight))
        self.add_edge_definition(edge)
        return edge

    def add_edge_definition(self, edge: EdgeDefinition) -> None:
        """Append ``edge`` to the end of its source node's outgoing list."""

        self._check_edge(edge)
        self._nodes[edge.source_index].outgoing_edges.append(edge)

    def remove_edge(self, source: int, destination: int) -> bool:
        """Remove the first edge ``source -> destination``; ``False`` when none exists."""

        if not 0 <= source < len(self._nodes):
            return False
        outgoing = self._nodes[source].outgoing_edges
        for position, edge in enumerate(outgoing):
            if edge.destination_index == destination:
                del outgoing[position]
                return True
        return False

    def remove_node(self, index: int) -> bool:
        """Remove node ``index`` and renumber everything after it in one pass."""

        if not 0 <= index < len(self._nodes):
            return False

        removed = self._nodes[index]
        for node in self._nodes:
            kept: List[EdgeDefinition] = []
            for edge in node.outgoing_edges:
                if edge.destination_index == index:
                    continue
                source = edge.source_index - 1 if edge.source_index > index else edge.source_index
                destination = (
                    edge.destination_index - 1
                    if edge.destination_index > index
                    else edge.destination_index
                )
                if (source, destination) != (edge.source_index, edge.destination_index):
                    edge = replace(edge, source_index=source, destination_index=destination)
                kept.append(edge)
            node.outgoing_edges[:] = kept
            if node.index > index:
                node.index -= 1

        del self._nodes[index]
        removed.graph = None
        removed.index = -1
        logger.debug("Removed node %r; graph now has %d node(s)", removed.name, len(self._nodes))
        return True

    def find_node(self, name: str, *, ignore_case: bool = False) -> Optional[GraphNode]:
        wanted = name.casefold() if ignore_case else name
        for node in self._nodes:
            candidate = node.name.casefold() if ignore_case else node.name
            if candidate == wanted:
                return node
        return None

    def copy(self) -> "Graph":
        clone = Graph(name=self.name)
        for node in self._nodes:
            clone._attach(GraphNode(node.name, outgoing_edges=copy.copy(node.outgoing_edges)))
        return clone


__all__ = [
    "DEFAULT_GRAPH_NAME",
    "EdgeDefinition",
    "Graph",
    "GraphIndexError",
    "GraphNode",
]
