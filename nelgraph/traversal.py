"""Depth-first and breadth-first walks over a :class:`~nelgraph.graph.Graph`."""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Iterator, List, MutableSet, Optional

from .graph import EdgeDefinition, Graph, GraphNode

NodePredicate = Callable[[GraphNode], bool]


def depth_first(graph: Graph, start: int, predicate: NodePredicate) -> Iterator[GraphNode]:
    """Yield nodes reachable from ``start`` in pre-order.

    A node is yielded only if ``predicate(node)`` is true; its outgoing edges
    are then followed in list order. There is no built-in visited set: the
    predicate is the cycle guard. Passing a predicate that always returns
    ``True`` on a graph with a cycle never terminates. Use
    :func:`visited_guard` for the usual behaviour.

    The walk keeps its own stack of edge iterators, so path depth is not
    bounded by the interpreter's recursion limit.
    """

    graph.check_index(start)
    return _depth_first(graph, start, predicate)


def _depth_first(graph: Graph, start: int, predicate: NodePredicate) -> Iterator[GraphNode]:
    root = graph[start]
    if not predicate(root):
        return
    yield root
    stack: List[Iterator[EdgeDefinition]] = [iter(root.outgoing_edges)]
    while stack:
        edge = next(stack[-1], None)
        if edge is None:
            stack.pop()
            continue
        node = graph[edge.destination_index]
        if predicate(node):
            yield node
            stack.append(iter(node.outgoing_edges))


def visited_guard(
    visited: Optional[MutableSet[int]] = None,
    accept: Optional[NodePredicate] = None,
) -> NodePredicate:
    """Return a predicate that accepts each node index once.

    ``visited`` is owned by the caller and is updated in place; ``accept``
    optionally filters nodes further before they are marked.
    """

    seen: MutableSet[int] = set() if visited is None else visited

    def predicate(node: GraphNode) -> bool:
        if node.index in seen:
            return False
        if accept is not None and not accept(node):
            return False
        seen.add(node.index)
        return True

    return predicate


def breadth_first(
    graph: Graph, start: int, predicate: Optional[NodePredicate] = None
) -> List[int]:
    """Return hop distances from ``start``; ``-1`` marks nodes never reached.

    ``predicate`` gates expansion only: a rejected node still receives its
    distance but its outgoing edges are not examined.
    """

    graph.check_index(start)
    distances = [-1] * len(graph)
    distances[start] = 0
    frontier: Deque[int] = deque([start])
    while frontier:
        index = frontier.popleft()
        node = graph[index]
        if predicate is not None and not predicate(node):
            continue
        for edge in node.outgoing_edges:
            if distances[edge.destination_index] == -1:
                distances[edge.destination_index] = distances[index] + 1
                frontier.append(edge.destination_index)
    return distances


__all__ = ["NodePredicate", "breadth_first", "depth_first", "visited_guard"]
