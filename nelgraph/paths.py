"""Weighted distances along a first-discovery FIFO frontier."""

from __future__ import annotations

import math
from collections import deque
from typing import Deque, List

from .graph import Graph


def frontier_distances(graph: Graph, start: int) -> List[float]:
    """Return accumulated edge weights from ``start`` in breadth-first discovery order.

    A node's distance is fixed the first time it is discovered and never
    relaxed afterwards. This equals the true shortest path for unit or
    uniform weights, but not in general for arbitrary weights.
    Unreached nodes keep ``math.inf``.
    """

    graph.check_index(start)
    distances = [math.inf] * len(graph)
    distances[start] = 0.0
    frontier: Deque[int] = deque([start])
    while frontier:
        index = frontier.popleft()
        for edge in graph[index].outgoing_edges:
            if distances[edge.destination_index] == math.inf:
                distances[edge.destination_index] = distances[index] + edge.weight
                frontier.append(edge.destination_index)
    return distances


def minimal_distance(graph: Graph, start: int, end: int) -> float:
    graph.check_index(end)
    return frontier_distances(graph, start)[end]


__all__ = ["frontier_distances", "minimal_distance"]
