"""Reachability partitioning built on the traversal primitives."""

from __future__ import annotations

from typing import List

from .graph import Graph, GraphNode
from .traversal import breadth_first, depth_first


def connectivity_groups(graph: Graph) -> List[int]:
    """Assign a 1-based group id to every node.

    Indices are scanned in order; every still-unassigned index opens a new
    group and claims whatever it can reach through unassigned nodes. Groups
    follow edge direction, so they are only symmetric when every edge has a
    reciprocal.
    """

    groups = [-1] * len(graph)
    group = 0
    for index in range(len(graph)):
        if groups[index] != -1:
            continue
        group += 1

        def claim(node: GraphNode, group: int = group) -> bool:
            if groups[node.index] == -1:
                groups[node.index] = group
                return True
            return False

        for _ in depth_first(graph, index, claim):
            pass
    return groups


def group_count(graph: Graph) -> int:
    """Largest group id plus one, the figure bridge detection compares."""

    groups = connectivity_groups(graph)
    return max(groups) + 1 if groups else 0


def is_connected(graph: Graph) -> bool:
    """Return ``True`` when every node is forward-reachable from node 0."""

    if len(graph) == 0:
        return True
    return -1 not in breadth_first(graph, 0)


__all__ = ["connectivity_groups", "group_count", "is_connected"]
