from __future__ import annotations

import logging
from typing import Iterator, List

from .connectivity import group_count
from .graph import EdgeDefinition, Graph

logger = logging.getLogger(__name__)


def find_bridges(graph: Graph) -> Iterator[EdgeDefinition]:
    """Yield every edge whose removal raises the connectivity group count.

    Each candidate is removed, the groups are recounted and the edge is put
    back at the end of its source node's outgoing list, so the graph holds
    the same edges afterwards but per-node edge order may differ. For a
    reciprocal pair only the direction that cuts forward reachability from
    the scan root is reported. Runs in O(E * (V + E)).
    """

    edges: List[EdgeDefinition] = list(graph.edges)
    baseline = group_count(graph)
    logger.info("Testing %d edge(s) for bridges (baseline groups=%d)", len(edges), baseline)

    for edge in edges:
        graph.remove_edge(edge.source_index, edge.destination_index)
        try:
            groups = group_count(graph)
        finally:
            graph.add_edge_definition(edge)
        logger.debug("Candidate %s -> groups=%d", edge, groups)
        if groups > baseline:
            yield edge


__all__ = ["find_bridges"]
