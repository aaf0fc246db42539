"""Fruchterman-Reingold style force simulation producing unscaled positions."""

from __future__ import annotations

import logging
import math
from typing import Iterator, Tuple

import numpy as np

from ..graph import Graph

logger = logging.getLogger(__name__)


def initial_circle(count: int) -> np.ndarray:
    """Place node ``i`` at ``(N sin a_i, N cos a_i)`` with ``a_i = 2*pi*i/N``."""

    if count <= 0:
        return np.zeros((0, 2), dtype=float)
    angles = np.arange(count, dtype=float) * (2.0 * math.pi / count)
    return np.column_stack((count * np.sin(angles), count * np.cos(angles)))


def _edge_arrays(graph: Graph) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    edges = list(graph.edges)
    sources = np.array([edge.source_index for edge in edges], dtype=int)
    destinations = np.array([edge.destination_index for edge in edges], dtype=int)
    weights = np.array([edge.weight for edge in edges], dtype=float)
    return sources, destinations, weights


def _repulsion(positions: np.ndarray, k2: float) -> np.ndarray:
    # Pairwise (pos[n1] - pos[n2]) * k^2 / |pos[n1] - pos[n2]|^2, summed over n2 != n1.
    deltas = positions[:, None, :] - positions[None, :, :]
    dist2 = np.einsum("ijk,ijk->ij", deltas, deltas)
    coefficients = np.zeros_like(dist2)
    np.divide(k2, dist2, out=coefficients, where=dist2 > 0.0)
    return np.einsum("ij,ijk->ik", coefficients, deltas)


def iter_unscaled_layouts(graph: Graph, iterations: int) -> Iterator[np.ndarray]:
    """Run the simulation and yield a copy of the positions after every iteration.

    Each iteration applies inverse-square repulsion between every ordered pair
    of nodes, weighted spring attraction along every edge, and then clamps
    each node's displacement to the current temperature
    ``(1 - i / iterations) ** 2``.
    """

    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")

    count = len(graph)
    positions = initial_circle(count)
    if count == 0:
        return

    area = float(count)
    k2 = area / count
    k = math.sqrt(k2)
    sources, destinations, weights = _edge_arrays(graph)

    for iteration in range(iterations):
        temperature = (1.0 - iteration / iterations) ** 2

        displacements = _repulsion(positions, k2)

        if sources.size:
            distance = positions[sources] - positions[destinations]
            lengths = np.linalg.norm(distance, axis=1)
            pull = distance * (lengths / k * weights)[:, None]
            np.subtract.at(displacements, sources, pull)
            np.add.at(displacements, destinations, pull)

        magnitudes = np.linalg.norm(displacements, axis=1)
        hot = magnitudes > temperature
        displacements[hot] *= (temperature / magnitudes[hot])[:, None]
        positions = positions + displacements

        logger.debug(
            "Layout iteration %d/%d temperature=%.4f clamped=%d",
            iteration + 1,
            iterations,
            temperature,
            int(hot.sum()),
        )
        yield positions.copy()


def compute_unscaled_layout(graph: Graph, iterations: int) -> np.ndarray:
    """Return the ``(N, 2)`` positions after ``iterations`` simulation steps.

    Zero iterations returns the initial circle of radius ``N`` unchanged.
    """

    positions = initial_circle(len(graph))
    for positions in iter_unscaled_layouts(graph, iterations):
        pass
    logger.info(
        "Computed unscaled layout for %d node(s) after %d iteration(s)", len(graph), iterations
    )
    return positions


__all__ = ["compute_unscaled_layout", "initial_circle", "iter_unscaled_layouts"]
