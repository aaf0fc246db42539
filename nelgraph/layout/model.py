"""Core data structures for the layout pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Tuple

from ..graph import Graph, GraphNode

ImageSize = Tuple[int, int]
IntPoint = Tuple[int, int]

DEGENERATE_POLICIES = ("center", "error")


class LayoutMismatchError(ValueError):
    """Raised when a layout's position count differs from the graph's node count."""


class DegenerateLayoutError(ValueError):
    """Raised when positions have zero extent on an axis and the policy is ``"error"``."""


@dataclass
class LayoutOptions:
    """Layout façade options."""

    iterations: int = 1
    padding_fraction: float = 0.125
    degenerate: str = "center"

    def __post_init__(self) -> None:
        if self.iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {self.iterations}")
        if not 0 <= self.padding_fraction < 0.5:
            raise ValueError(f"padding_fraction must be in [0, 0.5), got {self.padding_fraction}")
        if self.degenerate not in DEGENERATE_POLICIES:
            raise ValueError(
                f"degenerate must be one of {', '.join(DEGENERATE_POLICIES)}, got {self.degenerate!r}"
            )


@dataclass(frozen=True)
class GraphLayout:
    """Pixel positions for every node of ``graph``, indexed like its nodes.

    Any later mutation of ``graph`` may shift indices and makes the layout stale.
    """

    positions: Tuple[IntPoint, ...]
    graph: Graph = field(repr=False, compare=False)
    image_size: ImageSize

    def __post_init__(self) -> None:
        object.__setattr__(self, "positions", tuple((int(x), int(y)) for x, y in self.positions))
        if len(self.positions) != len(self.graph):
            raise LayoutMismatchError(
                f"layout has {len(self.positions)} position(s) but graph {self.graph.name!r} "
                f"has {len(self.graph)} node(s)"
            )

    def __len__(self) -> int:
        return len(self.positions)

    def __getitem__(self, index: int) -> IntPoint:
        return self.positions[index]

    def items(self) -> Iterator[Tuple[GraphNode, IntPoint]]:
        return zip(self.graph.nodes, self.positions)


__all__ = [
    "DEGENERATE_POLICIES",
    "DegenerateLayoutError",
    "GraphLayout",
    "ImageSize",
    "IntPoint",
    "LayoutMismatchError",
    "LayoutOptions",
]
