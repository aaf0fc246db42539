"""Layout façade: force simulation followed by pixel scaling."""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from ..graph import Graph
from .config import get_layout_options, set_layout_options
from .force import compute_unscaled_layout, initial_circle, iter_unscaled_layouts
from .model import (
    DegenerateLayoutError,
    GraphLayout,
    ImageSize,
    IntPoint,
    LayoutMismatchError,
    LayoutOptions,
)
from .scaling import default_padding, scale_positions

logger = logging.getLogger(__name__)


def default_layout(
    graph: Graph,
    image_size: ImageSize,
    iterations: Optional[int] = None,
    options: Optional[LayoutOptions] = None,
) -> GraphLayout:
    """Simulate, pad by ``options.padding_fraction`` and scale into ``image_size``."""

    options = options or get_layout_options()
    steps = options.iterations if iterations is None else iterations
    unscaled = compute_unscaled_layout(graph, steps)
    padding = default_padding(image_size, options.padding_fraction)
    positions = scale_positions(unscaled, image_size, padding, degenerate=options.degenerate)
    logger.info(
        "Scaled layout of graph %r into %dx%d with padding %s",
        graph.name,
        image_size[0],
        image_size[1],
        padding,
    )
    return GraphLayout(tuple(positions), graph, (int(image_size[0]), int(image_size[1])))


def layout_frames(
    graph: Graph,
    image_size: ImageSize,
    frames: int,
    options: Optional[LayoutOptions] = None,
) -> Iterator[GraphLayout]:
    """Yield one layout per frame ``1 .. frames - 1``, frame ``i`` simulated for ``i`` iterations.

    Every frame is an independent run, so later frames are not continuations
    of earlier ones: the cooling schedule depends on the iteration count.
    """

    for frame in range(1, frames):
        logger.debug("Computing animation frame %d/%d", frame, frames - 1)
        yield default_layout(graph, image_size, iterations=frame, options=options)


__all__ = [
    "DegenerateLayoutError",
    "GraphLayout",
    "ImageSize",
    "IntPoint",
    "LayoutMismatchError",
    "LayoutOptions",
    "compute_unscaled_layout",
    "default_layout",
    "default_padding",
    "get_layout_options",
    "initial_circle",
    "iter_unscaled_layouts",
    "layout_frames",
    "scale_positions",
    "set_layout_options",
]
