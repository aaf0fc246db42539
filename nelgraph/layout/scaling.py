"""Map unscaled positions into a padded pixel rectangle."""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple, Union

import numpy as np

from .model import DEGENERATE_POLICIES, DegenerateLayoutError, ImageSize, IntPoint

logger = logging.getLogger(__name__)

Positions = Union[np.ndarray, Sequence[Tuple[float, float]]]


def default_padding(image_size: ImageSize, fraction: float = 0.125) -> ImageSize:
    """Padding per axis as a fraction of the image, truncated to whole pixels."""

    width, height = image_size
    return int(width * fraction), int(height * fraction)


def scale_positions(
    positions: Positions,
    image_size: ImageSize,
    padding: ImageSize,
    *,
    degenerate: str = "center",
) -> List[IntPoint]:
    """Fit ``positions`` into ``image_size`` minus ``padding`` on each side.

    Each axis is scaled by ``(size - 2 * padding) / extent``, then the bounding
    box midpoint is moved onto the centre of the padded area, and coordinates
    are truncated toward zero. An axis with zero extent is handled by
    ``degenerate``: ``"center"`` uses scale 1 so the nodes land on the centre
    line, ``"error"`` raises :class:`DegenerateLayoutError`.
    """

    if degenerate not in DEGENERATE_POLICIES:
        raise ValueError(f"unknown degenerate policy {degenerate!r}")

    pts = np.asarray(positions, dtype=float)
    if pts.size == 0:
        return []
    pts = pts.reshape(-1, 2)

    inner = np.array(
        [image_size[0] - 2 * padding[0], image_size[1] - 2 * padding[1]], dtype=int
    )
    lower = pts.min(axis=0)
    upper = pts.max(axis=0)
    extent = upper - lower

    scale = np.ones(2, dtype=float)
    for axis in range(2):
        if extent[axis] > 0.0:
            scale[axis] = inner[axis] / extent[axis]
        elif degenerate == "error":
            raise DegenerateLayoutError(
                f"positions have zero extent on the {'xy'[axis]} axis"
            )
        else:
            logger.debug("Zero extent on %s axis; using unit scale", "xy"[axis])

    middle = (lower * scale + upper * scale) * 0.5
    image_middle = np.array(
        [inner[0] // 2 + padding[0], inner[1] // 2 + padding[1]], dtype=float
    )
    offset = image_middle - middle
    placed = np.trunc(pts * scale + offset).astype(int)
    return [(int(x), int(y)) for x, y in placed]


__all__ = ["Positions", "default_padding", "scale_positions"]
