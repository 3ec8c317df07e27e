"""Vertical stacking of rows inside a padded table container."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ..core.geometry import Rect
from ..core.padding import Padding
from .box import content_box


def table_height(padding: Padding, heights: Sequence[float]) -> float:
    """Total container height for rows of the given heights."""
    return float(np.sum(np.asarray(heights, dtype=np.float64))) + padding.vertical


def stack_rows(container: Rect, padding: Padding, heights: Sequence[float]) -> list[Rect]:
    """Place rows top to bottom inside the container's content box.

    Every row spans the full width of the content box. Rows are not clipped
    when they overflow the container.

    Args:
        container: The table's outer box
        padding: The table's own padding
        heights: Height of each row, in order

    Returns:
        One Rect per row
    """
    inner = content_box(container, padding)
    heights_arr = np.asarray(heights, dtype=np.float64)
    if heights_arr.size == 0:
        return []

    # Top edge of each row is the running sum of the rows above it
    offsets = np.concatenate(([0.0], np.cumsum(heights_arr)[:-1]))
    return [
        Rect(inner.x, inner.y + float(offset), inner.width, float(height))
        for offset, height in zip(offsets, heights_arr)
    ]
