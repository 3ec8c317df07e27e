"""Axis-aligned rectangles in screen coordinates.

The origin is the top-left corner; y grows downward, matching Pillow's
image coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Rect:
    """A box given by its top-left corner and size.

    Width and height may be negative when a box was inset by more than its
    own size. Callers that draw should clamp with ``clamped()``.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    def clamped(self) -> Rect:
        """Return a copy with negative sizes clamped to zero."""
        return Rect(self.x, self.y, max(self.width, 0.0), max(self.height, 0.0))

    def to_array(self) -> NDArray[np.float64]:
        """Return [x, y, width, height] as a numpy array."""
        return np.array([self.x, self.y, self.width, self.height], dtype=np.float64)

    def to_pil_box(self) -> tuple[int, int, int, int]:
        """Return the (left, upper, right, lower) integer box Pillow expects."""
        box = self.clamped()
        return (
            int(round(box.x)),
            int(round(box.y)),
            int(round(box.max_x)),
            int(round(box.max_y)),
        )

    @classmethod
    def from_array(cls, values: NDArray[np.float64]) -> Rect:
        """Build a Rect from an [x, y, width, height] array."""
        x, y, width, height = (float(v) for v in values)
        return cls(x, y, width, height)
