"""Four-sided insets."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Padding:
    """Insets applied between a container box and its content.

    Attributes:
        top: Inset from the top edge
        bottom: Inset from the bottom edge
        left: Inset from the left edge
        right: Inset from the right edge
    """

    top: int = 0
    bottom: int = 0
    left: int = 0
    right: int = 0

    def __post_init__(self) -> None:
        for side in ("top", "bottom", "left", "right"):
            value = getattr(self, side)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Padding.{side} must be an int, got {value!r}")
            if value < 0:
                raise ValueError(f"Padding.{side} must be non-negative, got {value}")

    @property
    def horizontal(self) -> int:
        """Total of the left and right insets."""
        return self.left + self.right

    @property
    def vertical(self) -> int:
        """Total of the top and bottom insets."""
        return self.top + self.bottom

    @classmethod
    def uniform(cls, inset: int) -> Padding:
        """Create padding with the same inset on every side."""
        return cls(top=inset, bottom=inset, left=inset, right=inset)
