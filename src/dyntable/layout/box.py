"""Padding-derived content boxes (CSS box-model insets)."""

from __future__ import annotations

from ..core.geometry import Rect
from ..core.padding import Padding


def content_box(container: Rect, padding: Padding) -> Rect:
    """Inset a container box by a padding.

    The result is moved right by ``left`` and down by ``top``, and shrunk
    by the horizontal and vertical padding totals. Zero padding returns a
    box equal to the container. No clamping is applied.

    Args:
        container: The outer box
        padding: Insets to apply

    Returns:
        The content box inside the container
    """
    return Rect(
        x=container.x + padding.left,
        y=container.y + padding.top,
        width=container.width - padding.left - padding.right,
        height=container.height - padding.top - padding.bottom,
    )


def container_size(content_width: float, content_height: float, padding: Padding) -> tuple[float, float]:
    """Size of the box whose content box has the given size."""
    return (content_width + padding.horizontal, content_height + padding.vertical)
