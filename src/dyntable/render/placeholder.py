"""Placeholder for element kinds that have no renderer."""

from __future__ import annotations

import logging

from PIL import Image

from ..core.geometry import Rect
from ..layout.box import content_box
from ..schema.elements import UIElement
from ..theme.theme import Theme
from .base import CellRenderer, RenderedCell, RenderOutcome

logger = logging.getLogger(__name__)

# Content height of an empty placeholder row
PLACEHOLDER_HEIGHT = 44


class UnsupportedRenderer(CellRenderer):
    """Logs the element and returns an empty row marked UNSUPPORTED."""

    def render(self, element: UIElement, width: int, theme: Theme) -> RenderedCell:
        logger.warning(
            "No renderer for '%s' element %s; showing empty placeholder",
            element.kind.value,
            element.data,
        )
        height = PLACEHOLDER_HEIGHT + element.padding.vertical
        image = Image.new("RGB", (max(width, 1), height), theme.background)
        return RenderedCell(
            element=element,
            outcome=RenderOutcome.UNSUPPORTED,
            image=image,
            content=content_box(Rect(0, 0, width, height), element.padding),
        )
