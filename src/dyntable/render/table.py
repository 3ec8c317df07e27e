"""Render whole collections and composite their rows into one image."""

from __future__ import annotations

import logging
from typing import Sequence

from PIL import Image

from ..core.geometry import Rect
from ..core.padding import Padding
from ..layout.table import stack_rows, table_height
from ..schema.elements import Collection
from ..theme.theme import Theme
from .base import RenderedCell
from .dispatch import RendererDispatch

logger = logging.getLogger(__name__)


class TableRenderer:
    """Renders every row of a collection with a theme."""

    def __init__(self, theme: Theme | None = None, dispatch: RendererDispatch | None = None) -> None:
        self.theme = theme or Theme.default()
        self._dispatch = dispatch or RendererDispatch()

    def render(self, collection: Collection, width: int) -> list[RenderedCell]:
        """Render each element as a row as wide as the table's content box."""
        row_width = max(width - collection.padding.horizontal, 1)
        cells = [self._dispatch.render(element, row_width, self.theme) for element in collection]
        logger.debug("Rendered %d rows at width %d", len(cells), row_width)
        return cells

    def compose(self, cells: Sequence[RenderedCell], padding: Padding, width: int) -> Image.Image:
        """Paste rendered rows top to bottom into one image.

        Args:
            cells: Rows produced by render()
            padding: The table's own padding
            width: Table width in pixels

        Returns:
            RGB image of the whole table
        """
        heights = [cell.height for cell in cells]
        height = int(table_height(padding, heights))
        image = Image.new("RGB", (max(width, 1), max(height, 1)), self.theme.background)

        frames = stack_rows(Rect(0, 0, width, height), padding, heights)
        for cell, frame in zip(cells, frames):
            image.paste(cell.image, (int(frame.x), int(frame.y)))
        return image

    def render_image(self, collection: Collection, width: int) -> Image.Image:
        """Render a collection straight to a single image."""
        return self.compose(self.render(collection, width), collection.padding, width)
