"""Table controller: owns the decoded collection and its rendered rows."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from PIL import Image

from .render.base import RenderedCell
from .render.table import TableRenderer
from .schema.decoder import DecodingError, decode_collection
from .schema.elements import Collection
from .schema.loader import DocumentLoader, parse_json
from .theme.theme import Theme

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 375


class TableController:
    """Holds one immutable Collection and the rows rendered from it.

    The collection starts empty. Each successful reload replaces it
    wholesale and re-renders every row. A failed reload is logged and leaves
    the previous collection and rows in place.

    Example:
        controller = TableController(width=320)
        controller.reload('[{"type": "title", "data": {"text": "Hello!"}, "style": {}}]')
        for index in range(controller.number_of_items()):
            cell = controller.cell_for_item(index)
    """

    def __init__(
        self,
        theme: Theme | None = None,
        width: int = DEFAULT_WIDTH,
        renderer: TableRenderer | None = None,
    ) -> None:
        self.width = width
        self._renderer = renderer or TableRenderer(theme)
        self._collection = Collection()
        self._cells: list[RenderedCell] = []

    @property
    def collection(self) -> Collection:
        return self._collection

    @property
    def cells(self) -> list[RenderedCell]:
        return list(self._cells)

    @property
    def theme(self) -> Theme:
        return self._renderer.theme

    def set_theme(self, theme: Theme) -> None:
        """Switch theme and rebuild every row."""
        self._renderer.theme = theme
        self._rebuild()

    def reload(self, document: str | bytes | Any) -> bool:
        """Decode a document and, if valid, make it the current collection.

        Args:
            document: JSON text, or an already parsed JSON value

        Returns:
            True if the collection was replaced, False if decoding failed
        """
        try:
            if isinstance(document, (str, bytes)):
                document = parse_json(document)
            collection = decode_collection(document)
        except DecodingError as e:
            logger.error("Failed to decode table document: %s", e)
            return False

        self.set_collection(collection)
        return True

    def reload_from_path(self, path: str | Path, loader: DocumentLoader | None = None) -> bool:
        """Load a document file and reload from it.

        A missing file or an invalid document is logged and leaves the
        current collection in place, as in reload().

        Returns:
            True if the collection was replaced
        """
        loader = loader or DocumentLoader()
        try:
            collection = loader.load(path)
        except FileNotFoundError as e:
            logger.error("Table document not found: %s", e)
            return False
        except DecodingError as e:
            logger.error("Failed to decode table document %s: %s", path, e)
            return False

        self.set_collection(collection)
        return True

    def set_collection(self, collection: Collection) -> None:
        """Replace the collection and rebuild every row."""
        self._collection = collection
        self._rebuild()
        logger.info("Loaded %d rows", len(collection))

    def _rebuild(self) -> None:
        self._cells = self._renderer.render(self._collection, self.width)
        unsupported = sum(1 for cell in self._cells if not cell.supported)
        if unsupported:
            logger.info("%d of %d rows use an unsupported placeholder", unsupported, len(self._cells))

    def number_of_items(self) -> int:
        return len(self._cells)

    def cell_for_item(self, index: int) -> RenderedCell:
        return self._cells[index]

    def snapshot(self) -> Image.Image:
        """Composite all current rows into one image."""
        return self._renderer.compose(self._cells, self._collection.padding, self.width)
