"""PyQt6 viewer listing the rendered rows of a table document."""

from __future__ import annotations

import logging
import sys
from typing import Callable

import numpy as np
from PIL import Image
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QImage, QPixmap
from PyQt6.QtWidgets import (
    QApplication,
    QComboBox,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QSplitter,
    QVBoxLayout,
    QWidget,
)

from ..controller import TableController
from ..schema.decoder import DecodingError
from ..schema.elements import Collection
from ..theme.theme import Theme

logger = logging.getLogger(__name__)

DocumentFactory = Callable[[], Collection]


def image_to_pixmap(image: Image.Image) -> QPixmap:
    """Convert a Pillow image to a QPixmap."""
    arr = np.ascontiguousarray(np.array(image.convert("RGB"), dtype=np.uint8))
    height, width, _ = arr.shape
    qimage = QImage(arr.data, width, height, 3 * width, QImage.Format.Format_RGB888)
    # QImage does not own arr's buffer
    return QPixmap.fromImage(qimage.copy())


class ViewerWindow(QMainWindow):
    """Main viewer window with document selection and the row list."""

    def __init__(
        self,
        documents: dict[str, DocumentFactory],
        default_document: str | None = None,
        theme: Theme | None = None,
        width: int = 375,
    ) -> None:
        super().__init__()
        self._documents = documents
        self._document_names = list(documents.keys())
        self._controller = TableController(theme=theme, width=width)

        self.setWindowTitle("Dynamic Table Viewer")
        self.resize(width + 320, 800)

        self._setup_ui()

        initial_index = 0
        if default_document and default_document in documents:
            initial_index = self._document_names.index(default_document)
        self._document_combo.setCurrentIndex(initial_index)
        self._load_document(initial_index)

    def _setup_ui(self) -> None:
        """Set up the UI layout."""
        central = QWidget()
        self.setCentralWidget(central)

        layout = QHBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)

        splitter = QSplitter(Qt.Orientation.Horizontal)
        layout.addWidget(splitter)

        # Left panel
        left_panel = QWidget()
        left_layout = QVBoxLayout(left_panel)
        left_layout.setContentsMargins(10, 10, 10, 10)

        left_layout.addWidget(QLabel("Document:"))

        self._document_combo = QComboBox()
        self._document_combo.addItems(self._document_names)
        self._document_combo.currentIndexChanged.connect(self._load_document)
        left_layout.addWidget(self._document_combo)

        left_layout.addWidget(QLabel("Elements:"))

        self._element_list = QListWidget()
        left_layout.addWidget(self._element_list)

        self._status_label = QLabel()
        self._status_label.setWordWrap(True)
        left_layout.addWidget(self._status_label)

        left_panel.setMinimumWidth(200)
        left_panel.setMaximumWidth(300)

        # Table rows
        self._row_list = QListWidget()
        self._row_list.setSpacing(0)

        splitter.addWidget(left_panel)
        splitter.addWidget(self._row_list)
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)

    def _load_document(self, index: int) -> None:
        """Load a document by index."""
        if index < 0 or index >= len(self._document_names):
            return

        name = self._document_names[index]
        try:
            collection = self._documents[name]()
        except (FileNotFoundError, DecodingError) as e:
            logger.error("Could not load document '%s': %s", name, e)
            self._status_label.setText(f"Could not load '{name}': {e}")
            return

        self._controller.set_collection(collection)
        self._update_rows()

    def _update_rows(self) -> None:
        """Rebuild both lists from the controller's current rows."""
        self._row_list.clear()
        self._element_list.clear()

        unsupported = 0
        for index in range(self._controller.number_of_items()):
            cell = self._controller.cell_for_item(index)

            row_item = QListWidgetItem(self._row_list)
            row_label = QLabel()
            row_label.setPixmap(image_to_pixmap(cell.image))
            row_item.setSizeHint(row_label.sizeHint())
            self._row_list.setItemWidget(row_item, row_label)

            text = cell.element.kind.value
            if not cell.supported:
                text += " (unsupported)"
                unsupported += 1
            QListWidgetItem(text, self._element_list)

        self._status_label.setText(
            f"{self._controller.number_of_items()} rows, {unsupported} unsupported"
        )


def run_viewer(
    documents: dict[str, DocumentFactory],
    default_document: str | None = None,
    theme: Theme | None = None,
    width: int = 375,
) -> None:
    """Run the Qt viewer application."""
    app = QApplication(sys.argv)
    window = ViewerWindow(documents, default_document, theme=theme, width=width)
    window.show()

    sys.exit(app.exec())
