"""Base classes for cell renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from ..core.geometry import Rect
from ..schema.elements import UIElement
from ..theme.theme import Theme


class RenderOutcome(Enum):
    """How a cell was produced."""

    RENDERED = "rendered"
    UNSUPPORTED = "unsupported"


@dataclass
class RenderedCell:
    """One rendered table row.

    Attributes:
        element: The element the row was built from
        outcome: Whether a real renderer handled the element
        image: Row pixels, as wide as the table's content box
        content: Content box within the row, in row coordinates
    """

    element: UIElement
    outcome: RenderOutcome
    image: Image.Image
    content: Rect

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def supported(self) -> bool:
        return self.outcome is RenderOutcome.RENDERED

    def to_array(self) -> NDArray[np.uint8]:
        """Row pixels as an HxWx3 uint8 array."""
        return np.array(self.image.convert("RGB"))


class CellRenderer(ABC):
    """Turns one element into a row image of a given width."""

    @abstractmethod
    def render(self, element: UIElement, width: int, theme: Theme) -> RenderedCell:
        """Render an element.

        Args:
            element: The element to draw
            width: Row width in pixels
            theme: Theme supplying fallback styles and the background

        Returns:
            The rendered row
        """
        pass
