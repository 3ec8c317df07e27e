"""Rendering: turn decoded elements into row images."""

from .base import CellRenderer, RenderedCell, RenderOutcome
from .dispatch import RENDERER_REGISTRY, RendererDispatch
from .label import LabelRenderer
from .placeholder import UnsupportedRenderer
from .table import TableRenderer

__all__ = [
    "CellRenderer",
    "LabelRenderer",
    "RENDERER_REGISTRY",
    "RenderedCell",
    "RenderOutcome",
    "RendererDispatch",
    "TableRenderer",
    "UnsupportedRenderer",
]
