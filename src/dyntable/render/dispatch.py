"""Select a cell renderer by element tag."""

from __future__ import annotations

from ..schema.elements import ElementKind, UIElement
from ..theme.theme import Theme
from .base import CellRenderer, RenderedCell
from .label import LabelRenderer
from .placeholder import UnsupportedRenderer

# Registry of renderers by element tag
RENDERER_REGISTRY: dict[ElementKind, type[CellRenderer]] = {
    ElementKind.TITLE: LabelRenderer,
    ElementKind.TEXT: LabelRenderer,
    ElementKind.IMAGE: UnsupportedRenderer,
}


class RendererDispatch:
    """Holds one renderer instance per registered renderer class."""

    def __init__(self, registry: dict[ElementKind, type[CellRenderer]] | None = None) -> None:
        self._registry = dict(RENDERER_REGISTRY if registry is None else registry)
        self._instances: dict[type[CellRenderer], CellRenderer] = {}

    def renderer_for(self, kind: ElementKind) -> CellRenderer:
        """Return the renderer for a tag, falling back to the placeholder."""
        renderer_class = self._registry.get(kind, UnsupportedRenderer)
        if renderer_class not in self._instances:
            self._instances[renderer_class] = renderer_class()
        return self._instances[renderer_class]

    def render(self, element: UIElement, width: int, theme: Theme) -> RenderedCell:
        return self.renderer_for(element.kind).render(element, width, theme)
