"""Label renderer shared by text and title rows."""

from __future__ import annotations

import math
from functools import lru_cache

from PIL import Image, ImageColor, ImageDraw, ImageFont

from ..core.geometry import Rect
from ..layout.box import container_size, content_box
from ..schema.elements import FontWeight, UIElement
from ..theme.theme import Theme, resolve_text_style
from .base import CellRenderer, RenderedCell, RenderOutcome

# Bold is drawn as a stroke of the glyph outline in the text color
BOLD_STROKE_WIDTH = 1


@lru_cache(maxsize=32)
def load_font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Pillow's bundled default font at the given pixel size."""
    return ImageFont.load_default(size=size)


def _measure(text: str, font, stroke_width: int) -> tuple[int, int]:
    scratch = ImageDraw.Draw(Image.new("RGB", (1, 1)))
    left, top, right, bottom = scratch.multiline_textbbox(
        (0, 0), text, font=font, stroke_width=stroke_width
    )
    return math.ceil(right), math.ceil(bottom)


class LabelRenderer(CellRenderer):
    """Draws an element's text with its resolved size, weight and color.

    The row is as tall as the text plus vertical padding; the text is drawn
    at the top-left of the padded content box.
    """

    def render(self, element: UIElement, width: int, theme: Theme) -> RenderedCell:
        style = resolve_text_style(element, theme)
        font = load_font(max(1, round(style.size)))
        stroke_width = BOLD_STROKE_WIDTH if style.weight is FontWeight.BOLD else 0
        color = ImageColor.getrgb(style.color)

        text = element.data.text
        _, text_height = _measure(text, font, stroke_width)
        _, row_height = container_size(0, text_height, element.padding)

        image = Image.new("RGB", (max(width, 1), max(int(row_height), 1)), theme.background)
        content = content_box(Rect(0, 0, width, row_height), element.padding)

        draw = ImageDraw.Draw(image)
        draw.multiline_text(
            (content.x, content.y),
            text,
            font=font,
            fill=color,
            stroke_width=stroke_width,
            stroke_fill=color,
        )

        return RenderedCell(
            element=element,
            outcome=RenderOutcome.RENDERED,
            image=image,
            content=content,
        )
