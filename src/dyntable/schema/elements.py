"""Typed UI elements described by the table schema.

Every row in a table is a ``UIElement``: a tag (``ElementKind``) plus one
data/style pair whose types must match the tag. Text and title rows carry
``TextData`` and ``TextStyle``; image rows carry ``ImageData`` and
``ImageStyle``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar, Union

from ..core.padding import Padding


class ElementKind(Enum):
    """Discriminator values accepted in the ``type`` field of an element."""

    TITLE = "title"
    TEXT = "text"
    IMAGE = "image"

    @property
    def is_text_like(self) -> bool:
        """True for kinds rendered as a label."""
        return self in (ElementKind.TITLE, ElementKind.TEXT)


class FontWeight(Enum):
    """Font weights a text style may request."""

    NORMAL = "normal"
    BOLD = "bold"


@dataclass(frozen=True)
class TextData:
    text: str


@dataclass(frozen=True)
class ImageData:
    url: str


@dataclass(frozen=True)
class TextStyle:
    """Style of a text or title row.

    Attributes:
        padding: Insets between the row box and the label
        size: Font size override; None falls back to the theme
        weight: Font weight override; None falls back to the theme
        color: Text color as ``#RRGGBB``; None falls back to the theme
    """

    padding: Padding = field(default_factory=Padding)
    size: float | None = None
    weight: FontWeight | None = None
    color: str | None = None


@dataclass(frozen=True)
class ImageStyle:
    padding: Padding = field(default_factory=Padding)


DataT = TypeVar("DataT", TextData, ImageData)
StyleT = TypeVar("StyleT", TextStyle, ImageStyle)

ElementData = Union[TextData, ImageData]
ElementStyle = Union[TextStyle, ImageStyle]


@dataclass(frozen=True)
class Element(Generic[DataT, StyleT]):
    """A data payload paired with the style used to present it."""

    data: DataT
    style: StyleT


# Which data/style types each tag requires
KIND_PAYLOADS: dict[ElementKind, tuple[type, type]] = {
    ElementKind.TITLE: (TextData, TextStyle),
    ElementKind.TEXT: (TextData, TextStyle),
    ElementKind.IMAGE: (ImageData, ImageStyle),
}


@dataclass(frozen=True)
class UIElement:
    """One row of the table: a tag and its matching element payload."""

    kind: ElementKind
    element: Element

    def __post_init__(self) -> None:
        data_type, style_type = KIND_PAYLOADS[self.kind]
        if not isinstance(self.element.data, data_type):
            raise TypeError(
                f"'{self.kind.value}' element requires {data_type.__name__}, "
                f"got {type(self.element.data).__name__}"
            )
        if not isinstance(self.element.style, style_type):
            raise TypeError(
                f"'{self.kind.value}' element requires {style_type.__name__}, "
                f"got {type(self.element.style).__name__}"
            )

    @property
    def data(self) -> ElementData:
        return self.element.data

    @property
    def style(self) -> ElementStyle:
        return self.element.style

    @property
    def padding(self) -> Padding:
        return self.element.style.padding

    @classmethod
    def title(cls, text: str, style: TextStyle | None = None) -> UIElement:
        return cls(ElementKind.TITLE, Element(TextData(text), style or TextStyle()))

    @classmethod
    def text(cls, text: str, style: TextStyle | None = None) -> UIElement:
        return cls(ElementKind.TEXT, Element(TextData(text), style or TextStyle()))

    @classmethod
    def image(cls, url: str, style: ImageStyle | None = None) -> UIElement:
        return cls(ElementKind.IMAGE, Element(ImageData(url), style or ImageStyle()))


@dataclass(frozen=True)
class Collection:
    """An ordered, immutable list of rows plus the container's own padding."""

    elements: tuple[UIElement, ...] = ()
    padding: Padding = field(default_factory=Padding)

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple
        object.__setattr__(self, "elements", tuple(self.elements))

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def __getitem__(self, index: int) -> UIElement:
        return self.elements[index]
