"""Decode and encode table documents.

Elements are dispatched on their ``type`` field. Each tag has one branch
decoder registered in ``ELEMENT_DECODERS``; a branch either returns a fully
built ``UIElement`` or raises ``DecodingError`` naming the tag. Nothing is
recovered: one bad element fails the whole collection.

Element format:
    {
      "type": "title" | "text" | "image",
      "data": {"text": "..."} | {"url": "..."},
      "style": {
        "padding": {"top": 0, "bottom": 0, "left": 20, "right": 20},
        "size": 24,              # optional
        "weight": "bold",        # optional, normal|bold
        "hexColor": "#336699"    # optional
      }
    }

Collection format:
    [Element, ...]
    # or
    {"type": "collection", "data": [Element, ...], "style": Padding}
"""

from __future__ import annotations

import math
import re
from typing import Any, Callable

from ..core.padding import Padding
from .elements import (
    Collection,
    Element,
    ElementKind,
    FontWeight,
    ImageData,
    ImageStyle,
    TextData,
    TextStyle,
    UIElement,
)

HEX_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")

PADDING_SIDES = ("top", "bottom", "left", "right")

COLLECTION_TYPE = "collection"


class DecodingError(ValueError):
    """Raised when a document does not match the table schema.

    Attributes:
        reason: Human readable description of what was wrong
        tag: The element tag whose branch failed, if one was matched
        index: Position of the failing element within its collection
    """

    def __init__(self, reason: str, tag: str | None = None, index: int | None = None) -> None:
        self.reason = reason
        self.tag = tag
        self.index = index
        message = reason if index is None else f"element {index}: {reason}"
        super().__init__(message)


class _FieldError(Exception):
    """Internal signal from field readers, re-raised as DecodingError by the branch."""


def _require_object(value: Any, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise _FieldError(f"'{path}' must be an object, got {type(value).__name__}")
    return value


def _require_string(obj: dict[str, Any], key: str, path: str) -> str:
    if key not in obj:
        raise _FieldError(f"missing field '{path}.{key}'")
    value = obj[key]
    if not isinstance(value, str):
        raise _FieldError(f"'{path}.{key}' must be a string, got {type(value).__name__}")
    return value


def _parse_padding(value: Any, path: str) -> Padding:
    padding_obj = _require_object(value, path)
    sides = {}
    for side in PADDING_SIDES:
        raw = padding_obj.get(side, 0)
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise _FieldError(f"'{path}.{side}' must be an integer, got {raw!r}")
        if raw < 0:
            raise _FieldError(f"'{path}.{side}' must be non-negative, got {raw}")
        sides[side] = raw
    return Padding(**sides)


def _parse_text_data(value: Any) -> TextData:
    data = _require_object(value, "data")
    return TextData(text=_require_string(data, "text", "data"))


def _parse_image_data(value: Any) -> ImageData:
    data = _require_object(value, "data")
    return ImageData(url=_require_string(data, "url", "data"))


def _parse_text_style(value: Any) -> TextStyle:
    style = _require_object(value, "style")

    padding = Padding()
    if "padding" in style:
        padding = _parse_padding(style["padding"], "style.padding")

    size = style.get("size")
    if size is not None:
        if isinstance(size, bool) or not isinstance(size, (int, float)):
            raise _FieldError(f"'style.size' must be a number, got {size!r}")
        if not math.isfinite(size) or size <= 0:
            raise _FieldError(f"'style.size' must be a finite positive number, got {size}")
        size = float(size)

    weight = style.get("weight")
    if weight is not None:
        try:
            weight = FontWeight(weight)
        except ValueError:
            raise _FieldError(
                f"'style.weight' must be one of {[w.value for w in FontWeight]}, got {weight!r}"
            ) from None

    color = style.get("hexColor")
    if color is not None:
        if not isinstance(color, str) or not HEX_COLOR_PATTERN.match(color):
            raise _FieldError(f"'style.hexColor' must look like #RRGGBB, got {color!r}")

    return TextStyle(padding=padding, size=size, weight=weight, color=color)


def _parse_image_style(value: Any) -> ImageStyle:
    style = _require_object(value, "style")
    if "padding" in style:
        return ImageStyle(padding=_parse_padding(style["padding"], "style.padding"))
    return ImageStyle()


def _branch(
    kind: ElementKind,
    parse_data: Callable[[Any], Any],
    parse_style: Callable[[Any], Any],
) -> Callable[[dict[str, Any]], UIElement]:
    """Build the decoder for one tag from its data and style parsers."""

    def decode(obj: dict[str, Any]) -> UIElement:
        try:
            if "data" not in obj:
                raise _FieldError("missing field 'data'")
            if "style" not in obj:
                raise _FieldError("missing field 'style'")
            data = parse_data(obj["data"])
            style = parse_style(obj["style"])
        except _FieldError as e:
            raise DecodingError(f"invalid '{kind.value}' element: {e}", tag=kind.value) from None
        return UIElement(kind, Element(data, style))

    return decode


# Registry of branch decoders keyed by the literal tag
ELEMENT_DECODERS: dict[str, Callable[[dict[str, Any]], UIElement]] = {
    ElementKind.TITLE.value: _branch(ElementKind.TITLE, _parse_text_data, _parse_text_style),
    ElementKind.TEXT.value: _branch(ElementKind.TEXT, _parse_text_data, _parse_text_style),
    ElementKind.IMAGE.value: _branch(ElementKind.IMAGE, _parse_image_data, _parse_image_style),
}


def decode_element(obj: Any) -> UIElement:
    """Decode one tagged element.

    Args:
        obj: Parsed JSON object with ``type``, ``data`` and ``style`` fields

    Returns:
        The UIElement variant selected by ``type``

    Raises:
        DecodingError: If the tag is missing or unknown, or the branch's
            data/style payload is malformed
    """
    if not isinstance(obj, dict):
        raise DecodingError(f"element must be an object, got {type(obj).__name__}")

    if "type" not in obj:
        raise DecodingError("unknown element type: missing 'type' field")

    tag = obj["type"]
    decoder = ELEMENT_DECODERS.get(tag) if isinstance(tag, str) else None
    if decoder is None:
        raise DecodingError(f"unknown element type: {tag!r}")

    return decoder(obj)


def _decode_elements(items: Any) -> tuple[UIElement, ...]:
    if not isinstance(items, list):
        raise DecodingError(f"collection data must be an array, got {type(items).__name__}")

    elements = []
    for index, item in enumerate(items):
        try:
            elements.append(decode_element(item))
        except DecodingError as e:
            raise DecodingError(e.reason, tag=e.tag, index=index) from e
    return tuple(elements)


def _collection_padding(obj: dict[str, Any]) -> Padding:
    if "padding" in obj:
        value, path = obj["padding"], "padding"
    elif "style" in obj:
        style = obj["style"]
        if isinstance(style, dict) and "padding" in style:
            value, path = style["padding"], "style.padding"
        else:
            value, path = style, "style"
    else:
        return Padding()

    try:
        return _parse_padding(value, path)
    except _FieldError as e:
        raise DecodingError(f"invalid '{COLLECTION_TYPE}': {e}", tag=COLLECTION_TYPE) from None


def decode_collection(obj: Any) -> Collection:
    """Decode a whole table document.

    Args:
        obj: Either a list of elements, or a collection object with
            ``data`` (the elements) and ``style``/``padding`` (outer padding)

    Returns:
        Collection with every element decoded

    Raises:
        DecodingError: If the container or any element is malformed. The
            error's ``index`` identifies the first failing element.
    """
    if isinstance(obj, list):
        return Collection(elements=_decode_elements(obj))

    if not isinstance(obj, dict):
        raise DecodingError(
            f"document must be an array or a '{COLLECTION_TYPE}' object, got {type(obj).__name__}"
        )

    tag = obj.get("type", COLLECTION_TYPE)
    if tag != COLLECTION_TYPE:
        raise DecodingError(f"unknown collection type: {tag!r}")

    if "data" not in obj:
        raise DecodingError(f"invalid '{COLLECTION_TYPE}': missing field 'data'", tag=COLLECTION_TYPE)

    padding = _collection_padding(obj)
    return Collection(elements=_decode_elements(obj["data"]), padding=padding)


def _encode_padding(padding: Padding) -> dict[str, int]:
    return {side: getattr(padding, side) for side in PADDING_SIDES}


def encode_element(element: UIElement) -> dict[str, Any]:
    """Encode an element back into its JSON object form.

    Unset optional style fields are omitted, so decoding the result gives
    back an equal element.
    """
    style: dict[str, Any] = {"padding": _encode_padding(element.padding)}

    if element.kind.is_text_like:
        data = {"text": element.data.text}
        text_style: TextStyle = element.style
        if text_style.size is not None:
            style["size"] = text_style.size
        if text_style.weight is not None:
            style["weight"] = text_style.weight.value
        if text_style.color is not None:
            style["hexColor"] = text_style.color
    else:
        data = {"url": element.data.url}

    return {"type": element.kind.value, "data": data, "style": style}


def encode_collection(collection: Collection) -> dict[str, Any]:
    """Encode a collection in its object form."""
    return {
        "type": COLLECTION_TYPE,
        "data": [encode_element(element) for element in collection],
        "style": _encode_padding(collection.padding),
    }
