"""Table schema: typed elements and the tagged-union decoder."""

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
from .decoder import (
    DecodingError,
    decode_collection,
    decode_element,
    encode_collection,
    encode_element,
)
from .loader import DocumentLoader, parse_json

__all__ = [
    "Collection",
    "DecodingError",
    "DocumentLoader",
    "Element",
    "ElementKind",
    "FontWeight",
    "ImageData",
    "ImageStyle",
    "TextData",
    "TextStyle",
    "UIElement",
    "decode_collection",
    "decode_element",
    "encode_collection",
    "encode_element",
    "parse_json",
]
