"""Core value types shared by layout and rendering."""

from .padding import Padding
from .geometry import Rect

__all__ = ["Padding", "Rect"]
