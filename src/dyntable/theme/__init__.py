"""Themes: role-keyed default styles and fallback resolution."""

from .theme import ResolvedTextStyle, RoleStyle, Theme, effective_size, resolve_text_style
from .loader import ThemeLoader

__all__ = [
    "ResolvedTextStyle",
    "RoleStyle",
    "Theme",
    "ThemeLoader",
    "effective_size",
    "resolve_text_style",
]
