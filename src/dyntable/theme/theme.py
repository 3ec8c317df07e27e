"""Role-keyed default styles and per-element style fallback."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..schema.elements import ElementKind, FontWeight, TextStyle, UIElement

DEFAULT_COLOR = "#000000"


@dataclass(frozen=True)
class RoleStyle:
    """Default text attributes for one role (text or title)."""

    size: float
    weight: FontWeight = FontWeight.NORMAL
    color: str = DEFAULT_COLOR


@dataclass(frozen=True)
class ResolvedTextStyle:
    """Concrete attributes used to draw a label, after fallback."""

    size: float
    weight: FontWeight
    color: str


@dataclass(frozen=True)
class Theme:
    """A table of default styles keyed by element role.

    Attributes:
        name: Theme identifier
        roles: Default style for each text-like element kind
        background: Background color of the table as ``#RRGGBB``
    """

    name: str
    roles: dict[ElementKind, RoleStyle] = field(default_factory=dict)
    background: str = "#FFFFFF"

    def __getitem__(self, role: ElementKind) -> RoleStyle:
        try:
            return self.roles[role]
        except KeyError:
            raise KeyError(f"Theme '{self.name}' has no style for role '{role.value}'") from None

    @classmethod
    def default(cls) -> Theme:
        """The built-in theme: 10pt text, 16pt titles."""
        return cls(
            name="default",
            roles={
                ElementKind.TEXT: RoleStyle(size=10),
                ElementKind.TITLE: RoleStyle(size=16),
            },
        )


def _text_style(element: UIElement) -> TextStyle:
    if not element.kind.is_text_like:
        raise ValueError(f"'{element.kind.value}' elements have no text style")
    return element.style


def effective_size(element: UIElement, theme: Theme) -> float:
    """Font size for an element: its own override, else the theme default for its role."""
    style = _text_style(element)
    if style.size is not None:
        return style.size
    return theme[element.kind].size


def resolve_text_style(element: UIElement, theme: Theme) -> ResolvedTextStyle:
    """Resolve size, weight and color with the same element-over-theme fallback."""
    style = _text_style(element)
    role = theme[element.kind]
    return ResolvedTextStyle(
        size=effective_size(element, theme),
        weight=style.weight if style.weight is not None else role.weight,
        color=style.color if style.color is not None else role.color,
    )
