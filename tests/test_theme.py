"""Tests for theme fallback and theme loading."""

import pytest

from dyntable.core import Padding
from dyntable.schema import ElementKind, FontWeight, TextStyle, UIElement
from dyntable.theme import RoleStyle, Theme, ThemeLoader, effective_size, resolve_text_style


@pytest.fixture
def theme():
    return Theme(
        name="test",
        roles={
            ElementKind.TEXT: RoleStyle(size=10),
            ElementKind.TITLE: RoleStyle(size=16, weight=FontWeight.BOLD, color="#222222"),
        },
    )


@pytest.mark.parametrize("kind,expected", [(ElementKind.TEXT, 10), (ElementKind.TITLE, 16)])
def test_effective_size_falls_back_to_role(theme, kind, expected):
    element = UIElement.title("x") if kind is ElementKind.TITLE else UIElement.text("x")
    assert effective_size(element, theme) == expected


def test_effective_size_prefers_override(theme):
    element = UIElement.title("x", TextStyle(size=24))
    assert effective_size(element, theme) == 24


def test_effective_size_rejects_images(theme):
    with pytest.raises(ValueError):
        effective_size(UIElement.image("u"), theme)


def test_resolve_text_style_mixes_overrides_and_defaults(theme):
    element = UIElement.title("x", TextStyle(padding=Padding(left=4), color="#FF0000"))
    resolved = resolve_text_style(element, theme)

    assert resolved.size == 16
    assert resolved.weight is FontWeight.BOLD
    assert resolved.color == "#FF0000"


def test_default_theme_sizes():
    theme = Theme.default()
    assert theme[ElementKind.TEXT].size == 10
    assert theme[ElementKind.TITLE].size == 16


def test_missing_role_lookup():
    with pytest.raises(KeyError, match="title"):
        Theme(name="empty")[ElementKind.TITLE]


def test_load_bundled_themes():
    loader = ThemeLoader()
    default = loader.load("default")
    catalog = loader.load("catalog")

    assert default.name == "default"
    assert default[ElementKind.TITLE].size == 16
    assert catalog[ElementKind.TITLE].weight is FontWeight.BOLD
    assert catalog.background == "#F7F7F2"


def test_loader_caches_by_name(tmp_path):
    (tmp_path / "mine.yaml").write_text(
        "roles:\n  text: {size: 11}\n  title: {size: 18}\n"
    )
    loader = ThemeLoader([tmp_path])

    first = loader.load("mine")
    assert first.name == "mine"
    assert loader.load("mine") is first

    loader.clear_cache()
    assert loader.load("mine") is not first


def test_loader_missing_theme(tmp_path):
    with pytest.raises(FileNotFoundError):
        ThemeLoader([tmp_path]).load("nope")


@pytest.mark.parametrize(
    "yaml_string",
    [
        "roles:\n  text: {size: 10}\n",
        "roles:\n  text: {size: 10}\n  title: {size: 0}\n",
        "roles:\n  text: {size: .nan}\n  title: {size: 16}\n",
        "roles:\n  text: {size: 10}\n  title: {size: .inf}\n",
        "roles:\n  text: {size: 10}\n  title: {size: 16, color: blue}\n",
        "roles:\n  text: {size: 10}\n  title: {size: 16}\n  image: {size: 3}\n",
        "roles:\n  text: {size: 10}\n  title: {size: 16}\n  caption: {size: 3}\n",
        "- not a mapping\n",
    ],
)
def test_invalid_themes(yaml_string):
    with pytest.raises(ValueError):
        ThemeLoader([]).load_string(yaml_string)
