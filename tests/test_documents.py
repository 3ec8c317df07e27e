"""Tests for all bundled documents - loads and renders each one."""

import tempfile
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from dyntable.controller import TableController
from dyntable.schema import DocumentLoader
from dyntable.theme import ThemeLoader

_loader = DocumentLoader()

# All bundled documents
DOCUMENTS = _loader.available()

THEMES = ["default", "catalog"]


def render_document(name: str, theme_name: str = "default", width: int = 375) -> np.ndarray:
    """Render a bundled document to an image array."""
    controller = TableController(theme=ThemeLoader().load(theme_name), width=width)
    controller.set_collection(_loader.load_named(name))
    return np.array(controller.snapshot())


def test_bundled_documents_found():
    """The sample documents ship with the project."""
    assert {"hello", "product", "themed"} <= set(DOCUMENTS)


@pytest.mark.parametrize("name", DOCUMENTS)
def test_document_loads(name):
    """Test that each document decodes without errors."""
    collection = _loader.load_named(name)
    assert len(collection) > 0, f"Document '{name}' should have at least one element"


@pytest.mark.parametrize("theme_name", THEMES)
@pytest.mark.parametrize("name", DOCUMENTS)
def test_document_renders(name, theme_name):
    """Test that each document renders with each theme."""
    color = render_document(name, theme_name)

    assert color.ndim == 3 and color.shape[2] == 3
    assert color.shape[1] == 375
    assert color.dtype == np.uint8

    # Something other than the flat background was drawn
    assert (color != color[0, 0]).any(), f"Document '{name}' rendered as a blank image"


@pytest.mark.parametrize("name", DOCUMENTS)
def test_document_renders_to_file(name):
    """Test that each document can be saved to a file."""
    color = render_document(name)

    with tempfile.TemporaryDirectory() as tmpdir:
        output_path = Path(tmpdir) / f"{name}.png"
        Image.fromarray(color).save(str(output_path))

        assert output_path.exists()
        assert output_path.stat().st_size > 0

        loaded = Image.open(output_path)
        assert loaded.size == (color.shape[1], color.shape[0])


def test_load_named_missing_document():
    with pytest.raises(FileNotFoundError):
        _loader.load_named("does_not_exist")


def test_yaml_document_matches_schema(tmp_path):
    path = tmp_path / "doc.yaml"
    path.write_text(
        "- type: text\n"
        "  data: {text: From YAML}\n"
        "  style: {padding: {left: 4}}\n"
    )
    collection = DocumentLoader(tmp_path).load_named("doc")
    assert collection[0].data.text == "From YAML"
    assert collection[0].padding.left == 4
