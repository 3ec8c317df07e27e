"""Tests for the table controller's load and reload behavior."""

import json
import logging

import pytest
from PIL import Image

from dyntable.controller import TableController
from dyntable.render import RenderOutcome
from dyntable.schema import ElementKind
from dyntable.theme import ThemeLoader

GOOD = json.dumps([
    {"type": "title", "data": {"text": "Hello!"}, "style": {"padding": {"left": 20, "right": 20}}},
    {"type": "text", "data": {"text": "Product A"}, "style": {}},
])

BAD = json.dumps([
    {"type": "title", "data": {"text": "Hello!"}, "style": {}},
    {"type": "carousel", "data": {}, "style": {}},
])


def test_starts_empty():
    controller = TableController()
    assert controller.number_of_items() == 0
    assert len(controller.collection) == 0


def test_reload_replaces_collection():
    controller = TableController(width=200)

    assert controller.reload(GOOD)
    assert controller.number_of_items() == 2
    assert controller.cell_for_item(0).element.kind is ElementKind.TITLE
    assert controller.cell_for_item(1).element.data.text == "Product A"
    assert controller.cell_for_item(0).image.width == 200


def test_reload_accepts_parsed_and_bytes():
    controller = TableController()
    assert controller.reload(json.loads(GOOD))
    assert controller.reload(GOOD.encode())
    assert controller.number_of_items() == 2


def test_failed_reload_keeps_previous_state(caplog):
    controller = TableController()
    controller.reload(GOOD)
    before = controller.collection

    with caplog.at_level(logging.ERROR, logger="dyntable.controller"):
        assert not controller.reload(BAD)

    assert controller.collection is before
    assert controller.number_of_items() == 2
    assert "carousel" in caplog.text


def test_failed_first_load_stays_empty():
    controller = TableController()
    assert not controller.reload("{not json")
    assert controller.number_of_items() == 0


def test_reload_is_wholesale():
    controller = TableController()
    controller.reload(GOOD)
    controller.reload('[{"type": "image", "data": {"url": "u"}, "style": {}}]')

    assert controller.number_of_items() == 1
    assert controller.cell_for_item(0).outcome is RenderOutcome.UNSUPPORTED


def test_reload_from_path(tmp_path):
    good = tmp_path / "good.json"
    good.write_text(GOOD)
    bad = tmp_path / "bad.json"
    bad.write_text(BAD)

    controller = TableController()
    assert controller.reload_from_path(good)
    assert not controller.reload_from_path(bad)
    assert controller.number_of_items() == 2


def test_set_theme_rebuilds_rows():
    controller = TableController(width=300)
    controller.reload(GOOD)
    default_height = controller.cell_for_item(0).height

    controller.set_theme(ThemeLoader().load("catalog"))

    assert controller.theme.name == "catalog"
    assert controller.cell_for_item(0).height > default_height


def test_snapshot_size():
    controller = TableController(width=250)
    controller.reload(GOOD)
    image = controller.snapshot()
    assert image.size == (250, sum(c.height for c in controller.cells))


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
def test_non_finite_size_keeps_previous_state(literal, caplog):
    controller = TableController()
    controller.reload(GOOD)
    before = controller.collection

    document = '[{"type": "text", "data": {"text": "x"}, "style": {"size": %s}}]' % literal
    with caplog.at_level(logging.ERROR, logger="dyntable.controller"):
        assert controller.reload(document) is False

    assert controller.collection is before
    assert controller.number_of_items() == 2
    assert "style.size" in caplog.text


def test_undecodable_bytes_keep_previous_state():
    controller = TableController()
    controller.reload(GOOD)
    before = controller.collection

    assert controller.reload(b'[{"type":"text","data":{"text":"\xff"},"style":{}}]') is False
    assert controller.collection is before
    assert controller.number_of_items() == 2


def test_reload_from_path_bad_files_keep_previous_state(tmp_path):
    binary = tmp_path / "binary.json"
    binary.write_bytes(b'[{"type":"text","data":{"text":"\xff"},"style":{}}]')

    controller = TableController()
    controller.reload(GOOD)
    before = controller.collection

    assert controller.reload_from_path(tmp_path / "missing.json") is False
    assert controller.reload_from_path(binary) is False
    assert controller.collection is before


def test_snapshot_is_a_pil_image():
    controller = TableController(width=120)
    controller.reload(GOOD)
    assert isinstance(controller.snapshot(), Image.Image)
