"""Tests for content boxes and row stacking."""

import numpy as np
import pytest

from dyntable.core import Padding, Rect
from dyntable.layout import container_size, content_box, stack_rows, table_height


@pytest.mark.parametrize(
    "container",
    [Rect(0, 0, 375, 44), Rect(-5, 12.5, 10, 0), Rect(3, 4, 0, 0)],
)
def test_zero_padding_returns_container(container):
    assert content_box(container, Padding()) == container


def test_content_box_insets():
    box = content_box(Rect(10, 20, 300, 100), Padding(top=1, bottom=2, left=20, right=30))
    assert box == Rect(30, 21, 250, 97)


def test_content_box_is_not_clamped():
    box = content_box(Rect(0, 0, 10, 10), Padding(left=8, right=8))
    assert box.width == -6
    assert box.clamped().width == 0


def test_container_size_inverts_content_box():
    padding = Padding(top=1, bottom=2, left=3, right=4)
    width, height = container_size(50, 20, padding)
    assert content_box(Rect(0, 0, width, height), padding) == Rect(3, 1, 50, 20)


def test_stack_rows():
    padding = Padding(top=16, bottom=16, left=10, right=10)
    heights = [30, 20, 44]
    total = table_height(padding, heights)
    rows = stack_rows(Rect(0, 0, 200, total), padding, heights)

    assert total == 126
    assert [r.y for r in rows] == [16, 46, 66]
    assert all(r.x == 10 and r.width == 180 for r in rows)
    assert rows[-1].max_y == total - padding.bottom


def test_stack_rows_empty():
    assert stack_rows(Rect(0, 0, 100, 10), Padding(), []) == []
    assert table_height(Padding(top=5), []) == 5


def test_rect_array_round_trip():
    rect = Rect(1, 2, 3, 4)
    np.testing.assert_array_equal(rect.to_array(), [1, 2, 3, 4])
    assert Rect.from_array(rect.to_array()) == rect
    assert rect.to_pil_box() == (1, 2, 4, 6)


def test_padding_validation():
    with pytest.raises(ValueError):
        Padding(top=-1)
    with pytest.raises(TypeError):
        Padding(left=1.5)
    assert Padding.uniform(4).horizontal == 8
