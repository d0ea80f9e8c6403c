"""
Tests for the PixelGrid model.
"""

import numpy as np
import pytest

from pixcel.core_types import TRANSPARENT
from pixcel.errors import OutOfBounds
from pixcel.grid import PixelGrid

from conftest import BLUE, RED, WHITE


def test_create_is_all_transparent():
    grid = PixelGrid.create(4)
    assert grid.size == 4
    assert all(color is TRANSPARENT for _r, _c, color in grid)
    assert grid.opaque_count() == 0


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        PixelGrid(0)


def test_get_set_round_trip():
    grid = PixelGrid(3)
    grid.set(1, 2, RED)
    assert grid.get(1, 2) == RED
    grid.set(1, 2, TRANSPARENT)
    assert grid.get(1, 2) is TRANSPARENT


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)])
def test_out_of_bounds_access(row, col):
    grid = PixelGrid(3)
    with pytest.raises(OutOfBounds):
        grid.get(row, col)
    with pytest.raises(OutOfBounds):
        grid.set(row, col, RED)


def test_out_of_bounds_is_an_index_error():
    with pytest.raises(IndexError):
        PixelGrid(2).get(2, 0)


def test_set_rejects_bad_channel():
    grid = PixelGrid(2)
    with pytest.raises(ValueError):
        grid.set(0, 0, (256, 0, 0))
    assert grid.get(0, 0) is TRANSPARENT


def test_clone_matches_and_is_independent():
    grid = PixelGrid(4)
    grid.set(0, 0, RED)
    grid.set(3, 3, BLUE)
    copy = grid.clone()
    for r in range(4):
        for c in range(4):
            assert copy.get(r, c) == grid.get(r, c)
    copy.set(0, 0, WHITE)
    copy.set(2, 2, RED)
    assert grid.get(0, 0) == RED
    assert grid.get(2, 2) is TRANSPARENT


def test_equality_is_by_value():
    a = PixelGrid(2)
    b = PixelGrid(2)
    assert a == b
    a.set(0, 1, RED)
    assert a != b
    b.set(0, 1, RED)
    assert a == b
    assert PixelGrid(2) != PixelGrid(3)


def test_erasing_restores_equality():
    """A cell painted then cleared compares equal to one never painted."""
    a = PixelGrid(2)
    a.set(0, 0, WHITE)
    a.set(0, 0, TRANSPARENT)
    assert a == PixelGrid(2)


def test_from_rows_and_to_rows():
    rows = [["#000000", "#FFFFFF"], ["transparent", "#ff0000"]]
    grid = PixelGrid.from_rows(rows)
    assert grid.get(0, 1) == WHITE
    assert grid.get(1, 0) is TRANSPARENT
    assert grid.to_rows() == [["#000000", "#ffffff"], ["transparent", "#ff0000"]]


def test_from_rows_rejects_ragged():
    with pytest.raises(ValueError):
        PixelGrid.from_rows([["#000000", "#000000"], ["#000000"]])


def test_from_arrays_and_views_are_copies():
    rgb = np.zeros((2, 2, 3), dtype=np.uint8)
    rgb[0, 0] = RED
    rgb[1, 1] = BLUE
    alpha = np.array([[255, 0], [0, 200]], dtype=np.uint8)
    grid = PixelGrid.from_arrays(rgb, alpha)
    assert grid.get(0, 0) == RED
    assert grid.get(1, 1) == BLUE
    assert grid.get(0, 1) is TRANSPARENT
    view = grid.rgb
    view[0, 0] = 0
    assert grid.get(0, 0) == RED
    assert grid.alpha.tolist() == [[255, 0], [0, 255]]


def test_distinct_colors():
    grid = PixelGrid(3)
    grid.set(0, 0, RED)
    grid.set(0, 1, RED)
    grid.set(2, 2, BLUE)
    assert grid.distinct_colors() == {RED, BLUE}
