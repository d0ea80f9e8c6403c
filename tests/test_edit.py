"""
Tests for the brush stamp, flood fill and eyedropper.
"""

import pytest

from pixcel.core_types import TRANSPARENT
from pixcel.edit import (
    ToolState,
    flood_fill,
    flood_fill_count,
    pick_color,
    stamp_brush,
)
from pixcel.errors import OutOfBounds
from pixcel.grid import PixelGrid

from conftest import BLACK, BLUE, RED, WHITE, changed_cells, filled_grid


# Brush


def test_brush_size_one_changes_one_cell():
    grid = PixelGrid(5)
    before = grid.clone()
    stamp_brush(grid, 2, 2, 1, "pencil", RED)
    assert changed_cells(before, grid) == 1
    assert grid.get(2, 2) == RED


def test_brush_size_three_interior_changes_nine_cells():
    grid = PixelGrid(5)
    before = grid.clone()
    stamp_brush(grid, 2, 2, 3, "pencil", RED)
    assert changed_cells(before, grid) == 9
    for r in range(1, 4):
        for c in range(1, 4):
            assert grid.get(r, c) == RED


def test_brush_size_three_at_corner_is_clipped():
    grid = PixelGrid(5)
    before = grid.clone()
    stamp_brush(grid, 0, 0, 3, "pencil", RED)
    assert changed_cells(before, grid) == 4
    stamp_brush(grid, 4, 4, 3, "pencil", BLUE)
    assert changed_cells(before, grid) == 8


def test_brush_size_two_leans_up_left():
    grid = PixelGrid(4)
    stamp_brush(grid, 2, 2, 2, "pencil", RED)
    painted = {(r, c) for r, c, color in grid if color == RED}
    assert painted == {(1, 1), (1, 2), (2, 1), (2, 2)}


def test_eraser_ignores_colour_argument():
    grid = filled_grid(3, WHITE)
    stamp_brush(grid, 1, 1, 1, "eraser", RED)
    assert grid.get(1, 1) is TRANSPARENT
    assert grid.get(0, 0) == WHITE


def test_brush_rejects_non_stroke_tools_and_sizes():
    grid = PixelGrid(3)
    with pytest.raises(ValueError):
        stamp_brush(grid, 1, 1, 1, "fill", RED)
    with pytest.raises(ValueError):
        stamp_brush(grid, 1, 1, 0, "pencil", RED)
    assert grid == PixelGrid(3)


def test_brush_far_outside_is_silent():
    grid = PixelGrid(3)
    stamp_brush(grid, 10, 10, 3, "pencil", RED)
    assert grid == PixelGrid(3)


# Flood fill


def test_fill_transparent_4x4_scenario():
    grid = PixelGrid(4)
    flood_fill(grid, 0, 0, (0xFF, 0x00, 0x00))
    assert all(color == RED for _r, _c, color in grid)


def test_fill_same_colour_is_noop():
    grid = filled_grid(4, RED)
    before = grid.clone()
    assert flood_fill_count(grid, 1, 1, RED) == 0
    assert grid == before


def test_fill_block_from_centre_recolours_nine():
    grid = filled_grid(3, WHITE)
    assert flood_fill_count(grid, 1, 1, BLUE) == 9


def test_fill_isolated_cell_recolours_one():
    grid = filled_grid(3, WHITE)
    grid.set(1, 1, BLACK)
    assert flood_fill_count(grid, 1, 1, RED) == 1
    assert grid.get(1, 1) == RED
    assert grid.get(0, 1) == WHITE


def test_fill_does_not_cross_diagonals():
    grid = PixelGrid.from_rows(
        [
            ["#000000", "#ffffff", "#ffffff"],
            ["#ffffff", "#000000", "#ffffff"],
            ["#ffffff", "#ffffff", "#000000"],
        ]
    )
    assert flood_fill_count(grid, 0, 0, RED) == 1
    assert grid.get(1, 1) == BLACK


def test_fill_bounded_by_other_colours():
    grid = PixelGrid(5)
    for i in range(5):
        grid.set(2, i, BLACK)
    flood_fill(grid, 0, 0, RED)
    assert sum(1 for _r, _c, color in grid if color == RED) == 10
    assert grid.get(4, 4) is TRANSPARENT


def test_fill_large_grid_does_not_recurse():
    grid = PixelGrid(128)
    assert flood_fill_count(grid, 64, 64, RED) == 128 * 128


def test_fill_with_transparent_erases_region():
    grid = filled_grid(3, RED)
    grid.set(0, 0, BLUE)
    flood_fill(grid, 2, 2, TRANSPARENT)
    assert grid.get(0, 0) == BLUE
    assert grid.opaque_count() == 1


def test_fill_start_out_of_bounds():
    with pytest.raises(OutOfBounds):
        flood_fill(PixelGrid(3), 3, 0, RED)


def test_fill_rejects_bad_colour_without_mutating():
    grid = PixelGrid(3)
    with pytest.raises(ValueError):
        flood_fill(grid, 0, 0, (300, 0, 0))
    assert grid == PixelGrid(3)


# Tools


def test_pick_color():
    grid = PixelGrid(2)
    grid.set(0, 0, BLUE)
    assert pick_color(grid, 0, 0) == BLUE
    assert pick_color(grid, 1, 1) is None


def test_tool_state_validation():
    state = ToolState()
    assert state.tool == "pencil"
    assert state.color == BLACK
    state.select("fill")
    assert state.tool == "fill"
    with pytest.raises(ValueError):
        state.select("lasso")
    with pytest.raises(ValueError):
        state.set_brush_size(0)
    state.set_brush_size(3)
    assert state.brush_size == 3
