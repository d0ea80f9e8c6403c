# pixcel/edit/brush.py
from __future__ import annotations

"""
Square brush stamp for the pencil and eraser tools.
"""

from ..core_types import Color, TRANSPARENT, coerce_color
from ..grid import PixelGrid
from .tools import STROKE_TOOLS


def stamp_brush(
    grid: PixelGrid,
    center_row: int,
    center_col: int,
    brush_size: int,
    tool: str,
    color: Color,
) -> PixelGrid:
    """
    Paint an n x n block centred on (center_row, center_col), in place.

    Even sizes lean up and left: offset = n // 2. Cells outside the grid are
    skipped. The eraser writes TRANSPARENT whatever colour is passed.
    Returns the same grid for chaining. History is the caller's job.
    """
    if brush_size < 1:
        raise ValueError(f"brush size must be >= 1, got {brush_size}")
    if tool not in STROKE_TOOLS:
        raise ValueError(f"tool {tool!r} does not stamp")

    paint = TRANSPARENT if tool == "eraser" else coerce_color(color)
    offset = brush_size // 2
    for i in range(brush_size):
        r = center_row - offset + i
        for j in range(brush_size):
            c = center_col - offset + j
            if grid.in_bounds(r, c):
                grid.set(r, c, paint)
    return grid


__all__ = ["stamp_brush"]
