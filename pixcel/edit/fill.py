# pixcel/edit/fill.py
from __future__ import annotations

"""
4-connected flood fill with an explicit stack.

Bounds and colour are checked when a cell is popped, not when it is pushed,
so neighbours go on the stack unconditionally. Each cell is recoloured at
most once; worst case O(size^2) time and stack entries.
"""

from typing import List, Tuple

from ..core_types import Color, coerce_color
from ..grid import PixelGrid


def flood_fill_count(
    grid: PixelGrid, start_row: int, start_col: int, replacement: Color
) -> int:
    """Flood fill in place and return how many cells were recoloured."""
    replacement = coerce_color(replacement)
    target = grid.get(start_row, start_col)
    if target == replacement:
        return 0

    size = grid.size
    filled = 0
    stack: List[Tuple[int, int]] = [(start_row, start_col)]
    while stack:
        r, c = stack.pop()
        if r < 0 or r >= size or c < 0 or c >= size:
            continue
        if grid.get(r, c) != target:
            continue
        grid.set(r, c, replacement)
        filled += 1
        stack.append((r + 1, c))
        stack.append((r - 1, c))
        stack.append((r, c + 1))
        stack.append((r, c - 1))
    return filled


def flood_fill(
    grid: PixelGrid, start_row: int, start_col: int, replacement: Color
) -> PixelGrid:
    """Recolour the region connected to (start_row, start_col). Returns grid."""
    flood_fill_count(grid, start_row, start_col, replacement)
    return grid


__all__ = ["flood_fill", "flood_fill_count"]
