# pixcel/edit/tools.py
from __future__ import annotations

"""
Editor tool identifiers, per-session tool state, and the eyedropper.
"""

from dataclasses import dataclass
from typing import Literal, Optional

from ..constants import DEFAULT_COLOR
from ..core_types import RGBTuple, hex_to_rgb
from ..grid import PixelGrid

Tool = Literal["pencil", "eraser", "fill", "eyedropper"]
TOOLS = ("pencil", "eraser", "fill", "eyedropper")

# Tools that paint through the brush stamp.
STROKE_TOOLS = ("pencil", "eraser")


@dataclass
class ToolState:
    """Current tool, draw colour, brush size and the cosmetic grid overlay flag."""

    tool: Tool = "pencil"
    color: RGBTuple = hex_to_rgb(DEFAULT_COLOR)
    brush_size: int = 1
    show_grid: bool = True

    def select(self, tool: str) -> None:
        if tool not in TOOLS:
            raise ValueError(f"unknown tool: {tool!r}")
        self.tool = tool  # type: ignore[assignment]

    def set_brush_size(self, size: int) -> None:
        if int(size) < 1:
            raise ValueError(f"brush size must be >= 1, got {size}")
        self.brush_size = int(size)


def pick_color(grid: PixelGrid, row: int, col: int) -> Optional[RGBTuple]:
    """Eyedropper: colour under the cursor, or None for a transparent cell."""
    return grid.get(row, col)


__all__ = ["Tool", "TOOLS", "STROKE_TOOLS", "ToolState", "pick_color"]
