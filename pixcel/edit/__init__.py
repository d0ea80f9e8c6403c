# pixcel/edit/__init__.py
"""
Grid editing tools.

Provides:
  stamp_brush(grid, row, col, brush_size, tool, color) -> PixelGrid
    Pencil / eraser over an n x n block, clipped to the grid.

  flood_fill(grid, row, col, replacement) -> PixelGrid
    4-connected region recolour using an explicit stack.

  ToolState, pick_color
    Per-session tool selection and the eyedropper.

All edits work in place. Snapshotting into a HistoryStack is up to the caller.
"""

from .brush import stamp_brush
from .fill import flood_fill, flood_fill_count
from .tools import STROKE_TOOLS, TOOLS, Tool, ToolState, pick_color

__all__ = [
    "stamp_brush",
    "flood_fill",
    "flood_fill_count",
    "Tool",
    "TOOLS",
    "STROKE_TOOLS",
    "ToolState",
    "pick_color",
]
