# pixcel/session.py
from __future__ import annotations

"""
Editing session: the glue between pointer events, the edit tools and history.

One session owns one live grid, one HistoryStack and one ToolState. Strokes
(press, drag..., release) become a single history entry; fills and clears
commit immediately. Undo/redo at a boundary is a no-op that returns False.
"""

import time
from pathlib import Path
from typing import Optional, Union

import numpy as np

from .codec import decode_project, encode_project, save_project
from .constants import (
    DEFAULT_CELL_PX,
    DEFAULT_GRID_SIZE,
    EXPORT_CELL_PX,
    HISTORY_MAX_DEPTH,
    MAX_CELL_PX,
    MIN_CELL_PX,
    ZOOM_STEP_PX,
)
from .convert import ReductionParameters, reduce_image
from .edit import STROKE_TOOLS, ToolState, flood_fill, pick_color, stamp_brush
from .errors import HistoryBoundary
from .grid import PixelGrid
from .history import HistoryStack
from .image_io import export_png
from .palette_data import Swatches


class EditSession:
    """A single user's canvas, tools and undo history."""

    def __init__(
        self,
        size: int = DEFAULT_GRID_SIZE,
        *,
        max_history: Optional[int] = HISTORY_MAX_DEPTH,
        project_path: Optional[Path] = None,
    ) -> None:
        self.tools = ToolState()
        self.swatches = Swatches()
        self.cell_px = DEFAULT_CELL_PX
        self.history = HistoryStack(max_depth=max_history)
        self.grid = PixelGrid.create(size)
        self.history.initialize(self.grid)
        self._stroking = False
        self.project_path = Path(project_path) if project_path is not None else None

    # State

    @property
    def size(self) -> int:
        return self.grid.size

    @property
    def is_drawing(self) -> bool:
        return self._stroking

    def set_color(self, color: str) -> None:
        self.swatches.select(color)
        self.tools.color = self.swatches.current_rgb

    def _replace(self, grid: PixelGrid) -> None:
        self.grid = grid
        self.history.commit(grid)

    # Pointer events

    def press(self, row: int, col: int) -> None:
        """Pointer down on a cell."""
        tool = self.tools.tool
        if tool == "eyedropper":
            picked = pick_color(self.grid, row, col)
            if picked is not None:
                self.tools.color = picked
            self.tools.select("pencil")
            return
        if tool == "fill":
            target = self.grid.get(row, col)
            if target == self.tools.color:
                return
            filled = flood_fill(self.grid.clone(), row, col, self.tools.color)
            self._replace(filled)
            return
        self.grid.get(row, col)  # bounds check before the stroke starts
        self._stroking = True
        self._stamp(row, col)

    def drag(self, row: int, col: int) -> None:
        """Pointer entered a cell while held down. Does not commit."""
        if not self._stroking or self.tools.tool not in STROKE_TOOLS:
            return
        if self.grid.in_bounds(row, col):
            self._stamp(row, col)

    def release(self) -> None:
        """Pointer up or left the canvas: commit the stroke once."""
        if self._stroking:
            self._stroking = False
            self.history.commit(self.grid)

    def _stamp(self, row: int, col: int) -> None:
        stamp_brush(
            self.grid,
            row,
            col,
            self.tools.brush_size,
            self.tools.tool,
            self.tools.color,
        )

    # Keyboard

    def handle_key(self, key: str, *, ctrl: bool = False, shift: bool = False) -> bool:
        """Editor shortcuts. Returns True when the key was handled."""
        if ctrl:
            if key == "z" and not shift:
                self.undo()
                return True
            if (key == "z" and shift) or key == "y":
                self.redo()
                return True
            if key == "s":
                self.save()
                return True
            return False
        if key == "g":
            self.tools.show_grid = not self.tools.show_grid
        elif key == "e":
            self.tools.select("eraser")
        elif key == "p":
            self.tools.select("pencil")
        elif key == "f":
            self.tools.select("fill")
        else:
            return False
        return True

    # History

    def undo(self) -> bool:
        self.release()
        try:
            self.grid = self.history.undo()
        except HistoryBoundary:
            return False
        return True

    def redo(self) -> bool:
        self.release()
        try:
            self.grid = self.history.redo()
        except HistoryBoundary:
            return False
        return True

    # Whole-grid operations

    def clear(self) -> None:
        self.release()
        self._replace(PixelGrid.create(self.grid.size))

    def new_canvas(self, size: int) -> None:
        """Start over at a new size with a fresh history."""
        self._stroking = False
        self.grid = PixelGrid.create(size)
        self.history.initialize(self.grid)

    def import_image(self, bitmap: np.ndarray, params: ReductionParameters) -> None:
        """Convert a bitmap and commit it. Errors leave the session untouched."""
        grid = reduce_image(bitmap, params)
        self.release()
        self._replace(grid)

    def load_project(self, data: Union[bytes, str]) -> None:
        """Replace the canvas with a decoded project and commit it."""
        grid = decode_project(data)
        self.release()
        self._replace(grid)

    def save_project(self) -> bytes:
        return encode_project(self.grid)

    def save(self, path: Optional[Path] = None) -> Path:
        """
        Write the project file and remember where it went.

        Without a path, reuses project_path, or falls back to
        pixcel-project-<epoch ms>.json in the working directory.
        """
        self.release()
        if path is None:
            path = self.project_path
        if path is None:
            path = Path(f"pixcel-project-{int(time.time() * 1000)}.json")
        self.project_path = save_project(path, self.grid)
        return self.project_path

    def export_png(self, path: Path, cell_px: int = EXPORT_CELL_PX) -> Path:
        return export_png(path, self.grid, cell_px)

    # Zoom

    def zoom_in(self) -> int:
        self.cell_px = min(self.cell_px + ZOOM_STEP_PX, MAX_CELL_PX)
        return self.cell_px

    def zoom_out(self) -> int:
        self.cell_px = max(self.cell_px - ZOOM_STEP_PX, MIN_CELL_PX)
        return self.cell_px

    @property
    def zoom_percent(self) -> int:
        return round(self.cell_px / DEFAULT_CELL_PX * 100)


__all__ = ["EditSession"]
