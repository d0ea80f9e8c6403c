# pixcel/history.py
from __future__ import annotations

"""
Linear undo/redo history of grid snapshots.

Every stored entry is a private clone and every grid handed back is a fresh
clone, so callers can mutate what they get without touching the history.
Committing after an undo drops the redo branch.
"""

import threading
from typing import List, Optional

from .constants import HISTORY_MAX_DEPTH
from .errors import NoNewerState, NoOlderState
from .grid import PixelGrid


class HistoryStack:
    """Snapshot log with a cursor at the live state."""

    def __init__(self, max_depth: Optional[int] = HISTORY_MAX_DEPTH) -> None:
        if max_depth is not None and max_depth < 1:
            raise ValueError(f"max_depth must be >= 1 or None, got {max_depth}")
        self.max_depth = max_depth
        self._entries: List[PixelGrid] = []
        self._current = -1
        self._lock = threading.Lock()

    # Introspection

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def cursor(self) -> int:
        return self._current

    @property
    def can_undo(self) -> bool:
        return self._current > 0

    @property
    def can_redo(self) -> bool:
        return self._current < len(self._entries) - 1

    def current_grid(self) -> PixelGrid:
        """Copy of the entry under the cursor."""
        with self._lock:
            if self._current < 0:
                raise NoOlderState("history is empty")
            return self._entries[self._current].clone()

    # Mutation

    def initialize(self, grid: PixelGrid) -> None:
        """Reset to a single entry with the cursor on it."""
        with self._lock:
            self._entries = [grid.clone()]
            self._current = 0

    def commit(self, grid: PixelGrid) -> None:
        """Append a snapshot, discarding anything after the cursor."""
        snapshot = grid.clone()
        with self._lock:
            if self._current < len(self._entries) - 1:
                del self._entries[self._current + 1 :]
            self._entries.append(snapshot)
            if self.max_depth is not None and len(self._entries) > self.max_depth:
                del self._entries[: len(self._entries) - self.max_depth]
            self._current = len(self._entries) - 1

    def undo(self) -> PixelGrid:
        with self._lock:
            if self._current <= 0:
                raise NoOlderState("nothing to undo")
            self._current -= 1
            return self._entries[self._current].clone()

    def redo(self) -> PixelGrid:
        with self._lock:
            if self._current >= len(self._entries) - 1:
                raise NoNewerState("nothing to redo")
            self._current += 1
            return self._entries[self._current].clone()

    def __repr__(self) -> str:
        return f"HistoryStack(entries={len(self._entries)}, cursor={self._current})"


__all__ = ["HistoryStack"]
