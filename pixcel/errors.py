# pixcel/errors.py
"""
Exception types raised by the editing engine and the conversion pipeline.

Grid, brush and fill errors are caller bugs. Pipeline and codec errors come
from untrusted input and are meant to be caught and reported.
"""


class PixcelError(Exception):
    """Base class for every pixcel error."""


class OutOfBounds(PixcelError, IndexError):
    """Cell index outside the grid extent."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(f"cell ({row}, {col}) outside {size}x{size} grid")
        self.row = row
        self.col = col
        self.size = size


class HistoryBoundary(PixcelError):
    """Undo/redo requested at the end of the history."""


class NoOlderState(HistoryBoundary):
    pass


class NoNewerState(HistoryBoundary):
    pass


class InvalidParameters(PixcelError, ValueError):
    """Reduction parameters outside their documented bounds."""


class EmptySource(PixcelError, ValueError):
    """Source bitmap has no opaque pixels to build a palette from."""


class MalformedProject(PixcelError, ValueError):
    """Project bytes do not describe a valid grid."""


class DecodeError(PixcelError, ValueError):
    """Image bytes could not be decoded into an RGBA bitmap."""


__all__ = [
    "PixcelError",
    "OutOfBounds",
    "HistoryBoundary",
    "NoOlderState",
    "NoNewerState",
    "InvalidParameters",
    "EmptySource",
    "MalformedProject",
    "DecodeError",
]
