# pixcel/grid.py
from __future__ import annotations

"""
Square grid of cell colours.

Storage follows the (rgb, alpha) convention used by the image helpers:
  rgb   : uint8 [size, size, 3]
  alpha : uint8 [size, size], 255 for opaque cells and 0 for transparent ones

Transparent cells always hold rgb (0, 0, 0), so two grids are equal exactly
when their arrays are equal.
"""

from typing import Iterator, List, Sequence, Set, Tuple, Union

import numpy as np

from .core_types import (
    Color,
    RGBTuple,
    TRANSPARENT,
    U8Image,
    U8Mask,
    coerce_color,
    color_to_token,
)
from .errors import OutOfBounds


class PixelGrid:
    """Mutable square matrix of Color values with side length `size`."""

    __slots__ = ("size", "_rgb", "_alpha")

    def __init__(self, size: int) -> None:
        size = int(size)
        if size < 1:
            raise ValueError(f"grid size must be >= 1, got {size}")
        self.size = size
        self._rgb: U8Image = np.zeros((size, size, 3), dtype=np.uint8)
        self._alpha: U8Mask = np.zeros((size, size), dtype=np.uint8)

    # Construction

    @classmethod
    def create(cls, size: int) -> "PixelGrid":
        """All-transparent grid."""
        return cls(size)

    @classmethod
    def from_arrays(cls, rgb: np.ndarray, alpha: np.ndarray) -> "PixelGrid":
        """
        Build a grid from an RGB array and an alpha mask.
        Any alpha > 0 counts as opaque.
        """
        if rgb.ndim != 3 or rgb.shape[-1] != 3 or rgb.shape[0] != rgb.shape[1]:
            raise ValueError(f"expected square (N,N,3) rgb, got {rgb.shape}")
        if alpha.shape != rgb.shape[:2]:
            raise ValueError(f"alpha shape {alpha.shape} != rgb {rgb.shape[:2]}")
        grid = cls(rgb.shape[0])
        visible = alpha > 0
        grid._alpha[visible] = 255
        grid._rgb[visible] = rgb[visible].astype(np.uint8, copy=False)
        return grid

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Union[Color, str]]]) -> "PixelGrid":
        """Build a grid from rows of colours ('#rrggbb', 'transparent', tuples)."""
        size = len(rows)
        if size < 1:
            raise ValueError("rows must not be empty")
        grid = cls(size)
        for r, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(f"row {r} has {len(row)} cells, expected {size}")
            for c, value in enumerate(row):
                grid.set(r, c, coerce_color(value))
        return grid

    def clone(self) -> "PixelGrid":
        """Independent copy with no shared storage."""
        out = PixelGrid.__new__(PixelGrid)
        out.size = self.size
        out._rgb = self._rgb.copy()
        out._alpha = self._alpha.copy()
        return out

    # Cell access

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.size)

    def get(self, row: int, col: int) -> Color:
        self._check(row, col)
        if self._alpha[row, col] == 0:
            return TRANSPARENT
        px = self._rgb[row, col]
        return (int(px[0]), int(px[1]), int(px[2]))

    def set(self, row: int, col: int, color: Color) -> None:
        self._check(row, col)
        if color is None:
            self._alpha[row, col] = 0
            self._rgb[row, col] = 0
            return
        r, g, b = color
        if not (0 <= r <= 255 and 0 <= g <= 255 and 0 <= b <= 255):
            raise ValueError(f"channel out of range 0..255: {color}")
        self._alpha[row, col] = 255
        self._rgb[row, col] = (r, g, b)

    # Views

    @property
    def rgb(self) -> U8Image:
        """Copy of the uint8 [size,size,3] colour array."""
        return self._rgb.copy()

    @property
    def alpha(self) -> U8Mask:
        """Copy of the uint8 [size,size] alpha mask (0 or 255)."""
        return self._alpha.copy()

    def to_rows(self) -> List[List[str]]:
        """Rows of '#rrggbb' / 'transparent' tokens."""
        return [
            [color_to_token(self.get(r, c)) for c in range(self.size)]
            for r in range(self.size)
        ]

    def opaque_count(self) -> int:
        return int(np.count_nonzero(self._alpha))

    def distinct_colors(self) -> Set[RGBTuple]:
        """Set of opaque colours in use."""
        visible = self._alpha > 0
        if not np.any(visible):
            return set()
        uniques = np.unique(self._rgb[visible].reshape(-1, 3), axis=0)
        return {(int(r), int(g), int(b)) for r, g, b in uniques.tolist()}

    def __iter__(self) -> Iterator[Tuple[int, int, Color]]:
        for r in range(self.size):
            for c in range(self.size):
                yield r, c, self.get(r, c)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return (
            self.size == other.size
            and np.array_equal(self._alpha, other._alpha)
            and np.array_equal(self._rgb, other._rgb)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PixelGrid(size={self.size}, opaque={self.opaque_count()})"


__all__ = ["PixelGrid"]
