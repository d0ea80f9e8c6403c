# pixcel/convert/quantize.py
from __future__ import annotations

"""
Stride-sampled palette and nearest-colour mapping.

The palette is every (opaque_count // palette_size)-th opaque pixel in scan
order. It is a cheap deterministic sample, not a clustering; keep it that way
so converted grids stay stable across versions.
"""

from typing import Tuple

import numpy as np

from ..constants import ALPHA_OPAQUE_THRESHOLD
from ..core_types import U8Bitmap, U8Image, U8Mask
from ..errors import EmptySource
from ..grid import PixelGrid


def opaque_mask(rgba: U8Bitmap) -> U8Mask:
    """uint8 [H,W] mask: 255 where alpha > ALPHA_OPAQUE_THRESHOLD, else 0."""
    return np.where(rgba[..., 3] > ALPHA_OPAQUE_THRESHOLD, 255, 0).astype(np.uint8)


def stride_palette(opaque_rgb: U8Image, palette_size: int) -> U8Image:
    """
    Pick up to palette_size rows of a (N,3) array at a fixed stride.

    With fewer opaque pixels than palette slots the stride is 0, so every
    slot holds the first opaque pixel.
    """
    count = int(opaque_rgb.shape[0])
    if count == 0:
        raise EmptySource("no opaque pixels to sample a palette from")
    step = count // palette_size
    if step == 0:
        return np.repeat(opaque_rgb[:1], palette_size, axis=0)
    idx = np.arange(palette_size, dtype=np.int64) * step
    return opaque_rgb[idx].copy()


def nearest_palette_indices(src_rgb: np.ndarray, pal_rgb: np.ndarray) -> np.ndarray:
    """
    For each source row pick the nearest palette row by Euclidean RGB distance.
    np.argmin keeps the first minimum, so ties go to the earliest entry.
    """
    diff = src_rgb.astype(np.int32)[:, None, :] - pal_rgb.astype(np.int32)[None, :, :]
    dist2 = np.sum(diff * diff, axis=2)
    return np.argmin(dist2, axis=1).astype(np.int32)


def quantize_bitmap(rgba: U8Bitmap, palette_size: int) -> Tuple[PixelGrid, U8Image]:
    """
    Map a square RGBA bitmap to a PixelGrid with at most palette_size colours.

    Returns (grid, palette) where palette is the uint8 [K,3] sample used.
    """
    height, width = rgba.shape[:2]
    if height != width:
        raise ValueError(f"expected a square bitmap, got {width}x{height}")
    mask = opaque_mask(rgba)
    visible = mask > 0
    opaque_rgb = rgba[..., :3][visible]  # scan order
    palette = stride_palette(opaque_rgb, palette_size)

    mapped = np.zeros((height, width, 3), dtype=np.uint8)
    mapped[visible] = palette[nearest_palette_indices(opaque_rgb, palette)]
    return PixelGrid.from_arrays(mapped, mask), palette


__all__ = [
    "opaque_mask",
    "stride_palette",
    "nearest_palette_indices",
    "quantize_bitmap",
]
