# pixcel/convert/dither.py
from __future__ import annotations

"""
Per-channel 1-bit Floyd-Steinberg error diffusion.

Each colour channel is thresholded at mid-gray to 0 or 255 and the damped
error is pushed onto not-yet-visited neighbours. The working buffer behaves
like an 8-bit clamped canvas: every write saturates to 0..255 and rounds half
to even. Pixels depend on earlier writes, so the scan is strictly sequential
in raster order.
"""

from typing import List, Tuple

import numpy as np

from ..constants import MID_GRAY
from ..core_types import U8Bitmap

# Error diffusion kernel: Floyd-Steinberg (dx, dy, weight), weights sum to 1.
KERNEL_FS: Tuple[Tuple[int, int, float], ...] = (
    (1, 0, 7 / 16),
    (-1, 1, 3 / 16),
    (0, 1, 5 / 16),
    (1, 1, 1 / 16),
)


def _clamp_u8(value: float) -> int:
    if value <= 0.0:
        return 0
    if value >= 255.0:
        return 255
    return int(round(value))


def error_diffuse(rgba: U8Bitmap, strength: int) -> U8Bitmap:
    """
    Dither the RGB channels of an RGBA bitmap. Alpha passes through.

    strength: 0..100, scales the diffused error (0 = plain threshold).
    Returns a new uint8 [H,W,4] array.
    """
    height, width = rgba.shape[:2]
    factor = strength / 100.0
    buf: List[List[List[int]]] = rgba[..., :3].astype(np.int32).tolist()

    for y in range(height):
        row = buf[y]
        for x in range(width):
            px = row[x]
            for ch in range(3):
                old = px[ch]
                new = 0 if old < MID_GRAY else 255
                px[ch] = new
                err = (old - new) * factor
                if err == 0.0:
                    continue
                for dx, dy, weight in KERNEL_FS:
                    nx, ny = x + dx, y + dy
                    if 0 <= nx < width and ny < height:
                        cell = buf[ny][nx]
                        cell[ch] = _clamp_u8(cell[ch] + err * weight)

    out = rgba.copy()
    out[..., :3] = np.asarray(buf, dtype=np.uint8)
    return out


__all__ = ["KERNEL_FS", "error_diffuse"]
