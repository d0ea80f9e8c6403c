# pixcel/convert/edges.py
from __future__ import annotations

"""
Sobel edge map on the (R+G+B)/3 luminance.
"""

import numpy as np

from ..core_types import U8Bitmap

SOBEL_X = np.array([[-1, 0, 1], [-2, 0, 2], [-1, 0, 1]], dtype=np.float64)
SOBEL_Y = np.array([[-1, -2, -1], [0, 0, 0], [1, 2, 1]], dtype=np.float64)


def sobel_edges(rgba: U8Bitmap) -> U8Bitmap:
    """
    Replace interior pixels with min(255, |gradient|) on all three channels.

    The one-pixel border and the alpha channel are copied through unchanged.
    Returns a new uint8 [H,W,4] array.
    """
    out = rgba.copy()
    height, width = rgba.shape[:2]
    if height < 3 or width < 3:
        return out

    gray = rgba[..., :3].astype(np.float64).sum(axis=-1) / 3.0

    # 3x3 correlation over the interior via shifted views.
    gx = np.zeros((height - 2, width - 2), dtype=np.float64)
    gy = np.zeros_like(gx)
    for ky in range(3):
        for kx in range(3):
            window = gray[ky : ky + height - 2, kx : kx + width - 2]
            if SOBEL_X[ky, kx]:
                gx += SOBEL_X[ky, kx] * window
            if SOBEL_Y[ky, kx]:
                gy += SOBEL_Y[ky, kx] * window

    magnitude = np.minimum(255.0, np.sqrt(gx * gx + gy * gy))
    value = np.rint(magnitude).astype(np.uint8)
    out[1:-1, 1:-1, 0] = value
    out[1:-1, 1:-1, 1] = value
    out[1:-1, 1:-1, 2] = value
    return out


__all__ = ["SOBEL_X", "SOBEL_Y", "sobel_edges"]
