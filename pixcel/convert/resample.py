# pixcel/convert/resample.py
from __future__ import annotations

"""
Resample stage: contrast around mid-gray, then shrink to a square grid.
"""

import numpy as np
from PIL import Image

from ..constants import MID_GRAY
from ..core_types import U8Bitmap
from ..utils import pillow_resample_from_name


def apply_contrast(rgba: U8Bitmap, contrast_percent: int) -> U8Bitmap:
    """
    Scale each colour channel's distance from mid-gray by contrast_percent/100.
    Alpha is untouched. Returns a new uint8 array.
    """
    out = rgba.copy()
    if contrast_percent == 100:
        return out
    factor = contrast_percent / 100.0
    rgb = out[..., :3].astype(np.float32)
    rgb = (rgb - MID_GRAY) * factor + MID_GRAY
    out[..., :3] = np.clip(np.rint(rgb), 0, 255).astype(np.uint8)
    return out


def resample_square(
    rgba: U8Bitmap,
    target_size: int,
    contrast_percent: int = 100,
    resample: str = "bilinear",
) -> U8Bitmap:
    """
    Contrast-adjust then resize an RGBA bitmap to target_size x target_size.
    The aspect ratio is not preserved.
    """
    adjusted = apply_contrast(rgba, contrast_percent)
    im = Image.fromarray(adjusted)
    im2 = im.resize(
        (target_size, target_size), resample=pillow_resample_from_name(resample)
    )
    return np.array(im2, dtype=np.uint8)


__all__ = ["apply_contrast", "resample_square"]
