# pixcel/convert/pipeline.py
from __future__ import annotations

"""
Photo to pixel-grid conversion.

  resample (+contrast) -> [dither | edge | nothing] -> quantize

Pure function of (bitmap, parameters). Parameters are validated before any
work is done. No I/O; logging only when debug=True.
"""

import time

import numpy as np

from ..core_types import U8Bitmap, assert_u8_bitmap
from ..errors import DecodeError
from ..grid import PixelGrid
from ..utils import debug_log, format_seconds_compact, key_value_pairs_to_string
from .dither import error_diffuse
from .edges import sobel_edges
from .params import ReductionParameters
from .quantize import quantize_bitmap
from .resample import resample_square


def _as_bitmap(bitmap: np.ndarray) -> U8Bitmap:
    try:
        rgba = assert_u8_bitmap(bitmap)
    except TypeError as exc:
        raise DecodeError(str(exc)) from exc
    if rgba.shape[0] < 1 or rgba.shape[1] < 1:
        raise DecodeError(f"empty bitmap {rgba.shape[1]}x{rgba.shape[0]}")
    return rgba


def reduce_image(
    bitmap: np.ndarray,
    params: ReductionParameters,
    *,
    debug: bool = False,
) -> PixelGrid:
    """
    Convert an RGBA (or RGB) uint8 bitmap into a params.target_size grid.

    Raises:
      InvalidParameters: any parameter outside its bounds
      DecodeError: bitmap is not a uint8 (H,W,3/4) array
      EmptySource: no opaque pixels survive resampling
    """
    params.validate()
    rgba = _as_bitmap(bitmap)

    t0 = time.perf_counter()
    stage = resample_square(
        rgba, params.target_size, params.contrast_percent, params.resample
    )
    t1 = time.perf_counter()

    if params.mode == "dithered":
        stage = error_diffuse(stage, params.dither_strength)
    elif params.mode == "edge":
        stage = sobel_edges(stage)
    t2 = time.perf_counter()

    grid, palette = quantize_bitmap(stage, params.palette_size)
    t3 = time.perf_counter()

    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Source", f"{rgba.shape[1]}x{rgba.shape[0]}"),
                    ("Grid", f"{grid.size}x{grid.size}"),
                    ("Mode", params.mode),
                    ("Palette", int(palette.shape[0])),
                    ("Colours used", len(grid.distinct_colors())),
                    ("Opaque cells", grid.opaque_count()),
                ]
            )
        )
        debug_log(
            f"resample={format_seconds_compact(t1 - t0)}, "
            f"{params.mode}={format_seconds_compact(t2 - t1)}, "
            f"quantize={format_seconds_compact(t3 - t2)}"
        )
    return grid


__all__ = ["reduce_image"]
