# pixcel/convert/__init__.py
"""
Image conversion API.

Provides:
  reduce_image(bitmap, params, *, debug=False) -> PixelGrid
    Turn an RGBA photo into a square pixel grid.

    Args:
      bitmap : uint8 [H,W,4] (or [H,W,3], treated as opaque)
      params : ReductionParameters
      debug  : bool, print stage timings and palette stats

    Stages:
      - Resample to target_size x target_size with contrast around mid-gray.
      - "dithered": 1-bit per-channel Floyd-Steinberg with damped error.
      - "edge": Sobel gradient magnitude on (R+G+B)/3, interior only.
      - Quantize: stride-sampled palette, nearest colour in RGB.
"""

from .params import MODES, ConversionMode, ReductionParameters
from .pipeline import reduce_image

__all__ = ["reduce_image", "ReductionParameters", "ConversionMode", "MODES"]
