# pixcel/__init__.py
"""
pixcel package.

Purpose:
  Pixel-art editing engine: a square colour grid with brush, fill and
  undo/redo, plus photo-to-grid conversion. See pixcel.cli for the CLI.

Public API:
  PixelGrid      : the canvas model (TRANSPARENT or (r, g, b) per cell).
  HistoryStack   : linear undo/redo over grid snapshots.
  stamp_brush    : pencil / eraser over an n x n block.
  flood_fill     : 4-connected region recolour.
  reduce_image   : RGBA bitmap -> PixelGrid (resample, dither/edge, quantize).
  encode_project / decode_project : JSON project blob.
  render_grid / export_png        : grid -> PNG at a fixed cell size.
  EditSession    : pointer/keyboard driven session tying it all together.
  errors         : exception types.

Quick start:
  from pixcel import EditSession, ReductionParameters
  from pixcel.image_io import load_bitmap
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import constants
from . import core_types
from . import errors
from . import utils

from .core_types import TRANSPARENT, Color, RGBTuple
from .grid import PixelGrid
from .history import HistoryStack
from .edit import ToolState, flood_fill, pick_color, stamp_brush
from .convert import ReductionParameters, reduce_image
from .codec import decode_project, encode_project, load_project, save_project
from .image_io import decode_bitmap, export_png, load_bitmap, render_grid
from .palette_data import COLOR_SCHEMES, DEFAULT_COLORS, Swatches
from .session import EditSession

__all__ = [
    "__version__",
    "constants",
    "core_types",
    "errors",
    "utils",
    "TRANSPARENT",
    "Color",
    "RGBTuple",
    "PixelGrid",
    "HistoryStack",
    "ToolState",
    "stamp_brush",
    "flood_fill",
    "pick_color",
    "ReductionParameters",
    "reduce_image",
    "encode_project",
    "decode_project",
    "save_project",
    "load_project",
    "decode_bitmap",
    "load_bitmap",
    "render_grid",
    "export_png",
    "DEFAULT_COLORS",
    "COLOR_SCHEMES",
    "Swatches",
    "EditSession",
]
