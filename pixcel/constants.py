# pixcel/constants.py
"""
Tunables and bounds used across the project.

- Grid / editor defaults
- Conversion parameter bounds and defaults (REDUCE_*)
- Project file literals
"""
from __future__ import annotations

from typing import Tuple

# =========================
# Grid / editor
# =========================

# Side length of a fresh canvas.
DEFAULT_GRID_SIZE = 32

# Brush sizes offered by the toolbar. Any positive size is accepted.
BRUSH_SIZES: Tuple[int, ...] = (1, 2, 3)

# Default pencil colour.
DEFAULT_COLOR = "#000000"

# On-screen cell size in pixels (zoom). Cosmetic only.
DEFAULT_CELL_PX = 16
MIN_CELL_PX = 6
MAX_CELL_PX = 24
ZOOM_STEP_PX = 2

# History depth cap. None keeps every state.
HISTORY_MAX_DEPTH = None

# Recent-colours list length in the swatch panel.
RECENT_COLORS_MAX = 12

# =========================
# Export
# =========================

# Pixels per cell in PNG exports.
EXPORT_CELL_PX = 20

# =========================
# Image conversion
# =========================

# Target grid side.
REDUCE_SIZE_MIN = 16
REDUCE_SIZE_MAX = 64
REDUCE_SIZE_DEFAULT = 32

# Palette size for the stride-sampled quantizer.
REDUCE_PALETTE_MIN = 4
REDUCE_PALETTE_MAX = 32
REDUCE_PALETTE_DEFAULT = 16

# Contrast in percent. 100 leaves channels untouched.
REDUCE_CONTRAST_MIN = 50
REDUCE_CONTRAST_MAX = 200
REDUCE_CONTRAST_DEFAULT = 100

# Damping on diffused error in percent.
REDUCE_DITHER_MIN = 0
REDUCE_DITHER_MAX = 100
REDUCE_DITHER_DEFAULT = 50

# Contrast pivot and 1-bit dither threshold.
MID_GRAY = 128

# Pixels with alpha at or below this become transparent cells.
ALPHA_OPAQUE_THRESHOLD = 128

# Resampling filter used when shrinking the source.
REDUCE_RESAMPLE_DEFAULT = "bilinear"
RESAMPLE_CHOICES: Tuple[str, ...] = ("nearest", "bilinear", "bicubic", "lanczos")

# =========================
# Project file
# =========================

TRANSPARENT_LITERAL = "transparent"
PROJECT_SIZE_KEY = "gridSize"
PROJECT_CELLS_KEY = "pixels"
PROJECT_TIMESTAMP_KEY = "timestamp"
