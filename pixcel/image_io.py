# pixcel/image_io.py
from __future__ import annotations

import io
from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from .constants import EXPORT_CELL_PX
from .core_types import RGBTuple, U8Bitmap, coerce_color
from .errors import DecodeError
from .grid import PixelGrid

"""
Image I/O: decode user images into RGBA bitmaps (sRGB) and render grids to PNG.
"""

try:
    from PIL import ImageCms  # ICC conversion if profile present
except ImportError:  # pragma: no cover
    ImageCms = None  # type: ignore[assignment]


def _convert_to_srgb_rgba(im: Image.Image) -> Image.Image:
    im = ImageOps.exif_transpose(im)
    icc_bytes = im.info.get("icc_profile")

    if icc_bytes and ImageCms is not None:
        try:
            src_prof = ImageCms.ImageCmsProfile(io.BytesIO(icc_bytes))
            dst_prof = ImageCms.createProfile("sRGB")
            im2 = ImageCms.profileToProfile(
                im,
                src_prof,
                dst_prof,
                renderingIntent=ImageCms.Intent.PERCEPTUAL,
                outputMode="RGBA",
            )
            if im2 is None:
                return im.convert("RGBA")
            return im2
        except (ImageCms.PyCMSError, OSError, ValueError):
            return im.convert("RGBA")

    return im.convert("RGBA")


def _open_rgba(source: Union[Path, io.BytesIO]) -> U8Bitmap:
    try:
        with Image.open(source) as im0:
            im0.load()
            im = _convert_to_srgb_rgba(im0)
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        ValueError,
    ) as exc:
        raise DecodeError(f"cannot decode image: {exc}") from exc
    return np.array(im, dtype=np.uint8)


def decode_bitmap(data: bytes) -> U8Bitmap:
    """Decode image bytes to uint8 [H,W,4] RGBA. Raises DecodeError."""
    return _open_rgba(io.BytesIO(data))


def load_bitmap(path: Path) -> U8Bitmap:
    """Load an image file to uint8 [H,W,4] RGBA. Raises DecodeError."""
    path = Path(path)
    if not path.is_file():
        raise DecodeError(f"not found: {path}")
    return _open_rgba(path)


def render_grid(
    grid: PixelGrid,
    cell_px: int = EXPORT_CELL_PX,
    background: Optional[Union[str, RGBTuple]] = None,
) -> Image.Image:
    """
    Paint each opaque cell as a cell_px square block.

    Transparent cells stay fully transparent, or take `background` when given.
    Returns an RGBA Pillow image of side grid.size * cell_px.
    """
    if cell_px < 1:
        raise ValueError(f"cell_px must be >= 1, got {cell_px}")
    rgba = np.zeros((grid.size, grid.size, 4), dtype=np.uint8)
    rgba[..., :3] = grid.rgb
    rgba[..., 3] = grid.alpha
    if background is not None:
        bg = coerce_color(background)
        if bg is not None:
            empty = rgba[..., 3] == 0
            rgba[empty, :3] = bg
            rgba[empty, 3] = 255
    blocks = np.repeat(np.repeat(rgba, cell_px, axis=0), cell_px, axis=1)
    return Image.fromarray(blocks)


def export_png(
    path: Path,
    grid: PixelGrid,
    cell_px: int = EXPORT_CELL_PX,
    background: Optional[Union[str, RGBTuple]] = None,
) -> Path:
    path = Path(path)
    if path.suffix.lower() != ".png":
        path = path.with_suffix(".png")
    render_grid(grid, cell_px, background).save(path, format="PNG")
    return path


__all__ = [
    "decode_bitmap",
    "load_bitmap",
    "render_grid",
    "export_png",
]
