# pixcel/core_types.py
from __future__ import annotations

"""
Core type aliases, the transparent sentinel, and lightweight colour helpers.
"""

import re
from typing import Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

# Basic aliases

RGBTuple = Tuple[int, int, int]
HexStr = str

# A cell colour: an opaque RGB triple, or TRANSPARENT.
Color = Optional[RGBTuple]
TRANSPARENT: Color = None

U8Image = NDArray[np.uint8]  # (H, W, 3)
U8Mask = NDArray[np.uint8]  # (H, W)
U8Bitmap = NDArray[np.uint8]  # (H, W, 4) RGBA

_HEX6 = re.compile(r"#[0-9a-fA-F]{6}")


# Small helpers


def is_hex6(text: str) -> bool:
    """True for exactly '#rrggbb' (either case)."""
    return isinstance(text, str) and _HEX6.fullmatch(text) is not None


def rgb_to_hex(rgb: RGBTuple) -> HexStr:
    """RGB tuple to lowercase hex string '#rrggbb'."""
    return f"#{rgb[0]:02x}{rgb[1]:02x}{rgb[2]:02x}"


def hex_to_rgb(hex_str: str) -> RGBTuple:
    """Parse '#rgb' or '#rrggbb' (case-insensitive) into an RGB tuple."""
    s = hex_str.strip().lower()
    if not s.startswith("#"):
        raise ValueError("hex must start with '#'")
    if len(s) == 4:
        r, g, b = s[1], s[2], s[3]
        s = f"#{r}{r}{g}{g}{b}{b}"
    if len(s) != 7:
        raise ValueError("hex must be '#rrggbb' or '#rgb'")
    return (int(s[1:3], 16), int(s[3:5], 16), int(s[5:7], 16))


def coerce_color(value: Union[Color, str, Sequence[int]]) -> Color:
    """
    Normalise a user-supplied colour to a Color.

    Accepts TRANSPARENT, the literal "transparent", a hex string, or any
    3-length sequence / array of 0..255 ints.
    """
    if value is None:
        return TRANSPARENT
    if isinstance(value, str):
        if value.strip().lower() == "transparent":
            return TRANSPARENT
        return hex_to_rgb(value)
    if isinstance(value, np.ndarray):
        value = value.tolist()
    if len(value) != 3:
        raise ValueError(f"colour must have 3 channels, got {len(value)}")
    out = tuple(int(c) for c in value)
    for c in out:
        if not 0 <= c <= 255:
            raise ValueError(f"channel out of range 0..255: {c}")
    return out  # type: ignore[return-value]


def color_to_token(color: Color) -> str:
    """Serialised form of a cell: '#rrggbb' or 'transparent'."""
    return "transparent" if color is None else rgb_to_hex(color)


def assert_u8_bitmap(image: np.ndarray) -> U8Bitmap:
    """Validate a uint8 (H,W,3 or 4) image and return it typed as RGBA."""
    if (
        not isinstance(image, np.ndarray)
        or image.dtype != np.uint8
        or image.ndim != 3
        or image.shape[-1] not in (3, 4)
    ):
        raise TypeError("expected uint8 (H,W,3/4) image")
    if image.shape[-1] == 4:
        return image  # type: ignore[return-value]
    out = np.full(image.shape[:2] + (4,), 255, dtype=np.uint8)
    out[..., :3] = image
    return out


__all__ = [
    "RGBTuple",
    "HexStr",
    "Color",
    "TRANSPARENT",
    "U8Image",
    "U8Mask",
    "U8Bitmap",
    "is_hex6",
    "rgb_to_hex",
    "hex_to_rgb",
    "coerce_color",
    "color_to_token",
    "assert_u8_bitmap",
]
