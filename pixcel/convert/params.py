# pixcel/convert/params.py
from __future__ import annotations

"""
Conversion parameters and their bounds.

Exports:
- ConversionMode: Literal["standard", "dithered", "edge"]
- ReductionParameters: frozen value object, validate() raises InvalidParameters
"""

from dataclasses import dataclass
from typing import List, Literal

from ..constants import (
    RESAMPLE_CHOICES,
    REDUCE_CONTRAST_DEFAULT,
    REDUCE_CONTRAST_MAX,
    REDUCE_CONTRAST_MIN,
    REDUCE_DITHER_DEFAULT,
    REDUCE_DITHER_MAX,
    REDUCE_DITHER_MIN,
    REDUCE_PALETTE_DEFAULT,
    REDUCE_PALETTE_MAX,
    REDUCE_PALETTE_MIN,
    REDUCE_RESAMPLE_DEFAULT,
    REDUCE_SIZE_DEFAULT,
    REDUCE_SIZE_MAX,
    REDUCE_SIZE_MIN,
)
from ..errors import InvalidParameters

ConversionMode = Literal["standard", "dithered", "edge"]
MODES = ("standard", "dithered", "edge")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class ReductionParameters:
    """
    Inputs to reduce_image().

    target_size      : output grid side, 16..64
    palette_size     : max palette entries, 4..32
    contrast_percent : 50..200, 100 = unchanged
    dither_strength  : 0..100, only used in "dithered" mode
    mode             : "standard" | "dithered" | "edge"
    resample         : Pillow filter name for the shrink step
    """

    target_size: int = REDUCE_SIZE_DEFAULT
    palette_size: int = REDUCE_PALETTE_DEFAULT
    contrast_percent: int = REDUCE_CONTRAST_DEFAULT
    dither_strength: int = REDUCE_DITHER_DEFAULT
    mode: ConversionMode = "standard"
    resample: str = REDUCE_RESAMPLE_DEFAULT

    def problems(self) -> List[str]:
        """Human-readable list of bound violations (empty when valid)."""
        out: List[str] = []
        bounds = (
            ("target_size", self.target_size, REDUCE_SIZE_MIN, REDUCE_SIZE_MAX),
            ("palette_size", self.palette_size, REDUCE_PALETTE_MIN, REDUCE_PALETTE_MAX),
            (
                "contrast_percent",
                self.contrast_percent,
                REDUCE_CONTRAST_MIN,
                REDUCE_CONTRAST_MAX,
            ),
            (
                "dither_strength",
                self.dither_strength,
                REDUCE_DITHER_MIN,
                REDUCE_DITHER_MAX,
            ),
        )
        for name, value, lo, hi in bounds:
            if not _is_int(value):
                out.append(f"{name} must be an int, got {value!r}")
            elif not lo <= value <= hi:
                out.append(f"{name}={value} outside [{lo}, {hi}]")
        if self.mode not in MODES:
            out.append(f"mode={self.mode!r} not one of {', '.join(MODES)}")
        if self.resample not in RESAMPLE_CHOICES:
            out.append(
                f"resample={self.resample!r} not one of {', '.join(RESAMPLE_CHOICES)}"
            )
        return out

    def validate(self) -> "ReductionParameters":
        issues = self.problems()
        if issues:
            raise InvalidParameters("; ".join(issues))
        return self


__all__ = ["ConversionMode", "MODES", "ReductionParameters"]
