# pixcel/palette_data.py
from __future__ import annotations

"""
Swatch definitions and the swatch panel state.

Exports:
  DEFAULT_COLORS: list[str]              # 40 preset '#RRGGBB' swatches
  COLOR_SCHEMES: dict[str, list[str]]    # named 8-colour schemes
  Swatches                               # current colour, recent + custom lists
"""

from dataclasses import dataclass, field
from typing import Dict, List

from .constants import DEFAULT_COLOR, RECENT_COLORS_MAX
from .core_types import RGBTuple, hex_to_rgb, is_hex6


DEFAULT_COLORS: List[str] = [
    "#000000",
    "#FFFFFF",
    "#808080",
    "#C0C0C0",
    "#FF0000",
    "#FF6B6B",
    "#FF8787",
    "#FFA5A5",
    "#FFA500",
    "#FFB84D",
    "#FFC266",
    "#FFD699",
    "#FFFF00",
    "#FFFF66",
    "#FFFF99",
    "#FFFFCC",
    "#00FF00",
    "#66FF66",
    "#99FF99",
    "#CCFFCC",
    "#00FFFF",
    "#66FFFF",
    "#99FFFF",
    "#CCFFFF",
    "#0000FF",
    "#6B6BFF",
    "#8787FF",
    "#A5A5FF",
    "#FF00FF",
    "#FF66FF",
    "#FF99FF",
    "#FFCCFF",
    "#800080",
    "#A020F0",
    "#9370DB",
    "#DDA0DD",
    "#A52A2A",
    "#CD853F",
    "#D2691E",
    "#F4A460",
]

COLOR_SCHEMES: Dict[str, List[str]] = {
    "pastel": ["#FFB3BA", "#FFDFBA", "#FFFFBA", "#BAFFC9", "#BAE1FF", "#E0BBE4", "#FFDFD3", "#FEC8D8"],
    "neon": ["#FF006E", "#FB5607", "#FFBE0B", "#8338EC", "#3A86FF", "#06FFA5", "#FF006E", "#FFBE0B"],
    "earth": ["#8B4513", "#A0522D", "#CD853F", "#DEB887", "#D2691E", "#BC8F8F", "#F4A460", "#DAA520"],
    "ocean": ["#006994", "#0582CA", "#00A6FB", "#0091D5", "#41EAD4", "#B1F8F2", "#7FCDCD", "#5AB9EA"],
    "sunset": ["#FF6B35", "#F7931E", "#FDC830", "#F37335", "#FF5E5B", "#D62828", "#F77F00", "#FCBF49"],
    "forest": ["#2D6A4F", "#40916C", "#52B788", "#74C69D", "#95D5B2", "#B7E4C7", "#D8F3DC", "#1B4332"],
}  # fmt: skip


@dataclass
class Swatches:
    """Current colour plus a most-recent-first history and user custom colours."""

    current: str = DEFAULT_COLOR
    recent: List[str] = field(default_factory=list)
    custom: List[str] = field(default_factory=list)
    recent_max: int = RECENT_COLORS_MAX

    @property
    def current_rgb(self) -> RGBTuple:
        return hex_to_rgb(self.current)

    def select(self, color: str) -> None:
        """Make color current and remember it in the recent list."""
        if not is_hex6(color):
            raise ValueError(f"expected '#RRGGBB', got {color!r}")
        color = color.upper()
        self.current = color
        if color not in self.recent:
            self.recent = [color] + self.recent[: self.recent_max - 1]

    def enter_hex(self, text: str) -> bool:
        """Typed hex input: select when it is a full '#RRGGBB', else ignore."""
        value = text.strip().upper()
        if not is_hex6(value):
            return False
        self.select(value)
        return True

    def add_custom(self) -> None:
        if self.current not in self.custom:
            self.custom.append(self.current)

    def remove_custom(self, color: str) -> None:
        self.custom = [c for c in self.custom if c != color.upper()]


__all__ = ["DEFAULT_COLORS", "COLOR_SCHEMES", "Swatches"]
