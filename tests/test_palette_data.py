"""
Tests for swatches and preset palettes.
"""

import pytest

from pixcel.core_types import is_hex6
from pixcel.palette_data import COLOR_SCHEMES, DEFAULT_COLORS, Swatches


def test_presets_are_valid_hex():
    assert len(DEFAULT_COLORS) == 40
    assert all(is_hex6(c) for c in DEFAULT_COLORS)
    assert set(COLOR_SCHEMES) == {"pastel", "neon", "earth", "ocean", "sunset", "forest"}
    for colors in COLOR_SCHEMES.values():
        assert len(colors) == 8
        assert all(is_hex6(c) for c in colors)


def test_recent_colours_most_recent_first_without_duplicates():
    sw = Swatches()
    sw.select("#ff0000")
    sw.select("#00FF00")
    sw.select("#FF0000")
    assert sw.current == "#FF0000"
    assert sw.recent == ["#00FF00", "#FF0000"]
    assert sw.current_rgb == (255, 0, 0)


def test_recent_colours_capped():
    sw = Swatches()
    for i in range(20):
        sw.select(f"#0000{i:02X}")
    assert len(sw.recent) == 12
    assert sw.recent[0] == "#000013"


def test_enter_hex_only_accepts_full_codes():
    sw = Swatches()
    assert not sw.enter_hex("#12")
    assert sw.current == "#000000"
    assert sw.enter_hex(" #abcdef ")
    assert sw.current == "#ABCDEF"


def test_select_rejects_garbage():
    with pytest.raises(ValueError):
        Swatches().select("blue")


def test_custom_colours():
    sw = Swatches()
    sw.select("#123456")
    sw.add_custom()
    sw.add_custom()
    assert sw.custom == ["#123456"]
    sw.remove_custom("#123456")
    assert sw.custom == []
