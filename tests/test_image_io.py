"""
Tests for bitmap decoding and PNG export.
"""

import io

import numpy as np
import pytest
from PIL import Image

from pixcel.errors import DecodeError
from pixcel.grid import PixelGrid
from pixcel.image_io import decode_bitmap, export_png, load_bitmap, render_grid

from conftest import BLUE, RED


def _png_bytes(mode, size, color):
    buf = io.BytesIO()
    Image.new(mode, size, color).save(buf, format="PNG")
    return buf.getvalue()


def test_decode_rgb_png_to_rgba():
    bitmap = decode_bitmap(_png_bytes("RGB", (5, 3), (10, 20, 30)))
    assert bitmap.shape == (3, 5, 4)
    assert bitmap.dtype == np.uint8
    assert bitmap[0, 0].tolist() == [10, 20, 30, 255]


def test_decode_keeps_alpha():
    bitmap = decode_bitmap(_png_bytes("RGBA", (2, 2), (1, 2, 3, 40)))
    assert np.all(bitmap[..., 3] == 40)


def test_decode_garbage():
    with pytest.raises(DecodeError):
        decode_bitmap(b"definitely not an image")


def test_decode_oversized_image(monkeypatch):
    data = _png_bytes("RGB", (100, 100), (0, 0, 0))
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)
    with pytest.raises(DecodeError):
        decode_bitmap(data)


def test_load_missing_file(tmp_path):
    with pytest.raises(DecodeError):
        load_bitmap(tmp_path / "missing.png")


def test_load_file(tmp_path):
    path = tmp_path / "in.png"
    path.write_bytes(_png_bytes("RGB", (4, 4), (9, 9, 9)))
    assert load_bitmap(path).shape == (4, 4, 4)


def test_render_blocks():
    grid = PixelGrid(2)
    grid.set(0, 0, RED)
    grid.set(1, 1, BLUE)
    im = render_grid(grid, cell_px=3)
    assert im.size == (6, 6)
    assert im.mode == "RGBA"
    arr = np.array(im)
    assert np.all(arr[:3, :3] == (255, 0, 0, 255))
    assert np.all(arr[3:, 3:] == (0, 0, 255, 255))
    assert np.all(arr[:3, 3:, 3] == 0)


def test_render_background_fill():
    grid = PixelGrid(2)
    grid.set(0, 0, RED)
    arr = np.array(render_grid(grid, cell_px=1, background="#ffffff"))
    assert arr[0, 0].tolist() == [255, 0, 0, 255]
    assert arr[1, 1].tolist() == [255, 255, 255, 255]


def test_render_rejects_bad_scale():
    with pytest.raises(ValueError):
        render_grid(PixelGrid(1), cell_px=0)


def test_export_png_forces_suffix(tmp_path):
    grid = PixelGrid(4)
    grid.set(2, 1, RED)
    path = export_png(tmp_path / "art.bmp", grid, cell_px=20)
    assert path.suffix == ".png"
    with Image.open(path) as im:
        assert im.size == (80, 80)
        assert im.getpixel((25, 45)) == (255, 0, 0, 255)
