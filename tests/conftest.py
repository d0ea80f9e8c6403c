"""
Shared fixtures for the pixcel test suite.
"""

import numpy as np
import pytest

from pixcel.grid import PixelGrid

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def noise_bitmap(rng):
    """Opaque 80x60 RGBA noise image."""
    rgba = rng.integers(0, 256, size=(60, 80, 4), dtype=np.uint8)
    rgba[..., 3] = 255
    return rgba


def solid_bitmap(height, width, rgb, alpha=255):
    out = np.zeros((height, width, 4), dtype=np.uint8)
    out[..., :3] = rgb
    out[..., 3] = alpha
    return out


def filled_grid(size, color):
    grid = PixelGrid(size)
    for r in range(size):
        for c in range(size):
            grid.set(r, c, color)
    return grid


def changed_cells(before, after):
    return sum(
        1
        for r in range(before.size)
        for c in range(before.size)
        if before.get(r, c) != after.get(r, c)
    )
