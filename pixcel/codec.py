# pixcel/codec.py
from __future__ import annotations

"""
Project file encode/decode.

Format (UTF-8 JSON):
  {"gridSize": N, "pixels": [[cell, ...] * N] * N, "timestamp": ms}
  cell = "#rrggbb" | "transparent"

There is no format version field. Decoding builds a fresh grid and either
returns it complete or raises MalformedProject.
"""

import json
import time
from pathlib import Path
from typing import Any, Optional, Union

from .constants import (
    PROJECT_CELLS_KEY,
    PROJECT_SIZE_KEY,
    PROJECT_TIMESTAMP_KEY,
    TRANSPARENT_LITERAL,
)
from .core_types import TRANSPARENT, hex_to_rgb, is_hex6
from .errors import MalformedProject
from .grid import PixelGrid


def encode_project(grid: PixelGrid, timestamp: Optional[int] = None) -> bytes:
    """Serialise a grid. timestamp defaults to now in epoch milliseconds."""
    if timestamp is None:
        timestamp = int(time.time() * 1000)
    record = {
        PROJECT_CELLS_KEY: grid.to_rows(),
        PROJECT_SIZE_KEY: grid.size,
        PROJECT_TIMESTAMP_KEY: int(timestamp),
    }
    return json.dumps(record, separators=(",", ":")).encode("utf-8")


def _parse_record(data: Union[bytes, str]) -> Any:
    try:
        text = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
        return json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
        raise MalformedProject(f"not a JSON project: {exc}") from exc


def decode_project(data: Union[bytes, str]) -> PixelGrid:
    """Parse project bytes into a new grid."""
    record = _parse_record(data)
    if not isinstance(record, dict):
        raise MalformedProject("project must be a JSON object")

    size = record.get(PROJECT_SIZE_KEY)
    if not isinstance(size, int) or isinstance(size, bool) or size < 1:
        raise MalformedProject(
            f"{PROJECT_SIZE_KEY} must be a positive int, got {size!r}"
        )

    rows = record.get(PROJECT_CELLS_KEY)
    if not isinstance(rows, list) or len(rows) != size:
        raise MalformedProject(f"{PROJECT_CELLS_KEY} must be a list of {size} rows")

    grid = PixelGrid(size)
    for r, row in enumerate(rows):
        if not isinstance(row, list) or len(row) != size:
            raise MalformedProject(f"row {r} must be a list of {size} cells")
        for c, token in enumerate(row):
            if token == TRANSPARENT_LITERAL:
                grid.set(r, c, TRANSPARENT)
            elif is_hex6(token):
                grid.set(r, c, hex_to_rgb(token))
            else:
                raise MalformedProject(f"bad cell at ({r}, {c}): {token!r}")
    return grid


def save_project(path: Path, grid: PixelGrid, timestamp: Optional[int] = None) -> Path:
    path = Path(path)
    path.write_bytes(encode_project(grid, timestamp))
    return path


def load_project(path: Path) -> PixelGrid:
    return decode_project(Path(path).read_bytes())


__all__ = ["encode_project", "decode_project", "save_project", "load_project"]
