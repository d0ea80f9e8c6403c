#!/usr/bin/env python3
"""
pixcel command line.

Usage:
  pixcel convert IMAGE [--out PROJECT.json] [--png OUT.png] --size N --colors K
                 --contrast C --dither D --mode [standard|dithered|edge]
                 --resample [nearest|bilinear|bicubic|lanczos] --scale PX --debug
  pixcel render PROJECT.json [--out OUT.png] --scale PX --background #RRGGBB
  pixcel info PROJECT.json

Outputs default to <stem>_pixcel.json / <stem>_pixcel.png next to the input.
Exit status 2 on unreadable input or invalid parameters.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from .codec import load_project, save_project
from .constants import (
    EXPORT_CELL_PX,
    REDUCE_CONTRAST_DEFAULT,
    REDUCE_DITHER_DEFAULT,
    REDUCE_PALETTE_DEFAULT,
    REDUCE_RESAMPLE_DEFAULT,
    REDUCE_SIZE_DEFAULT,
    RESAMPLE_CHOICES,
)
from .convert import MODES, ReductionParameters, reduce_image
from .errors import InvalidParameters, PixcelError
from .grid import PixelGrid
from .image_io import export_png, load_bitmap
from .utils import (
    colour_usage_report,
    debug_log,
    enable_line_buffered_stdout,
    error,
    format_seconds_compact,
    key_value_pairs_to_string,
    log,
    print_banner,
    print_config_line,
    warn,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixcel",
        description="Convert photos to pixel-art grids and render project files.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    conv = sub.add_parser("convert", help="Convert an image into a pixel grid")
    conv.add_argument("src", type=Path, help="Input image")
    conv.add_argument("--out", type=Path, default=None, help="Project JSON path")
    conv.add_argument("--png", type=Path, default=None, help="PNG export path")
    conv.add_argument("--no-png", action="store_true", help="Skip the PNG export")
    conv.add_argument(
        "--size", type=int, default=REDUCE_SIZE_DEFAULT, help="Grid side (16..64)"
    )
    conv.add_argument(
        "--colors",
        type=int,
        default=REDUCE_PALETTE_DEFAULT,
        help="Palette size (4..32)",
    )
    conv.add_argument(
        "--contrast",
        type=int,
        default=REDUCE_CONTRAST_DEFAULT,
        help="Contrast percent (50..200, 100 = unchanged)",
    )
    conv.add_argument(
        "--dither",
        type=int,
        default=REDUCE_DITHER_DEFAULT,
        help="Dither strength percent (0..100), dithered mode only",
    )
    conv.add_argument("--mode", choices=list(MODES), default="standard")
    conv.add_argument(
        "--resample", choices=list(RESAMPLE_CHOICES), default=REDUCE_RESAMPLE_DEFAULT
    )
    conv.add_argument(
        "--scale", type=int, default=EXPORT_CELL_PX, help="PNG pixels per cell"
    )
    conv.add_argument("--debug", action="store_true", help="Verbose stage details")

    rend = sub.add_parser("render", help="Render a project file to PNG")
    rend.add_argument("project", type=Path, help="Project JSON")
    rend.add_argument("--out", type=Path, default=None, help="PNG path")
    rend.add_argument(
        "--scale", type=int, default=EXPORT_CELL_PX, help="PNG pixels per cell"
    )
    rend.add_argument(
        "--background", default=None, help="Fill for transparent cells (#RRGGBB)"
    )

    info = sub.add_parser("info", help="Summarise a project file")
    info.add_argument("project", type=Path, help="Project JSON")
    return parser


def _check_scale(scale: int) -> None:
    if scale < 1:
        raise InvalidParameters(f"scale must be >= 1, got {scale}")


def _report_grid(grid: PixelGrid) -> None:
    log(
        key_value_pairs_to_string(
            [
                ("Size", f"{grid.size}x{grid.size}"),
                ("Opaque cells", grid.opaque_count()),
                ("Colours", len(grid.distinct_colors())),
            ]
        )
    )
    log("Colours used:")
    for hex_code, count in colour_usage_report(grid):
        log(f"  {hex_code}: {count:,}")


def _cmd_convert(args: argparse.Namespace) -> None:
    t_start = time.perf_counter()
    src: Path = args.src
    print_banner(src.name)

    params = ReductionParameters(
        target_size=args.size,
        palette_size=args.colors,
        contrast_percent=args.contrast,
        dither_strength=args.dither,
        mode=args.mode,
        resample=args.resample,
    ).validate()
    if not args.no_png:
        _check_scale(args.scale)
    print_config_line(
        "convert",
        [
            ("Size", params.target_size),
            ("Colours", params.palette_size),
            ("Contrast", params.contrast_percent),
            ("Dither", params.dither_strength),
            ("Mode", params.mode),
        ],
        debug=args.debug,
    )

    bitmap = load_bitmap(src)
    if args.debug:
        debug_log(f"Loaded {bitmap.shape[1]}x{bitmap.shape[0]}")
    grid = reduce_image(bitmap, params, debug=args.debug)

    out_json = args.out or src.with_name(f"{src.stem}_pixcel.json")
    save_project(out_json, grid)
    log(f"Wrote {out_json.name}")
    if args.no_png and args.png:
        warn("--png ignored with --no-png")
    if not args.no_png:
        out_png = args.png or src.with_name(f"{src.stem}_pixcel.png")
        out_png = export_png(out_png, grid, args.scale)
        log(f"Wrote {out_png.name} | scale={args.scale}px")

    _report_grid(grid)
    log(f"Total time {format_seconds_compact(time.perf_counter() - t_start)}")


def _cmd_render(args: argparse.Namespace) -> None:
    _check_scale(args.scale)
    grid = load_project(args.project)
    out_png = args.out or args.project.with_suffix(".png")
    out_png = export_png(out_png, grid, args.scale, args.background)
    log(f"Wrote {out_png.name} | size={grid.size * args.scale}px")


def _cmd_info(args: argparse.Namespace) -> None:
    print_banner(args.project.name)
    _report_grid(load_project(args.project))


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit status."""
    enable_line_buffered_stdout()
    args = build_parser().parse_args(argv)
    handlers = {"convert": _cmd_convert, "render": _cmd_render, "info": _cmd_info}
    try:
        handlers[args.command](args)
    except FileNotFoundError as exc:
        error(f"not found: {exc.filename}")
        return 2
    except (PixcelError, ValueError) as exc:
        error(str(exc))
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
