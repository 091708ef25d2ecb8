#!/usr/bin/env python3
"""
badge_image.py
Convert an image into a 1-bit bitmap for a monochrome e-ink/LED badge.

Usage:
  python badge_image.py INPUT -outmode [rice|bin|base64|none] -ratio [profile|splash|<W>x<H>]
                        [-disable-dithering] [-show] [--outdir DIR] [--debug]

Ratios:
  profile : 120x128
  splash  : 246x128
  WxH     : custom size; height must be a multiple of 8

Outmodes:
  rice   : <ratio>-generated.go with a []byte literal named r<ratio>
  bin    : <ratio>.bin with the raw bytes
  base64 : base64 string on stdout
  none   : no output; pair with -show

Notes:
  Pixels are packed one bit each, black=1, walking columns left to right and
  each column top to bottom, MSB first.
  Logs, errors and the -show preview go to stderr so base64 output can be piped.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, NoReturn, Optional

from badge_bitmap.bitmap import image_to_bitmap
from badge_bitmap.core_types import OUT_MODES, ConvertConfig
from badge_bitmap.emit import emit, output_path
from badge_bitmap.errors import BadgeBitmapError, DimensionError, OutputError
from badge_bitmap.image_io import load_image_rgb
from badge_bitmap.preview import print_preview
from badge_bitmap.ratio import resolve_dimensions
from badge_bitmap.utils import (
    debug_log,
    error,
    format_seconds_compact,
    key_value_pairs_to_string,
    log,
    print_config_line,
    warn,
)

PROG = "badge_image"

# CLI args & small helpers


class _BadgeArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that prints full help and exits 1 on misuse."""

    def error(self, message: str) -> NoReturn:
        self.print_help(sys.stderr)
        self.exit(1, f"\n{self.prog}: error: {message}\n")


def _examples(prog: str) -> str:
    return (
        "Examples:\n"
        f"  {prog} -outmode bin -ratio splash tainigo_128.png\n"
        f"  {prog} -outmode rice -ratio 128x128 -disable-dithering -show image.jpg\n"
        f"  {prog} -outmode base64 -ratio profile avatar.png > avatar.b64\n"
    )


def build_parser() -> argparse.ArgumentParser:
    """
    CLI parser. Parsed namespace has:
      input: Path to the source image
      outmode: "rice" | "bin" | "base64" | "none"
      ratio: preset name or "<W>x<H>"
      disable_dithering, show, debug: bool
      outdir: optional Path for rice/bin files
    """
    parser = _BadgeArgumentParser(
        prog=PROG,
        description="Convert an image to a 1-bit bitmap for a monochrome badge display.",
        epilog=_examples(PROG),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("input", type=Path, help="Input image (PNG, JPEG, BMP, WebP, ...)")
    parser.add_argument(
        "-outmode",
        "--outmode",
        dest="outmode",
        choices=list(OUT_MODES),
        required=True,
        help="Output mode: rice, bin, base64, or none.",
    )
    parser.add_argument(
        "-ratio",
        "--ratio",
        dest="ratio",
        required=True,
        help="Target size: 'profile' (120x128), 'splash' (246x128), or <W>x<H>.",
    )
    parser.add_argument(
        "-disable-dithering",
        "--disable-dithering",
        dest="disable_dithering",
        action="store_true",
        help="Skip Floyd-Steinberg dithering; only pure black pixels are set.",
    )
    parser.add_argument(
        "-show",
        "--show",
        dest="show",
        action="store_true",
        help="Paint dot-matrix style art of the result to stderr.",
    )
    parser.add_argument(
        "--outdir",
        type=Path,
        default=None,
        help="Directory for rice/bin output files (default: current directory)",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose details on stderr")
    return parser


def build_config(args: argparse.Namespace) -> ConvertConfig:
    """Validate ratio and outmode into an immutable config. Touches no files."""
    dims = resolve_dimensions(args.ratio)
    return ConvertConfig(
        ratio=args.ratio,
        dims=dims,
        out_mode=args.outmode,
        dither=not args.disable_dithering,
        show=args.show,
        outdir=args.outdir,
        debug=args.debug,
        generator=PROG,
    )


# Conversion


def convert_file(src: Path, config: ConvertConfig) -> bytes:
    """
    Process one image end-to-end:
      load -> resize -> dither -> pack -> emit -> optional preview.
    Returns the packed bitmap.
    """
    t_start = time.perf_counter()
    debug = config.debug

    rgb = load_image_rgb(src)
    t_loaded = time.perf_counter()
    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Loaded", f"{rgb.shape[1]}x{rgb.shape[0]}"),
                    ("Target", str(config.dims)),
                    ("Dither", config.dither),
                ]
            )
        )

    data = image_to_bitmap(rgb, config.dims, dither=config.dither)
    t_packed = time.perf_counter()
    if debug:
        on_bits = sum(bin(b).count("1") for b in data)
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Bytes", len(data)),
                    ("Black pixels", on_bits),
                    ("Pack time", format_seconds_compact(t_packed - t_loaded)),
                ]
            )
        )

    dst = output_path(config)
    if dst is not None:
        if config.outdir is not None:
            try:
                config.outdir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise OutputError(f"could not create {config.outdir}: {e}") from e
        if dst.exists():
            warn(f"overwriting {dst}")
    written = emit(config, data)
    t_emitted = time.perf_counter()

    if written is not None:
        log(f"Wrote {written} | size={config.dims} | bytes={len(data):,}")

    if config.show:
        print_preview(data, config.dims)

    if debug:
        debug_log(
            f"Total {format_seconds_compact(t_emitted - t_start)}  "
            f"(load={format_seconds_compact(t_loaded - t_start)}, "
            f"pack={format_seconds_compact(t_packed - t_loaded)}, "
            f"emit={format_seconds_compact(t_emitted - t_packed)})"
        )
    return data


# Entry point


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point. Returns the process exit status.

    Option values are validated before the input image is opened, so a bad
    ratio or height never leaves partial output behind.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = build_config(args)
    except DimensionError as e:
        error(str(e))
        return 1
    except BadgeBitmapError as e:
        error(str(e))
        parser.print_help(sys.stderr)
        return 1

    if config.debug:
        print_config_line(
            "run",
            [
                ("Input", str(args.input)),
                ("Ratio", config.ratio),
                ("Size", str(config.dims)),
                ("Outmode", config.out_mode),
                ("Dither", config.dither),
                ("Show", config.show),
            ],
        )

    try:
        convert_file(args.input, config)
    except BadgeBitmapError as e:
        error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
