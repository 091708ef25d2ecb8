# badge_bitmap/__init__.py
"""
badge_bitmap package.

Purpose:
  Turn raster images into 1-bit bitmaps for monochrome e-ink/LED badges.
  See badge_image.py for the CLI.

Public API:
  resolve_dimensions : 'profile' | 'splash' | '<W>x<H>' -> Dimensions.
  parse_ratio        : custom '<W>x<H>' parsing.
  load_image_rgb     : decode an image file to an RGB array.
  image_to_bitmap    : resize, dither and pack to the badge's 1bpp layout.
  pack_bits / unpack_bits : column-major, MSB-first bit packing.
  emit               : write rice / bin / base64 output per ConvertConfig.
  render_preview     : ASCII preview of a packed bitmap.

Quick start:
  from badge_bitmap import resolve_dimensions, load_image_rgb, image_to_bitmap
  dims = resolve_dimensions("splash")
  data = image_to_bitmap(load_image_rgb("badge.png"), dims)
"""

__version__ = "0.1.0"

from . import core_types
from . import errors
from . import utils

from .bitmap import image_to_bitmap, pack_bits, unpack_bits
from .core_types import OUT_MODES, ConvertConfig, Dimensions
from .dither import black_mask, dither_bw, render_pixels
from .emit import emit, encode_base64, format_go_source, output_path
from .errors import (
    BadgeBitmapError,
    ConfigError,
    DimensionError,
    InputError,
    OutputError,
    RatioParseError,
)
from .image_io import load_image_rgb, resize_nearest
from .preview import print_preview, render_preview
from .ratio import PRESETS, parse_ratio, resolve_dimensions

__all__ = [
    "__version__",
    "core_types",
    "errors",
    "utils",
    "OUT_MODES",
    "ConvertConfig",
    "Dimensions",
    "PRESETS",
    "parse_ratio",
    "resolve_dimensions",
    "load_image_rgb",
    "resize_nearest",
    "dither_bw",
    "black_mask",
    "render_pixels",
    "image_to_bitmap",
    "pack_bits",
    "unpack_bits",
    "emit",
    "encode_base64",
    "format_go_source",
    "output_path",
    "render_preview",
    "print_preview",
    "BadgeBitmapError",
    "ConfigError",
    "RatioParseError",
    "DimensionError",
    "InputError",
    "OutputError",
]
