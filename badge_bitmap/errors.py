# badge_bitmap/errors.py
"""
Exception types raised by the conversion pipeline.

Library code raises; only the CLI entry point turns these into an exit status.
"""


class BadgeBitmapError(Exception):
    """Base class for every error the converter reports."""


class ConfigError(BadgeBitmapError, ValueError):
    """Bad option value (unknown outmode, bad ratio, unaligned height)."""


class RatioParseError(ConfigError):
    """Ratio token is not a preset and not '<W>x<H>'."""


class DimensionError(ConfigError):
    """Dimensions the 1bpp packing cannot handle."""


class InputError(BadgeBitmapError, OSError):
    """Input image is missing or cannot be decoded."""


class OutputError(BadgeBitmapError, OSError):
    """An output file could not be written."""


__all__ = [
    "BadgeBitmapError",
    "ConfigError",
    "RatioParseError",
    "DimensionError",
    "InputError",
    "OutputError",
]
