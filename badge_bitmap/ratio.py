# badge_bitmap/ratio.py
from __future__ import annotations

"""
Target size resolution.

Exports:
  PRESETS: dict[str, Dimensions]
  parse_ratio(token, *, duplicate_first_field=False) -> Dimensions
  resolve_dimensions(token, *, duplicate_first_field=False) -> Dimensions

Notes:
  Custom sizes are '<W>x<H>' (the 'x' is case-insensitive).
  Older builds of the badge tool read both numbers from the first field, so
  '64x32' came out as 64x64. duplicate_first_field=True keeps that reading.
"""

import re
from typing import Dict

from .core_types import Dimensions
from .errors import DimensionError, RatioParseError

PRESETS: Dict[str, Dimensions] = {
    "profile": Dimensions(120, 128),
    "splash": Dimensions(246, 128),
}

_DECIMAL = re.compile(r"[0-9]+")


def _parse_field(text: str, axis: str) -> int:
    if not _DECIMAL.fullmatch(text):
        raise RatioParseError(f"could not parse {axis} coordinate count: {text!r}")
    value = int(text)
    if value <= 0:
        raise DimensionError(f"{axis} coordinate count must be positive")
    return value


def parse_ratio(token: str, *, duplicate_first_field: bool = False) -> Dimensions:
    """
    Parse '<W>x<H>' into Dimensions.

    Raises RatioParseError unless the token splits into exactly two
    decimal integer fields.
    """
    fields = token.lower().split("x")
    if len(fields) != 2:
        raise RatioParseError(f"invalid ratio string provided: {token!r}")
    width = _parse_field(fields[0], "x")
    height = _parse_field(fields[0] if duplicate_first_field else fields[1], "y")
    return Dimensions(width, height)


def resolve_dimensions(
    token: str, *, duplicate_first_field: bool = False
) -> Dimensions:
    """Preset or custom ratio, checked for byte-aligned height."""
    if not token:
        raise RatioParseError("a ratio must be provided")
    preset = PRESETS.get(token)
    if preset is not None:
        return preset
    dims = parse_ratio(token, duplicate_first_field=duplicate_first_field)
    return dims.require_byte_aligned()


__all__ = ["PRESETS", "parse_ratio", "resolve_dimensions"]
