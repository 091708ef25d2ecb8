# badge_bitmap/preview.py
from __future__ import annotations

"""
Dot-matrix style terminal preview of a packed bitmap.

Goes to stderr by default so base64 output on stdout stays pipeable.
"""

import sys
from typing import List, Optional, TextIO

from .bitmap import unpack_bits
from .core_types import Dimensions


def render_preview(data: bytes, dims: Dimensions, on: str = "*", off: str = " ") -> str:
    """One text line per display row; `on` for set bits, `off` for clear ones."""
    mask = unpack_bits(data, dims)
    lines: List[str] = []
    for row in mask:
        lines.append("".join(on if bit else off for bit in row))
    return "\n".join(lines) + "\n"


def print_preview(data: bytes, dims: Dimensions, stream: Optional[TextIO] = None) -> None:
    out = stream if stream is not None else sys.stderr
    out.write(render_preview(data, dims))
    out.flush()


__all__ = ["render_preview", "print_preview"]
