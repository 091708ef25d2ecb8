# badge_bitmap/bitmap.py
from __future__ import annotations

"""
1bpp packing in the badge's scan order.

The panel is written one display column at a time, top to bottom, columns
left to right. Pixel (col, row) lives at flat index idx = col*height + row,
bit 7 - idx % 8 of byte idx // 8 (MSB first). Black is 1.
"""

import numpy as np

from .core_types import BoolMask, Dimensions, U8Image
from .dither import render_pixels
from .errors import DimensionError


def pack_bits(mask: BoolMask) -> bytes:
    """Pack an (H,W) on/off mask column-major, MSB first."""
    mask = np.asarray(mask, dtype=bool)
    if mask.ndim != 2:
        raise DimensionError(f"expected a 2-D mask, got shape {mask.shape}")
    height = mask.shape[0]
    if height % 8 != 0:
        raise DimensionError(f"height/y value must be divisible by 8 (got {height})")
    # (H, W) -> (W, H) so a C-order ravel walks columns outermost
    column_major = np.ascontiguousarray(mask.T).ravel()
    return np.packbits(column_major, bitorder="big").tobytes()


def unpack_bits(data: bytes, dims: Dimensions) -> BoolMask:
    """Inverse of pack_bits; returns an (H,W) mask."""
    if len(data) != dims.byte_count or dims.width * dims.height % 8 != 0:
        raise DimensionError(
            f"bitmap has {len(data)} bytes, {dims} needs {dims.byte_count}"
        )
    bits = np.unpackbits(np.frombuffer(data, dtype=np.uint8), bitorder="big")
    return bits.reshape(dims.width, dims.height).T.astype(bool)


def image_to_bitmap(img_rgb: U8Image, dims: Dimensions, dither: bool = True) -> bytes:
    """Resize, optionally dither, and pack an RGB image for the badge."""
    dims.require_byte_aligned()
    return pack_bits(render_pixels(img_rgb, dims, dither))


__all__ = ["pack_bits", "unpack_bits", "image_to_bitmap"]
