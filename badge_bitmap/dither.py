# badge_bitmap/dither.py
from __future__ import annotations

"""
Black & white reduction for the badge panel.

- dither_bw: Floyd–Steinberg error diffusion onto a strict {black, white}
  palette (Pillow's 1-bit conversion).
- black_mask: which pixels count as on. Only pure black (R+G+B == 0) does;
  there is no threshold, so undithered grey stays off.
"""

import numpy as np
from PIL import Image

from .core_types import BoolMask, Dimensions, U8Image
from .image_io import resize_nearest


def dither_bw(img_rgb: U8Image) -> U8Image:
    """Floyd–Steinberg dither to pure black/white, returned as RGB."""
    im = Image.fromarray(np.ascontiguousarray(img_rgb, dtype=np.uint8))
    bw = im.convert("1", dither=Image.Dither.FLOYDSTEINBERG)
    return np.array(bw.convert("RGB"), dtype=np.uint8)


def black_mask(img_rgb: U8Image) -> BoolMask:
    """True where the channel sum is zero."""
    return img_rgb[..., :3].astype(np.uint16).sum(axis=-1) == 0


def render_pixels(img_rgb: U8Image, dims: Dimensions, dither: bool) -> BoolMask:
    """Resize to dims, optionally dither, and return the on/off mask."""
    out = resize_nearest(img_rgb, dims)
    if dither:
        out = dither_bw(out)
    return black_mask(out)


__all__ = ["dither_bw", "black_mask", "render_pixels"]
