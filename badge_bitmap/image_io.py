# badge_bitmap/image_io.py
from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from .core_types import Dimensions, U8Image
from .errors import InputError

"""
Image loading (RGB, alpha flattened onto black) and nearest-neighbour resize.
"""


def flatten_alpha(rgba: np.ndarray) -> U8Image:
    """
    Premultiply RGB by alpha so transparent pixels become black.

    The badge treats a pixel as on when its channel sum is zero, so fully
    transparent regions end up on.
    """
    arr = np.asarray(rgba, dtype=np.uint8)
    if arr.ndim != 3 or arr.shape[-1] != 4:
        raise TypeError("expected uint8 (H,W,4) image")
    rgb = arr[..., :3].astype(np.uint16)
    alpha = arr[..., 3:4].astype(np.uint16)
    return (rgb * alpha // 255).astype(np.uint8)


def _reduce_wide_grey(im: Image.Image) -> Image.Image:
    """
    Scale 16-bit and 32-bit grey modes (I;16*, I, F) down to 8-bit L.

    Pillow clips these to 0..255 on convert(), which turns any non-zero
    16-bit grey into white. Values are taken as 0..65535.
    """
    if not (im.mode.startswith("I") or im.mode == "F"):
        return im
    wide = np.clip(np.asarray(im, dtype=np.float64), 0, 65535).astype(np.uint32)
    return Image.fromarray((wide >> 8).astype(np.uint8))


def load_image_rgb(path: Path) -> U8Image:
    """Decode any Pillow-readable image into a (H,W,3) uint8 array."""
    path = Path(path)
    if not path.exists():
        raise InputError(f"could not stat {path}: no such file")
    try:
        with Image.open(path) as im:
            rgba = np.array(_reduce_wide_grey(im).convert("RGBA"), dtype=np.uint8)
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        ValueError,
    ) as e:
        raise InputError(f"error loading source image {path}: {e}") from e
    return flatten_alpha(rgba)


def resize_nearest(rgb: U8Image, dims: Dimensions) -> U8Image:
    """Scale to exactly dims using nearest-neighbour sampling."""
    im = Image.fromarray(np.ascontiguousarray(rgb, dtype=np.uint8))
    if im.size != dims.size:
        im = im.resize(dims.size, resample=Image.Resampling.NEAREST)
    return np.array(im, dtype=np.uint8)


__all__ = ["flatten_alpha", "load_image_rgb", "resize_nearest"]
