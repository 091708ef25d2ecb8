import numpy as np
import pytest
from PIL import Image

from badge_bitmap.bitmap import image_to_bitmap
from badge_bitmap.core_types import Dimensions
from badge_bitmap.errors import InputError
from badge_bitmap.image_io import load_image_rgb


def _grey16_png(path, value, size=64):
    Image.fromarray(np.full((size, size), value, dtype=np.uint16)).save(path, format="PNG")
    return path


def test_16bit_grey_scales_to_8bit(tmp_path):
    rgb = load_image_rgb(_grey16_png(tmp_path / "grey16.png", 32768))
    assert rgb.shape == (64, 64, 3)
    assert np.all(np.abs(rgb.astype(int) - 128) <= 1)


def test_16bit_extremes(tmp_path):
    assert np.all(load_image_rgb(_grey16_png(tmp_path / "black.png", 0)) == 0)
    assert np.all(load_image_rgb(_grey16_png(tmp_path / "white.png", 65535)) == 255)


def test_16bit_mid_grey_dithers_to_about_half(tmp_path):
    rgb = load_image_rgb(_grey16_png(tmp_path / "grey16.png", 32768))
    data = image_to_bitmap(rgb, Dimensions(64, 64))
    on = sum(bin(b).count("1") for b in data)
    assert 0.35 < on / (64 * 64) < 0.65


def test_8bit_grey_unchanged(tmp_path):
    path = tmp_path / "grey8.png"
    Image.new("L", (4, 4), 77).save(path, format="PNG")
    assert np.all(load_image_rgb(path) == 77)


def test_oversized_image_is_input_error(tmp_path, monkeypatch):
    path = tmp_path / "big.png"
    Image.new("RGB", (200, 200), "white").save(path, format="PNG")
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)
    with pytest.raises(InputError):
        load_image_rgb(path)
