import pytest

from badge_bitmap.core_types import ConvertConfig, Dimensions
from badge_bitmap.errors import ConfigError, DimensionError, RatioParseError
from badge_bitmap.ratio import parse_ratio, resolve_dimensions


def test_presets():
    assert resolve_dimensions("profile") == Dimensions(120, 128)
    assert resolve_dimensions("splash") == Dimensions(246, 128)


def test_parse_ratio_reads_both_fields():
    assert parse_ratio("64x32") == Dimensions(64, 32)
    assert parse_ratio("128X64") == Dimensions(128, 64)


def test_parse_ratio_legacy_duplicates_first_field():
    assert parse_ratio("64x32", duplicate_first_field=True) == Dimensions(64, 64)


@pytest.mark.parametrize("token", ["abc", "64", "64x32x8", "x32", "64x", "axb", "6.4x32", "-8x16"])
def test_parse_ratio_rejects_malformed(token):
    with pytest.raises(RatioParseError):
        parse_ratio(token)


def test_parse_ratio_rejects_zero():
    with pytest.raises(DimensionError):
        parse_ratio("0x8")


def test_resolve_rejects_unaligned_height():
    with pytest.raises(DimensionError):
        resolve_dimensions("128x127")


def test_resolve_legacy_height_follows_width():
    # width 12 duplicated into height is not byte aligned
    assert resolve_dimensions("12x16") == Dimensions(12, 16)
    with pytest.raises(DimensionError):
        resolve_dimensions("12x16", duplicate_first_field=True)


def test_resolve_rejects_empty():
    with pytest.raises(RatioParseError):
        resolve_dimensions("")


def test_errors_are_config_errors():
    assert issubclass(RatioParseError, ConfigError)
    assert issubclass(DimensionError, ValueError)


def test_dimensions_byte_count():
    assert Dimensions(246, 128).byte_count == 246 * 128 // 8
    assert str(Dimensions(120, 128)) == "120x128"


def test_config_rejects_unknown_outmode():
    with pytest.raises(ConfigError):
        ConvertConfig(ratio="profile", dims=Dimensions(120, 128), out_mode="gif")
