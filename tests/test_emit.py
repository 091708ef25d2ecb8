import base64
import io
from pathlib import Path

import pytest

from badge_bitmap.core_types import ConvertConfig, Dimensions
from badge_bitmap.emit import (
    emit,
    encode_base64,
    format_go_source,
    output_path,
    write_bin,
)
from badge_bitmap.errors import OutputError


def _config(mode, outdir=None, ratio="profile"):
    return ConvertConfig(
        ratio=ratio, dims=Dimensions(120, 128), out_mode=mode, outdir=outdir
    )


def test_go_source_layout():
    text = format_go_source(bytes([0x00, 0xFF]), "profile", generator="badge_image")
    assert text == (
        "// Code generated by badge_image DO NOT EDIT.\n\n"
        "package main\n\n"
        "var rprofile = []byte{\n\t0x00, 0xFF, \n}\n"
    )
    assert "\t0x00, 0xFF, " in text.splitlines()


def test_go_source_wraps_every_32_bytes():
    text = format_go_source(bytes(range(70)), "64x64")
    lines = [ln for ln in text.splitlines() if ln.startswith("\t")]
    assert [ln.count("0x") for ln in lines] == [32, 32, 6]
    assert lines[1].startswith("\t0x20, ")


def test_output_paths(tmp_path):
    assert output_path(_config("rice", tmp_path)) == tmp_path / "profile-generated.go"
    assert output_path(_config("bin", tmp_path, ratio="64x64")) == tmp_path / "64x64.bin"
    assert output_path(_config("base64")) is None
    assert output_path(_config("none")) is None
    assert output_path(_config("bin")) == Path(".") / "profile.bin"


def test_emit_bin_writes_raw_bytes(tmp_path):
    data = bytes([1, 2, 3, 255])
    written = emit(_config("bin", tmp_path), data)
    assert written.read_bytes() == data


def test_emit_rice_writes_go_file(tmp_path):
    written = emit(_config("rice", tmp_path), bytes([0xAB]))
    assert written.name == "profile-generated.go"
    assert "var rprofile = []byte{\n\t0xAB, \n}\n" in written.read_text()


def test_emit_base64_prints_one_line(tmp_path):
    out = io.StringIO()
    data = bytes([0, 255, 16])
    assert emit(_config("base64", tmp_path), data, stdout=out) is None
    assert out.getvalue() == encode_base64(data) + "\n"
    assert base64.b64decode(out.getvalue()) == data
    assert list(tmp_path.iterdir()) == []


def test_emit_none_is_silent(tmp_path):
    out = io.StringIO()
    assert emit(_config("none", tmp_path), b"\x01", stdout=out) is None
    assert out.getvalue() == ""
    assert list(tmp_path.iterdir()) == []


def test_write_failure_raises_output_error(tmp_path):
    with pytest.raises(OutputError):
        write_bin(tmp_path / "missing" / "x.bin", b"\x00")
