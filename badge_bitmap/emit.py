# badge_bitmap/emit.py
from __future__ import annotations

"""
Output writers for packed badge bitmaps.

Modes:
  rice   : Go source file '<ratio>-generated.go' declaring 'var r<ratio> = []byte{...}'
  bin    : raw bytes in '<ratio>.bin', ready for go:embed
  base64 : standard base64 on stdout
  none   : nothing (use with -show to preview)
"""

import base64
import sys
from pathlib import Path
from typing import Optional, TextIO

from .core_types import DEFAULT_GENERATOR, ConvertConfig
from .errors import OutputError

# Byte literals per line in generated Go source.
GO_BYTES_PER_LINE = 32


def format_go_source(
    data: bytes, var_name: str, generator: str = DEFAULT_GENERATOR
) -> str:
    """Go file text with data baked into a []byte variable named r<var_name>."""
    parts = [
        f"// Code generated by {generator} DO NOT EDIT.\n\npackage main\n\nvar r{var_name} = []byte{{"
    ]
    for i, b in enumerate(data):
        if i % GO_BYTES_PER_LINE == 0:
            parts.append("\n\t")
        parts.append(f"0x{b:02X}, ")
    parts.append("\n}\n")
    return "".join(parts)


def write_go_source(
    path: Path, data: bytes, var_name: str, generator: str = DEFAULT_GENERATOR
) -> Path:
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(format_go_source(data, var_name, generator))
    except OSError as e:
        raise OutputError(f"error writing image to file {path}: {e}") from e
    return path


def write_bin(path: Path, data: bytes) -> Path:
    """Raw bitmap bytes, no header."""
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise OutputError(f"error writing image to file {path}: {e}") from e
    return path


def encode_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def output_path(config: ConvertConfig) -> Optional[Path]:
    """Where a file mode writes; None for stdout-only modes."""
    outdir = config.outdir if config.outdir is not None else Path(".")
    if config.out_mode == "rice":
        return outdir / f"{config.ratio}-generated.go"
    if config.out_mode == "bin":
        return outdir / f"{config.ratio}.bin"
    return None


def emit(
    config: ConvertConfig, data: bytes, stdout: Optional[TextIO] = None
) -> Optional[Path]:
    """Write data per config.out_mode. Returns the file written, if any."""
    mode = config.out_mode
    if mode == "rice":
        return write_go_source(output_path(config), data, config.ratio, config.generator)
    if mode == "bin":
        return write_bin(output_path(config), data)
    if mode == "base64":
        out = stdout if stdout is not None else sys.stdout
        print(encode_base64(data), file=out, flush=True)
    return None


__all__ = [
    "GO_BYTES_PER_LINE",
    "format_go_source",
    "write_go_source",
    "write_bin",
    "encode_base64",
    "output_path",
    "emit",
]
