from __future__ import annotations

"""
Core type aliases and small value objects.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .errors import ConfigError, DimensionError

# Basic aliases

U8Image = NDArray[np.uint8]  # (H, W, 3) RGB
BoolMask = NDArray[np.bool_]  # (H, W), True = black / on

OutMode = Literal["rice", "bin", "base64", "none"]
OUT_MODES: Tuple[str, ...] = ("rice", "bin", "base64", "none")

# Name written into the generated-file header of rice output.
DEFAULT_GENERATOR = "badge_image"


# Value objects


@dataclass(frozen=True)
class Dimensions:
    """Target display size in pixels."""

    width: int
    height: int

    @property
    def byte_count(self) -> int:
        return self.width * self.height // 8

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height), the order Pillow expects."""
        return (self.width, self.height)

    def require_byte_aligned(self) -> "Dimensions":
        """Raise DimensionError unless height is a multiple of 8."""
        if self.height % 8 != 0:
            raise DimensionError(
                f"height/y value must be divisible by 8 (got {self.height})"
            )
        return self

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class ConvertConfig:
    """Everything one conversion run needs; built once by the CLI."""

    ratio: str
    dims: Dimensions
    out_mode: OutMode
    dither: bool = True
    show: bool = False
    outdir: Optional[Path] = None
    debug: bool = False
    generator: str = DEFAULT_GENERATOR

    def __post_init__(self) -> None:
        if self.out_mode not in OUT_MODES:
            raise ConfigError(
                f"invalid outmode `{self.out_mode}` (expected one of: {', '.join(OUT_MODES)})"
            )


__all__ = [
    "U8Image",
    "BoolMask",
    "OutMode",
    "OUT_MODES",
    "DEFAULT_GENERATOR",
    "Dimensions",
    "ConvertConfig",
]
