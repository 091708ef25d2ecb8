# badge_bitmap/utils.py
from __future__ import annotations

"""
Shared helpers for badge_bitmap: compact formatting and tidy logging.

Every log helper writes to stderr. stdout is reserved for base64 output.
"""

import sys
from typing import Any, Iterable, Tuple


#  Time formatting


def format_seconds_compact(seconds: float) -> str:
    """Human-friendly seconds: '<ms>ms', '<s>s', or 'Mm Ss'."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f}ms"
    if seconds < 60.0:
        return f"{seconds:.3f}s"
    minutes = int(seconds // 60)
    return f"{minutes}m {seconds - 60 * minutes:.1f}s"


# Pretty logging


def format_value(value: Any) -> str:
    """'on'/'off' for bools, 1,234 style for ints, str() otherwise."""
    if isinstance(value, bool):
        return "on" if value else "off"
    if isinstance(value, int):
        return f"{value:,}"
    return str(value)


def key_value_pairs_to_string(pairs: Iterable[Tuple[str, Any]]) -> str:
    """Format (name, value) pairs as 'Name: value' blocks separated by two spaces."""
    return "  ".join(f"{name}: {format_value(value)}" for name, value in pairs)


def print_config_line(section: str, pairs: Iterable[Tuple[str, Any]]) -> None:
    """
    Debug-log one config line, e.g.:
      [debug] [run] Ratio: splash  Size: 246x128  Outmode: bin  Dither: on
    """
    debug_log(f"[{section}] {key_value_pairs_to_string(pairs)}")


def log(message: str) -> None:
    """Plain log line."""
    print(message, file=sys.stderr, flush=True)


def debug_log(message: str) -> None:
    """Debug log line."""
    print(f"[debug] {message}", file=sys.stderr, flush=True)


def warn(message: str) -> None:
    """Warning log line."""
    print(f"[warn] {message}", file=sys.stderr, flush=True)


def error(message: str) -> None:
    """Error log line."""
    print(f"[error] {message}", file=sys.stderr, flush=True)


__all__ = [
    "format_seconds_compact",
    "format_value",
    "key_value_pairs_to_string",
    "print_config_line",
    "log",
    "debug_log",
    "warn",
    "error",
]
