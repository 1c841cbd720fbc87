"""Shared utility functions."""

from __future__ import annotations

import os
from pathlib import Path

# Binary unit ladder, smallest first. Values that exhaust it are shown in
# FALLBACK_UNIT without further reduction.
SIZE_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB")
FALLBACK_UNIT = "YiB"


def xdg_config_home() -> Path:
    """Return XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def format_size(size_bytes: int) -> str:
    """Convert a byte count to a human-readable string.

    Always three decimals: ``0 -> "0.000 B"``, ``1024 -> "1.000 KiB"``.
    Anything past ZiB is reported in YiB, even when the number is still
    1024 or more.
    """
    if size_bytes < 0:
        raise ValueError(f"size must be non-negative, got {size_bytes}")

    value = float(size_bytes)
    index = 0
    while value >= 1024 and index < len(SIZE_UNITS):
        value /= 1024
        index += 1
    unit = SIZE_UNITS[index] if index < len(SIZE_UNITS) else FALLBACK_UNIT
    return f"{value:.3f} {unit}"
