"""Utility helpers shared across the filter modules."""
from __future__ import annotations

import math
from typing import Tuple


def clamp_channel(value: int) -> int:
    """Clamp an integer channel value into ``[0, 255]``."""

    if value < 0:
        return 0
    if value > 255:
        return 255
    return value


def round_half_up(value: float) -> int:
    """Round to the nearest integer with ties going towards positive infinity.

    Python's :func:`round` uses banker's rounding, which would make ``2.5``
    and ``3.5`` land on the same even neighbour.
    """

    return int(math.floor(value + 0.5))


def to_radians(degrees: float) -> float:
    return (degrees * math.pi) / 180.0


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """Convert a hex color string into an 8-bit RGB tuple."""

    color = color.strip()
    if color.startswith("#"):
        color = color[1:]
    if len(color) not in (3, 6):
        raise ValueError(f"Unsupported color format: {color!r}")
    if len(color) == 3:
        color = "".join(ch * 2 for ch in color)
    r = int(color[0:2], 16)
    g = int(color[2:4], 16)
    b = int(color[4:6], 16)
    return (r, g, b)


def mix_channel(left: float, delta: float, right: float) -> float:
    """Linearly interpolate from ``left`` (``delta=0``) to ``right`` (``delta=1``)."""

    return (1 - delta) * left + delta * right


__all__ = [
    "clamp_channel",
    "round_half_up",
    "to_radians",
    "hex_to_rgb",
    "mix_channel",
]
