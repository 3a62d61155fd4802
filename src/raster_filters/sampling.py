"""Bilinear sampling of fractional raster positions."""
from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

from .raster import Raster
from .utils import clamp_channel, mix_channel, round_half_up

RGB = Tuple[int, int, int]


def bilinear_interpolation(
    top_left: Sequence[int],
    top_right: Sequence[int],
    bottom_left: Sequence[int],
    bottom_right: Sequence[int],
    delta_x: float,
    delta_y: float,
) -> RGB:
    """Blend four neighbours: rows first by ``delta_x``, then the rows by ``delta_y``."""

    result = []
    for c in range(3):
        top = mix_channel(top_left[c], delta_x, top_right[c])
        bottom = mix_channel(bottom_left[c], delta_x, bottom_right[c])
        result.append(clamp_channel(round_half_up(mix_channel(top, delta_y, bottom))))
    return result[0], result[1], result[2]


def neighbour_box(x: float, y: float) -> Tuple[int, int, int, int]:
    """Return ``(x0, y0, x1, y1)``, the floor and ceil of each axis."""

    return int(math.floor(x)), int(math.floor(y)), int(math.ceil(x)), int(math.ceil(y))


def sample_bilinear(image: Raster, x: float, y: float) -> Optional[RGB]:
    """Sample the RGB color at a fractional position.

    Returns ``None`` when any of the four neighbours falls outside the
    raster; positions are never clamped onto the border.
    """

    x0, y0, x1, y1 = neighbour_box(x, y)
    if x0 < 0 or y0 < 0 or x1 >= image.width or y1 >= image.height:
        return None
    top_row = image.pixels[y0]
    bottom_row = image.pixels[y1]
    return bilinear_interpolation(
        top_row[x0],
        top_row[x1],
        bottom_row[x0],
        bottom_row[x1],
        x - x0,
        y - y0,
    )


__all__ = ["bilinear_interpolation", "neighbour_box", "sample_bilinear"]
