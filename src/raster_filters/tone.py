"""Per-pixel color remaps."""
from __future__ import annotations

import math
from typing import Callable, Tuple

from .errors import InvalidParameterError
from .raster import Raster
from .utils import clamp_channel, mix_channel

RGB = Tuple[int, int, int]


def map_colors(image: Raster, func: Callable[[int, int, int], RGB]) -> Raster:
    """Return a copy with ``func`` applied to every RGB triple; alpha is kept."""

    result = image.copy()
    for row in result.pixels:
        for pixel in row:
            pixel[0], pixel[1], pixel[2] = func(pixel[0], pixel[1], pixel[2])
    return result


def _luma(r: int, g: int, b: int) -> RGB:
    value = int(0.2126 * r) + int(0.7152 * g) + int(0.0722 * b)
    return value, value, value


def _sepia(r: int, g: int, b: int) -> RGB:
    return (
        min(255, int(0.393 * r + 0.769 * g + 0.189 * b)),
        min(255, int(0.349 * r + 0.686 * g + 0.168 * b)),
        min(255, int(0.272 * r + 0.534 * g + 0.131 * b)),
    )


def _invert(r: int, g: int, b: int) -> RGB:
    return 255 - r, 255 - g, 255 - b


def grayscale(image: Raster) -> Raster:
    """Rec. 709 luma with each weighted channel truncated before summing."""

    return map_colors(image, _luma)


def sepia(image: Raster) -> Raster:
    return map_colors(image, _sepia)


def negative(image: Raster) -> Raster:
    return map_colors(image, _invert)


def brighten(image: Raster, dial: float) -> Raster:
    """Move every channel towards white by the blend factor ``dial >= 0``."""

    if math.isnan(dial) or dial < 0:
        raise InvalidParameterError("brighten", "dial", dial, "must be >= 0")

    def _lighten(r: int, g: int, b: int) -> RGB:
        return (
            clamp_channel(int(mix_channel(r, dial, 255.0))),
            clamp_channel(int(mix_channel(g, dial, 255.0))),
            clamp_channel(int(mix_channel(b, dial, 255.0))),
        )

    return map_colors(image, _lighten)


def darken(image: Raster, dial: float) -> Raster:
    """Move every channel towards black by ``|dial|``; ``dial`` must be ``<= 0``."""

    if math.isnan(dial) or dial > 0:
        raise InvalidParameterError("darken", "dial", dial, "must be <= 0")
    amount = -dial

    def _dim(r: int, g: int, b: int) -> RGB:
        return (
            clamp_channel(int(mix_channel(r, amount, 0.0))),
            clamp_channel(int(mix_channel(g, amount, 0.0))),
            clamp_channel(int(mix_channel(b, amount, 0.0))),
        )

    return map_colors(image, _dim)


__all__ = ["map_colors", "grayscale", "sepia", "negative", "brighten", "darken"]
