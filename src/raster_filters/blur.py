"""Sliding-window box blur and its three-pass Gaussian approximation."""
from __future__ import annotations

import math
from typing import List, Sequence

from .errors import InvalidParameterError
from .raster import Pixel, Raster

GAUSSIAN_PASSES = 3


def _blur_line(line: Sequence[Pixel], radius: int, channels: int) -> List[Pixel]:
    """Moving average of one row or column with edge replication.

    The running sum starts as if the first pixel were repeated ``radius + 1``
    times before the line, so every step only adds the entering pixel and
    subtracts the leaving one. Indices beyond either end are clamped.
    """

    last = len(line) - 1
    scale = 1.0 / (2 * radius + 1)
    first = line[0]
    acc = [(radius + 1) * first[c] for c in range(channels)]
    for k in range(radius):
        pixel = line[min(k, last)]
        for c in range(channels):
            acc[c] += pixel[c]

    out: List[Pixel] = []
    for x in range(len(line)):
        entering = line[min(x + radius, last)]
        leaving = line[max(x - radius - 1, 0)]
        value = [0] * channels
        for c in range(channels):
            acc[c] += entering[c] - leaving[c]
            value[c] = int(math.floor(acc[c] * scale + 0.5))
        out.append(value)
    return out


def _horizontal_pass(image: Raster, radius: int) -> Raster:
    channels = image.channels
    rows = [_blur_line(row, radius, channels) for row in image.pixels]
    return Raster(width=image.width, height=image.height, pixels=rows, premultiplied=image.premultiplied)


def _vertical_pass(image: Raster, radius: int) -> Raster:
    channels = image.channels
    result = image.clone_blank()
    src_pixels = image.pixels
    dst_pixels = result.pixels
    for x in range(image.width):
        column = [src_pixels[y][x] for y in range(image.height)]
        for y, value in enumerate(_blur_line(column, radius, channels)):
            dst_pixels[y][x] = value
    return result


def box_blur(image: Raster, radius: int) -> Raster:
    """Mean filter over a ``(2 * radius + 1)`` window, rows first then columns.

    Every channel, alpha included, is averaged. ``radius == 0`` returns an
    identical copy.
    """

    if radius < 0:
        raise InvalidParameterError("box_blur", "radius", radius, "must be >= 0")
    if image.is_empty:
        return image.copy()
    intermediate = _horizontal_pass(image, radius)
    return _vertical_pass(intermediate, radius)


def gaussian_radii(intensity: int) -> List[int]:
    """Box radii used for the Gaussian approximation."""

    return [intensity] + [intensity + 1] * (GAUSSIAN_PASSES - 1)


def gaussian_blur(image: Raster, intensity: int) -> Raster:
    """Approximate a Gaussian blur with three successive box blurs.

    The radii are ``intensity``, ``intensity + 1`` and ``intensity + 1``;
    each pass consumes the complete output of the previous one.
    """

    if intensity < 0:
        raise InvalidParameterError("gaussian_blur", "intensity", intensity, "must be >= 0")
    result = image
    for radius in gaussian_radii(intensity):
        result = box_blur(result, radius)
    return result


__all__ = ["box_blur", "gaussian_blur", "gaussian_radii"]
