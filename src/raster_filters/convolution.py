"""3x3 convolutions: gradient magnitude edge detection and sharpening."""
from __future__ import annotations

import math
from typing import List, Tuple

from .errors import InvalidParameterError
from .raster import Raster
from .utils import clamp_channel, round_half_up

Kernel = Tuple[Tuple[int, int, int], Tuple[int, int, int], Tuple[int, int, int]]

SOBEL_X: Kernel = ((-1, 0, 1), (-2, 0, 2), (-1, 0, 1))
SOBEL_Y: Kernel = ((-1, -2, -1), (0, 0, 0), (1, 2, 1))

# Both gradient sums read SOBEL_X, so the "vertical" term repeats the
# horizontal one and the magnitude is sqrt(2) * |gx|.
EDGE_KERNEL_X: Kernel = SOBEL_X
EDGE_KERNEL_Y: Kernel = SOBEL_X


def sharpen_kernel(intensity: int) -> Kernel:
    """High-pass kernel whose weights sum to one for any ``intensity``."""

    k = intensity
    return ((0, -k, 0), (-k, 4 * k + 1, -k), (0, -k, 0))


def _gradient(image: Raster, x: int, y: int) -> List[int]:
    width, height = image.width, image.height
    gx = [0, 0, 0]
    gy = [0, 0, 0]
    for dy in (-1, 0, 1):
        yy = y + dy
        if yy < 0 or yy >= height:
            continue
        row = image.pixels[yy]
        kx_row = EDGE_KERNEL_X[dy + 1]
        ky_row = EDGE_KERNEL_Y[dy + 1]
        for dx in (-1, 0, 1):
            xx = x + dx
            if xx < 0 or xx >= width:
                continue
            pixel = row[xx]
            wx = kx_row[dx + 1]
            wy = ky_row[dx + 1]
            for c in range(3):
                gx[c] += wx * pixel[c]
                gy[c] += wy * pixel[c]
    return [clamp_channel(round_half_up(math.sqrt(gx[c] * gx[c] + gy[c] * gy[c]))) for c in range(3)]


def detect_edges(image: Raster) -> Raster:
    """Per-channel gradient magnitude over each 3x3 neighbourhood.

    Neighbours outside the raster are skipped rather than zero padded, so
    border pixels see a smaller window. Alpha is copied from the source.
    """

    result = image.copy()
    for y in range(image.height):
        dst_row = result.pixels[y]
        for x in range(image.width):
            dst_row[x][0:3] = _gradient(image, x, y)
    return result


def sharpen(image: Raster, intensity: int) -> Raster:
    """Convolve the color channels with :func:`sharpen_kernel`.

    Borders replicate the nearest edge pixel. ``intensity == 0`` is the
    identity.
    """

    if intensity < 0:
        raise InvalidParameterError("sharpen", "intensity", intensity, "must be >= 0")
    kernel = sharpen_kernel(intensity)
    result = image.copy()
    width, height = image.width, image.height
    src_pixels = image.pixels
    for y in range(height):
        dst_row = result.pixels[y]
        for x in range(width):
            acc = [0, 0, 0]
            for dy in (-1, 0, 1):
                row = src_pixels[min(max(y + dy, 0), height - 1)]
                weights = kernel[dy + 1]
                for dx in (-1, 0, 1):
                    weight = weights[dx + 1]
                    if weight == 0:
                        continue
                    pixel = row[min(max(x + dx, 0), width - 1)]
                    acc[0] += weight * pixel[0]
                    acc[1] += weight * pixel[1]
                    acc[2] += weight * pixel[2]
            dst_row[x][0:3] = [clamp_channel(value) for value in acc]
    return result


__all__ = [
    "Kernel",
    "SOBEL_X",
    "SOBEL_Y",
    "EDGE_KERNEL_X",
    "EDGE_KERNEL_Y",
    "sharpen_kernel",
    "detect_edges",
    "sharpen",
]
