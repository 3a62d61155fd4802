"""Color quantization: posterization and block pixelation."""
from __future__ import annotations

from typing import List

from .errors import InvalidParameterError
from .raster import Raster
from .tone import map_colors

POSTER_LEVELS = (0, 64, 128, 192, 255)


def reduce_channel(value: int) -> int:
    """Map a channel onto :data:`POSTER_LEVELS`.

    The top bucket is ``[192, 255)``; only 255 itself stays at 255.
    """

    if value < 64:
        return 0
    if value < 128:
        return 64
    if value < 192:
        return 128
    if value < 255:
        return 192
    return 255


def posterize(image: Raster) -> Raster:
    return map_colors(
        image, lambda r, g, b: (reduce_channel(r), reduce_channel(g), reduce_channel(b))
    )


def pixelate(image: Raster, block_size: int) -> Raster:
    """Replace each ``block_size`` square with its truncated per-channel mean.

    Blocks are laid out from the top-left corner; blocks on the right and
    bottom edges are clipped to the raster. All channels, alpha included,
    are averaged.
    """

    if block_size < 1:
        raise InvalidParameterError("pixelate", "block_size", block_size, "must be >= 1")
    result = image.copy()
    channels = image.channels
    src_pixels = image.pixels
    for y0 in range(0, image.height, block_size):
        y1 = min(y0 + block_size, image.height)
        for x0 in range(0, image.width, block_size):
            x1 = min(x0 + block_size, image.width)
            acc: List[int] = [0] * channels
            for y in range(y0, y1):
                row = src_pixels[y]
                for x in range(x0, x1):
                    pixel = row[x]
                    for c in range(channels):
                        acc[c] += pixel[c]
            count = (y1 - y0) * (x1 - x0)
            mean = [value // count for value in acc]
            for y in range(y0, y1):
                dst_row = result.pixels[y]
                for x in range(x0, x1):
                    dst_row[x] = mean[:]
    return result


__all__ = ["POSTER_LEVELS", "reduce_channel", "posterize", "pixelate"]
