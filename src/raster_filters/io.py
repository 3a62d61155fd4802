"""Pillow adapters for moving rasters in and out of image files."""
from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from .errors import RasterFormatError
from .raster import Raster

logger = logging.getLogger(__name__)

_CONVERT_TO_RGB = {"1", "L", "P", "CMYK", "YCbCr", "LAB", "HSV"}
_CONVERT_TO_RGBA = {"LA", "PA", "RGBa"}


def raster_from_pil(image: Image.Image) -> Raster:
    """Copy a Pillow image into a :class:`Raster`.

    ``RGBA`` (and modes carrying alpha) become premultiplied RGBA rasters,
    everything else RGB.
    """

    mode = image.mode
    if mode == "P" and "transparency" in image.info:
        image = image.convert("RGBA")
    elif mode in _CONVERT_TO_RGBA:
        image = image.convert("RGBA")
    elif mode in _CONVERT_TO_RGB:
        image = image.convert("RGB")
    elif mode not in ("RGB", "RGBA"):
        raise RasterFormatError(f"Unsupported image mode: {mode}")

    premultiplied = image.mode == "RGBA"
    width, height = image.size
    channels = 4 if premultiplied else 3
    data = image.tobytes()
    stride = width * channels
    rows = []
    for y in range(height):
        offset = y * stride
        rows.append(
            [list(data[offset + x * channels : offset + (x + 1) * channels]) for x in range(width)]
        )
    return Raster(width=width, height=height, pixels=rows, premultiplied=premultiplied)


def raster_to_pil(raster: Raster) -> Image.Image:
    mode = "RGBA" if raster.premultiplied else "RGB"
    data = bytearray()
    for row in raster.pixels:
        for pixel in row:
            data.extend(pixel)
    return Image.frombytes(mode, (raster.width, raster.height), bytes(data))


def load_raster(path: Path | str) -> Raster:
    with Image.open(path) as image:
        image.load()
        raster = raster_from_pil(image)
    logger.debug("Loaded %s as %dx%d raster (alpha=%s)", path, raster.width, raster.height, raster.premultiplied)
    return raster


def save_raster(raster: Raster, path: Path | str) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    raster_to_pil(raster).save(target)
    logger.debug("Saved %dx%d raster to %s", raster.width, raster.height, target)
    return target


__all__ = ["raster_from_pil", "raster_to_pil", "load_raster", "save_raster"]
