"""In-memory 8-bit RGB(A) raster used by every filter."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import RasterFormatError

Pixel = List[int]
Color = Tuple[int, ...]


@dataclass
class Raster:
    """Row-major grid of ``height`` rows holding ``width`` pixels each.

    Pixels are mutable lists of three (RGB) or four (RGBA) integers in
    ``[0, 255]``. ``premultiplied`` selects the layout: rasters carrying a
    premultiplied alpha channel are RGBA, all others RGB.
    """

    width: int
    height: int
    pixels: List[List[Pixel]]
    premultiplied: bool = False

    @classmethod
    def new(cls, width: int, height: int, premultiplied: bool = False, fill: int = 0) -> "Raster":
        if width < 0 or height < 0:
            raise RasterFormatError(f"Raster dimensions must be non-negative, got {width}x{height}")
        channels = 4 if premultiplied else 3
        rows = [[[fill] * channels for _ in range(width)] for _ in range(height)]
        return cls(width=width, height=height, pixels=rows, premultiplied=premultiplied)

    @classmethod
    def from_rows(
        cls, rows: Sequence[Sequence[Sequence[int]]], premultiplied: Optional[bool] = None
    ) -> "Raster":
        """Build a raster from nested rows of pixel tuples, validating every value."""

        height = len(rows)
        width = len(rows[0]) if height else 0
        channels: Optional[int] = None
        pixels: List[List[Pixel]] = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise RasterFormatError(f"Row {y} has {len(row)} pixels, expected {width}")
            out_row: List[Pixel] = []
            for x, pixel in enumerate(row):
                if channels is None:
                    channels = len(pixel)
                    if channels not in (3, 4):
                        raise RasterFormatError(f"Pixels must have 3 or 4 channels, got {channels}")
                if len(pixel) != channels:
                    raise RasterFormatError(f"Pixel ({x}, {y}) has {len(pixel)} channels, expected {channels}")
                for value in pixel:
                    if not isinstance(value, int) or not 0 <= value <= 255:
                        raise RasterFormatError(f"Pixel ({x}, {y}) has out of range value {value!r}")
                out_row.append(list(pixel))
            pixels.append(out_row)

        if premultiplied is None:
            premultiplied = channels == 4
        elif channels is not None and (channels == 4) != premultiplied:
            raise RasterFormatError(
                f"{channels}-channel pixels do not match premultiplied={premultiplied}"
            )
        return cls(width=width, height=height, pixels=pixels, premultiplied=premultiplied)

    @property
    def channels(self) -> int:
        return 4 if self.premultiplied else 3

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def copy(self) -> "Raster":
        return Raster(
            width=self.width,
            height=self.height,
            pixels=[[pixel[:] for pixel in row] for row in self.pixels],
            premultiplied=self.premultiplied,
        )

    def clone_blank(self) -> "Raster":
        """Return a zero-filled raster with the same size and layout."""

        return Raster.new(self.width, self.height, self.premultiplied)

    def get_pixel(self, x: int, y: int) -> Color:
        return tuple(self.pixels[y][x])

    def set_pixel(self, x: int, y: int, color: Sequence[int]) -> None:
        pixel = self.pixels[y][x]
        for idx, value in enumerate(color[: len(pixel)]):
            pixel[idx] = value

    def iter_pixels(self) -> Iterable[Tuple[int, int, Pixel]]:
        for y, row in enumerate(self.pixels):
            for x, pixel in enumerate(row):
                yield x, y, pixel

    def to_rows(self) -> List[List[Color]]:
        return [[tuple(pixel) for pixel in row] for row in self.pixels]


__all__ = ["Raster", "Pixel", "Color"]
