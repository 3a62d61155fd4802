"""Conversions between raster, cartesian and polar coordinates."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import math

from .utils import to_radians


def to_cartesian(raster_x: int, raster_y: int, centre_x: int, centre_y: int) -> Tuple[int, int]:
    """Map a raster position onto axes centred on the image with ``y`` pointing up."""

    return raster_x - centre_x, centre_y - raster_y


def to_polar(cartesian_x: int, cartesian_y: int) -> Tuple[float, float]:
    """Return ``(radius, theta)`` for an integer cartesian point.

    Points on the vertical axis are resolved explicitly to ``pi/2`` or
    ``3*pi/2`` instead of relying on :func:`math.atan2`.
    """

    radius = math.sqrt(cartesian_x * cartesian_x + cartesian_y * cartesian_y)
    if cartesian_x == 0:
        theta = 1.5 * math.pi if cartesian_y < 0 else 0.5 * math.pi
    else:
        theta = math.atan2(float(cartesian_y), float(cartesian_x))
    return radius, theta


def polar_to_cartesian(radius: float, theta: float) -> Tuple[float, float]:
    return radius * math.cos(theta), radius * math.sin(theta)


def to_raster(cartesian_x: float, cartesian_y: float, centre_x: int, centre_y: int) -> Tuple[float, float]:
    return cartesian_x + centre_x, centre_y - cartesian_y


@dataclass(frozen=True)
class RotationFrame:
    """Pre-computed parameters for mapping output pixels back into the source."""

    width: int
    height: int
    centre_x: int
    centre_y: int
    angle: float

    @classmethod
    def create(cls, width: int, height: int, angle_degrees: float) -> "RotationFrame":
        return cls(
            width=width,
            height=height,
            centre_x=width // 2,
            centre_y=height // 2,
            angle=to_radians(angle_degrees),
        )

    def source_position(self, raster_x: int, raster_y: int) -> Optional[Tuple[float, float]]:
        """Return the fractional source position sampled for an output pixel.

        The pixel sitting exactly on the integer centre has no source position
        and yields ``None``.
        """

        cx, cy = to_cartesian(raster_x, raster_y, self.centre_x, self.centre_y)
        if cx == 0 and cy == 0:
            return None
        radius, theta = to_polar(cx, cy)
        x, y = polar_to_cartesian(radius, theta - self.angle)
        return to_raster(x, y, self.centre_x, self.centre_y)


__all__ = [
    "to_cartesian",
    "to_polar",
    "polar_to_cartesian",
    "to_raster",
    "RotationFrame",
]
