"""Geometric transforms: mirroring and rotation about the image centre."""
from __future__ import annotations

from .coordinates import RotationFrame
from .raster import Raster
from .sampling import sample_bilinear


def mirror(image: Raster, vertical: bool) -> Raster:
    """Reflect the raster.

    ``vertical=True`` reflects columns across the vertical axis (left and
    right swap); otherwise rows are reflected top to bottom. The middle
    row or column of an odd dimension stays where it is.
    """

    result = image.copy()
    if vertical:
        for row in result.pixels:
            row.reverse()
    else:
        result.pixels.reverse()
    return result


def rotate(image: Raster, angle_degrees: float) -> Raster:
    """Rotate counter-clockwise by ``angle_degrees`` keeping the original size.

    Every output pixel is pulled from the source through the inverse
    rotation and bilinearly interpolated. Pixels whose four source
    neighbours are not all inside the image stay black, as does the pixel
    sitting exactly on the integer centre.
    """

    result = image.clone_blank()
    if image.is_empty:
        return result

    frame = RotationFrame.create(image.width, image.height, angle_degrees)
    has_alpha = image.premultiplied
    dst_pixels = result.pixels
    for i in range(image.height):
        dst_row = dst_pixels[i]
        for j in range(image.width):
            position = frame.source_position(j, i)
            if position is None:
                continue
            color = sample_bilinear(image, position[0], position[1])
            if color is None:
                continue
            dst_pixel = dst_row[j]
            dst_pixel[0], dst_pixel[1], dst_pixel[2] = color
            if has_alpha:
                dst_pixel[3] = 255
    return result


__all__ = ["mirror", "rotate"]
