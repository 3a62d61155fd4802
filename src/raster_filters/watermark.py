"""Text watermark blended from Pillow glyph coverage."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from .errors import InvalidParameterError
from .raster import Raster
from .utils import clamp_channel, hex_to_rgb, mix_channel, round_half_up

ColorSpec = Union[str, Sequence[int]]


def _load_font(font_path: Optional[Union[str, Path]], font_size: int):
    if font_path:
        return ImageFont.truetype(str(font_path), font_size)
    return ImageFont.load_default()


def render_coverage(
    size: Tuple[int, int],
    text: str,
    *,
    position: Optional[Tuple[int, int]] = None,
    font_path: Optional[Union[str, Path]] = None,
    font_size: int = 24,
) -> Image.Image:
    """Render ``text`` into an ``"L"`` mask where 255 means full glyph coverage."""

    mask = Image.new("L", size, 0)
    draw = ImageDraw.Draw(mask)
    font = _load_font(font_path, font_size)
    if position is None:
        left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
        position = (
            (size[0] - (right - left)) // 2 - left,
            (size[1] - (bottom - top)) // 2 - top,
        )
    draw.text(position, text, fill=255, font=font)
    return mask


def watermark(
    image: Raster,
    text: str,
    *,
    position: Optional[Tuple[int, int]] = None,
    color: ColorSpec = (255, 255, 255),
    opacity: float = 0.5,
    font_path: Optional[Union[str, Path]] = None,
    font_size: int = 24,
) -> Raster:
    """Blend ``text`` over the raster.

    Each color channel becomes ``c * (1 - a) + color * a`` with ``a`` the
    glyph coverage scaled by ``opacity``. Without ``position`` the text is
    centred. Alpha channels are left untouched.
    """

    if not text:
        raise InvalidParameterError("watermark", "text", text, "must not be empty")
    if not 0.0 <= opacity <= 1.0:
        raise InvalidParameterError("watermark", "opacity", opacity, "must be within [0, 1]")
    if isinstance(color, str):
        try:
            ink = hex_to_rgb(color)
        except ValueError as exc:
            raise InvalidParameterError("watermark", "color", color, str(exc)) from exc
    else:
        ink = tuple(color[:3])
        if len(ink) != 3:
            raise InvalidParameterError("watermark", "color", color, "needs three channels")
    result = image.copy()
    if image.is_empty or opacity == 0.0:
        return result

    mask = render_coverage(
        image.size, text, position=position, font_path=font_path, font_size=font_size
    )
    coverage = mask.load()
    for y in range(image.height):
        row = result.pixels[y]
        for x in range(image.width):
            weight = coverage[x, y]
            if weight == 0:
                continue
            alpha = weight / 255.0 * opacity
            pixel = row[x]
            for c in range(3):
                pixel[c] = clamp_channel(round_half_up(mix_channel(pixel[c], alpha, ink[c])))
    return result


__all__ = ["render_coverage", "watermark"]
