from __future__ import annotations

import pytest

from raster_filters import InvalidParameterError, Raster, watermark
from raster_filters.watermark import render_coverage


def _changed(before: Raster, after: Raster):
    return [
        (x, y)
        for y in range(before.height)
        for x in range(before.width)
        if before.get_pixel(x, y) != after.get_pixel(x, y)
    ]


def test_render_coverage_mask():
    mask = render_coverage((64, 32), "HI")

    assert mask.mode == "L"
    assert mask.size == (64, 32)
    assert mask.getextrema()[1] > 0


def test_watermark_blends_text_over_image():
    image = Raster.new(64, 32)
    result = watermark(image, "HI", opacity=1.0)

    assert result.size == image.size
    assert _changed(image, result)
    assert image == Raster.new(64, 32)


def test_watermark_color_and_opacity():
    image = Raster.new(64, 32)
    result = watermark(image, "HI", color="#ff0000", opacity=0.5)
    changed = _changed(image, result)

    assert changed
    for x, y in changed:
        r, g, b = result.get_pixel(x, y)
        assert 0 < r <= 128
        assert g == 0 and b == 0


def test_watermark_explicit_position_moves_text():
    image = Raster.new(64, 32)
    left = _changed(image, watermark(image, "A", position=(0, 0), opacity=1.0))
    right = _changed(image, watermark(image, "A", position=(40, 0), opacity=1.0))

    assert min(x for x, _ in left) < min(x for x, _ in right)


def test_watermark_zero_opacity_is_identity():
    image = Raster.new(32, 16, fill=40)
    assert watermark(image, "HI", opacity=0.0) == image


def test_watermark_keeps_alpha():
    image = Raster.new(64, 32, premultiplied=True, fill=10)
    result = watermark(image, "HI", opacity=1.0)

    assert all(pixel[3] == 10 for row in result.pixels for pixel in row)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"text": ""},
        {"text": "x", "opacity": 1.5},
        {"text": "x", "opacity": -0.1},
        {"text": "x", "color": "#12"},
        {"text": "x", "color": (255, 0)},
    ],
)
def test_watermark_rejects_bad_arguments(kwargs):
    with pytest.raises(InvalidParameterError):
        watermark(Raster.new(4, 4), **kwargs)
