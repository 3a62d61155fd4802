from __future__ import annotations

import pytest

from raster_filters import (
    FILTERS,
    ConfigError,
    InvalidParameterError,
    PipelineConfig,
    Raster,
    apply_filter,
    apply_pipeline,
    gaussian_blur,
    mirror,
    negative,
    rotate,
)

_DEFAULT_PARAMS = {
    "mirror": {"vertical": True},
    "rotate": {"angle_degrees": 45},
    "box_blur": {"radius": 1},
    "gaussian_blur": {"intensity": 1},
    "sharpen": {"intensity": 1},
    "brighten": {"dial": 0.2},
    "darken": {"dial": -0.2},
    "pixelate": {"block_size": 2},
    "watermark": {"text": "x"},
}


def _image() -> Raster:
    return Raster.from_rows(
        [[((x * 40) % 256, (y * 60) % 256, (x * y * 10) % 256) for x in range(5)] for y in range(4)]
    )


@pytest.mark.parametrize("name", sorted(FILTERS))
@pytest.mark.parametrize("size", [(0, 0), (0, 3), (3, 0)])
def test_every_filter_returns_empty_for_empty_input(name, size):
    image = Raster.new(*size)
    result = apply_filter(image, name, **_DEFAULT_PARAMS.get(name, {}))

    assert result.is_empty
    assert result.size == size
    assert result is not image


@pytest.mark.parametrize("name", sorted(FILTERS))
def test_every_filter_is_pure_and_keeps_size(name):
    image = _image()
    snapshot = image.copy()
    result = apply_filter(image, name, **_DEFAULT_PARAMS.get(name, {}))

    assert image == snapshot
    assert result.size == image.size
    assert result.premultiplied is image.premultiplied
    for row in result.pixels:
        for pixel in row:
            assert all(isinstance(value, int) and 0 <= value <= 255 for value in pixel)


def test_apply_filter_resolves_aliases():
    image = _image()
    assert apply_filter(image, "invert") == negative(image)


def test_apply_filter_rejects_unknown_parameters():
    with pytest.raises(ConfigError):
        apply_filter(_image(), "rotate", angle=10)
    with pytest.raises(ConfigError):
        apply_filter(_image(), "pixelate")


def test_pipeline_runs_steps_in_order():
    image = _image()
    config = PipelineConfig.from_dict(
        {"steps": [{"filter": "rotate", "angle": 30}, "negative", {"filter": "flip", "vertical": False}]}
    )
    expected = mirror(negative(rotate(image, 30)), False)

    assert apply_pipeline(image, config) == expected
    blur_only = PipelineConfig.from_dict({"steps": [{"filter": "blur", "radius": 0}]})
    assert apply_pipeline(image, blur_only) == gaussian_blur(image, 0)


def test_failed_step_leaves_input_untouched():
    image = _image()
    snapshot = image.copy()
    config = PipelineConfig.from_dict({"steps": ["negative", {"filter": "darken", "dial": 0.5}]})

    with pytest.raises(InvalidParameterError):
        apply_pipeline(image, config)
    assert image == snapshot


def test_empty_pipeline_returns_copy():
    image = _image()
    result = apply_pipeline(image, PipelineConfig())

    assert result == image
    assert result is not image
