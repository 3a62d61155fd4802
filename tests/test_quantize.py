from __future__ import annotations

import random

import pytest

from raster_filters import InvalidParameterError, Raster, pixelate, posterize
from raster_filters.quantize import POSTER_LEVELS, reduce_channel


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, 0),
        (63, 0),
        (64, 64),
        (127, 64),
        (128, 128),
        (130, 128),
        (191, 128),
        (192, 192),
        (254, 192),
        (255, 255),
    ],
)
def test_reduce_channel_buckets(value, expected):
    assert reduce_channel(value) == expected


def test_posterize_uniform_image():
    image = Raster.new(3, 3, fill=130)
    assert {tuple(p) for row in posterize(image).pixels for p in row} == {(128, 128, 128)}


def test_posterize_output_levels():
    rng = random.Random(5)
    rows = [[tuple(rng.randrange(256) for _ in range(3)) for _ in range(10)] for _ in range(10)]
    result = posterize(Raster.from_rows(rows))

    assert all(value in POSTER_LEVELS for row in result.pixels for pixel in row for value in pixel)


def test_pixelate_one_is_identity():
    rng = random.Random(9)
    rows = [[tuple(rng.randrange(256) for _ in range(4)) for _ in range(5)] for _ in range(4)]
    image = Raster.from_rows(rows)

    assert pixelate(image, 1) == image


def test_pixelate_truncates_clipped_blocks():
    values = [[1, 2, 3], [4, 6, 7], [8, 9, 10]]
    image = Raster.from_rows([[(v, v, v) for v in row] for row in values])
    result = pixelate(image, 2)

    assert [[pixel[0] for pixel in row] for row in result.to_rows()] == [
        [3, 3, 5],
        [3, 3, 5],
        [8, 8, 10],
    ]


def test_pixelate_block_larger_than_image():
    image = Raster.from_rows([[(1, 1, 1), (2, 2, 2)], [(3, 3, 3), (5, 5, 5)]])
    result = pixelate(image, 10)

    assert {tuple(p) for row in result.pixels for p in row} == {(2, 2, 2)}


def test_pixelate_averages_alpha():
    image = Raster.from_rows([[(0, 0, 0, 0), (0, 0, 0, 255)]])
    assert pixelate(image, 2).to_rows() == [[(0, 0, 0, 127), (0, 0, 0, 127)]]


def test_pixelate_rejects_block_size_below_one():
    with pytest.raises(InvalidParameterError):
        pixelate(Raster.new(2, 2), 0)
