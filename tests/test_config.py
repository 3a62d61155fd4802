from __future__ import annotations

from pathlib import Path

import pytest

from raster_filters import ConfigError, FilterStep, PipelineConfig
from raster_filters.config import FILTER_NAMES, resolve_filter_name
from raster_filters.pipeline import FILTERS


def test_registry_covers_every_filter_name():
    assert set(FILTERS) == set(FILTER_NAMES)


@pytest.mark.parametrize(
    "alias, canonical",
    [("grey", "grayscale"), ("Invert", "negative"), ("blur", "gaussian_blur"), ("detect-edges", "detect_edges")],
)
def test_aliases_resolve(alias, canonical):
    assert resolve_filter_name(alias) == canonical


def test_from_dict_accepts_names_and_mappings():
    config = PipelineConfig.from_dict(
        {
            "name": "vintage",
            "steps": [
                "sepia",
                {"filter": "rotate", "angle": 12.5},
                {"name": "pixelate", "params": {"size": 4}},
                {"filter": "blur", "radius": 2},
            ],
        }
    )

    assert config.name == "vintage"
    assert config.filter_names == ("sepia", "rotate", "pixelate", "gaussian_blur")
    assert config.steps[0] == FilterStep(name="sepia")
    assert dict(config.steps[1].params) == {"angle_degrees": 12.5}
    assert dict(config.steps[2].params) == {"block_size": 4}
    assert dict(config.steps[3].params) == {"intensity": 2}


@pytest.mark.parametrize(
    "data",
    [
        ["negative"],
        {"steps": "negative"},
        {"steps": ["unknown"]},
        {"steps": [{"angle": 3}]},
        {"steps": [42]},
        {"steps": [{"filter": "rotate", "params": [1, 2]}]},
    ],
)
def test_invalid_configs_raise(data):
    with pytest.raises(ConfigError):
        PipelineConfig.from_dict(data)


def test_load_yaml(tmp_path):
    path = tmp_path / "pipeline.yaml"
    path.write_text(
        """
name: poster
steps:
  - grayscale
  - filter: posterize
  - filter: mirror
    vertical: true
""",
        encoding="utf8",
    )
    config = PipelineConfig.load(path)

    assert config.name == "poster"
    assert config.filter_names == ("grayscale", "posterize", "mirror")
    assert config.steps[2].params == {"vertical": True}


def test_load_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf8")

    assert PipelineConfig.load(path).steps == ()


def test_load_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("steps: [negative\n", encoding="utf8")

    with pytest.raises(ConfigError):
        PipelineConfig.load(path)


def test_bundled_vintage_config():
    path = Path(__file__).resolve().parents[1] / "configs" / "vintage.yaml"
    config = PipelineConfig.load(path)

    assert config.filter_names == ("sepia", "gaussian_blur", "darken", "watermark")
    assert config.steps[2].params == {"dial": -0.15}
