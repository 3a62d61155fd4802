"""Configuration structures for filter pipelines."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

FILTER_NAMES = (
    "mirror",
    "rotate",
    "detect_edges",
    "box_blur",
    "gaussian_blur",
    "sharpen",
    "grayscale",
    "sepia",
    "negative",
    "brighten",
    "darken",
    "posterize",
    "pixelate",
    "watermark",
)

FILTER_ALIASES: Dict[str, str] = {
    "flip": "mirror",
    "edges": "detect_edges",
    "sobel": "detect_edges",
    "blur": "gaussian_blur",
    "gaussian": "gaussian_blur",
    "box": "box_blur",
    "gray": "grayscale",
    "grey": "grayscale",
    "greyscale": "grayscale",
    "invert": "negative",
    "poster": "posterize",
    "pixelize": "pixelate",
}

PARAM_ALIASES: Dict[str, Dict[str, str]] = {
    "rotate": {"angle": "angle_degrees", "degrees": "angle_degrees"},
    "pixelate": {"size": "block_size", "block": "block_size"},
    "gaussian_blur": {"radius": "intensity"},
}


def resolve_filter_name(name: str) -> str:
    """Return the canonical filter name for ``name`` or its alias."""

    key = str(name).strip().lower().replace("-", "_")
    key = FILTER_ALIASES.get(key, key)
    if key not in FILTER_NAMES:
        raise ConfigError(f"Unknown filter: {name!r}")
    return key


@dataclass(frozen=True)
class FilterStep:
    """A single filter invocation with its keyword parameters."""

    name: str
    params: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_value(cls, value: Any) -> "FilterStep":
        """Build a step from ``"negative"`` or ``{filter: rotate, angle: 30}``."""

        if isinstance(value, str):
            return cls(name=resolve_filter_name(value))
        if not isinstance(value, Mapping):
            raise ConfigError(f"Filter step must be a name or a mapping, got {value!r}")
        data = dict(value)
        raw_name = data.pop("filter", None)
        if raw_name is None:
            raw_name = data.pop("name", None)
        if raw_name is None:
            raise ConfigError(f"Filter step is missing a 'filter' key: {value!r}")
        name = resolve_filter_name(raw_name)
        extra = data.pop("params", None)
        if extra is not None:
            if not isinstance(extra, Mapping):
                raise ConfigError(f"'params' of step {name!r} must be a mapping")
            data.update(extra)
        aliases = PARAM_ALIASES.get(name, {})
        params = {aliases.get(key, key): item for key, item in data.items()}
        return cls(name=name, params=params)


@dataclass(frozen=True)
class PipelineConfig:
    """Top level configuration: an ordered list of filter steps."""

    steps: Tuple[FilterStep, ...] = ()
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PipelineConfig":
        """Construct a :class:`PipelineConfig` from a dictionary."""

        if not isinstance(data, Mapping):
            raise ConfigError("Configuration root must be a mapping")
        raw_steps = data.get("steps", data.get("filters", []))
        if raw_steps is None:
            raw_steps = []
        if not isinstance(raw_steps, (list, tuple)):
            raise ConfigError("'steps' must be a list")
        steps = tuple(FilterStep.from_value(item) for item in raw_steps)
        name = data.get("name")
        return cls(steps=steps, name=str(name) if name is not None else None)

    @classmethod
    def load(cls, path: Path | str) -> "PipelineConfig":
        """Load configuration from a YAML file."""

        text = Path(path).read_text(encoding="utf8")
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
        if data is None:
            data = {}
        config = cls.from_dict(data)
        logger.debug("Loaded pipeline %r with %d steps from %s", config.name, len(config.steps), path)
        return config

    @property
    def filter_names(self) -> Tuple[str, ...]:
        return tuple(step.name for step in self.steps)


__all__ = [
    "FILTER_NAMES",
    "FILTER_ALIASES",
    "PARAM_ALIASES",
    "resolve_filter_name",
    "FilterStep",
    "PipelineConfig",
]
