"""Filter registry and sequential pipeline execution."""
from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Dict

from .blur import box_blur, gaussian_blur
from .config import PipelineConfig, resolve_filter_name
from .convolution import detect_edges, sharpen
from .errors import ConfigError
from .geometry import mirror, rotate
from .quantize import pixelate, posterize
from .raster import Raster
from .tone import brighten, darken, grayscale, negative, sepia
from .watermark import watermark

logger = logging.getLogger(__name__)

FilterFunc = Callable[..., Raster]

FILTERS: Dict[str, FilterFunc] = {
    "mirror": mirror,
    "rotate": rotate,
    "detect_edges": detect_edges,
    "box_blur": box_blur,
    "gaussian_blur": gaussian_blur,
    "sharpen": sharpen,
    "grayscale": grayscale,
    "sepia": sepia,
    "negative": negative,
    "brighten": brighten,
    "darken": darken,
    "posterize": posterize,
    "pixelate": pixelate,
    "watermark": watermark,
}


def apply_filter(image: Raster, name: str, **params: Any) -> Raster:
    """Run the filter registered under ``name`` (or one of its aliases)."""

    key = resolve_filter_name(name)
    func = FILTERS[key]
    try:
        inspect.signature(func).bind(image, **params)
    except TypeError as exc:
        raise ConfigError(f"Bad parameters for {key}: {exc}") from exc
    logger.debug("Applying %s%s to %dx%d raster", key, params or "", image.width, image.height)
    return func(image, **params)


def apply_pipeline(image: Raster, config: PipelineConfig) -> Raster:
    """Run every step of ``config`` in order.

    Each step receives the previous result; the input raster is never
    modified, so a failing step leaves the caller's image as it was.
    """

    result = image
    for index, step in enumerate(config.steps):
        logger.debug("Pipeline %r step %d: %s", config.name, index, step.name)
        result = apply_filter(result, step.name, **dict(step.params))
    if result is image:
        result = image.copy()
    return result


__all__ = ["FILTERS", "FilterFunc", "apply_filter", "apply_pipeline"]
