"""Deterministic raster filter engine."""

from .blur import box_blur, gaussian_blur
from .config import FilterStep, PipelineConfig
from .convolution import detect_edges, sharpen
from .errors import ConfigError, FilterError, InvalidParameterError, RasterFormatError
from .geometry import mirror, rotate
from .io import load_raster, raster_from_pil, raster_to_pil, save_raster
from .pipeline import FILTERS, apply_filter, apply_pipeline
from .quantize import pixelate, posterize
from .raster import Raster
from .tone import brighten, darken, grayscale, negative, sepia
from .watermark import watermark

__all__ = [
    "Raster",
    "mirror",
    "rotate",
    "detect_edges",
    "sharpen",
    "box_blur",
    "gaussian_blur",
    "grayscale",
    "sepia",
    "negative",
    "brighten",
    "darken",
    "posterize",
    "pixelate",
    "watermark",
    "FILTERS",
    "apply_filter",
    "apply_pipeline",
    "FilterStep",
    "PipelineConfig",
    "load_raster",
    "save_raster",
    "raster_from_pil",
    "raster_to_pil",
    "FilterError",
    "InvalidParameterError",
    "RasterFormatError",
    "ConfigError",
]
