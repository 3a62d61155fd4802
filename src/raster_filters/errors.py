"""Exceptions raised by the raster filters."""
from __future__ import annotations


class FilterError(ValueError):
    """Base class for every error raised by :mod:`raster_filters`."""


class InvalidParameterError(FilterError):
    """A filter was called with an argument outside its valid domain."""

    def __init__(self, filter_name: str, parameter: str, value: object, reason: str) -> None:
        self.filter_name = filter_name
        self.parameter = parameter
        self.value = value
        super().__init__(f"{filter_name}: invalid {parameter}={value!r} ({reason})")


class RasterFormatError(FilterError):
    """Pixel data that cannot be represented as a raster."""


class ConfigError(FilterError):
    """Invalid filter pipeline configuration."""


__all__ = ["FilterError", "InvalidParameterError", "RasterFormatError", "ConfigError"]
