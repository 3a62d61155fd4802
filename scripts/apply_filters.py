#!/usr/bin/env python3
"""CLI entry point for running raster filters over an image file."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

import yaml

# Allow running the script directly from the repository root without installing the
# package by adding ``src`` to ``sys.path`` when available.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if SRC_PATH.exists():
    src_str = str(SRC_PATH)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)

from raster_filters import FilterError, PipelineConfig, apply_pipeline, load_raster, save_raster
from raster_filters.config import FilterStep


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Apply raster filters to an image")
    parser.add_argument("input", type=Path, help="Source image")
    parser.add_argument("output", type=Path, help="Destination image")
    parser.add_argument("--config", type=Path, help="YAML pipeline configuration")
    parser.add_argument(
        "--filter",
        dest="filters",
        action="append",
        default=[],
        metavar="NAME[:KEY=VALUE,...]",
        help="Filter step appended after the config steps, e.g. rotate:angle=30",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def parse_filter(text: str) -> Dict[str, Any]:
    """Turn ``rotate:angle=30,x=1`` into a step mapping with YAML scalar values."""

    name, _, remainder = text.partition(":")
    step: Dict[str, Any] = {"filter": name}
    for item in filter(None, (part.strip() for part in remainder.split(","))):
        key, sep, value = item.partition("=")
        if not sep:
            raise FilterError(f"Expected KEY=VALUE in filter {text!r}, got {item!r}")
        step[key.strip()] = yaml.safe_load(value)
    return step


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = PipelineConfig.load(args.config) if args.config else PipelineConfig()
        extra = tuple(FilterStep.from_value(parse_filter(text)) for text in args.filters)
        config = PipelineConfig(steps=config.steps + extra, name=config.name)
        image = load_raster(args.input)
        result = apply_pipeline(image, config)
        save_raster(result, args.output)
    # Pillow's UnidentifiedImageError is an OSError.
    except (FilterError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
