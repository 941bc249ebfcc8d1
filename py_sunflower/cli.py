#!/usr/bin/env python3
"""Command-line front end: generate one arrangement and print the result."""

import argparse
import sys

import structlog
from pydantic import ValidationError

from .config import settings
from .config.controls import CONTROL_RANGES, ControlSettings
from .core.point_generator import GenMode, MODE_ALIASES
from .logging_config import LOG_LEVELS, configure_logging
from .scene import ATTRIBUTION_TEXT, ATTRIBUTION_URL, build_scene, format_stats

logger = structlog.get_logger()

NUMERIC_OPTIONS = {
    # option name -> (ControlSettings field, type)
    "n": ("n", int),
    "alpha": ("alpha", float),
    "layers": ("layers", int),
    "n-per-layer": ("n_per_layer", float),
    "size": ("size", float),
    "radius": ("radius", float),
    "twist": ("twist", float),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="py-sunflower",
        description="Generate sunflower and ring-lattice point arrangements",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in GenMode] + list(MODE_ALIASES),
        default=settings.default_mode,
        help="Generation mode",
    )
    for option, (field, kind) in NUMERIC_OPTIONS.items():
        spec = CONTROL_RANGES[field]
        parser.add_argument(
            f"--{option}",
            type=kind,
            default=None,
            help=f"{spec.minimum} to {spec.maximum} (default {spec.default})",
        )
    parser.add_argument("--svg", action="store_true", help="Print SVG markup")
    parser.add_argument("--center", action="store_true", help="Mark each point's exact center")
    parser.add_argument("--crosshair", action="store_true", help="Draw a crosshair through each point")
    parser.add_argument(
        "--adjust-size-to-fit-radius",
        action="store_true",
        help="Shrink the generation circle so boundary dots stay on the canvas",
    )
    parser.add_argument(
        "--stats-method",
        choices=["auto", "brute", "kdtree"],
        default="auto",
        help="Nearest-neighbor search used for statistics",
    )
    parser.add_argument("--interactive", action="store_true", help="Open the interactive viewer")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Override the configured log level",
    )
    return parser


def controls_from_args(args: argparse.Namespace) -> ControlSettings:
    """Build a control snapshot from parsed arguments; unset options keep their defaults."""
    values = {
        "mode": args.mode,
        "svg": args.svg,
        "center": args.center,
        "crosshair": args.crosshair,
        "adjust_size_to_fit_radius": args.adjust_size_to_fit_radius,
    }
    for option, (field, _) in NUMERIC_OPTIONS.items():
        value = getattr(args, option.replace("-", "_"))
        if value is not None:
            values[field] = value
    return ControlSettings(**values)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(level=args.log_level)
    except ValueError as e:
        parser.error(str(e))

    try:
        controls = controls_from_args(args)
    except ValidationError as e:
        logger.error("Invalid controls", errors=e.error_count())
        parser.error(str(e))

    if args.interactive:
        from .viewer import run_viewer
        run_viewer(controls, stats_method=args.stats_method)
        return 0

    scene = build_scene(controls, stats_method=args.stats_method)

    if scene.markup is not None:
        print(scene.markup)
    else:
        print(f"Generated {len(scene.points)} points ({controls.mode.value})")
    print(format_stats(scene.stats))
    print(f"{ATTRIBUTION_TEXT}: {ATTRIBUTION_URL}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
