"""
One generation pass from a control snapshot to displayable output.

Points are generated exactly once per scene and both the statistics and the
drawing are derived from that same array, so what is shown and what is
measured always agree.
"""

import json
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np
import structlog

from .config import settings
from .config.controls import ControlSettings
from .core.markup_exporter import export_svg_markup
from .core.point_generator import generate_points
from .core.point_stats import PointStats, compute_point_stats
from .core.renderer import Drawing, StyleParameters, render_dot_arrangement

logger = structlog.get_logger()

ATTRIBUTION_TEXT = "Sunflower algorithm source"
ATTRIBUTION_URL = "https://stackoverflow.com/a/28572551/51685"


@dataclass(frozen=True, eq=False)
class Scene:
    """Everything produced for one control snapshot."""
    controls: ControlSettings
    points: np.ndarray
    stats: PointStats
    drawing: Drawing
    markup: Optional[str] = None


def select_stats_method(point_count: int, method: str = "auto") -> str:
    """Resolve "auto" to brute force or KD-tree by point count."""
    if method != "auto":
        return method
    return "kdtree" if point_count >= settings.kdtree_threshold else "brute"


def build_scene(controls: ControlSettings, stats_method: str = "auto") -> Scene:
    """
    Generate, measure and render one arrangement.

    The generator receives the possibly shrunk ``generation_size``; statistics
    and the canvas keep the full ``size``.
    """
    points = generate_points(controls.to_generation_parameters())
    points.setflags(write=False)

    method = select_stats_method(len(points), stats_method)
    stats = compute_point_stats(points, controls.size, method=method)

    style = StyleParameters(center=controls.center, crosshair=controls.crosshair)
    drawing = render_dot_arrangement(points, controls.radius, controls.size, style)

    markup = export_svg_markup(drawing) if controls.svg else None

    logger.info(
        "Scene built",
        mode=controls.mode.value,
        points=len(points),
        stats_method=method,
        svg=controls.svg,
    )
    return Scene(controls=controls, points=points, stats=stats, drawing=drawing, markup=markup)


def _json_safe(value: float):
    return value if math.isfinite(value) else None


def format_stats(stats: PointStats) -> str:
    """Pretty-print stats as indented JSON; non-finite values become null."""
    data = {key: _json_safe(value) for key, value in stats.to_dict().items()}
    return json.dumps(data, indent=2)
