"""
Vector drawing model for point arrangements.

A Drawing is a square canvas whose origin is translated to its center, holding
an ordered list of shapes. Later elements are drawn on top of earlier ones.
The drawing is consumed by the markup exporter and the matplotlib plotter.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

import numpy as np
import structlog

logger = structlog.get_logger()

DOT_COLOR = "black"
CROSSHAIR_COLOR = "red"
CENTER_MARK_COLOR = "blue"
CENTER_MARK_RADIUS = 0.1
# Crosshair arms extend this fraction of the dot radius each way (1.5x radius total)
CROSSHAIR_SCALE = 0.75


@dataclass(frozen=True)
class StyleParameters:
    """Rendering toggles. Neither affects point generation."""
    center: bool = False
    crosshair: bool = False

    @property
    def outlined(self) -> bool:
        return self.center or self.crosshair


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    fill: Optional[str] = DOT_COLOR
    stroke: Optional[str] = None


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str = CROSSHAIR_COLOR


Shape = Union[Circle, Line]


@dataclass(frozen=True)
class Drawing:
    """Square canvas of side ``size`` with shapes in origin-centered coordinates."""
    size: float
    elements: Tuple[Shape, ...] = field(default_factory=tuple)

    @property
    def offset(self) -> float:
        """Translation applied to move the origin to the canvas center."""
        return self.size / 2

    def circles(self) -> Tuple[Circle, ...]:
        return tuple(e for e in self.elements if isinstance(e, Circle))

    def lines(self) -> Tuple[Line, ...]:
        return tuple(e for e in self.elements if isinstance(e, Line))


def render_dot(cx: float, cy: float, radius: float, style: StyleParameters) -> Tuple[Shape, ...]:
    """
    Build the shapes for a single point.

    The dot is filled unless a marker toggle is set, in which case it is
    outlined so the markers stay visible. Crosshair lines come before the
    center mark.
    """
    if style.outlined:
        shapes = [Circle(cx, cy, radius, fill="none", stroke=DOT_COLOR)]
    else:
        shapes = [Circle(cx, cy, radius, fill=DOT_COLOR)]

    if style.crosshair:
        arm = radius * CROSSHAIR_SCALE
        shapes.append(Line(cx - arm, cy, cx + arm, cy))
        shapes.append(Line(cx, cy - arm, cx, cy + arm))

    if style.center:
        shapes.append(Circle(cx, cy, CENTER_MARK_RADIUS, fill=None, stroke=CENTER_MARK_COLOR))

    return tuple(shapes)


def render_dot_arrangement(
    points: np.ndarray,
    radius: float,
    size: float,
    style: Optional[StyleParameters] = None,
) -> Drawing:
    """
    Map a point set to a Drawing.

    Args:
        points: Array of [x, y] coordinates centered on the origin
        radius: Dot radius in drawing units
        size: Canvas side length
        style: Marker toggles, defaults to plain filled dots

    Returns:
        Drawing with one group of shapes per point, in point order
    """
    style = style or StyleParameters()

    elements = []
    for cx, cy in np.asarray(points, dtype=np.float64).reshape(-1, 2):
        elements.extend(render_dot(float(cx), float(cy), radius, style))

    logger.debug("Rendered arrangement", points=len(points), shapes=len(elements),
                 center=style.center, crosshair=style.crosshair)
    return Drawing(size=size, elements=tuple(elements))
