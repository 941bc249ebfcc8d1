"""Point arrangement generation.

Produces sunflower (phyllotaxis) spirals and concentric ring lattices inside a
circle of diameter ``size`` centered on the origin. The caller is responsible
for translating the points to the canvas center.

The sunflower placement follows the well known "uniformly distribute points
inside a circle" construction: point ``k`` sits at radius ``sqrt(k - 0.5)``
(normalized) and angle ``k * stride``, with the outermost ``b`` points pinned
to the boundary to smooth the edge.
"""

import math
from enum import Enum
from typing import NamedTuple, Union

import numpy as np
import structlog

logger = structlog.get_logger()

PHI = (1 + math.sqrt(5)) / 2
COORDINATE_PRECISION = 2


class GenMode(str, Enum):
    """Available generation variants."""
    SUNFLOWER = "sunflower"
    SUNFLOWER_GEODESIC = "sunflowerGeodesic"
    LATTICE = "lattice"


# Alternative names accepted by generate_points()
MODE_ALIASES = {
    "hexLattice": GenMode.LATTICE,
}


class GenerationParameters(NamedTuple):
    """Configuration for a single generation pass."""
    n: int = 50
    alpha: float = 2.0
    mode: Union[GenMode, str] = GenMode.SUNFLOWER
    size: float = 500.0
    layers: int = 5
    n_per_layer: float = 6.0
    twist: float = 0.0


def empty_point_set() -> np.ndarray:
    return np.empty((0, 2), dtype=np.float64)


def radius_factor(k: int, n: int, b: int) -> float:
    """
    Normalized radius of the k-th sunflower point.

    The last ``b`` points (k > n - b) lie exactly on the boundary.
    """
    if k > n - b:
        return 1.0
    return math.sqrt(k - 0.5) / math.sqrt(n - (b + 1) / 2)


def generate_sunflower_points(n: int, alpha: float, geodesic: bool, size: float) -> np.ndarray:
    """
    Generate a sunflower spiral of exactly ``n`` points.

    Args:
        n: Number of points
        alpha: Boundary smoothness; about alpha * sqrt(n) points are
            placed on the boundary circle
        geodesic: Use the degree-based stride of 360 * phi degrees,
            converted to radians, instead of the golden angle 2 * pi / phi ** 2
        size: Diameter of the bounding circle

    Returns:
        Array of [x, y] coordinates rounded to 2 decimals, in generation order
    """
    angle_stride = math.radians(360 * PHI) if geodesic else (2 * math.pi) / PHI ** 2
    # Halves round up
    b = math.floor(alpha * math.sqrt(n) + 0.5)

    points = []
    for k in range(1, n + 1):
        r = radius_factor(k, n, b) * (size / 2)
        theta = k * angle_stride
        x = r * math.cos(theta)
        y = r * math.sin(theta)
        points.append([round(x, COORDINATE_PRECISION), round(y, COORDINATE_PRECISION)])

    if not points:
        return empty_point_set()
    return np.array(points, dtype=np.float64)


def generate_lattice_points(n: int, size: float, layers: int, n_per_layer: float, twist: float) -> np.ndarray:
    """
    Generate concentric rings of evenly spaced points.

    Ring ``layer`` holds ``1 + layer * n_per_layer`` points at radius
    ``layer * size / (2 * layers)``; ring 0 is the single center point.
    Each ring is rotated by ``twist * layer * pi``. A fractional count still
    emits a point for every integer index below it.

    If more than ``n`` points are produced, the sequence is decimated with an
    even stride of ``floor(total / n)`` (indices 0, stride, 2 * stride, ...)
    and cut off after ``n`` points, so the result never exceeds ``n``.
    ``n < 1`` yields an empty set.
    """
    points = []
    for layer in range(layers):
        points_per_layer = 1 + layer * n_per_layer
        angle_stride = (2 * math.pi) / points_per_layer
        radius = (layer * size) / (2 * layers)
        for i in range(math.ceil(points_per_layer)):
            theta = i * angle_stride + twist * layer * math.pi
            x = radius * math.cos(theta)
            y = radius * math.sin(theta)
            points.append([round(x, COORDINATE_PRECISION), round(y, COORDINATE_PRECISION)])

    if not points or n < 1:
        return empty_point_set()

    if len(points) > n:
        stride = len(points) // n
        logger.debug("Decimating lattice", generated=len(points), requested=n, stride=stride)
        points = points[::stride][:n]

    return np.array(points, dtype=np.float64)


def resolve_mode(mode: Union[GenMode, str]) -> Union[GenMode, None]:
    """Map a mode name or alias to a GenMode, or None if unrecognized."""
    if isinstance(mode, GenMode):
        return mode
    if mode in MODE_ALIASES:
        return MODE_ALIASES[mode]
    try:
        return GenMode(mode)
    except ValueError:
        return None


def generate_points(params: GenerationParameters) -> np.ndarray:
    """
    Generate the point set selected by ``params.mode``.

    An unrecognized mode yields an empty point set.
    """
    mode = resolve_mode(params.mode)

    if mode in (GenMode.SUNFLOWER, GenMode.SUNFLOWER_GEODESIC):
        return generate_sunflower_points(
            params.n,
            params.alpha,
            mode == GenMode.SUNFLOWER_GEODESIC,
            params.size,
        )
    if mode == GenMode.LATTICE:
        return generate_lattice_points(
            n=params.n,
            size=params.size,
            layers=params.layers,
            n_per_layer=params.n_per_layer,
            twist=params.twist,
        )

    logger.warning("Unrecognized generation mode", mode=str(params.mode))
    return empty_point_set()
