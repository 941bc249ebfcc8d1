"""
Nearest-neighbor statistics for point arrangements.

For every point the distance to its closest other point is measured and
normalized by the canvas size. The summary describes how evenly a
generated arrangement is packed: a perfectly even packing has
``minimum == maximum`` and ``max_diff_from_average_norm == 0``.

Degenerate point sets are not special-cased. With no points the reductions
are empty (minimum is +inf, maximum is -inf, the rest NaN); with a single
point its nearest neighbor distance is +inf. Callers get these non-finite
values back instead of an exception.
"""

import math
from dataclasses import asdict, dataclass
from typing import Dict

import numpy as np
import structlog
from scipy.spatial import cKDTree

logger = structlog.get_logger()

STATS_METHODS = ("brute", "kdtree")


@dataclass(frozen=True)
class PointStats:
    """Summary of normalized nearest-neighbor distances."""
    average: float
    median: float
    minimum: float
    maximum: float
    max_diff_from_average_norm: float

    def to_dict(self) -> Dict[str, float]:
        """Return the stats keyed the way the control panel displays them."""
        return {
            "average": self.average,
            "median": self.median,
            "minimum": self.minimum,
            "maximum": self.maximum,
            "maxDiffFromAverageNorm": self.max_diff_from_average_norm,
        }

    def is_finite(self) -> bool:
        return all(math.isfinite(value) for value in asdict(self).values())


def _brute_force_distances(points: np.ndarray) -> np.ndarray:
    # Pairwise distances with the self-distance masked out
    dx = points[:, np.newaxis, 0] - points[np.newaxis, :, 0]
    dy = points[:, np.newaxis, 1] - points[np.newaxis, :, 1]
    distances = np.hypot(dx, dy)
    np.fill_diagonal(distances, np.inf)
    return distances.min(axis=1, initial=np.inf)


def _kdtree_distances(points: np.ndarray) -> np.ndarray:
    tree = cKDTree(points)
    # k=2: the closest hit is the point itself; missing neighbors come back as inf
    distances, _ = tree.query(points, k=2)
    return distances[:, 1]


def nearest_neighbor_distances(points: np.ndarray, size: float, method: str = "brute") -> np.ndarray:
    """
    Compute each point's distance to its nearest other point.

    Args:
        points: Array of [x, y] coordinates
        size: Normalization factor (canvas size)
        method: "brute" for the O(N^2) pairwise scan, "kdtree" for a
            scipy cKDTree query

    Returns:
        Array of normalized distances, one per point, in input order
    """
    if method not in STATS_METHODS:
        raise ValueError(f"Unknown nearest-neighbor method: {method}")

    points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if len(points) == 0:
        return np.empty(0, dtype=np.float64)

    if method == "kdtree":
        raw = _kdtree_distances(points)
    else:
        raw = _brute_force_distances(points)

    with np.errstate(divide="ignore", invalid="ignore"):
        return raw / size


def compute_point_stats(points: np.ndarray, size: float, method: str = "brute") -> PointStats:
    """
    Summarize the nearest-neighbor distances of a point set.

    The median is the lower-middle element of the sorted distances for
    even-length sets; no interpolation is done.
    """
    distances = nearest_neighbor_distances(points, size, method=method)
    count = len(distances)

    with np.errstate(divide="ignore", invalid="ignore"):
        minimum = distances.min(initial=np.inf)
        maximum = distances.max(initial=-np.inf)
        average = np.float64(distances.sum()) / np.float64(count)

        ordered = np.sort(distances)
        median = ordered[count // 2] if count else np.nan

        deviations = np.abs(distances - average)
        max_diff_from_average_norm = deviations.max(initial=-np.inf) / average

    stats = PointStats(
        average=float(average),
        median=float(median),
        minimum=float(minimum),
        maximum=float(maximum),
        max_diff_from_average_norm=float(max_diff_from_average_norm),
    )
    logger.debug("Computed point statistics", points=count, method=method, finite=stats.is_finite())
    return stats
