"""Tests for nearest-neighbor point statistics."""

import math

import pytest
import numpy as np
from py_sunflower.core.point_generator import generate_sunflower_points
from py_sunflower.core.point_stats import (
    PointStats, compute_point_stats, nearest_neighbor_distances
)


class TestNearestNeighborDistances:
    """Test per-point nearest-neighbor distances."""

    def test_line_of_points(self):
        """Test distances for points on a line."""
        points = np.array([[0, 0], [1, 0], [3, 0], [7, 0]], dtype=float)
        distances = nearest_neighbor_distances(points, 1)
        np.testing.assert_array_equal(distances, [1, 1, 2, 4])

    def test_normalization(self):
        """Test that distances are divided by size."""
        points = np.array([[0, 0], [3, 4]], dtype=float)
        distances = nearest_neighbor_distances(points, 10)
        np.testing.assert_allclose(distances, [0.5, 0.5])

    def test_duplicate_points(self):
        """Test that coincident points have distance zero."""
        points = np.array([[1, 1], [1, 1], [5, 5]], dtype=float)
        distances = nearest_neighbor_distances(points, 1)
        assert distances[0] == 0
        assert distances[1] == 0

    def test_kdtree_matches_brute_force(self):
        """Test that both search methods agree."""
        points = generate_sunflower_points(400, 2.0, False, 500)
        brute = nearest_neighbor_distances(points, 500, method="brute")
        kdtree = nearest_neighbor_distances(points, 500, method="kdtree")
        np.testing.assert_allclose(brute, kdtree, rtol=1e-12)

    def test_single_point_is_infinite(self):
        """Test that a lone point has no neighbor."""
        for method in ("brute", "kdtree"):
            distances = nearest_neighbor_distances(np.array([[2.0, 3.0]]), 1, method=method)
            assert distances.shape == (1,)
            assert math.isinf(distances[0])

    def test_empty(self):
        """Test that an empty set gives no distances."""
        distances = nearest_neighbor_distances(np.empty((0, 2)), 1)
        assert distances.shape == (0,)

    def test_unknown_method(self):
        """Test that an unknown search method is rejected."""
        with pytest.raises(ValueError):
            nearest_neighbor_distances(np.zeros((2, 2)), 1, method="octree")


class TestComputePointStats:
    """Test summary statistics."""

    def test_two_points(self):
        """Test that two points at distance d give d everywhere and zero deviation."""
        points = np.array([[0, 0], [3, 4]], dtype=float)
        stats = compute_point_stats(points, 1)

        assert stats.average == 5
        assert stats.minimum == 5
        assert stats.maximum == 5
        assert stats.median == 5
        assert stats.max_diff_from_average_norm == 0

    def test_lower_middle_median(self):
        """Test that even-length medians take the lower-middle element without interpolation."""
        points = np.array([[0, 0], [1, 0], [3, 0], [7, 0]], dtype=float)
        stats = compute_point_stats(points, 1)

        # sorted distances [1, 1, 2, 4] -> element at index 2
        assert stats.median == 2
        assert stats.average == 2
        assert stats.minimum == 1
        assert stats.maximum == 4
        assert stats.max_diff_from_average_norm == pytest.approx(1.0)

    def test_odd_median(self):
        """Test the median of an odd-length set."""
        points = np.array([[0, 0], [1, 0], [3, 0]], dtype=float)
        stats = compute_point_stats(points, 1)
        # distances [1, 1, 2]
        assert stats.median == 1

    def test_single_point(self):
        """Test that one point yields infinite stats rather than an error."""
        stats = compute_point_stats(np.array([[10.0, 10.0]]), 100)

        assert stats.minimum == math.inf
        assert stats.maximum == math.inf
        assert stats.average == math.inf
        assert stats.median == math.inf
        assert math.isnan(stats.max_diff_from_average_norm)
        assert not stats.is_finite()

    def test_empty_set(self):
        """Test that no points yields empty-reduction values rather than an error."""
        stats = compute_point_stats(np.empty((0, 2)), 100)

        assert stats.minimum == math.inf
        assert stats.maximum == -math.inf
        assert math.isnan(stats.average)
        assert math.isnan(stats.median)
        assert math.isnan(stats.max_diff_from_average_norm)

    def test_sunflower_is_fairly_even(self):
        """Test that a sunflower packing has a tight distance spread."""
        size = 500
        points = generate_sunflower_points(300, 2.0, False, size)
        stats = compute_point_stats(points, size)

        assert stats.is_finite()
        assert 0 < stats.minimum <= stats.median <= stats.maximum
        assert stats.minimum <= stats.average <= stats.maximum
        assert stats.max_diff_from_average_norm < 1.5

    def test_kdtree_method(self):
        """Test that the KD-tree method gives the same summary."""
        points = generate_sunflower_points(250, 1.0, True, 400)
        brute = compute_point_stats(points, 400, method="brute")
        kdtree = compute_point_stats(points, 400, method="kdtree")

        assert kdtree.average == pytest.approx(brute.average)
        assert kdtree.median == pytest.approx(brute.median)
        assert kdtree.minimum == pytest.approx(brute.minimum)
        assert kdtree.maximum == pytest.approx(brute.maximum)

    def test_to_dict_keys(self):
        """Test the display keys."""
        stats = PointStats(average=1, median=2, minimum=0.5, maximum=3, max_diff_from_average_norm=2)
        assert stats.to_dict() == {
            "average": 1,
            "median": 2,
            "minimum": 0.5,
            "maximum": 3,
            "maxDiffFromAverageNorm": 2,
        }
