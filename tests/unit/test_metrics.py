"""
Unit tests for distance kernels.
"""

import itertools

import pytest
import numpy as np
from numpy.testing import assert_almost_equal
import scipy.spatial.distance as scipy_distance

from vecdist.core.exceptions import DegenerateInputError, DimensionMismatchError, ValidationError
from vecdist.distance import (
    euclidean,
    manhattan,
    centered_pearson,
    cosine,
    distance,
    DistanceMetric,
)
from vecdist.utils import center_vector


ALL_METRICS = list(DistanceMetric)
TRUE_METRICS = [DistanceMetric.EUCLIDEAN, DistanceMetric.MANHATTAN]


class TestEuclideanDistance:
    """Tests for Euclidean distance."""

    def test_zero_distance(self):
        """Same vectors should have zero distance."""
        a = np.array([1.0, 2.0, 3.0])
        assert euclidean(a, a) == 0.0

    def test_known_distance(self):
        """Test with known distance (3-4-5 triangle)."""
        assert euclidean([0.0, 0.0], [3.0, 4.0]) == 5.0

    def test_accepts_lists_and_ints(self):
        assert euclidean([0, 0], [3, 4]) == 5.0

    def test_empty_vectors(self):
        """Zero-length vectors are at distance zero."""
        assert euclidean([], []) == 0.0

    def test_matches_scipy(self, rng):
        a = rng.standard_normal(20)
        b = rng.standard_normal(20)
        assert_almost_equal(euclidean(a, b), scipy_distance.euclidean(a, b))

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError) as exc_info:
            euclidean([1.0, 2.0, 3.0], [1.0, 2.0])

        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_rejects_matrix_operand(self):
        with pytest.raises(ValidationError):
            euclidean([[1.0, 2.0]], [[1.0, 2.0]])

    def test_rejects_non_numeric(self):
        with pytest.raises(ValidationError):
            euclidean(["a", "b"], [1.0, 2.0])


class TestManhattanDistance:
    """Tests for Manhattan distance."""

    def test_zero_distance(self):
        a = np.array([1.0, 2.0, 3.0])
        assert manhattan(a, a) == 0.0

    def test_known_distance(self):
        assert manhattan([1.0, 2.0, 3.0], [0.0, 0.0, 0.0]) == 6.0

    def test_negative_components(self):
        assert manhattan([-1.0, 2.0], [1.0, -2.0]) == 6.0

    def test_empty_vectors(self):
        assert manhattan([], []) == 0.0

    def test_matches_scipy(self, rng):
        a = rng.standard_normal(20)
        b = rng.standard_normal(20)
        assert_almost_equal(manhattan(a, b), scipy_distance.cityblock(a, b))

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            manhattan([1.0], [1.0, 2.0])


class TestCenteredPearsonDistance:
    """Tests for centered Pearson distance."""

    def test_perfectly_correlated(self):
        assert centered_pearson([1.0, -1.0], [2.0, -2.0]) == 0.0

    def test_anti_correlated(self):
        """r = -1 still gives r^2 = 1, so distance 0."""
        assert_almost_equal(centered_pearson([1.0, -1.0], [-3.0, 3.0]), 0.0)

    def test_uncorrelated(self):
        x = [1.0, -1.0, 1.0, -1.0]
        y = [1.0, 1.0, -1.0, -1.0]
        assert_almost_equal(centered_pearson(x, y), 1.0)

    def test_matches_squared_correlation(self, rng):
        a = center_vector(rng.standard_normal(30))
        b = center_vector(rng.standard_normal(30))
        r = 1.0 - scipy_distance.correlation(a, b)
        assert_almost_equal(centered_pearson(a, b), 1.0 - r ** 2)

    def test_range(self, rng):
        for _ in range(50):
            a = center_vector(rng.standard_normal(8))
            b = center_vector(rng.standard_normal(8))
            assert 0.0 <= centered_pearson(a, b) <= 1.0

    def test_does_not_center_inputs(self):
        """Uncentered inputs are used as given."""
        x = [1.0, 2.0]
        y = [2.0, 1.0]
        # xy = 4, xx = yy = 5 -> 1 - 16/25
        assert_almost_equal(centered_pearson(x, y), 1.0 - 16.0 / 25.0)

    def test_zero_vector_raises(self):
        with pytest.raises(DegenerateInputError):
            centered_pearson([0.0, 0.0], [1.0, 1.0])

    def test_zero_second_vector_raises(self):
        with pytest.raises(DegenerateInputError) as exc_info:
            centered_pearson([1.0, -1.0], [0.0, 0.0])

        assert "zero norm" in exc_info.value.reason

    def test_empty_vectors_raise(self):
        with pytest.raises(DegenerateInputError):
            centered_pearson([], [])

    def test_dimension_mismatch_checked_first(self):
        with pytest.raises(DimensionMismatchError):
            centered_pearson([0.0, 0.0], [1.0])

    @pytest.mark.parametrize("scale", [1e-160, 1e-200, 1e160, 1e200])
    def test_extreme_magnitudes(self, scale):
        x = np.array([1.0, -2.0, 1.0])
        y = np.array([2.0, 1.0, -3.0])
        result = centered_pearson(x * scale, y * scale)

        assert np.isfinite(result)
        assert_almost_equal(result, centered_pearson(x, y))

    def test_huge_correlated_vectors(self):
        assert centered_pearson([1e200, -1e200], [2e200, -2e200]) == 0.0


class TestCosineDistance:
    """Tests for cosine dissimilarity."""

    def test_identical_vectors(self):
        a = np.array([1.0, 2.0, 3.0])
        assert_almost_equal(cosine(a, a), 0.0)

    def test_orthogonal_vectors(self):
        assert cosine([1.0, 0.0], [0.0, 1.0]) == 1.0

    def test_opposite_vectors(self):
        assert_almost_equal(cosine([1.0, 0.0], [-1.0, 0.0]), 2.0)

    def test_scale_invariance(self):
        assert_almost_equal(cosine([1.0, 2.0, 3.0], [2.0, 4.0, 6.0]), 0.0)

    def test_matches_scipy(self, rng):
        a = rng.standard_normal(20)
        b = rng.standard_normal(20)
        assert_almost_equal(cosine(a, b), scipy_distance.cosine(a, b))

    def test_range(self, rng):
        for _ in range(50):
            a = rng.standard_normal(8)
            b = rng.standard_normal(8)
            assert 0.0 <= cosine(a, b) <= 2.0

    def test_zero_vector_raises(self):
        with pytest.raises(DegenerateInputError):
            cosine([0.0, 0.0], [1.0, 1.0])

    def test_never_returns_nan(self):
        with pytest.raises(DegenerateInputError):
            cosine([0.0, 0.0], [0.0, 0.0])

    def test_huge_identical_vectors(self):
        assert cosine([1e200, 0.0], [1e200, 0.0]) == 0.0

    def test_huge_orthogonal_vectors(self):
        assert cosine([1e200, 0.0], [0.0, 1e200]) == 1.0

    def test_tiny_vectors_are_not_degenerate(self):
        x = np.array([1.0, 2.0, 3.0])
        y = np.array([3.0, -1.0, 2.0])
        assert_almost_equal(cosine(x * 1e-160, y * 1e-160), cosine(x, y))

    def test_mixed_magnitudes(self):
        assert_almost_equal(cosine([1e200, 1e200], [1e-200, 1e-200]), 0.0)


class TestDistanceFunction:
    """Tests for distance(metric, x, y)."""

    @pytest.mark.parametrize("metric,x,y,expected", [
        (DistanceMetric.EUCLIDEAN, [0, 0], [3, 4], 5.0),
        (DistanceMetric.MANHATTAN, [1, 2, 3], [0, 0, 0], 6.0),
        (DistanceMetric.CENTERED_PEARSON, [1, -1], [2, -2], 0.0),
        (DistanceMetric.COSINE, [1, 0], [0, 1], 1.0),
    ])
    def test_known_values(self, metric, x, y, expected):
        assert distance(metric, x, y) == expected

    @pytest.mark.parametrize("metric", ["pearson", "cosine"])
    def test_degenerate_inputs(self, metric):
        with pytest.raises(DegenerateInputError):
            distance(metric, [0, 0], [1, 1])

    def test_metric_by_alias(self):
        assert distance("l2", [0, 0], [3, 4]) == 5.0
        assert distance("cityblock", [0, 0], [3, 4]) == 7.0

    @pytest.mark.parametrize("metric", TRUE_METRICS)
    def test_identity(self, metric, random_vector):
        assert distance(metric, random_vector, random_vector) == 0.0

    @pytest.mark.parametrize("metric", ALL_METRICS)
    def test_symmetry(self, metric, centered_matrix):
        for x, y in itertools.combinations(centered_matrix[:8], 2):
            assert_almost_equal(distance(metric, x, y), distance(metric, y, x))

    @pytest.mark.parametrize("metric", TRUE_METRICS)
    def test_triangle_inequality(self, metric, random_matrix):
        # Only asserted for true metrics; pearson and cosine violate it
        for x, y, z in itertools.combinations(random_matrix[:10], 3):
            d_xz = distance(metric, x, z)
            d_xy = distance(metric, x, y)
            d_yz = distance(metric, y, z)
            assert d_xz <= d_xy + d_yz + 1e-12

    def test_cosine_violates_triangle_inequality(self):
        """Documented exception: cosine is not a true metric."""
        x = [1.0, 0.0]
        y = [1.0, 1.0]
        z = [0.0, 1.0]
        assert distance("cosine", x, z) > distance("cosine", x, y) + distance("cosine", y, z)
