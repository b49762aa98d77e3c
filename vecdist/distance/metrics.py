"""
Core distance kernel implementations.

Each kernel takes two equal-length vectors and returns a float.
Smaller values mean more similar vectors. Inputs are validated eagerly:
mismatched lengths raise DimensionMismatchError, and zero-norm inputs to
the normalized kernels raise DegenerateInputError instead of producing
NaN or Inf.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray, ArrayLike

from ..core.exceptions import DegenerateInputError
from ..utils.validation import as_vector, check_dimensions


# Type aliases
Vector = NDArray[np.floating]


def _prepare(x: ArrayLike, y: ArrayLike) -> tuple[Vector, Vector]:
    """Coerce both operands and check their lengths match."""
    x = as_vector(x, name="x")
    y = as_vector(y, name="y")
    check_dimensions(x, y)
    return x, y


def has_zero_norm(v: Vector) -> bool:
    """Whether a vector is identically zero (or empty)."""
    return v.size == 0 or float(np.max(np.abs(v))) == 0.0


def _scaled(v: Vector, name: str) -> Vector:
    # Both normalized kernels are scale-invariant, so scaling each operand
    # to a max magnitude of 1 bounds xx and yy to [1, n].
    if has_zero_norm(v):
        raise DegenerateInputError(f"{name} has zero norm")
    return v / np.max(np.abs(v))


def _products(x: Vector, y: Vector) -> tuple[float, float]:
    """
    Return (xy, xx * yy) for the normalized kernels, computed on
    max-magnitude scaled copies of x and y.

    Raises:
        DegenerateInputError: If either vector has zero norm
    """
    x = _scaled(x, "x")
    y = _scaled(y, "y")
    xy = float(np.dot(x, y))
    xx = float(np.dot(x, x))
    yy = float(np.dot(y, y))
    return xy, xx * yy


def euclidean(x: ArrayLike, y: ArrayLike) -> float:
    """
    Compute Euclidean (L2) distance between two vectors.

    Formula: sqrt(sum((x_i - y_i)^2))

    Args:
        x: First vector
        y: Second vector

    Returns:
        Euclidean distance (>= 0); 0.0 for empty vectors

    Raises:
        DimensionMismatchError: If the vectors differ in length

    Example:
        >>> euclidean([0.0, 0.0], [3.0, 4.0])
        5.0
    """
    x, y = _prepare(x, y)
    diff = x - y
    return float(np.sqrt(np.dot(diff, diff)))


def manhattan(x: ArrayLike, y: ArrayLike) -> float:
    """
    Compute Manhattan (L1) distance between two vectors.

    Also known as taxicab distance or city block distance.

    Formula: sum(|x_i - y_i|)

    Example:
        >>> manhattan([1.0, 2.0, 3.0], [0.0, 0.0, 0.0])
        6.0
    """
    x, y = _prepare(x, y)
    return float(np.sum(np.abs(x - y)))


def centered_pearson(x: ArrayLike, y: ArrayLike) -> float:
    """
    Compute centered Pearson distance (1 - r^2) between two vectors.

    Important: both vectors must already be zero-mean. The kernel does
    not center its inputs; see vecdist.utils.center_rows.

    Formula: 1 - (x·y)^2 / ((x·x) * (y·y))

    Values lie in [0, 1] for centered inputs. This is not a true metric:
    the triangle inequality does not hold.

    Args:
        x: First centered vector
        y: Second centered vector

    Returns:
        Pearson dissimilarity (0 = perfectly correlated or anti-correlated)

    Raises:
        DimensionMismatchError: If the vectors differ in length
        DegenerateInputError: If either vector is identically zero

    Example:
        >>> centered_pearson([1.0, -1.0], [2.0, -2.0])
        0.0
    """
    x, y = _prepare(x, y)
    xy, denominator = _products(x, y)
    r_squared = (xy * xy) / denominator
    # Clamp rounding drift so r^2 stays within [0, 1]
    return float(1.0 - min(r_squared, 1.0))


def cosine(x: ArrayLike, y: ArrayLike) -> float:
    """
    Compute cosine dissimilarity between two vectors.

    Formula: 1 - (x·y) / sqrt((x·x) * (y·y))

    Note: values from this function do not satisfy the triangle
    inequality, so they must not be used for metric-space pruning.

    Returns:
        Cosine dissimilarity in range [0, 2]

    Raises:
        DimensionMismatchError: If the vectors differ in length
        DegenerateInputError: If either vector is identically zero

    Example:
        >>> cosine([1.0, 0.0], [0.0, 1.0])
        1.0
    """
    x, y = _prepare(x, y)
    xy, denominator = _products(x, y)
    similarity = xy / np.sqrt(denominator)
    # Clamp to [-1, 1] for numerical stability
    similarity = min(max(similarity, -1.0), 1.0)
    return float(1.0 - similarity)
