"""
Centering utilities.

The centered-Pearson kernel assumes zero-mean inputs and never centers
data itself. These helpers are the caller-side preprocessing step.
"""

import numpy as np

from .validation import as_vector, as_matrix


def center_vector(vector, copy: bool = True) -> np.ndarray:
    """
    Subtract the mean from a vector.

    Args:
        vector: Input vector
        copy: Whether to create a copy (False modifies float64 input in-place)

    Returns:
        Zero-mean vector
    """
    vector = as_vector(vector)
    if copy:
        vector = vector.copy()

    if vector.size:
        vector -= vector.mean()
    return vector


def center_rows(matrix, copy: bool = True) -> np.ndarray:
    """
    Subtract each row's mean from that row.

    Args:
        matrix: Input matrix of shape (n, dim)
        copy: Whether to create a copy

    Returns:
        Matrix whose rows are zero-mean
    """
    matrix = as_matrix(matrix)
    if copy:
        matrix = matrix.copy()

    if matrix.size:
        matrix -= matrix.mean(axis=1, keepdims=True)
    return matrix


def is_centered(vector, tolerance: float = 1e-9) -> bool:
    """
    Check if a vector has (approximately) zero mean.

    Args:
        vector: Input vector
        tolerance: Absolute tolerance on the mean

    Returns:
        True if the vector is centered
    """
    vector = as_vector(vector)
    if not vector.size:
        return True
    return bool(abs(vector.mean()) <= tolerance)


def rows_are_centered(matrix, tolerance: float = 1e-9) -> np.ndarray:
    """
    Check which rows of a matrix are centered.

    Returns:
        Boolean array of shape (n,)
    """
    matrix = as_matrix(matrix)
    if not matrix.size:
        return np.ones(matrix.shape[0], dtype=bool)
    return np.abs(matrix.mean(axis=1)) <= tolerance
