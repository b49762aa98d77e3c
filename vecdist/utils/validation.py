"""
Input validation utilities.

Vectors and matrices are coerced to float64 arrays up front, and caller
row indices are translated from the caller's convention (``index_base``
0 or 1) into 0-based positions before any kernel runs.
"""

from numbers import Integral
from typing import Any, Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from ..core.exceptions import (
    ValidationError,
    DimensionMismatchError,
    IndexOutOfRangeError,
)


# Supported external indexing conventions
INDEX_BASES = (0, 1)


def as_vector(x: Any, name: str = "vector") -> NDArray[np.float64]:
    """
    Coerce an array-like to a 1-D float64 array.

    Args:
        x: List, tuple or ndarray of numbers
        name: Name used in error messages

    Returns:
        1-D float64 array (no copy when x already is one)

    Raises:
        ValidationError: If x is not numeric or not one-dimensional
    """
    try:
        arr = np.asarray(x, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name} must be numeric: {e}") from e

    if arr.ndim != 1:
        raise ValidationError(
            f"{name} must be 1-dimensional, got shape {arr.shape}"
        )

    return arr


def as_matrix(m: Any) -> NDArray[np.float64]:
    """
    Coerce a matrix-like to a 2-D float64 array of equal-length rows.

    Args:
        m: 2-D ndarray or a sequence of row sequences

    Returns:
        2-D float64 array

    Raises:
        DimensionMismatchError: If rows have different lengths
        ValidationError: If m is not numeric or not two-dimensional
    """
    if not isinstance(m, np.ndarray):
        _check_row_lengths(m)

    try:
        arr = np.asarray(m, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"matrix must be numeric: {e}") from e

    if arr.ndim == 1 and arr.size == 0:
        return arr.reshape(0, 0)

    if arr.ndim != 2:
        raise ValidationError(
            f"matrix must be 2-dimensional, got shape {arr.shape}"
        )

    return arr


def _check_row_lengths(rows: Any) -> None:
    """Reject ragged row sequences before numpy sees them."""
    try:
        lengths = [len(row) for row in rows]
    except TypeError as e:
        raise ValidationError(f"matrix must be a sequence of rows: {e}") from e

    for i, length in enumerate(lengths):
        if length != lengths[0]:
            raise DimensionMismatchError(lengths[0], length, row=i)


def check_dimensions(x: NDArray, y: NDArray) -> None:
    """
    Ensure two vectors have the same length.

    Raises:
        DimensionMismatchError: If lengths differ
    """
    if x.shape[0] != y.shape[0]:
        raise DimensionMismatchError(x.shape[0], y.shape[0])


def validate_index_base(index_base: Any) -> int:
    """
    Validate an indexing convention.

    Raises:
        ValidationError: If index_base is not 0 or 1
    """
    if isinstance(index_base, bool) or index_base not in INDEX_BASES:
        raise ValidationError(
            f"index_base must be one of {INDEX_BASES}, got {index_base!r}"
        )
    return int(index_base)


def validate_index(
    index: Any,
    n_rows: int,
    role: str = "origin",
    position: Optional[int] = None,
    index_base: int = 0,
) -> int:
    """
    Validate a row index and translate it to a 0-based position.

    Args:
        index: Row index in the caller's convention
        n_rows: Number of rows in the matrix
        role: "origin" or "target", used in error messages
        position: Position of the index within the target sequence
        index_base: Caller's indexing convention (0 or 1)

    Returns:
        0-based row position

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfRangeError: If index falls outside the matrix
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, Integral):
        raise ValidationError(
            f"{role} index must be an integer, got {type(index).__name__}"
        )

    internal = int(index) - index_base
    if not 0 <= internal < n_rows:
        raise IndexOutOfRangeError(
            int(index), n_rows, role=role, position=position, index_base=index_base
        )

    return internal


def validate_targets(
    targets: Sequence[int],
    n_rows: int,
    index_base: int = 0,
) -> NDArray[np.intp]:
    """
    Validate a target index sequence, preserving order and duplicates.

    The first offending position is reported; nothing is computed
    for a sequence that contains any invalid index.

    Args:
        targets: Sequence or 1-D integer array of row indices
        n_rows: Number of rows in the matrix
        index_base: Caller's indexing convention (0 or 1)

    Returns:
        0-based row positions, same length and order as targets
    """
    if isinstance(targets, np.ndarray):
        return _validate_target_array(targets, n_rows, index_base)

    try:
        items = list(targets)
    except TypeError as e:
        raise ValidationError(f"targets must be a sequence of indices: {e}") from e

    positions = [
        validate_index(t, n_rows, role="target", position=i, index_base=index_base)
        for i, t in enumerate(items)
    ]
    return np.asarray(positions, dtype=np.intp)


def _validate_target_array(
    targets: NDArray,
    n_rows: int,
    index_base: int,
) -> NDArray[np.intp]:
    """Vectorized bounds check for integer index arrays."""
    if targets.ndim != 1:
        raise ValidationError(
            f"targets must be 1-dimensional, got shape {targets.shape}"
        )

    if targets.size == 0:
        return np.empty(0, dtype=np.intp)

    if not np.issubdtype(targets.dtype, np.integer):
        raise ValidationError(
            f"targets must have an integer dtype, got {targets.dtype}"
        )

    internal = targets.astype(np.intp) - index_base
    bad = np.flatnonzero((internal < 0) | (internal >= n_rows))
    if bad.size:
        pos = int(bad[0])
        raise IndexOutOfRangeError(
            int(targets[pos]), n_rows, role="target", position=pos,
            index_base=index_base,
        )

    return internal
