"""
Batch distance computation.

One dispatcher serves every metric: it validates the matrix, the origin
and all targets up front, then fans the selected kernel out over
(origin, target) pairs. Output order mirrors the target order, and a
failing target fails the whole batch.

Indices are 0-based by default. Pass ``index_base=1`` when the indices
come from a 1-based host environment (R, Julia, Fortran); errors then
report indices in that same convention.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..core.exceptions import DegenerateInputError, ValidationError
from ..utils.batching import parallel_chunk_process
from ..utils.logging import configure_logging, get_logger
from ..utils.validation import (
    as_matrix,
    validate_index,
    validate_index_base,
    validate_targets,
)
from .metrics import has_zero_norm
from .registry import DistanceMetric, MetricInfo, MetricLike, get_metric


logger = get_logger(__name__)

DEFAULT_CHUNK_SIZE = 1024


def distance(metric: MetricLike, x: ArrayLike, y: ArrayLike) -> float:
    """
    Compute the distance between two vectors under a metric.

    Args:
        metric: DistanceMetric member, metric name or alias
        x: First vector
        y: Second vector

    Returns:
        Scalar distance

    Example:
        >>> distance("euclidean", [0.0, 0.0], [3.0, 4.0])
        5.0
    """
    return get_metric(metric).function(x, y)


def batch_distance(
    metric: MetricLike,
    m: ArrayLike,
    origin: int,
    targets: Sequence[int],
    index_base: int = 0,
) -> NDArray[np.float64]:
    """
    Compute distances from one origin row to a sequence of target rows.

    ``result[i] == distance(metric, m[origin], m[targets[i]])``.
    Duplicate and unordered targets are allowed and preserved.

    Args:
        metric: DistanceMetric member, metric name or alias
        m: Data matrix of shape (n_rows, dim)
        origin: Origin row index
        targets: Target row indices
        index_base: Indexing convention of origin and targets (0 or 1)

    Returns:
        float64 array of shape (len(targets),)

    Raises:
        IndexOutOfRangeError: If origin or any target is outside the matrix
        DimensionMismatchError: If the matrix rows are ragged
        DegenerateInputError: If a normalized metric meets a zero-norm row

    Example:
        >>> m = [[0.0, 0.0], [3.0, 4.0], [1.0, 0.0]]
        >>> batch_distance("euclidean", m, 0, [1, 2, 1])
        array([5., 1., 5.])
    """
    return _dispatch(
        get_metric(metric), m, origin, targets,
        index_base=validate_index_base(index_base),
    )


def compute_all_distances(
    metric: MetricLike,
    m: ArrayLike,
    origin: int,
    index_base: int = 0,
) -> NDArray[np.float64]:
    """
    Compute distances from one origin row to every row of the matrix.

    Returns:
        float64 array of shape (n_rows,), in row order
    """
    calc = BatchDistanceCalculator(metric=metric, index_base=index_base)
    return calc.compute_all(m, origin)


def _dispatch(
    info: MetricInfo,
    m: ArrayLike,
    origin: Any,
    targets: Sequence[int],
    index_base: int = 0,
    num_workers: int = 1,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> NDArray[np.float64]:
    """Validate every input, then run the kernel over all targets."""
    matrix = as_matrix(m)
    n_rows = matrix.shape[0]

    origin_pos = validate_index(origin, n_rows, role="origin", index_base=index_base)
    positions = validate_targets(targets, n_rows, index_base=index_base)
    origin_row = matrix[origin_pos]

    if info.requires_nonzero_norm and has_zero_norm(origin_row):
        raise DegenerateInputError(
            f"origin row has zero norm under {info.name} distance",
            index=origin_pos + index_base,
        )

    k = len(positions)
    logger.debug(
        "Computing %d %s distances from row %d (workers=%d)",
        k, info.name, origin_pos + index_base, num_workers,
    )

    kernel = info.function

    def run_chunk(start: int, end: int) -> NDArray[np.float64]:
        out = np.empty(end - start, dtype=np.float64)
        for i in range(start, end):
            row = int(positions[i])
            try:
                out[i - start] = kernel(origin_row, matrix[row])
            except DegenerateInputError as e:
                # The origin passed the same zero-norm check above, so
                # the failing operand is the target row.
                raise DegenerateInputError(e.reason, index=row + index_base) from e
        return out

    chunks = parallel_chunk_process(
        k, run_chunk, chunk_size=chunk_size, max_workers=num_workers
    )

    if not chunks:
        return np.empty(0, dtype=np.float64)
    return np.concatenate(chunks)


class BatchDistanceCalculator:
    """
    Batch distance calculator bound to one metric.

    Splits large target sequences into chunks and, with
    ``num_workers > 1``, computes the chunks on a thread pool. Results
    and error reporting are identical to the sequential path.

    Example:
        >>> calc = BatchDistanceCalculator(metric="manhattan")
        >>> calc.compute([[1.0, 2.0, 3.0], [0.0, 0.0, 0.0]], 0, [1])
        array([6.])
    """

    def __init__(
        self,
        metric: MetricLike = DistanceMetric.EUCLIDEAN,
        index_base: int = 0,
        num_workers: int = 1,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        """
        Initialize batch calculator.

        Args:
            metric: Distance metric to use
            index_base: Indexing convention of origin and targets (0 or 1)
            num_workers: Number of threads for the per-target loop
            chunk_size: Number of targets per chunk
        """
        self.info = get_metric(metric)
        self.metric = DistanceMetric(self.info.name)
        self.index_base = validate_index_base(index_base)
        self.num_workers = _positive_int(num_workers, "num_workers")
        self.chunk_size = _positive_int(chunk_size, "chunk_size")

        if not self.info.is_true_metric:
            logger.info(
                "%s distance does not satisfy the triangle inequality; "
                "do not use it for metric-space pruning",
                self.info.name,
            )

    @classmethod
    def from_settings(cls, settings: Any) -> "BatchDistanceCalculator":
        """
        Build a calculator from a config.settings.Settings object.

        Also applies settings.log_level to the "vecdist" logger.
        """
        configure_logging(settings)
        return cls(
            metric=settings.metric,
            index_base=settings.index_base,
            num_workers=settings.num_workers,
            chunk_size=settings.chunk_size,
        )

    def distance(self, x: ArrayLike, y: ArrayLike) -> float:
        """Compute distance between two vectors."""
        return self.info.function(x, y)

    def compute(
        self,
        m: ArrayLike,
        origin: int,
        targets: Sequence[int],
    ) -> NDArray[np.float64]:
        """
        Compute distances from the origin row to each target row.

        Args:
            m: Data matrix of shape (n_rows, dim)
            origin: Origin row index
            targets: Target row indices

        Returns:
            float64 array of shape (len(targets),)
        """
        return _dispatch(
            self.info, m, origin, targets,
            index_base=self.index_base,
            num_workers=self.num_workers,
            chunk_size=self.chunk_size,
        )

    def compute_all(self, m: ArrayLike, origin: int) -> NDArray[np.float64]:
        """Compute distances from the origin row to every row, in row order."""
        matrix = as_matrix(m)
        targets = np.arange(matrix.shape[0], dtype=np.intp) + self.index_base
        return self.compute(matrix, origin, targets)

    @property
    def satisfies_triangle_inequality(self) -> bool:
        """Whether results are safe for triangle-inequality pruning."""
        return self.info.is_true_metric

    def __repr__(self) -> str:
        return (
            f"BatchDistanceCalculator(metric='{self.metric}', "
            f"index_base={self.index_base}, num_workers={self.num_workers})"
        )


def _positive_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
        raise ValidationError(f"{name} must be a positive integer, got {value!r}")
    return int(value)
