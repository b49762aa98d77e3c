"""
vecdist - pairwise distance kernels for nearest-neighbor pipelines.

Example:
    >>> import numpy as np
    >>> from vecdist import batch_distance, center_rows
    >>>
    >>> data = center_rows(np.random.randn(100, 16))
    >>> batch_distance("pearson", data, 0, [5, 9, 42])
"""

from .core import (
    DistanceError,
    ValidationError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    DegenerateInputError,
    MetricNotFoundError,
)

from .distance import (
    # Kernels
    euclidean,
    manhattan,
    centered_pearson,
    cosine,
    # Dispatch
    distance,
    batch_distance,
    compute_all_distances,
    BatchDistanceCalculator,
    # Registry
    DistanceMetric,
    get_metric,
    get_metric_fn,
    list_metrics,
    satisfies_triangle_inequality,
)

from .utils import center_vector, center_rows, is_centered

__version__ = "0.1.0"

__all__ = [
    # Exceptions
    "DistanceError",
    "ValidationError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    "DegenerateInputError",
    "MetricNotFoundError",
    # Kernels
    "euclidean",
    "manhattan",
    "centered_pearson",
    "cosine",
    # Dispatch
    "distance",
    "batch_distance",
    "compute_all_distances",
    "BatchDistanceCalculator",
    # Registry
    "DistanceMetric",
    "get_metric",
    "get_metric_fn",
    "list_metrics",
    "satisfies_triangle_inequality",
    # Preprocessing
    "center_vector",
    "center_rows",
    "is_centered",
]
