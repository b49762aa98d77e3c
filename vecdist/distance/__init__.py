"""
Distance kernels and the batch dispatcher.

Supported Metrics:
    - euclidean: L2 distance
    - manhattan: L1 distance
    - pearson: centered Pearson distance (1 - r^2), zero-mean inputs
    - cosine: cosine dissimilarity (1 - cosine similarity)

Pearson and cosine do not satisfy the triangle inequality.

Example:
    >>> from vecdist.distance import distance, batch_distance, DistanceMetric
    >>>
    >>> distance(DistanceMetric.EUCLIDEAN, [0.0, 0.0], [3.0, 4.0])
    5.0
    >>> m = [[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]]
    >>> batch_distance("manhattan", m, 0, [2, 1])
    array([1., 2.])
"""

from .metrics import (
    euclidean,
    manhattan,
    centered_pearson,
    cosine,
)

from .registry import (
    DistanceMetric,
    MetricInfo,
    MetricRegistry,
    get_metric,
    get_metric_fn,
    list_metrics,
    metric_exists,
    satisfies_triangle_inequality,
)

from .batch import (
    BatchDistanceCalculator,
    distance,
    batch_distance,
    compute_all_distances,
)

__all__ = [
    # Kernels
    "euclidean",
    "manhattan",
    "centered_pearson",
    "cosine",
    # Registry
    "DistanceMetric",
    "MetricInfo",
    "MetricRegistry",
    "get_metric",
    "get_metric_fn",
    "list_metrics",
    "metric_exists",
    "satisfies_triangle_inequality",
    # Batch
    "BatchDistanceCalculator",
    "distance",
    "batch_distance",
    "compute_all_distances",
]
