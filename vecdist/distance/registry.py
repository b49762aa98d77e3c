"""
Distance metric registry.

Maps metric names, aliases and DistanceMetric members onto their
kernels. The set of metrics is closed: every kernel the batch
dispatcher can fan out over is registered here at import time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from numpy.typing import ArrayLike

from ..core.exceptions import MetricNotFoundError
from .metrics import euclidean, manhattan, centered_pearson, cosine


# Type aliases
DistanceFunction = Callable[[ArrayLike, ArrayLike], float]


class DistanceMetric(str, Enum):
    """Enumeration of supported distance metrics."""

    EUCLIDEAN = "euclidean"
    MANHATTAN = "manhattan"
    CENTERED_PEARSON = "pearson"
    COSINE = "cosine"

    def __str__(self) -> str:
        return self.value


MetricLike = Union[DistanceMetric, str]


@dataclass(frozen=True)
class MetricInfo:
    """Information about a distance metric."""

    name: str
    function: DistanceFunction
    min_value: float
    max_value: Optional[float]  # None if unbounded
    description: str
    is_true_metric: bool  # True if the triangle inequality holds
    requires_centering: bool = False
    requires_nonzero_norm: bool = False

    def __repr__(self) -> str:
        return f"MetricInfo(name='{self.name}', is_true_metric={self.is_true_metric})"


class MetricRegistry:
    """
    Registry for distance metrics.

    Looks up metrics by DistanceMetric member, canonical name or alias.
    """

    def __init__(self):
        self._metrics: Dict[str, MetricInfo] = {}
        self._aliases: Dict[str, str] = {}
        self._register_builtins()

    def _register_builtins(self) -> None:
        """Register built-in distance metrics."""

        self._register(
            MetricInfo(
                name=DistanceMetric.EUCLIDEAN.value,
                function=euclidean,
                min_value=0.0,
                max_value=None,
                description="Euclidean (L2) distance",
                is_true_metric=True,
            ),
            aliases=["l2", "euclidean_distance"]
        )

        self._register(
            MetricInfo(
                name=DistanceMetric.MANHATTAN.value,
                function=manhattan,
                min_value=0.0,
                max_value=None,
                description="Manhattan (L1) distance",
                is_true_metric=True,
            ),
            aliases=["l1", "cityblock", "taxicab"]
        )

        self._register(
            MetricInfo(
                name=DistanceMetric.CENTERED_PEARSON.value,
                function=centered_pearson,
                min_value=0.0,
                max_value=1.0,
                description="Centered Pearson distance (1 - r^2), zero-mean inputs",
                is_true_metric=False,
                requires_centering=True,
                requires_nonzero_norm=True,
            ),
            aliases=["centered_pearson", "correlation"]
        )

        self._register(
            MetricInfo(
                name=DistanceMetric.COSINE.value,
                function=cosine,
                min_value=0.0,
                max_value=2.0,
                description="Cosine dissimilarity (1 - cosine similarity)",
                is_true_metric=False,
                requires_nonzero_norm=True,
            ),
            aliases=["cosine_distance"]
        )

    def _register(self, info: MetricInfo, aliases: Optional[List[str]] = None) -> None:
        self._metrics[info.name] = info

        for alias in aliases or []:
            self._aliases[alias] = info.name

    def _canonical(self, name: MetricLike) -> str:
        if isinstance(name, DistanceMetric):
            return name.value
        if not isinstance(name, str):
            raise MetricNotFoundError(
                f"Metric must be a DistanceMetric or str, got {type(name).__name__}"
            )
        key = name.lower()
        return self._aliases.get(key, key)

    def get(self, name: MetricLike) -> MetricInfo:
        """
        Get metric info by name.

        Args:
            name: DistanceMetric member, metric name or alias

        Returns:
            MetricInfo object

        Raises:
            MetricNotFoundError: If metric not found
        """
        canonical = self._canonical(name)

        if canonical not in self._metrics:
            available = list(self._metrics.keys())
            raise MetricNotFoundError(
                f"Unknown metric: '{name}'. Available: {available}"
            )

        return self._metrics[canonical]

    def get_function(self, name: MetricLike) -> DistanceFunction:
        """Get the kernel for a metric."""
        return self.get(name).function

    def list_metrics(self) -> List[str]:
        """List all registered metric names."""
        return list(self._metrics.keys())

    def list_all(self) -> Dict[str, MetricInfo]:
        """Get all registered metrics with their info."""
        return self._metrics.copy()

    def __contains__(self, name: object) -> bool:
        try:
            self.get(name)  # type: ignore[arg-type]
        except MetricNotFoundError:
            return False
        return True

    def __getitem__(self, name: MetricLike) -> MetricInfo:
        return self.get(name)


# Global registry instance
_registry = MetricRegistry()


def get_metric(name: MetricLike) -> MetricInfo:
    """
    Get metric info by name.

    Example:
        >>> info = get_metric("l2")
        >>> info.name
        'euclidean'
    """
    return _registry.get(name)


def get_metric_fn(name: MetricLike) -> DistanceFunction:
    """
    Get the kernel for a metric.

    Example:
        >>> dist_fn = get_metric_fn(DistanceMetric.COSINE)
        >>> dist_fn([1.0, 0.0], [0.0, 1.0])
        1.0
    """
    return _registry.get_function(name)


def list_metrics() -> List[str]:
    """List all available metric names."""
    return _registry.list_metrics()


def metric_exists(name: MetricLike) -> bool:
    """Check if a metric (or alias) is registered."""
    return name in _registry


def satisfies_triangle_inequality(name: MetricLike) -> bool:
    """
    Check if a metric is safe for triangle-inequality pruning.

    Cosine and centered Pearson dissimilarities are not true metrics;
    neighbor searches that prune by the triangle inequality must not
    use them.
    """
    return _registry.get(name).is_true_metric
