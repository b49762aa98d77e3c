"""
Core components for vecdist.
"""

from .exceptions import (
    DistanceError,
    ValidationError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    DegenerateInputError,
    MetricNotFoundError,
)

__all__ = [
    "DistanceError",
    "ValidationError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    "DegenerateInputError",
    "MetricNotFoundError",
]
