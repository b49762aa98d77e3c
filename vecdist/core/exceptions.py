"""
Custom exceptions for vecdist.

Every error raised by the distance kernels and the batch dispatcher
derives from DistanceError, so callers can catch the whole family
(skip the offending row, re-request) without touching unrelated errors.
"""

from typing import Optional


class DistanceError(Exception):
    """Base exception for vecdist."""
    pass


class ValidationError(DistanceError):
    """Input is structurally invalid (wrong rank, non-numeric, bad index type)."""
    pass


class DimensionMismatchError(DistanceError):
    """Operand lengths differ."""

    def __init__(self, expected: int, actual: int, row: Optional[int] = None):
        self.expected = expected
        self.actual = actual
        self.row = row
        where = f" at row {row}" if row is not None else ""
        super().__init__(
            f"Dimension mismatch{where}: expected {expected}, got {actual}"
        )


class IndexOutOfRangeError(DistanceError):
    """
    Origin or target index outside the matrix row range.

    ``index`` is reported in the caller's indexing convention; ``bound``
    is the number of rows in the matrix.
    """

    def __init__(
        self,
        index: int,
        bound: int,
        role: str = "target",
        position: Optional[int] = None,
        index_base: int = 0,
    ):
        self.index = index
        self.bound = bound
        self.role = role
        self.position = position
        self.index_base = index_base
        where = f" at position {position}" if position is not None else ""
        super().__init__(
            f"{role.capitalize()} index {index}{where} out of range "
            f"[{index_base}, {bound + index_base})"
        )


class DegenerateInputError(DistanceError):
    """Zero-norm vector fed to a normalized metric."""

    def __init__(self, reason: str, index: Optional[int] = None):
        self.reason = reason
        self.index = index
        where = f" (row {index})" if index is not None else ""
        super().__init__(f"Degenerate input{where}: {reason}")


class MetricNotFoundError(DistanceError, KeyError):
    """Requested metric name is not registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""
