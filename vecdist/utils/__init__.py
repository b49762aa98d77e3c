"""
Utility functions for vecdist.
"""

from .validation import (
    as_vector,
    as_matrix,
    check_dimensions,
    validate_index,
    validate_index_base,
    validate_targets,
    ValidationError,
)
from .normalization import center_vector, center_rows, is_centered, rows_are_centered
from .batching import ChunkIterator, parallel_chunk_process
from .logging import setup_logger, get_logger, configure_logging, resolve_level

__all__ = [
    "as_vector",
    "as_matrix",
    "check_dimensions",
    "validate_index",
    "validate_index_base",
    "validate_targets",
    "ValidationError",
    "center_vector",
    "center_rows",
    "is_centered",
    "rows_are_centered",
    "ChunkIterator",
    "parallel_chunk_process",
    "setup_logger",
    "get_logger",
    "configure_logging",
    "resolve_level",
]
