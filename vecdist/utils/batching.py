"""
Batch operation utilities for vecdist.

Splits a target sequence into contiguous chunks and optionally runs
the chunks on a thread pool. Results always come back in chunk order.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterator, List, Tuple, TypeVar

T = TypeVar('T')


class ChunkIterator:
    """
    Iterator that yields (start, end) bounds covering range(total).

    Example:
        >>> list(ChunkIterator(10, chunk_size=4))
        [(0, 4), (4, 8), (8, 10)]
    """

    def __init__(self, total: int, chunk_size: int = 1024):
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
        self.total = total
        self.chunk_size = chunk_size
        self._start = 0

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        self._start = 0
        return self

    def __next__(self) -> Tuple[int, int]:
        if self._start >= self.total:
            raise StopIteration

        bounds = (self._start, min(self._start + self.chunk_size, self.total))
        self._start += self.chunk_size
        return bounds

    def __len__(self) -> int:
        return (self.total + self.chunk_size - 1) // self.chunk_size


def parallel_chunk_process(
    total: int,
    process_fn: Callable[[int, int], T],
    chunk_size: int = 1024,
    max_workers: int = 1,
) -> List[T]:
    """
    Apply process_fn to each chunk of range(total) using multiple threads.

    If any chunk raises, the exception from the earliest failing chunk
    is re-raised and no results are returned.

    Args:
        total: Number of items to cover
        process_fn: Function called with (start, end) for each chunk
        chunk_size: Size of each chunk
        max_workers: Number of parallel workers (1 runs inline)

    Returns:
        List of per-chunk results, in chunk order
    """
    chunks = list(ChunkIterator(total, chunk_size))

    if max_workers <= 1 or len(chunks) <= 1:
        return [process_fn(start, end) for start, end in chunks]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(process_fn, start, end) for start, end in chunks]

        results = []
        for i, future in enumerate(futures):
            try:
                results.append(future.result())
            except BaseException:
                for pending in futures[i + 1:]:
                    pending.cancel()
                raise

    return results
