"""
Benchmarks for vecdist.

Usage:
    python -m tests.benchmark.bench_batch
    python -m tests.benchmark.bench_batch --size large --workers 4
"""

import time
from dataclasses import dataclass
from typing import Callable, Dict, List

import numpy as np


@dataclass
class BenchmarkResult:
    """Container for benchmark results."""

    name: str
    n_targets: int
    dimension: int
    mean_time: float
    std_time: float
    min_time: float

    @property
    def distances_per_second(self) -> float:
        return self.n_targets / self.mean_time

    def __str__(self) -> str:
        return (
            f"{self.name}:\n"
            f"  Batch: {self.n_targets} targets x {self.dimension} dims\n"
            f"  Mean time: {self.mean_time*1000:.3f} ms (+/-{self.std_time*1000:.3f})\n"
            f"  Throughput: {self.distances_per_second:.1f} distances/sec"
        )


class Timer:
    """Context manager for timing operations."""

    def __init__(self):
        self.elapsed = 0.0
        self._start = None

    def __enter__(self):
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.elapsed = time.perf_counter() - self._start


class BenchmarkRunner:
    """Utility class for running benchmarks."""

    def __init__(self, warmup_runs: int = 1, benchmark_runs: int = 5):
        self.warmup_runs = warmup_runs
        self.benchmark_runs = benchmark_runs
        self.results: List[BenchmarkResult] = []

    def run_benchmark(
        self,
        name: str,
        func: Callable,
        n_targets: int,
        dimension: int,
    ) -> BenchmarkResult:
        """Run a benchmark and return results."""
        for _ in range(self.warmup_runs):
            func()

        times = []
        for _ in range(self.benchmark_runs):
            with Timer() as t:
                func()
            times.append(t.elapsed)

        times = np.array(times)
        result = BenchmarkResult(
            name=name,
            n_targets=n_targets,
            dimension=dimension,
            mean_time=float(np.mean(times)),
            std_time=float(np.std(times)),
            min_time=float(np.min(times)),
        )

        self.results.append(result)
        return result

    def print_summary(self):
        """Print summary of all results."""
        print("\n" + "=" * 60)
        print("BENCHMARK SUMMARY")
        print("=" * 60)
        for result in self.results:
            print(f"\n{result}")
        print("\n" + "=" * 60)


def generate_test_data(n_rows: int, dimension: int, seed: int = 42) -> np.ndarray:
    """Generate a random data matrix."""
    return np.random.default_rng(seed).standard_normal((n_rows, dimension))


# Benchmark configuration presets
SMALL_DATASET = {"n_rows": 1000, "dimension": 32}
MEDIUM_DATASET = {"n_rows": 10000, "dimension": 64}
LARGE_DATASET = {"n_rows": 50000, "dimension": 128}


def get_benchmark_config(size: str = "medium") -> Dict[str, int]:
    """Get benchmark configuration by size name."""
    configs = {
        "small": SMALL_DATASET,
        "medium": MEDIUM_DATASET,
        "large": LARGE_DATASET,
    }
    return configs.get(size, MEDIUM_DATASET)
