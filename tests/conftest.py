"""
Pytest fixtures for vecdist tests.
"""

import logging

import pytest
import numpy as np

from vecdist.utils import center_rows


@pytest.fixture
def dimension() -> int:
    """Default dimension for test vectors."""
    return 16


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator."""
    return np.random.default_rng(42)


@pytest.fixture
def random_vector(rng: np.random.Generator, dimension: int) -> np.ndarray:
    """Generate a random vector."""
    return rng.standard_normal(dimension)


@pytest.fixture
def random_matrix(rng: np.random.Generator, dimension: int) -> np.ndarray:
    """Generate a random data matrix (50 rows)."""
    return rng.standard_normal((50, dimension))


@pytest.fixture
def centered_matrix(random_matrix: np.ndarray) -> np.ndarray:
    """Random data matrix with zero-mean rows."""
    return center_rows(random_matrix)


@pytest.fixture
def small_matrix() -> np.ndarray:
    """Hand-written matrix with known distances."""
    return np.array([
        [0.0, 0.0],
        [3.0, 4.0],
        [1.0, 0.0],
        [0.0, 1.0],
        [-1.0, 1.0],
    ])


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML config file and return its path."""
    def _write(text: str):
        path = tmp_path / "vecdist.yaml"
        path.write_text(text)
        return path
    return _write


@pytest.fixture
def package_logger():
    """The "vecdist" logger, with its level restored after the test."""
    logger = logging.getLogger("vecdist")
    saved = logger.level
    yield logger
    logger.setLevel(saved)
