"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_shape(rng):
    """Random (rows, columns) pair with both dimensions in 1..6."""
    rows, columns = rng.integers(1, 7, size=2)
    return int(rows), int(columns)


@pytest.fixture
def two_by_three():
    """The 2x3 operand pair used by the add/subtract examples."""
    return [[1, 2, 3], [3, 2, 1]], [[4, 5, 6], [5, 7, 3]]
