"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix.matrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square(rng):
    """Well-conditioned 4 x 4 matrix."""
    return Matrix.from_existing(rng.standard_normal((4, 4)) + 4 * np.eye(4))


@pytest.fixture
def spd(rng):
    """Symmetric positive definite 5 x 5 matrix."""
    a = rng.standard_normal((5, 5))
    return Matrix.from_existing(a @ a.T + 5 * np.eye(5))


@pytest.fixture
def tall(rng):
    """6 x 3 matrix of full column rank."""
    return Matrix.from_existing(rng.standard_normal((6, 3)))
