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
def nonsingular_square(rng):
    """Well-conditioned 5x5 matrix (diagonally dominant)."""
    n = 5
    return rng.standard_normal((n, n)) + n * np.eye(n)


@pytest.fixture
def spd_matrix(rng):
    """Symmetric positive definite 4x4 matrix."""
    X = rng.standard_normal((10, 4))
    A = X.T @ X + np.eye(4)
    return (A + A.T) / 2


@pytest.fixture
def tall_system(rng):
    """Overdetermined full-rank system (n > p)."""
    n, p = 20, 3
    A = rng.standard_normal((n, p))
    x_true = np.array([1.0, -2.0, 0.5])
    b = A @ x_true + rng.standard_normal(n) * 0.01
    return A, b, x_true


@pytest.fixture
def rank_deficient(rng):
    """3x3 matrix whose third row is the sum of the first two."""
    r1 = rng.standard_normal(3)
    r2 = rng.standard_normal(3)
    return np.vstack([r1, r2, r1 + r2])
