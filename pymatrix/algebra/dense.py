"""
Dense algebra on float64 arrays: transpose, product, norms, trace and
the identity / random factories.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.linalg.svd import svd
from pymatrix.core.compute.precision import hypot_norm
from pymatrix.core.validation import check_2d, check_inner_dimensions, check_nonnegative_size


def transpose(A: NDArray[Any]) -> NDArray[Any]:
    """New columns x rows array with result[j, i] = A[i, j]."""
    check_2d(A, 'A')
    return A.T.copy()


def matrix_multiply(
    A: NDArray[np.floating[Any]],
    B: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Linear algebraic product A @ B.

    Args:
        A: Left factor (m x p)
        B: Right factor (p x n)

    Returns:
        m x n product accumulated in float64

    Raises:
        DimensionError: If A.columns != B.rows
    """
    check_2d(A, 'A')
    check_2d(B, 'B')
    check_inner_dimensions(A, B, ('A', 'B'))
    return np.matmul(A, B)


def norm1(A: NDArray[np.floating[Any]]) -> float:
    """Maximum absolute column sum."""
    if A.size == 0:
        return 0.0
    return float(np.max(np.sum(np.abs(A), axis=0)))


def norm_inf(A: NDArray[np.floating[Any]]) -> float:
    """Maximum absolute row sum."""
    if A.size == 0:
        return 0.0
    return float(np.max(np.sum(np.abs(A), axis=1)))


def norm_fro(A: NDArray[np.floating[Any]]) -> float:
    """Frobenius norm, sqrt of the sum of squares, computed without overflow."""
    return hypot_norm(A)


def norm2(A: NDArray[np.floating[Any]]) -> float:
    """Two-norm: the largest singular value."""
    return svd(A).norm2()


def trace(A: NDArray[np.floating[Any]]) -> float:
    """Sum of A[i, i] for i < min(rows, columns)."""
    check_2d(A, 'A')
    return float(np.trace(A))


def identity(m: int, n: int) -> NDArray[np.floating[Any]]:
    """m x n array with ones on the main diagonal."""
    check_nonnegative_size(m, n)
    return np.eye(m, n)


def random(
    m: int,
    n: int,
    seed: int | np.random.Generator | None = None,
) -> NDArray[np.floating[Any]]:
    """
    m x n array of uniform samples from [0, 1).

    Args:
        m: Rows
        n: Columns
        seed: Seed or Generator; None draws fresh OS entropy. No global
            random state is read or advanced.
    """
    check_nonnegative_size(m, n)
    rng = np.random.default_rng(seed)
    return rng.random((m, n))
