"""
Solver dispatch for dense linear systems.

Public API:
    solve()            A @ X = B (LU, QR least squares, or minimum norm)
    solve_transpose()  X @ A = B
    inverse()          inverse or pseudo-inverse
    det()              determinant via LU
    rank()             numerical rank via SVD
    cond()             two-norm condition number via SVD

Each call builds the factorization it needs and discards it. Conditioning
is not checked up front: near-singular square systems are solved anyway
with a RuntimeWarning, so callers who need guarantees should look at
rank() or cond() first.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.linalg.lu import lu
from pymatrix.core.compute.linalg.qr import qr
from pymatrix.core.compute.linalg.svd import svd
from pymatrix.core.validation import check_2d, check_same_rows, check_square


def solve(
    A: NDArray[np.floating[Any]],
    B: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Solve A @ X = B.

    Square A uses LU with partial pivoting. Tall A (m > n) returns the
    least squares solution through Householder QR. Wide A (m < n) returns
    the minimum-norm solution through the QR decomposition of A'.

    Args:
        A: Coefficient matrix (m x n)
        B: Right-hand side (m x k), or a vector of length m

    Returns:
        X (n x k), or a vector of length n if B was a vector

    Raises:
        DimensionError: If B does not have m rows
        SingularMatrixError: If A is exactly singular (square) or rank
            deficient (rectangular)
    """
    check_2d(A, 'A')
    B, was_vector = _as_columns(B)
    check_same_rows(A, B, ('A', 'B'))

    m, n = A.shape
    if m == n:
        X = lu(A).solve(B)
    elif m > n:
        X = qr(A).solve(B)
    else:
        X = qr(A.T).solve_transpose(B)

    return X.ravel() if was_vector else X


def solve_transpose(
    A: NDArray[np.floating[Any]],
    B: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Solve X @ A = B, computed as (A' \\ B')'.

    Args:
        A: Coefficient matrix (m x n)
        B: Right-hand side (k x n)

    Returns:
        X (k x m)
    """
    check_2d(A, 'A')
    check_2d(B, 'B')
    return solve(A.T, B.T).T.copy()


def inverse(A: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Inverse of a square matrix, pseudo-inverse of a full-rank rectangular one.

    Computed as solve(A, I). Near-singular input is not refused.
    """
    check_2d(A, 'A')
    m = A.shape[0]
    return solve(A, np.eye(m))


def det(A: NDArray[np.floating[Any]]) -> float:
    """
    Determinant via LU decomposition.

    Raises:
        DimensionError: If A is not square
    """
    check_square(A, 'A')
    return lu(A).det()


def rank(A: NDArray[np.floating[Any]], tol: float | None = None) -> int:
    """
    Numerical rank: number of singular values above tol.

    Args:
        A: Matrix (m x n)
        tol: Absolute threshold, default max(m, n) * s_max * eps
    """
    return svd(A).rank(tol)


def cond(A: NDArray[np.floating[Any]]) -> float:
    """Ratio of largest to smallest singular value; inf if singular."""
    return svd(A).cond()


def _as_columns(B: Any) -> tuple[NDArray[np.floating[Any]], bool]:
    B = np.asarray(B, dtype=np.float64)
    if B.ndim == 1:
        return B.reshape(-1, 1), True
    check_2d(B, 'B')
    return B, False
