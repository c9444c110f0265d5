"""
Cholesky decomposition for symmetric positive definite matrices.

Computes A = L @ L' row by row. Each row of L solves a triangular system
against the rows above it, so symmetry and positivity are checked as the
factorization proceeds and a failure stops it at the offending row.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import solve_triangular

from pymatrix.core.compute.precision import SYMMETRY_RTOL
from pymatrix.core.exceptions import DimensionError, NotPositiveDefiniteError
from pymatrix.core.validation import check_2d, check_square


@dataclass(frozen=True)
class CholeskyResult:
    """
    Result of Cholesky decomposition.

    Attributes:
        L: Lower triangular factor with positive diagonal (n x n)
    """
    L: NDArray[np.floating[Any]]

    def solve(self, B: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        """
        Solve A @ X = B using L @ L' @ X = B.

        Args:
            B: Right-hand side (n x k)

        Returns:
            X (n x k)

        Raises:
            DimensionError: If B does not have n rows
        """
        n = self.L.shape[0]
        check_2d(B, 'B')
        if B.shape[0] != n:
            raise DimensionError(
                f"Row dimensions must agree: matrix has {n} rows, B has {B.shape[0]}"
            )
        if n == 0 or B.shape[1] == 0:
            return np.zeros((n, B.shape[1]))

        Y = solve_triangular(self.L, B, lower=True, check_finite=False)
        return solve_triangular(self.L, Y, trans='T', lower=True, check_finite=False)


def cholesky(A: NDArray[np.floating[Any]], rtol: float = SYMMETRY_RTOL) -> CholeskyResult:
    """
    Cholesky decomposition A = L @ L'.

    Args:
        A: Symmetric positive definite matrix (n x n)
        rtol: Relative tolerance for the symmetry check

    Returns:
        CholeskyResult with the lower factor

    Raises:
        DimensionError: If A is not square
        NotPositiveDefiniteError: If A is not symmetric or a pivot is <= 0
    """
    check_square(A, 'A')
    A = np.asarray(A, dtype=np.float64)
    n = A.shape[0]
    L = np.zeros((n, n))
    scale = float(np.max(np.abs(A))) if n else 0.0

    for j in range(n):
        if np.any(np.abs(A[:j, j] - A[j, :j]) > rtol * scale):
            raise NotPositiveDefiniteError(
                f"Matrix is not symmetric (row {j} differs from column {j})",
                matrix_name='A',
                pivot_index=j,
            )

        if j > 0:
            L[j, :j] = solve_triangular(L[:j, :j], A[j, :j], lower=True, check_finite=False)
        d = A[j, j] - L[j, :j] @ L[j, :j]
        if not d > 0.0:
            raise NotPositiveDefiniteError(
                f"Matrix is not positive definite: pivot {j} is {d:.6g}",
                matrix_name='A',
                pivot_index=j,
            )
        L[j, j] = math.sqrt(d)

    L.setflags(write=False)
    return CholeskyResult(L=L)
