"""
LU decomposition with partial pivoting.

Row-pivoted Gaussian elimination for an m x n matrix:

    A[pivot, :] = L @ U

with L unit lower triangular (m x k), U upper triangular (k x n) and
k = min(m, n). The factorization always completes; a zero pivot only marks
the matrix as singular. Used by the solver facade for square systems and
for determinants.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import solve_triangular

from pymatrix.core.compute.tolerances import NEAR_SINGULAR_RCOND
from pymatrix.core.exceptions import DimensionError, SingularMatrixError
from pymatrix.core.validation import check_2d


@dataclass(frozen=True)
class LUResult:
    """
    Result of LU decomposition.

    Attributes:
        LU: Packed factors; strict lower part holds L, upper part holds U
        pivot: Row permutation (A[pivot] = L @ U)
        pivot_sign: +1 or -1, parity of the permutation
    """
    LU: NDArray[np.floating[Any]]
    pivot: NDArray[np.intp]
    pivot_sign: int

    @property
    def shape(self) -> tuple[int, int]:
        return self.LU.shape

    @property
    def L(self) -> NDArray[np.floating[Any]]:
        """Unit lower triangular factor (m x k)."""
        m, n = self.shape
        k = min(m, n)
        L = np.tril(self.LU[:, :k], -1)
        L[np.arange(k), np.arange(k)] = 1.0
        return L

    @property
    def U(self) -> NDArray[np.floating[Any]]:
        """Upper triangular factor (k x n)."""
        m, n = self.shape
        return np.triu(self.LU[:min(m, n), :])

    @property
    def P(self) -> NDArray[np.floating[Any]]:
        """Permutation matrix with P @ A = L @ U."""
        m = self.shape[0]
        return np.eye(m)[self.pivot]

    @property
    def is_nonsingular(self) -> bool:
        """True if the matrix is square and no pivot is exactly zero."""
        m, n = self.shape
        if m != n:
            return False
        return bool(np.all(np.diag(self.LU) != 0.0))

    def det(self) -> float:
        """
        Determinant: product of U's diagonal times the permutation sign.

        Raises:
            DimensionError: If the factored matrix is not square
        """
        m, n = self.shape
        if m != n:
            raise DimensionError(f"Matrix must be square, got {m}x{n}")
        return float(self.pivot_sign * np.prod(np.diag(self.LU)))

    def pivot_ratio(self) -> float:
        """
        min|U_ii| / max|U_ii|, a cheap reciprocal condition estimate.

        Returns 1.0 for an empty matrix and 0.0 when every pivot is zero.
        """
        d = np.abs(np.diag(self.LU))
        if d.size == 0:
            return 1.0
        largest = float(d.max())
        if largest == 0.0:
            return 0.0
        return float(d.min()) / largest

    def solve(self, B: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        """
        Solve A @ X = B by forward and back substitution.

        Near-singular systems are solved anyway and emit a RuntimeWarning.

        Args:
            B: Right-hand side (m x k)

        Returns:
            X (n x k)

        Raises:
            DimensionError: If A is not square or B has the wrong row count
            SingularMatrixError: If a pivot is exactly zero
        """
        m, n = self.shape
        if m != n:
            raise DimensionError(f"LU solve requires a square matrix, got {m}x{n}")
        check_2d(B, 'B')
        if B.shape[0] != m:
            raise DimensionError(
                f"Row dimensions must agree: matrix has {m} rows, B has {B.shape[0]}"
            )
        if not self.is_nonsingular:
            raise SingularMatrixError(
                "Matrix is singular: LU factorization found a zero pivot",
                matrix_name='A',
                condition_number=float('inf'),
            )
        if m == 0 or B.shape[1] == 0:
            return np.zeros((n, B.shape[1]))

        rcond = self.pivot_ratio()
        if rcond < NEAR_SINGULAR_RCOND:
            warnings.warn(
                f"Matrix is close to singular or badly scaled "
                f"(pivot ratio {rcond:.3e}). Results may be inaccurate.",
                RuntimeWarning,
                stacklevel=3,
            )

        # Forward substitution on P @ B, then back substitution with U
        Y = solve_triangular(
            self.LU, B[self.pivot], lower=True, unit_diagonal=True, check_finite=False
        )
        return solve_triangular(self.LU, Y, lower=False, check_finite=False)


def lu(A: NDArray[np.floating[Any]]) -> LUResult:
    """
    LU decomposition with partial pivoting.

    At step k the row with the largest |A[i, k]| (i >= k) is swapped into
    the pivot position, the multipliers are stored below the diagonal and
    the trailing block receives a rank-one update.

    Args:
        A: Matrix to decompose (m x n)

    Returns:
        LUResult with packed factors, pivot vector and permutation sign
    """
    check_2d(A, 'A')
    LU = np.array(A, dtype=np.float64, copy=True)
    m, n = LU.shape
    pivot = np.arange(m)
    pivot_sign = 1

    for k in range(min(m, n)):
        p = k + int(np.argmax(np.abs(LU[k:, k])))
        if p != k:
            LU[[k, p], :] = LU[[p, k], :]
            pivot[[k, p]] = pivot[[p, k]]
            pivot_sign = -pivot_sign

        if LU[k, k] != 0.0:
            LU[k + 1:, k] /= LU[k, k]
            LU[k + 1:, k + 1:] -= np.outer(LU[k + 1:, k], LU[k, k + 1:])

    LU.setflags(write=False)
    pivot.setflags(write=False)
    return LUResult(LU=LU, pivot=pivot, pivot_sign=pivot_sign)
