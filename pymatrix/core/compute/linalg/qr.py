"""
QR decomposition via Householder reflections.

For an m x n matrix with m >= n, computes A = QR with Q (m x n) having
orthonormal columns and R (n x n) upper triangular. The reflections are
kept in compact form, so Q is only formed on request; solves apply the
reflections directly. Used by the solver facade for least squares and
minimum-norm solutions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import solve_triangular

from pymatrix.core.compute.precision import hypot_norm, rank_tolerance
from pymatrix.core.exceptions import DimensionError, SingularMatrixError
from pymatrix.core.validation import check_2d


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        QR: Compact storage; column k below and on the diagonal holds the
            k-th Householder vector, the strict upper part holds R
        R_diagonal: Diagonal of R
    """
    QR: NDArray[np.floating[Any]]
    R_diagonal: NDArray[np.floating[Any]]

    @property
    def shape(self) -> tuple[int, int]:
        return self.QR.shape

    @property
    def is_full_rank(self) -> bool:
        """True if no diagonal entry of R is exactly zero."""
        return bool(np.all(self.R_diagonal != 0.0))

    @property
    def rank(self) -> int:
        """Numerical rank determined from the R diagonal."""
        diag_R = np.abs(self.R_diagonal)
        if len(diag_R) == 0:
            return 0
        largest = float(diag_R.max())
        if largest == 0.0:
            return 0
        tol = rank_tolerance(self.shape, largest)
        return int(np.sum(diag_R > tol))

    @property
    def H(self) -> NDArray[np.floating[Any]]:
        """Householder vectors as the lower trapezoid (m x n)."""
        return np.tril(self.QR)

    @property
    def R(self) -> NDArray[np.floating[Any]]:
        """Upper triangular factor (n x n)."""
        n = self.shape[1]
        R = np.triu(self.QR[:n, :], 1)
        R[np.arange(n), np.arange(n)] = self.R_diagonal
        return R

    @property
    def Q(self) -> NDArray[np.floating[Any]]:
        """Orthonormal factor (m x n), accumulated from the reflections."""
        m, n = self.shape
        Q = np.zeros((m, n))
        for k in range(n - 1, -1, -1):
            Q[k, k] = 1.0
            v = self.QR[k:, k]
            if v[0] != 0.0:
                s = -(v @ Q[k:, k:]) / v[0]
                Q[k:, k:] += np.outer(v, s)
        return Q

    def apply_qt(self, B: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        """Compute Q' @ B (m x k) by applying the reflections in order."""
        Y = np.array(B, dtype=np.float64, copy=True)
        for k in range(self.shape[1]):
            v = self.QR[k:, k]
            if v[0] != 0.0:
                s = -(v @ Y[k:, :]) / v[0]
                Y[k:, :] += np.outer(v, s)
        return Y

    def solve(self, B: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        """
        Least squares solution of A @ X = B.

        Minimizes ||A @ X - B|| column by column:
            X = R⁻¹ (Q'B)[:n]

        Args:
            B: Right-hand side (m x k)

        Returns:
            X (n x k)

        Raises:
            DimensionError: If B does not have m rows
            SingularMatrixError: If R has a zero diagonal entry
        """
        m, n = self.shape
        check_2d(B, 'B')
        if B.shape[0] != m:
            raise DimensionError(
                f"Row dimensions must agree: matrix has {m} rows, B has {B.shape[0]}"
            )
        self._require_full_rank()
        if n == 0 or B.shape[1] == 0:
            return np.zeros((n, B.shape[1]))

        # Q'B first, then the triangular system R @ X = (Q'B)[:n]
        Qty = self.apply_qt(B)
        return solve_triangular(self.R, Qty[:n], lower=False, check_finite=False)

    def solve_transpose(self, B: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        """
        Minimum-norm solution of A' @ X = B.

        With A = QR, A' = R'Q', so X = Q @ (R')⁻¹ B is the solution of least
        norm of the underdetermined system.

        Args:
            B: Right-hand side (n x k)

        Returns:
            X (m x k)

        Raises:
            DimensionError: If B does not have n rows
            SingularMatrixError: If R has a zero diagonal entry
        """
        m, n = self.shape
        check_2d(B, 'B')
        if B.shape[0] != n:
            raise DimensionError(
                f"Row dimensions must agree: transposed matrix has {n} rows, "
                f"B has {B.shape[0]}"
            )
        self._require_full_rank()
        if n == 0 or B.shape[1] == 0:
            return np.zeros((m, B.shape[1]))

        Y = solve_triangular(self.R, B, trans='T', lower=False, check_finite=False)
        return self.Q @ Y

    def _require_full_rank(self) -> None:
        if not self.is_full_rank:
            n = self.shape[1]
            raise SingularMatrixError(
                f"Matrix is rank deficient: rank={self.rank}, expected={n}",
                matrix_name='A',
                rank=self.rank,
                expected_rank=n,
            )


def qr(A: NDArray[np.floating[Any]]) -> QRResult:
    """
    Householder QR decomposition.

    For each column k, the reflection I - v v'/v[0] maps A[k:, k] onto a
    multiple of e_k. The sign of the norm follows A[k, k] to avoid
    cancellation.

    Args:
        A: Matrix to decompose (m x n), m >= n

    Returns:
        QRResult in compact form

    Raises:
        DimensionError: If m < n
    """
    check_2d(A, 'A')
    QR = np.array(A, dtype=np.float64, copy=True)
    m, n = QR.shape
    if m < n:
        raise DimensionError(
            f"QR decomposition requires rows >= columns, got {m}x{n}"
        )
    R_diagonal = np.zeros(n)

    for k in range(n):
        nrm = hypot_norm(QR[k:, k])
        if nrm != 0.0:
            if QR[k, k] < 0:
                nrm = -nrm
            QR[k:, k] /= nrm
            QR[k, k] += 1.0
            # Apply the reflection to the remaining columns
            s = -(QR[k:, k] @ QR[k:, k + 1:]) / QR[k, k]
            QR[k:, k + 1:] += np.outer(QR[k:, k], s)
        R_diagonal[k] = -nrm

    QR.setflags(write=False)
    R_diagonal.setflags(write=False)
    return QRResult(QR=QR, R_diagonal=R_diagonal)
