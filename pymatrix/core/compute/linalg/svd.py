"""
Singular value decomposition.

Thin SVD via LAPACK (through NumPy): A = U @ diag(s) @ V' with singular
values in descending order. Feeds the 2-norm, numerical rank and
condition number.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.precision import rank_tolerance
from pymatrix.core.exceptions import ConvergenceError, DimensionError
from pymatrix.core.validation import check_2d


@dataclass(frozen=True)
class SVDResult:
    """
    Result of singular value decomposition.

    Attributes:
        U: Left singular vectors (m x k), k = min(m, n)
        singular_values: Singular values, descending (k,)
        V: Right singular vectors (n x k)
    """
    U: NDArray[np.floating[Any]]
    singular_values: NDArray[np.floating[Any]]
    V: NDArray[np.floating[Any]]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.U.shape[0], self.V.shape[0])

    @property
    def S(self) -> NDArray[np.floating[Any]]:
        """Diagonal matrix of singular values (k x k)."""
        return np.diag(self.singular_values)

    def norm2(self) -> float:
        """Largest singular value; 0.0 for an empty matrix."""
        s = self.singular_values
        return float(s[0]) if s.size else 0.0

    def cond(self) -> float:
        """
        Two-norm condition number s_max / s_min.

        Returns inf when the smallest singular value is exactly zero.

        Raises:
            DimensionError: If the matrix is empty
        """
        s = self.singular_values
        if s.size == 0:
            raise DimensionError("Condition number of an empty matrix is undefined")
        if s[-1] == 0.0:
            return float('inf')
        return float(s[0] / s[-1])

    def rank(self, tol: float | None = None) -> int:
        """
        Number of singular values above tol.

        Args:
            tol: Absolute threshold. Defaults to max(m, n) * s_max * eps.
        """
        s = self.singular_values
        if s.size == 0:
            return 0
        if tol is None:
            tol = rank_tolerance(self.shape, float(s[0]))
        return int(np.sum(s > tol))


def svd(A: NDArray[np.floating[Any]]) -> SVDResult:
    """
    Thin singular value decomposition.

    Args:
        A: Matrix to decompose (m x n)

    Returns:
        SVDResult with U, singular values and V

    Raises:
        ConvergenceError: If the LAPACK iteration does not converge
    """
    check_2d(A, 'A')
    A = np.asarray(A, dtype=np.float64)
    m, n = A.shape
    k = min(m, n)
    if k == 0:
        U, s, V = np.zeros((m, 0)), np.zeros(0), np.zeros((n, 0))
    else:
        try:
            U, s, Vt = np.linalg.svd(A, full_matrices=False)
        except np.linalg.LinAlgError as e:
            raise ConvergenceError(
                f"SVD did not converge: {e}", reason='max_iterations'
            ) from e
        V = Vt.T.copy()

    for arr in (U, s, V):
        arr.setflags(write=False)
    return SVDResult(U=U, singular_values=s, V=V)
