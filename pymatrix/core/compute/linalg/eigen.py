"""
Eigenvalue decomposition of a real square matrix.

Symmetric input: tridiagonal reduction with implicit-shift QL/QR
(scipy.linalg.eigh). Real eigenvalues, orthonormal V, diagonal D.

Non-symmetric input: Hessenberg reduction with shifted QR iteration
(scipy.linalg.eig). Eigenvalues may come in complex conjugate pairs
a ± ib. The eigenvector matrix stays real: for such a pair the two columns
of V hold the real and imaginary parts of the eigenvector, and D carries
the 2x2 block [[a, b], [-b, a]], so that A @ V = V @ D.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
import scipy.linalg
from numpy.typing import NDArray

from pymatrix.core.compute.precision import is_symmetric
from pymatrix.core.exceptions import ConvergenceError
from pymatrix.core.validation import check_square


@dataclass(frozen=True)
class EigenResult:
    """
    Result of eigenvalue decomposition.

    Attributes:
        real_eigenvalues: Real parts of the eigenvalues (n,)
        imag_eigenvalues: Imaginary parts of the eigenvalues (n,)
        V: Real eigenvector matrix (n x n)
        symmetric: Whether the symmetric solver was used
    """
    real_eigenvalues: NDArray[np.floating[Any]]
    imag_eigenvalues: NDArray[np.floating[Any]]
    V: NDArray[np.floating[Any]]
    symmetric: bool

    @property
    def D(self) -> NDArray[np.floating[Any]]:
        """Real block diagonal eigenvalue matrix."""
        d, e = self.real_eigenvalues, self.imag_eigenvalues
        D = np.diag(d)
        for i in range(len(d)):
            if e[i] > 0:
                D[i, i + 1] = e[i]
            elif e[i] < 0:
                D[i, i - 1] = e[i]
        return D

    @property
    def eigenvalues(self) -> NDArray[np.complexfloating[Any, Any]]:
        """Eigenvalues as a complex array."""
        return self.real_eigenvalues + 1j * self.imag_eigenvalues


def eigen(A: NDArray[np.floating[Any]]) -> EigenResult:
    """
    Eigenvalue decomposition.

    Args:
        A: Square matrix (n x n)

    Returns:
        EigenResult with eigenvalues split into real/imaginary parts

    Raises:
        DimensionError: If A is not square
        ConvergenceError: If the QR iteration does not converge
    """
    check_square(A, 'A')
    A = np.asarray(A, dtype=np.float64)
    n = A.shape[0]
    symmetric = is_symmetric(A)

    if n == 0:
        d, e, V = np.zeros(0), np.zeros(0), np.zeros((0, 0))
    elif symmetric:
        try:
            d, V = scipy.linalg.eigh(A, check_finite=False)
        except np.linalg.LinAlgError as err:
            raise ConvergenceError(
                f"Symmetric eigenvalue iteration did not converge: {err}",
                reason='max_iterations',
            ) from err
        e = np.zeros(n)
    else:
        try:
            w, vr = scipy.linalg.eig(A, check_finite=False)
        except np.linalg.LinAlgError as err:
            raise ConvergenceError(
                f"Eigenvalue QR iteration did not converge: {err}",
                reason='max_iterations',
            ) from err
        d, e, V = _real_form(w, vr)

    for arr in (d, e, V):
        arr.setflags(write=False)
    return EigenResult(real_eigenvalues=d, imag_eigenvalues=e, V=V, symmetric=symmetric)


def _real_form(
    w: NDArray[np.complexfloating[Any, Any]],
    vr: NDArray[np.complexfloating[Any, Any]],
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """Split complex eigenpairs into real parts, imaginary parts and a real V."""
    n = len(w)
    d = np.ascontiguousarray(w.real, dtype=np.float64)
    e = np.ascontiguousarray(w.imag, dtype=np.float64)
    V = np.zeros((n, n))
    j = 0
    while j < n:
        if e[j] == 0.0:
            V[:, j] = vr[:, j].real
            j += 1
        else:
            # LAPACK returns the member with positive imaginary part first
            if e[j] < 0 and j + 1 < n:
                d[j], d[j + 1] = d[j + 1], d[j]
                e[j], e[j + 1] = e[j + 1], e[j]
                v = vr[:, j + 1]
            else:
                v = vr[:, j]
            V[:, j] = v.real
            V[:, j + 1] = v.imag
            j += 2
    return d, e, V
