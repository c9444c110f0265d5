"""
Linear algebra kernels for PyMatrix.

All functions follow these conventions:
    - Inputs are float64 NumPy arrays; inputs are copied, never modified
    - Each factorization returns a frozen result dataclass whose arrays
      are read-only
    - Triangular solves and the SVD/eigen drivers use LAPACK through
      NumPy/SciPy
    - Errors are raised immediately with clear messages

Submodules:
    lu: LU decomposition with partial pivoting
    qr: Householder QR decomposition
    cholesky: Cholesky decomposition
    svd: Singular value decomposition
    eigen: Eigenvalue decomposition
"""

from pymatrix.core.compute.linalg.lu import LUResult, lu
from pymatrix.core.compute.linalg.qr import QRResult, qr
from pymatrix.core.compute.linalg.cholesky import CholeskyResult, cholesky
from pymatrix.core.compute.linalg.svd import SVDResult, svd
from pymatrix.core.compute.linalg.eigen import EigenResult, eigen

__all__ = [
    # LU decomposition
    "LUResult",
    "lu",
    # QR decomposition
    "QRResult",
    "qr",
    # Cholesky decomposition
    "CholeskyResult",
    "cholesky",
    # Singular value decomposition
    "SVDResult",
    "svd",
    # Eigenvalue decomposition
    "EigenResult",
    "eigen",
]
