"""
PyMatrix: dense matrices with broadcasting arithmetic and
factorization-backed linear algebra.

Submodules:
    arithmetic: Element-wise operators with implicit expansion
    algebra: Products, norms, solve / inverse / det / rank / cond
    core: Cell kinds, exceptions, validation, factorization kernels
    matrices: Free-function operators and matrix builders
    io: Plain-text read/write
"""

__version__ = "0.1.0"

from pymatrix.core.cells import CellKind
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    TypeMismatchError,
    NotNumericError,
    NumericalError,
    SingularMatrixError,
    NotPositiveDefiniteError,
    ConvergenceError,
)
from pymatrix.matrix import Matrix
from pymatrix import matrices

__all__ = [
    "__version__",
    "Matrix",
    "CellKind",
    "matrices",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "TypeMismatchError",
    "NotNumericError",
    "NumericalError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
    "ConvergenceError",
]
