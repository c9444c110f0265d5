"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the
arithmetic engine, the dense algebra layer and the matrix container.

Key components:
    cells: Cell kinds and numeric coercion
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Precision constants, tolerances, factorization kernels
"""

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

__all__ = [
    # Cells
    "CellKind",
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
