"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Operation-specific exceptions inherit from the
appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from typing import Any


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when an operation requires exact shapes (square input, matching
    row counts, matching inner dimensions of a product) and the operands
    do not provide them.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Operand shapes cannot be broadcast against each other.

    Raised by element-wise operators when, along some axis, the two extents
    differ and neither is 1.

    Attributes:
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class TypeMismatchError(ValidationError):
    """
    Operand type is not supported by an arithmetic operator.

    Attributes:
        operand_type: Name of the rejected operand's type
    """

    def __init__(self, message: str, operand_type: str | None = None):
        super().__init__(message)
        self.operand_type = operand_type


class NotNumericError(ValidationError):
    """
    A cell that must be numeric cannot be coerced to a float.

    Attributes:
        value: The offending cell value
        row: Row index of the cell, if known
        column: Column index of the cell, if known
    """

    def __init__(
        self,
        message: str,
        value: Any = None,
        row: int | None = None,
        column: int | None = None
    ):
        super().__init__(message)
        self.value = value
        self.row = row
        self.column = column


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or rank deficient.

    Raised when a solve requires invertibility (LU) or full column rank (QR)
    but the factorization found an exactly zero pivot.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically min(m, n))
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not symmetric positive definite.

    Raised by the Cholesky factorization when the input is not symmetric
    or a pivot is not strictly positive.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Row at which the factorization broke down, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index


class ConvergenceError(PyMatrixError):
    """
    Iterative algorithm failed to converge.

    Raised when an iterative decomposition (SVD, eigenvalue QR iteration)
    exhausts its iteration budget.

    Attributes:
        iterations: Number of iterations completed, if reported
        reason: Why convergence failed (e.g., 'max_iterations')
    """

    def __init__(
        self,
        message: str,
        iterations: int | None = None,
        reason: str | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.reason = reason
