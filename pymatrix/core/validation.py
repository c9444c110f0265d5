"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any numeric array-like. Rejects inputs that result in object
    dtype (mixed types) or a non-numeric dtype (strings, datetimes).
    Always returns a fresh array, never a view of the input.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # bool is numeric to numpy but not a matrix cell value
    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return np.array(result, dtype=np.float64, copy=True)


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_square(array: NDArray[Any], name: str) -> None:
    """
    Verify a 2D array is square.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If rows != columns
    """
    check_2d(array, name)
    rows, columns = array.shape
    if rows != columns:
        raise DimensionError(
            f"{name}: matrix must be square, got {rows}x{columns}"
        )


def check_same_rows(
    a: NDArray[Any],
    b: NDArray[Any],
    names: tuple[str, str],
) -> None:
    """
    Verify two arrays have the same number of rows (first dimension).

    Args:
        a: Coefficient matrix
        b: Right-hand side
        names: Parameter names for error messages

    Raises:
        DimensionError: If row counts differ
    """
    if a.shape[0] != b.shape[0]:
        raise DimensionError(
            f"Row dimensions must agree: {names[0]} has {a.shape[0]} rows, "
            f"{names[1]} has {b.shape[0]}"
        )


def check_inner_dimensions(
    a: NDArray[Any],
    b: NDArray[Any],
    names: tuple[str, str],
) -> None:
    """
    Verify the inner dimensions of a matrix product agree.

    Args:
        a: Left factor (m x p)
        b: Right factor (p x n)
        names: Parameter names for error messages

    Raises:
        DimensionError: If a.columns != b.rows
    """
    if a.shape[1] != b.shape[0]:
        raise DimensionError(
            f"Inner matrix dimensions must agree: {names[0]} is "
            f"{a.shape[0]}x{a.shape[1]}, {names[1]} is {b.shape[0]}x{b.shape[1]}"
        )


def check_nonnegative_size(rows: int, columns: int) -> None:
    """
    Verify requested matrix dimensions are non-negative integers.

    Raises:
        ValidationError: If either dimension is negative or not an integer
    """
    for label, value in (('rows', rows), ('columns', columns)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValidationError(f"{label}: expected an integer, got {type(value).__name__}")
        if value < 0:
            raise ValidationError(f"{label}: must be >= 0, got {value}")
