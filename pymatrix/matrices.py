"""
Free-function counterparts of the Matrix operators and matrix builders.

Useful where method dispatch is awkward, e.g. when folding a list of
matrices or when the left operand is the result of another call.

Example:
    >>> from pymatrix import matrices
    >>> A = matrices.ones(2, 2)
    >>> matrices.plus(A, 1).tolist()
    [[2.0, 2.0], [2.0, 2.0]]
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from pymatrix.core.cells import CellKind, is_numeric_like, merge_kind, to_number
from pymatrix.core.exceptions import DimensionError
from pymatrix.core.validation import check_nonnegative_size
from pymatrix.matrix import Matrix


def plus(matrix: Matrix, other: Any) -> Matrix:
    """C = A + B; see Matrix.plus."""
    return matrix.plus(other)


def minus(matrix: Matrix, other: Any) -> Matrix:
    """C = A - B; see Matrix.minus."""
    return matrix.minus(other)


def times(matrix: Matrix, other: Any) -> Matrix:
    """C = A .* B; see Matrix.element_times."""
    return matrix.element_times(other)


def matrix_multiply(matrix: Matrix, other: Matrix) -> Matrix:
    """C = A * B, the linear algebraic product."""
    return matrix.matrix_multiply(other)


def right_divide(matrix: Matrix, other: Any) -> Matrix:
    """x = A ./ B."""
    return matrix.right_divide(other)


def left_divide(matrix: Matrix, other: Any) -> Matrix:
    """x = A .\\ B, i.e. B ./ A."""
    return matrix.left_divide(other)


def zeros(rows: int, columns: int) -> Matrix:
    return Matrix.allocate(rows, columns, CellKind.NUMERIC)


def ones(rows: int, columns: int) -> Matrix:
    check_nonnegative_size(rows, columns)
    return Matrix(np.ones((rows, columns)))


def nan(rows: int, columns: int) -> Matrix:
    """Matrix with every cell NaN."""
    check_nonnegative_size(rows, columns)
    return Matrix(np.full((rows, columns), np.nan))


def identity(rows: int, columns: int) -> Matrix:
    return Matrix.identity(rows, columns)


def random(rows: int, columns: int, seed: int | np.random.Generator | None = None) -> Matrix:
    return Matrix.random(rows, columns, seed)


def has_nan(matrix: Matrix) -> bool:
    """True if some cell reads as NaN (including the text "nan") or is not numeric-like."""
    for row in matrix.tolist():
        for cell in row:
            if not is_numeric_like(cell):
                return True
            if math.isnan(to_number(cell)):
                return True
    return False


def vertical_merge(top: Matrix, bottom: Matrix) -> Matrix:
    """
    Stack two matrices vertically, [A; B].

    Raises:
        DimensionError: If the column counts differ
    """
    if top.columns != bottom.columns:
        raise DimensionError(
            f"Vertical merge requires equal column counts: "
            f"{top.columns} vs {bottom.columns}"
        )
    kind = merge_kind(top.kind, bottom.kind)
    cells = top.tolist() + bottom.tolist()
    if not cells:
        return Matrix.allocate(0, top.columns, kind)
    return Matrix(np.array(cells, dtype=_dtype(kind)), kind)


def horizontal_merge(left: Matrix, right: Matrix) -> Matrix:
    """
    Concatenate two matrices side by side, [A, B].

    Raises:
        DimensionError: If the row counts differ
    """
    if left.rows != right.rows:
        raise DimensionError(
            f"Horizontal merge requires equal row counts: "
            f"{left.rows} vs {right.rows}"
        )
    kind = merge_kind(left.kind, right.kind)
    cells = [a + b for a, b in zip(left.tolist(), right.tolist())]
    if not cells:
        return Matrix.allocate(0, left.columns + right.columns, kind)
    return Matrix(np.array(cells, dtype=_dtype(kind)), kind)


def diag(vector: Matrix, offset: int = 0) -> Matrix:
    """
    Square matrix with a vector placed on a diagonal.

    For an n-element vector the result is n x n with
    result[j + offset, j] = vector[j] wherever that index is in range, so
    a positive offset moves the values below the main diagonal and a
    negative one above it. All other cells are 0.

    Raises:
        DimensionError: If the input is not a row or column vector
    """
    if not vector.is_vector:
        raise DimensionError(
            f"diag requires a row or column vector, got {vector.rows}x{vector.columns}"
        )
    values = [cell for row in vector.tolist() for cell in row]
    n = len(values)
    kind = CellKind.NUMERIC if vector.kind is CellKind.NUMERIC else CellKind.MIXED
    result = Matrix.allocate(n, n, kind)
    for i in range(n):
        for j in range(n):
            if kind is CellKind.MIXED:
                result.set(i, j, 0)
            if i == j + offset:
                result.set(i, j, values[j])
    return result


def _dtype(kind: CellKind) -> type:
    return np.float64 if kind is CellKind.NUMERIC else object
