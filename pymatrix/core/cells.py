"""
Cell kinds and per-cell coercion.

A matrix is tagged with one CellKind:
    NUMERIC: float64 storage
    TEXT:    object storage holding str
    MIXED:   object storage holding arbitrary values

Coercion to float is explicit and fails with NotNumericError rather than
guessing. A cell is numeric-like if it is a real number, None (read as 0.0),
or if its string form is a plain numeric literal (including nan and inf).
"""

from __future__ import annotations

import numbers
import re
from enum import Enum
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import NotNumericError, ValidationError
from pymatrix.core.validation import check_2d, check_array


class CellKind(Enum):
    """Storage tag of a matrix."""
    NUMERIC = 'numeric'
    TEXT = 'text'
    MIXED = 'mixed'


# Plain decimal literals plus the nan / inf spellings that float() and
# fixed-point formatting produce
NUMERIC_PATTERN = re.compile(
    r'[+-]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)',
    re.IGNORECASE,
)


def is_numeric_like(value: Any) -> bool:
    """Return True if to_number(value) would succeed."""
    if value is None:
        return True
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, numbers.Real):
        return True
    return NUMERIC_PATTERN.fullmatch(str(value).strip()) is not None


def to_number(value: Any, row: int | None = None, column: int | None = None) -> float:
    """
    Coerce one cell value to float.

    Args:
        value: Cell value
        row: Row index, reported in the error
        column: Column index, reported in the error

    Returns:
        The value as a Python float

    Raises:
        NotNumericError: If the value is not numeric-like
    """
    if value is None:
        return 0.0
    if isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_)):
        return float(value)
    if isinstance(value, (bool, np.bool_)) or not is_numeric_like(value):
        where = f" at ({row}, {column})" if row is not None else ""
        raise NotNumericError(
            f"Cell{where} is not numeric: {value!r}",
            value=value,
            row=row,
            column=column,
        )
    return float(str(value).strip())


def stringify(value: Any) -> str:
    """String form of a cell used by text concatenation."""
    if value is None:
        return ""
    return str(value)


def infer_kind(cells: NDArray[Any]) -> CellKind:
    """
    Infer the kind of an object array of cells.

    All str -> TEXT, all real numbers -> NUMERIC, anything else -> MIXED.
    An empty array is NUMERIC.
    """
    flat = cells.ravel().tolist()
    if all(isinstance(c, str) for c in flat) and flat:
        return CellKind.TEXT
    if all(
        isinstance(c, numbers.Real) and not isinstance(c, (bool, np.bool_))
        for c in flat
    ):
        return CellKind.NUMERIC
    return CellKind.MIXED


def merge_kind(left: CellKind, right: CellKind) -> CellKind:
    """Kind of a matrix holding cells from both operands."""
    return left if left is right else CellKind.MIXED


def allocate(rows: int, columns: int, kind: CellKind) -> NDArray[Any]:
    """Fresh storage for a matrix: zeros, empty strings, or None."""
    if kind is CellKind.NUMERIC:
        return np.zeros((rows, columns), dtype=np.float64)
    fill = "" if kind is CellKind.TEXT else None
    return np.full((rows, columns), fill, dtype=object)


def coerce_array(data: NDArray[Any], kind: CellKind) -> NDArray[np.floating[Any]]:
    """
    Float64 copy of a matrix's storage.

    Args:
        data: 2D storage array
        kind: Storage tag

    Returns:
        New float64 array of the same shape

    Raises:
        NotNumericError: On the first cell (row-major) that is not numeric-like
    """
    if kind is CellKind.NUMERIC:
        return np.array(data, dtype=np.float64, copy=True)

    result = np.empty(data.shape, dtype=np.float64)
    for (i, j), value in np.ndenumerate(data):
        result[i, j] = to_number(value, i, j)
    return result


def as_cells(data: Any) -> tuple[NDArray[Any], CellKind]:
    """
    Convert an array-like into fresh 2D matrix storage and its kind.

    Numeric input becomes float64 storage; anything else becomes object
    storage with the kind inferred from the cells; a bool cell makes the
    input MIXED rather than being read as 0 or 1. A 1D input is a row
    vector and a bare value is a 1x1 matrix.

    Raises:
        ValidationError: If the rows have unequal lengths
        DimensionError: If the input has more than two dimensions
    """
    if isinstance(data, np.ndarray):
        array = data
    else:
        try:
            array = np.asarray(data)
        except ValueError as e:
            raise ValidationError(f"data: rows have unequal lengths: {e}") from e
        # numpy promotes bools mixed with numbers to int; keep them as cells
        if not _is_numeric_dtype(array.dtype) or _holds_bool(data):
            array = np.array(data, dtype=object)

    if array.ndim == 0:
        array = array.reshape(1, 1)
    elif array.ndim == 1:
        array = array.reshape(0, 0) if array.size == 0 else array.reshape(1, -1)
    check_2d(array, 'data')

    if _is_numeric_dtype(array.dtype):
        return check_array(array, 'data'), CellKind.NUMERIC

    cells = np.array(array, dtype=object, copy=True)
    kind = infer_kind(cells)
    if kind is CellKind.NUMERIC:
        return cells.astype(np.float64), kind
    return cells, kind


def _holds_bool(data: Any) -> bool:
    cells = np.array(data, dtype=object).ravel().tolist()
    return any(isinstance(c, (bool, np.bool_)) for c in cells)


def _is_numeric_dtype(dtype: np.dtype) -> bool:
    return (
        np.issubdtype(dtype, np.number)
        and dtype != np.bool_
        and not np.issubdtype(dtype, np.complexfloating)
    )
