"""
Shape compatibility and implicit expansion for element-wise operators.

Two shapes are compatible when, along each axis, the extents are equal or
one of them is 1. The extent-1 operand is replicated along that axis: a
row vector combined with a column vector yields a full matrix.

Expansion never copies. `expand` returns a read-only view whose stride is
zero along replicated axes, so reading cell (i, j) of the view reads
cell (source_index(i, rows), source_index(j, columns)) of the operand.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import ShapeMismatchError


def broadcast_shape(
    left: tuple[int, int],
    right: tuple[int, int],
) -> tuple[int, int]:
    """
    Result shape of an element-wise operation between two matrices.

    Args:
        left: (rows, columns) of the left operand
        right: (rows, columns) of the right operand

    Returns:
        The broadcast (rows, columns)

    Raises:
        ShapeMismatchError: If some axis has unequal extents, neither 1
    """
    result = []
    for axis, (a, b) in enumerate(zip(left, right)):
        if a == b or b == 1:
            result.append(a)
        elif a == 1:
            result.append(b)
        else:
            label = 'rows' if axis == 0 else 'columns'
            raise ShapeMismatchError(
                f"Matrix dimensions must agree: {left[0]}x{left[1]} and "
                f"{right[0]}x{right[1]} differ in {label} ({a} vs {b}) and "
                f"neither is 1",
                left_shape=tuple(left),
                right_shape=tuple(right),
            )
    return (result[0], result[1])


def source_index(target: int, extent: int) -> int:
    """Index read from an operand axis of the given extent for a target index."""
    return 0 if extent == 1 else target


def expand(data: NDArray[Any], shape: tuple[int, int]) -> NDArray[Any]:
    """Zero-copy read-only view of data broadcast to shape."""
    return np.broadcast_to(data, shape)


def is_scalar_shape(shape: tuple[int, int]) -> bool:
    return shape == (1, 1)


def is_row_vector(shape: tuple[int, int]) -> bool:
    return shape[0] == 1


def is_column_vector(shape: tuple[int, int]) -> bool:
    return shape[1] == 1


def is_vector(shape: tuple[int, int]) -> bool:
    """True if either dimension is 1."""
    return is_row_vector(shape) or is_column_vector(shape)


def is_square(shape: tuple[int, int]) -> bool:
    return shape[0] == shape[1]
