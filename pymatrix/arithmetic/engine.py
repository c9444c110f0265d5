"""
Broadcasting arithmetic engine.

Works on raw storage: every entry point takes the left matrix's storage
and kind plus a classified operand, and returns freshly allocated storage
and the result kind. Operands are never modified. The Matrix container
wraps these results.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.arithmetic.broadcasting import broadcast_shape, expand
from pymatrix.arithmetic.coercion import (
    MatrixOperand,
    Operand,
    Operator,
    Scalar,
    Text,
    combine,
    result_kind,
)
from pymatrix.core.cells import CellKind, coerce_array, stringify
from pymatrix.core.exceptions import TypeMismatchError


def apply(
    operator: Operator,
    data: NDArray[Any],
    kind: CellKind,
    operand: Operand,
) -> tuple[NDArray[Any], CellKind]:
    """
    Combine a matrix with an operand cell by cell.

    Args:
        operator: Element-wise operator
        data: Left matrix storage (m x n)
        kind: Left matrix kind
        operand: Scalar, Text or MatrixOperand

    Returns:
        (storage, kind) of the result. Scalar and text operands keep the
        shape (m, n); matrix operands give the broadcast shape and
        always MIXED storage of Python floats.

    Raises:
        TypeMismatchError: Text with any operator other than PLUS, or an
            unknown operand variant
        NotNumericError: A cell cannot be coerced to float
        ShapeMismatchError: Matrix shapes cannot be broadcast
    """
    if isinstance(operand, Text):
        if operator is not Operator.PLUS:
            raise TypeMismatchError(
                f"Operator {operator.value} does not accept a text operand",
                operand_type='str',
            )
        return concatenate(data, operand.value), CellKind.TEXT

    if isinstance(operand, Scalar):
        values = combine(operator, coerce_array(data, kind), operand.value)
        return values, CellKind.NUMERIC

    if isinstance(operand, MatrixOperand):
        shape = broadcast_shape(data.shape, operand.shape)
        left = expand(coerce_array(data, kind), shape)
        right = expand(coerce_array(operand.data, operand.kind), shape)
        values = combine(operator, left, right)
        return _to_objects(values), result_kind(kind, operand)

    raise TypeMismatchError(
        f"Unsupported operand type: {type(operand).__name__}",
        operand_type=type(operand).__name__,
    )


def concatenate(data: NDArray[Any], text: str) -> NDArray[Any]:
    """Append text to the string form of every cell."""
    result = np.empty(data.shape, dtype=object)
    for index, value in np.ndenumerate(data):
        result[index] = stringify(_as_python(value)) + text
    return result


def negate(data: NDArray[Any], kind: CellKind) -> NDArray[np.floating[Any]]:
    """Unary minus of a matrix's cells, as float64."""
    return -coerce_array(data, kind)


def _to_objects(values: NDArray[np.floating[Any]]) -> NDArray[Any]:
    """Object storage holding Python floats."""
    return values.astype(object)


def _as_python(value: Any) -> Any:
    # float64 cells print as Python floats ("1.0", not "np.float64(1.0)")
    if isinstance(value, np.generic):
        return value.item()
    return value
