"""
Operand classification and per-cell combine rules.

An arithmetic operand is one of three closed variants:

    Scalar(value)          real number, broadcast to every cell
    Text(value)            string, only valid for plus (concatenation)
    MatrixOperand(data)    another matrix's storage and kind

The result kind follows from the operand:

    numeric op scalar      -> NUMERIC
    matrix plus text       -> TEXT
    matrix op matrix       -> MIXED
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.cells import CellKind, as_cells
from pymatrix.core.exceptions import TypeMismatchError


class Operator(Enum):
    """Element-wise operators, labelled with their MATLAB spelling."""
    PLUS = '+'
    MINUS = '-'
    TIMES = '.*'
    RIGHT_DIVIDE = './'
    LEFT_DIVIDE = '.\\'


@dataclass(frozen=True)
class Scalar:
    value: float


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class MatrixOperand:
    data: NDArray[Any]
    kind: CellKind

    @property
    def shape(self) -> tuple[int, int]:
        return self.data.shape


Operand = Union[Scalar, Text, MatrixOperand]


def classify_operand(value: Any) -> Operand:
    """
    Map a Python value onto the operand variants.

    Matrix instances are converted by the container itself; this handles
    numbers, strings and 2D array-likes.

    Raises:
        TypeMismatchError: For any other type (including bool)
    """
    if isinstance(value, (Scalar, Text, MatrixOperand)):
        return value
    if isinstance(value, (bool, np.bool_)):
        raise TypeMismatchError(
            "Unsupported operand type: bool", operand_type='bool'
        )
    if isinstance(value, numbers.Real):
        return Scalar(float(value))
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, (np.ndarray, list, tuple)):
        data, kind = as_cells(value)
        return MatrixOperand(data, kind)
    raise TypeMismatchError(
        f"Unsupported operand type: {type(value).__name__}",
        operand_type=type(value).__name__,
    )


def result_kind(left: CellKind, operand: Operand) -> CellKind:
    """Kind of the matrix produced by combining a matrix with an operand."""
    if isinstance(operand, Text):
        return CellKind.TEXT
    if isinstance(operand, Scalar):
        return CellKind.NUMERIC
    if isinstance(operand, MatrixOperand):
        return CellKind.MIXED
    raise TypeMismatchError(
        f"Unsupported operand type: {type(operand).__name__}",
        operand_type=type(operand).__name__,
    )


def combine(
    operator: Operator,
    a: NDArray[np.floating[Any]] | float,
    b: NDArray[np.floating[Any]] | float,
) -> NDArray[np.floating[Any]]:
    """
    Apply an operator cell by cell in float64.

    Right division is a / b, left division is b / a. Division by zero
    yields inf or nan as IEEE-754 prescribes.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        if operator is Operator.PLUS:
            return np.add(a, b)
        if operator is Operator.MINUS:
            return np.subtract(a, b)
        if operator is Operator.TIMES:
            return np.multiply(a, b)
        if operator is Operator.RIGHT_DIVIDE:
            return np.divide(a, b)
        if operator is Operator.LEFT_DIVIDE:
            return np.divide(b, a)
    raise ValueError(f"Unknown operator: {operator!r}")
