"""
The Matrix container.

A Matrix is a fixed-size rows x columns grid of cells tagged with a
CellKind. It owns its storage: constructors copy their input, and every
operation returns a new Matrix unless its name ends in ``_equals``, in
which case it updates ``self`` and returns it for chaining.

Example:
    >>> from pymatrix import Matrix
    >>> A = Matrix([[1, 2, 3], [4, 5, 6]])
    >>> B = Matrix([[1, 2], [3, 4], [5, 6]])
    >>> (A @ B).tolist()
    [[22.0, 28.0], [49.0, 64.0]]
    >>> (Matrix([[1, 2, 3]]) + Matrix([[10], [20]])).shape
    (2, 3)
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix import algebra
from pymatrix.arithmetic import broadcasting
from pymatrix.arithmetic.coercion import (
    MatrixOperand,
    Operand,
    Operator,
    classify_operand,
)
from pymatrix.arithmetic.engine import apply, negate
from pymatrix.core.cells import CellKind, allocate, as_cells, coerce_array, to_number
from pymatrix.core.compute.linalg import (
    CholeskyResult,
    EigenResult,
    LUResult,
    QRResult,
    SVDResult,
    cholesky,
    eigen,
    lu,
    qr,
    svd,
)
from pymatrix.core.exceptions import ShapeMismatchError, TypeMismatchError
from pymatrix.core.validation import check_array, check_nonnegative_size


class Matrix:
    """
    Rectangular matrix of numeric, text or mixed cells.

    Construction:
        Matrix([[1, 2], [3, 4]])                 # NUMERIC
        Matrix([["a", "b"]])                     # TEXT
        Matrix([[1, "x"], [None, 2.5]])          # MIXED
        Matrix.allocate(2, 3, CellKind.TEXT)     # filled with ""
        Matrix.identity(3, 3)
        Matrix.random(2, 2, seed=0)

    A 1D input is a row vector.
    """

    __slots__ = ('_data', '_kind')

    # NumPy arrays on the left of an operator defer to Matrix
    __array_ufunc__ = None

    def __init__(self, data: ArrayLike | Matrix, kind: CellKind | None = None):
        if isinstance(data, Matrix):
            kind = data._kind if kind is None else kind
            data = data._data
        cells, inferred = as_cells(data)
        if kind is None or kind is inferred:
            self._data, self._kind = cells, inferred
        elif kind is CellKind.NUMERIC:
            self._data, self._kind = coerce_array(cells, inferred), kind
        elif kind is CellKind.TEXT:
            if not all(isinstance(c, str) for c in cells.ravel().tolist()):
                raise TypeMismatchError(
                    "TEXT matrices hold only str cells", operand_type='mixed'
                )
            self._data, self._kind = cells.astype(object), kind
        else:
            self._data, self._kind = cells.astype(object), kind

    @classmethod
    def _wrap(cls, data: NDArray[Any], kind: CellKind) -> Matrix:
        """Adopt storage without copying. Caller guarantees it is fresh."""
        matrix = cls.__new__(cls)
        matrix._data = data
        matrix._kind = kind
        return matrix

    @classmethod
    def allocate(
        cls,
        rows: int,
        columns: int,
        kind: CellKind = CellKind.NUMERIC,
    ) -> Matrix:
        """New matrix filled with 0.0 (NUMERIC), "" (TEXT) or None (MIXED)."""
        check_nonnegative_size(rows, columns)
        return cls._wrap(allocate(rows, columns, kind), kind)

    @classmethod
    def identity(cls, rows: int, columns: int) -> Matrix:
        return cls._wrap(algebra.identity(rows, columns), CellKind.NUMERIC)

    @classmethod
    def random(
        cls,
        rows: int,
        columns: int,
        seed: int | np.random.Generator | None = None,
    ) -> Matrix:
        """Uniform [0, 1) entries; see pymatrix.algebra.random."""
        return cls._wrap(algebra.random(rows, columns, seed), CellKind.NUMERIC)

    # ------------------------------------------------------------------
    # Shape and cell access
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def columns(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.columns)

    @property
    def kind(self) -> CellKind:
        return self._kind

    @property
    def is_row_vector(self) -> bool:
        return broadcasting.is_row_vector(self.shape)

    @property
    def is_column_vector(self) -> bool:
        return broadcasting.is_column_vector(self.shape)

    @property
    def is_vector(self) -> bool:
        return broadcasting.is_vector(self.shape)

    @property
    def is_scalar(self) -> bool:
        return broadcasting.is_scalar_shape(self.shape)

    @property
    def is_square(self) -> bool:
        return broadcasting.is_square(self.shape)

    def _check_index(self, row: int, column: int) -> None:
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError(
                f"Index ({row}, {column}) out of range for a "
                f"{self.rows}x{self.columns} matrix"
            )

    def get(self, row: int, column: int) -> Any:
        """Cell value; float for NUMERIC matrices."""
        self._check_index(row, column)
        value = self._data[row, column]
        if self._kind is CellKind.NUMERIC:
            return float(value)
        return value

    def get_numeric(self, row: int, column: int) -> float:
        """
        Cell value coerced to float.

        Raises:
            NotNumericError: If the cell is not numeric-like
        """
        self._check_index(row, column)
        return to_number(self._data[row, column], row, column)

    def set(self, row: int, column: int, value: Any) -> None:
        """
        Store a cell value.

        NUMERIC matrices coerce the value to float (NotNumericError if that
        fails). TEXT matrices accept only str (TypeMismatchError otherwise).
        MIXED matrices store anything.
        """
        self._check_index(row, column)
        if self._kind is CellKind.NUMERIC:
            self._data[row, column] = to_number(value, row, column)
        elif self._kind is CellKind.TEXT:
            if not isinstance(value, str):
                raise TypeMismatchError(
                    f"TEXT matrix cells must be str, got {type(value).__name__}",
                    operand_type=type(value).__name__,
                )
            self._data[row, column] = value
        else:
            self._data[row, column] = value

    def __getitem__(self, index: tuple[int, int]) -> Any:
        row, column = index
        return self.get(row, column)

    def __setitem__(self, index: tuple[int, int], value: Any) -> None:
        row, column = index
        self.set(row, column, value)

    def copy(self) -> Matrix:
        return self._wrap(self._data.copy(), self._kind)

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """
        Float64 copy of the cells.

        Raises:
            NotNumericError: If some cell is not numeric-like
        """
        return coerce_array(self._data, self._kind)

    def tolist(self) -> list[list[Any]]:
        return self._data.tolist()

    def __repr__(self) -> str:
        return f"Matrix({self.rows}x{self.columns}, kind={self._kind.value})"

    # ------------------------------------------------------------------
    # Element-wise arithmetic
    # ------------------------------------------------------------------

    def _operand(self, other: Any) -> Operand:
        if isinstance(other, Matrix):
            return MatrixOperand(other._data, other._kind)
        return classify_operand(other)

    def _apply(self, operator: Operator, other: Any) -> Matrix:
        data, kind = apply(operator, self._data, self._kind, self._operand(other))
        return self._wrap(data, kind)

    def _apply_in_place(self, operator: Operator, other: Any) -> Matrix:
        data, kind = apply(operator, self._data, self._kind, self._operand(other))
        if data.shape != self.shape:
            raise ShapeMismatchError(
                f"In-place {operator.value} would change the shape from "
                f"{self.rows}x{self.columns} to {data.shape[0]}x{data.shape[1]}",
                left_shape=self.shape,
                right_shape=data.shape,
            )
        self._data, self._kind = data, kind
        return self

    def plus(self, other: Any) -> Matrix:
        """
        C = A + B.

        A number is added to every cell, a string is appended to the
        string form of every cell, and a matrix is added cell by cell
        with implicit expansion of extent-1 dimensions.
        """
        return self._apply(Operator.PLUS, other)

    def minus(self, other: Any) -> Matrix:
        """C = A - B for a number or a matrix."""
        return self._apply(Operator.MINUS, other)

    def element_times(self, other: Any) -> Matrix:
        """C = A .* B for a number or a matrix."""
        return self._apply(Operator.TIMES, other)

    def right_divide(self, other: Any) -> Matrix:
        """C = A ./ B: each cell of A divided by the matching cell of B."""
        return self._apply(Operator.RIGHT_DIVIDE, other)

    def left_divide(self, other: Any) -> Matrix:
        """C = A .\\ B: each cell of B divided by the matching cell of A."""
        return self._apply(Operator.LEFT_DIVIDE, other)

    def plus_equals(self, other: Any) -> Matrix:
        return self._apply_in_place(Operator.PLUS, other)

    def minus_equals(self, other: Any) -> Matrix:
        return self._apply_in_place(Operator.MINUS, other)

    def element_times_equals(self, other: Any) -> Matrix:
        return self._apply_in_place(Operator.TIMES, other)

    def right_divide_equals(self, other: Any) -> Matrix:
        return self._apply_in_place(Operator.RIGHT_DIVIDE, other)

    def left_divide_equals(self, other: Any) -> Matrix:
        return self._apply_in_place(Operator.LEFT_DIVIDE, other)

    def uminus(self) -> Matrix:
        """Unary minus."""
        return self._wrap(negate(self._data, self._kind), CellKind.NUMERIC)

    def __add__(self, other: Any) -> Matrix:
        return self.plus(other)

    def __radd__(self, other: Any) -> Matrix:
        if isinstance(other, str):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: Any) -> Matrix:
        return self.minus(other)

    def __rsub__(self, other: Any) -> Matrix:
        if isinstance(other, str):
            return NotImplemented
        return self.uminus().plus(other)

    def __mul__(self, other: Any) -> Matrix:
        return self.element_times(other)

    def __rmul__(self, other: Any) -> Matrix:
        if isinstance(other, str):
            return NotImplemented
        return self.element_times(other)

    def __truediv__(self, other: Any) -> Matrix:
        return self.right_divide(other)

    def __rtruediv__(self, other: Any) -> Matrix:
        if isinstance(other, str):
            return NotImplemented
        return self.left_divide(other)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matrix_multiply(other)

    def __neg__(self) -> Matrix:
        return self.uminus()

    # ------------------------------------------------------------------
    # Dense algebra
    # ------------------------------------------------------------------

    def transpose(self) -> Matrix:
        """columns x rows matrix of the same kind."""
        return self._wrap(algebra.transpose(self._data), self._kind)

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def matrix_multiply(self, other: Matrix | ArrayLike) -> Matrix:
        """
        Linear algebraic product self @ other.

        Raises:
            DimensionError: If self.columns != other.rows
            NotNumericError: If a cell of either matrix is not numeric-like
        """
        if not isinstance(other, Matrix):
            other = Matrix(other)
        product = algebra.matrix_multiply(self.to_numpy(), other.to_numpy())
        return self._wrap(product, CellKind.NUMERIC)

    def norm1(self) -> float:
        return algebra.norm1(self.to_numpy())

    def norm2(self) -> float:
        return algebra.norm2(self.to_numpy())

    def norm_inf(self) -> float:
        return algebra.norm_inf(self.to_numpy())

    def norm_fro(self) -> float:
        return algebra.norm_fro(self.to_numpy())

    def trace(self) -> float:
        return algebra.trace(self.to_numpy())

    # ------------------------------------------------------------------
    # Decompositions
    # ------------------------------------------------------------------

    def lu(self) -> LUResult:
        return lu(self.to_numpy())

    def qr(self) -> QRResult:
        return qr(self.to_numpy())

    def chol(self) -> CholeskyResult:
        return cholesky(self.to_numpy())

    def svd(self) -> SVDResult:
        return svd(self.to_numpy())

    def eig(self) -> EigenResult:
        return eigen(self.to_numpy())

    # ------------------------------------------------------------------
    # Solvers
    # ------------------------------------------------------------------

    def solve(self, B: Matrix | ArrayLike) -> Matrix:
        """Solution of self @ X = B; least squares or minimum norm if not square."""
        X = algebra.solve(self.to_numpy(), _right_hand_side(B, column=True))
        return self._wrap(X, CellKind.NUMERIC)

    def solve_transpose(self, B: Matrix | ArrayLike) -> Matrix:
        """Solution of X @ self = B."""
        X = algebra.solve_transpose(self.to_numpy(), _right_hand_side(B, column=False))
        return self._wrap(X, CellKind.NUMERIC)

    def inverse(self) -> Matrix:
        return self._wrap(algebra.inverse(self.to_numpy()), CellKind.NUMERIC)

    def det(self) -> float:
        return algebra.det(self.to_numpy())

    def rank(self, tol: float | None = None) -> int:
        return algebra.rank(self.to_numpy(), tol)

    def cond(self) -> float:
        return algebra.cond(self.to_numpy())


def _right_hand_side(B: Matrix | ArrayLike, column: bool) -> NDArray[np.floating[Any]]:
    """Float64 2D right-hand side; a 1D input is a column (or a row)."""
    if isinstance(B, Matrix):
        return B.to_numpy()
    rhs = check_array(B, 'B')
    if rhs.ndim == 1:
        return rhs.reshape(-1, 1) if column else rhs.reshape(1, -1)
    return rhs
