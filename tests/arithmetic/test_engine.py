"""
Tests for the broadcasting arithmetic engine.

Validates:
    - scalar, text and matrix operands and the kind of each result
    - row-vector / column-vector expansion
    - operands are never modified
    - errors: text with non-plus operators, uncoercible cells, bad shapes
"""

import numpy as np
import pytest

from pymatrix.arithmetic.coercion import MatrixOperand, Operator, Scalar, Text
from pymatrix.arithmetic.engine import apply, concatenate, negate
from pymatrix.core.cells import CellKind
from pymatrix.core.exceptions import NotNumericError, ShapeMismatchError, TypeMismatchError


@pytest.fixture
def numeric():
    return np.array([[1.0, 2.0], [3.0, 4.0]])


# ═══════════════════════════════════════════════════════════════════════
# Scalar operands
# ═══════════════════════════════════════════════════════════════════════


class TestScalarOperand:

    def test_plus(self, numeric):
        data, kind = apply(Operator.PLUS, numeric, CellKind.NUMERIC, Scalar(10.0))
        np.testing.assert_array_equal(data, [[11.0, 12.0], [13.0, 14.0]])
        assert kind is CellKind.NUMERIC

    def test_plus_then_minus_round_trips(self, rng):
        A = rng.standard_normal((3, 4))
        shifted, _ = apply(Operator.PLUS, A, CellKind.NUMERIC, Scalar(0.37))
        back, _ = apply(Operator.MINUS, shifted, CellKind.NUMERIC, Scalar(0.37))
        np.testing.assert_allclose(back, A, rtol=1e-12, atol=1e-15)

    def test_operand_not_modified(self, numeric):
        before = numeric.copy()
        apply(Operator.TIMES, numeric, CellKind.NUMERIC, Scalar(2.0))
        np.testing.assert_array_equal(numeric, before)

    def test_text_cells_coerced(self):
        cells = np.array([["1", "2"]], dtype=object)
        data, kind = apply(Operator.TIMES, cells, CellKind.TEXT, Scalar(3.0))
        np.testing.assert_array_equal(data, [[3.0, 6.0]])
        assert kind is CellKind.NUMERIC

    def test_uncoercible_cell(self):
        cells = np.array([["1", "abc"]], dtype=object)
        with pytest.raises(NotNumericError, match="'abc'"):
            apply(Operator.PLUS, cells, CellKind.TEXT, Scalar(1.0))

    def test_right_divide_by_zero(self, numeric):
        data, _ = apply(Operator.RIGHT_DIVIDE, numeric, CellKind.NUMERIC, Scalar(0.0))
        assert np.all(np.isinf(data))


# ═══════════════════════════════════════════════════════════════════════
# Text operands
# ═══════════════════════════════════════════════════════════════════════


class TestTextOperand:

    def test_concatenates(self):
        cells = np.array([["a", None]], dtype=object)
        data, kind = apply(Operator.PLUS, cells, CellKind.MIXED, Text("!"))
        assert data.tolist() == [["a!", "!"]]
        assert kind is CellKind.TEXT

    def test_numeric_cells_stringified(self):
        data, _ = apply(Operator.PLUS, np.array([[1.5]]), CellKind.NUMERIC, Text("x"))
        assert data.tolist() == [["1.5x"]]

    @pytest.mark.parametrize("operator", [
        Operator.MINUS, Operator.TIMES, Operator.RIGHT_DIVIDE, Operator.LEFT_DIVIDE,
    ])
    def test_non_plus_rejected(self, numeric, operator):
        with pytest.raises(TypeMismatchError, match="text operand"):
            apply(operator, numeric, CellKind.NUMERIC, Text("x"))

    def test_concatenate_helper(self):
        assert concatenate(np.array([[2.0]]), "m").tolist() == [["2.0m"]]


# ═══════════════════════════════════════════════════════════════════════
# Matrix operands
# ═══════════════════════════════════════════════════════════════════════


class TestMatrixOperand:

    def test_equal_shapes(self, numeric):
        operand = MatrixOperand(numeric, CellKind.NUMERIC)
        data, kind = apply(Operator.TIMES, numeric, CellKind.NUMERIC, operand)
        np.testing.assert_array_equal(data.astype(float), numeric ** 2)
        assert kind is CellKind.MIXED
        assert data.dtype == object
        assert all(type(v) is float for v in data.ravel().tolist())

    def test_row_plus_column(self):
        row = np.array([[1.0, 2.0, 3.0]])
        column = MatrixOperand(np.array([[10.0], [20.0]]), CellKind.NUMERIC)
        data, _ = apply(Operator.PLUS, row, CellKind.NUMERIC, column)
        assert data.shape == (2, 3)
        for i in range(2):
            for j in range(3):
                assert data[i, j] == row[0, j] + column.data[i, 0]

    def test_result_is_writable_fresh_array(self, numeric):
        operand = MatrixOperand(np.array([[1.0]]), CellKind.NUMERIC)
        data, _ = apply(Operator.PLUS, numeric, CellKind.NUMERIC, operand)
        assert data.flags.writeable
        assert not np.shares_memory(data, numeric)

    def test_left_divide(self, numeric):
        operand = MatrixOperand(np.array([[2.0, 4.0], [6.0, 8.0]]), CellKind.NUMERIC)
        data, _ = apply(Operator.LEFT_DIVIDE, numeric, CellKind.NUMERIC, operand)
        np.testing.assert_array_equal(data, [[2.0, 2.0], [2.0, 2.0]])

    def test_non_numeric_operand_gives_mixed(self, numeric):
        operand = MatrixOperand(np.array([["1", "2"]], dtype=object), CellKind.TEXT)
        data, kind = apply(Operator.PLUS, numeric, CellKind.NUMERIC, operand)
        assert kind is CellKind.MIXED
        assert data.dtype == object
        assert data.tolist() == [[2.0, 4.0], [4.0, 6.0]]

    def test_shape_mismatch(self, numeric):
        operand = MatrixOperand(np.ones((3, 3)), CellKind.NUMERIC)
        with pytest.raises(ShapeMismatchError):
            apply(Operator.PLUS, numeric, CellKind.NUMERIC, operand)

    def test_unknown_operand(self, numeric):
        with pytest.raises(TypeMismatchError):
            apply(Operator.PLUS, numeric, CellKind.NUMERIC, object())


class TestNegate:

    def test_numeric(self, numeric):
        np.testing.assert_array_equal(negate(numeric, CellKind.NUMERIC), -numeric)

    def test_text_numbers(self):
        cells = np.array([["2", None]], dtype=object)
        np.testing.assert_array_equal(negate(cells, CellKind.MIXED), [[-2.0, 0.0]])
