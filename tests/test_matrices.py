"""
Tests for the free-function operators and matrix builders.
"""

import math

import numpy as np
import pytest

from pymatrix import CellKind, Matrix, matrices
from pymatrix.core.exceptions import DimensionError


class TestOperators:

    def test_delegates_to_methods(self):
        A = Matrix([[2, 4]])
        B = Matrix([[1, 2]])
        assert matrices.plus(A, B).tolist() == [[3.0, 6.0]]
        assert matrices.minus(A, B).tolist() == [[1.0, 2.0]]
        assert matrices.times(A, B).tolist() == [[2.0, 8.0]]
        assert matrices.right_divide(A, B).tolist() == [[2.0, 2.0]]
        assert matrices.left_divide(A, B).tolist() == [[0.5, 0.5]]

    def test_matrix_multiply(self):
        A = Matrix([[1, 2]])
        assert matrices.matrix_multiply(A, A.T).tolist() == [[5.0]]


class TestBuilders:

    def test_zeros_ones(self):
        assert matrices.zeros(1, 2).tolist() == [[0.0, 0.0]]
        assert matrices.ones(2, 1).tolist() == [[1.0], [1.0]]

    def test_nan(self):
        m = matrices.nan(2, 2)
        assert m.kind is CellKind.NUMERIC
        assert all(math.isnan(v) for row in m.tolist() for v in row)

    def test_identity_random(self):
        assert matrices.identity(2, 2).tolist() == [[1.0, 0.0], [0.0, 1.0]]
        assert matrices.random(2, 3, seed=0).shape == (2, 3)


class TestHasNan:

    def test_numeric_without_nan(self):
        assert not matrices.has_nan(Matrix([[1, 2]]))

    def test_float_nan(self):
        assert matrices.has_nan(Matrix([[1.0, float('nan')]]))

    def test_non_numeric_text(self):
        assert matrices.has_nan(Matrix([["1", "x"]]))

    def test_numeric_text(self):
        assert not matrices.has_nan(Matrix([["1", "2.5"]]))

    def test_nan_text(self):
        assert matrices.has_nan(Matrix([["1", "nan"]]))

    def test_inf_text_is_not_nan(self):
        assert not matrices.has_nan(Matrix([["inf", "-inf"]]))


class TestMerge:

    def test_vertical(self):
        result = matrices.vertical_merge(Matrix([[1, 2]]), Matrix([[3, 4], [5, 6]]))
        assert result.shape == (3, 2)
        assert result.kind is CellKind.NUMERIC
        assert result.tolist() == [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]

    def test_horizontal(self):
        result = matrices.horizontal_merge(Matrix([[1], [2]]), Matrix([[3, 4], [5, 6]]))
        assert result.tolist() == [[1.0, 3.0, 4.0], [2.0, 5.0, 6.0]]

    def test_mixed_kinds(self):
        result = matrices.vertical_merge(Matrix([["a", "b"]]), Matrix([[1, 2]]))
        assert result.kind is CellKind.MIXED
        assert result.tolist() == [["a", "b"], [1.0, 2.0]]

    def test_text_kinds(self):
        result = matrices.horizontal_merge(Matrix([["a"]]), Matrix([["b"]]))
        assert result.kind is CellKind.TEXT

    def test_vertical_mismatch(self):
        with pytest.raises(DimensionError, match="equal column counts"):
            matrices.vertical_merge(Matrix([[1, 2]]), Matrix([[1, 2, 3]]))

    def test_horizontal_mismatch(self):
        with pytest.raises(DimensionError, match="equal row counts"):
            matrices.horizontal_merge(Matrix([[1]]), Matrix([[1], [2]]))

    def test_empty(self):
        empty = Matrix.allocate(0, 2)
        assert matrices.vertical_merge(empty, empty).shape == (0, 2)

    def test_inputs_unchanged(self):
        A = Matrix([[1, 2]])
        result = matrices.vertical_merge(A, A)
        result[0, 0] = 9
        assert A[0, 0] == 1.0


class TestDiag:

    def test_main_diagonal(self):
        result = matrices.diag(Matrix([[1, 2, 3]]))
        np.testing.assert_array_equal(result.to_numpy(), np.diag([1.0, 2.0, 3.0]))

    def test_column_vector(self):
        result = matrices.diag(Matrix([[1], [2]]))
        assert result.tolist() == [[1.0, 0.0], [0.0, 2.0]]

    def test_positive_offset_below(self):
        result = matrices.diag(Matrix([[1, 2, 3]]), offset=1)
        assert result.tolist() == [
            [0.0, 0.0, 0.0],
            [1.0, 0.0, 0.0],
            [0.0, 2.0, 0.0],
        ]

    def test_negative_offset_above(self):
        result = matrices.diag(Matrix([[1, 2, 3]]), offset=-1)
        assert result.tolist() == [
            [0.0, 2.0, 0.0],
            [0.0, 0.0, 3.0],
            [0.0, 0.0, 0.0],
        ]

    def test_text_vector(self):
        result = matrices.diag(Matrix([["a", "b"]]))
        assert result.kind is CellKind.MIXED
        assert result.tolist() == [["a", 0], [0, "b"]]

    def test_not_a_vector(self):
        with pytest.raises(DimensionError, match="row or column vector"):
            matrices.diag(Matrix([[1, 2], [3, 4]]))
