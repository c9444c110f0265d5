"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection, copying
    - check_ndim / check_2d: dimensionality checks
    - check_square, check_same_rows, check_inner_dimensions
    - check_nonnegative_size
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_inner_dimensions,
    check_ndim,
    check_nonnegative_size,
    check_same_rows,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "X")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted_to_float(self):
        arr = np.array([1, 2, 3], dtype=np.int32)
        result = check_array(arr, "X")
        assert result.dtype == np.float64

    def test_returns_copy(self):
        arr = np.array([[1.0, 2.0]])
        result = check_array(arr, "X")
        result[0, 0] = 99.0
        assert arr[0, 0] == 1.0

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "X")
        assert result.shape == (2, 2)

    def test_rejects_mixed_types(self):
        """Mixed types (None + numeric) produce object dtype."""
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "X")

    def test_rejects_homogeneous_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b", "c"], "X")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([True, False], "X")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j], "X")

    def test_empty_array(self):
        result = check_array([], "X")
        assert len(result) == 0

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a", "b"], "my_var")


# ═══════════════════════════════════════════════════════════════════════
# check_ndim / check_2d
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNdim:

    def test_2d_passes_ndim_2(self):
        check_ndim(np.array([[1.0, 2.0]]), 2, "X")

    def test_wrong_ndim_raises(self):
        with pytest.raises(DimensionError, match="expected 1D.*got 2D"):
            check_ndim(np.array([[1.0, 2.0]]), 1, "X")

    def test_error_includes_shape(self):
        with pytest.raises(DimensionError, match=r"shape \(3, 2\)"):
            check_ndim(np.ones((3, 2)), 1, "X")

    def test_check_2d_rejects_1d(self):
        with pytest.raises(DimensionError):
            check_2d(np.array([1.0, 2.0, 3.0]), "X")

    def test_check_2d_rejects_3d(self):
        with pytest.raises(DimensionError):
            check_2d(np.ones((2, 3, 4)), "X")

    def test_error_message_includes_name(self):
        with pytest.raises(DimensionError, match="my_matrix"):
            check_2d(np.array([1.0]), "my_matrix")


# ═══════════════════════════════════════════════════════════════════════
# Shape agreement checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSquare:

    def test_square_passes(self):
        check_square(np.ones((3, 3)), "A")

    def test_empty_square_passes(self):
        check_square(np.ones((0, 0)), "A")

    def test_rectangular_raises(self):
        with pytest.raises(DimensionError, match="must be square, got 2x3"):
            check_square(np.ones((2, 3)), "A")


class TestCheckSameRows:

    def test_same_rows_passes(self):
        check_same_rows(np.ones((3, 2)), np.ones((3, 5)), names=("A", "B"))

    def test_different_rows_raises(self):
        with pytest.raises(DimensionError, match="A has 3 rows, B has 2"):
            check_same_rows(np.ones((3, 2)), np.ones((2, 2)), names=("A", "B"))


class TestCheckInnerDimensions:

    def test_matching_passes(self):
        check_inner_dimensions(np.ones((2, 3)), np.ones((3, 4)), names=("A", "B"))

    def test_mismatch_raises(self):
        with pytest.raises(DimensionError, match="A is 2x3, B is 2x3"):
            check_inner_dimensions(np.ones((2, 3)), np.ones((2, 3)), names=("A", "B"))


class TestCheckNonnegativeSize:

    def test_zero_passes(self):
        check_nonnegative_size(0, 0)

    def test_numpy_integer_passes(self):
        check_nonnegative_size(np.int64(2), 3)

    def test_negative_raises(self):
        with pytest.raises(ValidationError, match="rows: must be >= 0, got -1"):
            check_nonnegative_size(-1, 2)

    def test_float_raises(self):
        with pytest.raises(ValidationError, match="columns: expected an integer"):
            check_nonnegative_size(2, 2.5)

    def test_bool_raises(self):
        with pytest.raises(ValidationError):
            check_nonnegative_size(True, 2)
