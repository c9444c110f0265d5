"""
Tests for Householder QR decomposition.

Validates:
    - A = Q @ R, Q orthonormal, R upper triangular
    - least squares solve against numpy.linalg.lstsq
    - minimum-norm solve of the transposed system
    - rank detection and rank-deficient errors
"""

import numpy as np
import pytest

from pymatrix.core.compute.linalg import qr
from pymatrix.core.compute.tolerances import CPU_FP64
from pymatrix.core.exceptions import DimensionError, SingularMatrixError


class TestFactorization:

    def test_reconstructs(self, rng):
        A = rng.standard_normal((8, 4))
        result = qr(A)
        np.testing.assert_allclose(result.Q @ result.R, A, rtol=CPU_FP64.rtol, atol=CPU_FP64.atol)

    def test_q_orthonormal(self, rng):
        A = rng.standard_normal((8, 4))
        Q = qr(A).Q
        np.testing.assert_allclose(Q.T @ Q, np.eye(4), atol=CPU_FP64.atol)

    def test_r_upper_triangular(self, rng):
        R = qr(rng.standard_normal((6, 3))).R
        np.testing.assert_array_equal(R, np.triu(R))

    def test_r_diagonal_matches_numpy_up_to_sign(self, rng):
        A = rng.standard_normal((6, 3))
        expected = np.abs(np.diag(np.linalg.qr(A)[1]))
        np.testing.assert_allclose(np.abs(qr(A).R_diagonal), expected, rtol=1e-10)

    def test_householder_vectors(self, rng):
        result = qr(rng.standard_normal((5, 3)))
        np.testing.assert_array_equal(result.H, np.tril(result.H))

    def test_square(self, nonsingular_square):
        result = qr(nonsingular_square)
        np.testing.assert_allclose(result.Q @ result.R, nonsingular_square, atol=1e-12)

    def test_wide_rejected(self):
        with pytest.raises(DimensionError, match="rows >= columns"):
            qr(np.ones((2, 3)))

    def test_apply_qt(self, rng):
        A = rng.standard_normal((6, 3))
        B = rng.standard_normal((6, 2))
        result = qr(A)
        np.testing.assert_allclose(result.apply_qt(B)[:3], result.Q.T @ B, atol=1e-12)


class TestRank:

    def test_full_rank(self, tall_system):
        A, _, _ = tall_system
        result = qr(A)
        assert result.is_full_rank
        assert result.rank == 3

    def test_zero_column(self):
        A = np.array([[1.0, 0.0], [2.0, 0.0], [3.0, 0.0]])
        result = qr(A)
        assert not result.is_full_rank
        assert result.rank == 1

    def test_empty(self):
        assert qr(np.zeros((3, 0))).rank == 0


class TestSolve:

    def test_least_squares(self, tall_system):
        A, b, x_true = tall_system
        X = qr(A).solve(b.reshape(-1, 1))
        expected = np.linalg.lstsq(A, b, rcond=None)[0]
        np.testing.assert_allclose(X.ravel(), expected, rtol=CPU_FP64.rtol, atol=CPU_FP64.atol)
        np.testing.assert_allclose(X.ravel(), x_true, atol=0.05)

    def test_exact_square_solution(self, nonsingular_square, rng):
        B = rng.standard_normal((5, 3))
        X = qr(nonsingular_square).solve(B)
        np.testing.assert_allclose(nonsingular_square @ X, B, atol=1e-10)

    def test_rank_deficient_raises(self):
        A = np.array([[1.0, 0.0], [2.0, 0.0], [3.0, 0.0]])
        with pytest.raises(SingularMatrixError, match="rank deficient") as exc_info:
            qr(A).solve(np.ones((3, 1)))
        assert exc_info.value.rank == 1
        assert exc_info.value.expected_rank == 2

    def test_row_mismatch(self, tall_system):
        A, _, _ = tall_system
        with pytest.raises(DimensionError, match="Row dimensions must agree"):
            qr(A).solve(np.ones((3, 1)))


class TestSolveTranspose:

    def test_minimum_norm(self, rng):
        # qr of A' (5x2) solves the wide system A @ x = b
        A = rng.standard_normal((2, 5))
        b = rng.standard_normal((2, 1))
        x = qr(A.T).solve_transpose(b)
        np.testing.assert_allclose(A @ x, b, atol=1e-12)
        np.testing.assert_allclose(x, np.linalg.pinv(A) @ b, atol=1e-12)

    def test_row_mismatch(self, rng):
        result = qr(rng.standard_normal((5, 2)))
        with pytest.raises(DimensionError):
            result.solve_transpose(np.ones((5, 1)))
