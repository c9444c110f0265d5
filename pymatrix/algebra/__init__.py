"""
Dense linear algebra.

Public API:
    transpose, matrix_multiply, norm1, norm2, norm_inf, norm_fro, trace,
    identity, random
    solve, solve_transpose, inverse, det, rank, cond

Functions take and return float64 NumPy arrays; the Matrix container
converts its cells before calling them.
"""

from pymatrix.algebra.dense import (
    transpose,
    matrix_multiply,
    norm1,
    norm2,
    norm_inf,
    norm_fro,
    trace,
    identity,
    random,
)
from pymatrix.algebra.solvers import (
    solve,
    solve_transpose,
    inverse,
    det,
    rank,
    cond,
)

__all__ = [
    # Dense algebra
    "transpose",
    "matrix_multiply",
    "norm1",
    "norm2",
    "norm_inf",
    "norm_fro",
    "trace",
    "identity",
    "random",
    # Solvers
    "solve",
    "solve_transpose",
    "inverse",
    "det",
    "rank",
    "cond",
]
