"""
Numerical precision constants and utilities.

Provides machine epsilon, overflow-safe norms, and the tolerance rules
shared by the factorization kernels.
"""

import math

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Machine epsilon for float64
EPSILON_64: float = np.finfo(np.float64).eps  # ~2.22e-16

# Relative tolerance for treating a[i, j] and a[j, i] as equal
SYMMETRY_RTOL: float = 1e-12


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def hypot_norm(values: NDArray[np.floating[Any]]) -> float:
    """
    Euclidean norm of all entries without intermediate overflow.

    math.hypot scales its arguments internally, so entries near the float64
    limit do not overflow when squared.

    Args:
        values: Array of any shape

    Returns:
        sqrt(sum(values**2)) as a Python float
    """
    flat = np.asarray(values, dtype=np.float64).ravel()
    if flat.size == 0:
        return 0.0
    return math.hypot(*flat.tolist())


def rank_tolerance(
    shape: tuple[int, int],
    largest: float,
    dtype: np.dtype | type = np.float64
) -> float:
    """
    Threshold below which a singular value (or R diagonal) counts as zero.

    Uses max(m, n) * largest * eps, the LINPACK/LAPACK convention.

    Args:
        shape: (rows, columns) of the factored matrix
        largest: Largest singular value (or |R[0, 0]|)
        dtype: Floating dtype of the computation

    Returns:
        Absolute tolerance
    """
    return max(shape) * largest * machine_epsilon(dtype)


def is_symmetric(a: NDArray[np.floating[Any]], rtol: float = SYMMETRY_RTOL) -> bool:
    """
    Check whether a square array is symmetric up to a relative tolerance.

    Args:
        a: Square 2D array
        rtol: Relative tolerance, scaled by the largest absolute entry

    Returns:
        True if |a - a.T| <= rtol * max|a| everywhere
    """
    if a.shape[0] != a.shape[1]:
        return False
    if a.size == 0:
        return True
    scale = float(np.max(np.abs(a)))
    return bool(np.all(np.abs(a - a.T) <= rtol * scale))
