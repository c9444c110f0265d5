"""
Shared compute infrastructure for PyMatrix.

Submodules:
    precision: Machine epsilon, overflow-safe norms, rank tolerance
    tolerances: Tolerance tiers and the near-singularity threshold
    linalg: Factorization kernels (LU, QR, Cholesky, SVD, eigen)
"""

from pymatrix.core.compute.precision import (
    EPSILON_64,
    hypot_norm,
    machine_epsilon,
    rank_tolerance,
)
from pymatrix.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    select_tolerance,
)

__all__ = [
    # Precision
    "EPSILON_64",
    "hypot_norm",
    "machine_epsilon",
    "rank_tolerance",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
    "select_tolerance",
]
