"""
Tolerance tiers for numerical validation.

Defines precision expectations for the float64 kernels:
- well-conditioned problems: near machine precision
- ill-conditioned problems (cond > 1e4): relaxed

The tiers, ILL_CONDITIONED_THRESHOLD and select_tolerance() are test
support: the test suite compares kernel output against references with
them, and they are exported so downstream code can check results the same
way. The library itself reads only NEAR_SINGULAR_RCOND (the LU solver's
near-singularity warning).
"""

from dataclasses import dataclass

from pymatrix.core.compute.precision import EPSILON_64


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Well-conditioned float64 problems
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, well-conditioned',
)

# Ill-conditioned float64 problems (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)

# Condition number above which a problem is treated as ill-conditioned
ILL_CONDITIONED_THRESHOLD = 1e4

# LU pivot ratio min|U_ii| / max|U_ii| below which a solve warns that the
# matrix is close to singular. The result is still computed.
NEAR_SINGULAR_RCOND = EPSILON_64


def select_tolerance(condition_number: float | None = None) -> ToleranceTier:
    """Select the tolerance tier appropriate for a problem's conditioning."""
    if condition_number is not None and condition_number > ILL_CONDITIONED_THRESHOLD:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
