"""
Tolerance tiers for numerical comparison.

The QR and closed-form strategies compute the same degree-1 line along
different rounding paths. These tiers say how closely the two must agree:
- CPU FP64: well-conditioned data, both paths in double precision
- CPU FP64 ill-conditioned: data whose design matrix has a large
  condition number (e.g. x values clustered far from zero)

Each backend records the tier that applies to its fit as
Result.info['tolerance'].
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, QR and closed form agree to rounding',
)

CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned design matrix',
)

# Condition number of R above which a fit is reported as ill-conditioned.
# High-degree fits on wide x ranges (x^3 with x ~ 35) stay far below this.
ILL_CONDITIONED_THRESHOLD = 1e10


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Tier within which another CPU fit of the same data should agree."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
