"""
Tolerance tiers for matrix classification.

Predicates (symmetric, diagonal, triangular, singular) compare floating
point values. Two tiers exist:

- EXACT: bitwise comparison against zero / the mirrored entry
- DEFAULT: machine-precision slack for results of prior arithmetic

Predicates default to EXACT; callers pass ``strict=False`` for DEFAULT.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str

    def close(self, a, b) -> bool:
        """Whether two arrays are equal within this tier."""
        if self.rtol == 0.0 and self.atol == 0.0:
            return bool(np.all(np.equal(a, b)))
        return bool(np.allclose(a, b, rtol=self.rtol, atol=self.atol))


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact comparison',
)

DEFAULT = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='default',
    description='Double precision, machine-level slack',
)


def select_tolerance(strict: bool = True) -> ToleranceTier:
    """Select the tolerance tier for a predicate."""
    if strict:
        return EXACT
    return DEFAULT


def rank_tolerance(singular_values, shape: tuple[int, int]) -> float:
    """
    Threshold below which a singular value counts as zero.

    Same rule as numpy.linalg.matrix_rank: max(shape) * eps * s_max.
    """
    if len(singular_values) == 0:
        return 0.0
    return max(shape) * np.finfo(np.float64).eps * float(np.max(singular_values))
