"""
Tolerance tiers for approximate matrix comparison.

Defines precision expectations used by Matrix.allclose():
- EXACT: bitwise-equal values only
- FP64: double precision round-off allowed (default)

Used by the test suite and by callers comparing computed matrices.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='No tolerance, values must be identical',
)

FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, allows accumulated round-off',
)


def select_tolerance(exact: bool = False) -> ToleranceTier:
    """Select the tolerance tier for a comparison."""
    if exact:
        return EXACT
    return FP64
