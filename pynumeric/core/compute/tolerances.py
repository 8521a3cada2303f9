"""
Tolerance tiers for numerical comparison.

Defines the precision expectations used throughout the library:
- DEFAULT: closeness checks on scalars, vectors and matrices
- UNITARY: absolute deviation allowed when checking A @ A^H == I

Every method that compares floating-point values takes its defaults from
here and accepts per-call overrides.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Named rtol/atol pair for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision closeness, a few hundred ulps of slack
DEFAULT = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='default',
    description='Double precision comparison for values of order one',
)

# Entries of A @ A^H may differ from the identity by at most atol in magnitude
UNITARY = ToleranceTier(
    rtol=0.0,
    atol=1e-10,
    name='unitary',
    description='Absolute elementwise deviation of A @ A^H from the identity',
)
