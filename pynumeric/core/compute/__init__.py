"""
Shared numeric infrastructure for pynumeric.

Submodules:
    tolerances: Tolerance tiers (library-wide numerical configuration)
    precision: Closeness predicates for real and complex values
"""

from pynumeric.core.compute.tolerances import ToleranceTier, DEFAULT, UNITARY
from pynumeric.core.compute.precision import is_close, all_close

__all__ = [
    # Tolerances
    "ToleranceTier",
    "DEFAULT",
    "UNITARY",
    # Precision
    "is_close",
    "all_close",
]
