"""
Numerical precision utilities.

Provides the closeness predicates shared by Complex, ComplexVector and
Matrix. Values may be real or complex; distances are complex magnitudes.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumeric.core.compute.tolerances import DEFAULT


def is_close(
    a: complex | ArrayLike,
    b: complex | ArrayLike,
    rtol: float = DEFAULT.rtol,
    atol: float = DEFAULT.atol
) -> bool | NDArray[np.bool_]:
    """
    Check if values are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|

    NaN is never close to anything. Equal infinities are close.

    Args:
        a: First value(s)
        b: Second value(s), the reference for the relative term
        rtol: Relative tolerance
        atol: Absolute tolerance

    Returns:
        Boolean or boolean array indicating closeness
    """
    a_arr = np.asarray(a)
    b_arr = np.asarray(b)
    finite = np.isfinite(a_arr) & np.isfinite(b_arr)
    with np.errstate(invalid='ignore', over='ignore'):
        within = np.abs(a_arr - b_arr) <= atol + rtol * np.abs(b_arr)
    close = np.where(finite, within, a_arr == b_arr)
    if close.ndim == 0:
        return bool(close)
    return close


def all_close(
    a: ArrayLike,
    b: ArrayLike,
    rtol: float = DEFAULT.rtol,
    atol: float = DEFAULT.atol
) -> bool:
    """Check that every pair of corresponding elements is close."""
    return bool(np.all(is_close(a, b, rtol=rtol, atol=atol)))
