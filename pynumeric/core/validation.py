"""
Input validation utilities for pynumeric.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion beyond widening to float/complex
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
from typing import Any

import numpy as np

from pynumeric.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    ValidationError,
)


def _is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a dimension is a non-negative integer.

    Args:
        value: Candidate dimension (row count, column count, length)
        name: Parameter name for error messages

    Returns:
        The dimension as a Python int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if not _is_integer(value):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_length(actual: int, expected: int, name: str) -> None:
    """
    Verify a sequence has exactly the expected number of elements.

    Args:
        actual: Observed length
        expected: Required length
        name: Parameter name for error messages

    Raises:
        DimensionError: If the lengths differ
    """
    if actual != expected:
        raise DimensionError(
            f"{name}: expected {expected} elements, got {actual}",
            expected=expected,
            actual=actual,
        )


def check_same_shape(
    left: tuple[int, ...],
    right: tuple[int, ...],
    operation: str
) -> None:
    """
    Verify two operands have identical shapes.

    Args:
        left: Shape of the left operand
        right: Shape of the right operand
        operation: Operation name for error messages (e.g. 'addition')

    Raises:
        DimensionError: If the shapes differ
    """
    if tuple(left) != tuple(right):
        raise DimensionError(
            f"{operation}: operand shapes differ, {_fmt_shape(left)} vs {_fmt_shape(right)}",
            expected=tuple(left),
            actual=tuple(right),
        )


def check_index(index: Any, bound: int, name: str) -> int:
    """
    Verify an index lies in [0, bound).

    Negative indices are rejected rather than wrapped.

    Args:
        index: Candidate index
        bound: Exclusive upper bound
        name: Parameter name for error messages

    Returns:
        The index as a Python int

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfBoundsError: If index is outside [0, bound)
    """
    if not _is_integer(index):
        raise ValidationError(
            f"{name}: index must be an integer, got {type(index).__name__} {index!r}"
        )
    if not 0 <= index < bound:
        raise IndexOutOfBoundsError(
            f"{name}: index {index} out of bounds for size {bound}",
            index=int(index),
            bound=bound,
        )
    return int(index)


def is_scalar(value: Any) -> bool:
    """Whether value is a real or complex scalar (never an array)."""
    if isinstance(value, (np.ndarray, str, bytes)):
        return False
    return isinstance(value, numbers.Complex) or hasattr(value, '__complex__')


def check_scalar(value: Any, name: str) -> float | complex:
    """
    Validate and widen a scalar operand.

    Accepts Python and NumPy real or complex numbers, and any object that
    implements __complex__ (such as pynumeric.Complex).

    Args:
        value: Candidate scalar
        name: Parameter name for error messages

    Returns:
        float for real inputs, complex otherwise

    Raises:
        ValidationError: If value is not a number
    """
    if not is_scalar(value):
        raise ValidationError(
            f"{name}: expected a real or complex scalar, got {type(value).__name__}"
        )
    if isinstance(value, numbers.Real):
        return float(value)
    return complex(value)


def _fmt_shape(shape: tuple[int, ...]) -> str:
    return "x".join(str(s) for s in shape) or "()"
