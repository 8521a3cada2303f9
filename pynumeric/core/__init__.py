"""
Core infrastructure for pynumeric.

This module provides the shared error taxonomy, input validators and
numerical-precision configuration used by the complex and linalg
subpackages.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerance tiers and closeness predicates
"""

from pynumeric.core.exceptions import (
    PyNumericError,
    ValidationError,
    ParseError,
    DimensionError,
    IndexOutOfBoundsError,
    NumericalError,
    DivisionByZeroError,
)

__all__ = [
    "PyNumericError",
    "ValidationError",
    "ParseError",
    "DimensionError",
    "IndexOutOfBoundsError",
    "NumericalError",
    "DivisionByZeroError",
]
