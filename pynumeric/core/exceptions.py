"""
Exception hierarchy for pynumeric.

All exceptions inherit from PyNumericError to allow catching any
library-specific error. Errors that have a natural builtin counterpart
(IndexError, ZeroDivisionError, ValueError) also inherit from it, so code
written against plain Python containers and numbers keeps working.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyNumericError(Exception):
    """Base exception for all pynumeric errors."""
    pass


class ValidationError(PyNumericError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class ParseError(ValidationError, ValueError):
    """
    Text could not be parsed as a complex number.

    Attributes:
        text: The input that failed to parse
        position: Character offset where parsing stopped, if known
    """

    def __init__(
        self,
        message: str,
        text: str | None = None,
        position: int | None = None
    ):
        super().__init__(message)
        self.text = text
        self.position = position


class DimensionError(ValidationError):
    """
    Operand lengths or shapes are incompatible.

    Raised when two vectors of different length are combined, when matrix
    shapes don't agree for the requested operation, or when the data supplied
    to a constructor doesn't match the declared dimensions.

    Attributes:
        expected: Expected length or shape, if known
        actual: Actual length or shape, if known
    """

    def __init__(
        self,
        message: str,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    Element access outside the valid range.

    Attributes:
        index: The offending index
        bound: Exclusive upper bound of the valid range
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound


class NumericalError(PyNumericError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DivisionByZeroError(NumericalError, ZeroDivisionError):
    """
    Division by an exact zero.

    Raised when dividing by the zero complex number, scaling by the
    reciprocal of zero, or normalizing a zero vector.

    Attributes:
        operation: Name of the operation that attempted the division
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation
