"""
ComplexVector: an immutable, fixed-length sequence of Complex values.

Elements are stored in a read-only complex128 NumPy array. Every operation
returns a new vector; indexing and iteration yield Complex scalars.
"""

from __future__ import annotations

import warnings
from typing import Any, Iterable, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumeric.complex.number import Complex
from pynumeric.core.compute.precision import all_close
from pynumeric.core.compute.tolerances import DEFAULT
from pynumeric.core.exceptions import (
    DimensionError,
    DivisionByZeroError,
    NumericalError,
    ValidationError,
)
from pynumeric.core.validation import (
    check_dimension,
    check_index,
    check_same_shape,
    check_scalar,
    is_scalar,
)


class ComplexVector:
    """
    Vector of complex numbers with value semantics.

    Construction:
        ComplexVector([Complex(1, 2), Complex(3, 4)])
        ComplexVector([1, 2j, 3 + 4j])
        ComplexVector.zeros(3)
        ComplexVector.from_array(np.array([1 + 2j, 3 - 1j]))

    Arithmetic between vectors requires equal lengths and raises
    DimensionError otherwise.
    """

    __slots__ = ('_data',)

    # numpy scalars on the left defer to __rmul__ instead of iterating
    __array_ufunc__ = None

    def __init__(self, elements: Iterable[Any]):
        values = [
            complex(check_scalar(e, f"elements[{i}]")) for i, e in enumerate(elements)
        ]
        self._data = _freeze(np.array(values, dtype=np.complex128).reshape(len(values)))

    @classmethod
    def zeros(cls, dimension: int) -> ComplexVector:
        n = check_dimension(dimension, "dimension")
        return cls._wrap(np.zeros(n, dtype=np.complex128))

    @classmethod
    def from_array(cls, array: ArrayLike) -> ComplexVector:
        """
        Build from a 1-D array-like of real or complex numbers.

        The data is copied; later changes to the input don't affect the vector.
        """
        arr = np.asarray(array)
        if arr.dtype == object or not np.issubdtype(arr.dtype, np.number):
            raise ValidationError(
                f"array: non-numeric dtype {arr.dtype}, expected numeric data"
            )
        if arr.ndim != 1:
            raise DimensionError(
                f"array: expected 1D array, got {arr.ndim}D with shape {arr.shape}",
                expected=1,
                actual=arr.ndim,
            )
        return cls._wrap(np.array(arr, dtype=np.complex128))

    @classmethod
    def _wrap(cls, data: NDArray[np.complexfloating]) -> ComplexVector:
        """Adopt an array the caller no longer references. No validation."""
        vector = cls.__new__(cls)
        vector._data = _freeze(data)
        return vector

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    @property
    def dimension(self) -> int:
        return self._data.shape[0]

    @property
    def components(self) -> tuple[Complex, ...]:
        return tuple(self)

    def __len__(self) -> int:
        return self.dimension

    def __getitem__(self, index: int) -> Complex:
        i = check_index(index, self.dimension, "index")
        z = self._data[i]
        return Complex(z.real, z.imag)

    def __iter__(self) -> Iterator[Complex]:
        for z in self._data:
            yield Complex(z.real, z.imag)

    def to_numpy(self) -> NDArray[np.complexfloating]:
        """Writable copy of the underlying complex128 array."""
        return self._data.copy()

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: Any) -> ComplexVector:
        if not isinstance(other, ComplexVector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> ComplexVector:
        if not isinstance(other, ComplexVector):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> ComplexVector:
        return ComplexVector._wrap(-self._data)

    def __mul__(self, scalar: Any) -> ComplexVector:
        if not is_scalar(scalar):
            return NotImplemented
        return self.scale(scalar)

    __rmul__ = __mul__

    def add(self, other: ComplexVector) -> ComplexVector:
        """
        Elementwise sum.

        Raises:
            DimensionError: If the vectors differ in length
        """
        _check_vector(other, "other")
        check_same_shape(self._data.shape, other._data.shape, "addition")
        return ComplexVector._wrap(self._data + other._data)

    def sub(self, other: ComplexVector) -> ComplexVector:
        _check_vector(other, "other")
        check_same_shape(self._data.shape, other._data.shape, "subtraction")
        return ComplexVector._wrap(self._data - other._data)

    def scale(self, scalar: Any) -> ComplexVector:
        """Multiply every component by a real or complex scalar."""
        return ComplexVector._wrap(self._data * check_scalar(scalar, "scalar"))

    def __truediv__(self, scalar: Any) -> ComplexVector:
        if not is_scalar(scalar):
            return NotImplemented
        s = check_scalar(scalar, "scalar")
        if s == 0:
            raise DivisionByZeroError("cannot divide a vector by zero", operation='division')
        return ComplexVector._wrap(self._data / s)

    def inner_product(self, other: ComplexVector) -> Complex:
        """
        Conjugate-linear inner product: sum of self[i] * conj(other[i]).

        Raises:
            DimensionError: If the vectors differ in length
        """
        _check_vector(other, "other")
        check_same_shape(self._data.shape, other._data.shape, "inner product")
        # vdot conjugates its first argument
        z = np.vdot(other._data, self._data)
        return Complex(z.real, z.imag)

    # ------------------------------------------------------------------
    # Norms
    # ------------------------------------------------------------------

    def norm(self) -> float:
        """Euclidean norm, sqrt(sum |v[i]|^2)."""
        return float(np.linalg.norm(self._data))

    def norm_squared(self) -> float:
        return float(np.vdot(self._data, self._data).real)

    def is_zero(self) -> bool:
        return bool(np.all(self._data == 0))

    def normalize(self) -> ComplexVector:
        """
        Scale to unit norm.

        When the norm itself under- or overflows float64 although the
        components are finite and nonzero, the vector is first rescaled by
        its largest real or imaginary part and a RuntimeWarning is emitted.

        Raises:
            DivisionByZeroError: If every component is zero
            NumericalError: If any component is NaN or infinite
        """
        if self.is_zero():
            raise DivisionByZeroError("Cannot normalize a zero vector", operation='normalize')
        if not np.all(np.isfinite(self._data)):
            raise NumericalError("Cannot normalize a vector with non-finite components")

        data = self._data
        norm = np.linalg.norm(data)
        if norm == 0.0 or not np.isfinite(norm):
            warnings.warn(
                f"Vector norm is outside float64 range ({norm}); rescaling by the "
                f"largest real or imaginary part before normalizing",
                RuntimeWarning,
                stacklevel=2,
            )
            # |re + im*i| can overflow where |re| and |im| do not
            data = data / np.max(np.maximum(np.abs(data.real), np.abs(data.imag)))
            norm = np.linalg.norm(data)
        return ComplexVector._wrap(data / norm)

    # ------------------------------------------------------------------
    # Comparison and display
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComplexVector):
            return NotImplemented
        return bool(
            self._data.shape == other._data.shape
            and np.array_equal(self._data, other._data)
        )

    __hash__ = None

    def is_close(
        self,
        other: ComplexVector,
        rtol: float = DEFAULT.rtol,
        atol: float = DEFAULT.atol
    ) -> bool:
        """Elementwise approximate equality. Vectors of different length are never close."""
        _check_vector(other, "other")
        if self._data.shape != other._data.shape:
            return False
        return all_close(self._data, other._data, rtol=rtol, atol=atol)

    def __str__(self) -> str:
        return "[" + ", ".join(str(c) for c in self) + "]"

    def __repr__(self) -> str:
        return f"ComplexVector({self})"


def _check_vector(value: Any, name: str) -> None:
    if not isinstance(value, ComplexVector):
        raise ValidationError(
            f"{name}: expected ComplexVector, got {type(value).__name__}"
        )


def _freeze(data: NDArray) -> NDArray:
    data.flags.writeable = False
    return data
