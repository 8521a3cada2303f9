"""
Matrix: an immutable, row-major matrix of real or complex elements.

The element type is a parameter, float or Complex. Real matrices are stored
as float64 and complex matrices as complex128 read-only NumPy arrays.
Mixing the two in arithmetic promotes the result to complex; conjugation is
the identity on real matrices.
"""

from __future__ import annotations

from typing import Any, Generic, Iterable, Sequence, TypeVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumeric.complex import Complex, ComplexVector
from pynumeric.core.compute.precision import all_close
from pynumeric.core.compute.tolerances import DEFAULT, UNITARY
from pynumeric.core.exceptions import DimensionError, ValidationError
from pynumeric.core.validation import (
    check_dimension,
    check_index,
    check_length,
    check_same_shape,
    check_scalar,
    is_scalar,
)

T = TypeVar('T', float, Complex)

_DTYPES = {float: np.float64, Complex: np.complex128}


class Matrix(Generic[T]):
    """
    Dense matrix over float or Complex with value semantics.

    Construction:
        Matrix(2, 2, [1, 2, 3, 4])                        # real, row-major
        Matrix(2, 2, [Complex(1, 2), 0, 0, 1])            # complex (inferred)
        Matrix.from_rows([[1, 2], [3, 4]])
        Matrix.identity(3, element_type=Complex)

    Operators:
        a + b, a - b, -a      elementwise, shapes must match
        a * s, s * a          scaling by a real or complex scalar
        a * b, a @ b          matrix product
        a * v, a @ v          product with a ComplexVector
    """

    __slots__ = ('_data',)

    # numpy scalars on the left defer to __rmul__ instead of iterating
    __array_ufunc__ = None

    def __init__(
        self,
        rows: int,
        cols: int,
        data: Iterable[Any],
        element_type: type | None = None
    ):
        n_rows = check_dimension(rows, "rows")
        n_cols = check_dimension(cols, "cols")
        values = [check_scalar(v, f"data[{i}]") for i, v in enumerate(data)]
        check_length(len(values), n_rows * n_cols, "data")

        etype = _resolve_element_type(element_type, values)
        if etype is float:
            flat = np.array([complex(v).real for v in values], dtype=np.float64)
        else:
            flat = np.array(values, dtype=np.complex128)
        self._data = _freeze(flat.reshape(n_rows, n_cols))

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def identity(cls, n: int, element_type: type = float) -> Matrix:
        """n x n identity: 1 on the diagonal, 0 elsewhere."""
        size = check_dimension(n, "n")
        return cls._wrap(np.eye(size, dtype=_dtype_for(element_type)))

    @classmethod
    def zeros(cls, rows: int, cols: int, element_type: type = float) -> Matrix:
        n_rows = check_dimension(rows, "rows")
        n_cols = check_dimension(cols, "cols")
        return cls._wrap(np.zeros((n_rows, n_cols), dtype=_dtype_for(element_type)))

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[Any]],
        element_type: type | None = None
    ) -> Matrix:
        """
        Build from a sequence of equal-length rows.

        Raises:
            DimensionError: If the rows are ragged
        """
        row_list = [list(r) for r in rows]
        n_cols = len(row_list[0]) if row_list else 0
        for i, r in enumerate(row_list):
            check_length(len(r), n_cols, f"rows[{i}]")
        flat = [v for r in row_list for v in r]
        return cls(len(row_list), n_cols, flat, element_type=element_type)

    @classmethod
    def from_array(cls, array: ArrayLike, element_type: type | None = None) -> Matrix:
        """
        Build from a 2-D array-like of real or complex numbers.

        The data is copied. The element type is complex when the input has a
        complex dtype, unless element_type says otherwise.
        """
        arr = np.asarray(array)
        if arr.dtype == object or not np.issubdtype(arr.dtype, np.number):
            raise ValidationError(
                f"array: non-numeric dtype {arr.dtype}, expected numeric data"
            )
        if arr.ndim != 2:
            raise DimensionError(
                f"array: expected 2D array, got {arr.ndim}D with shape {arr.shape}",
                expected=2,
                actual=arr.ndim,
            )
        if element_type is None:
            element_type = Complex if np.iscomplexobj(arr) else float
        dtype = _dtype_for(element_type)
        if dtype is np.float64 and np.iscomplexobj(arr):
            if np.any(arr.imag != 0):
                raise ValidationError(
                    "array: has nonzero imaginary parts but element_type is float"
                )
            arr = arr.real
        return cls._wrap(np.array(arr, dtype=dtype))

    @classmethod
    def _wrap(cls, data: NDArray) -> Matrix:
        """Adopt an array the caller no longer references. No validation."""
        matrix = cls.__new__(cls)
        matrix._data = _freeze(data)
        return matrix

    # ------------------------------------------------------------------
    # Shape and element access
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def element_type(self) -> type:
        """float or Complex."""
        return Complex if self.is_complex else float

    @property
    def is_complex(self) -> bool:
        return bool(np.iscomplexobj(self._data))

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def get(self, row: int, col: int) -> T:
        """
        Element at (row, col).

        Raises:
            IndexOutOfBoundsError: If row >= rows or col >= cols (or negative)
        """
        r = check_index(row, self.rows, "row")
        c = check_index(col, self.cols, "col")
        return self._element(self._data[r, c])

    def __getitem__(self, key: tuple[int, int]) -> T:
        if not isinstance(key, tuple) or len(key) != 2:
            raise ValidationError(f"key: expected a (row, col) pair, got {key!r}")
        return self.get(*key)

    def row(self, index: int) -> tuple[T, ...]:
        r = check_index(index, self.rows, "row")
        return tuple(self._element(v) for v in self._data[r])

    def with_element(self, row: int, col: int, value: Any) -> Matrix:
        """
        Copy of this matrix with one element replaced.

        A complex value with a nonzero imaginary part promotes a real
        matrix to complex.
        """
        r = check_index(row, self.rows, "row")
        c = check_index(col, self.cols, "col")
        v = check_scalar(value, "value")
        dtype = self._data.dtype
        if isinstance(v, complex) and v.imag != 0:
            dtype = np.complex128
        elif isinstance(v, complex):
            v = v.real
        data = self._data.astype(dtype, copy=True)
        data[r, c] = v
        return Matrix._wrap(data)

    def to_numpy(self) -> NDArray:
        """Writable copy of the underlying float64 or complex128 array."""
        return self._data.copy()

    def _element(self, value: Any) -> T:
        if self.is_complex:
            return Complex(value.real, value.imag)
        return float(value)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def add(self, other: Matrix) -> Matrix:
        """
        Elementwise sum.

        Raises:
            DimensionError: If the shapes differ
        """
        _check_matrix(other, "other")
        check_same_shape(self.shape, other.shape, "addition")
        return Matrix._wrap(self._data + other._data)

    def sub(self, other: Matrix) -> Matrix:
        _check_matrix(other, "other")
        check_same_shape(self.shape, other.shape, "subtraction")
        return Matrix._wrap(self._data - other._data)

    def __neg__(self) -> Matrix:
        return Matrix._wrap(-self._data)

    def __mul__(self, other: Any) -> Matrix | ComplexVector:
        if isinstance(other, (Matrix, ComplexVector)):
            return self @ other
        if is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        if is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other: Any) -> Matrix | ComplexVector:
        if isinstance(other, Matrix):
            return self.matmul(other)
        if isinstance(other, ComplexVector):
            return self.mul_vector(other)
        return NotImplemented

    def scale(self, scalar: Any) -> Matrix:
        """Multiply every element by a real or complex scalar."""
        s = check_scalar(scalar, "scalar")
        if isinstance(s, complex) and s.imag == 0:
            s = s.real
        return Matrix._wrap(self._data * s)

    def matmul(self, other: Matrix) -> Matrix:
        """
        Matrix product self @ other, of shape (self.rows, other.cols).

        Raises:
            DimensionError: If self.cols != other.rows
        """
        _check_matrix(other, "other")
        if self.cols != other.rows:
            raise DimensionError(
                f"matrix product: left operand has {self.cols} columns but right "
                f"operand has {other.rows} rows",
                expected=self.cols,
                actual=other.rows,
            )
        return Matrix._wrap(self._data @ other._data)

    def mul_vector(self, vector: ComplexVector) -> ComplexVector:
        """
        Matrix-vector product.

        Raises:
            DimensionError: If cols != len(vector)
        """
        if not isinstance(vector, ComplexVector):
            raise ValidationError(
                f"vector: expected ComplexVector, got {type(vector).__name__}"
            )
        if self.cols != len(vector):
            raise DimensionError(
                f"matrix-vector product: matrix has {self.cols} columns but vector "
                f"has {len(vector)} components",
                expected=self.cols,
                actual=len(vector),
            )
        return ComplexVector.from_array(self._data @ vector.to_numpy())

    # ------------------------------------------------------------------
    # Linear algebra
    # ------------------------------------------------------------------

    def transpose(self) -> Matrix:
        return Matrix._wrap(np.ascontiguousarray(self._data.T))

    def conjugate_transpose(self) -> Matrix:
        """cols x rows matrix with result[j, i] = conj(self[i, j])."""
        return Matrix._wrap(np.ascontiguousarray(self._data.conj().T))

    def is_unitary(self, atol: float = UNITARY.atol) -> bool:
        """
        Whether self @ self^H equals the identity within atol.

        Every entry of the product may deviate from the identity by at most
        atol in magnitude. Non-square matrices are never unitary; matrices
        containing NaN are not unitary. Never raises.
        """
        if not self.is_square:
            return False
        product = self._data @ self._data.conj().T
        deviation = np.abs(product - np.eye(self.rows))
        return bool(np.all(deviation <= atol))

    # ------------------------------------------------------------------
    # Comparison and display
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def is_close(
        self,
        other: Matrix,
        rtol: float = DEFAULT.rtol,
        atol: float = DEFAULT.atol
    ) -> bool:
        """Elementwise approximate equality. Matrices of different shape are never close."""
        _check_matrix(other, "other")
        if self.shape != other.shape:
            return False
        return all_close(self._data, other._data, rtol=rtol, atol=atol)

    def __str__(self) -> str:
        lines = [f"Matrix({self.rows}x{self.cols})"]
        for r in range(self.rows):
            lines.append(" ".join(str(Complex(v.real, v.imag)) for v in self._data[r]))
        return "\n".join(lines)

    def __repr__(self) -> str:
        elements = [self._element(v) for v in self._data.ravel()]
        name = self.element_type.__name__
        return f"Matrix({self.rows}, {self.cols}, {elements!r}, element_type={name})"


def _check_matrix(value: Any, name: str) -> None:
    if not isinstance(value, Matrix):
        raise ValidationError(f"{name}: expected Matrix, got {type(value).__name__}")


def _dtype_for(element_type: Any) -> type:
    if element_type not in _DTYPES:
        raise ValidationError(
            f"element_type: must be float or Complex, got {element_type!r}"
        )
    return _DTYPES[element_type]


def _resolve_element_type(element_type: Any, values: list[float | complex]) -> type:
    has_complex = any(isinstance(v, complex) and v.imag != 0 for v in values)
    if element_type is None:
        return Complex if any(isinstance(v, complex) for v in values) else float
    _dtype_for(element_type)
    if element_type is float and has_complex:
        raise ValidationError(
            "data: has nonzero imaginary parts but element_type is float"
        )
    return element_type


def _freeze(data: NDArray) -> NDArray:
    data.flags.writeable = False
    return data
