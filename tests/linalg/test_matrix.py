"""
Tests for Matrix over float and Complex.

Validates:
    - Construction, factories and element access
    - Elementwise arithmetic, scaling, matrix and matrix-vector products
    - Conjugate transpose and the unitarity predicate
    - DimensionError / IndexOutOfBoundsError / ValidationError paths
"""

import math

import numpy as np
import pytest

from pynumeric import Complex, ComplexVector, Matrix
from pynumeric.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    ValidationError,
)


@pytest.fixture
def a():
    return Matrix(2, 2, [1, 2, 3, 4])


@pytest.fixture
def b():
    return Matrix(2, 2, [5, 6, 7, 8])


@pytest.fixture
def c():
    return Matrix(2, 2, [
        Complex(1.0, 2.0), Complex(3.0, 4.0),
        Complex(5.0, 6.0), Complex(7.0, 8.0),
    ])


def rotation(theta):
    return Matrix.from_rows([
        [math.cos(theta), -math.sin(theta)],
        [math.sin(theta), math.cos(theta)],
    ])


# ═══════════════════════════════════════════════════════════════════════
# Construction and access
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:
    """Constructors validate dimensions and infer the element type."""

    def test_real_matrix(self, a):
        assert a.rows == 2
        assert a.cols == 2
        assert a.shape == (2, 2)
        assert a.element_type is float
        assert not a.is_complex

    def test_row_major_layout(self):
        m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
        assert m.get(0, 2) == 3.0
        assert m.get(1, 0) == 4.0

    def test_complex_inferred(self, c):
        assert c.element_type is Complex
        assert c.get(0, 0) == Complex(1.0, 2.0)
        assert c.get(1, 1) == Complex(7.0, 8.0)

    def test_complex_with_zero_imaginary_parts(self):
        m = Matrix(1, 2, [Complex(1.0, 0.0), 2.0])
        assert m.element_type is Complex
        assert m.get(0, 1) == Complex(2.0, 0.0)

    def test_explicit_complex_from_reals(self):
        m = Matrix(1, 2, [1, 2], element_type=Complex)
        assert m.is_complex
        assert isinstance(m.get(0, 0), Complex)

    def test_explicit_float_rejects_complex(self):
        with pytest.raises(ValidationError, match="nonzero imaginary"):
            Matrix(1, 1, [Complex(0.0, 1.0)], element_type=float)

    def test_explicit_float_accepts_real_complex(self):
        m = Matrix(1, 1, [Complex(2.0, 0.0)], element_type=float)
        assert m.get(0, 0) == 2.0
        assert isinstance(m.get(0, 0), float)

    def test_unknown_element_type(self):
        with pytest.raises(ValidationError, match="element_type"):
            Matrix(1, 1, [1], element_type=int)

    def test_length_mismatch(self):
        with pytest.raises(DimensionError, match="data: expected 4 elements, got 3"):
            Matrix(2, 2, [1, 2, 3])

    def test_negative_dimension(self):
        with pytest.raises(ValidationError, match="rows"):
            Matrix(-1, 2, [])

    def test_non_numeric_element(self):
        with pytest.raises(ValidationError, match=r"data\[2\]"):
            Matrix(1, 3, [1, 2, "3"])

    def test_empty(self):
        m = Matrix(0, 3, [])
        assert m.shape == (0, 3)


class TestFactories:
    """identity, zeros, from_rows, from_array."""

    def test_identity_real(self):
        identity = Matrix.identity(3)
        assert identity.element_type is float
        for i in range(3):
            for j in range(3):
                assert identity.get(i, j) == (1.0 if i == j else 0.0)

    def test_identity_complex(self):
        identity = Matrix.identity(3, element_type=Complex)
        assert identity.get(0, 0) == Complex(1.0, 0.0)
        assert identity.get(1, 1) == Complex(1.0, 0.0)
        assert identity.get(2, 2) == Complex(1.0, 0.0)
        assert identity.get(0, 1) == Complex(0.0, 0.0)

    def test_zeros(self):
        z = Matrix.zeros(2, 3)
        assert z.shape == (2, 3)
        assert z == Matrix(2, 3, [0] * 6)

    def test_from_rows(self, a):
        assert Matrix.from_rows([[1, 2], [3, 4]]) == a

    def test_from_rows_ragged(self):
        with pytest.raises(DimensionError, match=r"rows\[1\]"):
            Matrix.from_rows([[1, 2], [3]])

    def test_from_rows_empty(self):
        assert Matrix.from_rows([]).shape == (0, 0)

    def test_from_array(self, rng):
        arr = rng.standard_normal((3, 4))
        m = Matrix.from_array(arr)
        np.testing.assert_array_equal(m.to_numpy(), arr)
        arr[0, 0] = 99.0
        assert m.get(0, 0) != 99.0

    def test_from_array_complex(self):
        m = Matrix.from_array(np.array([[1 + 1j, 0], [0, 1]]))
        assert m.is_complex
        assert m.get(0, 0) == Complex(1.0, 1.0)

    def test_from_array_float_drops_zero_imaginary(self):
        m = Matrix.from_array(np.array([[1 + 0j, 2 + 0j]]), element_type=float)
        assert m.element_type is float

    def test_from_array_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            Matrix.from_array([1.0, 2.0])


class TestAccess:
    """get(), indexing and value-semantic updates."""

    def test_get(self, a):
        assert a.get(0, 0) == 1.0
        assert a.get(1, 1) == 4.0

    def test_getitem(self, a):
        assert a[0, 1] == 2.0

    def test_getitem_requires_pair(self, a):
        with pytest.raises(ValidationError):
            a[0]

    def test_row_out_of_bounds(self):
        with pytest.raises(IndexOutOfBoundsError):
            Matrix(2, 2, [1, 0, 0, 1]).get(2, 0)

    def test_col_out_of_bounds(self, a):
        with pytest.raises(IndexOutOfBoundsError, match="col"):
            a.get(0, 2)

    def test_negative_index(self, a):
        with pytest.raises(IndexOutOfBoundsError):
            a.get(-1, 0)

    def test_row(self, a):
        assert a.row(1) == (3.0, 4.0)

    def test_with_element(self, a):
        updated = a.with_element(0, 1, 9)
        assert updated.get(0, 1) == 9.0
        assert a.get(0, 1) == 2.0

    def test_with_element_promotes(self, a):
        updated = a.with_element(1, 1, Complex(0.0, 1.0))
        assert updated.is_complex
        assert updated.get(1, 1) == Complex(0.0, 1.0)
        assert not a.is_complex

    def test_storage_read_only(self, a):
        with pytest.raises(ValueError):
            a._data[0, 0] = 10.0


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:
    """Elementwise operations, scaling and products."""

    def test_addition(self, a, b):
        total = a + b
        assert total.get(0, 0) == 6.0
        assert total.get(1, 1) == 12.0

    def test_complex_addition(self, c):
        total = c + c
        assert total.get(0, 0) == Complex(2.0, 4.0)

    def test_subtraction(self, a, b):
        assert b - a == Matrix(2, 2, [4, 4, 4, 4])

    def test_negation(self, a):
        assert -a == Matrix(2, 2, [-1, -2, -3, -4])

    def test_shape_mismatch(self, a):
        with pytest.raises(DimensionError, match="addition"):
            a + Matrix.identity(3)
        with pytest.raises(DimensionError, match="subtraction"):
            a - Matrix(2, 1, [1, 2])

    def test_mixed_types_promote(self, a, c):
        total = a + c
        assert total.is_complex
        assert total.get(0, 0) == Complex(2.0, 2.0)

    def test_scaling(self, a):
        assert a * 2 == Matrix(2, 2, [2, 4, 6, 8])
        assert 2 * a == a * 2

    def test_complex_scaling(self, a):
        scaled = a * Complex(0.0, 1.0)
        assert scaled.is_complex
        assert scaled.get(1, 0) == Complex(0.0, 3.0)

    def test_scaling_by_real_complex_stays_real(self, a):
        assert not (a * Complex(2.0, 0.0)).is_complex

    def test_product(self, a, b):
        assert a * b == Matrix.from_rows([[19, 22], [43, 50]])
        assert a @ b == a * b

    def test_complex_product(self):
        a = Matrix(2, 2, [Complex(1.0, 0.0), Complex(2.0, 0.0),
                          Complex(3.0, 0.0), Complex(4.0, 0.0)])
        b = Matrix(2, 2, [Complex(5.0, 0.0), Complex(6.0, 0.0),
                          Complex(7.0, 0.0), Complex(8.0, 0.0)])
        product = a @ b
        assert product.get(0, 0) == Complex(19.0, 0.0)
        assert product.get(1, 1) == Complex(50.0, 0.0)

    def test_product_shape(self):
        m = Matrix(2, 3, [1] * 6) @ Matrix(3, 4, [1] * 12)
        assert m.shape == (2, 4)
        assert m.get(1, 3) == 3.0

    def test_product_dimension_mismatch(self, a):
        with pytest.raises(DimensionError, match="matrix product") as exc_info:
            a * Matrix(3, 1, [1, 2, 3])
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 3

    def test_identity_is_idempotent(self):
        identity = Matrix.identity(3)
        assert identity * identity == identity

    def test_identity_is_neutral(self, rng):
        m = Matrix.from_array(rng.standard_normal((3, 3)))
        assert Matrix.identity(3) @ m == m
        assert m @ Matrix.identity(3) == m

    def test_matches_numpy(self, rng):
        x = rng.standard_normal((3, 4)) + 1j * rng.standard_normal((3, 4))
        y = rng.standard_normal((4, 2)) + 1j * rng.standard_normal((4, 2))
        product = Matrix.from_array(x) @ Matrix.from_array(y)
        np.testing.assert_allclose(product.to_numpy(), x @ y, rtol=1e-12)

    def test_numpy_scalar_on_left(self, a, c):
        scaled = np.float64(2.0) * a
        assert isinstance(scaled, Matrix)
        assert scaled == a * 2
        rotated = np.complex128(1j) * c
        assert isinstance(rotated, Matrix)
        assert rotated == c * Complex(0.0, 1.0)

    def test_named_operations(self, a, b):
        assert a.add(b) == a + b
        assert a.sub(b) == a - b
        assert a.scale(3) == a * 3
        assert a.matmul(b) == a @ b

    def test_named_operations_validate(self, a):
        with pytest.raises(ValidationError):
            a.add(np.eye(2))
        with pytest.raises(ValidationError):
            a.matmul([[1, 0], [0, 1]])

    def test_unsupported_operand(self, a):
        with pytest.raises(TypeError):
            a + 1
        with pytest.raises(TypeError):
            a * "2"


class TestMatrixVector:
    """Products with a ComplexVector."""

    def test_mul_vector(self):
        m = Matrix(2, 2, [Complex(2.0, 0.0), Complex(3.0, 0.0),
                          Complex(1.0, 0.0), Complex(4.0, 0.0)])
        v = ComplexVector([Complex(1.0, 0.0), Complex(2.0, 0.0)])
        result = m.mul_vector(v)
        assert result == ComplexVector([Complex(8.0, 0.0), Complex(9.0, 0.0)])

    def test_operators(self, a):
        v = ComplexVector([1j, 1.0])
        expected = ComplexVector([2 + 1j, 4 + 3j])
        assert a @ v == expected
        assert a * v == expected

    def test_dimension_mismatch(self, a):
        with pytest.raises(DimensionError, match="matrix-vector"):
            a.mul_vector(ComplexVector.zeros(3))

    def test_requires_vector(self, a):
        with pytest.raises(ValidationError):
            a.mul_vector([1, 2])


# ═══════════════════════════════════════════════════════════════════════
# Transposes and unitarity
# ═══════════════════════════════════════════════════════════════════════


class TestTranspose:
    """transpose() and conjugate_transpose()."""

    def test_conjugate_transpose(self, c):
        ct = c.conjugate_transpose()
        assert ct.get(0, 0) == Complex(1.0, -2.0)
        assert ct.get(1, 0) == Complex(3.0, -4.0)
        assert ct.get(0, 1) == Complex(5.0, -6.0)
        assert ct.get(1, 1) == Complex(7.0, -8.0)

    def test_conjugate_transpose_shape(self):
        m = Matrix(2, 3, [1j, 2, 3, 4, 5, 6j])
        ct = m.conjugate_transpose()
        assert ct.shape == (3, 2)
        assert ct.get(2, 1) == Complex(0.0, -6.0)

    def test_real_conjugate_transpose_is_transpose(self, a):
        assert a.conjugate_transpose() == a.transpose()
        assert a.transpose() == Matrix.from_rows([[1, 3], [2, 4]])
        assert not a.conjugate_transpose().is_complex

    def test_involution(self, c):
        assert c.conjugate_transpose().conjugate_transpose() == c


class TestUnitary:
    """is_unitary() checks A @ A^H == I within UNITARY.atol."""

    def test_real_identity(self):
        assert Matrix(2, 2, [1, 0, 0, 1]).is_unitary()

    def test_rotation(self):
        assert rotation(math.pi / 4).is_unitary()

    def test_complex_unitary(self):
        h = 1 / math.sqrt(2.0)
        m = Matrix(2, 2, [h, h * 1j, h * 1j, h])
        assert m.is_unitary()

    def test_phase_matrix(self):
        m = Matrix(2, 2, [Complex.from_polar(1.0, 0.3), 0, 0, Complex.from_polar(1.0, -1.2)])
        assert m.is_unitary()

    def test_not_unitary(self, a):
        assert not a.is_unitary()

    def test_scaled_identity_not_unitary(self):
        assert not (Matrix.identity(2) * 2).is_unitary()

    def test_non_square(self):
        assert not Matrix(2, 3, [1, 0, 0, 0, 1, 0]).is_unitary()

    def test_nan_not_unitary(self):
        assert not Matrix(1, 1, [float('nan')]).is_unitary()

    def test_tolerance(self):
        almost = Matrix(1, 1, [1.0 + 1e-8])
        assert not almost.is_unitary()
        assert almost.is_unitary(atol=1e-6)


# ═══════════════════════════════════════════════════════════════════════
# Comparison and display
# ═══════════════════════════════════════════════════════════════════════


class TestValueSemantics:
    """Equality, closeness and display."""

    def test_equality_across_element_types(self):
        assert Matrix.identity(2) == Matrix.identity(2, element_type=Complex)

    def test_inequality_on_shape(self):
        assert Matrix(1, 2, [1, 2]) != Matrix(2, 1, [1, 2])

    def test_unhashable(self, a):
        with pytest.raises(TypeError):
            hash(a)

    def test_is_close(self, a):
        assert a.is_close(a + Matrix(2, 2, [1e-13] * 4))
        assert not a.is_close(a + Matrix.identity(2))
        assert not a.is_close(Matrix.identity(3))

    def test_str(self, c):
        assert str(Matrix(2, 2, [1, 2, 3, 4])) == "Matrix(2x2)\n1 2\n3 4"
        assert str(c).splitlines()[1] == "1+2i 3+4i"

    def test_generic_alias(self):
        assert Matrix[float] is not None
