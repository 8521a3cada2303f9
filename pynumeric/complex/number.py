"""
Complex: an immutable complex scalar.

Complex interoperates with Python and NumPy numbers on either side of the
arithmetic operators. Division by zero raises DivisionByZeroError rather
than producing IEEE infinities.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any

from pynumeric.complex.angle import Angle
from pynumeric.complex.parsing import parse_complex
from pynumeric.core.compute.precision import is_close
from pynumeric.core.compute.tolerances import DEFAULT
from pynumeric.core.exceptions import DivisionByZeroError, ValidationError
from pynumeric.core.validation import is_scalar


@dataclass(frozen=True)
class Complex:
    """
    Complex number re + im*i with double-precision components.

    Construction:
        Complex(2.0, 3.0)
        Complex.from_polar(2.0, Angle.from_degrees(60))
        Complex.from_str("2+3i")

    Complex compares equal to Python numbers with the same value, and
    hashes like them: Complex(3, 0) == 3 and hash(Complex(3, 0)) == hash(3).
    """
    re: float
    im: float = 0.0

    def __post_init__(self) -> None:
        for name in ('re', 'im'):
            value = getattr(self, name)
            if not isinstance(value, numbers.Real):
                raise ValidationError(
                    f"{name}: expected a real number, got {type(value).__name__}"
                )
            object.__setattr__(self, name, float(value))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_polar(cls, magnitude: float, angle: float | Angle) -> Complex:
        """
        Build from polar coordinates.

        Args:
            magnitude: Distance from the origin
            angle: Angle in radians, or an Angle in any unit
        """
        theta = angle.to_radians() if isinstance(angle, Angle) else float(angle)
        return cls(magnitude * math.cos(theta), magnitude * math.sin(theta))

    @classmethod
    def from_str(cls, text: str) -> Complex:
        """Parse forms such as "2+3i", "-i" or "4.5". Raises ParseError."""
        re, im = parse_complex(text)
        return cls(re, im)

    @classmethod
    def zero(cls) -> Complex:
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Complex:
        return cls(1.0, 0.0)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def magnitude(self) -> float:
        return math.hypot(self.re, self.im)

    def magnitude_squared(self) -> float:
        return self.re * self.re + self.im * self.im

    def argument(self) -> float:
        """Principal argument in (-pi, pi]."""
        theta = math.atan2(self.im, self.re)
        # atan2(-0.0, x<0) lands on the excluded endpoint
        if theta == -math.pi:
            return math.pi
        return theta

    def angle(self) -> Angle:
        return Angle.from_radians(self.argument())

    def conjugate(self) -> Complex:
        return Complex(self.re, -self.im)

    def is_close(
        self,
        other: Any,
        rtol: float = DEFAULT.rtol,
        atol: float = DEFAULT.atol
    ) -> bool:
        """Approximate equality, |self - other| <= atol + rtol * |other|."""
        o = _coerce(other)
        if o is None:
            raise ValidationError(
                f"other: expected a real or complex scalar, got {type(other).__name__}"
            )
        return is_close(complex(self), complex(o), rtol=rtol, atol=atol)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: Any) -> Complex:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return Complex(self.re + o.re, self.im + o.im)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Complex:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return Complex(self.re - o.re, self.im - o.im)

    def __rsub__(self, other: Any) -> Complex:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return o - self

    def __mul__(self, other: Any) -> Complex:
        if isinstance(other, numbers.Real):
            s = float(other)
            return Complex(self.re * s, self.im * s)
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return Complex(
            self.re * o.re - self.im * o.im,
            self.re * o.im + self.im * o.re,
        )

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Complex:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        if o.re == 0.0 and o.im == 0.0:
            raise DivisionByZeroError(
                f"cannot divide {self} by zero", operation='division'
            )
        q = complex(self) / complex(o)
        return Complex(q.real, q.imag)

    def __rtruediv__(self, other: Any) -> Complex:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return o / self

    def __neg__(self) -> Complex:
        return Complex(-self.re, -self.im)

    def __pos__(self) -> Complex:
        return self

    def __abs__(self) -> float:
        return self.magnitude()

    # ------------------------------------------------------------------
    # Conversion, comparison, display
    # ------------------------------------------------------------------

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __bool__(self) -> bool:
        return self.re != 0.0 or self.im != 0.0

    def __eq__(self, other: object) -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return self.re == o.re and self.im == o.im

    def __hash__(self) -> int:
        return hash(complex(self))

    def __str__(self) -> str:
        if self.im == 0.0:
            return _format_component(self.re)
        im = _format_component(self.im)
        sign = '' if im.startswith('-') else '+'
        return f"{_format_component(self.re)}{sign}{im}i"


def _coerce(value: Any) -> Complex | None:
    """Widen a scalar operand to Complex, or None if it is not a scalar."""
    if isinstance(value, Complex):
        return value
    if not is_scalar(value):
        return None
    c = complex(value)
    return Complex(c.real, c.imag)


def _format_component(x: float) -> str:
    text = repr(x)
    return text[:-2] if text.endswith('.0') else text
