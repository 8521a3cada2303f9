"""
Angle: a measurement in degrees or radians.

An Angle remembers the unit it was created in and converts only on request,
so an angle built from 90 degrees reports exactly 90.0 back.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Literal

from pynumeric.core.exceptions import ValidationError

AngleUnit = Literal['degrees', 'radians']

_UNITS = ('degrees', 'radians')


@dataclass(frozen=True)
class Angle:
    """
    Immutable angle measurement.

    Construction:
        Angle.from_degrees(90.0)
        Angle.from_radians(math.pi / 2)

    Equality is structural: 90 degrees and pi/2 radians are different
    values that represent the same rotation. Compare with to_radians()
    when the unit should not matter.
    """
    value: float
    unit: AngleUnit

    def __post_init__(self) -> None:
        if self.unit not in _UNITS:
            raise ValidationError(f"unit: must be one of {_UNITS}, got {self.unit!r}")
        if not isinstance(self.value, numbers.Real):
            raise ValidationError(
                f"value: expected a real number, got {type(self.value).__name__}"
            )
        object.__setattr__(self, 'value', float(self.value))

    @classmethod
    def from_degrees(cls, degrees: float) -> Angle:
        return cls(degrees, 'degrees')

    @classmethod
    def from_radians(cls, radians: float) -> Angle:
        return cls(radians, 'radians')

    def to_degrees(self) -> float:
        if self.unit == 'degrees':
            return self.value
        return self.value * 180.0 / math.pi

    def to_radians(self) -> float:
        if self.unit == 'radians':
            return self.value
        return self.value * math.pi / 180.0

    def as_degrees(self) -> Angle:
        """Same angle expressed in degrees."""
        return Angle.from_degrees(self.to_degrees())

    def as_radians(self) -> Angle:
        """Same angle expressed in radians."""
        return Angle.from_radians(self.to_radians())

    def normalize(self) -> Angle:
        """
        Wrap into [0, 360) degrees.

        The result is always expressed in degrees, whatever the input unit.
        """
        wrapped = math.fmod(self.to_degrees(), 360.0)
        if wrapped < 0.0:
            wrapped += 360.0
        # fmod of a tiny negative can round back up to exactly 360
        if wrapped >= 360.0:
            wrapped = 0.0
        return Angle.from_degrees(wrapped)

    def __str__(self) -> str:
        suffix = 'deg' if self.unit == 'degrees' else 'rad'
        return f"{self.value:g} {suffix}"
