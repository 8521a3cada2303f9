"""
Complex numbers and complex vectors.

Public API:
    Complex         - complex scalar with polar conversion and parsing
    ComplexVector   - fixed-length vector of Complex values
    Angle           - angle in degrees or radians
    parse_complex   - text to (re, im) components
"""

from pynumeric.complex.angle import Angle
from pynumeric.complex.parsing import parse_complex
from pynumeric.complex.number import Complex
from pynumeric.complex.vector import ComplexVector

__all__ = [
    "Angle",
    "Complex",
    "ComplexVector",
    "parse_complex",
]
