"""
pynumeric: complex numbers, complex vectors and small dense matrices.

Submodules:
    complex: Complex scalar, ComplexVector, Angle, textual parsing
    linalg: Matrix over float or Complex
    core: Exceptions, validation and numerical tolerances
"""

__version__ = "0.1.0"

from pynumeric import complex
from pynumeric import linalg
from pynumeric.complex import Angle, Complex, ComplexVector
from pynumeric.linalg import Matrix

__all__ = [
    "__version__",
    "complex",
    "linalg",
    "Angle",
    "Complex",
    "ComplexVector",
    "Matrix",
]
