"""
Linear algebra over real and complex matrices.

Public API:
    Matrix  - dense row-major matrix over float or Complex
"""

from pynumeric.linalg.matrix import Matrix

__all__ = [
    "Matrix",
]
