"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pynumeric import Complex, ComplexVector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_complexes(rng):
    """Twenty finite Complex values with components in [-10, 10)."""
    parts = rng.uniform(-10.0, 10.0, size=(20, 2))
    return [Complex(re, im) for re, im in parts]


@pytest.fixture
def random_vector(rng):
    """Random complex vector of dimension 5."""
    return ComplexVector.from_array(
        rng.standard_normal(5) + 1j * rng.standard_normal(5)
    )
