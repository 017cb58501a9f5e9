"""
pytest configuration and shared fixtures.
"""

import warnings

import pytest
import numpy as np
import matplotlib

# Headless rendering for the whole suite
matplotlib.use('Agg')


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def simple_points():
    """The four-point straight-line dataset."""
    return [(1.0, 3.0), (3.0, 6.0), (6.0, 5.0), (8.0, 7.0)]


@pytest.fixture
def noisy_line_data(rng):
    """Noisy straight line y = 2 - 0.5x."""
    x = rng.uniform(-10.0, 10.0, 50)
    y = 2.0 - 0.5 * x + rng.standard_normal(50) * 0.3
    return x, y


@pytest.fixture
def quadratic_data():
    """Noise-free points on y = 4 - 1.5x + 0.25x²."""
    x = np.linspace(-5.0, 5.0, 21)
    y = 4.0 - 1.5 * x + 0.25 * x ** 2
    return x, y, (4.0, -1.5, 0.25)


@pytest.fixture
def no_warnings():
    """Fail the test on any warning raised inside the block."""
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        yield
