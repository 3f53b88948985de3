"""
Pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def standard_gauss_params():
    """Unit Gaussian centred at zero."""
    return {
        "mean": 0.0,
        "sigma": 1.0,
    }


@pytest.fixture
def shifted_gauss_params():
    """Wide Gaussian away from the origin, values exact in binary."""
    return {
        "mean": 1.5,
        "sigma": 2.0,
    }


@pytest.fixture
def sample_points():
    """Points straddling every compact kernel's support."""
    return [-2.0, -1.0, -0.75, -0.5, -0.25, 0.0, 0.25, 0.5, 0.75, 1.0, 2.0]


@pytest.fixture
def sample_grid():
    """Two-dimensional grid of points."""
    return np.linspace(-1.5, 1.5, 12).reshape(3, 4)
