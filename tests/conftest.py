"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def heights_weights():
    """Average heights (m) and weights (kg) of American women aged 30-39."""
    heights = [1.47, 1.50, 1.52, 1.55, 1.57, 1.60, 1.63, 1.65,
               1.68, 1.70, 1.73, 1.75, 1.78, 1.80, 1.83]
    weights = [52.21, 53.12, 54.48, 55.84, 57.20, 58.57, 59.93, 61.29,
               63.11, 64.47, 66.28, 68.10, 69.92, 72.19, 74.46]
    return heights, weights


@pytest.fixture
def disease_data():
    """Disease severity (y) against an exposure score (x)."""
    y = [1.9, 3.1, 3.3, 4.8, 5.3, 6.1, 6.4, 7.6, 9.8, 12.4]
    x = [2, 1, 5, 5, 20, 20, 23, 10, 30, 25]
    return y, x


@pytest.fixture
def simple_regression_data(rng):
    """Intercept plus three predictors with low noise, as columns."""
    n = 200
    columns = [np.ones(n), *rng.standard_normal((3, n))]
    beta_true = np.array([0.5, 1.0, -2.0, 0.5])
    y = np.column_stack(columns) @ beta_true + rng.standard_normal(n) * 0.1
    return y, columns, beta_true
