"""
Tests for the streaming Pearson correlation accumulator.
"""

import math

import numpy as np
import pytest

from pyregress.core.correlation import PearsonCorrelation


def _fill(xs, ys):
    acc = PearsonCorrelation()
    for x, y in zip(xs, ys):
        acc.put(x, y)
    return acc


class TestPearsonCorrelation:

    def test_matches_numpy(self, rng):
        x = rng.standard_normal(100)
        y = 0.5 * x + rng.standard_normal(100)
        acc = _fill(x, y)
        assert acc.n == 100
        assert acc.correlation == pytest.approx(np.corrcoef(x, y)[0, 1], rel=1e-12)
        assert acc.covariance == pytest.approx(np.cov(x, y)[0, 1], rel=1e-12)
        assert acc.mean_x == pytest.approx(x.mean())
        assert acc.mean_y == pytest.approx(y.mean())

    def test_perfect_negative(self):
        acc = _fill([1, 2, 3, 4], [8, 6, 4, 2])
        assert acc.correlation == pytest.approx(-1.0)
        assert -1.0 <= acc.correlation

    def test_large_offset_is_stable(self):
        x = [1e9 + v for v in (1.0, 2.0, 3.0)]
        acc = _fill(x, [1.0, 2.0, 3.0])
        assert acc.correlation == pytest.approx(1.0)

    def test_fewer_than_two_is_nan(self):
        assert math.isnan(PearsonCorrelation().correlation)
        assert math.isnan(_fill([1.0], [2.0]).correlation)
        assert math.isnan(_fill([1.0], [2.0]).covariance)

    def test_zero_variance_is_nan(self):
        assert math.isnan(_fill([1, 1, 1], [1, 2, 3]).correlation)

    def test_merge_equals_single_pass(self, rng):
        x = rng.standard_normal(60)
        y = rng.standard_normal(60)
        left = _fill(x[:25], y[:25])
        left.merge(_fill(x[25:], y[25:]))
        whole = _fill(x, y)
        assert left.n == whole.n
        assert left.correlation == pytest.approx(whole.correlation, rel=1e-12)
        assert left.covariance == pytest.approx(whole.covariance, rel=1e-12)

    def test_merge_into_empty(self):
        acc = PearsonCorrelation()
        acc.merge(_fill([1, 2, 3], [2, 4, 7]))
        assert acc.n == 3
        assert acc.correlation == pytest.approx(_fill([1, 2, 3], [2, 4, 7]).correlation)

    def test_merge_empty_is_noop(self):
        acc = _fill([1, 2, 3], [2, 4, 7])
        before = acc.correlation
        acc.merge(PearsonCorrelation())
        assert acc.n == 3
        assert acc.correlation == before
