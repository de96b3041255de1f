"""
Tests for the lazy power adapters.
"""

import itertools
import math

import numpy as np

from pyregress.core.capabilities import CAPABILITY_INFINITE
from pyregress.regression import PowMap, pow_map
from pyregress.regression.power import power_series


class TestPowMap:

    def test_squares(self):
        assert list(pow_map([1, 2, 3], 2)) == [1.0, 4.0, 9.0]

    def test_runtime_exponent(self):
        exponent = 0.5
        np.testing.assert_allclose(list(pow_map([4.0, 9.0], exponent)), [2.0, 3.0])

    def test_zero_power_is_one(self):
        assert list(pow_map([0.0, -3.0, 5.0], 0)) == [1.0, 1.0, 1.0]

    def test_zero_power_ends_with_base(self):
        assert len(list(pow_map(iter([1, 2]), 0))) == 2

    def test_current_caches_last_value(self):
        powers = pow_map([2.0, 3.0], 3)
        assert math.isnan(powers.current)
        next(powers)
        assert powers.current == 8.0
        next(powers)
        assert powers.current == 27.0

    def test_fractional_power_of_negative_is_nan(self):
        assert math.isnan(next(pow_map([-1.0], 0.5)))

    def test_checkpoint(self):
        powers = pow_map(iter([1.0, 2.0, 3.0]), 2)
        next(powers)
        saved = powers.checkpoint()
        assert saved.current == 1.0
        assert list(powers) == [4.0, 9.0]
        assert list(saved) == [4.0, 9.0]

    def test_inherits_infinite(self):
        assert pow_map(itertools.count(), 2).supports(CAPABILITY_INFINITE)

    def test_repr(self):
        assert repr(pow_map([1.0], 2)).startswith("PowMap(exponent=2")


class TestPowerSeries:

    def test_exponents_and_independence(self):
        series = power_series(iter([2.0, 3.0]), 2)
        assert [p.exponent for p in series] == [0, 1, 2]
        assert all(isinstance(p, PowMap) for p in series)
        assert list(series[2]) == [4.0, 9.0]
        assert list(series[1]) == [2.0, 3.0]
        assert list(series[0]) == [1.0, 1.0]

    def test_degree_zero(self):
        assert len(power_series([1.0], 0)) == 1
