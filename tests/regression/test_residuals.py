"""
Residual stream tests.
"""

from itertools import repeat

import numpy as np
import pytest

from pyregress.core.exceptions import DimensionError, ValidationError
from pyregress.regression import Residuals, linear_regress_beta, residuals


HEIGHTS_RESIDUALS = [
    1.20184170, 0.27367611, 0.40823237, -0.06993322, 0.06462305,
    -0.40354255, -0.88170814, -0.74715188, -0.76531747, -0.63076120,
    -0.65892680, -0.06437053, -0.08253613, 0.96202014, 1.39385455,
]


class TestResiduals:

    def test_matches_r(self, heights_weights):
        heights, weights = heights_weights
        betas = linear_regress_beta(weights, repeat(1), heights)
        res = list(residuals(betas, weights, repeat(1), heights))
        np.testing.assert_allclose(res, HEIGHTS_RESIDUALS, atol=1e-5)

    def test_actual_and_fitted_tracked(self):
        res = residuals([1.0, 2.0], [5.0, 9.0], repeat(1), [1.0, 3.0])
        assert isinstance(res, Residuals)
        assert next(res) == pytest.approx(2.0)
        assert res.actual == 5.0
        assert res.fitted == pytest.approx(3.0)
        assert res.n == 1
        assert next(res) == pytest.approx(2.0)
        assert res.fitted == pytest.approx(7.0)
        assert res.n == 2
        with pytest.raises(StopIteration):
            next(res)

    def test_stops_at_shortest(self):
        res = list(residuals([0.0, 1.0], [1.0, 2.0, 3.0], repeat(1), [0.0, 0.0]))
        assert res == [1.0, 2.0]

    def test_collection_layout(self):
        res = list(residuals([0.0, 1.0], [1.0, 2.0], [[1, 1], [1.0, 2.0]]))
        assert res == [0.0, 0.0]

    def test_checkpoint_is_independent(self):
        res = residuals([0.0, 1.0], iter([1.0, 5.0, 9.0]), repeat(1), iter([1.0, 2.0, 3.0]))
        next(res)
        saved = res.checkpoint()
        assert saved.n == 1
        assert list(res) == [3.0, 6.0]
        assert list(saved) == [3.0, 6.0]

    def test_wrong_betas_length(self, disease_data):
        y, x = disease_data
        with pytest.raises(DimensionError, match="betas=3, X=2"):
            residuals([1.0, 2.0, 3.0], y, repeat(1), x)

    def test_2d_betas_rejected(self, disease_data):
        y, x = disease_data
        with pytest.raises(DimensionError, match="expected 1D"):
            residuals([[1.0, 2.0]], y, repeat(1), x)

    def test_non_numeric_betas_rejected(self, disease_data):
        y, x = disease_data
        with pytest.raises(ValidationError):
            residuals(["a", "b"], y, repeat(1), x)
