"""
Lazy residual stream.

Given fitted coefficients, walks the response and predictor sequences in
lockstep and yields residual = y - sum_j coef[j] * x_j for each paired
observation. The stream ends as soon as any sequence ends.
"""

from __future__ import annotations

from typing import Any, Iterator

import numpy as np
from numpy.typing import NDArray

from pyregress.core.sequences import Observations
from pyregress.core.validation import check_length_matches
from pyregress.regression.design import Predictors


class Residuals:
    """
    Iterator over the residuals of a fitted linear model.

    After each step the actual response and the fitted prediction for the
    current observation are available as ``actual`` and ``fitted``.

    Usage:
        res = Residuals(betas, y, predictors)
        for r in res:
            print(r, res.fitted, res.actual)
    """

    def __init__(
        self,
        betas: NDArray[np.floating[Any]],
        response: Observations,
        predictors: Predictors,
    ):
        check_length_matches(len(betas), len(predictors), names=('betas', 'X'))
        self._betas = [float(b) for b in betas]
        self._response = response
        self._predictors = predictors
        self.actual = float('nan')
        self.fitted = float('nan')
        self.n = 0

    def __iter__(self) -> Iterator[float]:
        return self

    def __next__(self) -> float:
        actual = next(self._response)
        fitted = 0.0
        for beta, source in zip(self._betas, self._predictors):
            fitted += next(source) * beta
        self.actual = actual
        self.fitted = fitted
        self.n += 1
        return actual - fitted

    def checkpoint(self) -> Residuals:
        """Independent residual stream positioned at the same observation."""
        copy = Residuals(self._betas, self._response.checkpoint(), self._predictors.checkpoint())
        copy.actual, copy.fitted, copy.n = self.actual, self.fitted, self.n
        return copy
