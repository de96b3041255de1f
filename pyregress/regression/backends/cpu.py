"""
CPU backend for linear regression via the normal equations.

Accumulates X'X and X'Y from the observation sequences in one lockstep
pass, inverts X'X by Gauss-Jordan elimination and multiplies through:

    beta = (X'X)^-1 X'Y

Inference needs a second pass (residuals against the fitted
coefficients), so solve() checkpoints the design before touching it.
Sequences without repeatable storage are buffered by that checkpoint,
which info['replay_buffered'] reports. coefficients() makes only the
first pass and works on consume-once iterators.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyregress.core.result import Result
from pyregress.core.capabilities import CAPABILITY_REPEATABLE
from pyregress.core.correlation import PearsonCorrelation
from pyregress.core.compute.timing import Timer
from pyregress.core.compute.linalg import accumulate_normal_equations, invert
from pyregress.regression.design import RegressionDesign
from pyregress.regression.residuals import Residuals
from pyregress.regression.solution import LinearParams
from pyregress.regression._inference import linear_statistics


class GaussJordanBackend:
    """
    CPU backend solving the normal equations with Gauss-Jordan inversion.

    Singular X'X is not an error here: the zero pivot propagates inf/NaN
    into the coefficients and every statistic derived from them.
    """

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def coefficients(
        self,
        design: RegressionDesign,
        out: NDArray[np.floating[Any]] | None = None,
    ) -> NDArray[np.floating[Any]]:
        """
        Coefficients only, in a single pass over the design.

        Args:
            design: Regression design (consumed)
            out: Optional buffer. When it holds at least k elements the
                coefficients are written to out[:k] and that view is
                returned; a smaller buffer is left untouched.

        Returns:
            Coefficients, shape (k,)
        """
        betas, _, _ = self._first_pass(design)
        if out is not None and len(out) >= len(betas):
            target = out[:len(betas)]
            target[...] = betas
            return target
        return betas

    def solve(
        self,
        design: RegressionDesign,
        confidence: float = 0.95,
    ) -> Result[LinearParams]:
        """
        Fit and compute inferential statistics.

        Algorithm:
            1. Checkpoint every sequence for the residual pass
            2. Accumulate X'X and X'Y, invert X'X, beta = inv @ X'Y
            3. Walk the residuals over the checkpoints: RSS and the
               Pearson correlation of fitted against actual values
            4. Derive standard errors, bounds, p-values, R^2 and F

        Args:
            design: Regression design (consumed)
            confidence: Confidence level for the coefficient bounds

        Returns:
            Result containing LinearParams
        """
        timer = Timer()
        timer.start()

        replay = design.checkpoint()

        betas, inverse, n_first = self._first_pass(design, timer)

        with timer.section('residuals'):
            correlation = PearsonCorrelation()
            rss = 0.0
            residuals = Residuals(betas, replay.response, replay.predictors)
            for residual in residuals:
                rss += residual * residual
                correlation.put(residuals.fitted, residuals.actual)

        with timer.section('statistics'):
            params, warnings_list = linear_statistics(
                betas, inverse, rss, correlation, confidence,
            )

        timer.stop()

        info: dict[str, Any] = {
            'method': 'gauss_jordan',
            'n_predictors': design.k,
            'n_observations': n_first,
            'layout': design.layout.value,
            'replay_buffered': not design.supports(CAPABILITY_REPEATABLE),
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _first_pass(
        self,
        design: RegressionDesign,
        timer: Timer | None = None,
    ) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]], int]:
        """Return (betas, (X'X)^-1, n) from one pass over design."""
        timer = timer if timer is not None else Timer()

        with timer.section('normal_equations'):
            equations = accumulate_normal_equations(
                design.response, design.predictors.sequences,
            )

        with timer.section('inversion'):
            inverse = invert(equations.work)

        with np.errstate(invalid='ignore', over='ignore'):
            betas = inverse @ equations.xty

        return betas, inverse, equations.n
