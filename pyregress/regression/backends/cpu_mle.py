"""
CPU backend for logistic regression via Newton-Raphson.

Maximizes the binomial log-likelihood directly:

    beta = 0
    repeat:
        p    = 1 / (1 + exp(-X'beta))
        D    = -2 log L(beta)
        stop if D_previous - D < tol, or D is NaN
        W    = X diag(p (1 - p)) X'
        beta = beta + W^-1 X (y - p)
        stop if beta is no longer finite

W is inverted with the same Gauss-Jordan routine the linear path uses.
The iteration count is capped at max_iter; hitting the cap is reported on
the result, never raised.
"""

from typing import Any
import math
import numpy as np

from pyregress.core.result import Result
from pyregress.core.compute.timing import Timer
from pyregress.core.compute.linalg import invert
from pyregress.regression.design import LogisticDesign
from pyregress.regression.families import Binomial
from pyregress.regression.solution import LogisticParams
from pyregress.regression._inference import read_only


class NewtonRaphsonBackend:
    """CPU backend fitting the binomial/logit model by Newton-Raphson."""

    @property
    def name(self) -> str:
        return 'cpu_newton_raphson'

    def solve(
        self,
        design: LogisticDesign,
        tol: float = 1e-6,
        max_iter: int = 1000,
    ) -> Result[LogisticParams]:
        """Run Newton-Raphson to fit the logistic model.

        Args:
            design: Materialized design with X (k x n) and boolean y
            tol: Stop once the deviance improves by less than this
            max_iter: Maximum number of Newton-Raphson updates

        Returns:
            Result[LogisticParams] with coefficients, deviance and the
            convergence report
        """
        timer = Timer()
        timer.start()

        X = design.X
        y = design.y.astype(np.float64)
        family = Binomial()
        warnings_list: list[str] = []

        beta = np.zeros(design.k, dtype=np.float64)
        previous = math.inf
        converged = False
        deviance = math.nan
        iterations = 0

        with timer.section('newton_raphson'):
            for iterations in range(max_iter + 1):
                with np.errstate(over='ignore', invalid='ignore'):
                    p = family.link.linkinv(beta @ X)
                deviance = family.deviance(y, p)

                if math.isnan(deviance):
                    warnings_list.append(
                        f"Log-likelihood became NaN after {iterations} "
                        f"iterations; coefficients are from the last update"
                    )
                    break
                if previous - deviance < tol:
                    converged = True
                    break
                if iterations == max_iter:
                    break
                previous = deviance

                with np.errstate(over='ignore', invalid='ignore'):
                    W = (X * family.variance(p)) @ X.T
                    beta = beta + invert(W) @ (X @ (y - p))

                if not np.all(np.isfinite(beta)):
                    iterations += 1
                    deviance = math.nan
                    warnings_list.append(
                        f"Coefficients became non-finite after {iterations} "
                        f"iterations; the information matrix is singular"
                    )
                    break

        if not converged and not warnings_list:
            warnings_list.append(
                f"Newton-Raphson did not converge in {max_iter} iterations "
                f"(deviance={deviance:.6f})"
            )

        timer.stop()

        params = LogisticParams(
            coefficients=read_only(beta),
            deviance=float(deviance),
            converged=converged,
            iterations=iterations,
            n_observations=design.n,
        )

        info: dict[str, Any] = {
            'method': 'newton_raphson',
            'family': family.name,
            'link': family.link.name,
            'converged': converged,
            'tol': tol,
            'max_iter': max_iter,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
