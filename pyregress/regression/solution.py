"""
Regression solution types.

Contains the immutable parameter payloads computed by backends and the
user-facing solution wrappers around the Result envelope.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator
import numpy as np
from numpy.typing import NDArray

from pyregress.core.result import Result
from pyregress.core.sequences import lockstep
from pyregress.core.validation import check_length_matches
from pyregress.regression.design import Predictors, RegressionDesign
from pyregress.regression.power import PowMap
from pyregress.regression.residuals import Residuals


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for linear regression.

    Every per-coefficient array has length k, index-aligned with the
    predictors and read-only. Fields that depend on the residual degrees
    of freedom are NaN when df <= 0.
    """
    coefficients: NDArray[np.floating[Any]]
    standard_errors: NDArray[np.floating[Any]]
    t_statistics: NDArray[np.floating[Any]]
    lower_bounds: NDArray[np.floating[Any]]
    upper_bounds: NDArray[np.floating[Any]]
    p_values: NDArray[np.floating[Any]]
    r_squared: float
    adjusted_r_squared: float
    residual_std_error: float
    f_statistic: float
    overall_p_value: float
    rss: float
    n_observations: int
    df_residual: int
    confidence: float


@dataclass(frozen=True)
class LinearSolution:
    """
    User-facing linear regression results.

    Wraps the backend Result and provides accessors for the coefficients
    and every inferential statistic.
    """
    _result: Result[LinearParams]

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        return self._result.params.coefficients

    @property
    def betas(self) -> NDArray[np.floating[Any]]:
        """Alias of coefficients."""
        return self._result.params.coefficients

    @property
    def standard_errors(self) -> NDArray[np.floating[Any]]:
        """SE(beta_i) = sqrt(RSS * (X'X)^-1[i, i] / df)."""
        return self._result.params.standard_errors

    @property
    def t_statistics(self) -> NDArray[np.floating[Any]]:
        return self._result.params.t_statistics

    @property
    def lower_bounds(self) -> NDArray[np.floating[Any]]:
        """Lower confidence bounds at the fitted confidence level."""
        return self._result.params.lower_bounds

    @property
    def upper_bounds(self) -> NDArray[np.floating[Any]]:
        """Upper confidence bounds at the fitted confidence level."""
        return self._result.params.upper_bounds

    @property
    def p_values(self) -> NDArray[np.floating[Any]]:
        """Two-sided p-values against beta_i = 0."""
        return self._result.params.p_values

    @property
    def r_squared(self) -> float:
        return self._result.params.r_squared

    @property
    def adjusted_r_squared(self) -> float:
        return self._result.params.adjusted_r_squared

    @property
    def residual_std_error(self) -> float:
        return self._result.params.residual_std_error

    @property
    def f_statistic(self) -> float:
        return self._result.params.f_statistic

    @property
    def overall_p_value(self) -> float:
        """P-value of the F test that the model has no predictive value."""
        return self._result.params.overall_p_value

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def n_observations(self) -> int:
        return self._result.params.n_observations

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def confidence(self) -> float:
        return self._result.params.confidence

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def predict(self, *x: Any) -> Iterator[float]:
        """
        Lazily compute fitted values sum_j beta_j * x_j.

        Args:
            *x: Predictor sequences in the same layout used for fitting

        Raises:
            DimensionError: If the predictor count differs from the
                coefficient count
        """
        predictors = Predictors.resolve(x)
        betas = self.coefficients
        check_length_matches(len(betas), len(predictors), names=('betas', 'X'))
        return _fitted_values(betas, predictors)

    def residuals(self, y: Any, *x: Any) -> Residuals:
        """Lazy residuals of this fit against (possibly new) data."""
        design = RegressionDesign.build(y, x)
        return Residuals(self.coefficients, design.response, design.predictors)

    def summary(self) -> str:
        """Generate a plain-text report of the fit."""
        p = self._result.params
        lines = [
            "Linear Regression Results",
            "=" * 72,
            f"Observations: {p.n_observations}",
            f"Predictors: {len(p.coefficients)}",
            f"Residual DF: {p.df_residual}",
            "",
            f"{'Index':<8} {'Estimate':>12} {'Std.Error':>12} {'P value':>12} "
            f"{'Lower':>12} {'Upper':>12}",
            "-" * 72,
        ]
        for i in range(len(p.coefficients)):
            lines.append(
                f"  b[{i}]:  {_fmt(p.coefficients[i])} {_fmt(p.standard_errors[i])} "
                f"{_fmt(p.p_values[i])} {_fmt(p.lower_bounds[i])} {_fmt(p.upper_bounds[i])}"
            )
        lines += [
            "-" * 72,
            f"Confidence level: {p.confidence:g}",
            f"R-squared: {p.r_squared:.6f}",
            f"Adj. R-squared: {p.adjusted_r_squared:.6f}",
            f"Residual Std. Error: {p.residual_std_error:.6f} on {p.df_residual} DF",
            f"F-statistic: {p.f_statistic:.4f}, overall p-value: {p.overall_p_value:.6g}",
            f"Backend: {self.backend_name}",
        ]
        for warning in self.warnings:
            lines.append(f"Warning: {warning}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.summary()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(n={self.n_observations}, "
            f"k={len(self.coefficients)}, r_squared={self.r_squared:.4f})"
        )


@dataclass(frozen=True, repr=False)
class PolyFitSolution(LinearSolution):
    """
    Polynomial fit results.

    Coefficient i belongs to x**i. Also carries the power-series adapters
    the fit was built from, so fitted values can be re-derived lazily:

        sol = poly_fit(y, x, 2)
        fitted = list(sol.predict(*sol.powers))
    """
    _powers: tuple[PowMap, ...] = field(default=())

    @property
    def degree(self) -> int:
        return len(self._powers) - 1

    @property
    def powers(self) -> tuple[PowMap, ...]:
        """Fresh checkpoints of the x**0 .. x**degree adapters."""
        return tuple(power.checkpoint() for power in self._powers)


@dataclass(frozen=True)
class LogisticParams:
    """
    Parameter payload for logistic regression.

    deviance is the final -2 log-likelihood. coefficients is read-only.
    """
    coefficients: NDArray[np.floating[Any]]
    deviance: float
    converged: bool
    iterations: int
    n_observations: int


@dataclass(frozen=True)
class LogisticSolution:
    """User-facing logistic regression results."""
    _result: Result[LogisticParams]

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        return self._result.params.coefficients

    @property
    def deviance(self) -> float:
        return self._result.params.deviance

    @property
    def log_likelihood(self) -> float:
        return -0.5 * self._result.params.deviance

    @property
    def converged(self) -> bool:
        return self._result.params.converged

    @property
    def iterations(self) -> int:
        return self._result.params.iterations

    @property
    def n_observations(self) -> int:
        return self._result.params.n_observations

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a plain-text report of the fit."""
        p = self._result.params
        lines = [
            "Logistic Regression Results",
            "=" * 48,
            f"Observations: {p.n_observations}",
            f"Iterations: {p.iterations} (converged: {p.converged})",
            f"Deviance (-2 log L): {p.deviance:.6f}",
            "",
            "Coefficients:",
            "-" * 48,
        ]
        for i, coef in enumerate(p.coefficients):
            lines.append(f"  b[{i}]:  {_fmt(coef)}")
        lines.append("-" * 48)
        lines.append(f"Backend: {self.backend_name}")
        for warning in self.warnings:
            lines.append(f"Warning: {warning}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LogisticSolution(n={self.n_observations}, "
            f"k={len(self.coefficients)}, converged={self.converged})"
        )


def _fitted_values(
    betas: NDArray[np.floating[Any]],
    predictors: Predictors,
) -> Iterator[float]:
    for step in lockstep(predictors.sequences):
        yield float(np.dot(betas, step))


def _fmt(value: float) -> str:
    return f"{value:12.6g}" if np.isfinite(value) else f"{'NA':>12}"
