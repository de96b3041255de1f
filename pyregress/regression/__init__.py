"""
Linear, polynomial and logistic regression over sequences.

Public API:
    linear_regress_beta(y, *x) -> ndarray
    linear_regress_beta_buf(buf, y, *x) -> ndarray
    linear_regress(y, *x, confidence=0.95) -> LinearSolution
    residuals(betas, y, *x) -> Residuals
    poly_fit_beta(y, x, n) / poly_fit_beta_buf(buf, y, x, n) -> ndarray
    poly_fit(y, x, n, confidence=0.95) -> PolyFitSolution
    logistic_regress_beta(y, *x) -> ndarray
    logistic_regress(y, *x, tol=1e-6, max_iter=1000) -> LogisticSolution

Predictors may be passed one argument per predictor, or as a single
sequence of predictor sequences. Any iterable of numbers works; an
intercept is just another predictor, usually itertools.repeat(1).

Example:
    >>> from itertools import repeat
    >>> from pyregress.regression import linear_regress
    >>> sol = linear_regress(weights, repeat(1), heights)
    >>> print(sol.coefficients)
    >>> print(sol.summary())
"""

from pyregress.regression.design import Layout, Predictors, RegressionDesign, LogisticDesign
from pyregress.regression.families import inverse_logit, Binomial, LogitLink
from pyregress.regression.power import PowMap, pow_map
from pyregress.regression.residuals import Residuals
from pyregress.regression.solution import (
    LinearParams,
    LinearSolution,
    PolyFitSolution,
    LogisticParams,
    LogisticSolution,
)
from pyregress.regression.solvers import (
    DEFAULT_CONFIDENCE,
    DEFAULT_TOL,
    DEFAULT_MAX_ITER,
    linear_regress_beta,
    linear_regress_beta_buf,
    linear_regress,
    residuals,
    poly_fit_beta,
    poly_fit_beta_buf,
    poly_fit,
    logistic_regress_beta,
    logistic_regress,
)

__all__ = [
    # Solvers
    "linear_regress_beta",
    "linear_regress_beta_buf",
    "linear_regress",
    "residuals",
    "poly_fit_beta",
    "poly_fit_beta_buf",
    "poly_fit",
    "logistic_regress_beta",
    "logistic_regress",
    "DEFAULT_CONFIDENCE",
    "DEFAULT_TOL",
    "DEFAULT_MAX_ITER",
    # Design
    "Layout",
    "Predictors",
    "RegressionDesign",
    "LogisticDesign",
    # Families
    "inverse_logit",
    "Binomial",
    "LogitLink",
    # Sequences
    "PowMap",
    "pow_map",
    "Residuals",
    # Solutions
    "LinearParams",
    "LinearSolution",
    "PolyFitSolution",
    "LogisticParams",
    "LogisticSolution",
]
