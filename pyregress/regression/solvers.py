"""
Public regression API.

Every entry point takes the response first, then the predictors in either
layout:

    linear_regress(y, repeat(1), x1, x2)     # FIXED: one argument each
    linear_regress(y, [ones, x1, x2])        # COLLECTION: one sequence of them

Input validation happens here. Backends trust what they are given.
"""

import warnings
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyregress.core.validation import (
    check_1d,
    check_array,
    check_confidence,
    check_non_negative_int,
    check_output_buffer,
    check_positive,
    check_positive_int,
)
from pyregress.regression.design import RegressionDesign
from pyregress.regression.power import power_series
from pyregress.regression.residuals import Residuals
from pyregress.regression.solution import (
    LinearSolution,
    PolyFitSolution,
    LogisticSolution,
)
from pyregress.regression.backends.cpu import GaussJordanBackend
from pyregress.regression.backends.cpu_mle import NewtonRaphsonBackend


DEFAULT_CONFIDENCE = 0.95
DEFAULT_TOL = 1e-6
DEFAULT_MAX_ITER = 1000


def linear_regress_beta(y: Any, *x: Any) -> NDArray[np.floating[Any]]:
    """
    Least-squares coefficients only.

    Makes exactly one pass over every sequence, so one-shot iterators and
    generators are fine. Stops at the shortest sequence; infinite
    predictors such as itertools.repeat(1) are allowed.

    Args:
        y: Response values
        *x: Predictors, FIXED or COLLECTION layout

    Returns:
        Coefficients, shape (k,), index-aligned with the predictors

    Example:
        >>> from itertools import repeat
        >>> linear_regress_beta([3, 5, 7], repeat(1), [1, 2, 3])
        array([1., 2.])
    """
    design = RegressionDesign.build(y, x)
    return GaussJordanBackend().coefficients(design)


def linear_regress_beta_buf(
    buf: NDArray[np.floating[Any]],
    y: Any,
    *x: Any,
) -> NDArray[np.floating[Any]]:
    """
    linear_regress_beta() writing into a caller-supplied buffer.

    Returns buf[:k] when buf holds at least k elements. Otherwise buf is
    not touched and a fresh array is returned.

    Raises:
        ValidationError: If buf is not a writable float64 numpy array
        DimensionError: If buf is not 1D
    """
    buf = check_output_buffer(buf, 'buf')
    design = RegressionDesign.build(y, x)
    return GaussJordanBackend().coefficients(design, out=buf)


def linear_regress(
    y: Any,
    *x: Any,
    confidence: float = DEFAULT_CONFIDENCE,
) -> LinearSolution:
    """
    Fit a linear regression and compute its inferential statistics.

    Two passes are made over every sequence: one for the coefficients and
    one for the residuals. Iterators are checkpointed with itertools.tee,
    so values between the two passes are buffered.

    Args:
        y: Response values
        *x: Predictors, FIXED or COLLECTION layout
        confidence: Confidence level for the coefficient bounds, in [0, 1]

    Returns:
        LinearSolution with coefficients, standard errors, bounds,
        p-values, R^2, adjusted R^2, residual standard error and the
        overall F test

    Raises:
        ValidationError: If confidence is outside [0, 1]

    Example:
        >>> from itertools import repeat
        >>> sol = linear_regress(weights, repeat(1), heights)
        >>> print(sol.summary())
    """
    confidence = check_confidence(confidence)
    design = RegressionDesign.build(y, x)
    result = GaussJordanBackend().solve(design, confidence=confidence)
    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)
    return LinearSolution(_result=result)


def residuals(betas: Any, y: Any, *x: Any) -> Residuals:
    """
    Lazy residuals y - sum_j betas[j] * x_j.

    Raises:
        ValidationError: If betas is not numeric
        DimensionError: If betas is not 1-D or its length differs from
            the predictor count
    """
    betas = check_array(betas, 'betas')
    check_1d(betas, 'betas')
    design = RegressionDesign.build(y, x)
    return Residuals(betas, design.response, design.predictors)


def poly_fit_beta(y: Any, x: Any, n: int) -> NDArray[np.floating[Any]]:
    """
    Coefficients of a degree-n polynomial in x, lowest power first.

    Equivalent to linear_regress_beta(y, x**0, x**1, ..., x**n).
    """
    n = check_non_negative_int(n, 'n')
    return linear_regress_beta(y, *power_series(x, n))


def poly_fit_beta_buf(
    buf: NDArray[np.floating[Any]],
    y: Any,
    x: Any,
    n: int,
) -> NDArray[np.floating[Any]]:
    """poly_fit_beta() writing into buf[:n + 1] when it is large enough."""
    buf = check_output_buffer(buf, 'buf')
    n = check_non_negative_int(n, 'n')
    return linear_regress_beta_buf(buf, y, *power_series(x, n))


def poly_fit(
    y: Any,
    x: Any,
    n: int,
    confidence: float = DEFAULT_CONFIDENCE,
) -> PolyFitSolution:
    """
    Fit a degree-n polynomial with full inferential statistics.

    Coefficient i belongs to x**i. The returned solution keeps the power
    adapters unconsumed (see PolyFitSolution.powers).

    Raises:
        ValidationError: If confidence is outside [0, 1] or n is negative
    """
    confidence = check_confidence(confidence)
    n = check_non_negative_int(n, 'n')
    powers = power_series(x, n)
    design = RegressionDesign.build(y, tuple(power.checkpoint() for power in powers))
    result = GaussJordanBackend().solve(design, confidence=confidence)
    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)
    return PolyFitSolution(_result=result, _powers=powers)


def logistic_regress_beta(y: Any, *x: Any) -> NDArray[np.floating[Any]]:
    """
    Logistic regression coefficients by maximum likelihood.

    Responses are read by truthiness (any nonzero value is a success).
    Everything is materialized, so y must be finite; predictors may be
    infinite and are truncated to the shortest sequence.

    Raises:
        ValidationError: If y is known to be infinite
    """
    return logistic_regress(y, *x).coefficients


def logistic_regress(
    y: Any,
    *x: Any,
    tol: float = DEFAULT_TOL,
    max_iter: int = DEFAULT_MAX_ITER,
) -> LogisticSolution:
    """
    Fit a logistic regression by Newton-Raphson.

    Args:
        y: Binary response values (read by truthiness)
        *x: Predictors, FIXED or COLLECTION layout
        tol: Stop once the deviance improves by less than tol
        max_iter: Cap on Newton-Raphson updates

    Returns:
        LogisticSolution with coefficients, deviance and whether the
        iteration converged. Not converging emits a RuntimeWarning.

    Raises:
        ValidationError: If y is known to be infinite, or tol / max_iter
            are not positive
    """
    tol = check_positive(tol, 'tol')
    max_iter = check_positive_int(max_iter, 'max_iter')
    design = RegressionDesign.build(y, x).materialize()
    result = NewtonRaphsonBackend().solve(design, tol=tol, max_iter=max_iter)
    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)
    return LogisticSolution(_result=result)