"""
Inferential statistics for a fitted linear model.

Turns the coefficients, the inverse of X'X, the residual sum of squares
and the (fitted, actual) correlation from the residual pass into standard
errors, confidence bounds, p-values and goodness-of-fit measures.

A distribution function that rejects its arguments leaves only the field
it was computing NaN. Everything else is still returned.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyregress.core.correlation import PearsonCorrelation
from pyregress.core.distributions import (
    students_t_cdf,
    students_t_cdf_r,
    inv_students_t_cdf,
    fisher_cdf_r,
)
from pyregress.core.exceptions import DistributionArgumentError
from pyregress.regression.solution import LinearParams


def linear_statistics(
    betas: NDArray[np.floating[Any]],
    inverse: NDArray[np.floating[Any]],
    rss: float,
    correlation: PearsonCorrelation,
    confidence: float,
) -> tuple[LinearParams, list[str]]:
    """
    Compute every inferential field of a linear fit.

    With n observations, k coefficients and df = n - k:

        R^2        = cor(fitted, actual)^2
        adj R^2    = 1 - (1 - R^2)(n - 1) / df
        SE_i       = sqrt(RSS * inv[i, i] / df)
        p_i        = 2 min(P(T <= t_i), P(T >= t_i)),  t_i = beta_i / SE_i
        delta_i    = q((1 - confidence) / 2, df) * SE_i
        bounds     = beta_i + delta_i, beta_i - delta_i
        F          = (R^2 / (k - 1)) / ((1 - R^2) / df)

    Args:
        betas: Coefficients, shape (k,)
        inverse: (X'X)^-1, shape (k, k)
        rss: Residual sum of squares
        correlation: Accumulator fed with (fitted, actual) pairs
        confidence: Confidence level for the bounds, in [0, 1]

    Returns:
        (params, warnings). warnings is non-empty when df <= 0, in which
        case every df-dependent field is NaN.
    """
    k = len(betas)
    n = correlation.n
    df = n - k
    warnings_list: list[str] = []

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        r_squared = np.float64(correlation.correlation) ** 2
        if df > 0:
            adjusted = 1.0 - (1.0 - r_squared) * (n - 1) / df
            residual_error = np.sqrt(np.float64(rss) / df)
            std_errors = np.sqrt(rss * np.diag(inverse) / df)
            f_statistic = (r_squared / np.float64(k - 1)) / ((1.0 - r_squared) / df)
        else:
            warnings_list.append(
                f"Residual degrees of freedom is {df} (n={n}, k={k}); "
                f"standard errors, bounds and p-values are undefined"
            )
            adjusted = residual_error = f_statistic = np.nan
            std_errors = np.full(k, np.nan)
        t_stats = betas / std_errors

    p_values = np.array([_two_sided_p(t, df) for t in t_stats], dtype=np.float64)

    quantile = _or_nan(inv_students_t_cdf, (1.0 - confidence) / 2.0, df)
    with np.errstate(invalid='ignore'):
        delta = quantile * std_errors
        lower = betas + delta
        upper = betas - delta

    overall_p = _or_nan(fisher_cdf_r, float(f_statistic), k - 1, df)

    params = LinearParams(
        coefficients=read_only(betas),
        standard_errors=read_only(std_errors),
        t_statistics=read_only(t_stats),
        lower_bounds=read_only(lower),
        upper_bounds=read_only(upper),
        p_values=read_only(p_values),
        r_squared=float(r_squared),
        adjusted_r_squared=float(adjusted),
        residual_std_error=float(residual_error),
        f_statistic=float(f_statistic),
        overall_p_value=overall_p,
        rss=float(rss),
        n_observations=n,
        df_residual=df,
        confidence=confidence,
    )
    return params, warnings_list


def _two_sided_p(t: float, df: int) -> float:
    try:
        return 2.0 * min(students_t_cdf(t, df), students_t_cdf_r(t, df))
    except DistributionArgumentError:
        return math.nan


def _or_nan(function, *args) -> float:
    """Call a distribution function; NaN when it rejects the arguments."""
    try:
        return function(*args)
    except DistributionArgumentError:
        return math.nan


def read_only(array: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Float64 copy of array that rejects writes."""
    frozen = np.array(array, dtype=np.float64)
    frozen.setflags(write=False)
    return frozen
