"""
Distribution functions used to turn test statistics into probabilities.

Thin wrappers over scipy.stats that reject invalid arguments loudly.
SciPy answers an invalid degrees-of-freedom argument with a silent NaN;
these wrappers raise DistributionArgumentError instead, so callers can
decide per field what a degenerate input means.
"""

import math

from scipy import stats

from pyregress.core.exceptions import DistributionArgumentError


def students_t_cdf(t: float, df: float) -> float:
    """P(T <= t) for Student's t with df degrees of freedom."""
    _check_df(df, 'df', 'students_t_cdf')
    _check_not_nan(t, 't', 'students_t_cdf')
    return float(stats.t.cdf(t, df))


def students_t_cdf_r(t: float, df: float) -> float:
    """P(T >= t) for Student's t with df degrees of freedom."""
    _check_df(df, 'df', 'students_t_cdf_r')
    _check_not_nan(t, 't', 'students_t_cdf_r')
    return float(stats.t.sf(t, df))


def inv_students_t_cdf(p: float, df: float) -> float:
    """Quantile q with P(T <= q) = p. Returns -inf at p=0 and inf at p=1."""
    _check_df(df, 'df', 'inv_students_t_cdf')
    if not 0.0 <= p <= 1.0:
        raise DistributionArgumentError(
            f"inv_students_t_cdf: p must be in [0, 1], got {p}",
            function='inv_students_t_cdf', argument='p', value=p,
        )
    return float(stats.t.ppf(p, df))


def fisher_cdf_r(f: float, df1: float, df2: float) -> float:
    """P(F >= f) for Fisher's F with (df1, df2) degrees of freedom."""
    _check_df(df1, 'df1', 'fisher_cdf_r')
    _check_df(df2, 'df2', 'fisher_cdf_r')
    _check_not_nan(f, 'f', 'fisher_cdf_r')
    return float(stats.f.sf(f, df1, df2))


def _check_df(df: float, argument: str, function: str) -> None:
    if not (math.isfinite(df) and df > 0):
        raise DistributionArgumentError(
            f"{function}: {argument} must be finite and > 0, got {df}",
            function=function, argument=argument, value=df,
        )


def _check_not_nan(x: float, argument: str, function: str) -> None:
    if math.isnan(x):
        raise DistributionArgumentError(
            f"{function}: {argument} is NaN",
            function=function, argument=argument, value=x,
        )
