"""
pyregress: regression over arbitrary sequences of numbers.

Fits linear, polynomial and logistic models directly from lists, arrays,
generators and infinite iterators, without building a design matrix.

Submodules:
    core: Observation cursors, linear algebra kernels, distributions
    regression: Linear, polynomial and logistic regression
"""

__version__ = "0.1.0"

from pyregress import regression
from pyregress.core.compute.linalg import invert
from pyregress.regression import (
    linear_regress_beta,
    linear_regress_beta_buf,
    linear_regress,
    residuals,
    poly_fit_beta,
    poly_fit_beta_buf,
    poly_fit,
    logistic_regress_beta,
    logistic_regress,
    inverse_logit,
    pow_map,
)

__all__ = [
    "__version__",
    "regression",
    "linear_regress_beta",
    "linear_regress_beta_buf",
    "linear_regress",
    "residuals",
    "poly_fit_beta",
    "poly_fit_beta_buf",
    "poly_fit",
    "logistic_regress_beta",
    "logistic_regress",
    "inverse_logit",
    "pow_map",
    "invert",
]
