"""
Regression backends.

Available backends:
    GaussJordanBackend: Normal equations with Gauss-Jordan inversion (linear)
    NewtonRaphsonBackend: Newton-Raphson maximum likelihood (logistic)
"""

from pyregress.regression.backends.cpu import GaussJordanBackend
from pyregress.regression.backends.cpu_mle import NewtonRaphsonBackend

__all__ = [
    "GaussJordanBackend",
    "NewtonRaphsonBackend",
]
