"""
Link and family specification for logistic regression.

The Binomial family with logit link is the only GLM this library fits:

    p = g^-1(eta) = 1 / (1 + exp(-eta))      (inverse link)
    V(p) = p (1 - p)                          (variance, Newton weights)
    D = -2 sum[y log p + (1 - y) log(1 - p)]  (deviance for binary y)

References:
    McCullagh, P., & Nelder, J. A. (1989). Generalized Linear Models (2nd ed.)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import overload

import numpy as np
from numpy.typing import NDArray


@overload
def inverse_logit(eta: float) -> float: ...
@overload
def inverse_logit(eta: NDArray) -> NDArray: ...


def inverse_logit(eta):
    """
    The inverse logit 1 / (1 + exp(-eta)).

    Total: never raises. Overflow of exp(-eta) for very negative eta
    yields exactly 0.0.
    """
    with np.errstate(over='ignore'):
        result = 1.0 / (1.0 + np.exp(-np.asarray(eta, dtype=np.float64)))
    if np.ndim(result) == 0:
        return float(result)
    return result


class Link(ABC):
    """Abstract link function g(p) mapping mean to linear predictor."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def link(self, mu: NDArray) -> NDArray:
        """g(mu) -> eta."""
        ...

    @abstractmethod
    def linkinv(self, eta: NDArray) -> NDArray:
        """g^-1(eta) -> mu."""
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class LogitLink(Link):
    """Logit link: g(p) = log(p / (1 - p))."""

    @property
    def name(self) -> str:
        return 'logit'

    def link(self, mu: NDArray) -> NDArray:
        with np.errstate(divide='ignore', invalid='ignore'):
            return np.log(mu / (1 - mu))

    def linkinv(self, eta: NDArray) -> NDArray:
        return inverse_logit(eta)


class Binomial:
    """
    Binomial family for 0/1 responses. Link: logit.

    The dispersion is fixed at 1.
    """

    def __init__(self):
        self._link = LogitLink()

    @property
    def name(self) -> str:
        return 'binomial'

    @property
    def link(self) -> Link:
        return self._link

    def variance(self, mu: NDArray) -> NDArray:
        """V(p) = p (1 - p)."""
        return mu * (1 - mu)

    def deviance(self, y: NDArray[np.bool_], mu: NDArray) -> float:
        """
        -2 log-likelihood of boolean outcomes y at probabilities mu.

        A probability of exactly 0 or 1 at a contradicting outcome gives
        inf; NaN probabilities give NaN. Neither raises.
        """
        with np.errstate(divide='ignore', invalid='ignore'):
            log_lik = np.where(y, np.log(mu), np.log(1 - mu))
        return float(-2.0 * np.sum(log_lik))

    def __repr__(self) -> str:
        return f"Binomial(link={self._link.name!r})"
