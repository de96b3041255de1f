"""
Power-series adapters for polynomial regression.

A polynomial fit of degree N in x is a linear regression on the N + 1
predictors x^0, x^1, ..., x^N. PowMap produces one of those predictors
lazily from a base sequence, so fitting a polynomial never materializes a
design matrix.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from pyregress.core.sequences import Observations


class PowMap(Observations):
    """
    Lazy elementwise power of an observation sequence.

    Each advance pulls one value from the base sequence and computes
    value ** exponent once; only that current value is cached. Power 0
    always yields 1.0, which makes PowMap(x, 0) an intercept column that
    still ends where x ends.

    Attributes:
        exponent: The power applied to every element
        current: The most recently produced value (NaN before the first)
    """

    def __init__(self, base: Any, exponent: float):
        self._base = Observations.of(base)
        self.exponent = exponent
        self.current = float('nan')
        self._capabilities = self._base._capabilities

    def __next__(self) -> float:
        value = next(self._base)
        with np.errstate(invalid='ignore', divide='ignore', over='ignore'):
            self.current = float(np.power(value, self.exponent))
        return self.current

    def checkpoint(self) -> PowMap:
        copy = PowMap(self._base.checkpoint(), self.exponent)
        copy.current = self.current
        return copy

    def __repr__(self) -> str:
        return f"PowMap(exponent={self.exponent!r}, base={self._base!r})"


def pow_map(values: Any, exponent: float) -> PowMap:
    """Map a sequence to a power determined at runtime."""
    return PowMap(values, exponent)


def power_series(values: Any, degree: int) -> tuple[PowMap, ...]:
    """
    Adapters for exponents 0 through degree over one base sequence.

    Every adapter walks its own checkpoint of the base, so the adapters
    can be advanced independently (or in lockstep by a solver).
    """
    base = Observations.of(values)
    return tuple(PowMap(base.checkpoint(), exponent) for exponent in range(degree + 1))
