"""
Streaming Pearson correlation.

Accumulates co-moments one pair at a time with Welford's update, so the
correlation of two arbitrarily long streams is available after a single
pass without storing either stream. Two accumulators over disjoint chunks
can be merged (Chan et al. pairwise update).
"""

from __future__ import annotations

import math


class PearsonCorrelation:
    """
    Running Pearson correlation of paired observations.

    Usage:
        acc = PearsonCorrelation()
        for x, y in pairs:
            acc.put(x, y)
        r = acc.correlation
    """

    __slots__ = ('_n', '_mean_x', '_mean_y', '_m2_x', '_m2_y', '_c_xy')

    def __init__(self):
        self._n = 0
        self._mean_x = 0.0
        self._mean_y = 0.0
        self._m2_x = 0.0
        self._m2_y = 0.0
        self._c_xy = 0.0

    def put(self, x: float, y: float) -> None:
        """Add one (x, y) pair."""
        self._n += 1
        dx = x - self._mean_x
        self._mean_x += dx / self._n
        dy = y - self._mean_y
        self._mean_y += dy / self._n
        # Use the updated mean for one factor, the old one for the other
        self._m2_x += dx * (x - self._mean_x)
        self._m2_y += dy * (y - self._mean_y)
        self._c_xy += dx * (y - self._mean_y)

    def merge(self, other: PearsonCorrelation) -> None:
        """Fold another accumulator's pairs into this one."""
        if other._n == 0:
            return
        if self._n == 0:
            for slot in self.__slots__:
                setattr(self, slot, getattr(other, slot))
            return
        n = self._n + other._n
        dx = other._mean_x - self._mean_x
        dy = other._mean_y - self._mean_y
        weight = self._n * other._n / n
        self._m2_x += other._m2_x + dx * dx * weight
        self._m2_y += other._m2_y + dy * dy * weight
        self._c_xy += other._c_xy + dx * dy * weight
        self._mean_x += dx * other._n / n
        self._mean_y += dy * other._n / n
        self._n = n

    @property
    def n(self) -> int:
        return self._n

    @property
    def mean_x(self) -> float:
        return self._mean_x

    @property
    def mean_y(self) -> float:
        return self._mean_y

    @property
    def covariance(self) -> float:
        """Sample covariance (n - 1 denominator); NaN for fewer than 2 pairs."""
        if self._n < 2:
            return math.nan
        return self._c_xy / (self._n - 1)

    @property
    def correlation(self) -> float:
        """
        Pearson r.

        NaN when fewer than two pairs were seen or either stream has zero
        variance. Clamped to [-1, 1] against rounding.
        """
        denominator = math.sqrt(self._m2_x * self._m2_y)
        if self._n < 2 or not denominator > 0:
            return math.nan
        r = self._c_xy / denominator
        return max(-1.0, min(1.0, r))

    def __repr__(self) -> str:
        return f"PearsonCorrelation(n={self._n}, correlation={self.correlation:.6f})"
