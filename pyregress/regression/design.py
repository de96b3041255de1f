"""
Regression Design.

A design pairs one response sequence with k predictor sequences. It knows
it is building a regression; the Observations cursors it wraps don't.

Predictors arrive in one of two shapes, modelled as a tagged union:

    FIXED       f(y, x1, x2, ...)  independently typed sequences
    COLLECTION  f(y, [x1, x2])     one sequence whose elements are sequences

A COLLECTION is materialized into a tuple first, since its length fixes the
size of every matrix built afterwards.
"""

from __future__ import annotations

import enum
import itertools
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyregress.core.capabilities import CAPABILITY_RANDOM_ACCESS
from pyregress.core.sequences import Observations, is_known_infinite
from pyregress.core.validation import check_not_infinite


class Layout(enum.Enum):
    """How the predictor sequences were supplied."""
    FIXED = 'fixed'
    COLLECTION = 'collection'


@dataclass(frozen=True)
class Predictors:
    """
    Ordered predictor sequences plus the layout they came in.

    Construction:
        Predictors.resolve((x1, x2))        # FIXED
        Predictors.resolve(([x1, x2],))     # COLLECTION
    """
    sequences: tuple[Observations, ...]
    layout: Layout

    @classmethod
    def resolve(cls, args: tuple[Any, ...]) -> Predictors:
        """
        Dispatch on the shape of the predictor arguments.

        Exactly one argument whose first element is itself a non-string
        iterable is a COLLECTION; anything else is FIXED.
        """
        if len(args) == 1:
            collection, rebuilt = _peek_collection(args[0])
            if collection is not None:
                return cls(
                    sequences=tuple(Observations.of(inner) for inner in collection),
                    layout=Layout.COLLECTION,
                )
            args = (rebuilt,)
        return cls(
            sequences=tuple(Observations.of(arg) for arg in args),
            layout=Layout.FIXED,
        )

    def __len__(self) -> int:
        return len(self.sequences)

    def __iter__(self):
        return iter(self.sequences)

    def __getitem__(self, index: int) -> Observations:
        return self.sequences[index]

    def checkpoint(self) -> Predictors:
        """Independent copies of every predictor at its current position."""
        return Predictors(
            sequences=tuple(seq.checkpoint() for seq in self.sequences),
            layout=self.layout,
        )


@dataclass(frozen=True)
class RegressionDesign:
    """
    Response and predictor sequences for one regression.

    Construct via build(). The sequences are cursors: solving a design
    consumes it. Take a checkpoint() first when a second pass is needed.
    """
    response: Observations
    predictors: Predictors

    @classmethod
    def build(cls, y: Any, x: tuple[Any, ...]) -> RegressionDesign:
        """
        Build a design from raw sequences.

        Args:
            y: Response values (any iterable of numbers)
            x: Predictor arguments as passed to a public solver

        Returns:
            RegressionDesign ready for a backend
        """
        return cls(response=Observations.of(y), predictors=Predictors.resolve(x))

    @property
    def k(self) -> int:
        """Number of predictors (= number of coefficients)."""
        return len(self.predictors)

    @property
    def layout(self) -> Layout:
        return self.predictors.layout

    def checkpoint(self) -> RegressionDesign:
        """Independent copy of every sequence at its current position."""
        return RegressionDesign(
            response=self.response.checkpoint(),
            predictors=self.predictors.checkpoint(),
        )

    def supports(self, capability: str) -> bool:
        """True when the response and every predictor support capability."""
        sources = (self.response, *self.predictors)
        return all(source.supports(capability) for source in sources)

    def materialize(self) -> LogisticDesign:
        """
        Read every sequence into arrays for random access.

        The response must be finite. Predictors may be infinite; every
        sequence is truncated to the shortest one.
        Random-access sources are sliced rather than iterated.

        Raises:
            ValidationError: If the response is known to be infinite
        """
        check_not_infinite(self.response, 'y')
        y = _read(self.response)
        n = len(y)
        columns = [_read(seq, n) for seq in self.predictors]
        n = min([n, *(len(col) for col in columns)])
        X = np.empty((self.k, n), dtype=np.float64)
        for i, col in enumerate(columns):
            X[i] = col[:n]
        return LogisticDesign(_X=X, _y=y[:n] != 0)


@dataclass(frozen=True)
class LogisticDesign:
    """
    Materialized data for logistic regression.

    Stores predictors row-wise, X[j, i] = predictor j at observation i,
    because every Newton-Raphson step walks whole predictor columns.
    """
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.bool_]

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Predictor matrix (k x n)."""
        return self._X

    @property
    def y(self) -> NDArray[np.bool_]:
        """Response as booleans (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._y.shape[0]

    @property
    def k(self) -> int:
        """Number of predictors."""
        return self._X.shape[0]


def _read(source: Observations, limit: int | None = None) -> NDArray[np.floating[Any]]:
    """Read up to limit values, slicing random-access storage directly."""
    if source.supports(CAPABILITY_RANDOM_ACCESS):
        values = source.remaining()
        return values if limit is None else values[:limit]
    return np.fromiter(itertools.islice(source, limit), dtype=np.float64)


def _peek_collection(arg: Any) -> tuple[tuple[Any, ...] | None, Any]:
    """
    Split off a sequence of sequences.

    Returns (collection, arg). collection is the materialized outer
    sequence, or None when arg is a plain sequence of numbers. Peeking at a
    one-shot iterator consumes its first element, so in that case the
    returned arg is a rebuilt iterator with the element chained back on.
    """
    if isinstance(arg, (Observations, str, bytes)):
        return None, arg
    if isinstance(arg, np.ndarray):
        return (tuple(arg) if arg.ndim == 2 else None), arg
    if isinstance(arg, Sequence):
        if len(arg) and _is_sequence(arg[0]):
            return tuple(arg), arg
        return None, arg
    if isinstance(arg, Iterable) and not is_known_infinite(arg):
        iterator = iter(arg)
        try:
            first = next(iterator)
        except StopIteration:
            return None, iterator
        rebuilt = itertools.chain([first], iterator)
        if _is_sequence(first):
            return tuple(rebuilt), arg
        return None, rebuilt
    return None, arg


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes))
