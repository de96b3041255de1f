"""
Observation sequences for pyregress.

An Observations object is a cursor over a stream of numeric values. It is
the "I have data" abstraction of this library: it does not know whether it
feeds a response or a predictor, it only hands out floats one at a time and
can mark its position with checkpoint().

Two cursor kinds cover everything Python can iterate:

    IndexedObservations  lists, tuples, ranges, 1-D arrays. checkpoint()
                         copies the position and shares the storage.
    StreamObservations   iterators and generators. checkpoint() splits the
                         iterator with itertools.tee, so values consumed by
                         one copy stay buffered for the other.

Usage:
    from pyregress.core.sequences import Observations

    obs = Observations.of([1, 2, 3])
    saved = obs.checkpoint()
    list(obs)    # [1.0, 2.0, 3.0]
    list(saved)  # [1.0, 2.0, 3.0]
"""

from __future__ import annotations

import itertools
import operator
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

import numpy as np

from pyregress.core.capabilities import (
    CAPABILITY_SINGLE_PASS,
    CAPABILITY_REPEATABLE,
    CAPABILITY_RANDOM_ACCESS,
    CAPABILITY_INFINITE,
)
from pyregress.core.exceptions import ValidationError, DimensionError


class Observations:
    """
    Cursor over a stream of numeric observations.

    Construct via Observations.of(), not directly. Every value is promoted
    to float when it is consumed.
    """

    _capabilities: frozenset[str] = frozenset({CAPABILITY_SINGLE_PASS})

    def __iter__(self) -> Iterator[float]:
        return self

    def __next__(self) -> float:
        raise NotImplementedError

    def checkpoint(self) -> Observations:
        """Return an independent cursor positioned where this one is."""
        raise NotImplementedError

    def supports(self, capability: str) -> bool:
        """
        Check if this sequence supports a capability.

        Args:
            capability: Use constants from pyregress.core.capabilities

        Returns:
            True if supported, False otherwise

        Note:
            Unknown capabilities return False, never raise.
        """
        return capability in self._capabilities

    @property
    def is_infinite(self) -> bool:
        return self.supports(CAPABILITY_INFINITE)

    # === Factory ===

    @classmethod
    def of(cls, values: Any) -> Observations:
        """
        Wrap any iterable of numbers in a cursor.

        Args:
            values: An Observations (returned as is), a 1-D array, a
                Sequence, or any other iterable/iterator

        Returns:
            An Observations cursor at the start of values

        Raises:
            DimensionError: If values is an array with ndim != 1
            ValidationError: If values is a string or not iterable
        """
        if isinstance(values, Observations):
            return values
        if isinstance(values, np.ndarray):
            if values.ndim != 1:
                raise DimensionError(
                    f"observation array must be 1D, got {values.ndim}D "
                    f"with shape {values.shape}"
                )
            return IndexedObservations(values)
        if isinstance(values, (str, bytes)):
            raise ValidationError(
                f"observations must be numeric, got {type(values).__name__}"
            )
        if isinstance(values, Sequence):
            return IndexedObservations(values)
        if isinstance(values, Iterable):
            return StreamObservations(values)
        raise ValidationError(
            f"observations must be iterable, got {type(values).__name__}"
        )


class IndexedObservations(Observations):
    """Cursor over random-access storage. Checkpoints share the storage."""

    _capabilities = frozenset({
        CAPABILITY_SINGLE_PASS,
        CAPABILITY_REPEATABLE,
        CAPABILITY_RANDOM_ACCESS,
    })

    def __init__(self, values: Sequence[Any] | np.ndarray, position: int = 0):
        self._values = values
        self._position = position

    def __next__(self) -> float:
        if self._position >= len(self._values):
            raise StopIteration
        value = self._values[self._position]
        self._position += 1
        return float(value)

    def __len__(self) -> int:
        return max(len(self._values) - self._position, 0)

    def checkpoint(self) -> IndexedObservations:
        return IndexedObservations(self._values, self._position)

    def remaining(self) -> np.ndarray:
        """Read every unconsumed value at once, leaving the cursor exhausted."""
        if not isinstance(self._values, (np.ndarray, list, tuple, range)):
            # deque and other Sequences without slicing
            return np.fromiter(self, dtype=np.float64)
        values = np.asarray(self._values[self._position:], dtype=np.float64)
        self._position = max(len(self._values), self._position)
        return values

    def __repr__(self) -> str:
        return f"IndexedObservations(position={self._position}, length={len(self._values)})"


class StreamObservations(Observations):
    """Cursor over a one-shot iterator. Checkpoints are tee'd copies."""

    def __init__(self, values: Iterable[Any], infinite: bool | None = None):
        if infinite is None:
            infinite = is_known_infinite(values)
        self._iterator = iter(values)
        self._infinite = infinite
        if infinite:
            self._capabilities = Observations._capabilities | {CAPABILITY_INFINITE}

    def __next__(self) -> float:
        return float(next(self._iterator))

    def checkpoint(self) -> StreamObservations:
        self._iterator, other = itertools.tee(self._iterator)
        return StreamObservations(other, infinite=self._infinite)

    def __repr__(self) -> str:
        return f"StreamObservations(infinite={self._infinite})"


def is_known_infinite(values: Any) -> bool:
    """
    Recognize the standard library's unbounded iterators.

    itertools.count, itertools.cycle and itertools.repeat without a
    ``times`` argument never stop. Anything else is assumed finite.
    """
    if isinstance(values, Observations):
        return values.is_infinite
    if isinstance(values, (itertools.count, itertools.cycle)):
        return True
    if isinstance(values, itertools.repeat):
        # Unbounded repeat reports no length hint
        return operator.length_hint(values, -1) == -1
    return False


def lockstep(sources: Sequence[Observations]) -> Iterator[tuple[float, ...]]:
    """
    Advance every source together, yielding one tuple per step.

    Stops the instant any source is exhausted, checking them in order,
    so infinite sources are safe as long as one source is finite.
    """
    while True:
        step = []
        for source in sources:
            try:
                step.append(next(source))
            except StopIteration:
                return
        yield tuple(step)
