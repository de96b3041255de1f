"""
Core protocols for pyregress.

These define the structural interfaces the solvers rely on. We use Protocol
(structural typing) rather than ABC (nominal typing) so that any object with
the right methods can be fed to a regression.

Design Principles:
    - Two capability tiers: single-pass producers and checkpointable producers
    - Capability-driven: use supports() for optional features
    - Minimal contracts: the Builder needs only __next__
"""

from typing import Protocol, TypeVar, Iterator, runtime_checkable

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class ObservationSource(Protocol):
    """
    Single-pass producer of numeric observations.

    Iteration yields floats and ends with StopIteration when the source is
    exhausted. Infinite sources simply never stop; every solver advances all
    of its sources in lockstep and halts at the shortest one.
    """

    def __iter__(self) -> Iterator[float]:
        ...

    def __next__(self) -> float:
        ...

    def supports(self, capability: str) -> bool:
        """
        Check if this source supports a given capability.

        Args:
            capability: One of the constants in pyregress.core.capabilities

        Returns:
            True if the capability is supported, False otherwise

        Note:
            Unknown capabilities MUST return False, never raise.
        """
        ...


@runtime_checkable
class CheckpointableSource(ObservationSource, Protocol):
    """
    Multi-pass producer: a single-pass source that can mark its position.

    checkpoint() returns an independent source positioned where this one
    currently is. Advancing either afterwards never affects the other.
    """

    def checkpoint(self) -> 'CheckpointableSource':
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a design and produces a Result wrapping a parameter
    payload. Backends are stateless; configuration arrives through solve().

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_gauss_jordan', 'cpu_newton_raphson'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the regression.

        Args:
            design: Domain-specific design holding the observation sources

        Returns:
            Result envelope containing parameter payload and metadata
        """
        ...
