"""
Generic result container for all pyregress computations.

Every backend returns a Result: the domain payload plus the metadata that
travels with it (method, convergence, timings, non-fatal warnings).

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, n_predictors, converged)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for a regression.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (coefficients, diagnostics)
        info: Structured metadata (method, convergence, iteration count)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> # Direct method
        >>> Result(
        ...     params=LinearParams(...),
        ...     info={'method': 'normal_equations', 'n_predictors': 2},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_gauss_jordan',
        ... )

        >>> # Iterative method
        >>> Result(
        ...     params=LogisticParams(...),
        ...     info={'method': 'newton_raphson', 'converged': True},
        ...     timing=None,
        ...     backend_name='cpu_newton_raphson',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
