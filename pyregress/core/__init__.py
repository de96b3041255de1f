"""
Core infrastructure for pyregress.

This module provides the shared abstractions and numeric utilities used by
the regression solvers.

Key components:
    protocols: ObservationSource, CheckpointableSource, Backend protocols
    sequences: Observations cursors over lists, arrays and iterators
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    distributions: Student's t and Fisher F probabilities
    correlation: Streaming Pearson correlation
    compute: Timing, normal-equations accumulation, Gauss-Jordan inversion
"""

from pyregress.core.protocols import ObservationSource, CheckpointableSource, Backend
from pyregress.core.sequences import Observations
from pyregress.core.result import Result
from pyregress.core.exceptions import (
    PyRegressError,
    ValidationError,
    DimensionError,
    DistributionArgumentError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "ObservationSource",
    "CheckpointableSource",
    "Backend",
    # Sequences
    "Observations",
    # Result
    "Result",
    # Exceptions
    "PyRegressError",
    "ValidationError",
    "DimensionError",
    "DistributionArgumentError",
    "NumericalError",
    "SingularMatrixError",
]
