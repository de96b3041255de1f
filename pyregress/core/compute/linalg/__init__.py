"""
Linear algebra kernels for pyregress.

All functions follow these conventions:
    - NumPy float64 throughout
    - Each accumulation returns a structured result dataclass
    - Non-finite values propagate silently; checks are opt-in

Submodules:
    normal_equations: Single-pass X'X / X'Y accumulation from sequences
    gauss_jordan: In-place Gauss-Jordan inversion with partial pivoting
"""

from pyregress.core.compute.linalg.normal_equations import (
    NormalEquations,
    accumulate_normal_equations,
)
from pyregress.core.compute.linalg.gauss_jordan import (
    invert,
    is_finite_inverse,
    require_finite_inverse,
)

__all__ = [
    # Normal equations
    "NormalEquations",
    "accumulate_normal_equations",
    # Inversion
    "invert",
    "is_finite_inverse",
    "require_finite_inverse",
]
