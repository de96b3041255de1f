"""
Shared compute infrastructure for pyregress.

IMPORTANT: This is NOT where regression backends live. Those go in
regression/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Phase timing utilities
    linalg: Normal-equations accumulation and Gauss-Jordan inversion
"""

from pyregress.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
