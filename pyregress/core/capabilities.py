"""
Capability string constants for observation sequences.

This module is the SINGLE SOURCE OF TRUTH for capability strings.
Import from here, never use raw strings.

Usage:
    from pyregress.core.capabilities import CAPABILITY_RANDOM_ACCESS

    if obs.supports(CAPABILITY_RANDOM_ACCESS):
        values = obs.remaining()    # slice the storage instead of iterating
"""

# Values can be consumed one at a time (every sequence supports this)
CAPABILITY_SINGLE_PASS = 'single_pass'

# checkpoint() restarts without buffering (backing storage is shared)
CAPABILITY_REPEATABLE = 'repeatable'

# Backing storage supports len() and indexing
CAPABILITY_RANDOM_ACCESS = 'random_access'

# Sequence is known never to end (itertools.count, cycle, unbounded repeat)
CAPABILITY_INFINITE = 'infinite'

# All capabilities as a frozenset for validation
ALL_CAPABILITIES = frozenset({
    CAPABILITY_SINGLE_PASS,
    CAPABILITY_REPEATABLE,
    CAPABILITY_RANDOM_ACCESS,
    CAPABILITY_INFINITE,
})

__all__ = [
    'CAPABILITY_SINGLE_PASS',
    'CAPABILITY_REPEATABLE',
    'CAPABILITY_RANDOM_ACCESS',
    'CAPABILITY_INFINITE',
    'ALL_CAPABILITIES',
]
