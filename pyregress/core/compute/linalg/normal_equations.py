"""
Normal-equations accumulation from observation sequences.

Walks one response sequence and k predictor sequences in lockstep exactly
once and accumulates the sums of products X'X and X'Y. No design matrix is
ever formed: rows are gathered into fixed-size blocks and folded into the
running sums block by block, so memory stays O(k^2 + BLOCK_SIZE * k) no
matter how long the sequences are.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence
import numpy as np
from numpy.typing import NDArray

from pyregress.core.sequences import Observations, lockstep

# Rows folded into the running sums at a time
BLOCK_SIZE = 1024


@dataclass(frozen=True)
class NormalEquations:
    """
    Accumulated normal equations.

    Attributes:
        xty: X'Y, shape (k,)
        work: Working matrix, shape (k, 2k). Left half holds X'X (both
            triangles), right half is zeroed augmentation space for
            in-place inversion.
        n: Number of fully paired observations consumed
    """
    xty: NDArray[np.floating[Any]]
    work: NDArray[np.floating[Any]]
    n: int

    @property
    def k(self) -> int:
        return self.xty.shape[0]

    @property
    def xtx(self) -> NDArray[np.floating[Any]]:
        """View of the X'X half of the working matrix."""
        return self.work[:, :self.k]


def accumulate_normal_equations(
    response: Observations,
    predictors: Sequence[Observations],
) -> NormalEquations:
    """
    Build X'X and X'Y in a single lockstep pass.

    Per synchronized step with values (y, x_1 .. x_k):
        X'Y[i]    += x_i * y
        X'X[i][j] += x_i * x_j   (written to both triangles)

    The walk stops the instant the response or any predictor is exhausted,
    so infinite predictors (a constant-1 intercept, say) are safe.

    Args:
        response: Response sequence (consumed)
        predictors: k predictor sequences (consumed)

    Returns:
        NormalEquations with float64 sums and the paired observation count
    """
    k = len(predictors)
    xty = np.zeros(k, dtype=np.float64)
    xtx = np.zeros((k, k), dtype=np.float64)

    block = np.empty((BLOCK_SIZE, k), dtype=np.float64)
    block_y = np.empty(BLOCK_SIZE, dtype=np.float64)
    filled = 0
    n = 0

    for step in lockstep([response, *predictors]):
        block_y[filled] = step[0]
        block[filled] = step[1:]
        filled += 1
        if filled == BLOCK_SIZE:
            _fold(xtx, xty, block, block_y)
            n += filled
            filled = 0

    if filled:
        _fold(xtx, xty, block[:filled], block_y[:filled])
        n += filled

    # Mirror the upper triangle so X'X is exactly symmetric
    upper = np.triu_indices(k, 1)
    xtx.T[upper] = xtx[upper]

    work = np.zeros((k, 2 * k), dtype=np.float64)
    work[:, :k] = xtx
    return NormalEquations(xty=xty, work=work, n=n)


def _fold(
    xtx: NDArray[np.floating[Any]],
    xty: NDArray[np.floating[Any]],
    rows: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
) -> None:
    """Add one block of rows to the running sums in place."""
    with np.errstate(over='ignore', invalid='ignore'):
        xtx += rows.T @ rows
        xty += rows.T @ y
