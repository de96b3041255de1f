"""
Gauss-Jordan matrix inversion with partial pivoting.

Used for the small, dense, symmetric k x k systems produced by the
normal-equations builder and by the logistic information matrix, where k
is the number of predictors. The matrix is inverted in place on a k x 2k
working array; the caller gets back the right half (the inverse) and must
not reuse the input.

Singular input is not detected: a zero pivot divides by zero and the
inverse fills with inf/NaN. Use is_finite_inverse() (or
require_finite_inverse()) to check afterwards.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyregress.core.exceptions import DimensionError, SingularMatrixError


def invert(mat: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Invert a square matrix by Gauss-Jordan elimination.

    Algorithm:
        1. Scale each row by the reciprocal of its largest |entry| among
           the first k columns and write that reciprocal into the matching
           identity slot of the augmentation half.
        2. For each column c, swap in the row r >= c with the largest
           |mat[r, c]|, then eliminate column c from every other row.
        3. Divide each row by its diagonal entry.
        4. Return the right k columns.

    Args:
        mat: Either a k x k matrix or a k x 2k working matrix whose left
             half holds the matrix (the right half is overwritten). A
             k x 2k float64 array is modified in place.

    Returns:
        The k x k inverse (a view into the working matrix)

    Raises:
        DimensionError: If mat is not k x k or k x 2k
    """
    work = _working_matrix(mat)
    k = work.shape[0]

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        work[:, k:] = 0.0
        for i in range(k):
            scale = 1.0 / np.max(np.abs(work[i, :k]))
            work[i, :k] *= scale
            work[i, k + i] = scale

        for col in range(k):
            best = col + int(np.argmax(np.abs(work[col:, col])))
            if best != col:
                work[[col, best]] = work[[best, col]]

            pivot_row = work[col]
            for row in range(k):
                if row == col:
                    continue
                ratio = work[row, col] / pivot_row[col]
                work[row] -= pivot_row * ratio

        diagonal = np.diag(work[:, :k]).copy()
        work /= diagonal[:, np.newaxis]

    return work[:, k:]


def is_finite_inverse(inverse: NDArray[np.floating[Any]]) -> bool:
    """True when every entry of an inverse returned by invert() is finite."""
    return bool(np.all(np.isfinite(inverse)))


def require_finite_inverse(
    inverse: NDArray[np.floating[Any]],
    name: str = 'matrix',
) -> NDArray[np.floating[Any]]:
    """
    Return inverse unchanged, or raise if inversion hit a zero pivot.

    Raises:
        SingularMatrixError: If the inverse contains inf or NaN
    """
    if not is_finite_inverse(inverse):
        raise SingularMatrixError(
            f"{name}: inverse contains non-finite values; the matrix is "
            f"singular (perfectly collinear predictors?)",
            matrix_name=name,
            size=inverse.shape[0],
        )
    return inverse


def _working_matrix(mat: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Return a k x 2k float64 working array for mat."""
    if mat.ndim != 2:
        raise DimensionError(f"mat: expected 2D array, got {mat.ndim}D")
    k, cols = mat.shape
    if cols == 2 * k and mat.dtype == np.float64:
        return mat
    if cols == 2 * k:
        return mat.astype(np.float64)
    if cols == k:
        work = np.zeros((k, 2 * k), dtype=np.float64)
        work[:, :k] = mat
        return work
    raise DimensionError(
        f"mat: expected k x k or k x 2k matrix, got shape {mat.shape}"
    )
