"""
Input validation utilities for pyregress.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - Validate configuration at the API boundary, trust it everywhere else
    - Never validate data VALUES (non-finite data propagates by contract)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyregress.core.exceptions import ValidationError, DimensionError
from pyregress.core.sequences import Observations


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64, copy=False)


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_output_buffer(buf: Any, name: str) -> NDArray[np.floating[Any]]:
    """
    Verify buf can receive float64 results in place.

    Returns:
        buf unchanged

    Raises:
        ValidationError: If buf is not a writable float64 numpy array
        DimensionError: If buf is not 1D
    """
    if not isinstance(buf, np.ndarray):
        raise ValidationError(
            f"{name}: expected a numpy array, got {type(buf).__name__}"
        )
    check_1d(buf, name)
    if buf.dtype != np.float64:
        raise ValidationError(f"{name}: expected float64 dtype, got {buf.dtype}")
    if not buf.flags.writeable:
        raise ValidationError(f"{name}: array is read-only")
    return buf


def check_probability(value: float, name: str) -> float:
    """
    Verify value is a real number in [0, 1].

    Returns:
        value as float

    Raises:
        ValidationError: If value is not a real number in [0, 1]
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number in [0, 1], got {type(value).__name__}"
        )
    value = float(value)
    if not 0.0 <= value <= 1.0:
        raise ValidationError(f"{name}: must be between 0 and 1, got {value}")
    return value


def check_confidence(confidence: float) -> float:
    """
    Verify a confidence level lies in [0, 1].

    Raises:
        ValidationError: If confidence is outside [0, 1]
    """
    return check_probability(confidence, 'confidence')


def check_non_negative_int(value: int, name: str) -> int:
    """
    Verify value is an integer >= 0.

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be >= 0, got {value}")
    return int(value)


def check_positive_int(value: int, name: str) -> int:
    """
    Verify value is an integer >= 1.

    Raises:
        ValidationError: If value is not a positive integer
    """
    value = check_non_negative_int(value, name)
    if value < 1:
        raise ValidationError(f"{name}: must be >= 1, got {value}")
    return value


def check_positive(value: float, name: str) -> float:
    """
    Verify value is a finite real number > 0.

    Raises:
        ValidationError: If value is not a finite positive number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    value = float(value)
    if not (math.isfinite(value) and value > 0):
        raise ValidationError(f"{name}: must be finite and > 0, got {value}")
    return value


def check_length_matches(actual: int, expected: int, names: tuple[str, str]) -> None:
    """
    Verify two counts agree.

    Args:
        actual: Length of the first quantity
        expected: Length of the second quantity
        names: Names of both quantities for error messages

    Raises:
        DimensionError: If the counts differ
    """
    if actual != expected:
        raise DimensionError(
            f"{names[0]} and {names[1]} must have the same length: "
            f"{names[0]}={actual}, {names[1]}={expected}"
        )


def check_not_infinite(source: Observations, name: str) -> None:
    """
    Verify a sequence is not known to be infinite.

    Raises:
        ValidationError: If the sequence never ends
    """
    if source.is_infinite:
        raise ValidationError(
            f"{name}: infinite sequence; regression needs a finite number of "
            f"observations"
        )
