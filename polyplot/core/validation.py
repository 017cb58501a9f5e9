"""
Input validation utilities for polyplot.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from polyplot.core.exceptions import (
    ValidationError,
    DimensionError,
    InvalidDegreeError,
    InsufficientDataError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like. Rejects inputs that result in object dtype
    (mixed types) or in a non-numeric dtype (strings, datetimes).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_degree(degree: Any) -> int:
    """
    Verify degree is an integer >= 1.

    Booleans are rejected even though they are integers.

    Returns:
        The degree as a plain int

    Raises:
        InvalidDegreeError: If degree is not a positive integer
    """
    if isinstance(degree, bool) or not isinstance(degree, numbers.Integral):
        raise InvalidDegreeError(
            f"degree: expected a positive integer, got {degree!r}",
            degree=degree,
        )
    if degree < 1:
        raise InvalidDegreeError(
            f"degree: must be >= 1, got {degree}",
            degree=int(degree),
        )
    return int(degree)


def check_min_samples(
    array: NDArray[np.floating[Any]],
    min_samples: int,
    name: str,
    degree: int | None = None,
) -> None:
    """
    Verify array has at least the minimum number of samples.

    Args:
        array: Array to check
        min_samples: Minimum required samples (first dimension)
        name: Parameter name for error messages
        degree: Polynomial degree that set the minimum, for diagnostics

    Raises:
        InsufficientDataError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        detail = f" for a degree-{degree} fit" if degree is not None else ""
        raise InsufficientDataError(
            f"{name}: requires at least {min_samples} samples{detail}, got {n}",
            n_samples=n,
            required=min_samples,
            degree=degree,
        )


def check_pairs(data: Any, name: str) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Validate a sequence of (x, y) pairs and split it into two columns.

    An empty sequence is returned as two empty arrays; callers decide
    whether emptiness is an error.

    Returns:
        (x, y) as 1D float64 arrays

    Raises:
        ValidationError: If data is not numeric or contains non-finite values
        DimensionError: If data is not an (n, 2) table of pairs
    """
    arr = check_array(data, name)
    if arr.size == 0:
        return np.empty(0, dtype=np.float64), np.empty(0, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise DimensionError(
            f"{name}: expected a sequence of (x, y) pairs, got shape {arr.shape}"
        )
    check_finite(arr, name)
    return arr[:, 0], arr[:, 1]
