"""
Polynomial feature expansion.

A scalar x expands to [x, x², ..., x^d]. Powers are built by repeated
multiplication rather than pow(), so x^k is always the product of the
previous column and x. The scalar and the vectorized forms follow the
same rounding path and produce bit-identical features.

The intercept column is not part of the expansion; backends add it.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from polyplot.core.validation import check_degree


def expand(x: float, degree: int) -> list[float]:
    """
    Expand a scalar into its polynomial feature vector.

    Args:
        x: Value to expand
        degree: Highest power, >= 1

    Returns:
        [x, x*x, x*x*x, ...] of length degree

    Raises:
        InvalidDegreeError: If degree < 1

    Example:
        >>> expand(2.0, 3)
        [2.0, 4.0, 8.0]
    """
    degree = check_degree(degree)
    x = float(x)
    features = [x]
    for _ in range(1, degree):
        features.append(features[-1] * x)
    return features


def design_matrix(x: ArrayLike, degree: int) -> NDArray[np.floating[Any]]:
    """
    Expand every value of x into one row of the design matrix.

    Args:
        x: 1D array-like of n values
        degree: Highest power, >= 1

    Returns:
        Read-only (n x degree) float64 matrix whose row i is expand(x[i], degree)

    Raises:
        InvalidDegreeError: If degree < 1
    """
    degree = check_degree(degree)
    x = np.asarray(x, dtype=np.float64).reshape(-1)
    # cumprod along a row multiplies left to right, the same order as expand()
    X = np.cumprod(np.repeat(x[:, np.newaxis], degree, axis=1), axis=1)
    X.flags.writeable = False
    return X
