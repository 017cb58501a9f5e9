"""
Polynomial regression design.

PolynomialDesign holds the validated observations and the expanded
feature matrix for one fit. It is built once per fit call and never
mutated; backends read from it and never validate again.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from polyplot.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_consistent_length,
    check_degree,
    check_min_samples,
    check_pairs,
)
from polyplot.regression.features import design_matrix


@dataclass(frozen=True)
class PolynomialDesign:
    """
    Design for fitting y = intercept + Σ coef_i · x^i, i = 1..degree.

    Construction:
        PolynomialDesign.from_arrays(x, y, degree=2)
        PolynomialDesign.from_pairs([(1, 3), (3, 6)], degree=1)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _X: NDArray[np.floating[Any]]
    _degree: int
    _n: int

    @classmethod
    def from_arrays(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        degree: int,
        *,
        min_samples: int | None = None,
    ) -> PolynomialDesign:
        """
        Build a design from two equal-length 1D array-likes.

        Args:
            x: Predictor values
            y: Response values
            degree: Polynomial degree, >= 1
            min_samples: Minimum number of observations. Defaults to
                degree + 1, the number of unknowns including the intercept.

        Raises:
            InvalidDegreeError: If degree < 1
            ValidationError: If x or y is non-numeric or non-finite
            DimensionError: If x or y is not 1D or their lengths differ
            InsufficientDataError: If there are fewer than min_samples observations
        """
        degree = check_degree(degree)
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')

        # Column vectors are accepted as 1D
        if x_arr.ndim == 2 and x_arr.shape[1] == 1:
            x_arr = x_arr.ravel()
        if y_arr.ndim == 2 and y_arr.shape[1] == 1:
            y_arr = y_arr.ravel()

        return cls._build(x_arr, y_arr, degree, min_samples)

    @classmethod
    def from_pairs(
        cls,
        data: Any,
        degree: int,
        *,
        min_samples: int | None = None,
    ) -> PolynomialDesign:
        """Build a design from a sequence of (x, y) pairs."""
        degree = check_degree(degree)
        x_arr, y_arr = check_pairs(data, 'data')
        return cls._build(x_arr, y_arr, degree, min_samples)

    @classmethod
    def _build(
        cls,
        x: NDArray,
        y: NDArray,
        degree: int,
        min_samples: int | None,
    ) -> PolynomialDesign:
        """Internal builder with validation."""
        check_1d(x, 'x')
        check_1d(y, 'y')
        check_finite(x, 'x')
        check_finite(y, 'y')
        check_consistent_length(x, y, names=('x', 'y'))

        if min_samples is None:
            min_samples = degree + 1
        check_min_samples(x, min_samples, 'x', degree=degree)

        x = x.copy()
        y = y.copy()
        x.flags.writeable = False
        y.flags.writeable = False

        return cls(
            _x=x,
            _y=y,
            _X=design_matrix(x, degree),
            _degree=degree,
            _n=x.shape[0],
        )

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Predictor values (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,)."""
        return self._y

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Expanded features (n x degree), without intercept column."""
        return self._X

    @property
    def degree(self) -> int:
        return self._degree

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def p(self) -> int:
        """Number of unknowns, intercept included."""
        return self._degree + 1

    def augmented(self) -> NDArray[np.floating[Any]]:
        """Design matrix with a leading column of ones (n x (degree + 1))."""
        return np.column_stack([np.ones(self._n), self._X])
