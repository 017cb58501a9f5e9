"""
Regression solution types.

Contains the parameter payload computed by backends and the user-facing
PolynomialModel, which evaluates the fitted curve and formats its legend.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from polyplot.core.exceptions import ValidationError
from polyplot.core.formatting import format_number
from polyplot.core.result import Result
from polyplot.core.validation import check_array, check_finite
from polyplot.regression.features import design_matrix

if TYPE_CHECKING:
    from polyplot.regression.design import PolynomialDesign

# Ordered (x, y) points drawn as one line on a chart
RegressionSeries = list[tuple[float, float]]


@dataclass(frozen=True)
class PolynomialParams:
    """
    Parameter payload for a polynomial fit.

    This is the immutable data computed by backends. coefficients[i]
    multiplies x^(i + 1); the intercept is kept separately.
    """
    degree: int
    coefficients: NDArray[np.floating[Any]]
    intercept: float
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    rss: float
    tss: float
    rank: int


@dataclass
class PolynomialModel:
    """
    User-facing fitted polynomial.

    Wraps the backend Result. The same type is returned whichever
    strategy produced the fit; `method` tells them apart.
    """
    _result: Result[PolynomialParams]
    _design: PolynomialDesign | None = None

    @classmethod
    def from_coefficients(
        cls,
        intercept: float,
        coefficients: Sequence[float],
    ) -> PolynomialModel:
        """
        Build a model from known parameters, without fitting.

        The degree is len(coefficients). Fit diagnostics are empty.

        Example:
            >>> model = PolynomialModel.from_coefficients(5.0, [-3.0, 2.0])
            >>> model.format_legend()
            '5 - 3x^1 + 2x^2'
        """
        coefs = check_array(coefficients, 'coefficients').reshape(-1)
        if coefs.shape[0] == 0:
            raise ValidationError("coefficients: at least one coefficient is required")
        check_finite(coefs, 'coefficients')
        check_finite(np.asarray([intercept], dtype=np.float64), 'intercept')
        coefs.flags.writeable = False

        empty = np.empty(0, dtype=np.float64)
        params = PolynomialParams(
            degree=int(coefs.shape[0]),
            coefficients=coefs,
            intercept=float(intercept),
            fitted_values=empty,
            residuals=empty,
            rss=0.0,
            tss=0.0,
            rank=int(coefs.shape[0]) + 1,
        )
        result = Result(
            params=params,
            info={'method': 'given'},
            timing=None,
            backend_name='given',
        )
        return cls(_result=result)

    # === Parameters ===

    @property
    def degree(self) -> int:
        return self._result.params.degree

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Coefficients of x^1 .. x^degree."""
        return self._result.params.coefficients

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    # === Evaluation ===

    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Evaluate the polynomial at arbitrary x values.

        Args:
            x: Scalar or 1D array-like of x values

        Returns:
            1D array of intercept + Σ coefficients[i] * x^(i + 1)
        """
        x_arr = check_array(x, 'x').reshape(-1)
        check_finite(x_arr, 'x')
        return self.intercept + design_matrix(x_arr, self.degree) @ self.coefficients

    def evaluate(self, xs: range) -> RegressionSeries:
        """
        Sample the fitted curve at every integer of a range.

        Only unit steps are supported: the curve is drawn through integer
        x values, not the continuous polynomial. Pass range(0, 11) to
        sample 0, 1, ..., 10.

        Args:
            xs: Range of integer x values with step 1

        Returns:
            len(xs) points (x, y), in range order

        Raises:
            ValidationError: If xs is not a range or its step is not 1
        """
        if not isinstance(xs, range):
            raise ValidationError(
                f"xs: expected a range of integers, got {type(xs).__name__}"
            )
        if xs.step != 1:
            raise ValidationError(
                f"xs: only unit steps are supported, got step={xs.step}"
            )
        if len(xs) == 0:
            return []

        x_values = np.arange(xs.start, xs.stop, dtype=np.float64)
        y_values = self.predict(x_values)
        return [(float(x), float(y)) for x, y in zip(x_values, y_values)]

    def format_legend(self, precision: int | None = None) -> str:
        """
        Render the fitted equation as legend text.

        The intercept is printed as-is. Each coefficient is preceded by
        '+' or '-' according to its sign and printed as an absolute value,
        so a '+' is never followed by a negative number.

        Args:
            precision: Fixed number of decimals; None prints each number in
                its shortest round-trip form

        Returns:
            e.g. '5 - 3x^1 + 2x^2'
        """
        parts = [format_number(self.intercept, precision)]
        for power, coef in enumerate(self.coefficients, start=1):
            op = '+' if coef >= 0 else '-'
            parts.append(f"{op} {format_number(abs(coef), precision)}x^{power}")
        return " ".join(parts)

    def format_line(self, precision: int | None = None) -> str:
        """
        Render a straight line slope first, e.g. '0.431x + 3.310'.

        Both numbers are printed as-is, so a negative intercept reads
        '2x + -1'.

        Raises:
            ValidationError: If the model is not degree 1
        """
        if self.degree != 1:
            raise ValidationError(
                f"format_line() needs a degree-1 model, got degree={self.degree}"
            )
        slope = format_number(self.coefficients[0], precision)
        return f"{slope}x + {format_number(self.intercept, precision)}"

    # === Diagnostics ===

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def r_squared(self) -> float:
        if self.tss == 0:
            return 1.0 if self.rss == 0 else 0.0
        return 1.0 - (self.rss / self.tss)

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def n(self) -> int:
        """Number of observations the model was fitted to (0 if given)."""
        return self._design.n if self._design is not None else 0

    @property
    def method(self) -> str:
        return self._result.info['method']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a plain-text summary of the fit."""
        lines = [
            "Polynomial Regression Results",
            "=" * 60,
            f"Degree: {self.degree}",
            f"Method: {self.method}",
            f"Observations: {self.n}",
            f"Rank: {self.rank}",
            f"R-squared: {self.r_squared:.6f}",
            "",
            "Coefficients:",
            "-" * 60,
            f"{'Term':<12} {'Estimate':>16}",
            "-" * 60,
            f"{'(Intercept)':<12} {self.intercept:16.6f}",
        ]

        for power, coef in enumerate(self.coefficients, start=1):
            lines.append(f"{'x^' + str(power):<12} {coef:16.6f}")

        lines.append("-" * 60)
        lines.append(f"Equation: {self.format_legend()}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for warning in self.warnings:
            lines.append(f"Warning: {warning}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"PolynomialModel(degree={self.degree}, method={self.method!r}, "
            f"n={self.n}, r_squared={self.r_squared:.4f})"
        )
