"""
Closed-form backend for straight-line fits.

A degree-1 fit has the exact solution

    slope     = cov(x, y) / var(x)
    intercept = mean(y) - slope * mean(x)

with population moments (divide by n). It needs no factorization and
must agree with the QR backend on the same data to rounding error.
"""

from typing import Any

import numpy as np

from polyplot.core.exceptions import DegenerateInputError, ValidationError
from polyplot.core.result import Result
from polyplot.core.compute.timing import Timer
from polyplot.core.compute.tolerances import select_tolerance
from polyplot.regression.design import PolynomialDesign
from polyplot.regression.solution import PolynomialParams


class ClosedFormLinearBackend:
    """
    Degree-1 backend using the covariance/variance formula.

    Implements the Backend protocol for PolynomialDesign -> PolynomialParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_closed_form'

    def solve(self, design: PolynomialDesign) -> Result[PolynomialParams]:
        """
        Fit y = intercept + slope * x from population moments.

        Raises:
            ValidationError: If the design is not degree 1
            DegenerateInputError: If every x is identical (var(x) == 0)
        """
        if design.degree != 1:
            raise ValidationError(
                f"closed-form fit supports degree 1 only, got degree={design.degree}"
            )

        x = design.x
        y = design.y
        n = design.n

        with Timer() as timer:
            with timer.section('moments'):
                x_mean = x.sum() / n
                y_mean = y.sum() / n
                dx = x - x_mean
                cov_xy = float((dx * (y - y_mean)).sum() / n)
                var_x = float((dx * dx).sum() / n)

            # identical x can leave a rounding-sized var_x, so test the data too
            if var_x == 0.0 or np.all(x == x[0]):
                raise DegenerateInputError(
                    f"x: zero variance over {n} observations (all x equal "
                    f"{float(x[0])!r}); the slope is undefined",
                    variance=0.0,
                )

            slope = cov_xy / var_x
            intercept = float(y_mean - slope * x_mean)

            with timer.section('residuals'):
                fitted_values = intercept + slope * x
                residuals = y - fitted_values
                rss = float(residuals @ residuals)
                tss = float(np.sum((y - y_mean) ** 2))

        coefficients = np.array([slope], dtype=np.float64)
        coefficients.flags.writeable = False

        params = PolynomialParams(
            degree=1,
            coefficients=coefficients,
            intercept=intercept,
            fitted_values=fitted_values,
            residuals=residuals,
            rss=rss,
            tss=tss,
            rank=2,
        )

        info: dict[str, Any] = {
            'method': 'closed_form',
            'cov_xy': cov_xy,
            'var_x': var_x,
            'tolerance': select_tolerance(),
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
