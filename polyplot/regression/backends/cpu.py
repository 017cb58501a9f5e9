"""
CPU least-squares backend for polynomial regression.

Solves for the intercept and the coefficients together by QR
decomposition of the design matrix augmented with a column of ones.
"""

from typing import Any
import warnings

import numpy as np

from polyplot.core.result import Result
from polyplot.core.compute.timing import Timer
from polyplot.core.compute.tolerances import ILL_CONDITIONED_THRESHOLD, select_tolerance
from polyplot.core.compute.linalg.qr import qr_solve_cpu, qr_cpu
from polyplot.regression.design import PolynomialDesign
from polyplot.regression.solution import PolynomialParams


class CPUQRBackend:
    """
    CPU backend using Householder QR decomposition.

    Implements the Backend protocol for PolynomialDesign -> PolynomialParams.
    Works for any degree; the intercept is the first entry of the solved
    vector and is split off before the result is built.
    """

    @property
    def name(self) -> str:
        return 'cpu_qr'

    def solve(self, design: PolynomialDesign) -> Result[PolynomialParams]:
        """
        Solve OLS via QR decomposition.

        Algorithm:
            1. Augment the features with an intercept column: A = [1 X]
            2. Compute QR decomposition: A = QR
            3. Solve: β = R⁻¹ Q'y, check rank and conditioning
            4. Compute residuals and fitted values

        Raises:
            SingularMatrixError: If A is rank-deficient
        """
        warning_messages: list[str] = []

        A = design.augmented()
        y = design.y

        with Timer() as timer:
            # === QR Decomposition and Solve ===
            with timer.section('qr_decomposition'):
                qr_result = qr_cpu(A, mode='reduced')

            with timer.section('solve'):
                beta = qr_solve_cpu(A, y, check_rank=True, qr_result=qr_result)
                condition_number = qr_result.condition_number()

            # === Residuals and Fitted Values ===
            with timer.section('residuals'):
                fitted_values = A @ beta
                residuals = y - fitted_values
                rss = float(residuals @ residuals)
                tss = float(np.sum((y - np.mean(y)) ** 2))

        ill_conditioned = condition_number > ILL_CONDITIONED_THRESHOLD
        if ill_conditioned:
            message = (
                f"Design matrix is ill-conditioned (condition number "
                f"{condition_number:.3g}); degree-{design.degree} coefficients "
                f"may be inaccurate."
            )
            warning_messages.append(message)
            warnings.warn(message, RuntimeWarning, stacklevel=3)

        coefficients = beta[1:].copy()
        coefficients.flags.writeable = False

        params = PolynomialParams(
            degree=design.degree,
            coefficients=coefficients,
            intercept=float(beta[0]),
            fitted_values=fitted_values,
            residuals=residuals,
            rss=rss,
            tss=tss,
            rank=qr_result.rank,
        )

        info: dict[str, Any] = {
            'method': 'qr',
            'rank': qr_result.rank,
            'condition_number': condition_number,
            'tolerance': select_tolerance(ill_conditioned),
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warning_messages),
        )
