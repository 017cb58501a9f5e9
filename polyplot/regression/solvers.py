"""
Solver dispatch for polynomial regression.

This module provides fit() and slope_and_intercept() (public API) and
strategy selection between the QR and closed-form backends.
"""

from typing import Any, Literal
from numpy.typing import ArrayLike

from polyplot.core.exceptions import ValidationError
from polyplot.core.protocols import Backend
from polyplot.core.validation import check_degree
from polyplot.regression.design import PolynomialDesign
from polyplot.regression.solution import PolynomialModel, PolynomialParams
from polyplot.regression.backends.cpu import CPUQRBackend
from polyplot.regression.backends.closed_form import ClosedFormLinearBackend


MethodChoice = Literal['auto', 'qr', 'closed_form']


def fit(
    x: ArrayLike,
    y: ArrayLike,
    degree: int = 1,
    *,
    method: MethodChoice = 'auto',
) -> PolynomialModel:
    """
    Fit a polynomial by ordinary least squares.

    Solves:
        min ||y - (b0 + b1·x + b2·x² + ... + bd·x^d)||²

    All input validation, strategy selection, and result wrapping
    happens here.

    Args:
        x: Predictor values (n,). Any array-like.
        y: Response values (n,). Any array-like.
        degree: Polynomial degree, >= 1
        method: Fitting strategy:
            - 'auto': closed form for degree 1, QR otherwise
            - 'qr': Householder QR of the augmented design matrix
            - 'closed_form': covariance/variance formula (degree 1 only)

    Returns:
        PolynomialModel with coefficients, intercept and diagnostics

    Raises:
        InvalidDegreeError: If degree < 1
        ValidationError: If inputs are invalid or method doesn't fit degree
        DimensionError: If x and y have different lengths
        InsufficientDataError: If there are fewer than degree + 1 observations
        SingularMatrixError: If fewer than degree + 1 distinct x values (QR)
        DegenerateInputError: If every x is identical (closed form)

    Example:
        >>> from polyplot.regression import fit
        >>> model = fit([1, 3, 6, 8], [3, 6, 5, 7], degree=1)
        >>> model.format_legend(precision=3)
        '3.310 + 0.431x^1'
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    degree = check_degree(degree)
    backend_impl = _get_backend(method, degree)

    # === Construct Design ===
    design = PolynomialDesign.from_arrays(x, y, degree)

    # === Solve ===
    result = backend_impl.solve(design)

    # === Wrap and Return ===
    return PolynomialModel(_result=result, _design=design)


def slope_and_intercept(data: Any) -> tuple[float, float]:
    """
    Fit a straight line to (x, y) pairs with the closed-form formula.

    Args:
        data: Sequence of (x, y) pairs

    Returns:
        (slope, intercept)

    Raises:
        InsufficientDataError: If data is empty
        DegenerateInputError: If every x is identical

    Example:
        >>> slope, intercept = slope_and_intercept([(1, 3), (3, 6), (6, 5), (8, 7)])
        >>> round(slope, 4), round(intercept, 4)
        (0.431, 3.3103)
    """
    design = PolynomialDesign.from_pairs(data, 1, min_samples=1)
    params = ClosedFormLinearBackend().solve(design).params
    return float(params.coefficients[0]), params.intercept


def _get_backend(
    choice: MethodChoice, degree: int
) -> Backend[PolynomialDesign, PolynomialParams]:
    """
    Select and instantiate the backend for a method and degree.

    Raises:
        ValidationError: If the method is unknown or can't fit this degree
    """
    if choice == 'auto':
        if degree == 1:
            return ClosedFormLinearBackend()
        return CPUQRBackend()

    elif choice == 'qr':
        return CPUQRBackend()

    elif choice == 'closed_form':
        if degree != 1:
            raise ValidationError(
                f"method='closed_form' supports degree 1 only, got degree={degree}"
            )
        return ClosedFormLinearBackend()

    else:
        raise ValidationError(f"Unknown method: {choice!r}")
