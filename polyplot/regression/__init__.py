"""
Polynomial regression by ordinary least squares.

Public API:
    fit(x, y, degree, ...) -> PolynomialModel
    slope_and_intercept(data) -> (slope, intercept)

fit() handles:
    - Input validation
    - Design construction (feature expansion)
    - Strategy selection (QR or closed form)
    - Result wrapping

Example:
    >>> from polyplot.regression import fit
    >>> model = fit(x, y, degree=2)
    >>> series = model.evaluate(range(0, 36))
    >>> print(model.format_legend())
"""

from polyplot.regression.features import expand, design_matrix
from polyplot.regression.design import PolynomialDesign
from polyplot.regression.solution import PolynomialModel, PolynomialParams, RegressionSeries
from polyplot.regression.solvers import fit, slope_and_intercept

__all__ = [
    "fit",
    "slope_and_intercept",
    "expand",
    "design_matrix",
    "PolynomialDesign",
    "PolynomialModel",
    "PolynomialParams",
    "RegressionSeries",
]
