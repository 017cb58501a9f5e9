"""
Exception hierarchy for polyplot.

All exceptions inherit from PolyPlotError to allow catching any
library-specific error. Fitting errors derive from ValidationError or
NumericalError; rendering failures raise RenderError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from pathlib import Path


class PolyPlotError(Exception):
    """Base exception for all polyplot errors."""
    pass


class ValidationError(PolyPlotError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when x and y have different lengths.
    """
    pass


class InvalidDegreeError(ValidationError):
    """
    Polynomial degree is not a positive integer.

    Attributes:
        degree: The rejected degree
    """

    def __init__(self, message: str, degree: object = None):
        super().__init__(message)
        self.degree = degree


class InsufficientDataError(ValidationError):
    """
    Too few observations for the requested fit.

    A degree-d polynomial with intercept has d + 1 unknowns, so at least
    d + 1 observations are required. The closed-form linear fit requires
    at least one.

    Attributes:
        n_samples: Number of observations supplied
        required: Minimum number of observations needed
        degree: Polynomial degree of the attempted fit, if any
    """

    def __init__(
        self,
        message: str,
        n_samples: int | None = None,
        required: int | None = None,
        degree: int | None = None,
    ):
        super().__init__(message)
        self.n_samples = n_samples
        self.required = required
        self.degree = degree


class DegenerateInputError(ValidationError):
    """
    Input has zero variance in x.

    Raised by the closed-form linear fit, where the slope is
    cov(x, y) / var(x) and is undefined when every x is identical.

    Attributes:
        variance: The offending population variance of x (0.0)
    """

    def __init__(self, message: str, variance: float | None = None):
        super().__init__(message)
        self.variance = variance


class NumericalError(PolyPlotError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when the augmented design matrix [1, x, ..., x^d] is
    numerically rank-deficient, typically because there are fewer than
    d + 1 distinct x values.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (degree + 1)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank


class RenderError(PolyPlotError):
    """
    Chart could not be drawn or written.

    Raised for degenerate axis ranges, empty data and any failure of the
    rendering backend or of the final file write. No partial image is
    left behind when this is raised.

    Attributes:
        path: Output location of the failed render, if known
    """

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = path
