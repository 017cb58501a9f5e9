"""
Core infrastructure for polyplot.

This module provides shared abstractions and utilities used by the
regression and plotting submodules.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    formatting: Display formatting of numbers
    compute: Timing, tolerances, linear algebra primitives
"""

from polyplot.core.protocols import Backend
from polyplot.core.result import Result
from polyplot.core.exceptions import (
    PolyPlotError,
    ValidationError,
    DimensionError,
    InvalidDegreeError,
    InsufficientDataError,
    DegenerateInputError,
    NumericalError,
    SingularMatrixError,
    RenderError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PolyPlotError",
    "ValidationError",
    "DimensionError",
    "InvalidDegreeError",
    "InsufficientDataError",
    "DegenerateInputError",
    "NumericalError",
    "SingularMatrixError",
    "RenderError",
]
