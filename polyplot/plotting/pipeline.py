"""
Fit-evaluate-render pipeline.

produce_plot() runs the whole sequence for one chart: fit the config's
points, sample the fitted curve, format the legend, draw. Every fitting
error is raised before drawing starts, so an image exists only for a
fully successful run.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from polyplot.core.exceptions import ValidationError
from polyplot.regression.solution import PolynomialModel, RegressionSeries
from polyplot.regression.solvers import fit
from polyplot.plotting.config import ChartConfig
from polyplot.plotting.composer import render

FitMode = Literal['simple_linear', 'polynomial']
LegendStyle = Literal['equation', 'line']


@dataclass(frozen=True)
class PlotResult:
    """What produce_plot() fitted, drew and wrote."""
    model: PolynomialModel
    series: RegressionSeries
    legend: str
    path: Path


def produce_plot(
    path: str | os.PathLike,
    config: ChartConfig,
    *,
    mode: FitMode = 'simple_linear',
    degree: int = 1,
    sample_range: range | None = None,
    precision: int | None = None,
    legend_style: LegendStyle = 'equation',
) -> PlotResult:
    """
    Fit, evaluate and render one chart.

    Args:
        path: Output PNG location
        config: Points and chart layout
        mode: 'simple_linear' for the closed-form straight line,
            'polynomial' for a QR least-squares fit of the given degree
        degree: Polynomial degree; must be 1 for 'simple_linear'
        sample_range: Integer x values at which the curve is drawn.
            Defaults to every integer from floor(x_min) to ceil(x_max)
            of config.x_range, both ends included.
        precision: Fixed decimals for the legend; None for shortest form
        legend_style: 'equation' for '<b0> + <b1>x^1 ...', 'line' for the
            slope-first '<slope>x + <b0>' of a degree-1 fit

    Returns:
        PlotResult with the model, series, legend and written path

    Raises:
        ValidationError: If mode or legend_style is unknown or doesn't fit
            degree
        InvalidDegreeError, InsufficientDataError, SingularMatrixError,
        DegenerateInputError: If the fit fails (nothing is drawn)
        RenderError: If drawing or writing the image fails

    Example:
        >>> from polyplot.plotting import config_simple, produce_plot
        >>> result = produce_plot('simple.png', config_simple())
        >>> len(result.series)
        11
    """
    if mode == 'simple_linear':
        if degree != 1:
            raise ValidationError(
                f"mode='simple_linear' fits degree 1 only, got degree={degree}"
            )
        method = 'closed_form'
    elif mode == 'polynomial':
        method = 'qr'
    else:
        raise ValidationError(f"Unknown mode: {mode!r}")

    if legend_style not in ('equation', 'line'):
        raise ValidationError(f"Unknown legend_style: {legend_style!r}")
    if legend_style == 'line' and degree != 1:
        raise ValidationError(
            f"legend_style='line' needs degree 1, got degree={degree}"
        )

    model = fit(config.x, config.y, degree, method=method)

    if sample_range is None:
        sample_range = default_sample_range(config)
    series = model.evaluate(sample_range)
    if legend_style == 'line':
        legend = model.format_line(precision)
    else:
        legend = model.format_legend(precision)

    written = render(path, config, series, legend)
    return PlotResult(model=model, series=series, legend=legend, path=written)


def default_sample_range(config: ChartConfig) -> range:
    """Every integer covering config.x_range, both ends included."""
    low, high = config.x_range
    return range(math.floor(low), math.ceil(high) + 1)
