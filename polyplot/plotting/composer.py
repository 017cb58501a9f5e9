"""
Chart composition.

render() is the single integration point with matplotlib. It draws one
ChartConfig plus a precomputed regression series and legend into a PNG:

    1. fixed 1024x768 white canvas with a 20px margin
    2. axes scaled to the config ranges, 10 ticks per axis, captions
    3. data points, plain or labeled with their coordinates
    4. regression series as a connected line
    5. legend box in the lower right
    6. the finished image written to the output path

Figures are built with the object-oriented Figure API on an Agg canvas and
are never registered with pyplot, so no global figure state is touched.
The image is rendered into memory first; nothing is written unless every
step succeeds.
"""

from __future__ import annotations

import io
import os
import warnings
from pathlib import Path
from typing import Any, Sequence

import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator

from polyplot.core.exceptions import RenderError
from polyplot.core.formatting import format_number
from polyplot.core.validation import check_pairs
from polyplot.plotting.config import ChartConfig

# Canvas geometry and font sizes, in pixels. 1024x768 is exactly 16x12
# inches at 64 dpi.
CANVAS_SIZE = (1024, 768)
DPI = 64
MARGIN = 20
X_LABEL_AREA = 60
Y_LABEL_AREA = 80
TICK_COUNT = 10

CAPTION_FONT_SIZE = 30
AXIS_DESC_FONT_SIZE = 30
TICK_LABEL_FONT_SIZE = 20
POINT_LABEL_FONT_SIZE = 20
LEGEND_FONT_SIZE = 20

# Point markers
POINT_COLOR = 'blue'
ANNOTATED_POINT_RADIUS = 5
PLAIN_POINT_RADIUS = 3
# Coordinate label offset from the marker: left and up
POINT_LABEL_OFFSET = (-15, 25)

# Regression line and legend
LINE_COLOR = 'red'
LEGEND_LOCATION = 'lower right'
LEGEND_BACKGROUND_ALPHA = 0.8
MESH_COLOR = '#d0d0d0'


def render(
    path: str | os.PathLike,
    config: ChartConfig,
    regression_series: Sequence[tuple[float, float]],
    legend: str,
) -> Path:
    """
    Draw the data and the fitted curve into a PNG file.

    Args:
        path: Output location; the parent directory must exist
        config: What to plot and how the axes look
        regression_series: (x, y) points of the fitted curve, drawn as a line
        legend: Legend text for the line

    Returns:
        The path written

    Raises:
        RenderError: If an axis range is empty or reversed, there is no
            data, matplotlib fails to draw, or the file cannot be written
        ValidationError: If data or series contain non-numeric or
            non-finite values
    """
    path = Path(path)
    if not path.name:
        raise RenderError(f"cannot write chart to {str(path)!r}: not a file path", path=path)
    _check_range(config.x_range, 'x_range', path)
    _check_range(config.y_range, 'y_range', path)

    data_x, data_y = check_pairs(config.data, 'config.data')
    if data_x.shape[0] == 0:
        raise RenderError("config.data: no points to draw", path=path)
    line_x, line_y = check_pairs(list(regression_series), 'regression_series')

    _warn_out_of_range(config, data_x, data_y)

    try:
        fig = _compose(config, data_x, data_y, line_x, line_y, legend)
        buffer = io.BytesIO()
        fig.savefig(buffer, format='png', dpi=DPI, facecolor='white')
    except (ValueError, RuntimeError) as e:
        raise RenderError(f"failed to draw chart for {path}: {e}", path=path) from e

    _write_atomic(path, buffer.getvalue())
    return path


def _compose(
    config: ChartConfig,
    data_x: np.ndarray,
    data_y: np.ndarray,
    line_x: np.ndarray,
    line_y: np.ndarray,
    legend: str,
) -> Figure:
    width, height = CANVAS_SIZE
    fig = Figure(figsize=(width / DPI, height / DPI), dpi=DPI, facecolor='white')
    FigureCanvasAgg(fig)

    # === Axes and mesh ===
    caption_area = int(CAPTION_FONT_SIZE * 1.5) if config.caption else 0
    left = (MARGIN + Y_LABEL_AREA) / width
    bottom = (MARGIN + X_LABEL_AREA) / height
    right = 1.0 - MARGIN / width
    top = 1.0 - (MARGIN + caption_area) / height
    ax = fig.add_axes((left, bottom, right - left, top - bottom))

    ax.set_xlim(*config.x_range)
    ax.set_ylim(*config.y_range)
    ax.xaxis.set_major_locator(MaxNLocator(nbins=TICK_COUNT))
    ax.yaxis.set_major_locator(MaxNLocator(nbins=TICK_COUNT))
    ax.tick_params(labelsize=_pt(TICK_LABEL_FONT_SIZE))
    ax.grid(True, which='major', color=MESH_COLOR, linewidth=1)
    ax.set_axisbelow(True)

    if config.caption:
        fig.suptitle(config.caption, fontsize=_pt(CAPTION_FONT_SIZE),
                     y=1.0 - MARGIN / height, va='top', parse_math=False)
    ax.set_xlabel(config.x_label, fontsize=_pt(AXIS_DESC_FONT_SIZE), parse_math=False)
    ax.set_ylabel(config.y_label, fontsize=_pt(AXIS_DESC_FONT_SIZE), parse_math=False)

    # === Data points ===
    radius = ANNOTATED_POINT_RADIUS if config.annotate_points else PLAIN_POINT_RADIUS
    ax.scatter(data_x, data_y, s=_pt(2 * radius) ** 2, color=POINT_COLOR,
               linewidths=0, zorder=3)

    if config.annotate_points:
        for x, y in zip(data_x, data_y):
            ax.annotate(
                f"({format_number(x)}, {format_number(y)})",
                xy=(x, y),
                xytext=POINT_LABEL_OFFSET,
                textcoords='offset pixels',
                ha='left',
                va='top',
                fontsize=_pt(POINT_LABEL_FONT_SIZE),
            )

    # === Regression line and legend ===
    ax.plot(line_x, line_y, color=LINE_COLOR, label=legend, zorder=2)
    legend_box = ax.legend(
        loc=LEGEND_LOCATION,
        fontsize=_pt(LEGEND_FONT_SIZE),
        facecolor='white',
        framealpha=LEGEND_BACKGROUND_ALPHA,
        edgecolor='black',
        fancybox=False,
        handlelength=1.0,
    )
    # user text is drawn literally, '$' included
    for text in legend_box.get_texts():
        text.set_parse_math(False)

    return fig


def _pt(pixels: float) -> float:
    """Convert a pixel length to points at the canvas resolution."""
    return pixels * 72.0 / DPI


def _check_range(value: Any, name: str, path: Path) -> None:
    """Raise RenderError unless value is a finite (min, max) with min < max."""
    try:
        low, high = (float(v) for v in value)
    except (TypeError, ValueError) as e:
        raise RenderError(f"{name}: expected (min, max), got {value!r}", path=path) from e

    if not (np.isfinite(low) and np.isfinite(high)):
        raise RenderError(f"{name}: bounds must be finite, got ({low}, {high})", path=path)
    if low >= high:
        raise RenderError(
            f"{name}: min must be below max, got ({low}, {high})", path=path
        )


def _warn_out_of_range(config: ChartConfig, x: np.ndarray, y: np.ndarray) -> None:
    x_low, x_high = config.x_range
    y_low, y_high = config.y_range
    outside = (x < x_low) | (x > x_high) | (y < y_low) | (y > y_high)
    n_outside = int(np.sum(outside))
    if n_outside:
        warnings.warn(
            f"{n_outside} of {x.shape[0]} points fall outside the chart ranges "
            f"x={config.x_range}, y={config.y_range} and are clipped",
            UserWarning,
            stacklevel=3,
        )


def _write_atomic(path: Path, payload: bytes) -> None:
    """Write payload to path through a sibling temp file."""
    tmp = None
    try:
        tmp = path.with_name(f".{path.name}.tmp")
        tmp.write_bytes(payload)
        os.replace(tmp, path)
    except (OSError, ValueError) as e:
        if tmp is not None:
            tmp.unlink(missing_ok=True)
        raise RenderError(f"cannot write chart to {path}: {e}", path=path) from e
