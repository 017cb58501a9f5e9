"""
Scatter-and-fit charts.

Public API:
    ChartConfig: what to plot and how the axes look
    render(path, config, series, legend) -> Path
    produce_plot(path, config, mode=..., degree=...) -> PlotResult

Example:
    >>> from polyplot.plotting import config_icecream, produce_plot
    >>> produce_plot('icecream.png', config_icecream(), mode='polynomial', degree=2)
"""

from polyplot.plotting.config import ChartConfig, config_simple, config_icecream
from polyplot.plotting.composer import render
from polyplot.plotting.pipeline import PlotResult, produce_plot, default_sample_range

__all__ = [
    "ChartConfig",
    "config_simple",
    "config_icecream",
    "render",
    "PlotResult",
    "produce_plot",
    "default_sample_range",
]
