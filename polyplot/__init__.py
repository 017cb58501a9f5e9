"""
polyplot: polynomial least-squares fits rendered as scatter charts.

Fits y = b0 + b1·x + ... + bd·x^d to a small (x, y) dataset and draws the
fitted curve over the points as a labeled PNG.

Submodules:
    regression: Feature expansion, QR and closed-form fits, PolynomialModel
    plotting: ChartConfig, chart rendering, the fit-and-plot pipeline
    datasets: Embedded example datasets
"""

__version__ = "0.1.0"

from polyplot import regression
from polyplot import plotting
from polyplot import datasets

__all__ = [
    "__version__",
    "regression",
    "plotting",
    "datasets",
]
