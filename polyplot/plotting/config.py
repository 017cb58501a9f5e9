"""
Chart configuration.

ChartConfig describes one plot: the points, the visible axis ranges, the
caption and axis descriptions, and whether each point is labeled with its
coordinates. It is a value object; it computes nothing and is validated
by the composer when drawn.
"""

from __future__ import annotations

from dataclasses import dataclass
from numpy.typing import ArrayLike

from polyplot import datasets
from polyplot.core.validation import check_array, check_1d, check_consistent_length

Point = tuple[float, float]


@dataclass(frozen=True)
class ChartConfig:
    """
    Immutable description of one scatter-and-fit chart.

    Attributes:
        data: Points to scatter, in drawing order
        x_range: Visible (min, max) of the x axis
        y_range: Visible (min, max) of the y axis
        caption: Title above the chart; empty for none
        x_label: Description under the x axis
        y_label: Description beside the y axis
        annotate_points: Label every point with its "(x, y)" coordinates
    """
    data: tuple[Point, ...]
    x_range: tuple[float, float]
    y_range: tuple[float, float]
    caption: str = ""
    x_label: str = "x"
    y_label: str = "y"
    annotate_points: bool = False

    @classmethod
    def from_arrays(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        x_range: tuple[float, float],
        y_range: tuple[float, float],
        caption: str = "",
        x_label: str = "x",
        y_label: str = "y",
        annotate_points: bool = False,
    ) -> ChartConfig:
        """
        Build a config by pairing two equal-length arrays.

        Raises:
            ValidationError: If x or y is non-numeric
            DimensionError: If x or y is not 1D or their lengths differ
        """
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))

        data = tuple((float(a), float(b)) for a, b in zip(x_arr, y_arr))
        return cls(
            data=data,
            x_range=(float(x_range[0]), float(x_range[1])),
            y_range=(float(y_range[0]), float(y_range[1])),
            caption=caption,
            x_label=x_label,
            y_label=y_label,
            annotate_points=annotate_points,
        )

    @property
    def x(self) -> list[float]:
        return [p[0] for p in self.data]

    @property
    def y(self) -> list[float]:
        return [p[1] for p in self.data]


def config_simple() -> ChartConfig:
    """Four annotated points on a 0..10 square."""
    return ChartConfig(
        data=datasets.SIMPLE,
        x_range=(0.0, 10.0),
        y_range=(0.0, 10.0),
        caption="",
        x_label="x",
        y_label="y",
        annotate_points=True,
    )


def config_icecream() -> ChartConfig:
    """Monthly temperature against ice cream spending."""
    return ChartConfig.from_arrays(
        datasets.TEMPERATURES,
        datasets.SPENDINGS,
        x_range=(0.0, 35.0),
        y_range=(-250.0, 2000.0),
        caption="Highest temperatures and ice cream/sorbet spending",
        x_label="Monthly avg of max temperature (Celsius)",
        y_label="Spending (Yen)",
        annotate_points=False,
    )
