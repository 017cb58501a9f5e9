"""
Render the example charts.

Usage:
    python -m polyplot simple
    python -m polyplot icecream --outdir charts
    python -m polyplot icecream-poly --degree 3

Each example is written to <outdir>/<example>.png. The straight-line
examples label the fit slope first ('0.431x + 3.310'); icecream-poly
prints the full polynomial equation.
"""

import argparse
import sys
from pathlib import Path

from polyplot.core.exceptions import PolyPlotError
from polyplot.plotting import config_simple, config_icecream, produce_plot

DEFAULT_OUTDIR = 'plotters-images'

EXAMPLES = ('simple', 'icecream', 'icecream-poly')


def output_path(example: str, outdir: str | Path = DEFAULT_OUTDIR) -> Path:
    """Output location for an example: <outdir>/<example>.png."""
    return Path(outdir) / f"{example}.png"


def run_example(example: str, outdir: str | Path, degree: int = 2):
    """Render one example chart and return its PlotResult."""
    path = output_path(example, outdir)
    path.parent.mkdir(parents=True, exist_ok=True)

    if example == 'simple':
        return produce_plot(path, config_simple(), precision=3, legend_style='line')
    if example == 'icecream':
        return produce_plot(path, config_icecream(), precision=3, legend_style='line')
    if example == 'icecream-poly':
        return produce_plot(path, config_icecream(), mode='polynomial', degree=degree)
    raise ValueError(f"Unknown example: {example!r}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='polyplot',
        description='Fit a polynomial to an example dataset and render the chart'
    )
    parser.add_argument(
        'example',
        choices=EXAMPLES,
        help='Which example chart to render'
    )
    parser.add_argument(
        '--outdir', '-o',
        default=DEFAULT_OUTDIR,
        help=f'Directory for the PNG (default: {DEFAULT_OUTDIR})'
    )
    parser.add_argument(
        '--degree', '-d',
        type=int,
        default=2,
        help='Polynomial degree for icecream-poly (default: 2)'
    )
    args = parser.parse_args(argv)

    try:
        result = run_example(args.example, args.outdir, degree=args.degree)
    except (PolyPlotError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(f"Wrote {result.path}")
    print(f"  {result.legend}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
