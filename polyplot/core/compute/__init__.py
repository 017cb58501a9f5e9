"""
Shared compute infrastructure for polyplot.

This module holds the numeric plumbing shared by every fitting backend.
Fitting strategies themselves live in regression/backends/.

Submodules:
    timing: Stage timing for a fit
    tolerances: Tolerance tiers and the conditioning threshold
    linalg: Linear algebra kernels (QR)
"""

from polyplot.core.compute.timing import Timer

__all__ = [
    "Timer",
]
