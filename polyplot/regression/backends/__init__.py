"""
Regression backends.

Available backends:
    CPUQRBackend: least squares by Householder QR, any degree
    ClosedFormLinearBackend: covariance/variance formula, degree 1 only
"""

from polyplot.regression.backends.cpu import CPUQRBackend
from polyplot.regression.backends.closed_form import ClosedFormLinearBackend

__all__ = [
    "CPUQRBackend",
    "ClosedFormLinearBackend",
]
