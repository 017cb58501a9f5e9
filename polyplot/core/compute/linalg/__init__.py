"""
Linear algebra kernels for polyplot.

All functions follow these conventions:
    - NumPy/SciPy (LAPACK under the hood)
    - Each decomposition returns a structured result dataclass
    - Errors are raised immediately with clear messages

Submodules:
    qr: Householder QR decomposition and least-squares solve
"""

from polyplot.core.compute.linalg.qr import (
    QRResult,
    qr_cpu,
    qr_solve_cpu,
)

__all__ = [
    "QRResult",
    "qr_cpu",
    "qr_solve_cpu",
]
