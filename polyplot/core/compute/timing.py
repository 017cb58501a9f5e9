"""
Stage timing for fitting backends.

A backend opens one Timer around the whole fit and marks its stages
(factorization, solve, residuals) as sections. The breakdown ends up in
Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Wall-clock timer for one fit, with named stages.

    Usage:
        with Timer() as timer:
            with timer.section('qr_decomposition'):
                qr_result = qr_cpu(A)
            with timer.section('solve'):
                beta = qr_solve_cpu(A, y, check_rank=True, qr_result=qr_result)
        timer.result()
        # {'total_seconds': 0.0004, 'qr_decomposition': 0.0003, 'solve': 0.0001}
    """

    def __init__(self):
        self._stages: dict[str, float] = {}
        self._opened: float | None = None
        self._total: float | None = None

    def __enter__(self) -> 'Timer':
        self._opened = time.perf_counter()
        self._total = None
        return self

    def __exit__(self, *exc_info) -> None:
        self._total = time.perf_counter() - self._opened

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time one stage; a stage entered twice accumulates."""
        if self._opened is None:
            raise RuntimeError(f"Timer.section({name!r}) used outside 'with Timer()'")
        began = time.perf_counter()
        try:
            yield
        finally:
            self._stages[name] = self._stages.get(name, 0.0) + time.perf_counter() - began

    def result(self) -> dict[str, float]:
        """
        Stage breakdown plus 'total_seconds'.

        Raises:
            RuntimeError: If the timed block has not finished
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before the timed block finished")
        return {'total_seconds': self._total, **self._stages}
