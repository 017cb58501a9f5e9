"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default and explicit warnings
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from polyplot.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _make(warnings=()):
    return Result(
        params=FakeParams(value=42.0),
        info={"method": "test"},
        timing={"total_seconds": 0.01},
        backend_name="cpu",
        warnings=warnings,
    )


class TestResult:

    def test_basic_creation(self):
        result = _make()
        assert result.params.value == 42.0
        assert result.info["method"] == "test"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu"

    def test_default_warnings_empty(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        assert result.warnings == ()

    def test_frozen(self):
        result = _make()
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "other"

    def test_warnings_kept_in_order(self):
        result = _make(warnings=("ill-conditioned", "clipped"))
        assert result.warnings == ("ill-conditioned", "clipped")
