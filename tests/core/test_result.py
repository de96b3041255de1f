"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pyregress.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**overrides):
    fields = dict(
        params=FakeParams(value=1.0),
        info={},
        timing=None,
        backend_name="cpu",
    )
    fields.update(overrides)
    return Result(**fields)


# ═══════════════════════════════════════════════════════════════════════
# Construction and field access
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:
    """Result can be created with any payload type."""

    def test_basic_creation(self):
        result = _result(
            params=FakeParams(value=42.0),
            info={"method": "gauss_jordan"},
            timing={"total_seconds": 0.01},
            backend_name="cpu_gauss_jordan",
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "gauss_jordan"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_gauss_jordan"

    def test_timing_none(self):
        assert _result().timing is None

    def test_info_dict_arbitrary_keys(self):
        result = _result(info={"converged": True, "iterations": 7})
        assert result.info["converged"] is True
        assert result.info["iterations"] == 7


class TestDefaults:
    """Default value for warnings."""

    def test_warnings_default_empty(self):
        result = _result()
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_warnings_explicit(self):
        result = _result(warnings=("df <= 0", "did not converge"))
        assert len(result.warnings) == 2


# ═══════════════════════════════════════════════════════════════════════
# Immutability
# ═══════════════════════════════════════════════════════════════════════


class TestImmutability:
    """Result is frozen; no attribute mutation allowed."""

    def test_cannot_set_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_set_warnings(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new warning",)


# ═══════════════════════════════════════════════════════════════════════
# has_warning()
# ═══════════════════════════════════════════════════════════════════════


class TestHasWarning:
    """has_warning() checks for substring in any warning."""

    def test_no_warnings_returns_false(self):
        assert _result().has_warning("anything") is False

    def test_substring_match(self):
        result = _result(warnings=("Newton-Raphson did not converge in 5 iterations",))
        assert result.has_warning("did not converge") is True
        assert result.has_warning("5 iterations") is True

    def test_no_match(self):
        result = _result(warnings=("did not converge",))
        assert result.has_warning("degrees of freedom") is False
