"""
Tests for the pyregress exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyRegressError)
    - Diagnostic attributes on DistributionArgumentError, SingularMatrixError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pyregress.core.exceptions import (
    DimensionError,
    DistributionArgumentError,
    NumericalError,
    PyRegressError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyRegressError."""

    def test_validation_error_is_pyregress_error(self):
        with pytest.raises(PyRegressError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong length")

    def test_distribution_argument_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DistributionArgumentError("df must be > 0")

    def test_numerical_error_is_pyregress_error(self):
        with pytest.raises(PyRegressError):
            raise NumericalError("computation failed")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_matrix_error_is_not_validation_error(self):
        err = SingularMatrixError("singular")
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# DistributionArgumentError
# ═══════════════════════════════════════════════════════════════════════


class TestDistributionArgumentError:
    """DistributionArgumentError names the function and argument."""

    def test_all_attributes(self):
        err = DistributionArgumentError(
            "students_t_cdf: df must be finite and > 0, got 0",
            function="students_t_cdf",
            argument="df",
            value=0,
        )
        assert "df must be" in str(err)
        assert err.function == "students_t_cdf"
        assert err.argument == "df"
        assert err.value == 0

    def test_defaults_are_none(self):
        err = DistributionArgumentError("bad argument")
        assert err.function is None
        assert err.argument is None
        assert err.value is None


# ═══════════════════════════════════════════════════════════════════════
# SingularMatrixError
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:
    """SingularMatrixError carries matrix diagnostic attributes."""

    def test_all_attributes(self):
        err = SingularMatrixError("X'X is singular", matrix_name="X'X", size=3)
        assert str(err) == "X'X is singular"
        assert err.matrix_name == "X'X"
        assert err.size == 3

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.size is None

    def test_catchable_with_attributes(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            raise SingularMatrixError("singular", matrix_name="W")
        assert exc_info.value.matrix_name == "W"
