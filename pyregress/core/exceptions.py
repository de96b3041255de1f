"""
Exception hierarchy for pyregress.

All exceptions inherit from PyRegressError so callers can catch any
library-specific error in one place.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages state the actual value next to the expected range
    - Data values never raise on the linear path; only configuration does
"""


class PyRegressError(Exception):
    """Base exception for all pyregress errors."""
    pass


class ValidationError(PyRegressError):
    """
    Input validation failed.

    Raised for malformed configuration (confidence level outside [0, 1],
    infinite response for logistic regression, ...) before any
    computation starts.
    """
    pass


class DimensionError(ValidationError):
    """
    Lengths or shapes are inconsistent.

    Raised, for example, when the number of coefficients handed to
    residuals() differs from the number of predictor sequences.
    """
    pass


class DistributionArgumentError(ValidationError):
    """
    A distribution function received an argument outside its domain.

    The inferential statistics engine catches this error per output field
    and stores NaN in the affected field, so one degenerate quantity never
    aborts a whole fit.

    Attributes:
        function: Name of the distribution function that rejected the call
        argument: Name of the offending argument
        value: The offending value
    """

    def __init__(
        self,
        message: str,
        function: str | None = None,
        argument: str | None = None,
        value: float | None = None,
    ):
        super().__init__(message)
        self.function = function
        self.argument = argument
        self.value = value


class NumericalError(PyRegressError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues. The core solvers
    propagate non-finite values instead of raising; these errors are for
    callers that opt in to explicit checks.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        size: Dimension k of the k x k matrix
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        size: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.size = size
