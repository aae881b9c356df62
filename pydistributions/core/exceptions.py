"""
Exception and warning hierarchy for PyDistributions.

All exceptions inherit from PyDistributionsError to allow catching any
library-specific error. All warnings inherit from PyDistributionsWarning.

Design principles:
    - Invalid distribution parameters are NOT exceptions: the function
      returns NaN and emits a DomainWarning, exactly like R's nmath.
    - Exceptions are reserved for programmer errors (wrong argument
      types) and resource exhaustion.
    - Exceptions carry diagnostic information as attributes
"""


class PyDistributionsError(Exception):
    """Base exception for all PyDistributions errors."""
    pass


class ValidationError(PyDistributionsError):
    """
    Input validation failed.

    Raised when an argument is of the wrong kind altogether (not numeric,
    a negative draw count, an unusable random_state). Out-of-domain
    numeric parameters produce NaN instead.
    """
    pass


class NumericalError(PyDistributionsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class AllocationError(NumericalError):
    """
    A coefficient table could not be allocated.

    Raised when the signed-rank counting table for sample size n cannot
    be created. This is fatal: it indicates resource exhaustion rather
    than a recoverable numeric condition.

    Attributes:
        n: Sample size the table was requested for
        length: Number of float64 slots requested
    """

    def __init__(
        self,
        message: str,
        n: int | None = None,
        length: int | None = None,
    ):
        super().__init__(message)
        self.n = n
        self.length = length


class PyDistributionsWarning(RuntimeWarning):
    """Base warning for all non-fatal PyDistributions diagnostics."""
    pass


class DomainWarning(PyDistributionsWarning):
    """
    A distribution parameter was outside its domain; NaN was returned.

    Turn into a hard error with
    ``warnings.simplefilter("error", DomainWarning)``.
    """
    pass


class UnderflowWarning(PyDistributionsWarning):
    """An intermediate quantity underflowed to zero."""
    pass


class PrecisionWarning(PyDistributionsWarning):
    """Full precision may not have been achieved."""
    pass


class NonConvergenceWarning(PyDistributionsWarning):
    """
    An iterative series did not converge within its iteration limit.

    The best available estimate is still returned.
    """
    pass
