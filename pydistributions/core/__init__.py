"""
Core infrastructure for PyDistributions.

This module provides shared abstractions and numeric utilities used by
all distribution submodules (signrank, noncentral_t, binomial).

Key components:
    result: Generic Result[P] envelope for detailed evaluations
    exceptions: Exception and warning hierarchy
    validation: Argument-kind validators
    tolerances: Numeric constants and SeriesControl
    dpq: Tail/log-scale helpers (R's dpq.h)
    elementwise: Scalar-to-array mapping
"""

from pydistributions.core.result import Result
from pydistributions.core.tolerances import SeriesControl, DEFAULT_SERIES_CONTROL
from pydistributions.core.exceptions import (
    PyDistributionsError,
    ValidationError,
    NumericalError,
    AllocationError,
    PyDistributionsWarning,
    DomainWarning,
    UnderflowWarning,
    PrecisionWarning,
    NonConvergenceWarning,
)

__all__ = [
    # Result
    "Result",
    # Controls
    "SeriesControl",
    "DEFAULT_SERIES_CONTROL",
    # Exceptions
    "PyDistributionsError",
    "ValidationError",
    "NumericalError",
    "AllocationError",
    # Warnings
    "PyDistributionsWarning",
    "DomainWarning",
    "UnderflowWarning",
    "PrecisionWarning",
    "NonConvergenceWarning",
]
