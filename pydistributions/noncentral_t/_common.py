"""
Common types for the noncentral t-distribution.

Defines PntParams (the payload of pnt_detail) and Diagnostic, the record a
scalar evaluation uses to report non-fatal conditions to its caller.
"""

from __future__ import annotations

from dataclasses import dataclass


# Which algorithm produced a value, keyed by regime
REGIME_BACKENDS = {
    "nan": "nan_propagation",
    "invalid": "domain_check",
    "central": "central_t",
    "infinite": "boundary",
    "left_tail": "boundary",
    "asymptotic": "abramowitz_stegun_26_7_10",
    "underflow": "as243",
    "series": "as243",
}


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal condition raised during one evaluation."""
    category: type[Warning]
    message: str


@dataclass(frozen=True)
class PntParams:
    """
    Payload of a detailed noncentral-t CDF evaluation.

    Attributes
    ----------
    value : float
        The probability, on the requested tail and scale.
    regime : str
        Which branch produced the value; one of the keys of
        REGIME_BACKENDS.
    iterations : int
        Number of AS 243 series terms added (0 outside the series).
    converged : bool or None
        Whether the series met a stopping rule. None outside the series
        and for t == 0, where no series is needed.
    error_bound : float or None
        Last computed bound on the series truncation error.
    """
    value: float
    regime: str
    iterations: int = 0
    converged: bool | None = None
    error_bound: float | None = None
