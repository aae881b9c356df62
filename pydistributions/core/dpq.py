"""
Tail and log-scale helpers shared by every distribution function.

Mirrors R's dpq.h conventions: a probability is always returned in the
representation the caller asked for (lower or upper tail, linear or log
scale), and the exact values 0 and 1 are produced without rounding.

Naming:
    d0, d1      exact density/probability 0 or 1, log-aware
    dt0, dt1    exact CDF 0 or 1, tail- and log-aware
    dt_val      a computed lower-tail probability, tail- and log-aware
    dt_qiv      inverse of dt_val: back to a lower-tail linear probability
"""

from __future__ import annotations

import math
import warnings

from pydistributions.core.exceptions import DomainWarning
from pydistributions.core.tolerances import INTEGER_FUZZ

NAN = float('nan')
NEG_INF = float('-inf')


def isnan(*values: float) -> bool:
    """True if any value is NaN."""
    return any(math.isnan(v) for v in values)


def forceint(x: float) -> float:
    """Round to the nearest integer, ties to even (C nearbyint)."""
    return float(round(x)) if math.isfinite(x) else x


def nonint(x: float) -> bool:
    """True if x is further than a relative 1e-7 from an integer."""
    return abs(x - forceint(x)) > INTEGER_FUZZ * max(1.0, abs(x))


def log0(x: float) -> float:
    """Natural log with log(0) = -inf."""
    return math.log(x) if x > 0 else NEG_INF


def log1m(x: float) -> float:
    """log(1 - x) with log1m(1) = -inf."""
    return math.log1p(-x) if x < 1 else NEG_INF


def d0(log: bool) -> float:
    return NEG_INF if log else 0.0


def d1(log: bool) -> float:
    return 0.0 if log else 1.0


def dt0(lower_tail: bool, log_p: bool) -> float:
    """Probability 0 of the requested tail."""
    return d0(log_p) if lower_tail else d1(log_p)


def dt1(lower_tail: bool, log_p: bool) -> float:
    """Probability 1 of the requested tail."""
    return d1(log_p) if lower_tail else d0(log_p)


def d_exp(log: bool, x: float) -> float:
    """exp(x) unless a log-scale result is requested."""
    return x if log else math.exp(x)


def dt_val(lower_tail: bool, log_p: bool, p: float) -> float:
    """Transform a lower-tail probability p to the requested scale."""
    if lower_tail:
        return log0(p) if log_p else p
    return log1m(p) if log_p else 0.5 - p + 0.5


def dt_qiv(lower_tail: bool, log_p: bool, p: float) -> float:
    """Convert p on the requested scale back to a lower-tail probability."""
    if log_p:
        return math.exp(p) if lower_tail else -math.expm1(p)
    return p if lower_tail else 0.5 - p + 0.5


def q_p01_invalid(p: float, log_p: bool) -> bool:
    """True if p is not a legal probability on the requested scale."""
    if log_p:
        return p > 0
    return p < 0 or p > 1


def domain_error(where: str, stacklevel: int = 5) -> float:
    """
    Report an out-of-domain parameter and return the NaN sentinel.

    The default stacklevel points at the caller of an elementwise public
    function (public -> apply_elementwise -> kernel -> here).
    """
    warnings.warn(f"NaNs produced in {where}()", DomainWarning, stacklevel=stacklevel)
    return NAN
