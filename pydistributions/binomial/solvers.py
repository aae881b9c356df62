"""
Binomial distribution function matching R's pbinom().

P[X <= x] for X ~ Binomial(size, prob) equals the upper tail of the
Beta(x + 1, size - x) distribution at prob, so the computation is
delegated entirely to the regularized incomplete beta function.
"""

from __future__ import annotations

import math
import warnings
from functools import partial

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats as sp_stats

from pydistributions.core.dpq import (
    isnan, forceint, nonint, dt0, dt1, domain_error, NAN,
)
from pydistributions.core.elementwise import apply_elementwise
from pydistributions.core.exceptions import DomainWarning


def pbinom(
    q: ArrayLike,
    size: ArrayLike,
    prob: ArrayLike,
    lower_tail: bool = True,
    log_p: bool = False,
) -> float | NDArray[np.float64]:
    """
    Binomial distribution function. Matches R pbinom().

    Parameters
    ----------
    q : array-like
        Quantiles; q + 1e-7 is rounded down.
    size : array-like
        Number of trials, a non-negative integer (0 is allowed).
    prob : array-like
        Success probability in [0, 1].
    lower_tail : bool
        If True (default), P[X <= q]; otherwise P[X > q].
    log_p : bool
        If True, return log probabilities.

    Returns
    -------
    float or ndarray
        Probabilities. NaN (with DomainWarning) for invalid size or prob.
    """
    return apply_elementwise(
        partial(_pbinom, lower_tail=lower_tail, log_p=log_p),
        {"q": q, "size": size, "prob": prob},
    )


def _pbinom(x: float, n: float, p: float, lower_tail: bool, log_p: bool) -> float:
    if isnan(x, n, p):
        return x + n + p
    if not math.isfinite(n) or not math.isfinite(p):
        return domain_error("pbinom")

    if nonint(n):
        warnings.warn(f"non-integer n = {n:f}", DomainWarning, stacklevel=4)
        return NAN
    n = forceint(n)
    if n < 0 or p < 0 or p > 1:
        return domain_error("pbinom")

    if x < 0:
        return dt0(lower_tail, log_p)
    x = math.floor(x + 1e-7)
    if n <= x:
        return dt1(lower_tail, log_p)
    return _pbeta(p, x + 1, n - x, not lower_tail, log_p)


def _pbeta(x: float, a: float, b: float, lower_tail: bool, log_p: bool) -> float:
    """Beta(a, b) CDF on the requested tail and scale."""
    if lower_tail:
        fn = sp_stats.beta.logcdf if log_p else sp_stats.beta.cdf
    else:
        fn = sp_stats.beta.logsf if log_p else sp_stats.beta.sf
    return float(fn(x, a, b))
