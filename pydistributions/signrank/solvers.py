"""
Wilcoxon signed-rank distribution matching R's dsignrank() family.

The signed-rank statistic V for sample size n is the sum of a random
subset of {1, ..., n}, each rank included independently with probability
1/2. All 2^n subsets are equally likely, so

    P(V = k) = w(k, n) / 2^n

where w(k, n) counts subsets summing to k (see SignRankTable).

Public API:
    csignrank(k, n)                 - subset counts w(k, n)
    dsignrank(x, n, log)            - density
    psignrank(q, n, lower_tail, log_p)
    qsignrank(p, n, lower_tail, log_p)
    rsignrank(n, size, random_state) - random variates

All functions except rsignrank map elementwise over broadcast arguments.
"""

from __future__ import annotations

import math
from functools import partial

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydistributions.core.dpq import (
    isnan, forceint, nonint, d0, d_exp, dt0, dt1, dt_val, dt_qiv,
    q_p01_invalid, domain_error, NAN,
)
from pydistributions.core.elementwise import apply_elementwise
from pydistributions.core.tolerances import (
    M_LN2, INTEGER_FUZZ, QUANTILE_SCAN_EPSILON,
)
from pydistributions.core.validation import (
    check_array, check_count, check_random_state,
)
from pydistributions.signrank._table import SignRankTable, default_table


def csignrank(
    k: ArrayLike,
    n: ArrayLike,
    *,
    table: SignRankTable | None = None,
) -> float | NDArray[np.float64]:
    """
    Number of subsets of {1, ..., n} that sum to k.

    Parameters
    ----------
    k : array-like
        Subset sum. Non-integer or out-of-range k gives 0.
    n : array-like
        Sample size, a non-negative integer.
    table : SignRankTable or None
        Table to use. Default is the calling thread's table.

    Returns
    -------
    float or ndarray
        Counts as float64 (exact up to 2^53).
    """
    tbl = table if table is not None else default_table()
    return apply_elementwise(partial(_csignrank, table=tbl), {"k": k, "n": n})


def dsignrank(
    x: ArrayLike,
    n: ArrayLike,
    log: bool = False,
    *,
    table: SignRankTable | None = None,
) -> float | NDArray[np.float64]:
    """
    Density of the signed-rank distribution. Matches R dsignrank().

    Parameters
    ----------
    x : array-like
        Quantiles. Values further than 1e-7 from an integer have density 0.
    n : array-like
        Number of observations; rounded to the nearest integer, must be > 0.
    log : bool
        If True, return log density.
    table : SignRankTable or None
        Table to use. Default is the calling thread's table.

    Returns
    -------
    float or ndarray
        Density values. NaN (with DomainWarning) where n <= 0.
    """
    tbl = table if table is not None else default_table()
    return apply_elementwise(
        partial(_dsignrank, log=log, table=tbl), {"x": x, "n": n}
    )


def psignrank(
    q: ArrayLike,
    n: ArrayLike,
    lower_tail: bool = True,
    log_p: bool = False,
    *,
    table: SignRankTable | None = None,
) -> float | NDArray[np.float64]:
    """
    Distribution function of the signed-rank distribution. Matches R psignrank().

    Parameters
    ----------
    q : array-like
        Quantiles; q + 1e-7 is rounded to the nearest integer.
    n : array-like
        Number of observations; must be finite and > 0.
    lower_tail : bool
        If True (default), P[V <= q]; otherwise P[V > q].
    log_p : bool
        If True, return log probabilities.
    table : SignRankTable or None
        Table to use. Default is the calling thread's table.

    Returns
    -------
    float or ndarray
        Probabilities. NaN (with DomainWarning) for invalid n.
    """
    tbl = table if table is not None else default_table()
    return apply_elementwise(
        partial(_psignrank, lower_tail=lower_tail, log_p=log_p, table=tbl),
        {"q": q, "n": n},
    )


def qsignrank(
    p: ArrayLike,
    n: ArrayLike,
    lower_tail: bool = True,
    log_p: bool = False,
    *,
    table: SignRankTable | None = None,
) -> float | NDArray[np.float64]:
    """
    Quantile function of the signed-rank distribution. Matches R qsignrank().

    Returns the smallest integer v with P[V <= v] >= p.

    Parameters
    ----------
    p : array-like
        Probabilities (log probabilities if log_p).
    n : array-like
        Number of observations; must be finite and > 0.
    lower_tail : bool
        If True (default), p is P[V <= v]; otherwise P[V > v].
    log_p : bool
        If True, p is given as log(p).
    table : SignRankTable or None
        Table to use. Default is the calling thread's table.

    Returns
    -------
    float or ndarray
        Integer-valued quantiles in [0, n(n+1)/2].
    """
    tbl = table if table is not None else default_table()
    return apply_elementwise(
        partial(_qsignrank, lower_tail=lower_tail, log_p=log_p, table=tbl),
        {"p": p, "n": n},
    )


def rsignrank(
    n: ArrayLike,
    size: ArrayLike | None = None,
    random_state: int | np.random.Generator | None = None,
) -> float | NDArray[np.float64]:
    """
    Random variates from the signed-rank distribution. Matches R rsignrank().

    Each variate is the sum of the ranks i in 1..n for which an independent
    uniform draw is >= 0.5.

    Parameters
    ----------
    n : array-like
        Number of observations. Without ``size``, one variate is drawn per
        element of n.
    size : int, array-like or None
        Number of variates, as R's ``nn``: a sequence of length other than
        1 means len(size) variates. n is recycled over the draws.
    random_state : None, int, or numpy.random.Generator
        Source of uniform random numbers.

    Returns
    -------
    float or ndarray
        A float for scalar n and no size; otherwise an ndarray (shape of n,
        or (size,)). NaN (with DomainWarning) where n < 0.
    """
    rng = check_random_state(random_state)
    n_arr = check_array(n, "n")

    if size is None:
        if n_arr.ndim == 0:
            return _rsignrank(float(n_arr), rng)
        flat = n_arr.reshape(-1)
        out = np.empty(flat.size, dtype=np.float64)
        for i in range(flat.size):
            out[i] = _rsignrank(float(flat[i]), rng)
        return out.reshape(n_arr.shape)

    count = check_count(size, "size")
    n_arr = n_arr.reshape(-1)
    out = np.empty(count, dtype=np.float64)
    if count == 0:
        return out
    if n_arr.size == 0:
        out.fill(NAN)
        return out

    for i in range(count):
        out[i] = _rsignrank(float(n_arr[i % n_arr.size]), rng)
    return out


# --- scalar kernels ---


def _csignrank(k: float, n: float, table: SignRankTable) -> float:
    if isnan(k, n):
        return k + n
    if not math.isfinite(n) or n < 0 or nonint(n):
        return domain_error("csignrank")
    if not math.isfinite(k) or nonint(k):
        return 0.0
    return table.count(int(forceint(k)), int(forceint(n)))


def _dsignrank(x: float, n: float, log: bool, table: SignRankTable) -> float:
    if isnan(x, n):
        return x + n
    n = forceint(n)
    if n <= 0 or not math.isfinite(n):
        return domain_error("dsignrank")
    if abs(x - forceint(x)) > INTEGER_FUZZ:
        return d0(log)
    x = forceint(x)
    if x < 0 or x > n * (n + 1) / 2:
        return d0(log)

    nn = int(n)
    return d_exp(log, math.log(table.count(int(x), nn)) - n * M_LN2)


def _psignrank(
    x: float, n: float, lower_tail: bool, log_p: bool, table: SignRankTable,
) -> float:
    if isnan(x, n):
        return x + n
    if not math.isfinite(n):
        return domain_error("psignrank")
    n = forceint(n)
    if n <= 0:
        return domain_error("psignrank")

    x = forceint(x + 1e-7)
    if x < 0.0:
        return dt0(lower_tail, log_p)
    u = n * (n + 1) / 2
    if x >= u:
        return dt1(lower_tail, log_p)

    nn = int(n)
    f = math.exp(-n * M_LN2)
    w = table.counts(nn)
    # Sum the shorter side of the symmetric support
    if x <= n * (n + 1) / 4:
        terms = w[:int(x) + 1]
    else:
        terms = w[:int(u - x)]
        lower_tail = not lower_tail
    # cumsum accumulates left to right, like the scalar loop
    p = float(np.cumsum(terms * f)[-1])

    return dt_val(lower_tail, log_p, p)


def _qsignrank(
    x: float, n: float, lower_tail: bool, log_p: bool, table: SignRankTable,
) -> float:
    if isnan(x, n):
        return x + n
    if not math.isfinite(x) or not math.isfinite(n):
        return domain_error("qsignrank")
    if q_p01_invalid(x, log_p):
        return domain_error("qsignrank")

    n = forceint(n)
    if n <= 0:
        return domain_error("qsignrank")

    u = n * (n + 1) / 2
    if x == dt0(lower_tail, log_p):
        return 0.0
    if x == dt1(lower_tail, log_p):
        return u

    if log_p or not lower_tail:
        x = dt_qiv(lower_tail, log_p, x)

    nn = int(n)
    f = math.exp(-n * M_LN2)
    cumulative = np.cumsum(table.counts(nn) * f)

    # First q at which the running sum reaches the target, scanning up from 0
    if x <= 0.5:
        target = x - QUANTILE_SCAN_EPSILON
        q = int(np.searchsorted(cumulative, target, side="left"))
        q = min(q, int(u))
    else:
        target = 1 - x + QUANTILE_SCAN_EPSILON
        q = int(np.searchsorted(cumulative, target, side="right"))
        q = max(int(u) - q, 0)

    return float(q)


def _rsignrank(n: float, rng: np.random.Generator) -> float:
    if math.isnan(n):
        return n
    n = forceint(n)
    if n < 0 or not math.isfinite(n):
        return domain_error("rsignrank", stacklevel=4)
    if n == 0:
        return 0.0

    k = int(n)
    included = np.floor(rng.random(k) + 0.5)
    return float(np.dot(np.arange(1, k + 1, dtype=np.float64), included))
