"""
Noncentral t CDF for one scalar argument.

Algorithm AS 243: Lenth, R.V. (1989). Cumulative distribution function of
the non-central t distribution. Appl. Statist. 38, 185-189. The twin
series is Guenther, J. (1978), Statist. Computn. Simuln. 6, 199.

P[T <= t] for t >= 0 is written as Phi(-delta) plus a Poisson-weighted
mixture of incomplete beta functions I_x(j + 1/2, df/2) (odd terms) and
I_x(j + 1, df/2) (even terms), x = t^2 / (t^2 + df). Both beta sequences
obey two-term recurrences, so each series term costs O(1).

Extreme parameters are routed away from the series:
    df > 4e5, or exp(-ncp^2/2) underflowing   -> A&S 26.7.10 normal approx
    t < 0 with ncp > 40 on the upper/log tail -> exact 0
"""

from __future__ import annotations

import math

from scipy import special as sp_special
from scipy import stats as sp_stats

from pydistributions.core.dpq import isnan, dt0, dt1, dt_val, NAN
from pydistributions.core.exceptions import (
    DomainWarning,
    UnderflowWarning,
    PrecisionWarning,
    NonConvergenceWarning,
)
from pydistributions.core.tolerances import (
    DBL_EPSILON,
    M_LN_SQRT_PI,
    M_SQRT_2dPI,
    PNT_THRESHOLDS,
    SeriesControl,
)
from pydistributions.noncentral_t._common import Diagnostic, PntParams


def pnt_kernel(
    t: float,
    df: float,
    ncp: float,
    lower_tail: bool,
    log_p: bool,
    control: SeriesControl,
) -> tuple[PntParams, list[Diagnostic]]:
    """
    Evaluate the noncentral t CDF at a single point.

    Returns the payload and the diagnostics raised; nothing is emitted
    from here, the caller decides whether to warn or to record.
    """
    diagnostics: list[Diagnostic] = []
    th = PNT_THRESHOLDS

    if isnan(t, df, ncp):
        return PntParams(value=t + df + ncp, regime="nan"), diagnostics

    if df <= 0.0:
        diagnostics.append(Diagnostic(DomainWarning, "NaNs produced in pnt()"))
        return PntParams(value=NAN, regime="invalid"), diagnostics

    if ncp == 0.0:
        return PntParams(value=_pt(t, df, lower_tail, log_p), regime="central"), diagnostics

    if not math.isfinite(t):
        value = dt0(lower_tail, log_p) if t < 0 else dt1(lower_tail, log_p)
        return PntParams(value=value, regime="infinite"), diagnostics

    if t >= 0.0:
        negdel = False
        tt = t
        delta = ncp
    else:
        # pt(t, df, ncp) <= pt(0, df, ncp) = Phi(-ncp), which is 0 in linear
        # scale; the lower-tail log value stays finite and is computed
        if ncp > th.left_tail_ncp and (not log_p or not lower_tail):
            return PntParams(value=dt0(lower_tail, log_p), regime="left_tail"), diagnostics
        negdel = True
        tt = -t
        delta = -ncp

    if df > th.df_max or delta * delta > th.ncp_sq_max:
        # Abramowitz & Stegun 26.7.10
        s = 1.0 / (4.0 * df)
        value = _pnorm(
            tt * (1.0 - s), delta, math.sqrt(1.0 + tt * tt * 2.0 * s),
            lower_tail != negdel, log_p,
        )
        return PntParams(value=value, regime="asymptotic"), diagnostics

    x = t * t
    rxb = df / (x + df)  # 1 - x, computed without cancellation
    x = x / (x + df)     # in [0, 1)

    tnc = 0.0
    iterations = 0
    converged = None
    errbd = None

    if x > 0.0:
        lam = delta * delta
        p = 0.5 * math.exp(-0.5 * lam)
        if p == 0.0:
            diagnostics.append(Diagnostic(UnderflowWarning, "underflow occurred in 'pnt'"))
            diagnostics.append(Diagnostic(UnderflowWarning, "value out of range in 'pnt'"))
            return PntParams(value=dt0(lower_tail, log_p), regime="underflow"), diagnostics

        tnc, iterations, converged, errbd = _twin_series(
            x, rxb, df, delta, lam, p, control, diagnostics,
        )

    tnc += _pnorm(-delta, 0.0, 1.0, True, False)

    lower_tail = lower_tail != negdel
    if tnc > 1.0 - control.near_one_tol and lower_tail:
        diagnostics.append(Diagnostic(
            PrecisionWarning,
            "full precision may not have been achieved in 'pnt{final}'",
        ))

    value = dt_val(lower_tail, log_p, min(tnc, 1.0))
    return PntParams(
        value=value,
        regime="series",
        iterations=iterations,
        converged=converged,
        error_bound=errbd,
    ), diagnostics


def _twin_series(
    x: float,
    rxb: float,
    df: float,
    delta: float,
    lam: float,
    p: float,
    control: SeriesControl,
    diagnostics: list[Diagnostic],
) -> tuple[float, int, bool, float | None]:
    """
    Sum the AS 243 series for 0 < x < 1.

    p is the first Poisson weight, exp(-lambda/2) / 2. Returns
    (sum, terms added, converged, last error bound).
    """
    q = M_SQRT_2dPI * p * delta
    s = 0.5 - p
    # 0.5 - p == -0.5 * expm1(-lambda/2), which keeps digits for small lambda
    if s < PNT_THRESHOLDS.small_s:
        s = -0.5 * math.expm1(-0.5 * lam)
    a = 0.5
    b = 0.5 * df
    # (1 - x)^b; close to 1 - b*x for tiny x, see xeven
    rxb = rxb ** b
    albeta = M_LN_SQRT_PI + sp_special.gammaln(b) - sp_special.gammaln(0.5 + b)
    xodd = float(sp_special.betainc(a, b, x))
    godd = 2.0 * rxb * math.exp(a * math.log(x) - albeta)
    tnc = b * x
    xeven = tnc if tnc < DBL_EPSILON else 1.0 - rxb
    geven = tnc * rxb
    tnc = p * xodd + q * xeven

    errbd = None
    for it in range(1, control.itrmax + 1):
        a += 1.0
        xodd -= godd
        xeven -= geven
        godd *= x * (a + b - 1.0) / a
        geven *= x * (a + b - 0.5) / (a + 0.5)
        p *= lam / (2 * it)
        q *= lam / (2 * it + 1)
        tnc += p * xodd + q * xeven
        s -= p

        # Poisson weights summed past 1: rounding has overtaken the series
        if s < -control.negative_weight_tol:
            diagnostics.append(Diagnostic(
                PrecisionWarning,
                "full precision may not have been achieved in 'pnt'",
            ))
            return tnc, it, False, errbd
        if s <= 0:
            return tnc, it, True, errbd
        errbd = 2.0 * s * (xodd - godd)
        if abs(errbd) < control.errmax:
            return tnc, it, True, errbd

    diagnostics.append(Diagnostic(
        NonConvergenceWarning,
        f"convergence failed in 'pnt' after {control.itrmax} iterations",
    ))
    return tnc, control.itrmax, False, errbd


def _pt(t: float, df: float, lower_tail: bool, log_p: bool) -> float:
    """Central t CDF on the requested tail and scale."""
    if lower_tail:
        return float(sp_stats.t.logcdf(t, df) if log_p else sp_stats.t.cdf(t, df))
    return float(sp_stats.t.logsf(t, df) if log_p else sp_stats.t.sf(t, df))


def _pnorm(x: float, mean: float, sd: float, lower_tail: bool, log_p: bool) -> float:
    """Normal CDF on the requested tail and scale."""
    if lower_tail:
        fn = sp_stats.norm.logcdf if log_p else sp_stats.norm.cdf
    else:
        fn = sp_stats.norm.logsf if log_p else sp_stats.norm.sf
    return float(fn(x, loc=mean, scale=sd))
