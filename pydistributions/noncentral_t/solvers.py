"""
Noncentral t-distribution CDF matching R's pt(q, df, ncp).

Provides:
    pnt(q, df, ncp)         - elementwise CDF, diagnostics as Python warnings
    pnt_detail(t, df, ncp)  - one evaluation wrapped in Result[PntParams],
                              diagnostics as data
"""

from __future__ import annotations

import warnings
from functools import partial

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydistributions.core.elementwise import apply_elementwise
from pydistributions.core.exceptions import ValidationError
from pydistributions.core.result import Result
from pydistributions.core.tolerances import DEFAULT_SERIES_CONTROL, SeriesControl
from pydistributions.core.validation import check_array
from pydistributions.noncentral_t._as243 import pnt_kernel
from pydistributions.noncentral_t._common import PntParams, REGIME_BACKENDS


def pnt(
    q: ArrayLike,
    df: ArrayLike,
    ncp: ArrayLike,
    lower_tail: bool = True,
    log_p: bool = False,
    *,
    control: SeriesControl | None = None,
) -> float | NDArray[np.float64]:
    """
    Noncentral t distribution function. Matches R pt(q, df, ncp).

    Parameters
    ----------
    q : array-like
        Quantiles. Scalar input gives a float, array-like input an ndarray
        of the broadcast shape, in the same order.
    df : array-like
        Degrees of freedom, > 0 (may be fractional).
    ncp : array-like
        Noncentrality parameter.
    lower_tail : bool
        If True (default), P[T <= q]; otherwise P[T > q].
    log_p : bool
        If True, return log probabilities.
    control : SeriesControl or None
        Series iteration limits. Default DEFAULT_SERIES_CONTROL.

    Returns
    -------
    float or ndarray
        Probabilities. NaN (with DomainWarning) where df <= 0.

    Warns
    -----
    UnderflowWarning, PrecisionWarning, NonConvergenceWarning
        The series could not deliver full precision; the best available
        value is still returned.
    """
    ctl = control if control is not None else DEFAULT_SERIES_CONTROL
    return apply_elementwise(
        partial(_pnt_value, lower_tail=lower_tail, log_p=log_p, control=ctl),
        {"q": q, "df": df, "ncp": ncp},
    )


def pnt_detail(
    t: float,
    df: float,
    ncp: float,
    lower_tail: bool = True,
    log_p: bool = False,
    *,
    control: SeriesControl | None = None,
) -> Result[PntParams]:
    """
    Noncentral t CDF at one point, with series diagnostics.

    Same value as pnt(). Conditions that pnt() reports through
    warnings.warn are returned in ``result.warnings`` instead, and
    ``result.info`` carries the regime, iteration count and convergence
    flag.

    Parameters
    ----------
    t, df, ncp : float
        Scalars only.
    lower_tail, log_p : bool
        As for pnt().
    control : SeriesControl or None
        Series iteration limits. Default DEFAULT_SERIES_CONTROL.

    Returns
    -------
    Result[PntParams]

    Raises
    ------
    ValidationError
        If any of t, df, ncp is not a scalar.
    """
    ctl = control if control is not None else DEFAULT_SERIES_CONTROL
    scalars = []
    for name, value in (("t", t), ("df", df), ("ncp", ncp)):
        arr = check_array(value, name)
        if arr.ndim != 0:
            raise ValidationError(
                f"{name}: pnt_detail() takes scalars, got shape {arr.shape}; use pnt()"
            )
        scalars.append(float(arr))

    params, diagnostics = pnt_kernel(*scalars, lower_tail, log_p, ctl)

    return Result(
        params=params,
        info={
            'regime': params.regime,
            'iterations': params.iterations,
            'converged': params.converged,
            'error_bound': params.error_bound,
        },
        backend_name=REGIME_BACKENDS[params.regime],
        warnings=tuple(d.message for d in diagnostics),
    )


def _pnt_value(
    t: float,
    df: float,
    ncp: float,
    lower_tail: bool,
    log_p: bool,
    control: SeriesControl,
) -> float:
    params, diagnostics = pnt_kernel(t, df, ncp, lower_tail, log_p, control)
    for diag in diagnostics:
        warnings.warn(diag.message, diag.category, stacklevel=4)
    return params.value
