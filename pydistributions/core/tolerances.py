"""
Numeric constants and tunable controls shared by the distribution engines.

These values reproduce R's nmath exactly. They are empirical guards
against floating rounding, not derived error bounds; change them only
together with a matching error analysis.

Used by the engines, the test suite, and callers that want to tune the
noncentral-t series.
"""

import math
import sys
from dataclasses import dataclass

DBL_EPSILON = sys.float_info.epsilon

# -1021 in IEEE double: exp(x) underflows below x = DBL_MIN_EXP * ln 2
DBL_MIN_EXP = sys.float_info.min_exp

M_LN2 = math.log(2.0)
M_SQRT_2dPI = math.sqrt(2.0 / math.pi)
M_LN_SQRT_PI = 0.5 * math.log(math.pi)

# An argument within this distance of an integer is treated as that integer
INTEGER_FUZZ = 1e-7

# Shift applied to the quantile scan target in qsignrank
QUANTILE_SCAN_EPSILON = 10 * DBL_EPSILON


@dataclass(frozen=True)
class SeriesControl:
    """
    Iteration controls for the AS 243 twin series.

    Attributes:
        itrmax: Maximum number of series terms
        errmax: Absolute error bound at which the series is converged
        negative_weight_tol: Residual Poisson weight below -tol signals
            accumulated rounding error
        near_one_tol: A lower-tail result above 1 - tol is flagged as
            possibly imprecise
    """
    itrmax: int = 1000
    errmax: float = 1e-12
    negative_weight_tol: float = 1e-10
    near_one_tol: float = 1e-10


DEFAULT_SERIES_CONTROL = SeriesControl()


@dataclass(frozen=True)
class AsymptoticThresholds:
    """
    Regime boundaries of the noncentral-t CDF.

    Attributes:
        df_max: Above this df the normal approximation is used
        ncp_sq_max: Above this ncp^2, exp(-ncp^2/2) underflows and the
            normal approximation is used
        left_tail_ncp: For t < 0 and ncp above this, the upper/log tail
            is returned as exactly 0 probability
        small_s: Below this, 0.5 - p is recomputed with expm1
    """
    df_max: float = 4e5
    ncp_sq_max: float = 2 * M_LN2 * -DBL_MIN_EXP
    left_tail_ncp: float = 40.0
    small_s: float = 1e-7


PNT_THRESHOLDS = AsymptoticThresholds()
