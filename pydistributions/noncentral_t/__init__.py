"""
Noncentral t-distribution.

Public API:
    pnt(q, df, ncp)          - distribution function (AS 243)
    pnt_detail(t, df, ncp)   - single evaluation with series diagnostics
    PntParams                - payload of pnt_detail()
"""

from pydistributions.noncentral_t.solvers import pnt, pnt_detail
from pydistributions.noncentral_t._common import PntParams

__all__ = [
    "pnt",
    "pnt_detail",
    "PntParams",
]
