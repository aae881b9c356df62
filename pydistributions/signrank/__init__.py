"""
Wilcoxon signed-rank distribution.

Provides R's signed-rank distribution functions, computed exactly from
subset-sum counts.

Public API:
    dsignrank(x, n)       - density
    psignrank(q, n)       - distribution function
    qsignrank(p, n)       - quantile function
    rsignrank(n, size)    - random variates
    csignrank(k, n)       - number of subsets of {1..n} summing to k
    SignRankTable         - explicit, reusable count table
"""

from pydistributions.signrank.solvers import (
    csignrank, dsignrank, psignrank, qsignrank, rsignrank,
)
from pydistributions.signrank._table import SignRankTable, default_table

__all__ = [
    "csignrank",
    "dsignrank",
    "psignrank",
    "qsignrank",
    "rsignrank",
    "SignRankTable",
    "default_table",
]
