"""
Binomial distribution.

Public API:
    pbinom(q, size, prob)   - distribution function via the incomplete beta
"""

from pydistributions.binomial.solvers import pbinom

__all__ = [
    "pbinom",
]
