"""
PyDistributions: R-exact probability distribution functions for Python.

Density, distribution, quantile and random generation functions that
reproduce R's nmath results, including the numerically delicate ones
SciPy does not provide in R's form.

Submodules:
    signrank: Wilcoxon signed-rank distribution (d/p/q/r)
    noncentral_t: Noncentral t distribution function (AS 243)
    binomial: Binomial distribution function
"""

__version__ = "0.1.0"

from pydistributions import signrank
from pydistributions import noncentral_t
from pydistributions import binomial

from pydistributions.signrank import (
    csignrank, dsignrank, psignrank, qsignrank, rsignrank, SignRankTable,
)
from pydistributions.noncentral_t import pnt, pnt_detail
from pydistributions.binomial import pbinom

__all__ = [
    "__version__",
    "signrank",
    "noncentral_t",
    "binomial",
    "csignrank",
    "dsignrank",
    "psignrank",
    "qsignrank",
    "rsignrank",
    "SignRankTable",
    "pnt",
    "pnt_detail",
    "pbinom",
]
