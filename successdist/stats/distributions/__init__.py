"""
successdist.stats.distributions
===============================

PMF and CDF queries for the two supported families.

- `binomial`: trials share one success probability `p`
- `poisson_binomial`: trial `i` succeeds with its own probability `p[i]`

All four queries take ``(k, n, p)`` in that order, so any of them can be
handed to `successdist.stats.common.mode.find_max`.
"""

from successdist.stats.distributions.binomial import binomial_cdf, binomial_pmf
from successdist.stats.distributions.poisson_binomial import (
    poisson_binomial_cdf,
    poisson_binomial_pmf,
    poisson_binomial_pmf_values,
)

__all__ = [
    "binomial_cdf",
    "binomial_pmf",
    "poisson_binomial_cdf",
    "poisson_binomial_pmf",
    "poisson_binomial_pmf_values",
]
