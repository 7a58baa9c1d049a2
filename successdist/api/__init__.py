"""
successdist.api - User-Friendly Facade
======================================

Distribution value objects for callers that would rather not thread
``(n, p)`` through every query.

Examples
--------
>>> from successdist.api import successes_distribution
>>> d = successes_distribution(0.5, n=4)
>>> d.pmf(2)
0.375
>>> d.mode()
Mode(max=2, p=0.375)
>>> successes_distribution([0.5, 0.5]).pmf(1)
0.5

Architecture
------------
The facade delegates to:
- successdist.stats.distributions: the PMF/CDF queries
- successdist.stats.common.mode: the mode search
- successdist.reporting: tabulated output
"""

from successdist.api.distributions import (
    Binomial,
    PoissonBinomial,
    at_least,
    successes_distribution,
)

__all__ = ["Binomial", "PoissonBinomial", "at_least", "successes_distribution"]
