"""
successdist: a package for counting successes in independent Bernoulli trials.

A run of independent yes/no trials can be described in two ways: every trial
shares one success probability (the Binomial distribution), or each trial
carries its own (the Poisson Binomial distribution). successdist answers the
same three questions for both: how likely is exactly `k` successes (PMF), how
likely is at most `k` (CDF), and which count is the most likely (mode).

The package is layered the same way throughout:

- `successdist.core`: typed names, the argument error and validation policy
- `successdist.stats.common`: family-agnostic algorithms (binomial
  coefficient, the memoized Poisson Binomial recurrence, the mode search)
- `successdist.stats.distributions`: the four PMF/CDF queries
- `successdist.reporting`: tabulated distributions as Polars frames
- `successdist.api`: a small facade of distribution value objects

Every query is a pure function of its arguments. The Poisson Binomial queries
allocate a memo table for the duration of one call and drop it on return, so
nothing is shared between calls or threads.

Example
-------
>>> import successdist
>>> assert hasattr(successdist, "core")
>>> assert hasattr(successdist, "stats")
>>> successdist.binomial_pmf(2, 4, 0.5)
0.375
"""

import logging

from successdist import core, stats
from successdist.core.errors import InvalidArgumentError
from successdist.stats.common.mode import Mode, find_max
from successdist.stats.distributions import (
    binomial_cdf,
    binomial_pmf,
    poisson_binomial_cdf,
    poisson_binomial_pmf,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "InvalidArgumentError",
    "Mode",
    "binomial_cdf",
    "binomial_pmf",
    "core",
    "find_max",
    "poisson_binomial_cdf",
    "poisson_binomial_pmf",
    "stats",
]
