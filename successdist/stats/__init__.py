"""
Probability computations for counts of successes.

The module separates generic algorithms from distribution-specific queries:

1. **Common** (successdist.stats.common):
   Family-agnostic building blocks: the binomial coefficient, the memoized
   Poisson Binomial recurrence with its per-query memo table, and the
   unimodal mode search.

2. **Distributions** (successdist.stats.distributions):
   The PMF/CDF queries of the Binomial and Poisson Binomial families,
   composed from the building blocks in `common`.

Example:
--------
>>> from successdist.stats.common.combinatorics import binomial_coefficient
>>> binomial_coefficient(4, 2)
6

>>> from successdist.stats.distributions import poisson_binomial_pmf
>>> poisson_binomial_pmf(1, 2, [0.5, 0.5])
0.5
"""
