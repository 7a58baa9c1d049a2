"""
successdist.stats.distributions.binomial
========================================

Binomial distribution: `n` independent trials sharing one success
probability `p`.

Examples
--------
>>> from successdist.stats.distributions.binomial import binomial_pmf, binomial_cdf
>>> binomial_pmf(2, 4, 0.5)
0.375
>>> binomial_cdf(4, 4, 0.5)
1.0
"""

from __future__ import annotations
import logging
import math
import sys
from typing import Optional

from successdist.core.validation import (
    RELAXED_VALIDATION,
    ValidationConfig,
    check_outcome,
    check_probability,
    check_trials,
)
from successdist.stats.common.combinatorics import binomial_coefficient

logger = logging.getLogger(__name__)

# Integers with fewer bits than this convert to float without overflow.
_FLOAT_MAX_BITS = sys.float_info.max_exp
# Smallest positive normal float; below it results lose precision.
_FLOAT_MIN_NORMAL = sys.float_info.min


def binomial_pmf(
    k: int,
    n: int,
    p: float,
    *,
    validation: Optional[ValidationConfig] = None,
) -> float:
    """
    Probability of exactly `k` successes in `n` trials with success probability `p`.

    Computes ``C(n, k) * p**k * (1 - p)**(n - k)``. Counts outside ``0..n``
    have probability 0.

    Args:
        k: Number of successes
        n: Number of trials
        p: Success probability of every trial
        validation: Input checks to apply (strict by default)

    Returns:
        P(X = k)

    Raises:
        InvalidArgumentError: If `n` is negative or not an integer, `k` is not
            an integer, or `p` is not a probability.

    Examples:
        >>> binomial_pmf(1, 2, 0.5)
        0.5
        >>> binomial_pmf(-1, 2, 0.5)
        0.0
    """
    operation = "Binomial PMF"
    n = check_trials(n, operation, validation)
    k = check_outcome(k, operation, validation)
    p = check_probability(p, operation, validation)
    if k < 0 or k > n:
        return 0.0

    if p == 0.0:
        return 1.0 if k == 0 else 0.0
    if p == 1.0:
        return 1.0 if k == n else 0.0

    coefficient = binomial_coefficient(n, k)
    success = p**k
    failure = (1 - p) ** (n - k)
    if (
        coefficient.bit_length() < _FLOAT_MAX_BITS
        and abs(success) >= _FLOAT_MIN_NORMAL
        and abs(failure) >= _FLOAT_MIN_NORMAL
    ):
        direct = coefficient * success * failure
        if abs(direct) >= _FLOAT_MIN_NORMAL:
            return direct

    # C(n, k) overflows or a power underflows; combine the factors in log space.
    return math.exp(math.log(coefficient) + k * math.log(p) + (n - k) * math.log1p(-p))


def binomial_cdf(
    k: int,
    n: int,
    p: float,
    *,
    validation: Optional[ValidationConfig] = None,
) -> float:
    """
    Probability of at most `k` successes in `n` trials with success probability `p`.

    Sums `binomial_pmf` over ``i = 0..k``. Arguments are validated once,
    before the sum.

    Examples:
        >>> binomial_cdf(1, 2, 0.5)
        0.75
        >>> binomial_cdf(-1, 2, 0.5)
        0.0
    """
    operation = "Binomial CDF"
    n = check_trials(n, operation, validation)
    k = check_outcome(k, operation, validation)
    p = check_probability(p, operation, validation)

    probability = 0.0
    for i in range(min(k, n) + 1):
        probability += binomial_pmf(i, n, p, validation=RELAXED_VALIDATION)
    logger.debug("binomial_cdf(k=%d, n=%d, p=%g) = %g", k, n, p, probability)
    return probability
