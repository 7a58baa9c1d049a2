"""
successdist.stats.distributions.poisson_binomial
================================================

Poisson Binomial distribution: `n` independent trials where trial `i`
succeeds with its own probability `p[i]`.

Both queries evaluate the recurrence in
`successdist.stats.common.recurrence` against a memo table created for the
call and discarded when it returns, so concurrent callers never share state.

Examples
--------
>>> from successdist.stats.distributions.poisson_binomial import (
...     poisson_binomial_pmf, poisson_binomial_cdf)
>>> poisson_binomial_pmf(1, 2, [0.5, 0.5])
0.5
>>> poisson_binomial_cdf(2, 2, [0.5, 0.5])
1.0
>>> poisson_binomial_pmf(1, 3, [0.2, 0.3])
Traceback (most recent call last):
...
successdist.core.errors.InvalidArgumentError: Poisson Binomial PMF requires a probability vector with one entry per trial: expected 3, got 2
"""

from __future__ import annotations
import logging
from typing import List, Optional, Sequence

from successdist.core.validation import (
    ValidationConfig,
    check_outcome,
    check_probability_vector,
    check_trials,
)
from successdist.stats.common.recurrence import MemoTable, ekj

logger = logging.getLogger(__name__)


def poisson_binomial_pmf(
    k: int,
    n: int,
    p: Sequence[float],
    *,
    validation: Optional[ValidationConfig] = None,
) -> float:
    """
    Probability of exactly `k` successes among `n` trials with probabilities `p`.

    Args:
        k: Number of successes
        n: Number of trials
        p: Success probability of each trial, ``len(p) == n``
        validation: Input checks to apply (strict by default)

    Returns:
        P(X = k); 0 for counts outside ``0..n``

    Raises:
        InvalidArgumentError: If ``len(p) != n``, or, under strict validation,
            if `n`, `k` or an entry of `p` is out of domain.
    """
    operation = "Poisson Binomial PMF"
    n = check_trials(n, operation, validation)
    k = check_outcome(k, operation, validation)
    probabilities = check_probability_vector(p, n, operation, validation)
    # -1 and n + 1 are answered by the recurrence's own base cases
    if k < -1 or k > n + 1:
        return 0.0

    table = MemoTable(n + 1)
    probability = ekj(k, n, probabilities, table)
    logger.debug(
        "poisson_binomial_pmf(k=%d, n=%d) = %g, %d memo cells",
        k,
        n,
        probability,
        table.computed_cells(),
    )
    return probability


def poisson_binomial_cdf(
    k: int,
    n: int,
    p: Sequence[float],
    *,
    validation: Optional[ValidationConfig] = None,
) -> float:
    """
    Probability of at most `k` successes among `n` trials with probabilities `p`.

    Sums E(i, n) for ``i = 0..k`` against a single memo table. Going upwards
    in `i` means E(i, n) finds the E(i - 1, .) states it depends on already
    memoized, so each extra term only fills in the states it is missing.

    Args:
        k: Number of successes
        n: Number of trials
        p: Success probability of each trial, ``len(p) == n``
        validation: Input checks to apply (strict by default)

    Returns:
        P(X <= k); 0 for ``k < 0`` and the full sum up to `n` for ``k >= n``

    Raises:
        InvalidArgumentError: If ``len(p) != n``, or, under strict validation,
            if `n`, `k` or an entry of `p` is out of domain.
    """
    operation = "Poisson Binomial CDF"
    n = check_trials(n, operation, validation)
    k = check_outcome(k, operation, validation)
    probabilities = check_probability_vector(p, n, operation, validation)

    table = MemoTable(n + 1)
    probability = 0.0
    for i in range(min(k, n) + 1):
        probability += ekj(i, n, probabilities, table)
    logger.debug(
        "poisson_binomial_cdf(k=%d, n=%d) = %g, %d memo cells",
        k,
        n,
        probability,
        table.computed_cells(),
    )
    return probability


def poisson_binomial_pmf_values(
    n: int,
    p: Sequence[float],
    *,
    validation: Optional[ValidationConfig] = None,
) -> List[float]:
    """
    The whole PMF, ``[P(X = 0), ..., P(X = n)]``, from a single memo table.

    Filling E(k, n) for increasing `k` on one table costs O(n^2) in total,
    where `n + 1` separate `poisson_binomial_pmf` calls would cost O(n^3).

    Examples:
        >>> poisson_binomial_pmf_values(2, [0.5, 0.5])
        [0.25, 0.5, 0.25]
    """
    operation = "Poisson Binomial PMF"
    n = check_trials(n, operation, validation)
    probabilities = check_probability_vector(p, n, operation, validation)

    table = MemoTable(n + 1)
    values = [ekj(k, n, probabilities, table) for k in range(n + 1)]
    logger.debug(
        "poisson_binomial_pmf_values(n=%d), %d memo cells", n, table.computed_cells()
    )
    return values
