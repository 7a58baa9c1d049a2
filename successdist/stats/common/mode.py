"""
successdist.stats.common.mode
=============================

Mode search for bell-shaped probability mass functions.

`find_max` walks `k = 0, 1, ..., n` and stops at the first drop in
probability. That is only a correct global search when the PMF is unimodal
over `0..n`, which holds for the Binomial and Poisson Binomial families. Given
a PMF with several peaks it returns the first local maximum.

Examples
--------
>>> from successdist.stats.common.mode import find_max
>>> from successdist.stats.distributions import binomial_pmf
>>> find_max(4, 0.5, binomial_pmf)
Mode(max=2, p=0.375)
"""

from __future__ import annotations
import logging
from typing import NamedTuple

from successdist.core.names import ProbabilityLike, UnimodalPMF

logger = logging.getLogger(__name__)


class Mode(NamedTuple):
    """Most likely number of successes and its probability.

    ``max`` is -1 when no count had a positive probability.
    """

    max: int
    p: float


def find_max(n: int, p: ProbabilityLike, pmf: UnimodalPMF) -> Mode:
    """
    Find the most likely number of successes of a unimodal PMF.

    Args:
        n: Number of trials
        p: Success probability (Binomial) or probability vector (Poisson Binomial),
            passed through to `pmf` unchanged
        pmf: Mass function called as ``pmf(k, n, p)``; must be unimodal over
            ``k = 0..n``

    Returns:
        `Mode` with the earliest count attaining the peak. Ties keep the first
        count; a strictly lower value ends the search.

    Note:
        Errors raised by `pmf` propagate unchanged.
    """
    best = Mode(-1, 0.0)
    for k in range(n + 1):
        probability = pmf(k, n, p)
        if probability > best.p:
            best = Mode(k, probability)
        elif probability < best.p:
            logger.debug("find_max: stopped at k=%d, peak at k=%d", k, best.max)
            break
    return best
