"""
successdist.stats.common.combinatorics
======================================

Counting helpers for the Binomial distribution.
"""

from __future__ import annotations


def binomial_coefficient(n: int, k: int) -> int:
    """
    Compute C(n, k) = n! / (k! (n - k)!) without full factorials.

    The (n - k)! factor cancels against the tail of n!, leaving
    (n - k + 1) * (n - k + 2) * ... * n over k!. Both products are exact
    Python integers, so the division is exact as well.

    Args:
        n: Number of trials (n >= 0)
        k: Number of successes (0 <= k <= n)

    Returns:
        The binomial coefficient as an int

    Note:
        The range of `k` is not checked; callers only use 0 <= k <= n.

    Examples:
        >>> binomial_coefficient(4, 2)
        6
        >>> binomial_coefficient(10, 0)
        1
        >>> binomial_coefficient(60, 30)
        118264581564861424
    """
    numerator = 1
    denominator = 1
    for i in range(n - k + 1, n + 1):
        numerator *= i
    for i in range(1, k + 1):
        denominator *= i
    return numerator // denominator
