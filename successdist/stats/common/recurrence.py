"""
successdist.stats.common.recurrence
===================================

The Poisson Binomial recurrence and its per-query memo table.

Let E(k, j) be the probability of exactly `k` successes among the first `j`
trials. Trial `j` either succeeds (probability `p[j-1]`) or fails, so

    E(k, j) = (1 - p[j-1]) * E(k, j-1) + p[j-1] * E(k-1, j-1)

with E(-1, j) = 0, E(j+1, j) = 0 and E(0, 0) = 1. E(k, j) only depends on
states with a smaller `j`, so the recursion terminates, and memoizing every
state brings a whole query down to O(n^2) work.

References:
- Chen, S. X. & Liu, J. S. (1997). Statistical applications of the Poisson-binomial
  and conditional Bernoulli distributions. Statistica Sinica 7, 875-892.
- Hong, Y. (2013). On computing the distribution function for the Poisson
  binomial distribution. Computational Statistics & Data Analysis 59, 41-51.

Examples
--------
>>> from successdist.stats.common.recurrence import MemoTable, ekj
>>> table = MemoTable(3)
>>> ekj(1, 2, [0.5, 0.5], table)
0.5
>>> table.computed_cells()
3
"""

from __future__ import annotations
from typing import Iterator, List, Optional, Sequence, Tuple, cast


class MemoTable:
    """
    A square grid of E(k, j) values addressed as ``table[k, j]``.

    Cells start out as ``None`` ("uncomputed"), which keeps them distinct from
    a genuine zero probability. A cell is written at most once; writing a
    different value into a computed cell raises ``RuntimeError``.

    A table belongs to a single query and is dropped when the query returns.

    Examples
    --------
    >>> t = MemoTable(2)
    >>> t[1, 1] is None
    True
    >>> t[1, 1] = 0.25
    >>> t[1, 1]
    0.25
    >>> t[1, 1] = 0.5
    Traceback (most recent call last):
    ...
    RuntimeError: Memo cell [1][1] already holds 0.25, refusing to overwrite with 0.5
    """

    __slots__ = ("size", "_cells")

    def __init__(self, size: int) -> None:
        self.size = size
        self._cells: List[List[Optional[float]]] = [
            [None] * size for _ in range(size)
        ]

    def __getitem__(self, key: Tuple[int, int]) -> Optional[float]:
        k, j = key
        return self._cells[k][j]

    def __setitem__(self, key: Tuple[int, int], value: float) -> None:
        k, j = key
        current = self._cells[k][j]
        if current is not None:
            if current != value:
                raise RuntimeError(
                    f"Memo cell [{k}][{j}] already holds {current}, "
                    f"refusing to overwrite with {value}"
                )
            return
        self._cells[k][j] = value

    def __iter__(self) -> Iterator[Tuple[int, int, float]]:
        """Iterate over computed cells as ``(k, j, value)``."""
        for k, row in enumerate(self._cells):
            for j, value in enumerate(row):
                if value is not None:
                    yield k, j, value

    def computed_cells(self) -> int:
        """Number of cells that hold a value."""
        return sum(1 for row in self._cells for value in row if value is not None)


def _settled(k: int, j: int, table: MemoTable) -> Optional[float]:
    """Resolve (k, j) from the base cases or the memo, or return None."""
    if k == -1:
        return 0.0
    if k == j + 1:
        return 0.0
    if k == 0 and j == 0:
        return 1.0
    return table[k, j]


def ekj(k: int, j: int, p: Sequence[float], table: MemoTable) -> float:
    """
    Probability of exactly `k` successes among the first `j` trials.

    Base cases are checked first, in order: ``k == -1`` gives 0,
    ``k == j + 1`` gives 0, ``k == 0 and j == 0`` gives 1. Otherwise the
    memo is consulted and, on a miss, the recurrence is applied and the
    result stored.

    The recursion runs on an explicit stack rather than on Python frames, so
    the number of trials is not bounded by the interpreter's recursion limit.
    States are still resolved depth-first, `E(k, j-1)` before `E(k-1, j-1)`.

    Args:
        k: Number of successes, -1 <= k <= j + 1
        j: Number of leading trials considered, 0 <= j <= len(p)
        p: Success probability of each trial (trial `j` uses ``p[j-1]``)
        table: Memo table of size at least ``len(p) + 1``

    Returns:
        E(k, j)
    """
    value = _settled(k, j, table)
    if value is not None:
        return value

    stack = [(k, j)]
    while stack:
        kk, jj = stack[-1]
        if table[kk, jj] is not None:
            # reached twice through different parents
            stack.pop()
            continue
        fail = _settled(kk, jj - 1, table)
        success = _settled(kk - 1, jj - 1, table)
        if fail is None or success is None:
            if success is None:
                stack.append((kk - 1, jj - 1))
            if fail is None:
                stack.append((kk, jj - 1))
            continue
        q = p[jj - 1]
        table[kk, jj] = (1 - q) * fail + q * success
        stack.pop()

    return cast(float, table[k, j])
