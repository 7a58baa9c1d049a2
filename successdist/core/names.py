"""
successdist.core.names
======================

Typed names shared across the package.

- `Probability`, `ProbabilityVector`: aliases for the two shapes of the
  success-probability argument.
- `Family`: Literal tags for the supported distribution families.
- `PMF`, `UnimodalPMF`: call signatures of probability mass functions.

Examples
--------
>>> from successdist.core.names import FamilyName
>>> FamilyName.BINOMIAL.value
'binomial'
>>> FamilyName("poisson_binomial") is FamilyName.POISSON_BINOMIAL
True
"""

from __future__ import annotations
from enum import Enum
from typing import Literal, Protocol, Sequence, Union

Probability = float
ProbabilityVector = Sequence[float]
ProbabilityLike = Union[Probability, ProbabilityVector]


class FamilyName(str, Enum):
    """Supported distribution families.

    - BINOMIAL: every trial shares one success probability
    - POISSON_BINOMIAL: each trial has its own success probability
    """

    BINOMIAL = "binomial"
    POISSON_BINOMIAL = "poisson_binomial"


Family = Literal["auto", "binomial", "poisson_binomial"]


class PMF(Protocol):
    """A probability mass function `(k, n, p) -> P(X = k)`."""

    def __call__(self, k: int, n: int, p: ProbabilityLike) -> float: ...


class UnimodalPMF(PMF, Protocol):
    """A PMF whose values over `k = 0..n` rise to a single peak and then fall.

    This is a contract on the caller, not something checked at runtime.
    `binomial_pmf` and `poisson_binomial_pmf` both satisfy it.
    """
