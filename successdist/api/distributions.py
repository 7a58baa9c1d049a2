"""
successdist.api.distributions
=============================

Value objects for the two distribution families and a factory that picks the
right one from the shape of the probability argument.

Arguments are validated once when an object is built; its queries then skip
re-validating `n` and `p` on every call.

Examples
--------
>>> from successdist.api.distributions import Binomial, PoissonBinomial, at_least
>>> Binomial(n=2, p=0.5).cdf(1)
0.75
>>> PoissonBinomial(p=[0.5, 0.5]).n
2
>>> at_least(1, 0.5, n=2)
0.75
"""

from __future__ import annotations
import numbers
from dataclasses import dataclass, field
from functools import partial
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple, Union

from successdist.core.errors import InvalidArgumentError
from successdist.core.names import Family, FamilyName
from successdist.core.validation import (
    DEFAULT_VALIDATION,
    RELAXED_VALIDATION,
    ValidationConfig,
    check_outcome,
    check_probability,
    check_probability_vector,
    check_trials,
)
from successdist.stats.common.mode import Mode, find_max
from successdist.stats.distributions import (
    binomial_cdf,
    binomial_pmf,
    poisson_binomial_cdf,
    poisson_binomial_pmf,
    poisson_binomial_pmf_values,
)

if TYPE_CHECKING:
    from successdist.reporting.tables import DistributionReport


@dataclass(frozen=True)
class Binomial:
    """
    Number of successes in `n` trials sharing success probability `p`.

    Parameters
    ----------
    n : int
        Number of trials
    p : float
        Success probability of every trial
    validation : ValidationConfig, optional
        Checks applied when the object is built

    Examples
    --------
    >>> d = Binomial(n=4, p=0.5)
    >>> d.mean(), d.variance()
    (2.0, 1.0)
    >>> d.sf(2)
    0.3125
    """

    n: int
    p: float
    validation: ValidationConfig = field(
        default=DEFAULT_VALIDATION, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "n", check_trials(self.n, "Binomial", self.validation))
        object.__setattr__(
            self, "p", check_probability(self.p, "Binomial", self.validation)
        )

    @property
    def family(self) -> FamilyName:
        return FamilyName.BINOMIAL

    def pmf(self, k: int) -> float:
        """P(X = k)."""
        k = check_outcome(k, "Binomial PMF")
        return binomial_pmf(k, self.n, self.p, validation=RELAXED_VALIDATION)

    def cdf(self, k: int) -> float:
        """P(X <= k)."""
        k = check_outcome(k, "Binomial CDF")
        return binomial_cdf(k, self.n, self.p, validation=RELAXED_VALIDATION)

    def pmf_values(self) -> List[float]:
        """[P(X = 0), ..., P(X = n)]."""
        return [
            binomial_pmf(k, self.n, self.p, validation=RELAXED_VALIDATION)
            for k in range(self.n + 1)
        ]

    def sf(self, k: int) -> float:
        """P(X > k)."""
        return max(0.0, 1.0 - self.cdf(k))

    def at_least(self, k: int) -> float:
        """P(X >= k)."""
        return max(0.0, 1.0 - self.cdf(k - 1))

    def mode(self) -> Mode:
        return find_max(
            self.n, self.p, partial(binomial_pmf, validation=RELAXED_VALIDATION)
        )

    def mean(self) -> float:
        return float(self.n * self.p)

    def variance(self) -> float:
        return float(self.n * self.p * (1.0 - self.p))

    def table(self) -> "DistributionReport":
        """Tabulate the distribution over ``k = 0..n``."""
        from successdist.reporting.tables import DistributionReport

        return DistributionReport(self)


@dataclass(frozen=True)
class PoissonBinomial:
    """
    Number of successes in independent trials with individual probabilities.

    Parameters
    ----------
    p : sequence of float
        Success probability of each trial; the number of trials is ``len(p)``
    validation : ValidationConfig, optional
        Checks applied when the object is built

    Examples
    --------
    >>> d = PoissonBinomial(p=[0.5, 0.5])
    >>> d.pmf(0), d.pmf(1), d.pmf(2)
    (0.25, 0.5, 0.25)
    >>> d.mode()
    Mode(max=1, p=0.5)
    """

    p: Tuple[float, ...]
    validation: ValidationConfig = field(
        default=DEFAULT_VALIDATION, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        probabilities = check_probability_vector(
            self.p, len(self.p), "Poisson Binomial", self.validation
        )
        object.__setattr__(self, "p", tuple(probabilities))

    @property
    def n(self) -> int:
        return len(self.p)

    @property
    def family(self) -> FamilyName:
        return FamilyName.POISSON_BINOMIAL

    def pmf(self, k: int) -> float:
        """P(X = k)."""
        k = check_outcome(k, "Poisson Binomial PMF")
        return poisson_binomial_pmf(k, self.n, self.p, validation=RELAXED_VALIDATION)

    def cdf(self, k: int) -> float:
        """P(X <= k)."""
        k = check_outcome(k, "Poisson Binomial CDF")
        return poisson_binomial_cdf(k, self.n, self.p, validation=RELAXED_VALIDATION)

    def pmf_values(self) -> List[float]:
        """[P(X = 0), ..., P(X = n)], computed on one memo table."""
        return poisson_binomial_pmf_values(
            self.n, self.p, validation=RELAXED_VALIDATION
        )

    def sf(self, k: int) -> float:
        """P(X > k)."""
        return max(0.0, 1.0 - self.cdf(k))

    def at_least(self, k: int) -> float:
        """P(X >= k)."""
        return max(0.0, 1.0 - self.cdf(k - 1))

    def mode(self) -> Mode:
        return find_max(
            self.n,
            self.p,
            partial(poisson_binomial_pmf, validation=RELAXED_VALIDATION),
        )

    def mean(self) -> float:
        return float(sum(self.p))

    def variance(self) -> float:
        return float(sum(q * (1.0 - q) for q in self.p))

    def table(self) -> "DistributionReport":
        """Tabulate the distribution over ``k = 0..n``."""
        from successdist.reporting.tables import DistributionReport

        return DistributionReport(self)


Distribution = Union[Binomial, PoissonBinomial]


def successes_distribution(
    p: Union[float, Sequence[float]],
    n: Optional[int] = None,
    family: Family = "auto",
    validation: Optional[ValidationConfig] = None,
) -> Distribution:
    """
    Build the distribution of the number of successes.

    Parameters
    ----------
    p : float or sequence of float
        A shared success probability, or one probability per trial
    n : int, optional
        Number of trials. Required for a scalar `p`; for a vector it must
        match ``len(p)`` when given.
    family : {"auto", "binomial", "poisson_binomial"}, default="auto"
        - "auto": Binomial for a scalar `p`, Poisson Binomial for a vector
        - "binomial": a vector is accepted only if all its entries are equal
        - "poisson_binomial": a scalar `p` is repeated `n` times
    validation : ValidationConfig, optional
        Input checks (strict by default)

    Returns
    -------
    Binomial or PoissonBinomial

    Examples
    --------
    >>> successes_distribution(0.3, n=5)
    Binomial(n=5, p=0.3)
    >>> successes_distribution([0.3, 0.3], family="binomial")
    Binomial(n=2, p=0.3)
    >>> successes_distribution(0.3, n=2, family="poisson_binomial")
    PoissonBinomial(p=(0.3, 0.3))
    """
    config = DEFAULT_VALIDATION if validation is None else validation
    if family not in ("auto", FamilyName.BINOMIAL.value, FamilyName.POISSON_BINOMIAL.value):
        raise InvalidArgumentError(f"Unknown distribution family: {family}")

    if isinstance(p, numbers.Real):
        if n is None:
            raise InvalidArgumentError(
                "n must be provided when p is a single probability"
            )
        if family == FamilyName.POISSON_BINOMIAL.value:
            trials = check_trials(n, "Poisson Binomial", config)
            return PoissonBinomial(p=tuple([p] * trials), validation=config)
        return Binomial(n=n, p=p, validation=config)

    trials = len(p) if n is None else n
    probabilities = check_probability_vector(p, trials, "Poisson Binomial", config)
    if family == FamilyName.BINOMIAL.value:
        if len(set(probabilities)) > 1:
            raise InvalidArgumentError(
                "family='binomial' requires all trial probabilities to be equal"
            )
        shared = probabilities[0] if probabilities else 0.0
        return Binomial(n=trials, p=shared, validation=config)
    return PoissonBinomial(p=tuple(probabilities), validation=config)


def at_least(
    k: int,
    p: Union[float, Sequence[float]],
    n: Optional[int] = None,
) -> float:
    """
    Probability of `k` or more successes.

    Examples
    --------
    >>> at_least(0, [0.2, 0.9])
    1.0
    >>> at_least(3, 0.5, n=2)
    0.0
    """
    return successes_distribution(p, n=n).at_least(k)
