"""
successdist.core.validation
===========================

Argument checks shared by the PMF/CDF queries.

The policy is deliberately uniform across both distribution families:

- `n` must be a non-negative integer
- `k` must be an integer (out-of-support values are answered, not rejected)
- probabilities must be finite reals in `[0, 1]`, optionally widened by a
  tolerance for values that drifted out of range through rounding
- a probability vector must have exactly `n` entries

The length check always runs. The remaining checks can be disabled with
`ValidationConfig(strict=False)` when the caller has already validated its
inputs once and is about to issue many queries with them.

Examples
--------
>>> from successdist.core.validation import ValidationConfig, check_probability
>>> check_probability(0.25, "Binomial PMF")
0.25
>>> check_probability(1.0 + 1e-12, "Binomial PMF", ValidationConfig(tolerance=1e-9))
1.0
>>> check_probability(1.5, "Binomial PMF")
Traceback (most recent call last):
...
successdist.core.errors.InvalidArgumentError: Binomial PMF requires a probability in [0, 1], got 1.5
"""

from __future__ import annotations
import math
import numbers
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from successdist.core.errors import InvalidArgumentError


@dataclass(frozen=True)
class ValidationConfig:
    """
    Input validation settings for a query.

    Parameters
    ----------
    strict : bool, default=True
        Check `n`, `k` and every probability. When False only the
        probability-vector length is checked.
    tolerance : float, default=0.0
        Probabilities in `[-tolerance, 1 + tolerance]` are accepted and
        clipped into `[0, 1]`.

    Examples
    --------
    >>> ValidationConfig(tolerance=1e-12).strict
    True
    >>> ValidationConfig(tolerance=-1.0)
    Traceback (most recent call last):
    ...
    ValueError: tolerance must be non-negative, got -1.0
    """

    strict: bool = True
    tolerance: float = 0.0

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate the configuration itself."""
        if not (self.tolerance >= 0 and math.isfinite(self.tolerance)):
            raise ValueError(f"tolerance must be non-negative, got {self.tolerance}")


DEFAULT_VALIDATION = ValidationConfig()
RELAXED_VALIDATION = ValidationConfig(strict=False)


def _resolve(config: Optional[ValidationConfig]) -> ValidationConfig:
    return DEFAULT_VALIDATION if config is None else config


def _is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def check_trials(
    n: Any, operation: str, config: Optional[ValidationConfig] = None
) -> int:
    """Return `n` as an int, rejecting non-integers and negative counts."""
    config = _resolve(config)
    if not config.strict:
        return int(n)
    if not _is_integer(n):
        raise InvalidArgumentError(
            f"{operation} requires an integer number of trials, got {n!r}"
        )
    if n < 0:
        raise InvalidArgumentError(
            f"{operation} requires a non-negative number of trials, got {n}"
        )
    return int(n)


def check_outcome(
    k: Any, operation: str, config: Optional[ValidationConfig] = None
) -> int:
    """Return `k` as an int. Any integer is accepted."""
    config = _resolve(config)
    if config.strict and not _is_integer(k):
        raise InvalidArgumentError(
            f"{operation} requires an integer number of successes, got {k!r}"
        )
    return int(k)


def check_probability(
    p: Any, operation: str, config: Optional[ValidationConfig] = None
) -> float:
    """Return `p` as a float in [0, 1]."""
    config = _resolve(config)
    if not config.strict:
        return float(p)
    if not isinstance(p, numbers.Real) or isinstance(p, bool):
        raise InvalidArgumentError(
            f"{operation} requires a real probability, got {p!r}"
        )
    value = float(p)
    tol = config.tolerance
    if not (math.isfinite(value) and -tol <= value <= 1.0 + tol):
        raise InvalidArgumentError(
            f"{operation} requires a probability in [0, 1], got {p}"
        )
    return min(max(value, 0.0), 1.0)


def check_probability_vector(
    p: Sequence[float],
    n: int,
    operation: str,
    config: Optional[ValidationConfig] = None,
) -> List[float]:
    """
    Return `p` as a list of floats, one per trial.

    Raises
    ------
    InvalidArgumentError
        If `len(p) != n` (always checked) or, in strict mode, if an entry is
        not a probability.
    """
    if len(p) != n:
        raise InvalidArgumentError(
            f"{operation} requires a probability vector with one entry per trial: "
            f"expected {n}, got {len(p)}"
        )
    return [check_probability(q, operation, config) for q in p]
