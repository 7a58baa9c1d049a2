"""
successdist.reporting.tables
============================

A family-agnostic reporter that tabulates a distribution over every
possible number of successes.

Only the PMF column is computed through the library queries; the cumulative
columns are derived from it inside Polars.

Examples
--------
>>> from successdist.api import Binomial
>>> from successdist.reporting.tables import DistributionReport
>>> report = DistributionReport(Binomial(n=2, p=0.5))
>>> report.frame()["pmf"].to_list()
[0.25, 0.5, 0.25]
>>> report.frame()["cdf"].to_list()
[0.25, 0.75, 1.0]
>>> report.summary()["mode"]
1
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence, Union

import polars as pl

from successdist.reporting.sinks import (
    CsvReportSink,
    ParquetReportSink,
    ReportSink,
    ReportSummary,
)

if TYPE_CHECKING:
    from successdist.api.distributions import Distribution

logger = logging.getLogger(__name__)


@dataclass
class DistributionReport:
    """
    Tabulate a `Binomial` or `PoissonBinomial` over ``k = 0..n``.

    Attributes:
        distribution: The distribution to report on
    """

    distribution: "Distribution"

    def frame(self) -> pl.DataFrame:
        """
        Return one row per success count.

        Returns
        -------
        pl.DataFrame
            Columns ``k`` (Int64), ``pmf``, ``cdf`` and ``sf`` (Float64)
        """
        n = self.distribution.n
        ks = list(range(n + 1))
        pmf = self.distribution.pmf_values()
        logger.debug("Tabulated %s over %d counts", self.distribution.family.value, n + 1)
        return (
            pl.DataFrame(
                {"k": ks, "pmf": pmf},
                schema={"k": pl.Int64, "pmf": pl.Float64},
            )
            .with_columns(pl.col("pmf").cum_sum().alias("cdf"))
            .with_columns((1.0 - pl.col("cdf")).clip(lower_bound=0.0).alias("sf"))
        )

    def summary(self) -> ReportSummary:
        """Return family, n, mean, variance and the mode of the distribution."""
        mode = self.distribution.mode()
        return {
            "family": self.distribution.family.value,
            "n": self.distribution.n,
            "mean": self.distribution.mean(),
            "variance": self.distribution.variance(),
            "mode": mode.max,
            "mode_p": mode.p,
        }

    def write(self, sink: ReportSink) -> None:
        sink.write(self.frame(), self.summary())

    def write_csv(self, path: str) -> None:
        self.write(CsvReportSink(path))

    def write_parquet(self, path: str) -> None:
        self.write(ParquetReportSink(path))


def distribution_table(
    p: Union[float, Sequence[float]], n: Optional[int] = None
) -> pl.DataFrame:
    """
    Tabulate the distribution of successes for `p` (and `n` for a scalar `p`).

    Examples
    --------
    >>> distribution_table([0.5, 0.5])["sf"].to_list()
    [0.75, 0.25, 0.0]
    """
    from successdist.api.distributions import successes_distribution

    return DistributionReport(successes_distribution(p, n=n)).frame()
