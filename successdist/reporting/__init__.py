"""
successdist.reporting
=====================

Tabulated distributions as Polars frames, plus sinks to persist them.

- `tables`: `DistributionReport` (k, pmf, cdf, sf columns and a summary)
- `sinks`: CSV / Parquet writers that keep the summary next to the table
"""

from successdist.reporting.sinks import (
    CsvReportSink,
    ParquetReportSink,
    ReportSink,
    summary_path,
)
from successdist.reporting.tables import DistributionReport, distribution_table

__all__ = [
    "CsvReportSink",
    "DistributionReport",
    "ParquetReportSink",
    "ReportSink",
    "distribution_table",
    "summary_path",
]
