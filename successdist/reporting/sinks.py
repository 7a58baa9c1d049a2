"""
successdist.reporting.sinks
===========================

Persistence for distribution reports.

A report is two things: the per-count table and the summary of the
distribution it was drawn from (family, n, moments, mode). Every sink writes
the table in its own format and the summary as a JSON sidecar next to it,
``<stem>.summary.json``, so a table on disk always says which distribution
produced it.

Doctest (smoke):
>>> from successdist.reporting.sinks import summary_path
>>> summary_path("out/binomial.csv")
'out/binomial.summary.json'
"""

from __future__ import annotations
import json
import os
from typing import Any, Dict, Protocol

import polars as pl

ReportSummary = Dict[str, Any]


class ReportSink(Protocol):
    """A write-only sink: (table, summary) -> storage."""

    def write(self, df: pl.DataFrame, summary: ReportSummary) -> None: ...


def summary_path(path: str) -> str:
    """Location of the JSON summary written alongside the table at `path`."""
    stem, _ = os.path.splitext(path)
    return f"{stem}.summary.json"


def _write_summary(path: str, summary: ReportSummary) -> None:
    with open(summary_path(path), "w", encoding="utf-8") as fh:
        json.dump(summary, fh, indent=2, sort_keys=True)


def _ensure_parent(path: str) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)


class CsvReportSink:
    """Table as CSV, summary as JSON."""

    def __init__(self, path: str) -> None:
        self.path = path

    def write(self, df: pl.DataFrame, summary: ReportSummary) -> None:
        _ensure_parent(self.path)
        df.write_csv(self.path)
        _write_summary(self.path, summary)


class ParquetReportSink:
    """Table as Parquet, summary as JSON."""

    def __init__(self, path: str) -> None:
        self.path = path

    def write(self, df: pl.DataFrame, summary: ReportSummary) -> None:
        _ensure_parent(self.path)
        df.write_parquet(self.path)
        _write_summary(self.path, summary)
