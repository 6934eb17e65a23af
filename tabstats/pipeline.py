"""End-to-end analysis of one row set.

Runs classification and every analysis in sequence and returns the results
together. The analyses do not depend on each other, so their order does not
change any output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from tabstats.analysis import (
    CategoryCount,
    Histogram,
    categorical_stats,
    column_histogram,
    missing_stats,
    numeric_stats,
    value_counts,
)
from tabstats.config import Settings, get_settings
from tabstats.core.rows import ColumnRole, RowSet, classify_columns, shape
from tabstats.core.summary import Summary, assemble_summary

logger = logging.getLogger(__name__)


@dataclass
class AnalysisReport:
    """Everything computed for one row set.

    Attributes:
        shape: (row count, column count)
        roles: Column roles from the first row
        summary: Exportable summary
        histograms: Histograms of the configured columns that have data
        value_counts: Flat counts of the configured chart columns present
    """

    shape: tuple[int, int]
    roles: dict[str, ColumnRole]
    summary: Summary
    histograms: dict[str, Histogram] = field(default_factory=dict)
    value_counts: dict[str, CategoryCount] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "shape": {"rows": self.shape[0], "columns": self.shape[1]},
            "roles": {col: role.value for col, role in self.roles.items()},
            "summary": self.summary.to_dict(),
            "histograms": {col: h.to_dict() for col, h in self.histograms.items()},
            "value_counts": self.value_counts,
        }


def run_analysis(
    rows: RowSet,
    categorical_columns: list[str] | None = None,
    histogram_columns: list[str] | None = None,
    settings: Settings | None = None,
) -> AnalysisReport:
    """Analyze a row set.

    Args:
        rows: Non-empty row set
        categorical_columns: Columns to cross-tabulate; the categorical section
            is only added when this is given
        histogram_columns: Columns to bin (default: settings.histogram_columns)
        settings: Settings to use (default: global settings)

    Returns:
        AnalysisReport

    Raises:
        EmptyInputError: If rows is empty
    """
    settings = settings or get_settings()
    roles = classify_columns(rows)

    summary = assemble_summary(missing=missing_stats(rows), numeric=numeric_stats(rows))
    if categorical_columns:
        summary = summary.with_categorical(
            categorical_stats(rows, categorical_columns, group_column=settings.group_column)
        )

    histograms = {}
    for column in histogram_columns if histogram_columns is not None else settings.histogram_columns:
        # Only columns of the schema are binned
        if column not in roles:
            continue
        hist = column_histogram(rows, column)
        if hist is not None:
            histograms[column] = hist

    counts = {
        column: value_counts(rows, column)
        for column in settings.count_chart_columns
        if column in roles
    }

    report = AnalysisReport(
        shape=shape(rows),
        roles=roles,
        summary=summary,
        histograms=histograms,
        value_counts=counts,
    )
    logger.info(
        f"Analyzed {report.shape[0]} rows: sections {summary.sections}, "
        f"{len(histograms)} histograms"
    )
    return report
