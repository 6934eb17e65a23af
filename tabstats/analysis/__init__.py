"""Statistical analyses over row sets.

This module contains:
- Missing-value rates per column
- Numeric summaries (mean, std, rank-based quartiles)
- Categorical frequency counts, optionally cross-tabulated
- Histogram binning with an adaptive bin count
"""

from tabstats.analysis.categorical import (
    CategoryCount,
    categorical_stats,
    render_value,
    value_counts,
)
from tabstats.analysis.histogram import (
    Histogram,
    HistogramBin,
    bin_count,
    column_histogram,
    histogram,
)
from tabstats.analysis.missing import MissingEntry, missing_stats
from tabstats.analysis.numeric import NumericStats, numeric_stats, summarize_values

__all__ = [
    # Missing values
    "missing_stats",
    "MissingEntry",
    # Numeric
    "numeric_stats",
    "summarize_values",
    "NumericStats",
    # Categorical
    "categorical_stats",
    "value_counts",
    "render_value",
    "CategoryCount",
    # Histograms
    "histogram",
    "column_histogram",
    "bin_count",
    "Histogram",
    "HistogramBin",
]
