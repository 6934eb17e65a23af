"""Visualization tools for tabstats.

This module provides Plotly bar charts for:
- Missing-value percentages
- Histograms
- Categorical value counts
"""

from tabstats.visualization.plots import (
    PlotResult,
    create_bar_chart,
    create_count_chart,
    create_histogram_chart,
    create_missing_chart,
)

__all__ = [
    "PlotResult",
    "create_bar_chart",
    "create_count_chart",
    "create_histogram_chart",
    "create_missing_chart",
]
