"""Charts for analysis results.

This module turns analysis outputs into bar charts:
- Missing-value percentages per column
- Histograms from precomputed bins
- Flat value counts of a categorical column

All plots are generated using Plotly for interactivity.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import plotly.graph_objects as go

from tabstats.analysis.histogram import Histogram
from tabstats.analysis.missing import MissingEntry

BAR_COLOR = "rgba(0, 123, 255, 0.6)"


@dataclass
class PlotResult:
    """Result from a plot generation function.

    Attributes:
        figure: Plotly figure object
        title: Plot title
        description: Description of what the plot shows
        data_summary: Summary of data used
    """

    figure: go.Figure
    title: str
    description: str
    data_summary: dict[str, Any]

    def to_html(self, include_plotlyjs: bool = True) -> str:
        """Convert figure to HTML string.

        Args:
            include_plotlyjs: Include Plotly.js library in HTML

        Returns:
            HTML string
        """
        return self.figure.to_html(
            include_plotlyjs="cdn" if include_plotlyjs else False,
            full_html=False,
        )

    def to_json(self) -> str:
        """Convert figure to JSON for frontend rendering."""
        return self.figure.to_json()


def create_bar_chart(
    labels: Sequence[str],
    values: Sequence[float],
    x_title: str,
    y_title: str,
    title: str | None = None,
) -> PlotResult:
    """Create a single-series bar chart.

    Args:
        labels: Category labels on the x axis
        values: Bar heights, one per label
        x_title: X axis title
        y_title: Y axis title (also the series name)
        title: Plot title (auto-generated if None)

    Returns:
        PlotResult with bar chart figure
    """
    if not labels:
        raise ValueError("Bar chart needs at least one label")
    if len(labels) != len(values):
        raise ValueError(
            f"Got {len(labels)} labels but {len(values)} values for bar chart"
        )

    if title is None:
        title = f"{y_title} by {x_title}"

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=list(labels),
        y=list(values),
        name=y_title,
        marker_color=BAR_COLOR,
    ))
    fig.update_layout(
        title=dict(text=title, x=0.5),
        xaxis_title=x_title,
        yaxis_title=y_title,
        template="plotly_white",
        showlegend=False,
    )
    fig.update_yaxes(rangemode="tozero")

    return PlotResult(
        figure=fig,
        title=title,
        description=f"Bar chart of {y_title} for each {x_title}.",
        data_summary={"n_bars": len(labels), "total": float(sum(values))},
    )


def create_missing_chart(entries: Sequence[MissingEntry]) -> PlotResult:
    """Chart the percentage of missing values per column."""
    if not entries:
        raise ValueError("No missing-value entries to plot")

    result = create_bar_chart(
        [e.column for e in entries],
        [e.percent_missing for e in entries],
        x_title="Column",
        y_title="% Missing",
        title="Missing Values",
    )
    worst = max(entries, key=lambda e: e.percent_missing)
    result.description = "Percentage of missing values in each column."
    result.data_summary = {
        "n_columns": len(entries),
        "max_missing_column": worst.column,
        "max_missing_percent": worst.percent_missing,
    }
    return result


def create_histogram_chart(hist: Histogram, title: str | None = None) -> PlotResult:
    """Chart a precomputed histogram, one bar per bin."""
    if not hist.bins:
        raise ValueError(f"Histogram for {hist.column} has no bins")

    result = create_bar_chart(
        hist.labels,
        hist.counts,
        x_title=hist.column,
        y_title="Count",
        title=title or f"Distribution of {hist.column}",
    )
    result.figure.update_layout(bargap=0.05)
    result.description = f"Histogram of {hist.column} in {len(hist.bins)} bins."
    result.data_summary = {
        "column": hist.column,
        "n_bins": len(hist.bins),
        "count": hist.total,
        "min": hist.bins[0].lower,
        "max": hist.bins[-1].upper,
    }
    return result


def create_count_chart(counts: dict[str, int], column: str) -> PlotResult:
    """Chart flat value counts of a categorical column."""
    if not counts:
        raise ValueError(f"No values to plot for {column}")

    result = create_bar_chart(
        list(counts),
        list(counts.values()),
        x_title=column,
        y_title="Count",
        title=f"{column} Counts",
    )
    result.data_summary = {
        "column": column,
        "n_categories": len(counts),
        "count": sum(counts.values()),
    }
    return result
