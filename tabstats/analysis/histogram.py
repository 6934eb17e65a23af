"""Histogram binning with an adaptive bin count.

The number of bins depends on the sample size only: five bins below 50 values,
Sturges' rule (``ceil(log2(n) + 1)``) from there on. Bins split ``[min, max]``
into equal widths; the maximum is clamped into the last bin.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from tabstats.core.errors import DegenerateRangeError
from tabstats.core.rows import RowSet, numeric_values

logger = logging.getLogger(__name__)

SMALL_SAMPLE_SIZE = 50
SMALL_SAMPLE_BINS = 5


@dataclass(frozen=True)
class HistogramBin:
    """One bin of a histogram.

    Attributes:
        label: Range label, bounds with one decimal (e.g. "0.0-20.0")
        lower: Lower bound (inclusive)
        upper: Upper bound (exclusive, except for the last bin)
        count: Number of values in the bin
    """

    label: str
    lower: float
    upper: float
    count: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "label": self.label,
            "lower": self.lower,
            "upper": self.upper,
            "count": self.count,
        }


@dataclass(frozen=True)
class Histogram:
    """Binned distribution of one numeric column."""

    column: str
    bins: list[HistogramBin] = field(default_factory=list)

    @property
    def labels(self) -> list[str]:
        return [b.label for b in self.bins]

    @property
    def counts(self) -> list[int]:
        return [b.count for b in self.bins]

    @property
    def total(self) -> int:
        return sum(self.counts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "column": self.column,
            "bins": [b.to_dict() for b in self.bins],
            "total": self.total,
        }


def bin_count(n: int) -> int:
    """Choose the number of bins for a sample of size n."""
    if n < SMALL_SAMPLE_SIZE:
        return SMALL_SAMPLE_BINS
    return math.ceil(math.log2(n) + 1)


def bin_width(lo: float, hi: float, k: int) -> float:
    """Width of k equal bins over [lo, hi].

    Raises:
        DegenerateRangeError: If lo == hi
    """
    if hi == lo:
        raise DegenerateRangeError(lo)
    span = hi - lo
    if math.isinf(span):
        # range wider than the largest float
        return hi / k - lo / k
    return span / k


def _label(lower: float, upper: float) -> str:
    return f"{lower:.1f}-{upper:.1f}"


def _bin_index(v: float, lo: float, width: float, k: int) -> int:
    offset = v - lo
    position = offset / width if math.isfinite(offset) else v / width - lo / width
    return max(0, min(math.floor(position), k - 1))


def _edge(lo: float, width: float, i: int) -> float:
    edge = lo + width * i
    if math.isfinite(edge):
        return edge
    return 2 * (lo / 2 + width / 2 * i)


def histogram(values: Sequence[float], column: str) -> Histogram | None:
    """Bucket a numeric sample into bins.

    Args:
        values: Numeric sample; NaN and infinite entries are ignored
        column: Column the sample belongs to

    Returns:
        Histogram with contiguous bins whose counts sum to len(values), or
        None for an empty sample

    Example:
        >>> h = histogram([0, 10, 20, 30, 40, 50, 60, 70, 80, 100], "Score")
        >>> h.labels[0], h.labels[-1], h.total
        ('0.0-20.0', '80.0-100.0', 10)
    """
    values = [v for v in values if math.isfinite(v)]
    if not values:
        return None

    n = len(values)
    lo, hi = min(values), max(values)
    k = bin_count(n)

    try:
        width = bin_width(lo, hi, k)
    except DegenerateRangeError:
        logger.debug(f"Histogram for {column}: all {n} values equal {lo}, using one bin")
        return Histogram(
            column=column,
            bins=[HistogramBin(label=_label(lo, hi), lower=lo, upper=hi, count=n)],
        )

    counts = [0] * k
    for v in values:
        counts[_bin_index(v, lo, width, k)] += 1

    bins = []
    for i, count in enumerate(counts):
        lower = _edge(lo, width, i)
        upper = _edge(lo, width, i + 1)
        bins.append(HistogramBin(label=_label(lower, upper), lower=lower, upper=upper, count=count))
    return Histogram(column=column, bins=bins)


def column_histogram(rows: RowSet, column: str) -> Histogram | None:
    """Build the histogram of a column's valid numeric values.

    Returns:
        Histogram, or None when the column is absent or has no valid values
    """
    return histogram(numeric_values(rows, column), column)
