"""Descriptive statistics for numeric columns.

This module provides count, mean, population standard deviation, extremes and
rank-based quartiles for every numeric column of a row set. Quartiles index
straight into the sorted sample (``sorted[floor(p * (n - 1))]``) with no
interpolation between neighbours.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from tabstats.core.rows import RowSet, numeric_columns, numeric_values

logger = logging.getLogger(__name__)

QUARTILES = (0.25, 0.5, 0.75)


@dataclass(frozen=True)
class NumericStats:
    """Summary statistics for a numeric column.

    Attributes:
        column: Column name
        count: Number of valid values
        mean: Arithmetic mean, formatted with two decimals
        std: Population standard deviation, formatted with two decimals
        min: Smallest value
        q1: First quartile (rank-based)
        median: Median (rank-based)
        q3: Third quartile (rank-based)
        max: Largest value
    """

    column: str
    count: int
    mean: str
    std: str
    min: float
    q1: float
    median: float
    q3: float
    max: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary (the column name is the key it is stored under)."""
        return {
            "count": self.count,
            "mean": self.mean,
            "std": self.std,
            "min": self.min,
            "q1": self.q1,
            "median": self.median,
            "q3": self.q3,
            "max": self.max,
        }

    def format_for_display(self) -> str:
        """Format as human-readable string."""
        lines = [
            f"**{self.column}** (n={self.count})",
            f"  Mean: {self.mean}",
            f"  Std Dev: {self.std}",
            f"  Range: [{self.min}, {self.max}]",
            f"  Quartiles: {self.q1} / {self.median} / {self.q3}",
        ]
        return "\n".join(lines)


def rank_quantile(sorted_values: Sequence[float], p: float) -> float:
    """Pick the value at rank ``floor(p * (n - 1))`` of a sorted sample."""
    return sorted_values[math.floor(p * (len(sorted_values) - 1))]


def summarize_values(column: str, values: Sequence[float]) -> NumericStats:
    """Compute statistics for an already filtered, non-empty sample.

    Args:
        column: Column name the values belong to
        values: Numbers free of None and NaN

    Returns:
        NumericStats for the sample

    Raises:
        ValueError: If values is empty
    """
    if not values:
        raise ValueError(f"No valid values for column {column}")

    n = len(values)
    mean = sum(values) / n
    std = math.sqrt(sum((v - mean) ** 2 for v in values) / n)
    ordered = sorted(values)
    q1, median, q3 = (rank_quantile(ordered, p) for p in QUARTILES)

    return NumericStats(
        column=column,
        count=n,
        mean=f"{mean:.2f}",
        std=f"{std:.2f}",
        min=ordered[0],
        q1=q1,
        median=median,
        q3=q3,
        max=ordered[-1],
    )


def numeric_stats(rows: RowSet) -> dict[str, NumericStats]:
    """Compute summary statistics for every numeric column.

    Columns are the ones classified numeric from the first row. Values that are
    None, absent, NaN or not numbers at all are left out; a column left with no
    values is omitted from the result.

    Args:
        rows: Non-empty row set

    Returns:
        Mapping of column name to NumericStats, in first-row order

    Raises:
        EmptyInputError: If rows is empty

    Example:
        >>> rows = [{"Age": 22}, {"Age": 38}, {"Age": None}]
        >>> numeric_stats(rows)["Age"].mean
        '30.00'
    """
    result = {}
    for column in numeric_columns(rows):
        values = numeric_values(rows, column)
        if not values:
            logger.debug(f"Skipping numeric column {column}: no valid values")
            continue
        result[column] = summarize_values(column, values)
    return result
