"""Missing-value rates per column."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tabstats.core.rows import RowSet, is_missing, require_rows


@dataclass(frozen=True)
class MissingEntry:
    """Share of rows where a column is missing.

    Attributes:
        column: Column name
        percent_missing: Percentage of missing rows in [0, 100], 2 decimals
    """

    column: str
    percent_missing: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"column": self.column, "percent_missing": self.percent_missing}


def missing_stats(rows: RowSet) -> list[MissingEntry]:
    """Compute the percentage of missing values for every column.

    A cell is missing when it is an empty string, ``None`` or absent from its
    row. NaN is not counted here.

    Args:
        rows: Non-empty row set

    Returns:
        One MissingEntry per column, in first-row order

    Raises:
        EmptyInputError: If rows is empty
    """
    first = require_rows(rows, "missing_stats")
    total = len(rows)

    entries = []
    for column in first:
        missing = sum(1 for row in rows if is_missing(row.get(column)))
        entries.append(
            MissingEntry(column=column, percent_missing=round(missing / total * 100, 2))
        )
    return entries
