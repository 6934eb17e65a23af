"""Row sets and column classification.

A row set is a plain ``list`` of ``dict`` rows, the shape a CSV parser with
automatic type coercion hands back. The first row is the schema: its keys are
the columns, and the runtime type of its values decides each column's role.

Example:
    >>> rows = [{"Age": 22, "Sex": "male"}, {"Age": None, "Sex": "female"}]
    >>> classify_columns(rows)
    {'Age': <ColumnRole.NUMERIC: 'numeric'>, 'Sex': <ColumnRole.CATEGORICAL: 'categorical'>}
"""

from __future__ import annotations

import math
import numbers
from enum import Enum
from typing import Any

from tabstats.core.errors import EmptyInputError

Row = dict[str, Any]
RowSet = list[Row]

# Preview modes and the number of rows each shows; negative counts from the end
PREVIEW_MODES: dict[str, int | None] = {
    "5": 5,
    "10": 10,
    "20": 20,
    "head": 50,
    "tail": -50,
    "all": None,
}
DEFAULT_PREVIEW_MODE = "5"


class ColumnRole(str, Enum):
    """Role of a column, decided once from the first row."""

    NUMERIC = "numeric"
    CATEGORICAL = "categorical"


def is_number(value: Any) -> bool:
    """Check whether a value is a runtime number (bools are not numbers)."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_valid_number(value: Any) -> bool:
    """Check whether a value can take part in numeric statistics."""
    return is_number(value) and math.isfinite(value)


def is_missing(value: Any) -> bool:
    """Check whether a cell counts as missing.

    Empty strings and ``None`` are missing. NaN is deliberately not: it is a
    number and only numeric statistics filter it out.
    """
    return value is None or value == ""


def require_rows(rows: RowSet, operation: str) -> Row:
    """Return the schema row, raising EmptyInputError for an empty row set."""
    if not rows:
        raise EmptyInputError(operation)
    return rows[0]


def columns(rows: RowSet) -> list[str]:
    """Get the column names of a row set, in first-row order."""
    return list(require_rows(rows, "columns"))


def classify_columns(rows: RowSet) -> dict[str, ColumnRole]:
    """Classify every column as numeric or categorical.

    Only the first row is inspected. A column holding ``None`` or a string in
    row 0 is categorical even if every later row holds a number, and the other
    way round.

    Args:
        rows: Non-empty row set

    Returns:
        Mapping of column name to ColumnRole, in first-row order

    Raises:
        EmptyInputError: If rows is empty
    """
    first = require_rows(rows, "classify_columns")
    return {
        column: ColumnRole.NUMERIC if is_number(value) else ColumnRole.CATEGORICAL
        for column, value in first.items()
    }


def numeric_columns(rows: RowSet) -> list[str]:
    """Get the columns classified as numeric."""
    return [c for c, role in classify_columns(rows).items() if role == ColumnRole.NUMERIC]


def categorical_columns(rows: RowSet) -> list[str]:
    """Get the columns classified as categorical."""
    return [
        c for c, role in classify_columns(rows).items() if role == ColumnRole.CATEGORICAL
    ]


def numeric_values(rows: RowSet, column: str) -> list[float]:
    """Extract the valid numeric values of a column.

    ``None``, absent keys, NaN, infinities and malformed entries (strings,
    bools) are skipped rather than failing the column.
    """
    return [row.get(column) for row in rows if is_valid_number(row.get(column))]


def shape(rows: RowSet) -> tuple[int, int]:
    """Get (row count, column count); an empty row set has shape (0, 0)."""
    if not rows:
        return (0, 0)
    return (len(rows), len(rows[0]))


def preview_rows(rows: RowSet, mode: str = DEFAULT_PREVIEW_MODE) -> RowSet:
    """Select the slice of rows shown for a preview mode.

    Args:
        rows: Row set to preview (may be empty)
        mode: One of "5", "10", "20", "head", "tail", "all"; anything else
            falls back to "5"

    Returns:
        A new list holding the selected rows
    """
    limit = PREVIEW_MODES.get(mode, PREVIEW_MODES[DEFAULT_PREVIEW_MODE])
    if limit is None:
        return list(rows)
    if limit < 0:
        return rows[limit:]
    return rows[:limit]
