"""Frequency breakdowns for categorical columns.

Counts can be flat (one key per value) or cross-tabulated against a label
column, in which case every key carries the label value as a suffix:

    >>> rows = [{"Sex": "male", "Survived": 0}, {"Sex": "male", "Survived": 1}]
    >>> categorical_stats(rows, ["Sex"])
    {'Sex': {'male | Survived:0': 1, 'male | Survived:1': 1}}
"""

from __future__ import annotations

import logging
import math
from typing import Any

from tabstats.config import get_settings
from tabstats.core.errors import MissingRequiredColumnError
from tabstats.core.rows import RowSet, is_missing, require_rows

logger = logging.getLogger(__name__)

CategoryCount = dict[str, int]


def render_value(value: Any, missing_label: str | None = None) -> str:
    """Render a cell value as a category key.

    Integral floats drop their ``.0``, bools print as ``true``/``false`` and
    NaN as ``NaN``, so keys read the same whatever numeric type the loader
    produced.
    """
    if value is None:
        return missing_label if missing_label is not None else get_settings().missing_label
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if value.is_integer():
            return str(int(value))
    return str(value)


def categorical_stats(
    rows: RowSet,
    columns: list[str],
    group_column: str | None = None,
    strict: bool = False,
) -> dict[str, CategoryCount]:
    """Count category occurrences for selected columns.

    Null and absent values count under the missing label ("Missing" by
    default); empty strings are kept as their own category. When the group
    column is part of the schema each key becomes
    ``"<value> | <group_column>:<group value>"``.

    Args:
        rows: Non-empty row set
        columns: Columns to summarize, in output order
        group_column: Label column to cross-tabulate with
            (default: settings.group_column)
        strict: Raise for unknown columns instead of skipping them

    Returns:
        Mapping of column name to frequency map (keys in first-seen order)

    Raises:
        EmptyInputError: If rows is empty
        MissingRequiredColumnError: If strict and a column is not in the schema
    """
    first = require_rows(rows, "categorical_stats")
    settings = get_settings()
    group = group_column or settings.group_column
    grouped = group in first

    result: dict[str, CategoryCount] = {}
    for column in columns:
        if column not in first:
            if strict:
                raise MissingRequiredColumnError(column, list(first))
            logger.warning(f"Skipping categorical column {column}: not in schema")
            continue

        counts: CategoryCount = {}
        for row in rows:
            key = render_value(row.get(column), settings.missing_label)
            if grouped:
                label = render_value(row.get(group), settings.missing_label)
                key = f"{key} | {group}:{label}"
            counts[key] = counts.get(key, 0) + 1
        result[column] = counts

    return result


def value_counts(rows: RowSet, column: str) -> CategoryCount:
    """Count the non-missing values of one column, flat.

    Args:
        rows: Row set (may be empty)
        column: Column to count

    Returns:
        Mapping of rendered value to count, in first-seen order
    """
    counts: CategoryCount = {}
    for row in rows:
        value = row.get(column)
        if is_missing(value):
            continue
        key = render_value(value)
        counts[key] = counts.get(key, 0) + 1
    return counts
