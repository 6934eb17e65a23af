"""Union of two row sets with optional provenance tagging."""

from __future__ import annotations

import logging

from tabstats.config import get_settings
from tabstats.core.rows import RowSet, is_missing

logger = logging.getLogger(__name__)


def tag_rows(rows: RowSet, label: str, source_field: str) -> int:
    """Set the provenance field on rows that do not carry one yet.

    Rows are modified in place. A row whose field already holds a value keeps
    it, so the first label written wins.

    Returns:
        Number of rows that were tagged
    """
    tagged = 0
    for row in rows:
        if is_missing(row.get(source_field)):
            row[source_field] = label
            tagged += 1
    return tagged


def merge_row_sets(
    base: RowSet,
    extra: RowSet,
    tag_source: bool = False,
    base_label: str | None = None,
    extra_label: str | None = None,
    source_field: str | None = None,
) -> RowSet:
    """Concatenate two row sets, base rows first.

    Schemas do not have to match; classification of the result is driven by
    its new first row. When ``tag_source`` is set, the rows of both inputs are
    tagged in place with their source label, so the input row sets should not
    be reused as independent data afterwards.

    Args:
        base: Rows that come first (e.g. a training set)
        extra: Rows appended after base (e.g. a test set)
        tag_source: Add a provenance field to every row
        base_label: Provenance label for base rows (e.g. file name or "train")
        extra_label: Provenance label for extra rows (e.g. "test")
        source_field: Name of the provenance field (default: settings.source_field)

    Returns:
        New list holding base rows followed by extra rows

    Raises:
        ValueError: If tagging is requested without both labels

    Example:
        >>> merged = merge_row_sets(train, test, tag_source=True,
        ...                         base_label="train", extra_label="test")
        >>> merged[-1]["Source"]
        'test'
    """
    if tag_source:
        if base_label is None or extra_label is None:
            raise ValueError("Provenance tagging requires both base_label and extra_label")
        field = source_field or get_settings().source_field
        tagged = tag_rows(base, base_label, field)
        tagged += tag_rows(extra, extra_label, field)
        logger.debug(f"Tagged {tagged} rows with provenance field '{field}'")

    merged = [*base, *extra]
    logger.info(f"Merged {len(base)} + {len(extra)} rows into {len(merged)}")
    return merged
