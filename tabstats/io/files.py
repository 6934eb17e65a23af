"""Reading and writing delimited text and summaries.

Cells are read as raw strings and coerced one by one, so a numeric column may
still carry an odd string in a later row (numeric statistics skip it) and the
first row's types reflect exactly what that row holds.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import IO, Any

import pandas as pd

from tabstats.core.errors import MalformedInputError, NothingToExportError
from tabstats.core.rows import RowSet, columns, shape
from tabstats.core.summary import Summary

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def coerce_cell(text: str) -> Any:
    """Convert a raw CSV cell to a typed value.

    Returns:
        None for blank cells, bool for true/false, int or float for numeric
        text, otherwise the text unchanged
    """
    if text == "":
        return None
    stripped = text.strip()
    lowered = stripped.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if _INT_RE.match(stripped):
        return int(stripped)
    if _FLOAT_RE.match(stripped):
        value = float(stripped)
        return int(value) if value.is_integer() and abs(value) < 2**53 else value
    return text


def load_csv(source: str | Path | IO[str]) -> RowSet:
    """Load a CSV file into a row set with per-cell type coercion.

    Args:
        source: Path or open text handle

    Returns:
        List of row dicts keyed by header, blank lines skipped

    Raises:
        MalformedInputError: If the source is not UTF-8 or not valid CSV
    """
    try:
        df = pd.read_csv(source, dtype=str, keep_default_na=False, skip_blank_lines=True)
    except pd.errors.EmptyDataError:
        logger.warning("CSV source has no header or rows")
        return []
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        name = getattr(source, "name", source)
        logger.debug(f"Failed to parse CSV {name}: {e}")
        raise MalformedInputError(str(name), str(e)) from e
    rows = [
        {column: coerce_cell(cell) for column, cell in record.items()}
        for record in df.to_dict(orient="records")
    ]
    n_rows, n_cols = shape(rows)
    logger.info(f"Loaded {n_rows} rows x {n_cols} columns")
    return rows


def save_csv(rows: RowSet, target: str | Path | IO[str]) -> None:
    """Write a row set as CSV, column order taken from the first row.

    Keys missing from later rows and None values are written as empty cells;
    keys that only later rows carry are dropped.

    Raises:
        NothingToExportError: If rows is empty
    """
    if not rows:
        raise NothingToExportError("No data to export")
    df = pd.DataFrame(rows, columns=columns(rows), dtype=object)
    df.to_csv(target, index=False)
    logger.info(f"Exported {len(rows)} rows")


def export_summary(summary: Summary, target: str | Path) -> Path:
    """Write a summary as indented JSON.

    Raises:
        NothingToExportError: If the summary has no sections
    """
    if summary.is_empty:
        raise NothingToExportError("Run analysis first")
    path = Path(target)
    path.write_text(summary.to_json(indent=2), encoding="utf-8")
    logger.info(f"Exported summary sections {summary.sections} to {path}")
    return path
