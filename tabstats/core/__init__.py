"""Core functionality for tabstats.

This module contains:
- Row set helpers and first-row column classification
- The error hierarchy
- Merging of two row sets with provenance tagging
- The exportable Summary
"""

from tabstats.core.errors import (
    DegenerateRangeError,
    EmptyInputError,
    MalformedInputError,
    MissingRequiredColumnError,
    NothingToExportError,
    TabstatsError,
)
from tabstats.core.merge import merge_row_sets, tag_rows
from tabstats.core.rows import (
    ColumnRole,
    Row,
    RowSet,
    categorical_columns,
    classify_columns,
    numeric_columns,
    preview_rows,
    shape,
)
from tabstats.core.summary import Summary, assemble_summary

__all__ = [
    "ColumnRole",
    "Row",
    "RowSet",
    "Summary",
    "assemble_summary",
    "merge_row_sets",
    "tag_rows",
    "categorical_columns",
    "classify_columns",
    "numeric_columns",
    "preview_rows",
    "shape",
    "DegenerateRangeError",
    "EmptyInputError",
    "MalformedInputError",
    "MissingRequiredColumnError",
    "NothingToExportError",
    "TabstatsError",
]

