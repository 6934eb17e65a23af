"""File boundary for tabstats.

This module contains:
- CSV loading with per-cell type coercion
- CSV export of row sets
- JSON export of summaries
"""

from tabstats.io.files import coerce_cell, export_summary, load_csv, save_csv

__all__ = [
    "coerce_cell",
    "export_summary",
    "load_csv",
    "save_csv",
]
