"""tabstats: descriptive statistics for tabular datasets.

This package computes missing-value rates, numeric summaries, categorical
frequency tables and histograms over row-oriented data, and merges two
tabular sources into one.
"""

__version__ = "0.1.0"


def __getattr__(name: str):
    """Lazy imports for main package exports."""
    if name == "run_analysis":
        from tabstats.pipeline import run_analysis

        return run_analysis
    if name == "merge_row_sets":
        from tabstats.core.merge import merge_row_sets

        return merge_row_sets
    if name == "load_csv":
        from tabstats.io import load_csv

        return load_csv
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "load_csv",
    "merge_row_sets",
    "run_analysis",
    "__version__",
]
