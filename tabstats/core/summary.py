"""Exportable summary combining the individual analyses.

A Summary starts empty and gains sections as analyses run. It is never
mutated: each ``with_*`` call returns a new instance, so callers hold the
current summary explicitly instead of sharing module state.

Example:
    >>> summary = assemble_summary(missing=missing_stats(rows))
    >>> summary = summary.with_numeric(numeric_stats(rows))
    >>> summary.sections
    ['missing', 'numeric']
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tabstats.analysis.missing import MissingEntry
    from tabstats.analysis.numeric import NumericStats


@dataclass(frozen=True)
class Summary:
    """Report of the analyses run over one row set.

    Attributes:
        missing: Per-column missing rates, or None if not computed
        numeric: Per-column numeric statistics, or None if not computed
        categorical: Per-column frequency maps, or None if not computed
    """

    missing: tuple[MissingEntry, ...] | None = None
    numeric: dict[str, NumericStats] | None = None
    categorical: dict[str, dict[str, int]] | None = None

    @property
    def sections(self) -> list[str]:
        """Names of the populated sections, in export order."""
        return [
            name
            for name in ("missing", "numeric", "categorical")
            if getattr(self, name) is not None
        ]

    @property
    def is_empty(self) -> bool:
        """Check whether no analysis has been added yet."""
        return not self.sections

    def with_missing(self, entries: list[MissingEntry]) -> Summary:
        """Return a copy holding the missing-value section."""
        return replace(self, missing=tuple(entries))

    def with_numeric(self, stats: dict[str, NumericStats]) -> Summary:
        """Return a copy holding the numeric section."""
        return replace(self, numeric=dict(stats))

    def with_categorical(self, counts: dict[str, dict[str, int]]) -> Summary:
        """Return a copy holding the categorical section."""
        return replace(self, categorical={c: dict(m) for c, m in counts.items()})

    def to_dict(self) -> dict[str, Any]:
        """Convert the populated sections to a JSON-serializable dictionary."""
        out: dict[str, Any] = {}
        if self.missing is not None:
            out["missing"] = [entry.to_dict() for entry in self.missing]
        if self.numeric is not None:
            out["numeric"] = {col: stats.to_dict() for col, stats in self.numeric.items()}
        if self.categorical is not None:
            out["categorical"] = {col: dict(m) for col, m in self.categorical.items()}
        return out

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to JSON."""
        return json.dumps(self.to_dict(), indent=indent)


def assemble_summary(
    missing: list[MissingEntry] | None = None,
    numeric: dict[str, NumericStats] | None = None,
    categorical: dict[str, dict[str, int]] | None = None,
) -> Summary:
    """Combine whichever analyses have been run into one Summary."""
    summary = Summary()
    if missing is not None:
        summary = summary.with_missing(missing)
    if numeric is not None:
        summary = summary.with_numeric(numeric)
    if categorical is not None:
        summary = summary.with_categorical(categorical)
    return summary
