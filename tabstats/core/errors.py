"""Exception hierarchy for tabstats.

Every error raised on purpose by the package derives from ``TabstatsError`` so
callers at the boundary (CLI, API) can report it as a single status message.
Individual malformed values never raise; they are dropped from numeric work.
"""

from __future__ import annotations


class TabstatsError(Exception):
    """Base class for all tabstats errors."""


class EmptyInputError(TabstatsError, ValueError):
    """A row set with zero rows was given to an operation that needs a schema."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} requires at least one row")


class MissingRequiredColumnError(TabstatsError, KeyError):
    """A requested column is not part of the row set's schema."""

    def __init__(self, column: str, available: list[str] | None = None) -> None:
        self.column = column
        self.available = available or []
        super().__init__(column)

    def __str__(self) -> str:
        message = f"Column '{self.column}' not found"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        return message


class DegenerateRangeError(TabstatsError, ValueError):
    """A numeric sample has min == max, so a bin width cannot be derived."""

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Sample range is degenerate: every value equals {value}")


class NothingToExportError(TabstatsError):
    """An export was requested for an empty summary or row set."""


class MalformedInputError(TabstatsError, ValueError):
    """A source file could not be decoded or parsed as delimited text."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read {source}: {reason}")
