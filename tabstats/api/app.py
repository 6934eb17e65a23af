"""FastAPI application for tabstats.

This module provides stateless REST endpoints over the analysis functions.
Every request carries the rows it is about; nothing is kept between calls.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, Literal

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from tabstats import __version__
from tabstats.analysis import (
    categorical_stats,
    column_histogram,
    missing_stats,
    numeric_stats,
    value_counts,
)
from tabstats.config import get_settings
from tabstats.core.errors import TabstatsError
from tabstats.core.merge import merge_row_sets
from tabstats.core.rows import shape
from tabstats.pipeline import run_analysis
from tabstats.visualization import (
    create_count_chart,
    create_histogram_chart,
    create_missing_chart,
)

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()
    logger.info(f"Starting tabstats API ({settings.environment})")

    yield

    logger.info("Shutting down tabstats API")


# Create FastAPI app
app = FastAPI(
    title="tabstats API",
    description="Descriptive statistics for tabular datasets",
    version=__version__,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request models
class RowsRequest(BaseModel):
    """Request body carrying a row set."""

    rows: list[dict[str, Any]] = Field(..., description="Rows keyed by column name")


class SummaryRequest(RowsRequest):
    """Request for a full analysis."""

    categorical_columns: list[str] | None = Field(
        default=None, description="Columns to cross-tabulate"
    )
    histogram_columns: list[str] | None = Field(
        default=None, description="Columns to bin (default from settings)"
    )


class CategoricalRequest(RowsRequest):
    """Request for categorical counts."""

    columns: list[str] = Field(..., min_length=1, description="Columns to count")
    group_column: str | None = Field(
        default=None, description="Label column to cross-tabulate with"
    )
    strict: bool = Field(default=False, description="Fail on unknown columns")


class HistogramRequest(RowsRequest):
    """Request for a histogram."""

    column: str = Field(..., description="Numeric column to bin")


class MergeRequest(BaseModel):
    """Request to merge two row sets."""

    base: list[dict[str, Any]] = Field(..., description="Rows placed first")
    extra: list[dict[str, Any]] = Field(..., description="Rows appended")
    tag_source: bool = Field(default=False, description="Add a provenance field")
    base_label: str | None = Field(default=None, description="Label for base rows")
    extra_label: str | None = Field(default=None, description="Label for extra rows")


class PlotRequest(RowsRequest):
    """Request for a chart."""

    plot_type: Literal["missing", "histogram", "counts"] = Field(
        ..., description="Chart to draw"
    )
    column: str | None = Field(
        default=None, description="Column for histogram and counts charts"
    )


class PlotResponse(BaseModel):
    """Response carrying a chart."""

    success: bool
    plot_json: str | None = None
    title: str | None = None
    description: str | None = None
    data_summary: dict[str, Any] | None = None


def _bad_request(e: Exception) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


def _server_error(e: Exception) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(e),
    )


@app.get("/health")
async def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.post("/analysis/summary")
async def run_summary(request: SummaryRequest) -> dict[str, Any]:
    """Run every analysis and return the report."""
    try:
        report = run_analysis(
            request.rows,
            categorical_columns=request.categorical_columns,
            histogram_columns=request.histogram_columns,
        )
        return report.to_dict()
    except TabstatsError as e:
        raise _bad_request(e)
    except Exception as e:
        logger.exception("Summary analysis failed")
        raise _server_error(e)


@app.post("/analysis/missing")
async def run_missing(request: RowsRequest) -> dict[str, Any]:
    """Compute missing-value percentages."""
    try:
        return {"missing": [e.to_dict() for e in missing_stats(request.rows)]}
    except TabstatsError as e:
        raise _bad_request(e)
    except Exception as e:
        logger.exception("Missing-value analysis failed")
        raise _server_error(e)


@app.post("/analysis/numeric")
async def run_numeric(request: RowsRequest) -> dict[str, Any]:
    """Compute numeric column statistics."""
    try:
        stats = numeric_stats(request.rows)
        return {"numeric": {col: s.to_dict() for col, s in stats.items()}}
    except TabstatsError as e:
        raise _bad_request(e)
    except Exception as e:
        logger.exception("Numeric analysis failed")
        raise _server_error(e)


@app.post("/analysis/categorical")
async def run_categorical(request: CategoricalRequest) -> dict[str, Any]:
    """Compute categorical frequency counts."""
    try:
        counts = categorical_stats(
            request.rows,
            request.columns,
            group_column=request.group_column,
            strict=request.strict,
        )
        return {"categorical": counts}
    except TabstatsError as e:
        raise _bad_request(e)
    except Exception as e:
        logger.exception("Categorical analysis failed")
        raise _server_error(e)


@app.post("/analysis/histogram")
async def run_histogram(request: HistogramRequest) -> dict[str, Any]:
    """Bin a numeric column."""
    try:
        hist = column_histogram(request.rows, request.column)
        if hist is None:
            raise ValueError(f"No valid numeric values for column {request.column}")
        return hist.to_dict()
    except ValueError as e:
        raise _bad_request(e)
    except Exception as e:
        logger.exception("Histogram failed")
        raise _server_error(e)


@app.post("/merge")
async def run_merge(request: MergeRequest) -> dict[str, Any]:
    """Merge two row sets, optionally tagging provenance."""
    try:
        merged = merge_row_sets(
            request.base,
            request.extra,
            tag_source=request.tag_source,
            base_label=request.base_label,
            extra_label=request.extra_label,
        )
    except ValueError as e:
        raise _bad_request(e)
    except Exception as e:
        logger.exception("Merge failed")
        raise _server_error(e)

    n_rows, n_cols = shape(merged)
    return {"rows": merged, "row_count": n_rows, "column_count": n_cols}


@app.post("/plot", response_model=PlotResponse)
async def generate_plot(request: PlotRequest) -> PlotResponse:
    """Generate a chart for a row set."""
    try:
        if request.plot_type == "missing":
            result = create_missing_chart(missing_stats(request.rows))
        elif request.column is None:
            raise ValueError(f"Plot type '{request.plot_type}' requires a column")
        elif request.plot_type == "histogram":
            hist = column_histogram(request.rows, request.column)
            if hist is None:
                raise ValueError(f"No valid numeric values for column {request.column}")
            result = create_histogram_chart(hist)
        else:
            result = create_count_chart(value_counts(request.rows, request.column), request.column)

        return PlotResponse(
            success=True,
            plot_json=result.to_json(),
            title=result.title,
            description=result.description,
            data_summary=result.data_summary,
        )
    except ValueError as e:
        raise _bad_request(e)
    except Exception as e:
        logger.exception("Plot generation failed")
        raise _server_error(e)
