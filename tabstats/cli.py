"""Command-line interface for tabstats."""

import argparse
import logging
import sys
from pathlib import Path

from tabstats import __version__
from tabstats.config import get_settings
from tabstats.core.errors import TabstatsError
from tabstats.core.rows import PREVIEW_MODES, preview_rows


def _build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="tabstats",
        description="Descriptive statistics and merging for CSV datasets",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command")

    analyze = subparsers.add_parser("analyze", help="Analyze a CSV file")
    analyze.add_argument("csv", type=Path, help="CSV file to analyze")
    analyze.add_argument(
        "--merge",
        type=Path,
        default=None,
        help="Second CSV file appended to the first before analysis",
    )
    analyze.add_argument(
        "--tag-source",
        action="store_true",
        help=f"Record each merged row's file name in the '{settings.source_field}' field",
    )
    analyze.add_argument(
        "--categorical",
        nargs="+",
        default=None,
        metavar="COLUMN",
        help="Categorical columns to cross-tabulate",
    )
    analyze.add_argument(
        "--summary-out",
        type=Path,
        default=None,
        help=f"Write the JSON summary here (e.g. {settings.summary_export_name})",
    )
    analyze.add_argument(
        "--csv-out",
        type=Path,
        default=None,
        help=f"Write the (merged) rows here (e.g. {settings.csv_export_name})",
    )
    analyze.add_argument(
        "--plots-dir",
        type=Path,
        default=None,
        help="Directory to write HTML charts into",
    )
    analyze.add_argument(
        "--preview",
        choices=list(PREVIEW_MODES),
        default=settings.preview_rows,
        help=f"Rows to preview (default: {settings.preview_rows})",
    )

    serve = subparsers.add_parser("serve", help="Start the API server")
    serve.add_argument(
        "--host",
        default=settings.api_host,
        help=f"API server host (default: {settings.api_host})",
    )
    serve.add_argument(
        "--port",
        type=int,
        default=settings.api_port,
        help=f"API server port (default: {settings.api_port})",
    )
    return parser


def _write_plots(report, plots_dir: Path) -> list[Path]:
    from tabstats.visualization import (
        create_count_chart,
        create_histogram_chart,
        create_missing_chart,
    )

    plots_dir.mkdir(parents=True, exist_ok=True)
    plots = {"missing": create_missing_chart(report.summary.missing)}
    for column, hist in report.histograms.items():
        plots[f"hist_{column}"] = create_histogram_chart(hist)
    for column, counts in report.value_counts.items():
        if counts:
            plots[f"counts_{column}"] = create_count_chart(counts, column)

    written = []
    for name, plot in plots.items():
        path = plots_dir / f"{name}.html"
        path.write_text(plot.to_html(), encoding="utf-8")
        written.append(path)
    return written


def _print_preview(rows, mode: str) -> None:
    shown = preview_rows(rows, mode)
    if not shown:
        return
    header = list(rows[0])
    print("\t".join(header))
    for row in shown:
        print("\t".join(str(row.get(c)) for c in header))


def _analyze(args: argparse.Namespace) -> int:
    from tabstats.core.merge import merge_row_sets
    from tabstats.io import export_summary, load_csv, save_csv
    from tabstats.pipeline import run_analysis

    print("Loading ...")
    rows = load_csv(args.csv)
    if not rows:
        print(f"Error: {args.csv} has no data rows", file=sys.stderr)
        return 1
    print("Loaded")

    if args.merge is not None:
        extra = load_csv(args.merge)
        rows = merge_row_sets(
            rows,
            extra,
            tag_source=args.tag_source,
            base_label=args.csv.name,
            extra_label=args.merge.name,
        )
        print(f"Merged - {len(rows)} rows")

    report = run_analysis(rows, categorical_columns=args.categorical)
    n_rows, n_cols = report.shape
    print(f"Rows: {n_rows} | Cols: {n_cols}")
    _print_preview(rows, args.preview)

    print()
    for stats in report.summary.numeric.values():
        print(stats.format_for_display())
    for column, counts in (report.summary.categorical or {}).items():
        print(f"**{column}**")
        for key, count in counts.items():
            print(f"  {key}: {count}")

    if args.summary_out is not None:
        export_summary(report.summary, args.summary_out)
        print(f"Summary written to {args.summary_out}")
    if args.csv_out is not None:
        save_csv(rows, args.csv_out)
        print(f"Rows written to {args.csv_out}")
    if args.plots_dir is not None:
        written = _write_plots(report, args.plots_dir)
        print(f"{len(written)} charts written to {args.plots_dir}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "analyze":
        try:
            return _analyze(args)
        except (TabstatsError, OSError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    if args.command == "serve":
        try:
            import uvicorn

            from tabstats.api.app import app

            uvicorn.run(app, host=args.host, port=args.port)
        except ImportError as e:
            print(f"Error: {e}. Make sure uvicorn is installed.", file=sys.stderr)
            return 1
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
