"""CLI entry point for the sales dashboard.

Usage:
    # Serve the API, loading the dataset at startup:
    python -m src.dashboard.main serve --port 5000

    # Print the combined month view as JSON:
    python -m src.dashboard.main report --month march
    python -m src.dashboard.main report --month march --source data.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from src.common.config import settings
from src.common.logging import setup_logging

from .api import create_app
from .combiner import combine
from .errors import DashboardError
from .loader import DatasetLoader
from .store import RecordStore

# Named explicitly so it stays under the package logger when run with -m.
logger = logging.getLogger("src.dashboard.main")


def _run_serve(args: argparse.Namespace) -> int:
    """Start the Flask server after the initial dataset load."""
    store = RecordStore()
    loader = DatasetLoader(store, settings=settings)
    app = create_app(store=store, loader=loader, settings=settings)

    if not args.skip_init:
        try:
            loader.initialize()
        except DashboardError as exc:
            # Serve anyway; /api/initialize-database can retry later.
            logger.error("Startup initialization failed: %s", exc)

    host = args.host or settings.server.host
    port = args.port or settings.server.port
    logger.info("Server is running on http://%s:%d", host, port)
    app.run(host=host, port=port, debug=args.debug or settings.server.debug)
    return 0


def _run_report(args: argparse.Namespace) -> int:
    """Load the dataset once and print the combined month view."""
    store = RecordStore()
    loader = DatasetLoader(store, settings=settings)
    try:
        if args.source:
            loader.load_from_file(args.source)
        else:
            loader.initialize()
        result = combine(
            store.snapshot(),
            args.month,
            default_page=settings.pagination.default_page,
            default_per_page=settings.pagination.default_per_page,
        )
    except DashboardError as exc:
        logger.error("%s", exc)
        return 1
    finally:
        loader.close()

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Product sales dashboard API")
    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.log_level,
        help="Logging level (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", type=str, help="Bind address")
    serve.add_argument("--port", "-p", type=int, help="Port number")
    serve.add_argument(
        "--skip-init",
        action="store_true",
        help="Do not fetch the dataset at startup",
    )
    serve.add_argument("--debug", action="store_true", help="Flask debug mode")
    serve.set_defaults(func=_run_serve)

    report = subparsers.add_parser("report", help="Print the combined view for a month")
    report.add_argument("--month", type=str, required=True, help="Month name, e.g. 'march'")
    report.add_argument(
        "--source",
        type=str,
        help="Local JSON file to read instead of the remote dataset",
    )
    report.set_defaults(func=_run_report)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
