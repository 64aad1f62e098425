"""Command-line interface for the monthly rollup.

Provides subcommands: `aggregate`, `load`, and `all`. Each command is
implemented as a `cmd_*` function that accepts an argparse namespace.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from dotenv import load_dotenv
from pymongo.errors import PyMongoError

from fund_monthly.config import get_settings
from fund_monthly.logging_config import configure_logging
from fund_monthly.db import get_client, get_monthly_collection
from fund_monthly.models import MonthlyReport

# INGEST
from fund_monthly.ingest.read_daily import read_daily_json

# AGGREGATE
from fund_monthly.aggregate.monthly import build_report
from fund_monthly.aggregate.write_output import (
    write_fund_table_csv,
    write_monthly_json,
    write_portfolio_table_csv,
)
from fund_monthly.aggregate.load_monthly import load_monthly

log = logging.getLogger(__name__)


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def _build_from_input(input_path: Path | None) -> MonthlyReport:
    """Read the daily export and aggregate it into a report."""
    s = get_settings()
    path = input_path or s.data_path

    log.info("Reading data file %s", path)
    raw = read_daily_json(path)

    log.info("Processing monthly data...")
    return build_report(raw, source=s.source_label)


def _log_summary(report: MonthlyReport) -> None:
    summary = report.summary
    log.info("Processing summary:")
    log.info("Total months processed: %d", summary.total_months)
    log.info("Date range: %s to %s", summary.date_range.start, summary.date_range.end)
    log.info("Average number of funds per month: %s", summary.average_number_of_funds)


# --------------------------------------------------
# AGGREGATE
# --------------------------------------------------
def cmd_aggregate(args: argparse.Namespace) -> MonthlyReport:
    """Aggregate the daily export and write the monthly JSON (and optional CSVs).

    Args:
        args: argparse namespace with `input`, `output`, `csv` and
            `portfolio_csv`.
    """
    s = get_settings()
    report = _build_from_input(args.input)

    write_monthly_json(report, args.output or s.monthly_path)
    if args.csv is not None:
        write_fund_table_csv(report, args.csv)
    if args.portfolio_csv is not None:
        write_portfolio_table_csv(report, args.portfolio_csv)

    _log_summary(report)
    return report


# --------------------------------------------------
# LOAD
# --------------------------------------------------
def cmd_load(args: argparse.Namespace, report: MonthlyReport | None = None) -> int:
    """Upsert monthly summaries into MongoDB.

    Aggregates `args.input` unless a `report` is passed in.

    Raises:
        RuntimeError: if `MONGO_URI` is not configured.
    """
    s = get_settings()
    if not s.mongo_uri:
        raise RuntimeError("MONGO_URI is required for `load`. Set it in .env.")

    if report is None:
        report = _build_from_input(args.input)

    client = get_client(s.mongo_uri)
    try:
        return load_monthly(report, get_monthly_collection(client, s))
    finally:
        client.close()


# --------------------------------------------------
# ALL
# --------------------------------------------------
def cmd_all(args: argparse.Namespace) -> None:
    """Convenience: aggregate → write files → load into MongoDB."""
    report = cmd_aggregate(args)
    cmd_load(args, report=report)


# --------------------------------------------------
# CLI
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(prog="fund_monthly")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_agg = sub.add_parser("aggregate", help="write the monthly JSON report")
    p_agg.add_argument("--input", type=Path, default=None)
    p_agg.add_argument("--output", type=Path, default=None)
    p_agg.add_argument("--csv", type=Path, default=None)
    p_agg.add_argument("--portfolio-csv", type=Path, default=None)

    p_load = sub.add_parser("load", help="upsert monthly summaries into MongoDB")
    p_load.add_argument("--input", type=Path, default=None)

    p_all = sub.add_parser("all", help="aggregate, then load")
    p_all.add_argument("--input", type=Path, default=None)
    p_all.add_argument("--output", type=Path, default=None)
    p_all.add_argument("--csv", type=Path, default=None)
    p_all.add_argument("--portfolio-csv", type=Path, default=None)

    return p


def main(argv: list[str] | None = None) -> None:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    load_dotenv()
    configure_logging(get_settings().log_path)

    args = build_parser().parse_args(argv)

    try:
        if args.cmd == "aggregate":
            cmd_aggregate(args)
        elif args.cmd == "load":
            cmd_load(args)
        elif args.cmd == "all":
            cmd_all(args)
        else:
            raise SystemExit(2)
    except (RuntimeError, OSError, ValueError, PyMongoError) as e:
        log.error("Error processing data: %s", e)
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
