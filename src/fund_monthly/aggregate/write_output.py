"""Writers for the monthly report: nested JSON and flat CSV tables."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from fund_monthly.aggregate.tables import fund_month_table, portfolio_month_table
from fund_monthly.models import MonthlyReport

log = logging.getLogger(__name__)


def write_monthly_json(report: MonthlyReport, path: Path) -> Path:
    """Write `report` as indented JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(report.to_json_dict(), indent=2), encoding="utf-8")
    log.info("Wrote %d months to %s", len(report.monthly_data), path)
    return path


def write_fund_table_csv(report: MonthlyReport, path: Path) -> Path:
    """Write the per-fund monthly table (see `fund_month_table`) as CSV."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    pdf = fund_month_table(report.monthly_data)
    pdf.to_csv(path, index=False)
    log.info("Wrote %d fund rows to %s", len(pdf), path)
    return path


def write_portfolio_table_csv(report: MonthlyReport, path: Path) -> Path:
    """Write the per-month portfolio table (see `portfolio_month_table`) as CSV."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    pdf = portfolio_month_table(report.monthly_data)
    pdf.to_csv(path, index=False)
    log.info("Wrote %d portfolio rows to %s", len(pdf), path)
    return path
