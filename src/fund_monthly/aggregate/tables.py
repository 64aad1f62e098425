"""Flat pandas views of the monthly report.

The nested monthly documents are convenient for JSON consumers but awkward for
spreadsheets; these helpers flatten them into one row per (month, fund) and
one row per month.
"""
from __future__ import annotations

from typing import Sequence

import pandas as pd

from fund_monthly.aggregate.monthly import chronological_key
from fund_monthly.models import MonthSummary

FUND_COLUMNS = [
    "month",
    "year",
    "month_index",
    "name",
    "rank",
    "nominal_rate",
    "after_tax_return",
    "real_return",
    "data_points",
]


def fund_month_table(months: Sequence[MonthSummary]) -> pd.DataFrame:
    """Return one row per fund per month.

    Args:
        months: Month summaries, normally from `aggregate_monthly`.

    Returns:
        DataFrame with columns `FUND_COLUMNS`, ordered chronologically and
        then by rank.
    """
    rows: list[dict[str, object]] = []
    for m in months:
        year, idx = chronological_key(m.month)
        for f in m.funds:
            rows.append(
                {
                    "month": m.month,
                    "year": year,
                    "month_index": idx,
                    "name": f.name,
                    "rank": f.rank,
                    "nominal_rate": f.nominal_rate,
                    "after_tax_return": f.after_tax_return,
                    "real_return": f.real_return,
                    "data_points": f.data_points,
                }
            )

    if not rows:
        return pd.DataFrame(columns=FUND_COLUMNS)

    pdf = pd.DataFrame(rows, columns=FUND_COLUMNS)
    return pdf.sort_values(["year", "month_index", "rank"], kind="stable").reset_index(drop=True)


def portfolio_month_table(months: Sequence[MonthSummary]) -> pd.DataFrame:
    """Return one row per month with the portfolio-level statistics.

    Columns: `month`, `total_funds`, `data_points`, and for each metric
    (`nominal_rate`, `after_tax_return`, `real_return`) its `_avg`,
    `_median` and `_std` columns.
    """
    rows: list[dict[str, object]] = []
    for m in months:
        detailed = m.metadata.statistics.detailed
        row: dict[str, object] = {
            "month": m.month,
            "total_funds": m.total_funds,
            "data_points": detailed.data_points,
        }
        for metric in ("nominal_rate", "after_tax_return", "real_return"):
            d = getattr(detailed, metric)
            row[f"{metric}_avg"] = d.average
            row[f"{metric}_median"] = d.median
            row[f"{metric}_std"] = d.std_dev
        rows.append(row)

    return pd.DataFrame(rows)
