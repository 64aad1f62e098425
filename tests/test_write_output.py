from __future__ import annotations

import json
from pathlib import Path

import pandas as pd

from fund_monthly.aggregate.monthly import build_report
from fund_monthly.aggregate.write_output import (
    write_fund_table_csv,
    write_monthly_json,
    write_portfolio_table_csv,
)


def _report(make_day):
    return build_report([
        make_day("01 January 2024", [("A", 5.0), ("B", 7.0)]),
        make_day("01 February 2024", [("A", 6.0)]),
    ])


def test_write_monthly_json_shape(tmp_path: Path, make_day) -> None:
    out = write_monthly_json(_report(make_day), tmp_path / "out" / "monthly.json")
    doc = json.loads(out.read_text(encoding="utf-8"))

    assert doc["summary"] == {
        "totalMonths": 2,
        "dateRange": {"start": "JANUARY 2024", "end": "FEBRUARY 2024"},
        "averageNumberOfFunds": 1.5,
    }
    jan = doc["monthlyData"][0]
    assert jan["metadata"]["month"] == "JANUARY 2024"
    assert jan["metadata"]["source"] == "Daily Nation and M-PESA APP"
    assert jan["metadata"]["summary"]["topPerformer"]["name"] == "B"
    assert jan["metadata"]["summary"]["bottomPerformer"]["rank"] == 2
    assert set(jan["metadata"]["statistics"]) == {"average", "detailed"}
    assert set(jan["metadata"]["statistics"]["detailed"]["nominalRate"]) == {
        "average", "median", "stdDev",
    }
    assert jan["funds"][0] == {
        "name": "B",
        "nominalRate": 7.0,
        "afterTaxReturn": 6.0,
        "realReturn": 5.0,
        "dataPoints": 1,
        "rank": 1,
    }


def test_write_fund_table_csv(tmp_path: Path, make_day) -> None:
    out = write_fund_table_csv(_report(make_day), tmp_path / "funds.csv")
    pdf = pd.read_csv(out)
    assert len(pdf) == 3
    assert list(pdf["name"]) == ["B", "A", "A"]


def test_write_portfolio_table_csv(tmp_path: Path, make_day) -> None:
    out = write_portfolio_table_csv(_report(make_day), tmp_path / "csv" / "portfolio.csv")
    pdf = pd.read_csv(out)
    assert list(pdf["month"]) == ["JANUARY 2024", "FEBRUARY 2024"]
    assert list(pdf["total_funds"]) == [2, 1]
    assert pdf.loc[0, "nominal_rate_avg"] == 6.0
