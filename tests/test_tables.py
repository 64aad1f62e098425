from __future__ import annotations

from fund_monthly.aggregate.monthly import aggregate_monthly
from fund_monthly.aggregate.tables import FUND_COLUMNS, fund_month_table, portfolio_month_table


def test_fund_month_table_rows(make_day) -> None:
    months = aggregate_monthly([
        make_day("01 February 2024", [("A", 2.0), ("B", 3.0)]),
        make_day("01 January 2024", [("A", 4.0)]),
    ])
    pdf = fund_month_table(months)
    assert list(pdf.columns) == FUND_COLUMNS
    rows = [(r["month"], r["name"], int(r["rank"])) for _, r in pdf.iterrows()]
    assert rows == [
        ("JANUARY 2024", "A", 1),
        ("FEBRUARY 2024", "B", 1),
        ("FEBRUARY 2024", "A", 2),
    ]
    assert pdf.loc[0, "after_tax_return"] == 3.0


def test_fund_month_table_empty_keeps_columns(make_day) -> None:
    months = aggregate_monthly([make_day("01 January 2024", [], stats=(1.0, 1.0, 1.0))])
    pdf = fund_month_table(months)
    assert pdf.empty
    assert list(pdf.columns) == FUND_COLUMNS


def test_portfolio_month_table(make_day) -> None:
    months = aggregate_monthly([
        make_day("01 January 2024", [("A", 4.0)]),
        make_day("02 January 2024", [("A", 6.0)]),
    ])
    pdf = portfolio_month_table(months)
    assert len(pdf) == 1
    row = pdf.iloc[0]
    assert row["month"] == "JANUARY 2024"
    assert row["total_funds"] == 1
    assert row["nominal_rate_avg"] == 5.0
    assert row["nominal_rate_median"] == 5.0
    assert row["nominal_rate_std"] == 1.0
    assert row["real_return_avg"] == 3.0
