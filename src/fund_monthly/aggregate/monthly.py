"""Monthly rollup of daily fund records.

Pipeline: daily records -> month buckets (keyed by ``"MONTH YEAR"``) ->
per-fund and portfolio accumulators -> averages / median / std dev ->
ranked funds -> chronologically sorted months -> overall summary.

Notes:
- Fund ranking is a stable sort on the reported (rounded) nominal rate,
  descending, so ties keep the order in which funds first appeared in
  the month.
- The portfolio statistics are computed over each day's supplied
  cross-fund average (a mean of daily means), not over raw fund samples.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

from fund_monthly.aggregate.statistics import average, median, std_dev
from fund_monthly.config import DEFAULT_SOURCE
from fund_monthly.errors import IntegrityError
from fund_monthly.ingest.read_daily import parse_daily_records
from fund_monthly.models import (
    DailyRecord,
    DateRange,
    DetailedStats,
    FundSummary,
    MetricAverages,
    MetricDetail,
    MetricTriple,
    MonthKey,
    MonthlyReport,
    MonthMetadata,
    MonthSummary,
    MonthTotals,
    OverallSummary,
    PortfolioStatistics,
)

log = logging.getLogger(__name__)

MONTHS = (
    "JANUARY", "FEBRUARY", "MARCH", "APRIL", "MAY", "JUNE",
    "JULY", "AUGUST", "SEPTEMBER", "OCTOBER", "NOVEMBER", "DECEMBER",
)


# =========================================================
# ACCUMULATION
# =========================================================

def _detail(values: Sequence[float]) -> MetricDetail:
    return MetricDetail(average=average(values), median=median(values), std_dev=std_dev(values))


@dataclass
class MetricAccumulator:
    """Append-only samples of the three return metrics."""
    nominal_rates: list[float] = field(default_factory=list)
    after_tax_returns: list[float] = field(default_factory=list)
    real_returns: list[float] = field(default_factory=list)
    count: int = 0

    def add(self, triple: MetricTriple) -> None:
        self.nominal_rates.append(triple.nominal_rate)
        self.after_tax_returns.append(triple.after_tax_return)
        self.real_returns.append(triple.real_return)
        self.count += 1

    def averages(self) -> MetricAverages:
        return MetricAverages(
            nominal_rate=average(self.nominal_rates),
            after_tax_return=average(self.after_tax_returns),
            real_return=average(self.real_returns),
            data_points=self.count,
        )

    def detailed(self) -> DetailedStats:
        return DetailedStats(
            nominal_rate=_detail(self.nominal_rates),
            after_tax_return=_detail(self.after_tax_returns),
            real_return=_detail(self.real_returns),
            data_points=self.count,
        )

    def fund_summary(self, name: str) -> FundSummary:
        """Unranked summary of this accumulator for fund `name`."""
        avg = self.averages()
        return FundSummary(
            name=name,
            nominal_rate=avg.nominal_rate,
            after_tax_return=avg.after_tax_return,
            real_return=avg.real_return,
            data_points=avg.data_points,
        )


@dataclass
class MonthBucket:
    """Everything collected for one month.

    Attributes:
        key: The bucket's month and year.
        funds: Per-fund accumulators, in first-appearance order.
        portfolio: Accumulator of the daily cross-fund averages.
    """
    key: MonthKey
    funds: dict[str, MetricAccumulator] = field(default_factory=dict)
    portfolio: MetricAccumulator = field(default_factory=MetricAccumulator)

    def add_record(self, record: DailyRecord) -> None:
        for sample in record.funds:
            acc = self.funds.get(sample.manager_name)
            if acc is None:
                acc = self.funds[sample.manager_name] = MetricAccumulator()
            acc.add(sample)
        self.portfolio.add(record.portfolio_stats)

    def summarize(self, source: str = DEFAULT_SOURCE) -> MonthSummary:
        """Reduce the bucket to a `MonthSummary` with ranked funds."""
        funds = rank_funds([acc.fund_summary(name) for name, acc in self.funds.items()])
        return MonthSummary(
            metadata=MonthMetadata(
                month=self.key.label,
                source=source,
                statistics=PortfolioStatistics(
                    average=self.portfolio.averages(),
                    detailed=self.portfolio.detailed(),
                ),
                summary=MonthTotals(
                    total_funds=len(funds),
                    top_performer=funds[0] if funds else None,
                    bottom_performer=funds[-1] if funds else None,
                ),
            ),
            funds=funds,
        )


def group_by_month(daily: Iterable[DailyRecord | dict[str, Any]]) -> dict[str, MonthBucket]:
    """Bucket daily records by month, in order of first appearance.

    Records go through `parse_daily_records` first, so malformed ones are
    logged and skipped without affecting the others.

    Args:
        daily: Daily records in input order (validated or raw JSON objects).

    Returns:
        Mapping of month label (e.g. ``"JANUARY 2024"``) to its bucket.
    """
    records, skipped = parse_daily_records(daily)
    buckets: dict[str, MonthBucket] = {}

    for record in records:
        key = record.month_key
        bucket = buckets.get(key.label)
        if bucket is None:
            bucket = buckets[key.label] = MonthBucket(key=key)
        bucket.add_record(record)

    log.info("Grouped daily records into %d months (%d skipped)", len(buckets), skipped)
    return buckets


# =========================================================
# RANKING + ORDERING
# =========================================================

def rank_funds(funds: Sequence[FundSummary]) -> list[FundSummary]:
    """Return copies of `funds` sorted by nominal rate, best first, with 1-based ranks.

    Ties keep their input order.
    """
    ordered = sorted(funds, key=lambda f: f.nominal_rate, reverse=True)
    return [f.model_copy(update={"rank": i}) for i, f in enumerate(ordered, start=1)]


def month_index(month: str) -> int:
    """Zero-based calendar position of an English month name (case-insensitive).

    Raises:
        IntegrityError: if the name is not one of the twelve months.
    """
    try:
        return MONTHS.index(month.upper())
    except ValueError:
        raise IntegrityError(f"unrecognized month name: {month!r}") from None


def chronological_key(month_label: str) -> tuple[int, int]:
    """Sort key ``(year, month_index)`` for a ``"MONTH YEAR"`` label."""
    parts = month_label.split()
    if len(parts) != 2:
        raise IntegrityError(f"malformed month key: {month_label!r}")
    month, year = parts
    try:
        year_num = int(year)
    except ValueError:
        raise IntegrityError(f"non-numeric year in month key: {month_label!r}") from None
    return year_num, month_index(month)


def sort_months(months: Iterable[MonthSummary]) -> list[MonthSummary]:
    """Order month summaries oldest first."""
    return sorted(months, key=lambda m: chronological_key(m.month))


# =========================================================
# ENTRY POINTS
# =========================================================

def summarize_months(months: Sequence[MonthSummary]) -> OverallSummary:
    """Compute the overall summary of chronologically sorted months.

    Raises:
        IntegrityError: if there are no months.
    """
    if not months:
        raise IntegrityError("no valid daily records; nothing to summarize")
    return OverallSummary(
        total_months=len(months),
        date_range=DateRange(start=months[0].month, end=months[-1].month),
        average_number_of_funds=average([m.total_funds for m in months]),
    )


def aggregate_monthly(
    daily: Iterable[DailyRecord | dict[str, Any]],
    source: str = DEFAULT_SOURCE,
) -> list[MonthSummary]:
    """Roll daily records up into chronologically sorted month summaries.

    Args:
        daily: Daily records in input order.
        source: Value written to each month's ``metadata.source``.

    Raises:
        IntegrityError: if `daily` is empty or a month cannot be ordered.
    """
    daily = list(daily)
    if not daily:
        raise IntegrityError("input contains no daily records")

    buckets = group_by_month(daily)
    months = [bucket.summarize(source) for bucket in buckets.values()]
    return sort_months(months)


def build_report(
    daily: Iterable[DailyRecord | dict[str, Any]],
    source: str = DEFAULT_SOURCE,
) -> MonthlyReport:
    """Aggregate `daily` and attach the overall summary."""
    months = aggregate_monthly(daily, source=source)
    return MonthlyReport(summary=summarize_months(months), monthly_data=months)
