"""Pydantic models for the daily input and the monthly output.

Input models accept the camelCase keys of the daily JSON export and ignore
unknown keys. Output models serialize (``by_alias=True``) to the monthly
report shape (`monthly.json`).
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


@dataclass(frozen=True)
class MonthKey:
    """Aggregation bucket for one calendar month.

    Attributes:
        month: Upper-cased English month name (e.g. ``"JANUARY"``).
        year: Year exactly as written in the source date.
    """
    month: str
    year: str

    @property
    def label(self) -> str:
        return f"{self.month} {self.year}"

    @classmethod
    def from_date(cls, text: str) -> MonthKey:
        """Derive the bucket from a ``"DD Month YYYY"`` date string.

        Raises:
            ValueError: if the text does not split into day, month and a
                numeric year.
        """
        parts = text.split() if isinstance(text, str) else []
        if len(parts) != 3:
            raise ValueError(f"expected 'DD Month YYYY', got {text!r}")
        _, month, year = parts
        if not (year.isascii() and year.isdigit()):
            raise ValueError(f"year {year!r} is not numeric")
        return cls(month=month.upper(), year=year)


# =========================================================
# DAILY INPUT
# =========================================================

class MetricTriple(BaseModel):
    """Nominal / after-tax / real return triple, in percent.

    Fields are strict: JSON numbers only, no numeric strings or booleans.
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True, allow_inf_nan=False)
    nominal_rate: float = Field(..., alias="nominalRate", strict=True)
    after_tax_return: float = Field(..., alias="afterTaxReturn", strict=True)
    real_return: float = Field(..., alias="realReturn", strict=True)


class FundSample(MetricTriple):
    """One fund's figures on one day.

    The fund is identified by ``name``; older exports call it ``fundManager``.
    """
    manager_name: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("name", "fundManager", "managerName"),
    )


class DailyStatistics(BaseModel):
    model_config = ConfigDict(extra="ignore")
    average: MetricTriple


class DailyMetadata(BaseModel):
    model_config = ConfigDict(extra="ignore")
    date: str
    statistics: DailyStatistics

    @field_validator("date")
    @classmethod
    def date_has_month_and_year(cls, v: str) -> str:
        MonthKey.from_date(v)
        return v


class DailyRecord(BaseModel):
    """Schema for one day of the daily export.

    Attributes:
        metadata: Date string and the day's cross-fund averages.
        funds: Fund samples in the order the source listed them.
    """
    model_config = ConfigDict(extra="ignore")
    metadata: DailyMetadata
    funds: list[FundSample]

    @property
    def date(self) -> str:
        return self.metadata.date

    @property
    def portfolio_stats(self) -> MetricTriple:
        return self.metadata.statistics.average

    @property
    def month_key(self) -> MonthKey:
        return MonthKey.from_date(self.metadata.date)


# =========================================================
# MONTHLY OUTPUT
# =========================================================

class FundSummary(BaseModel):
    """A fund's averages over one month and its rank within that month."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    name: str
    nominal_rate: float = Field(..., alias="nominalRate")
    after_tax_return: float = Field(..., alias="afterTaxReturn")
    real_return: float = Field(..., alias="realReturn")
    data_points: int = Field(..., ge=0, alias="dataPoints")
    rank: int | None = Field(default=None, ge=1)


class MetricAverages(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    nominal_rate: float = Field(..., alias="nominalRate")
    after_tax_return: float = Field(..., alias="afterTaxReturn")
    real_return: float = Field(..., alias="realReturn")
    data_points: int = Field(..., ge=0, alias="dataPoints")


class MetricDetail(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    average: float
    median: float
    std_dev: float = Field(..., alias="stdDev")


class DetailedStats(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    nominal_rate: MetricDetail = Field(..., alias="nominalRate")
    after_tax_return: MetricDetail = Field(..., alias="afterTaxReturn")
    real_return: MetricDetail = Field(..., alias="realReturn")
    data_points: int = Field(..., ge=0, alias="dataPoints")


class PortfolioStatistics(BaseModel):
    model_config = ConfigDict(extra="forbid")
    average: MetricAverages
    detailed: DetailedStats


class MonthTotals(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    total_funds: int = Field(..., ge=0, alias="totalFunds")
    top_performer: FundSummary | None = Field(..., alias="topPerformer")
    bottom_performer: FundSummary | None = Field(..., alias="bottomPerformer")


class MonthMetadata(BaseModel):
    model_config = ConfigDict(extra="forbid")
    month: str
    source: str
    statistics: PortfolioStatistics
    summary: MonthTotals


class MonthSummary(BaseModel):
    """One month of the report: portfolio statistics plus ranked funds."""
    model_config = ConfigDict(extra="forbid")
    metadata: MonthMetadata
    funds: list[FundSummary]

    @property
    def month(self) -> str:
        return self.metadata.month

    @property
    def total_funds(self) -> int:
        return self.metadata.summary.total_funds

    @property
    def top_performer(self) -> FundSummary | None:
        return self.metadata.summary.top_performer

    @property
    def bottom_performer(self) -> FundSummary | None:
        return self.metadata.summary.bottom_performer


class DateRange(BaseModel):
    model_config = ConfigDict(extra="forbid")
    start: str
    end: str


class OverallSummary(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    total_months: int = Field(..., ge=1, alias="totalMonths")
    date_range: DateRange = Field(..., alias="dateRange")
    average_number_of_funds: float = Field(..., ge=0, alias="averageNumberOfFunds")


class MonthlyReport(BaseModel):
    """Top-level document written to ``monthly.json``."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    summary: OverallSummary
    monthly_data: list[MonthSummary] = Field(..., alias="monthlyData")

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
