"""fund_monthly package.

Rolls daily money-market fund performance snapshots up into monthly
summaries: per-fund averages and rankings, portfolio-wide average/median/
standard deviation, and an overall summary across months.

Architecture:
- ingest: read the daily JSON export and validate each record
- aggregate: group by month, reduce, rank, sort chronologically
- outputs: monthly JSON (same shape as the legacy report), flat CSV
  tables via pandas, optional MongoDB upsert
- Pydantic models describe both the daily input and the monthly output
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
