"""Monthly aggregation helpers.

This package turns validated daily records into monthly summaries
(statistics, rankings, chronological ordering) and provides the writers
and loaders for the resulting report.
"""
