"""Input side of the pipeline.

Loads the daily JSON export and validates each record into a `DailyRecord`,
tolerating individual malformed entries.
"""
