"""Exception types raised while turning daily records into monthly summaries."""

from __future__ import annotations

from typing import Any


class FundDataError(RuntimeError):
    """Base class for fund data problems the CLI reports and exits on."""


class RecordParseError(FundDataError):
    """Raised when a single daily record is malformed.

    The aggregator catches this per record, logs it and moves on.

    Attributes:
        index: Position of the record in the input sequence.
        date: The record's raw date value, if one could be read.
        reason: Short description of what failed validation.
    """

    def __init__(self, index: int, date: Any, reason: str) -> None:
        self.index = index
        self.date = date
        self.reason = reason
        super().__init__(f"record {index} (date={date!r}): {reason}")


class IntegrityError(FundDataError):
    """Raised when the data set as a whole cannot be summarized.

    Covers an empty input sequence, a month key that cannot be placed on the
    calendar, and a run in which no record survived parsing.
    """
