"""Reading and validating the daily fund export.

`read_daily_json` loads the raw JSON list; `parse_daily_record` validates one
entry against the `DailyRecord` model and `parse_daily_records` validates a
whole list, skipping (and logging) entries that fail.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from pydantic import ValidationError

from fund_monthly.errors import IntegrityError, RecordParseError
from fund_monthly.models import DailyRecord

log = logging.getLogger(__name__)


def _date_of(raw: Any) -> Any:
    """Best-effort lookup of a raw record's date, for error messages."""
    if isinstance(raw, dict):
        metadata = raw.get("metadata")
        if isinstance(metadata, dict):
            return metadata.get("date")
    return None


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<record>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def read_daily_json(path: Path) -> list[Any]:
    """Load the daily export from `path`.

    Args:
        path: JSON file whose top-level value is a list of daily records.

    Returns:
        The decoded list, entries still unvalidated.

    Raises:
        OSError: if the file cannot be read.
        json.JSONDecodeError: if the file is not valid JSON.
        IntegrityError: if the top-level value is not a list.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise IntegrityError(
            f"{path}: expected a list of daily records, got {type(data).__name__}"
        )
    log.info("Read %d daily records from %s", len(data), path)
    return data


def parse_daily_record(raw: Any, index: int) -> DailyRecord:
    """Validate one raw daily record.

    Args:
        raw: Decoded JSON object, or an already validated `DailyRecord`.
        index: Position of the record in its input sequence.

    Raises:
        RecordParseError: if the date is malformed or a field is missing or
            not numeric.
    """
    if isinstance(raw, DailyRecord):
        return raw
    try:
        return DailyRecord.model_validate(raw)
    except ValidationError as e:
        raise RecordParseError(index, _date_of(raw), _describe(e)) from e


def parse_daily_records(raw_records: Iterable[Any]) -> tuple[list[DailyRecord], int]:
    """Validate every record, skipping the malformed ones.

    Returns:
        A tuple of (valid_records_in_input_order, skipped_count).
    """
    good: list[DailyRecord] = []
    skipped = 0
    for i, raw in enumerate(raw_records):
        try:
            good.append(parse_daily_record(raw, i))
        except RecordParseError as e:
            log.warning("Skipping daily record: %s", e)
            skipped += 1
    return good, skipped
