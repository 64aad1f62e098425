"""Upsert monthly summaries into MongoDB.

Each month becomes one document (the same shape as an entry of
``monthlyData``), keyed by ``metadata.month`` so reruns replace rather than
duplicate.
"""

from __future__ import annotations

from typing import Any
import logging

from pymongo import UpdateOne
from pymongo.collection import Collection

from fund_monthly.models import MonthlyReport

log = logging.getLogger(__name__)

KEY_FIELD = "metadata.month"


def load_monthly(
    report: MonthlyReport,
    collection: Collection[dict[str, Any]],
) -> int:
    """Upsert every month of `report` into `collection`.

    Args:
        report: Aggregated monthly report.
        collection: Target PyMongo collection.

    Returns:
        Number of upsert operations written.
    """
    log.info("Loading monthly summaries into %s", collection.name)

    docs = report.to_json_dict()["monthlyData"]
    if not docs:
        log.warning("No months to load into %s", collection.name)
        return 0

    ops = [
        UpdateOne({KEY_FIELD: doc["metadata"]["month"]}, {"$set": doc}, upsert=True)
        for doc in docs
    ]
    collection.bulk_write(ops, ordered=False)

    log.info("Monthly load complete for %s: %d months", collection.name, len(ops))
    return len(ops)
