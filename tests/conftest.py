from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

import pytest


def _day(
    date: str,
    funds: Sequence[tuple[str, float]],
    stats: tuple[float, float, float] | None = None,
    name_key: str = "name",
) -> dict[str, Any]:
    """Build one raw daily record.

    Each fund is `(name, nominal_rate)`; after-tax is nominal - 1 and real is
    nominal - 2. `stats` defaults to the mean of the listed funds.
    """
    fund_docs = [
        {
            name_key: name,
            "nominalRate": nominal,
            "afterTaxReturn": nominal - 1,
            "realReturn": nominal - 2,
        }
        for name, nominal in funds
    ]
    if stats is None:
        mean = sum(n for _, n in funds) / len(funds) if funds else 0.0
        stats = (mean, mean - 1, mean - 2)
    return {
        "metadata": {
            "date": date,
            "statistics": {
                "average": {
                    "nominalRate": stats[0],
                    "afterTaxReturn": stats[1],
                    "realReturn": stats[2],
                }
            },
        },
        "funds": fund_docs,
    }


@pytest.fixture()
def make_day() -> Callable[..., dict[str, Any]]:
    return _day


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Any:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)
