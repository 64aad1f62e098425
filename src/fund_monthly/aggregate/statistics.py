"""Summary statistics reported for monthly buckets.

Each function rounds its result half-up to two decimals; inputs are never
rounded. Empty input (and a single sample, for the standard deviation)
yields 0.0 rather than raising. Results that overflow float64 come back as
``inf``/``nan`` unrounded.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Sequence

import numpy as np

PLACES = 2


def round_half_up(value: float, places: int = PLACES) -> float:
    """Round `value` half away from zero to `places` decimals.

    Non-finite values are returned unchanged.
    """
    value = float(value)
    if not math.isfinite(value):
        return value
    d = Decimal(str(value))
    quant = Decimal("1").scaleb(-places)
    with localcontext() as ctx:
        # quantize needs every integer digit plus the kept decimals
        ctx.prec = max(28, d.adjusted() + places + 2)
        return float(d.quantize(quant, rounding=ROUND_HALF_UP))


def average(values: Sequence[float]) -> float:
    """Arithmetic mean of `values`."""
    if len(values) == 0:
        return 0.0
    with np.errstate(over="ignore", invalid="ignore"):
        return round_half_up(np.mean(values))


def median(values: Sequence[float]) -> float:
    """Middle value of `values`; mean of the two middle values for even counts."""
    if len(values) == 0:
        return 0.0
    with np.errstate(over="ignore", invalid="ignore"):
        return round_half_up(np.median(values))


def std_dev(values: Sequence[float]) -> float:
    """Population standard deviation (divides by n, not n - 1)."""
    if len(values) < 2:
        return 0.0
    with np.errstate(over="ignore", invalid="ignore"):
        return round_half_up(np.std(values, ddof=0))
