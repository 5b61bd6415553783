"""Numeric helpers for currency amounts."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from fiscalcost.conventions.defaults import CURRENCY_DECIMALS


def round_half_up(value: float, places: int = CURRENCY_DECIMALS) -> float:
    """
    Round to `places` decimals, ties away from zero.

    The float is read through its shortest repr so that 110.715 rounds to
    110.72 rather than following the binary expansion 110.71499...

    Parameters
    ----------
    value : float
        Amount to round
    places : int
        Number of decimals to keep (default: 2, i.e. cents)

    Returns
    -------
    float
        The rounded amount; inf and nan are returned unchanged
    """
    value = float(value)
    if not math.isfinite(value):
        return value
    amount = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # Quantizing keeps every integer digit, so precision must cover them all
        ctx.prec = max(ctx.prec, amount.adjusted() + places + 2)
        return float(amount.quantize(quantum, rounding=ROUND_HALF_UP))
