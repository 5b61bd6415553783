"""Straight-line amortization schedule for a security deposit."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List

import logging

from fiscalcost.utils.date import DateLike, add_months, to_date
from fiscalcost.utils.mathutils import round_half_up

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AmortizationEntry:
    """One month of the schedule."""

    period_start: date
    beginning_balance: float
    expense: float
    ending_balance: float
    cumulative: float


def amortization_schedule(
    security_deposit: float,
    amortization_period_months: int,
    start_date: DateLike,
) -> List[AmortizationEntry]:
    """Spread the deposit evenly over monthly periods beginning at start_date.

    Each expense is rounded to the cent; the last period takes the remainder so
    the schedule amortizes exactly the deposit.
    """
    start = to_date(start_date)
    deposit = float(security_deposit or 0.0)
    months = int(amortization_period_months or 0)
    if deposit <= 0 or months <= 0:
        logger.debug("Nothing to amortize: deposit=%s period=%s", deposit, months)
        return []

    installment = round_half_up(deposit / months)
    schedule: List[AmortizationEntry] = []
    balance = deposit
    cumulative = 0.0
    for i in range(months):
        expense = installment if i < months - 1 else round_half_up(balance)
        beginning = balance
        balance = round_half_up(balance - expense)
        cumulative = round_half_up(cumulative + expense)
        schedule.append(
            AmortizationEntry(
                period_start=add_months(start, i),
                beginning_balance=round_half_up(beginning),
                expense=expense,
                ending_balance=balance,
                cumulative=cumulative,
            )
        )
    return schedule


def amortized_between(
    schedule: Iterable[AmortizationEntry], start: DateLike, end: DateLike
) -> float:
    """Total expense of the entries whose period starts within [start, end]."""
    lo = to_date(start)
    hi = to_date(end)
    return round_half_up(sum(e.expense for e in schedule if lo <= e.period_start <= hi))
