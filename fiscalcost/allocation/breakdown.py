"""Cost breakdown of a rental over the fiscal periods around a reference date."""

from __future__ import annotations

from datetime import date
from typing import Optional

import logging

from fiscalcost.conventions.defaults import (
    DAYS_PER_WEEK,
    DEFAULT_AMORTIZATION_PERIOD_MONTHS,
)
from fiscalcost.conventions.types import FiscalPeriodKind
from fiscalcost.fiscal.calendar import DEFAULT_CALENDAR, FiscalCalendar
from fiscalcost.utils.date import DateLike, days_in_month, month_starts, to_date
from fiscalcost.utils.mathutils import round_half_up

from .entities import CostBreakdown, CostInput, CostSummary

logger = logging.getLogger(__name__)


def monthly_total(
    monthly_rent: float,
    security_deposit: float = 0.0,
    amortization_period_months: int = DEFAULT_AMORTIZATION_PERIOD_MONTHS,
) -> float:
    """Monthly rent plus the deposit spread evenly over the amortization period.

    A non-positive deposit or period contributes nothing.
    """
    if security_deposit > 0 and amortization_period_months > 0:
        return monthly_rent + security_deposit / amortization_period_months
    if security_deposit > 0:
        logger.debug(
            "Skipping deposit amortization: deposit=%s period=%s",
            security_deposit,
            amortization_period_months,
        )
    return monthly_rent


def daily_cost(total: float, reference_date: date) -> float:
    """Monthly total over the actual length (28-31 days) of the reference month."""
    return total / days_in_month(reference_date)


def weekly_cost(daily: float) -> float:
    return daily * DAYS_PER_WEEK


def months_in_rental(period_start: date, months: int, rental_start: date, rental_end: date) -> int:
    """Count the period's months whose first day lies within [rental_start, rental_end].

    Only the 1st of each month is tested: a rental ending on the 2nd counts that
    month in full, one starting on the 2nd does not count it at all.
    """
    return sum(
        1
        for month_start in month_starts(period_start, months)
        if rental_start <= month_start <= rental_end
    )


def period_cost(
    total: float,
    period_start: date,
    period_end: date,
    rental_start: date,
    rental_end: date,
) -> float:
    """Monthly total times the number of the period's months covered by the rental."""
    if period_end < rental_start or period_start > rental_end:
        logger.debug(
            "Period %s..%s outside rental %s..%s",
            period_start,
            period_end,
            rental_start,
            rental_end,
        )
        return 0.0
    months = (period_end.year - period_start.year) * 12 + period_end.month - period_start.month + 1
    return total * months_in_rental(period_start, months, rental_start, rental_end)


def calculate_costs(
    cost_input: CostInput,
    reference_date: Optional[DateLike] = None,
    fiscal_calendar: FiscalCalendar = DEFAULT_CALENDAR,
) -> CostBreakdown:
    """Compute the cost breakdown of `cost_input` as seen on `reference_date` (default: today)."""
    today = date.today() if reference_date is None else to_date(reference_date)
    total = monthly_total(
        cost_input.monthly_rent,
        cost_input.security_deposit,
        cost_input.amortization_period_months,
    )

    daily = daily_cost(total, today)
    periods = {}
    for kind in FiscalPeriodKind:
        start, end = fiscal_calendar.current_period_bounds(today, kind)
        periods[kind] = period_cost(total, start, end, cost_input.rental_start, cost_input.rental_end)

    breakdown = CostBreakdown(
        daily=round_half_up(daily),
        weekly=round_half_up(weekly_cost(daily)),
        monthly=round_half_up(total),
        quarterly=round_half_up(periods[FiscalPeriodKind.QUARTER]),
        half_yearly=round_half_up(periods[FiscalPeriodKind.HALF]),
        fiscal_year=round_half_up(periods[FiscalPeriodKind.YEAR]),
    )
    logger.debug("Cost breakdown on %s: %s", today, breakdown)
    return breakdown


def compute_cost_breakdown(
    monthly_rent: float,
    rental_start: DateLike,
    rental_end: DateLike,
    security_deposit: float = 0.0,
    amortization_period_months: int = DEFAULT_AMORTIZATION_PERIOD_MONTHS,
    reference_date: Optional[DateLike] = None,
) -> CostBreakdown:
    """Daily, weekly, monthly, quarterly, half-yearly and fiscal-year cost of a rental.

    Args:
        monthly_rent: Base recurring rent
        rental_start: First day of the rental
        rental_end: Last day of the rental
        security_deposit: One-off deposit amortized into the monthly total (default: 0)
        amortization_period_months: Months the deposit is spread over (default: 12)
        reference_date: Date whose month and fiscal periods are reported (default: today)
    """
    cost_input = CostInput(
        monthly_rent=monthly_rent,
        rental_start=rental_start,
        rental_end=rental_end,
        security_deposit=security_deposit,
        amortization_period_months=amortization_period_months,
    )
    return calculate_costs(cost_input, reference_date)


def compute_cost_summary(
    cost_input: CostInput,
    reference_date: Optional[DateLike] = None,
    fiscal_calendar: FiscalCalendar = DEFAULT_CALENDAR,
) -> CostSummary:
    today = date.today() if reference_date is None else to_date(reference_date)
    total = monthly_total(
        cost_input.monthly_rent,
        cost_input.security_deposit,
        cost_input.amortization_period_months,
    )
    return CostSummary(
        cost_input=cost_input,
        position=fiscal_calendar.position_of(today),
        monthly_total=round_half_up(total),
        breakdown=calculate_costs(cost_input, today, fiscal_calendar),
    )
