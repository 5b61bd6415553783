"""Cost roll-up across several rented facilities."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date
from typing import Iterable, List, Optional

import logging

import pandas as pd

from fiscalcost.fiscal.calendar import DEFAULT_CALENDAR, FiscalCalendar
from fiscalcost.utils.date import DateLike, to_date
from fiscalcost.utils.mathutils import round_half_up

from .breakdown import calculate_costs
from .entities import CostBreakdown, CostInput

logger = logging.getLogger(__name__)

BREAKDOWN_COLUMNS = [f.name for f in fields(CostBreakdown)]


@dataclass(frozen=True)
class Facility:
    facility_id: str
    name: str = "Unknown Facility"
    cost_input: Optional[CostInput] = None


@dataclass(frozen=True)
class FacilityBreakdown:
    facility: Facility
    breakdown: CostBreakdown


@dataclass(frozen=True)
class PortfolioBreakdown:
    """Per-facility breakdowns and their field-wise total."""

    total: CostBreakdown
    facilities: List[FacilityBreakdown]


def _sum_breakdowns(breakdowns: Iterable[CostBreakdown]) -> CostBreakdown:
    totals = dict.fromkeys(BREAKDOWN_COLUMNS, 0.0)
    for breakdown in breakdowns:
        for name, value in breakdown.as_dict().items():
            totals[name] += value
    return CostBreakdown(**{name: round_half_up(value) for name, value in totals.items()})


def portfolio_breakdown(
    facilities: Iterable[Facility],
    reference_date: Optional[DateLike] = None,
    fiscal_calendar: FiscalCalendar = DEFAULT_CALENDAR,
) -> PortfolioBreakdown:
    """Breakdown for every facility with a rental agreement, plus the total."""
    today = date.today() if reference_date is None else to_date(reference_date)
    rows: List[FacilityBreakdown] = []
    for facility in facilities:
        if facility.cost_input is None:
            logger.debug("Skipping facility %s: no rental agreement", facility.facility_id)
            continue
        rows.append(
            FacilityBreakdown(
                facility=facility,
                breakdown=calculate_costs(facility.cost_input, today, fiscal_calendar),
            )
        )
    return PortfolioBreakdown(
        total=_sum_breakdowns(row.breakdown for row in rows),
        facilities=rows,
    )


def breakdown_frame(
    facilities: Iterable[Facility],
    reference_date: Optional[DateLike] = None,
    fiscal_calendar: FiscalCalendar = DEFAULT_CALENDAR,
) -> pd.DataFrame:
    """One row per facility indexed by facility_id: name and the six cost buckets."""
    result = portfolio_breakdown(facilities, reference_date, fiscal_calendar)
    records = [
        {"facility_id": row.facility.facility_id, "name": row.facility.name, **row.breakdown.as_dict()}
        for row in result.facilities
    ]
    df = pd.DataFrame(records, columns=["facility_id", "name", *BREAKDOWN_COLUMNS])
    return df.set_index("facility_id")
