"""Fiscal-period cost allocation for facility rentals.

This package buckets a rental's monthly cost, including an amortized
security deposit, into daily, weekly, monthly, quarterly, half-yearly and
fiscal-year totals for a fiscal year starting April 1.

Key modules:
- fiscal: Fiscal year, quarter and half resolution
- allocation: Cost breakdown, deposit amortization and portfolio roll-up
- conventions: Period types and library defaults
- utils: Date coercion, calendar arithmetic and rounding
"""

from .allocation import (
    AmortizationEntry,
    CostBreakdown,
    CostInput,
    CostSummary,
    Facility,
    amortization_schedule,
    breakdown_frame,
    calculate_costs,
    compute_cost_breakdown,
    compute_cost_summary,
    monthly_total,
    portfolio_breakdown,
)
from .conventions import FiscalPeriodKind
from .fiscal import FiscalCalendar, FiscalPosition

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "AmortizationEntry",
    "CostBreakdown",
    "CostInput",
    "CostSummary",
    "Facility",
    "FiscalCalendar",
    "FiscalPeriodKind",
    "FiscalPosition",
    "amortization_schedule",
    "breakdown_frame",
    "calculate_costs",
    "compute_cost_breakdown",
    "compute_cost_summary",
    "monthly_total",
    "portfolio_breakdown",
]
