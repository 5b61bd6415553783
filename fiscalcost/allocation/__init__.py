"""Rental cost allocation public API."""

from .amortization import AmortizationEntry, amortization_schedule, amortized_between
from .breakdown import (
    calculate_costs,
    compute_cost_breakdown,
    compute_cost_summary,
    monthly_total,
)
from .entities import CostBreakdown, CostInput, CostSummary
from .portfolio import (
    Facility,
    FacilityBreakdown,
    PortfolioBreakdown,
    breakdown_frame,
    portfolio_breakdown,
)

__all__ = [
    "AmortizationEntry",
    "CostBreakdown",
    "CostInput",
    "CostSummary",
    "Facility",
    "FacilityBreakdown",
    "PortfolioBreakdown",
    "amortization_schedule",
    "amortized_between",
    "breakdown_frame",
    "calculate_costs",
    "compute_cost_breakdown",
    "compute_cost_summary",
    "monthly_total",
    "portfolio_breakdown",
]
