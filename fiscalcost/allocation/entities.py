from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Dict

from fiscalcost.conventions.defaults import DEFAULT_AMORTIZATION_PERIOD_MONTHS
from fiscalcost.fiscal.calendar import FiscalPosition
from fiscalcost.utils.date import to_date


@dataclass(frozen=True)
class CostInput:
    """Rental terms a cost breakdown is computed from."""

    monthly_rent: float
    rental_start: date
    rental_end: date
    security_deposit: float = 0.0
    amortization_period_months: int = DEFAULT_AMORTIZATION_PERIOD_MONTHS

    def __post_init__(self):
        object.__setattr__(self, "monthly_rent", float(self.monthly_rent or 0.0))
        object.__setattr__(self, "security_deposit", float(self.security_deposit or 0.0))
        object.__setattr__(
            self, "amortization_period_months", int(self.amortization_period_months or 0)
        )
        object.__setattr__(self, "rental_start", to_date(self.rental_start))
        object.__setattr__(self, "rental_end", to_date(self.rental_end))


@dataclass(frozen=True)
class CostBreakdown:
    """Cost of a rental per bucket, each rounded to the cent."""

    daily: float = 0.0
    weekly: float = 0.0
    monthly: float = 0.0
    quarterly: float = 0.0
    half_yearly: float = 0.0
    fiscal_year: float = 0.0

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class CostSummary:
    """Breakdown together with the inputs and fiscal position it was computed for."""

    cost_input: CostInput
    position: FiscalPosition
    monthly_total: float
    breakdown: CostBreakdown = field(default_factory=CostBreakdown)
