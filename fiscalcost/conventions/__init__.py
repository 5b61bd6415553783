from .defaults import (
    CURRENCY_DECIMALS,
    DAYS_PER_WEEK,
    DEFAULT_AMORTIZATION_PERIOD_MONTHS,
    FISCAL_YEAR_CHOICE_SPAN,
    FISCAL_YEAR_START_MONTH,
)
from .types import FiscalPeriodKind

__all__ = [
    "CURRENCY_DECIMALS",
    "DAYS_PER_WEEK",
    "DEFAULT_AMORTIZATION_PERIOD_MONTHS",
    "FISCAL_YEAR_CHOICE_SPAN",
    "FISCAL_YEAR_START_MONTH",
    "FiscalPeriodKind",
]
