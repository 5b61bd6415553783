from .calendar import (
    DEFAULT_CALENDAR,
    FiscalCalendar,
    FiscalPosition,
    fiscal_year_choices,
    fiscal_year_end,
    fiscal_year_label,
    fiscal_year_of,
    fiscal_year_start,
    half_end,
    half_of,
    half_start,
    position_of,
    quarter_end,
    quarter_of,
    quarter_start,
)

__all__ = [
    "DEFAULT_CALENDAR",
    "FiscalCalendar",
    "FiscalPosition",
    "fiscal_year_choices",
    "fiscal_year_end",
    "fiscal_year_label",
    "fiscal_year_of",
    "fiscal_year_start",
    "half_end",
    "half_of",
    "half_start",
    "position_of",
    "quarter_end",
    "quarter_of",
    "quarter_start",
]
