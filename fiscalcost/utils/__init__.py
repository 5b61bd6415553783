from .date import (
    add_days,
    add_months,
    date_to_str,
    days_in_month,
    first_of_month,
    month_starts,
    to_date,
)
from .mathutils import round_half_up

__all__ = [
    "add_days",
    "add_months",
    "date_to_str",
    "days_in_month",
    "first_of_month",
    "month_starts",
    "round_half_up",
    "to_date",
]
