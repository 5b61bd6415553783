"""
Fiscal year, quarter and half resolution for a fiscal year that does not
start in January.

The default calendar starts the fiscal year on April 1: Q1 = Apr-Jun,
Q2 = Jul-Sep, Q3 = Oct-Dec, Q4 = Jan-Mar of the following calendar year,
H1 = Apr-Sep, H2 = Oct-Mar. A fiscal year is labelled with the calendar
year in which it starts.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import List, Tuple

from fiscalcost.conventions.defaults import (
    FISCAL_YEAR_CHOICE_SPAN,
    FISCAL_YEAR_START_MONTH,
)
from fiscalcost.conventions.types import FiscalPeriodKind
from fiscalcost.utils.date import DateLike, add_days, add_months, to_date


@dataclass(frozen=True)
class FiscalPosition:
    """Where a reference date sits in the fiscal calendar."""

    reference_date: date
    fiscal_year: int
    quarter: int
    half: int

    @property
    def month(self) -> int:
        return self.reference_date.month

    @property
    def month_name(self) -> str:
        return calendar.month_name[self.reference_date.month]


class FiscalCalendar:
    def __init__(self, start_month: int = FISCAL_YEAR_START_MONTH):
        """Fiscal calendar anchored on the first day of `start_month`.

        Args:
            start_month: Calendar month (1-12) in which the fiscal year begins
        """
        if not 1 <= int(start_month) <= 12:
            raise ValueError(f"start_month must be in 1..12, got {start_month}")
        self.start_month = int(start_month)

    def __repr__(self) -> str:
        return f"FiscalCalendar(start_month={self.start_month})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, FiscalCalendar):
            return NotImplemented
        return self.start_month == other.start_month

    def __hash__(self) -> int:
        return hash(self.start_month)

    # Resolution
    def _month_offset(self, dt: date) -> int:
        """Months elapsed since the start of dt's fiscal year (0-11)."""
        return (dt.month - self.start_month) % 12

    def fiscal_year_of(self, date_like: DateLike) -> int:
        dt = to_date(date_like)
        return dt.year if dt.month >= self.start_month else dt.year - 1

    def quarter_of(self, date_like: DateLike) -> int:
        return self._month_offset(to_date(date_like)) // 3 + 1

    def half_of(self, date_like: DateLike) -> int:
        return self._month_offset(to_date(date_like)) // 6 + 1

    def position_of(self, date_like: DateLike) -> FiscalPosition:
        dt = to_date(date_like)
        return FiscalPosition(
            reference_date=dt,
            fiscal_year=self.fiscal_year_of(dt),
            quarter=self.quarter_of(dt),
            half=self.half_of(dt),
        )

    # Period bounds
    def fiscal_year_start(self, fiscal_year: int) -> date:
        return date(int(fiscal_year), self.start_month, 1)

    def fiscal_year_end(self, fiscal_year: int) -> date:
        return add_days(add_months(self.fiscal_year_start(fiscal_year), 12), -1)

    def period_start(self, fiscal_year: int, kind: FiscalPeriodKind, index: int) -> date:
        """First day of the `index`-th (1-based) period of `kind` in the fiscal year."""
        count = kind.periods_per_year()
        if not 1 <= index <= count:
            raise ValueError(f"{kind.name.lower()} index must be in 1..{count}, got {index}")
        return add_months(self.fiscal_year_start(fiscal_year), (index - 1) * kind.months())

    def period_bounds(self, fiscal_year: int, kind: FiscalPeriodKind, index: int = 1) -> Tuple[date, date]:
        """(first day, last day) of a fiscal period."""
        start = self.period_start(fiscal_year, kind, index)
        end = add_days(add_months(start, kind.months()), -1)
        return start, end

    def quarter_start(self, fiscal_year: int, quarter: int) -> date:
        return self.period_start(fiscal_year, FiscalPeriodKind.QUARTER, quarter)

    def quarter_end(self, fiscal_year: int, quarter: int) -> date:
        return self.period_bounds(fiscal_year, FiscalPeriodKind.QUARTER, quarter)[1]

    def half_start(self, fiscal_year: int, half: int) -> date:
        return self.period_start(fiscal_year, FiscalPeriodKind.HALF, half)

    def half_end(self, fiscal_year: int, half: int) -> date:
        return self.period_bounds(fiscal_year, FiscalPeriodKind.HALF, half)[1]

    def current_period_bounds(self, date_like: DateLike, kind: FiscalPeriodKind) -> Tuple[date, date]:
        """Bounds of the period of `kind` that contains the given date."""
        position = self.position_of(date_like)
        if kind is FiscalPeriodKind.QUARTER:
            index = position.quarter
        elif kind is FiscalPeriodKind.HALF:
            index = position.half
        else:
            index = 1
        return self.period_bounds(position.fiscal_year, kind, index)

    # Labels
    def _month_span_label(self, kind: FiscalPeriodKind, index: int) -> str:
        first = self.period_start(2000, kind, index).month
        last = (first - 1 + kind.months() - 1) % 12 + 1
        return f"{calendar.month_abbr[first]}-{calendar.month_abbr[last]}"

    def quarter_label(self, quarter: int) -> str:
        """e.g. 'Q1 (Apr-Jun)'."""
        return f"Q{quarter} ({self._month_span_label(FiscalPeriodKind.QUARTER, quarter)})"

    def half_label(self, half: int) -> str:
        """e.g. 'H2 (Oct-Mar)'."""
        return f"H{half} ({self._month_span_label(FiscalPeriodKind.HALF, half)})"

    def fiscal_year_label(self, fiscal_year: int) -> str:
        """e.g. 'FY 2024-25'. A January-start year is labelled by its own year."""
        end_year = self.fiscal_year_end(fiscal_year).year
        if end_year == fiscal_year:
            return f"FY {fiscal_year}"
        return f"FY {fiscal_year}-{str(end_year)[-2:]}"

    def fiscal_year_option_label(self, fiscal_year: int) -> str:
        """Compact selector label, e.g. '2024/25'."""
        end_year = self.fiscal_year_end(fiscal_year).year
        if end_year == fiscal_year:
            return str(fiscal_year)
        return f"{fiscal_year}/{str(end_year)[-2:]}"

    def fiscal_year_choices(self, date_like: DateLike, span: int = FISCAL_YEAR_CHOICE_SPAN) -> List[int]:
        """`span` consecutive fiscal years with the current one in the middle."""
        current = self.fiscal_year_of(date_like)
        first = current - (span - 1) // 2
        return list(range(first, first + span))


DEFAULT_CALENDAR = FiscalCalendar()


def fiscal_year_of(date_like: DateLike) -> int:
    """Fiscal year label of a date (April-start calendar)."""
    return DEFAULT_CALENDAR.fiscal_year_of(date_like)


def quarter_of(date_like: DateLike) -> int:
    """Fiscal quarter 1-4 (Q1 = Apr-Jun)."""
    return DEFAULT_CALENDAR.quarter_of(date_like)


def half_of(date_like: DateLike) -> int:
    """Fiscal half 1-2 (H1 = Apr-Sep)."""
    return DEFAULT_CALENDAR.half_of(date_like)


def position_of(date_like: DateLike) -> FiscalPosition:
    return DEFAULT_CALENDAR.position_of(date_like)


def quarter_start(fiscal_year: int, quarter: int) -> date:
    return DEFAULT_CALENDAR.quarter_start(fiscal_year, quarter)


def quarter_end(fiscal_year: int, quarter: int) -> date:
    return DEFAULT_CALENDAR.quarter_end(fiscal_year, quarter)


def half_start(fiscal_year: int, half: int) -> date:
    return DEFAULT_CALENDAR.half_start(fiscal_year, half)


def half_end(fiscal_year: int, half: int) -> date:
    return DEFAULT_CALENDAR.half_end(fiscal_year, half)


def fiscal_year_start(fiscal_year: int) -> date:
    return DEFAULT_CALENDAR.fiscal_year_start(fiscal_year)


def fiscal_year_end(fiscal_year: int) -> date:
    return DEFAULT_CALENDAR.fiscal_year_end(fiscal_year)


def fiscal_year_label(fiscal_year: int) -> str:
    return DEFAULT_CALENDAR.fiscal_year_label(fiscal_year)


def fiscal_year_choices(date_like: DateLike, span: int = FISCAL_YEAR_CHOICE_SPAN) -> List[int]:
    return DEFAULT_CALENDAR.fiscal_year_choices(date_like, span)
