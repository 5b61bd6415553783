from typing import Union
from datetime import datetime, date
import calendar

from dateutil.relativedelta import relativedelta
from pandas import Timestamp

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[date, datetime, Timestamp, str]


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, datetime or pandas Timestamp to a plain date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like, fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def date_to_str(date_like: DateLike) -> str:
    """
    Format a date-like into 'YYYY-MM-DD' string.
    """
    return to_date(date_like).strftime(DATE_FMT)


def add_months(dt: date, months: int) -> date:
    """Shift by whole months, clamping the day to the target month's length."""
    return dt + relativedelta(months=months)


def add_days(dt: date, days: int) -> date:
    return dt + relativedelta(days=days)


def days_in_month(dt: date) -> int:
    """Number of days (28-31) in the month containing dt."""
    return calendar.monthrange(dt.year, dt.month)[1]


def first_of_month(dt: date) -> date:
    return dt.replace(day=1)


def month_starts(start: date, count: int):
    """First-of-month dates for `count` consecutive months beginning at start's month."""
    anchor = first_of_month(start)
    return [add_months(anchor, i) for i in range(count)]
