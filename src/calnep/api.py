from __future__ import annotations

from datetime import date
from typing import Optional, Union

from .core.time import days_in_ad_month, elapsed_days
from .core.errors import RangeError
from .core.types import CalendarDate, MonthSummary, SimpleDate
from .engines.converter import convert_to_ad, convert_to_bs
from .engines.month import (
    add_days,
    bs_days_between,
    date_in_month,
    minus_months,
    month_summary,
    plus_months,
    total_days_in_month,
)
from .locale.names import Language, NameFormat, ad_month_name, month_name, weekday_name
from .locale.numerals import to_ascii_digits, to_nepali_digits, to_numeral_system

__all__ = [
    "convert_to_bs",
    "convert_to_ad",
    "month_summary",
    "plus_months",
    "minus_months",
    "next_month",
    "prev_month",
    "total_days_in_month",
    "date_in_month",
    "add_days",
    "bs_days_between",
    "ad_days_between",
    "days_in_gregorian_month",
    "compare_dates",
    "today",
    "from_date",
    "to_numeral_system",
    "to_nepali_digits",
    "to_ascii_digits",
    "month_name",
    "weekday_name",
    "ad_month_name",
    "Language",
    "NameFormat",
]

DateLike = Union[CalendarDate, SimpleDate]


def days_in_gregorian_month(year: int, month: int) -> int:
    if not (1 <= month <= 12):
        raise RangeError(f"Invalid month {month}. Must be between 1 and 12.")
    return days_in_ad_month(year, month)


def ad_days_between(start: Union[SimpleDate, date], end: Union[SimpleDate, date]) -> int:
    """Signed number of days from ``start`` to ``end`` (both Gregorian)."""
    return elapsed_days(start.year, start.month, start.day, end.year, end.month, end.day)


def compare_dates(
    d: DateLike,
    year: Union[int, DateLike],
    month: Optional[int] = None,
    day: Optional[int] = None,
) -> int:
    """
    Order ``d`` against another date of the same calendar.

    The other date is either ``year, month, day`` or a single
    ``SimpleDate``/``CalendarDate``. Returns -1, 0 or 1.
    """
    if isinstance(year, (CalendarDate, SimpleDate)):
        other = (year.year, year.month, year.day)
    else:
        if month is None or day is None:
            raise TypeError("compare_dates() needs month and day with an integer year")
        other = (year, month, day)
    mine = (d.year, d.month, d.day)
    return (mine > other) - (mine < other)


def from_date(d: date) -> CalendarDate:
    """BS date of a Gregorian ``datetime.date``."""
    return convert_to_bs(d.year, d.month, d.day)


def today(on: Optional[date] = None) -> CalendarDate:
    """BS date of ``on``, defaulting to the local system date."""
    return from_date(on if on is not None else date.today())


def next_month(summary: MonthSummary) -> MonthSummary:
    return plus_months(summary, 1)


def prev_month(summary: MonthSummary) -> MonthSummary:
    return minus_months(summary, 1)
