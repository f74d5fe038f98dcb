"""
calnep.engines.month
--------------------
Closed-form BS month metadata.

Calendar grids need the first and last weekday of many months at once, so
these helpers compute them from day offsets against the anchor instead of
walking. ``date_in_month`` resolves a single BS date the same way.

Week-of-year here is ``ceil((day_of_year + first_weekday_of_year - 1) / 7)``,
the row of the day in a Sunday-first grid of the whole year. It treats the
partial first week as week 1, the same convention the day walk follows.
"""

from __future__ import annotations

import logging
import math

from ..core.errors import RangeError
from ..core.table import MONTH_LENGTH_TABLE, MonthLengthTable
from ..core.types import CalendarDate, Era, MonthSummary, SimpleDate
from .anchor import ANCHOR_BS

log = logging.getLogger(__name__)


def _wrap7(x: int) -> int:
    x %= 7
    return 7 if x == 0 else x


def normalize_month(year: int, month: int, offset: int = 0) -> tuple[int, int]:
    """Apply a month offset to (year, month), carrying into the year."""
    idx = year * 12 + (month - 1) + offset
    y, m = divmod(idx, 12)
    if offset:
        log.debug("month offset %+d: %04d-%02d -> %04d-%02d", offset, year, month, y, m + 1)
    return y, m + 1


def day_offset(year: int, month: int, day: int, table: MonthLengthTable = MONTH_LENGTH_TABLE) -> int:
    """Days from BS 1970-01-01 to (year, month, day). The day is validated."""
    n = table.length_of(year, month)
    if not (1 <= day <= n):
        raise RangeError(f"Invalid day {day}. BS {year}-{month:02d} has {n} days.")
    return (
        table.days_between_years(ANCHOR_BS.year, year)
        + table.days_before_month(year, month)
        + (day - ANCHOR_BS.day)
    )


def from_day_offset(offset: int, table: MonthLengthTable = MONTH_LENGTH_TABLE) -> SimpleDate:
    """Inverse of ``day_offset``."""
    if offset < 0:
        raise RangeError("Out of range: date precedes BS 1970-01-01.")
    remaining = offset
    for year in table.years():
        ylen = table.year_length(year)
        if remaining < ylen:
            for month, n in enumerate(table.row(year), start=1):
                if remaining < n:
                    return SimpleDate(year, month, remaining + 1)
                remaining -= n
        remaining -= ylen
    raise RangeError(f"Out of range: date is past BS {table.bounds.bs_year_max}-12.")


def first_weekday_of(year: int, month: int, table: MonthLengthTable = MONTH_LENGTH_TABLE) -> int:
    return _wrap7(ANCHOR_BS.first_weekday + day_offset(year, month, 1, table))


# ---------------------------------------------------------
# Month summaries
# ---------------------------------------------------------

def month_summary(year: int, month: int, offset: int = 0, table: MonthLengthTable = MONTH_LENGTH_TABLE) -> MonthSummary:
    if not (1 <= month <= 12):
        raise RangeError(f"Invalid month {month}. Must be between 1 and 12.")
    y, m = normalize_month(year, month, offset)
    n = table.length_of(y, m)
    first = first_weekday_of(y, m, table)
    return MonthSummary(
        year=y,
        month=m,
        days_in_month=n,
        first_weekday=first,
        last_weekday=_wrap7(first + n - 1),
    )


def plus_months(summary: MonthSummary, n: int) -> MonthSummary:
    return month_summary(summary.year, summary.month, n)


def minus_months(summary: MonthSummary, n: int) -> MonthSummary:
    return month_summary(summary.year, summary.month, -n)


def total_days_in_month(year: int, month: int) -> int:
    return MONTH_LENGTH_TABLE.length_of(year, month)


# ---------------------------------------------------------
# Single dates
# ---------------------------------------------------------

def date_in_month(d: SimpleDate, table: MonthLengthTable = MONTH_LENGTH_TABLE) -> CalendarDate:
    """Resolve a BS date from its month summary without a day walk."""
    summary = month_summary(d.year, d.month, table=table)
    if not (1 <= d.day <= summary.days_in_month):
        raise RangeError(
            f"Invalid day {d.day}. BS {d.year}-{d.month:02d} has {summary.days_in_month} days."
        )
    first = summary.first_weekday
    day_of_year = table.days_before_month(d.year, d.month) + d.day
    year_first = first_weekday_of(d.year, 1, table)
    return CalendarDate(
        year=d.year,
        month=d.month,
        day=d.day,
        era=Era.BS,
        first_weekday=first,
        last_weekday=summary.last_weekday,
        days_in_month=summary.days_in_month,
        weekday_in_month=(d.day - 1) // 7 + 1,
        weekday=_wrap7(first + d.day - 1),
        day_of_year=day_of_year,
        week_of_month=((d.day - 1) + (first - 1)) // 7 + 1,
        week_of_year=math.ceil((day_of_year + year_first - 1) / 7),
    )


def add_days(year: int, month: int, day: int, delta: int, table: MonthLengthTable = MONTH_LENGTH_TABLE) -> CalendarDate:
    """Shift a BS date by ``delta`` days in either direction."""
    target = from_day_offset(day_offset(year, month, day, table) + delta, table)
    return date_in_month(target, table)


def bs_days_between(start: SimpleDate, end: SimpleDate, table: MonthLengthTable = MONTH_LENGTH_TABLE) -> int:
    """Signed number of days from ``start`` to ``end`` (both BS)."""
    return day_offset(end.year, end.month, end.day, table) - day_offset(start.year, start.month, start.day, table)
