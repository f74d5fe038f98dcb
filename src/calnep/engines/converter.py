"""
calnep.engines.converter
------------------------
Day-counting conversion between Bikram Sambat and Gregorian dates.

BS month lengths are not formulaic, so the only reliable way across the
boundary is to count elapsed days from the shared anchor and replay them one
day at a time in the destination calendar. The replay also yields weekday,
week-of-month, week-of-year and day-of-year as a side effect.
"""

from __future__ import annotations

import logging
from typing import Callable

from ..core.config import DEFAULT_BOUNDS, CalendarBounds
from ..core.errors import RangeError
from ..core.table import MONTH_LENGTH_TABLE, MonthLengthTable
from ..core.time import days_in_ad_month, ymd_to_jdn
from ..core.types import CalendarDate, Era
from .anchor import ANCHOR_AD, ANCHOR_BS, ANCHOR_JDN
from .month import day_offset

log = logging.getLogger(__name__)

MonthLengthFn = Callable[[int, int], int]


def _normalize_weekday(x: int) -> int:
    """Map a mod-7 result onto 1..7 (0 -> 7)."""
    x %= 7
    return 7 if x == 0 else x


def walk(start: CalendarDate, steps: int, month_length: MonthLengthFn, era: Era) -> CalendarDate:
    """
    Advance ``start`` by ``steps`` days, reading month lengths of the
    destination calendar from ``month_length(year, month)``.

    The rolling state is the tuple (year, month, day, weekday, day_of_year,
    week_of_year, week_of_month, first_weekday, last_weekday,
    days_in_month). A weekday wrap (7 -> 1) bumps both week counters; a
    month rollover resets day and week_of_month, and a year rollover also
    resets day_of_year and week_of_year.
    """
    if steps < 0:
        raise ValueError("steps must be non-negative")
    if steps == 0:
        return start

    year, month, day = start.year, start.month, start.day
    weekday = start.weekday
    day_of_year = start.day_of_year
    week_of_year = start.week_of_year
    week_of_month = start.week_of_month
    first_weekday = start.first_weekday
    last_weekday = start.last_weekday
    days_in_month = month_length(year, month)

    for _ in range(steps):
        day += 1
        day_of_year += 1
        weekday += 1

        if weekday > 7:
            weekday = 1
            week_of_year += 1
            week_of_month += 1

        if day > days_in_month:
            month += 1
            day = 1

            if month > 12:
                year += 1
                month = 1
                day_of_year = 1
                week_of_year = 1

            week_of_month = 1
            days_in_month = month_length(year, month)
            first_weekday = weekday

        last_weekday = _normalize_weekday(weekday + days_in_month - day)

    return CalendarDate(
        year=year,
        month=month,
        day=day,
        era=era,
        first_weekday=first_weekday,
        last_weekday=last_weekday,
        days_in_month=days_in_month,
        weekday_in_month=(day - 1) // 7 + 1,
        weekday=weekday,
        day_of_year=day_of_year,
        week_of_month=week_of_month,
        week_of_year=week_of_year,
    )


class DayCountingConverter:
    """
    Converts between BS and AD by walking from the anchor pair.

    Instances hold only read-only references, so one converter can be shared
    freely between threads.
    """

    def __init__(self, table: MonthLengthTable = MONTH_LENGTH_TABLE, bounds: CalendarBounds = DEFAULT_BOUNDS):
        self.table = table
        self.bounds = bounds
        # Last BS day covered by the table, as a day offset from the anchor.
        self._max_offset = table.days_between_years(ANCHOR_BS.year, bounds.bs_year_max + 1) - 1

    # ---------------------------------------------------------
    # Validation
    # ---------------------------------------------------------

    def check_ad(self, year: int, month: int, day: int) -> None:
        b = self.bounds
        if not (b.ad_year_min <= year <= b.ad_year_max):
            raise RangeError(
                f"Out of range: AD year {year} is outside {b.ad_year_min}..{b.ad_year_max}."
            )
        if not (1 <= month <= 12):
            raise RangeError(f"Invalid month {month}. Must be between 1 and 12.")
        if not (1 <= day <= 31) or day > days_in_ad_month(year, month):
            raise RangeError(f"Invalid day {day} for AD {year}-{month:02d}.")

    def check_bs(self, year: int, month: int, day: int) -> None:
        b = self.bounds
        if not (b.bs_year_min <= year <= b.bs_year_max):
            raise RangeError(
                f"Out of range: BS year {year} is outside {b.bs_year_min}..{b.bs_year_max}."
            )
        if not (1 <= month <= 12):
            raise RangeError(f"Invalid month {month}. Must be between 1 and 12.")
        n = self.table.length_of(year, month)
        if not (1 <= day <= n):
            raise RangeError(f"Invalid day {day}. BS {year}-{month:02d} has {n} days.")

    # ---------------------------------------------------------
    # AD -> BS
    # ---------------------------------------------------------

    def ad_offset(self, year: int, month: int, day: int) -> int:
        """Days from the AD anchor to a validated AD date."""
        self.check_ad(year, month, day)
        total_days = ymd_to_jdn(year, month, day) - ANCHOR_JDN
        if total_days < 0:
            raise RangeError(
                f"Out of range: AD {year}-{month:02d}-{day:02d} precedes the first supported day "
                f"{ANCHOR_AD.year}-{ANCHOR_AD.month:02d}-{ANCHOR_AD.day:02d}."
            )
        if total_days > self._max_offset:
            raise RangeError(f"Out of range: AD {year}-{month:02d}-{day:02d} is past the last supported BS day.")
        return total_days

    def to_bs(self, year: int, month: int, day: int) -> CalendarDate:
        total_days = self.ad_offset(year, month, day)
        if total_days == 0:
            return ANCHOR_BS
        log.debug("AD %04d-%02d-%02d: walking %d days from BS anchor", year, month, day, total_days)
        return walk(ANCHOR_BS, total_days, self.table.length_of, Era.BS)

    # ---------------------------------------------------------
    # BS -> AD
    # ---------------------------------------------------------

    def bs_offset(self, year: int, month: int, day: int) -> int:
        """Days from the BS anchor to a validated BS date."""
        self.check_bs(year, month, day)
        return day_offset(year, month, day, self.table)

    def to_ad(self, year: int, month: int, day: int) -> CalendarDate:
        total_days = self.bs_offset(year, month, day)
        if total_days == 0:
            return ANCHOR_AD
        log.debug("BS %04d-%02d-%02d: walking %d days from AD anchor", year, month, day, total_days)
        return walk(ANCHOR_AD, total_days, days_in_ad_month, Era.AD)


_default = DayCountingConverter()


def convert_to_bs(year: int, month: int, day: int) -> CalendarDate:
    return _default.to_bs(year, month, day)


def convert_to_ad(year: int, month: int, day: int) -> CalendarDate:
    return _default.to_ad(year, month, day)
