from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import IntEnum


class Era(IntEnum):
    AD = 1
    BS = 2


@dataclass(frozen=True)
class SimpleDate:
    """Bare (year, month, day) triple with no derived metadata."""
    year: int
    month: int
    day: int = 1

    def index_in(self, first_year: int) -> int:
        """Linear month position counted from January/Baisakh of ``first_year``."""
        return (self.year - first_year) * 12 + self.month - 1


@dataclass(frozen=True)
class MonthSummary:
    """Projection of a BS month used for laying out a calendar grid."""
    year: int
    month: int
    days_in_month: int
    first_weekday: int
    last_weekday: int

    @property
    def leading_blanks(self) -> int:
        """Empty grid cells before day 1 in a Sunday-first week."""
        return self.first_weekday - 1

    def index_in(self, first_year: int) -> int:
        return (self.year - first_year) * 12 + self.month - 1


@dataclass(frozen=True)
class CalendarDate:
    """
    A fully resolved date in either calendar.

    Weekdays are 1..7 with 1 = Sunday. ``weekday_in_month`` is the occurrence
    of this weekday within the month (e.g. 3 for the third Friday).
    """
    year: int
    month: int
    day: int
    era: Era
    first_weekday: int
    last_weekday: int
    days_in_month: int
    weekday_in_month: int
    weekday: int
    day_of_year: int
    week_of_month: int
    week_of_year: int

    def to_simple(self) -> SimpleDate:
        return SimpleDate(self.year, self.month, self.day)

    def to_month_summary(self) -> MonthSummary:
        return MonthSummary(
            year=self.year,
            month=self.month,
            days_in_month=self.days_in_month,
            first_weekday=self.first_weekday,
            last_weekday=self.last_weekday,
        )

    def as_date(self) -> date:
        if self.era is not Era.AD:
            raise TypeError("only AD dates map onto datetime.date")
        return date(self.year, self.month, self.day)

    def ymd(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)
