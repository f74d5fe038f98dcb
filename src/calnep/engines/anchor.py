"""
calnep.engines.anchor
---------------------
The reference day both calendars are counted from.

BS 1970-01-01 (Baisakh 1) and AD 1913-04-13 are the same day, a Sunday.
Both anchors carry their full week metadata so a day walk started from them
produces correct weekday and week counters without further lookups.
"""

from __future__ import annotations

from ..core.time import ymd_to_jdn
from ..core.types import CalendarDate, Era

ANCHOR_BS = CalendarDate(
    year=1970,
    month=1,
    day=1,
    era=Era.BS,
    first_weekday=1,  # Sunday
    last_weekday=3,   # Tuesday
    days_in_month=31,
    weekday_in_month=1,
    weekday=1,
    day_of_year=1,
    week_of_month=1,
    week_of_year=1,
)

ANCHOR_AD = CalendarDate(
    year=1913,
    month=4,
    day=13,
    era=Era.AD,
    first_weekday=3,  # Tuesday
    last_weekday=4,   # Wednesday
    days_in_month=30,
    weekday_in_month=2,
    weekday=1,
    day_of_year=103,
    week_of_month=3,
    week_of_year=16,
)

ANCHOR_JDN = ymd_to_jdn(ANCHOR_AD.year, ANCHOR_AD.month, ANCHOR_AD.day)
