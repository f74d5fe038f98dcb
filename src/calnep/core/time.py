from __future__ import annotations

_AD_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def ymd_to_jdn(y: int, m: int, day: int) -> int:
    """Proleptic Gregorian (y, m, d) to Julian Day Number."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_ad_month(year: int, month: int) -> int:
    """Gregorian month length. ``month`` must already be in 1..12."""
    if month == 2 and is_leap_year(year):
        return 29
    return _AD_MONTH_DAYS[month - 1]


def elapsed_days(y0: int, m0: int, d0: int, y1: int, m1: int, d1: int) -> int:
    """Signed day count from the first Gregorian date to the second."""
    return ymd_to_jdn(y1, m1, d1) - ymd_to_jdn(y0, m0, d0)
