"""calnep public API.

Bikram Sambat <-> Gregorian conversion. Most users only need the functions
re-exported here.
"""

from .api import (
    convert_to_bs,
    convert_to_ad,
    month_summary,
    plus_months,
    minus_months,
    next_month,
    prev_month,
    total_days_in_month,
    date_in_month,
    add_days,
    bs_days_between,
    ad_days_between,
    days_in_gregorian_month,
    compare_dates,
    today,
    from_date,
    to_numeral_system,
    to_nepali_digits,
    to_ascii_digits,
    month_name,
    weekday_name,
    ad_month_name,
    Language,
    NameFormat,
)
from .core.config import AD_YEAR_MAX, AD_YEAR_MIN, BS_YEAR_MAX, BS_YEAR_MIN, CalendarBounds
from .core.errors import CalnepError, RangeError, TableIntegrityError
from .core.types import CalendarDate, Era, MonthSummary, SimpleDate

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
    "CalendarDate",
    "MonthSummary",
    "SimpleDate",
    "Era",
    "CalendarBounds",
    "BS_YEAR_MIN",
    "BS_YEAR_MAX",
    "AD_YEAR_MIN",
    "AD_YEAR_MAX",
    "CalnepError",
    "RangeError",
    "TableIntegrityError",
]
