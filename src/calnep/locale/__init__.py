"""Name tables and numeral substitution."""

from .names import Language, NameFormat, ad_month_name, month_name, weekday_name
from .numerals import to_ascii_digits, to_nepali_digits, to_numeral_system

__all__ = [
    "Language",
    "NameFormat",
    "month_name",
    "weekday_name",
    "ad_month_name",
    "to_numeral_system",
    "to_nepali_digits",
    "to_ascii_digits",
]
