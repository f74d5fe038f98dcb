"""
calnep.locale.names
-------------------
Month and weekday names in English and Nepali.

Each language carries three tables: BS month names, weekday names (Sunday
first) and Gregorian month names. Months have full and short forms; the
medium form of a month name is its full form. Weekdays have all three.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from ..core.errors import RangeError


class Language(Enum):
    ENGLISH = "en"
    NEPALI = "ne"


class NameFormat(Enum):
    FULL = "full"
    MEDIUM = "medium"
    SHORT = "short"


@dataclass(frozen=True)
class Name:
    short: str
    full: str
    medium: str = ""

    def get(self, fmt: NameFormat) -> str:
        if fmt is NameFormat.SHORT:
            return self.short
        if fmt is NameFormat.MEDIUM:
            return self.medium or self.full
        return self.full


@dataclass(frozen=True)
class NameTables:
    bs_months: Tuple[Name, ...]
    weekdays: Tuple[Name, ...]
    ad_months: Tuple[Name, ...]


_BS_MONTHS_NE = tuple(Name(s, f) for s, f in [
    ("बै", "बैशाख"), ("जे", "जेठ"), ("अ", "असार"), ("सा", "साउन"),
    ("भ", "भदौ"), ("अ", "असोज"), ("का", "कार्तिक"), ("मं", "मंसिर"),
    ("पु", "पौष"), ("मा", "माघ"), ("फा", "फाल्गुन"), ("चै", "चैत"),
])

_BS_MONTHS_EN = tuple(Name(s, f) for s, f in [
    ("Bai", "Baisakh"), ("Jes", "Jestha"), ("Asa", "Asar"), ("Shr", "Shrawn"),
    ("Bha", "Bhadra"), ("Aso", "Asoj"), ("Kar", "Kartik"), ("Man", "Mangsir"),
    ("Pou", "Poush"), ("Mag", "Magh"), ("Pha", "Falgun"), ("Chai", "Chaitra"),
])

_WEEKDAYS_NE = tuple(Name(s, f, m) for s, m, f in [
    ("आ", "आईत", "आईतबार"),
    ("सो", "सोम", "सोमबार"),
    ("मं", "मंगल", "मंगलबार"),
    ("बु", "बुध", "बुधबार"),
    ("बि", "बिहि", "बिहिबार"),
    ("शु", "शुक्र", "शुक्रबार"),
    ("श", "शनि", "शनिबार"),
])

_WEEKDAYS_EN = tuple(Name(s, f, m) for s, m, f in [
    ("S", "Sun", "Sunday"),
    ("M", "Mon", "Monday"),
    ("T", "Tue", "Tuesday"),
    ("W", "Wed", "Wednesday"),
    ("T", "Thu", "Thursday"),
    ("F", "Fri", "Friday"),
    ("S", "Sat", "Saturday"),
])

_AD_MONTHS_EN = tuple(Name(s, f) for s, f in [
    ("Jan", "January"), ("Feb", "February"), ("Mar", "March"), ("Apr", "April"),
    ("May", "May"), ("Jun", "June"), ("Jul", "July"), ("Aug", "August"),
    ("Sep", "September"), ("Oct", "October"), ("Nov", "November"), ("Dec", "December"),
])

_AD_MONTHS_NE = tuple(Name(s, f) for s, f in [
    ("जन", "जनवरी"), ("फेब्रु", "फेब्रुअरी"), ("मार्च", "मार्च"), ("अप्रि", "अप्रिल"),
    ("मे", "मे"), ("जुन", "जुन"), ("जुला.", "जुलाई"), ("अग", "अगस्ट"),
    ("सेप्ट", "सेप्टेम्बर"), ("अक्टो", "अक्टोबर"), ("नोभे", "नोभेम्बर"), ("डिसे", "डिसेम्बर"),
])

TABLES: Dict[Language, NameTables] = {
    Language.ENGLISH: NameTables(_BS_MONTHS_EN, _WEEKDAYS_EN, _AD_MONTHS_EN),
    Language.NEPALI: NameTables(_BS_MONTHS_NE, _WEEKDAYS_NE, _AD_MONTHS_NE),
}


def _pick(names: Tuple[Name, ...], index: int, what: str, fmt: NameFormat) -> str:
    if not (1 <= index <= len(names)):
        raise RangeError(f"Invalid {what} {index}. Must be between 1 and {len(names)}.")
    return names[index - 1].get(fmt)


def month_name(month: int, fmt: NameFormat = NameFormat.FULL, language: Language = Language.ENGLISH) -> str:
    """BS month name, ``month`` in 1..12 (1 = Baisakh)."""
    return _pick(TABLES[language].bs_months, month, "month", fmt)


def weekday_name(weekday: int, fmt: NameFormat = NameFormat.FULL, language: Language = Language.ENGLISH) -> str:
    """Weekday name, ``weekday`` in 1..7 (1 = Sunday)."""
    return _pick(TABLES[language].weekdays, weekday, "weekday", fmt)


def ad_month_name(month: int, fmt: NameFormat = NameFormat.FULL, language: Language = Language.ENGLISH) -> str:
    return _pick(TABLES[language].ad_months, month, "month", fmt)
