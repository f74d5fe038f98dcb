# tests/test_locale.py

import pytest

from calnep import RangeError
from calnep.locale import (
    Language,
    NameFormat,
    ad_month_name,
    month_name,
    to_ascii_digits,
    to_nepali_digits,
    to_numeral_system,
    weekday_name,
)


def test_nepali_digits():
    assert to_numeral_system("2024", Language.NEPALI) == "२०२४"
    assert to_nepali_digits("0123456789") == "०१२३४५६७८९"
    assert to_ascii_digits("२०२४") == "2024"


def test_non_digits_pass_through():
    assert to_numeral_system("BS 2081-05-24", Language.NEPALI) == "BS २०८१-०५-२४"
    assert to_ascii_digits("मिति २०८१/५/२४") == "मिति 2081/5/24"
    assert to_ascii_digits("plain") == "plain"


def test_english_is_identity():
    assert to_numeral_system("2024-01-01", Language.ENGLISH) == "2024-01-01"
    assert to_numeral_system("२०२४", Language.ENGLISH) == "२०२४"


def test_system_by_name():
    assert to_numeral_system("12", "ne") == "१२"
    assert to_numeral_system("12", "nepali") == "१२"
    assert to_numeral_system("12", "en") == "12"
    with pytest.raises(RangeError):
        to_numeral_system("12", "klingon")


def test_system_of_wrong_type():
    with pytest.raises(RangeError):
        to_numeral_system("12", 5)  # type: ignore[arg-type]
    with pytest.raises(RangeError):
        to_numeral_system("12", None)  # type: ignore[arg-type]


def test_month_names():
    assert month_name(1) == "Baisakh"
    assert month_name(12, NameFormat.SHORT) == "Chai"
    assert month_name(4, NameFormat.MEDIUM) == "Shrawn"
    assert month_name(1, NameFormat.FULL, Language.NEPALI) == "बैशाख"
    assert month_name(3, NameFormat.SHORT, Language.NEPALI) == "अ"


def test_weekday_names():
    assert weekday_name(1) == "Sunday"
    assert weekday_name(7, NameFormat.MEDIUM) == "Sat"
    assert weekday_name(5, NameFormat.SHORT) == "T"
    assert weekday_name(2, NameFormat.SHORT, Language.NEPALI) == "सो"
    assert weekday_name(6, NameFormat.FULL, Language.NEPALI) == "शुक्रबार"


def test_ad_month_names():
    assert ad_month_name(9) == "September"
    assert ad_month_name(9, NameFormat.SHORT) == "Sep"
    assert ad_month_name(7, NameFormat.FULL, Language.NEPALI) == "जुलाई"


@pytest.mark.parametrize("fn,index", [(month_name, 0), (month_name, 13), (weekday_name, 0), (weekday_name, 8), (ad_month_name, 13)])
def test_invalid_name_index(fn, index):
    with pytest.raises(RangeError):
        fn(index)
