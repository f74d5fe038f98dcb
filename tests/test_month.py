# tests/test_month.py

import random

import pytest

import calnep
from calnep import CalendarDate, Era, MonthSummary, RangeError, SimpleDate


def test_month_summary_known():
    assert calnep.month_summary(2079, 4) == MonthSummary(2079, 4, 31, 1, 3)
    assert calnep.month_summary(2082, 3) == MonthSummary(2082, 3, 31, 1, 3)
    assert calnep.month_summary(2082, 4).leading_blanks == 3


@pytest.mark.parametrize(
    "start,offset,expected",
    [
        ((2082, 3), 1, MonthSummary(2082, 4, 32, 4, 7)),
        ((2079, 4), 24, MonthSummary(2081, 4, 32, 3, 6)),
        ((2082, 4), -4, MonthSummary(2081, 12, 31, 6, 1)),
    ],
)
def test_month_summary_offsets(start, offset, expected):
    assert calnep.month_summary(*start, offset) == expected


def test_plus_minus_months():
    s = calnep.month_summary(2082, 3)
    assert calnep.plus_months(s, 1) == MonthSummary(2082, 4, 32, 4, 7)
    assert calnep.minus_months(calnep.month_summary(2082, 4), 4) == MonthSummary(2081, 12, 31, 6, 1)
    assert calnep.next_month(s) == calnep.plus_months(s, 1)
    assert calnep.prev_month(calnep.next_month(s)) == s
    assert calnep.plus_months(s, 12).year == 2083


def test_summary_agrees_with_walk():
    random.seed(17)
    for _ in range(30):
        y = random.randint(1970, 2100)
        m = random.randint(1, 12)
        s = calnep.month_summary(y, m)
        first = calnep.convert_to_ad(y, m, 1)
        last = calnep.convert_to_ad(y, m, s.days_in_month)
        assert s.first_weekday == first.weekday
        assert s.last_weekday == last.weekday


def test_summary_out_of_range():
    with pytest.raises(RangeError):
        calnep.month_summary(2100, 12, 1)
    with pytest.raises(RangeError):
        calnep.month_summary(1970, 1, -1)
    with pytest.raises(RangeError):
        calnep.month_summary(2079, 13)


def test_index_in():
    s = calnep.month_summary(1971, 2)
    assert s.index_in(1970) == 13
    assert SimpleDate(1970, 1).index_in(1970) == 0


def test_date_in_month_known():
    assert calnep.date_in_month(SimpleDate(2079, 4, 1)) == CalendarDate(
        2079, 4, 1, Era.BS,
        first_weekday=1, last_weekday=3, days_in_month=31, weekday_in_month=1,
        weekday=1, day_of_year=95, week_of_month=1, week_of_year=15,
    )
    assert calnep.date_in_month(SimpleDate(2082, 4, 1)) == CalendarDate(
        2082, 4, 1, Era.BS,
        first_weekday=4, last_weekday=7, days_in_month=32, weekday_in_month=1,
        weekday=4, day_of_year=94, week_of_month=1, week_of_year=14,
    )
    assert calnep.date_in_month(SimpleDate(2054, 1, 31)) == calnep.convert_to_bs(1997, 5, 13)


def test_date_in_month_agrees_with_walk():
    random.seed(23)
    for _ in range(40):
        y = random.randint(1970, 2099)
        m = random.randint(1, 12)
        d = random.randint(1, calnep.total_days_in_month(y, m))
        ad = calnep.convert_to_ad(y, m, d)
        if ad.year > calnep.AD_YEAR_MAX:
            continue
        walked = calnep.convert_to_bs(ad.year, ad.month, ad.day)
        closed = calnep.date_in_month(SimpleDate(y, m, d))
        assert closed.ymd() == walked.ymd()
        assert closed.weekday == walked.weekday
        assert closed.first_weekday == walked.first_weekday
        assert closed.last_weekday == walked.last_weekday
        assert closed.day_of_year == walked.day_of_year
        assert closed.week_of_month == walked.week_of_month
        assert closed.weekday_in_month == walked.weekday_in_month
        assert closed.week_of_year == walked.week_of_year
        assert closed == walked


def test_date_in_month_rejects_bad_day():
    with pytest.raises(RangeError):
        calnep.date_in_month(SimpleDate(2082, 1, 31))
    with pytest.raises(RangeError):
        calnep.date_in_month(SimpleDate(2082, 1, 0))


def test_total_days_in_month():
    assert calnep.total_days_in_month(2082, 4) == 32
    assert calnep.total_days_in_month(2100, 11) == 30
    with pytest.raises(RangeError):
        calnep.total_days_in_month(2101, 1)


def test_add_days():
    assert calnep.add_days(2082, 4, 20, -19) == calnep.date_in_month(SimpleDate(2082, 4, 1))
    assert calnep.add_days(2081, 6, 9, -12) == calnep.date_in_month(SimpleDate(2081, 5, 28))
    assert calnep.add_days(2083, 12, 25, 7) == calnep.date_in_month(SimpleDate(2084, 1, 2))
    assert calnep.add_days(2082, 3, 1, 0).ymd() == (2082, 3, 1)


def test_add_days_matches_gregorian_shift():
    random.seed(31)
    for _ in range(20):
        delta = random.randint(-400, 400)
        shifted = calnep.add_days(2070, 6, 15, delta)
        base = calnep.convert_to_ad(2070, 6, 15)
        assert calnep.ad_days_between(base, calnep.convert_to_ad(*shifted.ymd())) == delta


def test_add_days_leaving_table():
    with pytest.raises(RangeError):
        calnep.add_days(2100, 12, 31, 1)
    with pytest.raises(RangeError):
        calnep.add_days(1970, 1, 1, -1)


def test_days_between():
    assert calnep.bs_days_between(SimpleDate(1980, 12, 31), SimpleDate(2081, 5, 24)) == 36675
    assert calnep.bs_days_between(SimpleDate(2081, 5, 24), SimpleDate(1980, 12, 31)) == -36675
    assert calnep.bs_days_between(SimpleDate(2054, 12, 30), SimpleDate(2081, 6, 5)) == 9659
    assert calnep.ad_days_between(SimpleDate(1998, 4, 12), SimpleDate(2024, 9, 21)) == 9659
    assert calnep.ad_days_between(SimpleDate(2016, 2, 16), SimpleDate(2021, 3, 27)) == 1866
    assert calnep.ad_days_between(SimpleDate(1980, 12, 31), SimpleDate(2024, 3, 8)) == 15773
    assert calnep.ad_days_between(SimpleDate(2024, 3, 8), SimpleDate(1980, 12, 31)) == -15773


def test_bs_and_ad_day_counts_agree():
    a = calnep.convert_to_ad(2054, 12, 30)
    b = calnep.convert_to_ad(2081, 6, 5)
    assert (a.year, a.month, a.day) == (1998, 4, 12)
    assert (b.year, b.month, b.day) == (2024, 9, 21)
