import pytest
from datetime import date, datetime

from persian_datetime import calendar_utils
from persian_datetime.calendar_utils import (
    MIN_VALUE,
    day_of_year,
    days_in_month,
    days_in_year,
    is_leap_year,
    nowruz,
    shift_months,
    to_datetime,
    to_gregorian,
    to_persian_fields,
)
from persian_datetime.exceptions import InvalidDateError

# Format: (test_id, gregorian_date, expected_persian_fields)
CONVERSION_CASES = [
    ("nowruz_1400", date(2021, 3, 21), (1400, 1, 1)),
    ("last_day_of_leap_1399", date(2021, 3, 20), (1399, 12, 30)),
    ("unix_epoch", date(1970, 1, 1), (1348, 10, 11)),
    ("revolution_day", date(1979, 2, 11), (1357, 11, 22)),
    ("gregorian_new_year_2024", date(2024, 1, 1), (1402, 10, 11)),
    ("end_of_tir_1403", date(2024, 7, 20), (1403, 4, 30)),
    ("last_day_of_leap_1403", date(2025, 3, 20), (1403, 12, 30)),
    ("nowruz_1404", date(2025, 3, 21), (1404, 1, 1)),
    ("first_day_of_mehr_1402", date(2023, 9, 23), (1402, 7, 1)),
]


@pytest.mark.parametrize("test_id, gregorian, expected", CONVERSION_CASES)
def test_to_persian_fields(test_id, gregorian, expected):
    assert to_persian_fields(gregorian) == expected, f"Test ID '{test_id}' failed"


@pytest.mark.parametrize("test_id, gregorian, expected", CONVERSION_CASES)
def test_to_gregorian(test_id, gregorian, expected):
    assert to_gregorian(*expected) == gregorian, f"Test ID '{test_id}' failed"


def test_to_persian_fields_accepts_datetime():
    assert to_persian_fields(datetime(2024, 7, 20, 23, 59, 59)) == (1403, 4, 30)


@pytest.mark.parametrize("year, expected", [
    (1395, True),
    (1399, True),
    (1400, False),
    (1402, False),
    (1403, True),
    (1404, False),
    (1408, True),
])
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected


def test_leap_rule_matches_month_table_and_year_length():
    for year in range(1300, 1500):
        leap = is_leap_year(year)
        assert leap == (days_in_month(year, 12) == 30), f"year {year}"
        assert days_in_year(year) == 365 + (1 if leap else 0), f"year {year}"
        assert (nowruz(year + 1) - nowruz(year)).days == days_in_year(year), f"year {year}"


@pytest.mark.parametrize("month, expected", [
    (1, 31), (6, 31), (7, 30), (11, 30), (12, 29),
])
def test_days_in_month_common_year(month, expected):
    assert days_in_month(1402, month) == expected


def test_days_in_month_esfand_leap_year():
    assert days_in_month(1403, 12) == 30


@pytest.mark.parametrize("year, month", [(1400, 0), (1400, 13), (0, 1), (calendar_utils.MAX_YEAR + 1, 1)])
def test_days_in_month_rejects_out_of_range(year, month):
    with pytest.raises(InvalidDateError):
        days_in_month(year, month)


def test_is_leap_year_rejects_year_zero():
    with pytest.raises(InvalidDateError):
        is_leap_year(0)


@pytest.mark.parametrize("gregorian, expected", [
    (date(2021, 3, 21), 1),
    (date(2024, 7, 20), 123),
    (date(2023, 9, 23), 187),
    (date(2021, 3, 20), 366),
    (date(2024, 3, 19), 365),
])
def test_day_of_year(gregorian, expected):
    assert day_of_year(gregorian) == expected


def test_every_day_of_a_leap_year_reads_back():
    start = nowruz(1403)
    for offset in range(days_in_year(1403)):
        year, month, day = to_persian_fields(date.fromordinal(start.toordinal() + offset))
        assert year == 1403
        assert 1 <= day <= days_in_month(year, month)
        assert day_of_year(to_gregorian(year, month, day)) == offset + 1


@pytest.mark.parametrize("fields", [
    (1400, 12, 30),
    (1399, 12, 31),
    (1400, 7, 31),
    (1400, 1, 0),
    (1400, 1, 32),
    (1400, 13, 1),
])
def test_to_gregorian_rejects_invalid_days(fields):
    with pytest.raises(InvalidDateError):
        to_gregorian(*fields)


@pytest.mark.parametrize("field, kwargs", [
    ("hour", {"hour": 24}),
    ("minute", {"minute": 60}),
    ("second", {"second": -1}),
    ("millisecond", {"millisecond": 1000}),
    ("microsecond", {"microsecond": 1000}),
])
def test_to_datetime_rejects_invalid_time(field, kwargs):
    with pytest.raises(InvalidDateError, match=field):
        to_datetime(1400, 1, 1, **kwargs)


def test_to_datetime_combines_time_fields():
    assert to_datetime(1400, 1, 1, 13, 45, 30, 250, 125) == datetime(2021, 3, 21, 13, 45, 30, 250125)


def test_min_value_is_first_day_of_year_one():
    assert to_persian_fields(MIN_VALUE) == (1, 1, 1)
    assert MIN_VALUE.year == 622 and MIN_VALUE.month == 3


# Format: (test_id, start, months, expected)
SHIFT_CASES = [
    ("plain_forward", (1400, 11, 15), 3, (1401, 2, 15)),
    ("plain_backward", (1401, 2, 15), -3, (1400, 11, 15)),
    ("clamp_31_into_30_day_month", (1400, 6, 31), 1, (1400, 7, 30)),
    ("clamp_into_common_esfand", (1399, 12, 30), 12, (1400, 12, 29)),
    ("backward_into_leap_esfand", (1400, 1, 31), -1, (1399, 12, 30)),
    ("zero_months", (1400, 5, 5), 0, (1400, 5, 5)),
]


@pytest.mark.parametrize("test_id, start, months, expected", SHIFT_CASES)
def test_shift_months(test_id, start, months, expected):
    assert shift_months(*start, months) == expected, f"Test ID '{test_id}' failed"
