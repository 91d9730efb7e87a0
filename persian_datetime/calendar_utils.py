"""
Solar Hijri (Persian) calendar conversion.

The only external calendar fact used is the Gregorian date of each Persian
new year (1 Farvardin), taken from ``jdatetime``. Month and day fields are
then counted from that anchor with the fixed Persian month lengths, so the
leap rule, the month table and both conversion directions always agree with
each other.
"""
import datetime
import functools
import logging
from typing import Tuple

import jdatetime

from persian_datetime.exceptions import InvalidDateError

logger = logging.getLogger(__name__)

MIN_YEAR = jdatetime.MINYEAR
MAX_YEAR = jdatetime.MAXYEAR
MONTHS_PER_YEAR = 12

# Esfand gains a 30th day in leap years
MONTH_LENGTHS = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29)
_DAYS_BEFORE_MONTH = tuple(sum(MONTH_LENGTHS[:i]) for i in range(MONTHS_PER_YEAR))
_FIRST_HALF_DAYS = 6 * 31


def _check_year(year: int) -> None:
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidDateError(f"year {year} is out of range [{MIN_YEAR}, {MAX_YEAR}]")


def _check_month(month: int) -> None:
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise InvalidDateError(f"month must be in 1..12, not {month}")


@functools.lru_cache(maxsize=1024)
def nowruz(year: int) -> datetime.date:
    """Gregorian date of 1 Farvardin of the given Persian year."""
    _check_year(year)
    return jdatetime.date(year, 1, 1).togregorian()


def is_leap_year(year: int) -> bool:
    """True when Esfand of ``year`` has 30 days."""
    _check_year(year)
    if year == MAX_YEAR:
        return jdatetime.date(year, 1, 1).isleap()
    return (nowruz(year + 1) - nowruz(year)).days == 366


def days_in_month(year: int, month: int) -> int:
    _check_year(year)
    _check_month(month)
    if month == MONTHS_PER_YEAR and is_leap_year(year):
        return 30
    return MONTH_LENGTHS[month - 1]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def _year_end(year: int) -> datetime.date:
    # Exclusive; avoids asking for nowruz(MAX_YEAR + 1)
    return nowruz(year) + datetime.timedelta(days=days_in_year(year))


MIN_VALUE = datetime.datetime.combine(nowruz(MIN_YEAR), datetime.time.min)
MAX_VALUE = datetime.datetime.combine(_year_end(MAX_YEAR), datetime.time.min) - datetime.timedelta(microseconds=1)


def _month_and_day(day_of_year: int) -> Tuple[int, int]:
    offset = day_of_year - 1
    if offset < _FIRST_HALF_DAYS:
        return offset // 31 + 1, offset % 31 + 1
    offset -= _FIRST_HALF_DAYS
    return offset // 30 + 7, offset % 30 + 1


def to_persian_date(value) -> Tuple[int, int, int, int]:
    """Return ``(year, month, day, day_of_year)`` for a Gregorian date or datetime."""
    if isinstance(value, datetime.datetime):
        value = value.date()

    # The Persian year starts in March, so the estimate is off by at most one
    year = min(max(value.year - 621, MIN_YEAR), MAX_YEAR)
    while year > MIN_YEAR and value < nowruz(year):
        year -= 1
    while year < MAX_YEAR and value >= nowruz(year + 1):
        year += 1

    start = nowruz(year)
    if not start <= value < _year_end(year):
        raise InvalidDateError(f"{value.isoformat()} is outside the supported Persian calendar range")

    day_of_year = (value - start).days + 1
    month, day = _month_and_day(day_of_year)
    return year, month, day, day_of_year


def to_persian_fields(value) -> Tuple[int, int, int]:
    """Return the Persian ``(year, month, day)`` of a Gregorian date or datetime."""
    year, month, day, _ = to_persian_date(value)
    return year, month, day


def day_of_year(value) -> int:
    return to_persian_date(value)[3]


def validate(year: int, month: int, day: int, hour: int = 0, minute: int = 0,
             second: int = 0, millisecond: int = 0, microsecond: int = 0) -> None:
    """Raise InvalidDateError unless every field is inside its calendar range."""
    _check_year(year)
    _check_month(month)
    limit = days_in_month(year, month)
    if not 1 <= day <= limit:
        raise InvalidDateError(f"day must be in 1..{limit} for {year}/{month}, not {day}")
    for name, field, upper in (
        ("hour", hour, 23),
        ("minute", minute, 59),
        ("second", second, 59),
        ("millisecond", millisecond, 999),
        ("microsecond", microsecond, 999),
    ):
        if not 0 <= field <= upper:
            raise InvalidDateError(f"{name} must be in 0..{upper}, not {field}")


def to_gregorian(year: int, month: int, day: int) -> datetime.date:
    """Gregorian date of a Persian ``(year, month, day)``."""
    validate(year, month, day)
    return nowruz(year) + datetime.timedelta(days=_DAYS_BEFORE_MONTH[month - 1] + day - 1)


def to_datetime(year: int, month: int, day: int, hour: int = 0, minute: int = 0,
                second: int = 0, millisecond: int = 0, microsecond: int = 0) -> datetime.datetime:
    """Naive Gregorian datetime for Persian date and time-of-day fields."""
    validate(year, month, day, hour, minute, second, millisecond, microsecond)
    time_of_day = datetime.time(hour, minute, second, millisecond * 1000 + microsecond)
    return datetime.datetime.combine(to_gregorian(year, month, day), time_of_day)


def shift_months(year: int, month: int, day: int, months: int) -> Tuple[int, int, int]:
    """Move ``(year, month, day)`` by whole Persian months.

    The day is clamped to the length of the target month, so 31 Shahrivar plus
    one month is 30 Mehr. The returned year is not range checked.
    """
    index = year * MONTHS_PER_YEAR + (month - 1) + months
    new_year, new_month = divmod(index, MONTHS_PER_YEAR)
    new_month += 1
    if MIN_YEAR <= new_year <= MAX_YEAR:
        day = min(day, days_in_month(new_year, new_month))
    else:
        logger.debug(f"Month shift left the supported range: {year}/{month} {months:+d} months")
    return new_year, new_month, day
