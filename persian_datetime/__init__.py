"""Persian (solar Hijri) calendar date/time value type."""
from persian_datetime.calendar_utils import (
    MAX_VALUE,
    MIN_VALUE,
    day_of_year,
    days_in_month,
    days_in_year,
    is_leap_year,
)
from persian_datetime.exceptions import DateFormatError, InvalidDateError, PersianDateTimeError
from persian_datetime.parsing import parse, try_parse
from persian_datetime.persian_utils import PersianDayOfWeek, PersianMonth
from persian_datetime.value import PersianDateTime

__version__ = "1.0.0"

__all__ = [
    "MAX_VALUE",
    "MIN_VALUE",
    "DateFormatError",
    "InvalidDateError",
    "PersianDateTime",
    "PersianDateTimeError",
    "PersianDayOfWeek",
    "PersianMonth",
    "day_of_year",
    "days_in_month",
    "days_in_year",
    "is_leap_year",
    "parse",
    "try_parse",
]
