import datetime
import logging
from typing import Optional, Union

import jdatetime
import pytz

from persian_datetime import calendar_utils, formatting
from persian_datetime.calendar_utils import MAX_VALUE, MAX_YEAR, MIN_VALUE, MIN_YEAR
from persian_datetime.persian_utils import PersianDayOfWeek, PersianMonth, get_time_period

logger = logging.getLogger(__name__)

# Ticks are 100ns intervals since 0001-01-01 00:00; datetimes only hold whole microseconds
TICKS_PER_MICROSECOND = 10
TICK_EPOCH = datetime.datetime.min
_MICROSECOND = datetime.timedelta(microseconds=1)
_MAX_MICROSECONDS = (MAX_VALUE - TICK_EPOCH) // _MICROSECOND


def get_local_now() -> datetime.datetime:
    """Returns current local datetime (naive)."""
    return datetime.datetime.now()


def get_utc_now() -> datetime.datetime:
    """Returns current UTC datetime."""
    return datetime.datetime.now(pytz.utc)


class PersianDateTime:
    """An instant with its Persian (solar Hijri) calendar fields.

    Wraps a naive ``datetime.datetime``; the Persian year, month and day are
    derived once when the value is built. Values are immutable, compare and
    hash by their instant, and every arithmetic method returns a new value.

    >>> PersianDateTime(1400, 1, 1).to_string("yyyy/MM/dd")
    '۱۴۰۰/۰۱/۰۱'
    """

    __slots__ = ("_absolute", "_year", "_month", "_day", "_day_of_year")

    def __init__(self, year: int, month: int, day: int, hour: int = 0, minute: int = 0,
                 second: int = 0, millisecond: int = 0, microsecond: int = 0):
        absolute = calendar_utils.to_datetime(year, month, day, hour, minute, second, millisecond, microsecond)
        self._derive(_clamp(absolute))

    def _derive(self, absolute: datetime.datetime) -> None:
        year, month, day, day_of_year = calendar_utils.to_persian_date(absolute)
        object.__setattr__(self, "_absolute", absolute)
        object.__setattr__(self, "_year", year)
        object.__setattr__(self, "_month", month)
        object.__setattr__(self, "_day", day)
        object.__setattr__(self, "_day_of_year", day_of_year)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self).from_ticks, (self.ticks,))

    # --- Construction -------------------------------------------------

    @classmethod
    def from_datetime(cls, value: Union[datetime.datetime, datetime.date]) -> "PersianDateTime":
        """Wrap a Gregorian datetime (or date, taken at midnight).

        Aware datetimes keep their wall-clock time; values outside the
        supported range are clamped to ``MIN_VALUE``/``MAX_VALUE``.
        """
        if not isinstance(value, datetime.datetime):
            if not isinstance(value, datetime.date):
                raise TypeError(f"expected datetime or date, got {type(value).__name__}")
            value = datetime.datetime.combine(value, datetime.time.min)
        if value.tzinfo is not None:
            value = value.replace(tzinfo=None)
        instance = cls.__new__(cls)
        instance._derive(_clamp(value))
        return instance

    @classmethod
    def from_ticks(cls, ticks: int) -> "PersianDateTime":
        microseconds = ticks // TICKS_PER_MICROSECOND
        if microseconds > _MAX_MICROSECONDS:
            return cls.from_datetime(MAX_VALUE)
        return cls.from_datetime(TICK_EPOCH + datetime.timedelta(microseconds=max(microseconds, 0)))

    @classmethod
    def from_jdatetime(cls, value: Union[jdatetime.datetime, jdatetime.date]) -> "PersianDateTime":
        return cls.from_datetime(value.togregorian())

    @classmethod
    def now(cls) -> "PersianDateTime":
        return cls.from_datetime(get_local_now())

    @classmethod
    def utc_now(cls) -> "PersianDateTime":
        return cls.from_datetime(get_utc_now())

    @classmethod
    def today(cls) -> "PersianDateTime":
        return cls.from_datetime(get_local_now().date())

    @classmethod
    def parse(cls, text: str) -> "PersianDateTime":
        from persian_datetime.parsing import parse
        return parse(text)

    @classmethod
    def try_parse(cls, text: Optional[str]) -> Optional["PersianDateTime"]:
        from persian_datetime.parsing import try_parse
        return try_parse(text)

    def replace(self, year: Optional[int] = None, month: Optional[int] = None, day: Optional[int] = None,
                hour: Optional[int] = None, minute: Optional[int] = None, second: Optional[int] = None,
                millisecond: Optional[int] = None, microsecond: Optional[int] = None) -> "PersianDateTime":
        """Return a copy with the given Persian fields changed; raises InvalidDateError like the constructor."""
        return type(self)(
            self._year if year is None else year,
            self._month if month is None else month,
            self._day if day is None else day,
            self.hour if hour is None else hour,
            self.minute if minute is None else minute,
            self.second if second is None else second,
            self.millisecond if millisecond is None else millisecond,
            self.microsecond if microsecond is None else microsecond,
        )

    # --- Fields -------------------------------------------------------

    @property
    def absolute(self) -> datetime.datetime:
        return self._absolute

    @property
    def ticks(self) -> int:
        return (self._absolute - TICK_EPOCH) // _MICROSECOND * TICKS_PER_MICROSECOND

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def hour(self) -> int:
        return self._absolute.hour

    @property
    def minute(self) -> int:
        return self._absolute.minute

    @property
    def second(self) -> int:
        return self._absolute.second

    @property
    def millisecond(self) -> int:
        return self._absolute.microsecond // 1000

    @property
    def microsecond(self) -> int:
        """Microseconds past the millisecond (0-999)."""
        return self._absolute.microsecond % 1000

    @property
    def time_period(self) -> str:
        return get_time_period(self.hour)

    @property
    def day_of_week(self) -> PersianDayOfWeek:
        # isoweekday() is 1 (Monday) .. 7 (Sunday); the Persian enum starts on Sunday
        return PersianDayOfWeek(self._absolute.isoweekday() % 7)

    @property
    def month_of_year(self) -> PersianMonth:
        return PersianMonth(self._month)

    @property
    def date(self) -> "PersianDateTime":
        return type(self).from_datetime(self._absolute.date())

    @property
    def time_of_day(self) -> datetime.timedelta:
        return self._absolute - datetime.datetime.combine(self._absolute.date(), datetime.time.min)

    def to_datetime(self) -> datetime.datetime:
        return self._absolute

    def to_jdatetime(self) -> jdatetime.datetime:
        return jdatetime.datetime.fromgregorian(datetime=self._absolute)

    # --- Calendar utilities -------------------------------------------

    is_leap_year = staticmethod(calendar_utils.is_leap_year)
    days_in_month = staticmethod(calendar_utils.days_in_month)
    days_in_year = staticmethod(calendar_utils.days_in_year)

    @staticmethod
    def day_of_year(value: "PersianDateTime") -> int:
        return value._day_of_year

    @staticmethod
    def compare(t1: "PersianDateTime", t2: "PersianDateTime") -> int:
        return (t1._absolute > t2._absolute) - (t1._absolute < t2._absolute)

    def compare_to(self, other: Optional["PersianDateTime"]) -> int:
        if other is None:
            return 1
        if not isinstance(other, PersianDateTime):
            raise TypeError(f"cannot compare PersianDateTime with {type(other).__name__}")
        return self.compare(self, other)

    # --- Arithmetic ---------------------------------------------------

    def _add(self, **amount) -> "PersianDateTime":
        try:
            return type(self).from_datetime(self._absolute + datetime.timedelta(**amount))
        except OverflowError:
            backwards = any(value < 0 for value in amount.values())
            logger.debug(f"Overflow adding {amount} to {self._absolute!r}, clamping")
            return type(self).from_datetime(MIN_VALUE if backwards else MAX_VALUE)

    def add(self, value: datetime.timedelta) -> "PersianDateTime":
        return self._add(microseconds=value // _MICROSECOND)

    def add_ticks(self, value: int) -> "PersianDateTime":
        return self._add(microseconds=value // TICKS_PER_MICROSECOND)

    def add_microseconds(self, value: float) -> "PersianDateTime":
        return self._add(microseconds=value)

    def add_milliseconds(self, value: float) -> "PersianDateTime":
        return self._add(milliseconds=value)

    def add_seconds(self, value: float) -> "PersianDateTime":
        return self._add(seconds=value)

    def add_minutes(self, value: float) -> "PersianDateTime":
        return self._add(minutes=value)

    def add_hours(self, value: float) -> "PersianDateTime":
        return self._add(hours=value)

    def add_days(self, value: float) -> "PersianDateTime":
        return self._add(days=value)

    def add_months(self, months: int) -> "PersianDateTime":
        """Move by whole Persian months, clamping the day to the target month's length."""
        year, month, day = calendar_utils.shift_months(self._year, self._month, self._day, months)
        if year < MIN_YEAR:
            return type(self).from_datetime(MIN_VALUE)
        if year > MAX_YEAR:
            return type(self).from_datetime(MAX_VALUE)
        moved = datetime.datetime.combine(calendar_utils.to_gregorian(year, month, day), self._absolute.time())
        return type(self).from_datetime(moved)

    def add_years(self, years: int) -> "PersianDateTime":
        return self.add_months(years * calendar_utils.MONTHS_PER_YEAR)

    def subtract(self, value):
        """``subtract(timedelta)`` moves back in time; ``subtract(other)`` returns the timedelta between them."""
        if isinstance(value, PersianDateTime):
            return self._absolute - value._absolute
        if isinstance(value, datetime.timedelta):
            return self.add(-value)
        raise TypeError(f"cannot subtract {type(value).__name__} from PersianDateTime")

    def __add__(self, other):
        if isinstance(other, datetime.timedelta):
            return self.add(other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, (PersianDateTime, datetime.timedelta)):
            return self.subtract(other)
        return NotImplemented

    # --- Comparison ---------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, PersianDateTime):
            return NotImplemented
        return self._absolute == other._absolute

    def __ne__(self, other):
        if not isinstance(other, PersianDateTime):
            return NotImplemented
        return self._absolute != other._absolute

    def __lt__(self, other):
        if not isinstance(other, PersianDateTime):
            return NotImplemented
        return self._absolute < other._absolute

    def __le__(self, other):
        if not isinstance(other, PersianDateTime):
            return NotImplemented
        return self._absolute <= other._absolute

    def __gt__(self, other):
        if not isinstance(other, PersianDateTime):
            return NotImplemented
        return self._absolute > other._absolute

    def __ge__(self, other):
        if not isinstance(other, PersianDateTime):
            return NotImplemented
        return self._absolute >= other._absolute

    def __hash__(self):
        return hash(self._absolute)

    # --- Text ---------------------------------------------------------

    def to_string(self, fmt: Optional[str] = None, persian_digits: Optional[bool] = None) -> str:
        return formatting.render(self, fmt, persian_digits)

    def to_long_date_string(self) -> str:
        return self.to_string("D")

    def to_long_time_string(self) -> str:
        return self.to_string("T")

    def to_short_date_string(self) -> str:
        return self.to_string("d")

    def to_short_time_string(self) -> str:
        return self.to_string("t")

    def __str__(self):
        return self.to_string()

    def __format__(self, format_spec):
        return self.to_string(format_spec)

    def __repr__(self):
        return (
            f"{type(self).__name__}({self._year}, {self._month}, {self._day}, {self.hour}, "
            f"{self.minute}, {self.second}, {self.millisecond}, {self.microsecond})"
        )


def _clamp(value: datetime.datetime) -> datetime.datetime:
    if value < MIN_VALUE:
        logger.debug(f"{value!r} is before the Persian epoch, clamping to {MIN_VALUE!r}")
        return MIN_VALUE
    if value > MAX_VALUE:
        logger.debug(f"{value!r} is past the last supported Persian year, clamping to {MAX_VALUE!r}")
        return MAX_VALUE
    return value


PersianDateTime.min = PersianDateTime.from_datetime(MIN_VALUE)
PersianDateTime.max = PersianDateTime.from_datetime(MAX_VALUE)
