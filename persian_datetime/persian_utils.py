"""
Persian locale data: digits, month and weekday names, AM/PM labels
"""
import enum
from typing import Optional

PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
ARABIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"

_TO_PERSIAN_NUMERALS = str.maketrans("0123456789", PERSIAN_DIGITS)
_TO_LATIN_NUMERALS = str.maketrans(PERSIAN_DIGITS + ARABIC_DIGITS, "0123456789" * 2)

# Time period labels
TIME_PERIOD_AM = "قبل از ظهر"
TIME_PERIOD_PM = "بعد از ظهر"
AM_DESIGNATOR = "ق.ظ"
PM_DESIGNATOR = "ب.ظ"


class PersianDayOfWeek(enum.IntEnum):
    # Ordinals line up with a Sunday-first week
    YEKSHANBE = 0
    DOSHANBE = 1
    SESHANBE = 2
    CHAHARSHANBE = 3
    PANJSHANBE = 4
    JOMEH = 5
    SHANBE = 6

    @property
    def label(self) -> str:
        return PERSIAN_WEEKDAY_NAMES[self.value]

    def __str__(self):
        return self.label


class PersianMonth(enum.IntEnum):
    FARVARDIN = 1
    ORDIBEHESHT = 2
    KHORDAD = 3
    TIR = 4
    MORDAD = 5
    SHAHRIVAR = 6
    MEHR = 7
    ABAN = 8
    AZAR = 9
    DEY = 10
    BAHMAN = 11
    ESFAND = 12

    @property
    def label(self) -> str:
        return PERSIAN_MONTH_NAMES[self.value - 1]

    def __str__(self):
        return self.label


PERSIAN_WEEKDAY_NAMES = ('یکشنبه', 'دوشنبه', 'سه‌شنبه', 'چهارشنبه', 'پنجشنبه', 'جمعه', 'شنبه')

PERSIAN_MONTH_NAMES = (
    'فروردین', 'اردیبهشت', 'خرداد', 'تیر', 'مرداد', 'شهریور',
    'مهر', 'آبان', 'آذر', 'دی', 'بهمن', 'اسفند',
)


def to_persian_numerals(text) -> str:
    """Convert ASCII numerals to Persian numerals"""
    return str(text).translate(_TO_PERSIAN_NUMERALS)


def normalize_persian_numerals(text: Optional[str]) -> Optional[str]:
    """Convert Persian and Arabic-Indic numerals to ASCII numerals"""
    if text is None:
        return None
    return text.translate(_TO_LATIN_NUMERALS)


def get_persian_day_name(day_of_week: int) -> str:
    """Persian name for a Sunday-based weekday index (0=یکشنبه ... 6=شنبه)."""
    return PersianDayOfWeek(day_of_week).label


def get_persian_month_name(month: int) -> str:
    """Persian name for a month number (1-12)."""
    return PersianMonth(month).label


def get_time_period(hour: int, short: bool = False) -> str:
    if short:
        return AM_DESIGNATOR if hour < 12 else PM_DESIGNATOR
    return TIME_PERIOD_AM if hour < 12 else TIME_PERIOD_PM
