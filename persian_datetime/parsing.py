"""
Lenient parsing of Persian date/time text such as ``"۱۴۰۰/۰۱/۰۸ ۱۴:۳۰ ب.ظ"``.
"""
import logging
import re
from typing import List, Optional

from persian_datetime.exceptions import DateFormatError, InvalidDateError
from persian_datetime.persian_utils import AM_DESIGNATOR, PM_DESIGNATOR, normalize_persian_numerals
from persian_datetime.value import PersianDateTime

logger = logging.getLogger(__name__)

DATE_SEPARATORS = re.compile(r"[/\-\s]+")
TIME_SEPARATORS = re.compile(r"[:\s]+")
_INTEGER = re.compile(r"[+-]?[0-9]+")

PM_INDICATORS = (PM_DESIGNATOR, "PM")
AM_INDICATORS = (AM_DESIGNATOR, "AM")

# (name, upper bound) of each positional time field
TIME_FIELDS = (("hour", 23), ("minute", 59), ("second", 59), ("millisecond", 999))


def _split(pattern: re.Pattern, text: str) -> List[str]:
    return [part for part in pattern.split(text) if part]


def _parse_int(token: str) -> Optional[int]:
    if not _INTEGER.fullmatch(token):
        return None
    return int(token)


def try_parse(text: Optional[str]) -> Optional[PersianDateTime]:
    """Read a PersianDateTime from ``"date [time [AM/PM]]"`` text, or return None.

    The date is year/month/day separated by ``/`` or ``-``; the time is up to
    four ``:``-separated fields (hour, minute, second, millisecond). Persian
    and Arabic-Indic digits are accepted.
    """
    if text is None or not text.strip():
        return None

    normalized = normalize_persian_numerals(text)
    segments = normalized.split()
    if len(segments) > 3:
        logger.debug(f"Rejected '{text}': expected at most date, time and AM/PM parts")
        return None

    date_parts = _split(DATE_SEPARATORS, segments[0])
    if len(date_parts) != 3:
        logger.debug(f"Rejected '{text}': date part '{segments[0]}' does not have three fields")
        return None

    year, month, day = (_parse_int(part) for part in date_parts)
    if year is None or month is None or day is None:
        logger.debug(f"Rejected '{text}': non-numeric date field in '{segments[0]}'")
        return None

    time_values = {name: 0 for name, _ in TIME_FIELDS}
    if len(segments) > 1:
        time_parts = _split(TIME_SEPARATORS, segments[1])
        if len(time_parts) > len(TIME_FIELDS):
            logger.debug(f"Rejected '{text}': too many time fields in '{segments[1]}'")
            return None
        for (name, upper), part in zip(TIME_FIELDS, time_parts):
            value = _parse_int(part)
            if value is None or not 0 <= value <= upper:
                logger.debug(f"Rejected '{text}': {name} '{part}' is not in 0..{upper}")
                return None
            time_values[name] = value

    if len(segments) > 2:
        indicator = segments[2]
        if indicator in PM_INDICATORS:
            if time_values["hour"] < 12:
                time_values["hour"] += 12
        elif indicator in AM_INDICATORS:
            if time_values["hour"] == 12:
                time_values["hour"] = 0
        else:
            logger.debug(f"Ignoring unknown AM/PM indicator '{indicator}' in '{text}'")

    try:
        return PersianDateTime(year, month, day, **time_values)
    except InvalidDateError as e:
        logger.debug(f"Rejected '{text}': {e}")
        return None


def parse(text: Optional[str]) -> PersianDateTime:
    """Like :func:`try_parse` but raises DateFormatError instead of returning None."""
    result = try_parse(text)
    if result is None:
        raise DateFormatError(text)
    return result
