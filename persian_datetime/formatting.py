"""
Rendering of Persian date/time values to text.

A format is either a single-character preset naming a whole layout or a
pattern of literal text and tokens (``yyyy``, ``MM``, ``dddd``, ``HH``...).
Patterns are read left to right, taking the longest token at each position,
so text produced by one token is never scanned again.
"""
import logging
from typing import Callable, Dict, Optional

from persian_datetime import config
from persian_datetime.persian_utils import get_time_period, to_persian_numerals

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "yyyy/MM/dd HH:mm:ss"

_LONG_DATE = "dddd, dd MMMM, yyyy"

PRESETS: Dict[str, str] = {
    "d": "yyyy/MM/dd",
    "D": _LONG_DATE,
    "f": _LONG_DATE + " HH:mm",
    "F": _LONG_DATE + " HH:mm:ss",
    "g": "yyyy/M/d H:mm",
    "G": "yyyy/M/d H:mm:ss",
    "m": "MMMM dd",
    "M": "MMMM dd",
    "t": "HH:mm",
    "T": "HH:mm:ss",
    "y": "MMMM yyyy",
    "Y": "MMMM yyyy",
}


def _twelve_hour(value) -> int:
    return value.hour % 12 or 12


TOKENS: Dict[str, Callable[[object], str]] = {
    # Year
    "yyyy": lambda v: str(v.year),
    "yyy": lambda v: str(v.year),
    "yy": lambda v: f"{v.year % 100:02d}",
    "y": lambda v: str(v.year % 100),
    # Month
    "MMMM": lambda v: v.month_of_year.label,
    "MMM": lambda v: v.month_of_year.label,
    "MM": lambda v: f"{v.month:02d}",
    "M": lambda v: str(v.month),
    # Day
    "dddd": lambda v: v.day_of_week.label,
    "ddd": lambda v: v.day_of_week.label,
    "dd": lambda v: f"{v.day:02d}",
    "d": lambda v: str(v.day),
    # Hour
    "HH": lambda v: f"{v.hour:02d}",
    "H": lambda v: str(v.hour),
    "hh": lambda v: f"{_twelve_hour(v):02d}",
    "h": lambda v: str(_twelve_hour(v)),
    # Minute, second
    "mm": lambda v: f"{v.minute:02d}",
    "m": lambda v: str(v.minute),
    "ss": lambda v: f"{v.second:02d}",
    "s": lambda v: str(v.second),
    # Time period
    "tt": lambda v: get_time_period(v.hour),
    "t": lambda v: get_time_period(v.hour, short=True),
}

_LONGEST_TOKEN = max(len(token) for token in TOKENS)


def expand_pattern(value, pattern: str) -> str:
    """Substitute every token of ``pattern`` with the matching field of ``value``."""
    parts = []
    position = 0
    while position < len(pattern):
        for length in range(_LONGEST_TOKEN, 0, -1):
            render_token = TOKENS.get(pattern[position:position + length])
            if render_token is not None:
                parts.append(render_token(value))
                position += length
                break
        else:
            parts.append(pattern[position])
            position += 1
    return "".join(parts)


def render(value, fmt: Optional[str] = None, persian_digits: Optional[bool] = None) -> str:
    """Format a PersianDateTime.

    Args:
        value: The PersianDateTime (or anything with the same fields).
        fmt: A preset character, a token pattern, or None/"" for the default layout.
        persian_digits: Override ``settings.USE_PERSIAN_DIGITS`` for this call.

    Returns:
        The rendered text, with ASCII digits turned into Persian digits unless disabled.
    """
    if persian_digits is None:
        persian_digits = config.settings.USE_PERSIAN_DIGITS

    if not fmt:
        text = expand_pattern(value, DEFAULT_FORMAT)
    elif len(fmt) == 1:
        preset = PRESETS.get(fmt)
        if preset is None:
            logger.debug(f"Unknown preset format '{fmt}', leaving it as literal text")
            text = fmt
        else:
            text = expand_pattern(value, preset)
    else:
        text = expand_pattern(value, fmt)

    return to_persian_numerals(text) if persian_digits else text
