class PersianDateTimeError(Exception):
    """Base class for errors raised by persian_datetime."""
    pass


class InvalidDateError(PersianDateTimeError, ValueError):
    """Raised when Persian date/time fields fall outside the calendar's ranges."""
    pass


class DateFormatError(PersianDateTimeError, ValueError):
    """Raised by ``parse`` when the text cannot be read as a Persian date/time."""

    def __init__(self, text):
        self.text = text
        super().__init__(f"The input string was not in a correct format: {text!r}")
