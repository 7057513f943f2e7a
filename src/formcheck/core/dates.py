"""
Calendar date validation for ``MM/DD/YYYY`` form fields.

Dates are checked in two stages, each with its own failure reason:

1. Format: only digits and ``/``, two separators after a non-empty month, a
   one- or two-digit month and day and a four-digit year.
2. Calendar: month and day ranges, 30-day months and February in leap and
   common years.

An empty value is a valid (optional) date; callers enforce required dates
separately.
"""

import logging

from .charsets import is_allowed_charset, normalize
from .constants import (
    DATE_CHARS,
    DATE_SEPARATOR,
    DIGITS,
    MAX_DAY_DIGITS,
    MAX_MONTH_DIGITS,
    MSG_DATE_CALENDAR,
    MSG_DATE_CHARACTERS,
    MSG_DATE_FORMAT,
    YEAR_DIGITS,
)
from .enums import FailureReason
from .models import ValidationResult

logger = logging.getLogger(__name__)

THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})
FEBRUARY = 2


def is_leap_year(year: int) -> bool:
    """
    Check whether a year is a Gregorian leap year.

    Args:
        year: Year to check

    Returns:
        bool: True if divisible by 4 and either not by 100 or also by 400
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_calendar_date(month: int, day: int, year: int) -> bool:
    """
    Check month, day and year ranges against the calendar.

    Args:
        month: Month number
        day: Day of month
        year: Four-digit year

    Returns:
        bool: True if the date exists
    """
    if not 1 <= month <= 12:
        return False
    if not 1 <= day <= 31:
        return False
    if not 0 <= year <= 9999:
        return False
    if month in THIRTY_DAY_MONTHS and day == 31:
        return False
    if month == FEBRUARY and day > 28:
        if day > 29:
            return False
        if not is_leap_year(year):
            return False
    return True


def _split_date(value: str):
    """Split a date into month, day and year strings, or return None."""
    slash1 = value.find(DATE_SEPARATOR)
    slash2 = value.find(DATE_SEPARATOR, slash1 + 1)
    if slash1 <= 0 or slash2 <= 0:
        return None
    return value[:slash1], value[slash1 + 1 : slash2], value[slash2 + 1 :]


def validate_date(value: str) -> ValidationResult:
    """
    Validate a ``MM/DD/YYYY`` date string.

    Args:
        value: Raw date value; outer spaces are trimmed

    Returns:
        ValidationResult: Success with the trimmed value, or a failure tagged
        MALFORMED_DATE_FORMAT or INVALID_CALENDAR_DATE

    Example:
        >>> validate_date("02/29/2024").is_valid
        True
        >>> validate_date("02/29/2023").reason
        <FailureReason.INVALID_CALENDAR_DATE: 'invalid_calendar_date'>
    """
    date = normalize(value)
    if not date:
        return ValidationResult.success(date)

    if not is_allowed_charset(date, DATE_CHARS, case_sensitive=False):
        logger.debug(f"Date {date!r} contains characters other than digits and '/'")
        return ValidationResult.failure(date, FailureReason.MALFORMED_DATE_FORMAT, MSG_DATE_CHARACTERS)

    parts = _split_date(date)
    if parts is None:
        logger.debug(f"Date {date!r} is missing a separator")
        return ValidationResult.failure(date, FailureReason.MALFORMED_DATE_FORMAT, MSG_DATE_FORMAT)

    month, day, year = parts
    if not all(is_allowed_charset(part, DIGITS) for part in parts):
        logger.debug(f"Date {date!r} has a non-numeric sub-field")
        return ValidationResult.failure(date, FailureReason.MALFORMED_DATE_FORMAT, MSG_DATE_FORMAT)

    if (
        not 1 <= len(month) <= MAX_MONTH_DIGITS
        or not 1 <= len(day) <= MAX_DAY_DIGITS
        or len(year) != YEAR_DIGITS
    ):
        logger.debug(f"Date {date!r} has sub-fields of the wrong width")
        return ValidationResult.failure(date, FailureReason.MALFORMED_DATE_FORMAT, MSG_DATE_FORMAT)

    if not is_calendar_date(int(month), int(day), int(year)):
        logger.debug(f"Date {date!r} does not exist on the calendar")
        return ValidationResult.failure(date, FailureReason.INVALID_CALENDAR_DATE, MSG_DATE_CALENDAR)

    return ValidationResult.success(date)
