"""
Enumerations for field rule kinds and validation failure reasons.

This module defines the closed set of character-class policies a form field can
be validated against, and the tagged failure outcomes a validation can report.

- RuleKind: Named charset policies, each mapped to one allowed character set
- FailureReason: The constraint a rejected value violated
"""

from enum import Enum
from typing import Union

from .constants import ALPHANUMERIC, DATE_CHARS, DIGITS, LETTERS, RDD_FIRST_CHARS


class RuleKind(Enum):
    """
    Enumeration of character-class policies for form fields.

    Member values are the numeric codes the legacy form pages used to select a
    policy, so existing rule definitions keep working unchanged.
    """

    ALPHANUMERIC_DOT = 0  # Letters, digits and periods
    LETTERS = 1  # Letters and periods
    DIGITS = 2  # Digits only
    TEXT = 3  # Free text with common punctuation
    PHONE = 4  # Phone numbers
    DATE = 5  # MM/DD/YYYY dates
    ADDRESS = 6  # Address-style punctuation, no spaces
    LETTERS_SPACE = 7  # Letters and spaces
    ALPHANUMERIC_DOT_SPACE = 8  # Letters, digits, periods and spaces
    WILDCARD = 9  # Search patterns with wildcards
    ALPHANUMERIC = 10  # Letters and digits
    RDD = 20  # Required delivery date code characters

    @property
    def charset(self) -> str:
        """Characters permitted by this rule kind."""
        return CHARSETS[self]

    @classmethod
    def from_code(cls, code: Union[int, str, "RuleKind"]) -> "RuleKind":
        """
        Resolve a rule kind from a member, a member name or a legacy code.

        Unknown integer codes fall back to WILDCARD, which is how the legacy
        pages treated any code they did not recognise.

        Args:
            code: RuleKind, member name (case-insensitive) or integer code

        Returns:
            RuleKind: The matching rule kind

        Raises:
            ValueError: If a string does not name a rule kind
        """
        if isinstance(code, cls):
            return code
        if isinstance(code, bool):
            raise ValueError(f"Invalid rule kind: {code!r}")
        if isinstance(code, int):
            try:
                return cls(code)
            except ValueError:
                return cls.WILDCARD
        if isinstance(code, str):
            try:
                return cls[code.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown rule kind: {code}")
        raise ValueError(f"Invalid rule kind: {code!r}")


CHARSETS = {
    RuleKind.ALPHANUMERIC_DOT: ALPHANUMERIC + ".",
    RuleKind.LETTERS: LETTERS + ".",
    RuleKind.DIGITS: DIGITS,
    RuleKind.TEXT: ALPHANUMERIC + ".,/&$#@*:- ",
    RuleKind.PHONE: DIGITS + "()-. ",
    RuleKind.DATE: DATE_CHARS,
    RuleKind.ADDRESS: ALPHANUMERIC + ",&$#@:-",
    RuleKind.LETTERS_SPACE: LETTERS + " ",
    RuleKind.ALPHANUMERIC_DOT_SPACE: ALPHANUMERIC + ". ",
    RuleKind.WILDCARD: ALPHANUMERIC + "_%*?",
    RuleKind.ALPHANUMERIC: ALPHANUMERIC,
    RuleKind.RDD: RDD_FIRST_CHARS,
}


class FailureReason(Enum):
    """
    Enumeration of the constraints a field value can violate.

    Callers display a different message per reason, so the reason is reported
    separately from the human-readable text.
    """

    EMPTY_REQUIRED_FIELD = "empty_required_field"
    WRONG_LENGTH = "wrong_length"
    DISALLOWED_CHARACTER = "disallowed_character"
    MALFORMED_DATE_FORMAT = "malformed_date_format"
    INVALID_CALENDAR_DATE = "invalid_calendar_date"
    NON_NUMERIC_SEGMENT = "non_numeric_segment"
    PASSWORD_MISMATCH = "password_mismatch"
