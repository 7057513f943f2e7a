"""
Character-set primitives shared by all field validators.

Provides trimming of outer spaces and the membership scan that decides whether
every character of a value belongs to an allowed set.
"""

import logging

logger = logging.getLogger(__name__)

SPACE = " "


def normalize(value: str) -> str:
    """
    Strip leading and trailing space characters from a value.

    Only the space character is stripped; tabs, newlines and other whitespace
    are kept, as are interior spaces. A value with nothing to strip is returned
    unchanged.

    Args:
        value: Raw field value

    Returns:
        str: The trimmed value

    Example:
        >>> normalize("  AB CD ")
        'AB CD'
        >>> normalize("\\tAB")
        '\\tAB'
    """
    return value.strip(SPACE)


def normalize_upper(value: str) -> str:
    """Trim outer spaces and upper-case a value."""
    return normalize(value).upper()


def is_allowed_charset(value: str, allowed_chars: str, case_sensitive: bool = False) -> bool:
    """
    Check that every character of a value appears in an allowed set.

    When the check is not case sensitive, both the value and the allowed
    characters are upper-cased before comparison. The scan stops at the first
    disallowed character; an empty value is always allowed.

    Args:
        value: Value to check
        allowed_chars: Characters permitted in the value
        case_sensitive: Whether letters must match case exactly

    Returns:
        bool: True if every character is allowed, False otherwise

    Example:
        >>> is_allowed_charset("ab12", "AB12")
        True
        >>> is_allowed_charset("AB#CD", "ABCD", case_sensitive=True)
        False
    """
    if not case_sensitive:
        value = value.upper()
        allowed_chars = allowed_chars.upper()

    position = 0
    while position < len(value) and value[position] in allowed_chars:
        position += 1

    if position != len(value):
        logger.debug(f"Disallowed character {value[position]!r} at position {position}")
        return False
    return True
