"""
Generic field validation engine.

Applies a FieldRule to a raw value: the value is trimmed and upper-cased, empty
values are accepted unless the rule requires one, date rules are delegated to
the date checker, and everything else is checked for allowed characters and
then for exact length. The first violated constraint decides the outcome.
"""

import logging

from .charsets import is_allowed_charset, normalize_upper
from .constants import MSG_DISALLOWED_CHARACTER, MSG_EMPTY_REQUIRED, MSG_WRONG_LENGTH
from .dates import validate_date
from .enums import FailureReason, RuleKind
from .models import FieldRule, ValidationResult

logger = logging.getLogger(__name__)


def validate(value: str, rule: FieldRule) -> ValidationResult:
    """
    Validate a raw value against a field rule.

    Checks run in a fixed order and stop at the first failure:

    1. Empty value: passes, unless ``rule.required`` (EMPTY_REQUIRED_FIELD)
    2. Date rules: delegated to ``validate_date``; other rules: every
       character must belong to the rule kind's set (DISALLOWED_CHARACTER)
    3. Exact length, for date rules too
       (WRONG_LENGTH), skipped when ``rule.length`` is 0

    Args:
        value: Raw field value
        rule: Rule to validate against

    Returns:
        ValidationResult: Outcome carrying the trimmed, upper-cased value

    Example:
        >>> validate(" ab12 ", FieldRule(RuleKind.ALPHANUMERIC, length=4)).value
        'AB12'
    """
    entry = normalize_upper(value)

    if not entry:
        if rule.required:
            logger.debug(f"Empty value for required {rule.kind.name} field")
            return ValidationResult.failure(entry, FailureReason.EMPTY_REQUIRED_FIELD, MSG_EMPTY_REQUIRED)
        return ValidationResult.success(entry)

    if rule.kind is RuleKind.DATE:
        date_result = validate_date(entry)
        if not date_result.is_valid:
            return date_result
    elif not is_allowed_charset(entry, rule.kind.charset, case_sensitive=False):
        logger.debug(f"Value {entry!r} rejected by {rule.kind.name} charset")
        return ValidationResult.failure(entry, FailureReason.DISALLOWED_CHARACTER, MSG_DISALLOWED_CHARACTER)

    if rule.length != 0 and len(entry) != rule.length:
        logger.debug(f"Value {entry!r} has {len(entry)} characters, expected {rule.length}")
        return ValidationResult.failure(
            entry,
            FailureReason.WRONG_LENGTH,
            MSG_WRONG_LENGTH.format(length=rule.length),
            context={"expected_length": rule.length, "actual_length": len(entry)},
        )

    return ValidationResult.success(entry)


def validate_entry(value: str, kind: RuleKind, num_chars: int = 0) -> ValidationResult:
    """
    Validate a value against a rule kind with an optional exact length.

    Args:
        value: Raw field value
        kind: Charset policy to apply
        num_chars: Required exact length, or 0 for no fixed length

    Returns:
        ValidationResult: Outcome carrying the trimmed, upper-cased value
    """
    return validate(value, FieldRule(kind=kind, length=num_chars))
