"""
Tests for the generic rule-driven field validator.
"""

import pytest

from formcheck.core.constants import MSG_DISALLOWED_CHARACTER
from formcheck.core.enums import FailureReason, RuleKind
from formcheck.core.models import FieldRule
from formcheck.core.validator import validate, validate_entry


def test_value_is_trimmed_and_uppercased(alphanumeric_rule):
    """Test that the result carries the normalized value."""
    result = validate("  ab12cd  ", alphanumeric_rule)
    assert result.is_valid
    assert result.value == "AB12CD"


def test_empty_value_passes_when_optional(fixed_length_rule):
    """Test that empty input short-circuits to success."""
    result = validate("   ", fixed_length_rule)
    assert result.is_valid
    assert result.value == ""


def test_empty_value_fails_when_required():
    """Test that a required rule rejects empty input."""
    result = validate("  ", FieldRule(RuleKind.ALPHANUMERIC, required=True))
    assert not result.is_valid
    assert result.reason == FailureReason.EMPTY_REQUIRED_FIELD


def test_disallowed_character(alphanumeric_rule):
    """Test that characters outside the rule's set are rejected."""
    result = validate("AB-12", alphanumeric_rule)
    assert not result.is_valid
    assert result.reason == FailureReason.DISALLOWED_CHARACTER
    assert result.message == MSG_DISALLOWED_CHARACTER
    assert result.value == "AB-12"


def test_wrong_length(fixed_length_rule):
    """Test that the exact length is enforced."""
    result = validate("ABC", fixed_length_rule)
    assert not result.is_valid
    assert result.reason == FailureReason.WRONG_LENGTH
    assert result.message == "Invalid number of characters.  Must be 13 characters."
    assert result.context == {"expected_length": 13, "actual_length": 3}


def test_charset_checked_before_length(fixed_length_rule):
    """Test that a charset violation is reported even when the length is also wrong."""
    result = validate("A#", fixed_length_rule)
    assert result.reason == FailureReason.DISALLOWED_CHARACTER


def test_zero_length_skips_length_check(alphanumeric_rule):
    """Test that length 0 means no fixed length."""
    assert validate("ANYLENGTHSTRING", alphanumeric_rule).is_valid
    assert validate("A", alphanumeric_rule).is_valid


def test_date_rule_delegates_to_date_checker():
    """Test that DATE rules apply calendar validation."""
    rule = FieldRule(RuleKind.DATE)
    assert validate("02/29/2024", rule).is_valid
    assert validate("02/29/2023", rule).reason == FailureReason.INVALID_CALENDAR_DATE
    assert validate("2024-02-29", rule).reason == FailureReason.MALFORMED_DATE_FORMAT


@pytest.mark.parametrize(
    "kind, accepted, rejected",
    [
        (RuleKind.ALPHANUMERIC_DOT, "a.b1", "a b"),
        (RuleKind.LETTERS, "abc.d", "abc1"),
        (RuleKind.DIGITS, "0123", "12a"),
        (RuleKind.TEXT, "acme, inc. #4 a/b & c@d: $1*2-3", "semi;colon"),
        (RuleKind.PHONE, "(555) 123-4567.", "555-CALL"),
        (RuleKind.ADDRESS, "a,b&c$d#e@f:g-h", "a b"),
        (RuleKind.LETTERS_SPACE, "john smith", "j. smith"),
        (RuleKind.ALPHANUMERIC_DOT_SPACE, "apt 4.b", "apt #4"),
        (RuleKind.WILDCARD, "ab_%*?12", "ab-12"),
        (RuleKind.ALPHANUMERIC, "ab12", "ab.12"),
        (RuleKind.RDD, "b01", "a01"),
    ],
)
def test_rule_kind_charsets(kind, accepted, rejected):
    """Test each rule kind against an accepted and a rejected value."""
    rule = FieldRule(kind)
    assert validate(accepted, rule).is_valid
    assert validate(rejected, rule).reason == FailureReason.DISALLOWED_CHARACTER


def test_validate_entry():
    """Test the kind-and-length shorthand."""
    assert validate_entry("12", RuleKind.DIGITS, 2).is_valid
    assert validate_entry("123", RuleKind.DIGITS, 2).reason == FailureReason.WRONG_LENGTH
    assert validate_entry("123", RuleKind.DIGITS).is_valid


def test_validate_never_raises_on_bad_input(alphanumeric_rule):
    """Test that unusual input yields a result rather than an exception."""
    for value in ["\x00", "é", "\n\t", "🙂"]:
        result = validate(value, alphanumeric_rule)
        assert result.is_valid is False


def test_date_rule_with_exact_length():
    """Test that the exact length also applies to valid dates."""
    assert validate_entry("2/5/2020", RuleKind.DATE, 10).reason == FailureReason.WRONG_LENGTH
    assert validate_entry("02/05/2020", RuleKind.DATE, 10).is_valid
    assert validate_entry("2/5/2020", RuleKind.DATE).is_valid
    assert validate_entry("2/30/2020", RuleKind.DATE, 10).reason == FailureReason.INVALID_CALENDAR_DATE
