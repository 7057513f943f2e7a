"""
Tests for rule set document schema validation.
"""

import pytest

from formcheck.core.exceptions import RuleDefinitionError
from formcheck.utils.validation import RuleSetSchemaValidator


@pytest.fixture
def validator() -> RuleSetSchemaValidator:
    return RuleSetSchemaValidator()


def test_valid_document(validator, rule_set_document):
    """Test that a well-formed document passes."""
    validator.validate(rule_set_document)
    assert validator.errors(rule_set_document) == []


@pytest.mark.parametrize(
    "document",
    [
        {},  # no fields
        {"fields": {}},  # empty fields
        {"fields": {"a": {}}},  # neither kind nor validator
        {"fields": {"a": {"kind": "BOGUS"}}},  # unknown kind name
        {"fields": {"a": {"kind": -1}}},  # negative code
        {"fields": {"a": {"kind": "DIGITS", "length": -2}}},  # negative length
        {"fields": {"a": {"kind": "DIGITS", "validator": "rdd"}}},  # both kind and validator
        {"fields": {"a": {"validator": "rdd", "length": 3}}},  # length with validator
        {"fields": {"a": {"validator": "ssn"}}},  # unknown validator
        {"fields": {"a": {"kind": "DIGITS", "color": "red"}}},  # unknown property
        {"fields": {"a": {"kind": "DIGITS", "required": "yes"}}},  # non-boolean flag
        {"name": "", "fields": {"a": {"kind": "DIGITS"}}},  # empty name
        [],  # not an object
    ],
)
def test_invalid_documents(validator, document):
    """Test that malformed documents raise RuleDefinitionError."""
    with pytest.raises(RuleDefinitionError, match="Schema validation failed"):
        validator.validate(document)
    assert validator.errors(document)
