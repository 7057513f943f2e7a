"""Shared test fixtures."""

import pytest

from formcheck.core.enums import RuleKind
from formcheck.core.models import FieldRule


@pytest.fixture
def alphanumeric_rule() -> FieldRule:
    """Fixture providing a letters-and-digits rule with no fixed length."""
    return FieldRule(kind=RuleKind.ALPHANUMERIC)


@pytest.fixture
def fixed_length_rule() -> FieldRule:
    """Fixture providing a letters-and-digits rule requiring 13 characters."""
    return FieldRule(kind=RuleKind.ALPHANUMERIC, length=13)


@pytest.fixture
def rule_set_document() -> dict:
    """Fixture providing a valid rule set document."""
    return {
        "name": "order_entry",
        "fields": {
            "contract": {"validator": "contract_id"},
            "nsn": {"validator": "item_id", "required": True},
            "priority": {"kind": "DIGITS", "length": 2},
            "sdate": {"kind": 5},
        },
    }
