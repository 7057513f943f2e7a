"""
Tests for validation result formatting.
"""

import json

from formcheck.core.enums import FailureReason, RuleKind
from formcheck.core.models import FieldRule, ValidationResult
from formcheck.utils.validation import FormRuleSet, ValidationReporter


def test_format_passing_result():
    text = ValidationReporter.format_result(ValidationResult.success("AB12"))
    assert text == "Validation passed\n  value: 'AB12'"


def test_format_failing_result_with_context():
    result = ValidationResult.failure(
        "ABC",
        FailureReason.WRONG_LENGTH,
        "Invalid number of characters.  Must be 4 characters.",
        context={"expected_length": 4},
    )
    assert ValidationReporter.format_result(result).splitlines() == [
        "Validation failed: Invalid number of characters.  Must be 4 characters.",
        "  reason: wrong_length",
        "  value: 'ABC'",
        "  expected_length: 4",
    ]


def test_format_form_result():
    rule_set = FormRuleSet().add_rule("qty", FieldRule(RuleKind.DIGITS))
    text = ValidationReporter.format_result(rule_set.validate({"qty": "1x"}))
    assert "Validation failed with the following errors:" in text
    assert "  - qty: Invalid characters found in field" in text
    assert "  qty: '1X'" in text

    text = ValidationReporter.format_result(rule_set.validate({"qty": "12"}))
    assert text.startswith("Validation passed successfully")


def test_to_dict():
    result = ValidationResult.failure("#", FailureReason.DISALLOWED_CHARACTER, "bad")
    assert ValidationReporter.to_dict(result) == {
        "is_valid": False,
        "value": "#",
        "reason": "disallowed_character",
        "message": "bad",
        "context": None,
    }


def test_form_to_json():
    rule_set = FormRuleSet("f").add_rule("qty", FieldRule(RuleKind.DIGITS))
    data = json.loads(ValidationReporter.to_json(rule_set.validate({"qty": " 7 "})))
    assert data["is_valid"] is True
    assert data["values"] == {"qty": "7"}
    assert data["errors"] == []
    assert data["fields"]["qty"]["value"] == "7"
    assert data["context"]["form"] == "f"
