"""
Rule Set Validation for Forms

This module provides components for managing and applying collections of
validation rules to a form. It allows for:
- Grouping multiple validation rules by field
- Applying multiple rules to a single field, in order
- Validating dictionaries of form values against rule sets
- Collecting normalized values and reporting failures per field

Ready-made rule sets for the requisition and order management search forms are
provided at the bottom of the module.
"""

import logging
from typing import Any, Dict, List, Mapping

from ...core.enums import RuleKind
from ...core.models import FieldRule, FormValidationResult, ValidationResult
from .base import FieldValidator, ValidationRule

logger = logging.getLogger(__name__)


class FormRuleSet:
    """
    Collection of validation rules organized by field.

    Fields are validated in the order they were first added. Within a field,
    rules run in the order they were added and stop at the first failure; each
    rule sees the value normalized by the rule before it.

    Attributes:
        name (str): Name of the form the rule set describes
        rules (Dict[str, List[ValidationRule]]): Dictionary mapping field names
            to lists of validation rules
    """

    def __init__(self, name: str = "form"):
        """
        Initialize an empty rule set.

        Args:
            name: Name of the form the rule set describes
        """
        self.name = name
        self.rules: Dict[str, List[ValidationRule]] = {}

    def add_rule(self, field: str, rule) -> "FormRuleSet":
        """
        Add a validation rule for a field.

        Args:
            field: Name of the field to validate
            rule: ValidationRule, or FieldRule to wrap in a FieldValidator

        Returns:
            FormRuleSet: self, for chaining

        Example:
            >>> rule_set = (
            ...     FormRuleSet("search")
            ...     .add_rule("sdate", FieldRule(RuleKind.DATE))
            ...     .add_rule("priority", FieldRule(RuleKind.DIGITS, length=2))
            ... )
        """
        if isinstance(rule, FieldRule):
            rule = FieldValidator(rule)
        if not isinstance(rule, ValidationRule):
            raise TypeError(f"rule must be a ValidationRule or FieldRule, got {type(rule).__name__}")
        self.rules.setdefault(field, []).append(rule)
        return self

    @property
    def fields(self) -> List[str]:
        """Names of fields with rules, in validation order."""
        return list(self.rules.keys())

    def validate_field(self, field: str, value: Any) -> ValidationResult:
        """
        Validate one field value against its rules.

        Args:
            field: Field name
            value: Raw value; None is treated as an empty string and other
                non-string values (e.g. JSON numbers) are converted with str()

        Returns:
            ValidationResult: Outcome of the first failing rule, or of the last
            rule when all pass

        Raises:
            KeyError: If the rule set has no rules for the field
        """
        rules = self.rules[field]
        if value is None:
            value = ""
        elif not isinstance(value, str):
            value = str(value)
        result = ValidationResult.success(value)
        for rule in rules:
            result = rule.validate(result.value)
            if not result.is_valid:
                logger.debug(f"{self.name}.{field} failed {rule.describe()}: {result.message}")
                break
        return result

    def validate(self, data: Mapping[str, Any], fail_fast: bool = False) -> FormValidationResult:
        """
        Validate form values against all rules in the rule set.

        Args:
            data: Mapping of field names to raw values; missing fields are
                validated as empty strings
            fail_fast: Stop at the first failing field

        Returns:
            FormValidationResult containing normalized values and any errors

        Example:
            >>> rule_set = FormRuleSet().add_rule("age", FieldRule(RuleKind.DIGITS))
            >>> result = rule_set.validate({"age": "4x"})
            >>> result.is_valid
            False
            >>> result.errors
            ['age: Invalid characters found in field']
        """
        result = FormValidationResult(
            is_valid=True,
            context={"form": self.name, "validated_fields": []},
        )

        for field in self.rules:
            field_result = self.validate_field(field, data.get(field))
            result.field_results[field] = field_result
            result.values[field] = field_result.value
            result.context["validated_fields"].append(field)
            if not field_result.is_valid:
                result.is_valid = False
                result.errors.append(f"{field}: {field_result.message}")
                if fail_fast:
                    break

        return result


def requisition_rule_set() -> FormRuleSet:
    """Rule set for the requisition search form."""
    return (
        FormRuleSet("requisition")
        .add_rule("document", FieldRule(RuleKind.WILDCARD))
        .add_rule("priority_filter", FieldRule(RuleKind.DIGITS))
        .add_rule("sdate", FieldRule(RuleKind.DATE))
        .add_rule("edate", FieldRule(RuleKind.DATE))
    )


def order_management_rule_set() -> FormRuleSet:
    """Rule set for the order management search form."""
    return (
        FormRuleSet("order_management")
        .add_rule("contract", FieldRule(RuleKind.WILDCARD))
        .add_rule("sdate", FieldRule(RuleKind.DATE))
        .add_rule("edate", FieldRule(RuleKind.DATE))
    )
