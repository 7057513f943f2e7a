"""
Base Validation Rules for Form Rule Sets

This module provides the rule objects a FormRuleSet applies to form values.
Every rule returns a full ValidationResult rather than a bare boolean, so the
rule set can report the normalized value and the tagged failure reason for each
field.

The hierarchy supports:
- Declarative charset / length rules backed by the generic field validator
- Required field checks
- Custom validation functions, such as the identifier validators
"""

from typing import Callable, Optional

from ...core.charsets import normalize_upper
from ...core.constants import MSG_EMPTY_REQUIRED
from ...core.enums import FailureReason
from ...core.models import FieldRule, ValidationResult
from ...core.validator import validate


class ValidationRule:
    """
    Base class for all validation rules applied by a rule set.

    Subclasses override validate() to implement specific validation logic.
    """

    def validate(self, value: str) -> ValidationResult:
        """
        Validate a value against the rule.

        Args:
            value: Raw field value

        Returns:
            ValidationResult: Outcome of the check

        Raises:
            NotImplementedError: If the subclass doesn't implement this method
        """
        raise NotImplementedError("Validation rules must implement validate()")

    def describe(self) -> str:
        """Short human-readable description of the rule."""
        return type(self).__name__


class FieldValidator(ValidationRule):
    """
    Rule applying a declarative FieldRule through the generic validator.

    Attributes:
        rule (FieldRule): Charset, length and required-ness to enforce
    """

    def __init__(self, rule: FieldRule):
        """
        Initialize a field validator.

        Args:
            rule: Rule to enforce
        """
        self.rule = rule

    def validate(self, value: str) -> ValidationResult:
        """Validate a value with the generic field validator."""
        return validate(value, self.rule)

    def describe(self) -> str:
        description = self.rule.kind.name
        if self.rule.length:
            description += f" x{self.rule.length}"
        if self.rule.required:
            description += " (required)"
        return description


class RequiredRule(ValidationRule):
    """
    Rule rejecting values that are empty after trimming.

    Attributes:
        error_message (str): Message reported for an empty value
    """

    def __init__(self, error_message: str = MSG_EMPTY_REQUIRED):
        self.error_message = error_message

    def validate(self, value: str) -> ValidationResult:
        entry = normalize_upper(value)
        if not entry:
            return ValidationResult.failure(entry, FailureReason.EMPTY_REQUIRED_FIELD, self.error_message)
        return ValidationResult.success(entry)

    def describe(self) -> str:
        return "required"


class CustomRule(ValidationRule):
    """
    Rule for custom validation functions.

    Wraps any callable that takes a raw value and returns a ValidationResult,
    such as ``validate_contract_id``.

    Attributes:
        validator_func: Validation function
        name: Description reported by describe()
    """

    def __init__(self, validator_func: Callable[[str], ValidationResult], name: Optional[str] = None):
        """
        Initialize a custom validation rule.

        Args:
            validator_func: Function that takes a value and returns a ValidationResult
            name: Optional description, defaults to the function name
        """
        self.validator_func = validator_func
        self.name = name or getattr(validator_func, "__name__", "custom")

    def validate(self, value: str) -> ValidationResult:
        """Validate a value using the custom validation function."""
        return self.validator_func(value)

    def describe(self) -> str:
        return self.name
