"""
Validation Reporter Components

This module provides components for formatting and outputting validation
results in various formats. It supports:
- Human-readable string formatting
- Dictionary conversion
- JSON serialization

Both single-field results (ValidationResult) and whole-form results
(FormValidationResult) are supported.
"""

import json
from typing import Any, Dict, Union

from ...core.models import FormValidationResult, ValidationResult

Result = Union[ValidationResult, FormValidationResult]


class ValidationReporter:
    """
    Reporter for formatting and outputting validation results.

    This class provides static methods for converting results into formats
    suitable for different use cases, such as terminal output, dictionary
    representation, or JSON serialization.
    """

    @staticmethod
    def format_result(result: Result) -> str:
        """
        Format a validation result as a human-readable string.

        Args:
            result: ValidationResult or FormValidationResult to format

        Returns:
            str: Formatted string representation of the validation result

        Example:
            >>> result = ValidationResult.failure("13/01/2020", FailureReason.INVALID_CALENDAR_DATE,
            ...                                   "Invalid date (check your calendar)!")
            >>> print(ValidationReporter.format_result(result))
            Validation failed: Invalid date (check your calendar)!
              reason: invalid_calendar_date
              value: '13/01/2020'
        """
        if isinstance(result, FormValidationResult):
            return ValidationReporter._format_form_result(result)

        if result.is_valid:
            lines = ["Validation passed", f"  value: {result.value!r}"]
        else:
            lines = [
                f"Validation failed: {result.message}",
                f"  reason: {result.reason.value if result.reason else 'unknown'}",
                f"  value: {result.value!r}",
            ]

        if result.context:
            for key, value in result.context.items():
                lines.append(f"  {key}: {value}")

        return "\n".join(lines)

    @staticmethod
    def _format_form_result(result: FormValidationResult) -> str:
        lines = []

        if not result.is_valid:
            lines.append("Validation failed with the following errors:")
            for error in result.errors:
                lines.append(f"  - {error}")
        else:
            lines.append("Validation passed successfully")

        if result.values:
            lines.append("\nValues:")
            for field, value in result.values.items():
                lines.append(f"  {field}: {value!r}")

        return "\n".join(lines)

    @staticmethod
    def to_dict(result: Result) -> Dict[str, Any]:
        """
        Convert a validation result to a dictionary.

        Args:
            result: ValidationResult or FormValidationResult to convert

        Returns:
            Dict[str, Any]: Dictionary representation of the validation result

        Example:
            >>> ValidationReporter.to_dict(ValidationResult.success("AB12"))
            {'is_valid': True, 'value': 'AB12', 'reason': None, 'message': None, 'context': None}
        """
        if isinstance(result, FormValidationResult):
            return {
                "is_valid": result.is_valid,
                "values": dict(result.values),
                "errors": list(result.errors),
                "fields": {
                    field: ValidationReporter.to_dict(field_result)
                    for field, field_result in result.field_results.items()
                },
                "context": result.context,
            }

        return {
            "is_valid": result.is_valid,
            "value": result.value,
            "reason": result.reason.value if result.reason else None,
            "message": result.message,
            "context": result.context,
        }

    @staticmethod
    def to_json(result: Result) -> str:
        """
        Convert a validation result to JSON.

        Args:
            result: ValidationResult or FormValidationResult to convert

        Returns:
            str: JSON string representation of the validation result
        """
        return json.dumps(ValidationReporter.to_dict(result), indent=2)
