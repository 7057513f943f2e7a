"""
Core validation components.

Charset primitives, the date checker, the generic field validation engine and
the value objects they exchange.
"""

from .charsets import is_allowed_charset, normalize, normalize_upper
from .dates import is_calendar_date, is_leap_year, validate_date
from .enums import CHARSETS, FailureReason, RuleKind
from .exceptions import ConfigurationError, RuleDefinitionError, ValidationError
from .models import FieldRule, FormField, FormValidationResult, PasswordCheck, ValidationResult
from .validator import validate, validate_entry

__all__ = [
    "CHARSETS",
    "ConfigurationError",
    "FailureReason",
    "FieldRule",
    "FormField",
    "FormValidationResult",
    "PasswordCheck",
    "RuleDefinitionError",
    "RuleKind",
    "ValidationError",
    "ValidationResult",
    "is_allowed_charset",
    "is_calendar_date",
    "is_leap_year",
    "normalize",
    "normalize_upper",
    "validate",
    "validate_date",
    "validate_entry",
]
