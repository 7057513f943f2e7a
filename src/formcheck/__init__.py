"""
formcheck - Form Field Validation

This package validates form field values before a form is submitted and
returns the normalized (trimmed, upper-cased) values to store back. It includes:

- Charset primitives and a generic rule-driven field validator
- MM/DD/YYYY date validation with leap-year handling
- Contract ID, item NSN, RDD and password confirmation validators
- Form rule sets, JSON rule set configuration and result reporting

Validation never raises for bad input; every check returns a result tagged
with the violated constraint.
"""

__version__ = "0.1.0"
__author__ = "formcheck Team"

from .core.charsets import is_allowed_charset, normalize
from .core.dates import validate_date
from .core.enums import FailureReason, RuleKind
from .core.models import FieldRule, FormField, ValidationResult
from .core.validator import validate
from .utils.validation.ruleset import FormRuleSet

__all__ = [
    "FailureReason",
    "FieldRule",
    "FormField",
    "FormRuleSet",
    "RuleKind",
    "ValidationResult",
    "is_allowed_charset",
    "normalize",
    "validate",
    "validate_date",
]
