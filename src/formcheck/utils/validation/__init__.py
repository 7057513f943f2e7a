"""
Validation System for Form Rule Sets

This package applies field rules to whole forms and reports the outcome.

Key Components:
- ValidationRule: Base class for rules a rule set applies to a field
- FieldValidator: Applies a declarative FieldRule via the generic validator
- RequiredRule / CustomRule: Required-field and function-backed rules
- FormRuleSet: Manages rules per field and validates form values
- RuleSetSchemaValidator: JSON schema validation of rule set documents
- ValidationReporter: Formats and outputs validation results
"""

from .base import CustomRule, FieldValidator, RequiredRule, ValidationRule
from .reporter import ValidationReporter
from .ruleset import FormRuleSet, order_management_rule_set, requisition_rule_set
from .schema import RULE_SET_SCHEMA, RuleSetSchemaValidator

__all__ = [
    "ValidationRule",
    "FieldValidator",
    "RequiredRule",
    "CustomRule",
    "FormRuleSet",
    "requisition_rule_set",
    "order_management_rule_set",
    "RuleSetSchemaValidator",
    "RULE_SET_SCHEMA",
    "ValidationReporter",
]
