"""
Custom exceptions for the form validation package.

Validation outcomes are never raised: a rejected field value is reported through
a result object. The exceptions here cover misuse of the package itself, such as
malformed rule definitions or unreadable configuration, plus an opt-in
ValidationError for callers that prefer exceptions over result checks.
"""


class ValidationError(Exception):
    """
    Raised on request when a validation result is a failure.

    Only raised by ``ValidationResult.raise_for_status()``; the validators
    themselves always return results.

    Attributes:
        reason: FailureReason of the failed result, if known
    """

    def __init__(self, message: str, reason=None):
        super().__init__(message)
        self.reason = reason

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class RuleDefinitionError(Exception):
    """
    Raised when a field rule or rule set definition is invalid.

    Examples:
        * Negative exact length
        * Unknown rule kind name
        * Rule set document not matching the rule set schema
    """

    def __str__(self) -> str:
        """Format rule definition error message."""
        return f"Rule Definition Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when configuration cannot be read.

    Examples:
        * Rule set file not found
        * Malformed JSON
    """
