"""
Data models for form field validation.

This module defines the value objects passed into and returned from the
validators:

- FieldRule: Immutable rule selecting a charset policy and optional exact length
- ValidationResult: Outcome of validating one field value
- FormField: A named form input, used for bulk normalization
- FormValidationResult: Outcome of validating a whole form against a rule set
- PasswordCheck: Outcome of a password / confirmation comparison

None of these objects outlive a single validation call.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .enums import FailureReason, RuleKind
from .exceptions import RuleDefinitionError, ValidationError


@dataclass(frozen=True)
class FieldRule:
    """
    Declarative validation rule for a single form field.

    Attributes:
        kind (RuleKind): Charset policy the value must conform to
        length (int): Required exact length, or 0 for no fixed length
        required (bool): Whether an empty value is rejected
    """

    kind: RuleKind
    length: int = 0
    required: bool = False

    def __post_init__(self):
        """Validate rule fields after initialization."""
        if not isinstance(self.kind, RuleKind):
            raise RuleDefinitionError(f"kind must be a RuleKind enum, got {self.kind!r}")
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise RuleDefinitionError(f"length must be an integer, got {self.length!r}")
        if self.length < 0:
            raise RuleDefinitionError(f"length must be non-negative, got {self.length}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FieldRule":
        """
        Build a rule from its JSON representation.

        Args:
            data: Mapping with ``kind`` and optional ``length`` and ``required``

        Returns:
            FieldRule: The constructed rule

        Raises:
            RuleDefinitionError: If the kind is unknown or the length invalid
        """
        try:
            kind = RuleKind.from_code(data["kind"])
        except (KeyError, ValueError) as e:
            raise RuleDefinitionError(f"Invalid rule kind: {e}")
        return cls(
            kind=kind,
            length=data.get("length", 0),
            required=data.get("required", False),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the rule to its JSON representation."""
        return {"kind": self.kind.name, "length": self.length, "required": self.required}


@dataclass
class ValidationResult:
    """
    Container for the outcome of validating one field value.

    Attributes:
        is_valid (bool): Whether the value passed every check
        value (str): The normalized value for the caller to store back
        reason (Optional[FailureReason]): Violated constraint, on failure only
        message (Optional[str]): Human-readable failure text, on failure only
        context (Optional[Dict[str, Any]]): Additional context about the check
    """

    is_valid: bool
    value: str
    reason: Optional[FailureReason] = None
    message: Optional[str] = None
    context: Optional[Dict[str, Any]] = None

    @classmethod
    def success(cls, value: str, context: Optional[Dict[str, Any]] = None) -> "ValidationResult":
        """Create a passing result for a normalized value."""
        return cls(is_valid=True, value=value, context=context)

    @classmethod
    def failure(
        cls,
        value: str,
        reason: FailureReason,
        message: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> "ValidationResult":
        """Create a failing result tagged with the violated constraint."""
        return cls(is_valid=False, value=value, reason=reason, message=message, context=context)

    def __bool__(self) -> bool:
        return self.is_valid

    def raise_for_status(self) -> "ValidationResult":
        """
        Raise ValidationError if this result is a failure.

        Returns:
            ValidationResult: self, when the result is valid

        Raises:
            ValidationError: If the result is a failure
        """
        if not self.is_valid:
            raise ValidationError(self.message or "Validation failed", reason=self.reason)
        return self


@dataclass(frozen=True)
class FormField:
    """
    A named form input.

    Attributes:
        name (str): Field identifier
        value (str): Current field value
        input_type (str): HTML input type, e.g. ``text``, ``hidden``, ``submit``
    """

    name: str
    value: str
    input_type: str = "text"


@dataclass
class FormValidationResult:
    """
    Container for the outcome of validating a form against a rule set.

    Attributes:
        is_valid (bool): Whether every checked field passed
        values (Dict[str, str]): Normalized value per checked field
        errors (List[str]): ``"field: message"`` entries for failed fields
        field_results (Dict[str, ValidationResult]): Per-field outcomes
        context (Optional[Dict[str, Any]]): Additional context about the check
    """

    is_valid: bool
    values: Dict[str, str] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)
    field_results: Dict[str, ValidationResult] = field(default_factory=dict)
    context: Optional[Dict[str, Any]] = None

    @property
    def failed_fields(self) -> List[str]:
        """Names of fields that failed, in check order."""
        return [name for name, result in self.field_results.items() if not result.is_valid]

    def __bool__(self) -> bool:
        return self.is_valid


@dataclass
class PasswordCheck:
    """
    Outcome of comparing a password with its confirmation.

    The password and confirmation values are the ones the caller should write
    back to the form; a mismatch may clear one or both of them.

    Attributes:
        is_valid (bool): Whether the form may proceed
        password (str): Password value to store back
        confirmation (str): Confirmation value to store back
        reason (Optional[FailureReason]): Violated constraint, on failure only
        message (Optional[str]): Human-readable failure text, on failure only
        focus (Optional[str]): Name of the field the caller should focus next
    """

    is_valid: bool
    password: str
    confirmation: str
    reason: Optional[FailureReason] = None
    message: Optional[str] = None
    focus: Optional[str] = None

    def __bool__(self) -> bool:
        return self.is_valid
