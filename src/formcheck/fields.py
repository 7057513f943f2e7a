"""
Validators for specific form fields.

Each validator trims and upper-cases its input and returns a ValidationResult
whose ``value`` the caller should write back to the form. The identifier
validators apply their own check order and messages on top of the generic
charset and length checks.

Search-form helpers (``check_requisition_entry``, ``check_ordermanage_entry``)
validate several named fields and stop at the first failure.
"""

import logging
from typing import Iterable, List, Mapping

from .core.charsets import is_allowed_charset, normalize, normalize_upper
from .core.constants import (
    ALPHANUMERIC,
    CONTRACT_ID_LENGTH,
    CONTRACT_ID_NUMERIC_SLICE,
    DIGITS,
    ITEM_ID_LENGTH,
    MSG_CONTRACT_CHARACTERS,
    MSG_CONTRACT_EMPTY,
    MSG_CONTRACT_LENGTH,
    MSG_CONTRACT_NUMERIC,
    MSG_DISALLOWED_CHARACTER,
    MSG_ITEM_CHARACTERS,
    MSG_ITEM_LENGTH,
    MSG_PASSWORD_MISMATCH,
    MSG_RDD_DIGITS,
    MSG_RDD_FIRST,
    MSG_RDD_LENGTH,
    PASSWORD_CONFIRM_FIELD,
    PASSWORD_FIELD,
    RDD_FIRST_CHARS,
    RDD_LENGTH,
    UNNORMALIZED_INPUT_TYPES,
)
from .core.enums import FailureReason, RuleKind
from .core.models import FormField, FormValidationResult, PasswordCheck, ValidationResult
from .core.validator import validate_entry
from .utils.validation.ruleset import order_management_rule_set, requisition_rule_set

logger = logging.getLogger(__name__)


def validate_contract_id(value: str) -> ValidationResult:
    """
    Validate a contract identifier.

    A contract ID is required, exactly 13 letters and digits, with digits in
    positions 7 and 8. Length is checked before characters.

    Args:
        value: Raw contract ID

    Returns:
        ValidationResult: Outcome carrying the trimmed, upper-cased ID

    Example:
        >>> validate_contract_id("abcdef12hijkl").value
        'ABCDEF12HIJKL'
    """
    contract_id = normalize_upper(value)

    if not contract_id:
        return ValidationResult.failure(contract_id, FailureReason.EMPTY_REQUIRED_FIELD, MSG_CONTRACT_EMPTY)

    if len(contract_id) != CONTRACT_ID_LENGTH:
        logger.debug(f"Contract ID {contract_id!r} is {len(contract_id)} characters")
        return ValidationResult.failure(contract_id, FailureReason.WRONG_LENGTH, MSG_CONTRACT_LENGTH)

    if not is_allowed_charset(contract_id, ALPHANUMERIC, case_sensitive=True):
        return ValidationResult.failure(
            contract_id, FailureReason.DISALLOWED_CHARACTER, MSG_CONTRACT_CHARACTERS
        )

    if not is_allowed_charset(contract_id[CONTRACT_ID_NUMERIC_SLICE], DIGITS, case_sensitive=True):
        logger.debug(f"Contract ID {contract_id!r} has non-numeric positions 7-8")
        return ValidationResult.failure(contract_id, FailureReason.NON_NUMERIC_SEGMENT, MSG_CONTRACT_NUMERIC)

    return ValidationResult.success(contract_id)


def validate_item_id(value: str) -> ValidationResult:
    """
    Validate an item national stock number.

    An empty value passes here; whether the field is required is decided when
    the form is submitted. Otherwise the NSN must be 13 letters and digits.
    """
    item_id = normalize_upper(value)

    if item_id and len(item_id) != ITEM_ID_LENGTH:
        return ValidationResult.failure(item_id, FailureReason.WRONG_LENGTH, MSG_ITEM_LENGTH)

    if not is_allowed_charset(item_id, ALPHANUMERIC, case_sensitive=True):
        return ValidationResult.failure(item_id, FailureReason.DISALLOWED_CHARACTER, MSG_ITEM_CHARACTERS)

    return ValidationResult.success(item_id)


def validate_rdd(value: str) -> ValidationResult:
    """
    Validate a required delivery date code.

    An RDD is optional. When present it is three characters: a digit or one of
    the RDD letters, followed by two digits.
    """
    rdd = normalize_upper(value)
    if not rdd:
        return ValidationResult.success(rdd)

    if len(rdd) != RDD_LENGTH:
        return ValidationResult.failure(rdd, FailureReason.WRONG_LENGTH, MSG_RDD_LENGTH)

    if not is_allowed_charset(rdd[0], RDD_FIRST_CHARS, case_sensitive=True):
        return ValidationResult.failure(rdd, FailureReason.DISALLOWED_CHARACTER, MSG_RDD_FIRST)

    if not is_allowed_charset(rdd[1:], DIGITS, case_sensitive=True):
        return ValidationResult.failure(rdd, FailureReason.DISALLOWED_CHARACTER, MSG_RDD_DIGITS)

    return ValidationResult.success(rdd)


def trim_value(value: str) -> str:
    """Trim outer spaces from a field value without changing case."""
    return normalize(value)


def uppercase_fields(fields: Iterable[FormField]) -> List[FormField]:
    """
    Upper-case the values of a form's fields.

    Hidden and submit inputs are returned unchanged.

    Args:
        fields: Form fields in form order

    Returns:
        List[FormField]: New fields with upper-cased values, in the same order
    """
    normalized = []
    for form_field in fields:
        if form_field.input_type in UNNORMALIZED_INPUT_TYPES:
            normalized.append(form_field)
        else:
            normalized.append(
                FormField(
                    name=form_field.name,
                    value=form_field.value.upper(),
                    input_type=form_field.input_type,
                )
            )
    return normalized


def check_document(value: str) -> ValidationResult:
    """Validate a document number search pattern."""
    return validate_entry(value, RuleKind.WILDCARD)


def check_contract(value: str) -> ValidationResult:
    """Validate a contract number search pattern."""
    return validate_entry(value, RuleKind.WILDCARD)


def check_priority(value: str) -> ValidationResult:
    """Validate a numeric priority filter."""
    return validate_entry(value, RuleKind.DIGITS)


def check_date(value: str) -> ValidationResult:
    """Validate an optional ``MM/DD/YYYY`` date."""
    return validate_entry(value, RuleKind.DATE)


def check_requisition_entry(values: Mapping[str, str]) -> FormValidationResult:
    """
    Validate a requisition search form.

    Checks ``document``, ``priority_filter``, ``sdate`` and ``edate`` in that
    order and stops at the first failing field.
    """
    return requisition_rule_set().validate(values, fail_fast=True)


def check_ordermanage_entry(values: Mapping[str, str]) -> FormValidationResult:
    """
    Validate an order management search form.

    Checks ``contract``, ``sdate`` and ``edate`` in that order and stops at the
    first failing field.
    """
    return order_management_rule_set().validate(values, fail_fast=True)


def confirm_password(password: str, confirmation: str, changed_field: str = PASSWORD_FIELD) -> PasswordCheck:
    """
    Compare a password entry with its confirmation.

    When the password itself changed, it is trimmed and, if it no longer
    matches, the confirmation is cleared so the user re-types it. A password
    with characters outside letters, digits and periods clears both fields.
    When the confirmation changed, a mismatch clears both fields.

    Args:
        password: Current password field value
        confirmation: Current confirmation field value
        changed_field: ``"passwd"`` or ``"passwd_confirm"``, the field the
            user just edited

    Returns:
        PasswordCheck: Outcome with the values to write back and the field
        to focus next

    Raises:
        ValueError: If changed_field names neither password field
    """
    if changed_field == PASSWORD_FIELD:
        password = normalize(password)
        if password == confirmation:
            return PasswordCheck(is_valid=True, password=password, confirmation=confirmation)
        if not is_allowed_charset(password, RuleKind.ALPHANUMERIC_DOT.charset, case_sensitive=False):
            logger.debug("Password contains disallowed characters; clearing both fields")
            return PasswordCheck(
                is_valid=False,
                password="",
                confirmation="",
                reason=FailureReason.DISALLOWED_CHARACTER,
                message=MSG_DISALLOWED_CHARACTER,
                focus=PASSWORD_FIELD,
            )
        return PasswordCheck(is_valid=True, password=password, confirmation="", focus=PASSWORD_CONFIRM_FIELD)

    if changed_field == PASSWORD_CONFIRM_FIELD:
        if password != confirmation:
            logger.debug("Password confirmation mismatch; clearing both fields")
            return PasswordCheck(
                is_valid=False,
                password="",
                confirmation="",
                reason=FailureReason.PASSWORD_MISMATCH,
                message=MSG_PASSWORD_MISMATCH,
                focus=PASSWORD_FIELD,
            )
        return PasswordCheck(is_valid=True, password=password, confirmation=confirmation)

    raise ValueError(f"Unknown password field: {changed_field}")
