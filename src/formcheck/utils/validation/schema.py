"""
Schema Validation for Rule Set Definitions

This module provides JSON schema-based validation for rule set documents, the
JSON form in which field rules are declared outside of code. It supports:
- A JSON schema describing rule set documents
- Validation of documents against that schema
- Raising RuleDefinitionError with the schema violation details

A rule set document looks like:

    {
        "name": "order_management",
        "fields": {
            "contract": {"kind": "WILDCARD", "required": true},
            "nsn": {"validator": "item_id"},
            "sdate": {"kind": 5}
        }
    }

Each field declares either a ``kind`` (RuleKind name or legacy integer code,
with optional ``length`` and ``required``) or a named ``validator``.
"""

import logging
from typing import Any, Dict

from jsonschema import Draft7Validator
from jsonschema import ValidationError as JsonSchemaError

from ...core.enums import RuleKind
from ...core.exceptions import RuleDefinitionError

logger = logging.getLogger(__name__)

FIELD_VALIDATOR_NAMES = ["contract_id", "item_id", "rdd"]

FIELD_RULE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "kind": {
            "oneOf": [
                {"type": "string", "enum": [kind.name for kind in RuleKind]},
                {"type": "integer", "minimum": 0},
            ]
        },
        "length": {"type": "integer", "minimum": 0},
        "required": {"type": "boolean"},
        "validator": {"type": "string", "enum": FIELD_VALIDATOR_NAMES},
    },
    "oneOf": [
        {"required": ["kind"], "not": {"required": ["validator"]}},
        {
            "required": ["validator"],
            "not": {"anyOf": [{"required": ["kind"]}, {"required": ["length"]}]},
        },
    ],
    "additionalProperties": False,
}

RULE_SET_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "fields": {
            "type": "object",
            "additionalProperties": FIELD_RULE_SCHEMA,
            "minProperties": 1,
        },
    },
    "required": ["fields"],
    "additionalProperties": False,
}


class RuleSetSchemaValidator:
    """
    JSON Schema-based validator for rule set documents.

    Attributes:
        schema (Dict[str, Any]): JSON schema documents are checked against
    """

    def __init__(self, schema: Dict[str, Any] = RULE_SET_SCHEMA):
        """
        Initialize the validator.

        Args:
            schema: JSON schema to validate documents against
        """
        Draft7Validator.check_schema(schema)
        self.schema = schema
        self._validator = Draft7Validator(schema)

    def errors(self, document: Any) -> list:
        """
        List schema violations in a document.

        Args:
            document: Parsed JSON document

        Returns:
            list: Human-readable violation messages, empty when the document is valid
        """
        messages = []
        errors = sorted(self._validator.iter_errors(document), key=lambda e: [str(p) for p in e.path])
        for error in errors:
            location = "/".join(str(part) for part in error.path) or "<root>"
            messages.append(f"{location}: {error.message}")
        return messages

    def validate(self, document: Any) -> None:
        """
        Validate a rule set document against the schema.

        Args:
            document: Parsed JSON document

        Raises:
            RuleDefinitionError: If the document does not match the schema
        """
        try:
            self._validator.validate(document)
        except JsonSchemaError:
            messages = self.errors(document)
            logger.warning(f"Rule set document rejected: {'; '.join(messages)}")
            raise RuleDefinitionError(f"Schema validation failed: {'; '.join(messages)}")
