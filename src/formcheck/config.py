"""
Rule set configuration loading.

Rule sets can be declared in JSON instead of code. This module reads such a
declaration from a dict, a JSON string or a file reference (``@path``), checks
it against the rule set schema and builds a FormRuleSet from it.

File references are resolved relative to the current working directory unless
absolute.
"""

import json
import logging
import os
from typing import Any, Callable, Dict, Union

from .core.exceptions import ConfigurationError
from .core.models import FieldRule, ValidationResult
from .fields import validate_contract_id, validate_item_id, validate_rdd
from .utils.validation.base import CustomRule, RequiredRule
from .utils.validation.ruleset import FormRuleSet
from .utils.validation.schema import RuleSetSchemaValidator

logger = logging.getLogger(__name__)

FIELD_VALIDATORS: Dict[str, Callable[[str], ValidationResult]] = {
    "contract_id": validate_contract_id,
    "item_id": validate_item_id,
    "rdd": validate_rdd,
}

DEFAULT_RULE_SET_NAME = "form"


def parse_json_input(json_str: str) -> Any:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path prefixed with '@'.

    Returns:
        Any: Parsed JSON data.

    Raises:
        ConfigurationError: If the JSON is invalid or the specified file is not found.
    """
    if json_str.startswith("@"):
        file_path = json_str[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)

        if not os.path.exists(file_path):
            raise ConfigurationError(f"File not found: {file_path}")

        try:
            with open(file_path, "r") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {file_path}: {e}")

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON input: {e}")


def build_rule_set(document: Dict[str, Any]) -> FormRuleSet:
    """
    Build a rule set from a parsed rule set document.

    Args:
        document: Rule set document

    Returns:
        FormRuleSet: Rule set with one entry per declared field

    Raises:
        RuleDefinitionError: If the document does not match the schema
    """
    RuleSetSchemaValidator().validate(document)

    rule_set = FormRuleSet(document.get("name", DEFAULT_RULE_SET_NAME))
    for field, spec in document["fields"].items():
        if "validator" in spec:
            if spec.get("required", False):
                rule_set.add_rule(field, RequiredRule())
            rule_set.add_rule(field, CustomRule(FIELD_VALIDATORS[spec["validator"]], spec["validator"]))
            continue

        rule_set.add_rule(field, FieldRule.from_dict(spec))

    logger.info(f"Loaded rule set '{rule_set.name}' with {len(rule_set.fields)} fields")
    return rule_set


def load_rule_set(source: Union[str, Dict[str, Any]]) -> FormRuleSet:
    """
    Load a rule set from a dict, a JSON string or an ``@path`` file reference.

    Args:
        source: Rule set document or JSON source

    Returns:
        FormRuleSet: The loaded rule set

    Raises:
        ConfigurationError: If the source cannot be read or parsed
        RuleDefinitionError: If the document does not describe a valid rule set
    """
    document = parse_json_input(source) if isinstance(source, str) else source
    return build_rule_set(document)
