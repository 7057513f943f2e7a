"""Command Line Interface for form field validation.

This module provides a CLI for checking field values against the validation
rules without a form. It supports the following commands:
    - check: Validate a value against a rule kind, with optional exact length
    - date: Validate an MM/DD/YYYY date
    - field: Validate a contract ID, item NSN or RDD code
    - form: Validate a JSON object of field values against a JSON rule set

JSON input can be provided either as a direct string or as a file path prefixed with '@'.

The exit status is 0 when the input is valid and 1 when it is not.

Example Usage:
    python -m formcheck cli check ALPHANUMERIC " ab12 " --length 4
    python -m formcheck cli date 02/29/2024
    python -m formcheck cli field contract ABCDEF12HIJKL
    python -m formcheck cli form @rules.json '{"contract": "ab%", "sdate": "1/2/2020"}'
"""

import argparse
import logging
import sys
from typing import List, Optional

from formcheck.config import load_rule_set, parse_json_input
from formcheck.core.dates import validate_date
from formcheck.core.enums import RuleKind
from formcheck.core.exceptions import ConfigurationError, RuleDefinitionError
from formcheck.core.models import FieldRule
from formcheck.core.validator import validate
from formcheck.fields import validate_contract_id, validate_item_id, validate_rdd
from formcheck.utils.validation.reporter import ValidationReporter

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

FIELD_COMMANDS = {
    "contract": validate_contract_id,
    "item": validate_item_id,
    "rdd": validate_rdd,
}

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging for command-line use.

    Args:
        verbose (bool): Log at DEBUG level instead of WARNING.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)


def parse_rule_kind(value: str) -> RuleKind:
    """Parse a rule kind given by name or legacy numeric code.

    Args:
        value (str): Rule kind name (e.g. ``DIGITS``) or code (e.g. ``2``).

    Returns:
        RuleKind: The parsed rule kind.

    Raises:
        argparse.ArgumentTypeError: If the value names no rule kind.
    """
    try:
        return RuleKind.from_code(int(value) if value.isdigit() else value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(description="Form field validation CLI")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    check = subparsers.add_parser("check", help="Validate a value against a rule kind")
    check.add_argument("kind", type=parse_rule_kind, help="Rule kind name or numeric code")
    check.add_argument("value", help="Value to validate")
    check.add_argument("--length", type=int, default=0, help="Required exact length (0 for any)")
    check.add_argument("--required", action="store_true", help="Reject empty values")

    date = subparsers.add_parser("date", help="Validate an MM/DD/YYYY date")
    date.add_argument("value", help="Date to validate")

    field = subparsers.add_parser("field", help="Validate an identifier field")
    field.add_argument("field", choices=sorted(FIELD_COMMANDS), help="Field type")
    field.add_argument("value", help="Value to validate")

    form = subparsers.add_parser("form", help="Validate form values against a rule set")
    form.add_argument("rules", help="JSON string or @filename containing the rule set")
    form.add_argument("values", help="JSON string or @filename containing field values")
    form.add_argument("--fail-fast", action="store_true", help="Stop at the first failing field")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Args:
        argv (Optional[List[str]]): Arguments to parse, defaults to sys.argv.

    Returns:
        int: Exit status, 0 if the input is valid, 1 if invalid, 2 on usage errors.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 2

    configure_logging(args.verbose)

    if args.command == "check":
        try:
            rule = FieldRule(kind=args.kind, length=args.length, required=args.required)
        except RuleDefinitionError as e:
            print(e, file=sys.stderr)
            return 2
        result = validate(args.value, rule)

    elif args.command == "date":
        result = validate_date(args.value)

    elif args.command == "field":
        result = FIELD_COMMANDS[args.field](args.value)

    else:
        try:
            rule_set = load_rule_set(args.rules)
            values = parse_json_input(args.values)
        except (ConfigurationError, RuleDefinitionError) as e:
            logger.error(f"Could not load form input: {e}")
            print(e, file=sys.stderr)
            return 2
        if not isinstance(values, dict):
            print("Form values must be a JSON object", file=sys.stderr)
            return 2
        result = rule_set.validate(values, fail_fast=args.fail_fast)

    if args.json:
        print(ValidationReporter.to_json(result))
    else:
        print(ValidationReporter.format_result(result))

    return 0 if result.is_valid else 1


if __name__ == "__main__":
    sys.exit(main())
