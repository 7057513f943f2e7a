"""
Tests for the command line interface.
"""

import json

import pytest

from formcheck.cli import create_parser, main, parse_rule_kind
from formcheck.core.enums import RuleKind


def test_parse_rule_kind():
    assert parse_rule_kind("DIGITS") is RuleKind.DIGITS
    assert parse_rule_kind("20") is RuleKind.RDD


def test_parser_rejects_unknown_kind(capsys):
    with pytest.raises(SystemExit):
        create_parser().parse_args(["check", "NOPE", "x"])


def test_no_command_prints_help(capsys):
    assert main([]) == 2
    assert "usage" in capsys.readouterr().out.lower()


def test_check_valid(capsys):
    assert main(["check", "ALPHANUMERIC", " ab12 ", "--length", "4"]) == 0
    assert "'AB12'" in capsys.readouterr().out


def test_check_invalid_json_output(capsys):
    assert main(["--json", "check", "2", "12a"]) == 1
    data = json.loads(capsys.readouterr().out)
    assert data["reason"] == "disallowed_character"
    assert data["value"] == "12A"


def test_check_negative_length(capsys):
    assert main(["check", "DIGITS", "1", "--length", "-1"]) == 2
    assert "non-negative" in capsys.readouterr().err


def test_check_required(capsys):
    assert main(["check", "DIGITS", "", "--required"]) == 1


def test_date(capsys):
    assert main(["date", "02/29/2024"]) == 0
    assert main(["date", "02/29/2023"]) == 1
    assert "check your calendar" in capsys.readouterr().out


@pytest.mark.parametrize(
    "field, value, status",
    [
        ("contract", "ABCDEF12HIJKL", 0),
        ("contract", "ABCDEFGHIJKLM", 1),
        ("item", "", 0),
        ("rdd", "A12", 1),
    ],
)
def test_field(field, value, status):
    assert main(["field", field, value]) == status


def test_form(tmp_path, capsys):
    rules = tmp_path / "rules.json"
    rules.write_text(json.dumps({"fields": {"qty": {"kind": "DIGITS"}, "sdate": {"kind": "DATE"}}}))

    assert main(["form", f"@{rules}", '{"qty": "12", "sdate": "1/1/2020"}']) == 0
    assert main(["--json", "form", f"@{rules}", '{"qty": "x", "sdate": "4/31/2020"}']) == 1
    out = capsys.readouterr().out
    data = json.loads(out[out.index("{") :])
    assert data["errors"] == [
        "qty: Invalid characters found in field",
        "sdate: Invalid date (check your calendar)!",
    ]


def test_form_bad_input(tmp_path, capsys):
    assert main(["form", "@" + str(tmp_path / "missing.json"), "{}"]) == 2
    assert main(["form", '{"fields": {"a": {"kind": "DIGITS"}}}', "[1, 2]"]) == 2
    assert main(["form", '{"fields": {}}', "{}"]) == 2


def test_form_numeric_values(capsys):
    rules = '{"fields": {"priority": {"kind": "DIGITS", "length": 2}}}'
    assert main(["form", rules, '{"priority": 12}']) == 0
    assert main(["form", rules, '{"priority": 0}']) == 1
    assert "Must be 2 characters" in capsys.readouterr().out
