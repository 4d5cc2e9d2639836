import pytest

from tjlang.categories import (
    analysis_error_category,
    severity_description,
    syntax_error_category,
)


@pytest.mark.parametrize(
    "msg, expected",
    [
        ("token recognition error at: '$'", "Lexical Error"),
        ("missing ')' at '{'", "Syntax Error - Missing Token"),
        ("mismatched input 'x'", "Syntax Error - Unexpected Token"),
        ("no viable alternative at input", "Syntax Error - Invalid Grammar"),
        ("extraneous input", "Parse Error"),
    ],
)
def test_syntax_error_category(msg, expected):
    assert syntax_error_category(msg) == expected


def test_syntax_category_priority():
    assert syntax_error_category("token recognition error, missing") == "Lexical Error"
    assert syntax_error_category("mismatched input, missing").endswith("Missing Token")


@pytest.mark.parametrize(
    "rules, group",
    [
        (("unused-parameter", "unused-variable"), "Unused Code"),
        (("duplicate-function", "duplicate-parameter"), "Naming Issues"),
        (("high-complexity", "deep-nesting", "long-function-name"), "Complexity"),
        (("dead-code", "unreachable-code"), "Dead Code"),
        (("constant-condition",), "Logic Issues"),
    ],
)
def test_code_quality_categories(rules, group):
    assert {analysis_error_category(rule) for rule in rules} == {f"Code Quality - {group}"}


def test_type_and_fallback_categories():
    assert analysis_error_category("type-mismatch") == "Type Safety"
    assert analysis_error_category("type-safety") == "Type Safety"
    assert analysis_error_category("magic-number") == "Static Analysis"


@pytest.mark.parametrize(
    "severity, ending",
    [("ERROR", "must be fixed"), ("WARNING", "should be addressed"), ("INFO", "best practices")],
)
def test_severity_description(severity, ending):
    text = severity_description(severity)
    assert text.startswith("This is ")
    assert text.endswith(ending)


def test_unknown_severity_is_case_sensitive():
    assert severity_description("error") == "Unknown severity level"