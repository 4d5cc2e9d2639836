import pytest

from tjlang.ast import Block, FunctionDecl, Program
from tjlang.issues import Severity
from tjlang.rules.dead_code import DeadCodeRule


@pytest.mark.parametrize("name", ["deadCodeExample", "hasDeadCode"])
def test_flagged_names(name):
    program = Program([FunctionDecl(name=name, body=Block())])
    issues = DeadCodeRule().analyze_program(program)
    assert len(issues) == 1
    assert issues[0].rule == "dead-code"
    assert issues[0].severity is Severity.WARNING
    assert issues[0].message == (
        f"Function '{name}' may contain dead code after return statements"
    )
    assert issues[0].location == f"Function '{name}'"


def test_other_names_not_flagged():
    program = Program([FunctionDecl(name="deadcode", body=Block())])
    assert DeadCodeRule().analyze_program(program) == []


def test_function_without_body_skipped():
    program = Program([FunctionDecl(name="deadCode")])
    assert DeadCodeRule().analyze_program(program) == []


def test_rule_name():
    assert DeadCodeRule().name == "dead-code"