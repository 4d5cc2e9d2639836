from tjlang.ast import Block, FunctionDecl, Program, ReturnStmt
from tjlang.issues import Severity
from tjlang.rules.type_safety import TypeSafetyRule


def _func(name, body=True):
    return FunctionDecl(name=name, body=Block([ReturnStmt()]) if body else None)


def test_lowercase_type_in_name_is_reported():
    issues = TypeSafetyRule().analyze_program(Program([_func("checktype")]))
    assert len(issues) == 1
    issue = issues[0]
    assert issue.rule == "type-safety"
    assert issue.severity is Severity.WARNING
    assert issue.message == "Function 'checktype' may have type safety issues"
    assert issue.location == "Function 'checktype'"


def test_capitalised_type_in_name_is_reported():
    issues = TypeSafetyRule().analyze_program(Program([_func("getType")]))
    assert [i.location for i in issues] == ["Function 'getType'"]


def test_other_names_are_not_reported():
    assert TypeSafetyRule().analyze_program(Program([_func("compute")])) == []


def test_function_without_body_is_skipped():
    program = Program([_func("typeCheck", body=False)])
    assert TypeSafetyRule().analyze_program(program) == []


def test_one_issue_per_matching_function_in_order():
    program = Program([_func("aType"), _func("plain"), _func("typeB")])
    issues = TypeSafetyRule().analyze_program(program)
    assert [i.location for i in issues] == ["Function 'aType'", "Function 'typeB'"]


def test_rule_name():
    assert TypeSafetyRule().name == "type-safety"