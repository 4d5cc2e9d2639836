from tjlang.ast import Block, FunctionDecl, Param, Program, StructDecl
from tjlang.issues import Severity
from tjlang.rules.duplicate_names import DuplicateNamesRule


def _func(name, params=()):
    return FunctionDecl(name=name, params=[Param(p) for p in params], body=Block())


def test_duplicate_function_reported():
    program = Program([_func("f"), _func("f")])
    issues = DuplicateNamesRule().analyze_program(program)
    assert len(issues) == 1
    issue = issues[0]
    assert issue.severity is Severity.ERROR
    assert issue.rule == "duplicate-function"
    assert issue.message == "Duplicate function name: 'f'"
    assert issue.location == "Function 'f' (declared multiple times)"


def test_every_repeat_is_reported():
    program = Program([_func("g"), _func("g"), _func("g")])
    issues = DuplicateNamesRule().analyze_program(program)
    assert [i.rule for i in issues] == ["duplicate-function"] * 2


def test_duplicate_parameter_reported():
    program = Program([_func("f", ["a", "b", "a"])])
    issues = DuplicateNamesRule().analyze_program(program)
    assert len(issues) == 1
    assert issues[0].rule == "duplicate-parameter"
    assert issues[0].message == "Duplicate parameter name: 'a'"
    assert issues[0].location == "Function 'f' parameter 'a'"


def test_function_issues_come_before_parameter_issues():
    program = Program([_func("f", ["x", "x"]), _func("f")])
    issues = DuplicateNamesRule().analyze_program(program)
    assert [i.rule for i in issues] == ["duplicate-function", "duplicate-parameter"]


def test_bodiless_functions_are_checked():
    program = Program([FunctionDecl(name="h", params=[Param("p"), Param("p")])])
    issues = DuplicateNamesRule().analyze_program(program)
    assert [i.rule for i in issues] == ["duplicate-parameter"]


def test_non_function_units_are_ignored():
    program = Program([StructDecl(name="f"), _func("f")])
    assert DuplicateNamesRule().analyze_program(program) == []


def test_rule_name():
    assert DuplicateNamesRule().name == "duplicate-names"