import pytest

from tjlang.ast import (
    AssignStmt,
    Block,
    ForStmt,
    FunctionDecl,
    Identifier,
    IfStmt,
    MatchStmt,
    Pattern,
    PatternKind,
    Program,
    ReturnStmt,
    WhileStmt,
)
from tjlang.rules.function_length import FunctionLengthRule, count_statements


def test_none_counts_zero():
    assert count_statements(None) == 0


@pytest.mark.parametrize("n", [0, 1, 4])
def test_flat_block_counts_each_statement(n):
    block = Block([ReturnStmt() for _ in range(n)])
    assert count_statements(block) == n


def test_nested_block_counts_as_its_contents():
    inner = Block([ReturnStmt(), AssignStmt(name="x")])
    outer = Block([inner])
    assert count_statements(outer) == count_statements(inner)


def test_if_counts_itself_and_all_branches():
    then_block = Block([ReturnStmt(), ReturnStmt()])
    elif_block = Block([ReturnStmt()])
    else_block = Block([ReturnStmt(), ReturnStmt(), ReturnStmt()])
    stmt = IfStmt(
        condition=Identifier("c"),
        then_block=then_block,
        elif_branches=[(Identifier("d"), elif_block)],
        else_block=else_block,
    )
    expected = 1 + len(then_block.stmts) + len(elif_block.stmts) + len(else_block.stmts)
    assert count_statements(stmt) == expected


@pytest.mark.parametrize("cls", [WhileStmt, ForStmt])
def test_loops_count_body(cls):
    body = Block([ReturnStmt(), ReturnStmt()])
    assert count_statements(cls(body=body)) == 1 + len(body.stmts)


def test_match_counts_arms():
    arms = [
        (Pattern(PatternKind.WILDCARD), Block([ReturnStmt()])),
        (Pattern(PatternKind.WILDCARD), Block([ReturnStmt(), ReturnStmt()])),
    ]
    assert count_statements(MatchStmt(arms=arms)) == 1 + 1 + 2


def test_rule_reports_nothing_even_for_long_functions():
    body = Block([ReturnStmt() for _ in range(50)])
    program = Program([FunctionDecl(name="f", body=body)])
    assert FunctionLengthRule().analyze_program(program) == []


def test_rule_name():
    assert FunctionLengthRule().name == "function-length"