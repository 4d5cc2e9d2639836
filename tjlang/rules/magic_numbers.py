"""Reports numeric literals that should be named constants."""

from __future__ import annotations

from typing import Iterator, List, Optional, Union

from ..ast import (
    AssignStmt,
    BinaryExpr,
    Block,
    CallExpr,
    FloatLiteral,
    ForStmt,
    IfStmt,
    IndexExpr,
    IntLiteral,
    MapLiteral,
    MatchStmt,
    MemberExpr,
    Node,
    Program,
    ReturnStmt,
    SetLiteral,
    TupleLiteral,
    UnaryExpr,
    VecLiteral,
    WhileStmt,
)
from ..issues import AnalysisRule, Issue, Severity

_ALLOWED_INTS = frozenset({0, 1, 2})


def is_magic_number(literal: Union[IntLiteral, FloatLiteral]) -> bool:
    """Integers other than 0, 1 and 2, and non-zero floats, are magic."""
    if isinstance(literal, IntLiteral):
        return literal.value not in _ALLOWED_INTS
    if isinstance(literal, FloatLiteral):
        return literal.value != 0.0
    raise TypeError(f"not a numeric literal: {type(literal).__name__}")


def _numbers(node: Optional[Node]) -> Iterator[Union[IntLiteral, FloatLiteral]]:
    """Yield the numeric literals reachable from ``node``, in source order."""
    if node is None:
        return
    if isinstance(node, (IntLiteral, FloatLiteral)):
        yield node
    elif isinstance(node, BinaryExpr):
        yield from _numbers(node.lhs)
        yield from _numbers(node.rhs)
    elif isinstance(node, UnaryExpr):
        yield from _numbers(node.operand)
    elif isinstance(node, CallExpr):
        yield from _numbers(node.callee)
        for arg in node.args:
            yield from _numbers(arg)
    elif isinstance(node, MemberExpr):
        yield from _numbers(node.obj)
    elif isinstance(node, IndexExpr):
        yield from _numbers(node.obj)
        yield from _numbers(node.index)
    elif isinstance(node, (VecLiteral, SetLiteral, TupleLiteral)):
        for element in node.elements:
            yield from _numbers(element)
    elif isinstance(node, MapLiteral):
        for key, value in node.entries:
            yield from _numbers(key)
            yield from _numbers(value)
    elif isinstance(node, (ReturnStmt, AssignStmt)):
        yield from _numbers(node.value)
    elif isinstance(node, Block):
        for stmt in node.stmts:
            yield from _numbers(stmt)
    elif isinstance(node, IfStmt):
        yield from _numbers(node.condition)
        yield from _numbers(node.then_block)
        for condition, block in node.elif_branches:
            yield from _numbers(condition)
            yield from _numbers(block)
        yield from _numbers(node.else_block)
    elif isinstance(node, WhileStmt):
        yield from _numbers(node.condition)
        yield from _numbers(node.body)
    elif isinstance(node, ForStmt):
        yield from _numbers(node.iterable)
        yield from _numbers(node.body)
    elif isinstance(node, MatchStmt):
        yield from _numbers(node.expression)
        for guard in node.guards:
            yield from _numbers(guard)
        for _pattern, block in node.arms:
            yield from _numbers(block)


def _render(literal: Union[IntLiteral, FloatLiteral]) -> str:
    if isinstance(literal, FloatLiteral):
        return f"{literal.value:f}"
    return str(literal.value)


class MagicNumbersRule(AnalysisRule):
    """Suggests naming numeric literals used inside function bodies."""

    name = "magic-numbers"

    def analyze_program(self, program: Program) -> List[Issue]:
        issues: List[Issue] = []
        for func in program.functions():
            if func.body is None:
                continue
            context = f"Function '{func.name}'"
            issues.extend(
                Issue(
                    severity=Severity.INFO,
                    rule="magic-number",
                    message=(
                        f"Magic number {_render(literal)} should be a named constant"
                    ),
                    location=context,
                )
                for literal in _numbers(func.body)
                if is_magic_number(literal)
            )
        return issues