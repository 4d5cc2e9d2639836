"""Reports function parameters that the function body never mentions."""

from __future__ import annotations

from typing import Iterator, List, Optional, Set

from ..ast import (
    AssignStmt,
    BinaryExpr,
    Block,
    CallExpr,
    ForStmt,
    Identifier,
    IfStmt,
    IndexExpr,
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


def _names(node: Optional[Node]) -> Iterator[str]:
    """Yield every name referenced by an expression or statement."""
    if node is None:
        return
    if isinstance(node, Identifier):
        yield node.name
    elif isinstance(node, BinaryExpr):
        yield from _names(node.lhs)
        yield from _names(node.rhs)
    elif isinstance(node, UnaryExpr):
        yield from _names(node.operand)
    elif isinstance(node, CallExpr):
        yield from _names(node.callee)
        for arg in node.args:
            yield from _names(arg)
    elif isinstance(node, MemberExpr):
        yield from _names(node.obj)
    elif isinstance(node, IndexExpr):
        yield from _names(node.obj)
        yield from _names(node.index)
    elif isinstance(node, (TupleLiteral, VecLiteral, SetLiteral)):
        for element in node.elements:
            yield from _names(element)
    elif isinstance(node, MapLiteral):
        for key, value in node.entries:
            yield from _names(key)
            yield from _names(value)
    elif isinstance(node, ReturnStmt):
        yield from _names(node.value)
    elif isinstance(node, AssignStmt):
        yield node.name
        yield from _names(node.value)
    elif isinstance(node, Block):
        for stmt in node.stmts:
            yield from _names(stmt)
    elif isinstance(node, IfStmt):
        yield from _names(node.condition)
        yield from _names(node.then_block)
        for condition, block in node.elif_branches:
            yield from _names(condition)
            yield from _names(block)
        yield from _names(node.else_block)
    elif isinstance(node, WhileStmt):
        yield from _names(node.condition)
        yield from _names(node.body)
    elif isinstance(node, ForStmt):
        yield node.variable
        yield from _names(node.iterable)
        yield from _names(node.body)
    elif isinstance(node, MatchStmt):
        yield from _names(node.expression)
        for guard in node.guards:
            yield from _names(guard)
        for _pattern, block in node.arms:
            yield from _names(block)


def collect_identifiers(node: Optional[Node]) -> Set[str]:
    """Return the set of names referenced within ``node``."""
    return set(_names(node))


class UnusedParamsRule(AnalysisRule):
    """Warns about parameters that are never used in the function body."""

    name = "unused-params"

    def analyze_program(self, program: Program) -> List[Issue]:
        issues: List[Issue] = []
        for func in program.functions():
            if func.body is None:
                continue
            used = collect_identifiers(func.body)
            issues.extend(
                Issue(
                    severity=Severity.WARNING,
                    rule="unused-parameter",
                    message=f"Parameter '{param.name}' is never used",
                    location=func.name,
                )
                for param in func.params
                if param.name not in used
            )
        return issues