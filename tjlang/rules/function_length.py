"""Statement counting for function bodies.

The length rule counts statements but does not yet report on them.
"""

from __future__ import annotations

from typing import List, Optional

from ..ast import Block, ForStmt, IfStmt, MatchStmt, Program, Stmt, WhileStmt
from ..issues import AnalysisRule, Issue


def count_statements(node: Optional[Stmt]) -> int:
    """Count the statements in ``node``, nested ones included.

    A block counts as the sum of its statements; every other statement
    counts as one plus the statements nested inside it.
    """
    if node is None:
        return 0
    if isinstance(node, Block):
        return sum(count_statements(stmt) for stmt in node.stmts)
    count = 1
    if isinstance(node, IfStmt):
        count += count_statements(node.then_block)
        count += sum(count_statements(block) for _cond, block in node.elif_branches)
        count += count_statements(node.else_block)
    elif isinstance(node, (WhileStmt, ForStmt)):
        count += count_statements(node.body)
    elif isinstance(node, MatchStmt):
        count += sum(count_statements(block) for _pattern, block in node.arms)
    return count


class FunctionLengthRule(AnalysisRule):
    """Measures function length; reporting is currently switched off."""

    name = "function-length"

    def analyze_program(self, program: Program) -> List[Issue]:
        for func in program.functions():
            if func.body is not None:
                count_statements(func.body)
        return []