"""Reports functions with no body or an empty body."""

from __future__ import annotations

from typing import List, Optional

from ..ast import FunctionDecl, Program
from ..issues import AnalysisRule, Issue, Severity


def _problem(func: FunctionDecl) -> Optional[str]:
    if func.body is None:
        return "has no body"
    if not func.body.stmts:
        return "has an empty body"
    return None


class EmptyFunctionsRule(AnalysisRule):
    """Warns about functions that do nothing."""

    name = "empty-functions"

    def analyze_program(self, program: Program) -> List[Issue]:
        issues: List[Issue] = []
        for func in program.functions():
            problem = _problem(func)
            if problem is not None:
                issues.append(
                    Issue(
                        severity=Severity.WARNING,
                        rule="empty-function",
                        message=f"Function '{func.name}' {problem}",
                        location=f"Function '{func.name}'",
                    )
                )
        return issues