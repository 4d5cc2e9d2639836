"""Reports functions and parameters declared under a name already in use."""

from __future__ import annotations

from typing import Iterator, List

from ..ast import FunctionDecl, Program
from ..issues import AnalysisRule, Issue, Severity


def _duplicate_functions(program: Program) -> Iterator[Issue]:
    seen = set()
    for func in program.functions():
        if func.name in seen:
            yield Issue(
                severity=Severity.ERROR,
                rule="duplicate-function",
                message=f"Duplicate function name: '{func.name}'",
                location=f"Function '{func.name}' (declared multiple times)",
            )
        else:
            seen.add(func.name)


def _duplicate_parameters(func: FunctionDecl) -> Iterator[Issue]:
    seen = set()
    for param in func.params:
        if param.name in seen:
            yield Issue(
                severity=Severity.ERROR,
                rule="duplicate-parameter",
                message=f"Duplicate parameter name: '{param.name}'",
                location=f"Function '{func.name}' parameter '{param.name}'",
            )
        else:
            seen.add(param.name)


class DuplicateNamesRule(AnalysisRule):
    """Flags repeated function names and repeated parameter names."""

    name = "duplicate-names"

    def analyze_program(self, program: Program) -> List[Issue]:
        issues = list(_duplicate_functions(program))
        for func in program.functions():
            issues.extend(_duplicate_parameters(func))
        return issues