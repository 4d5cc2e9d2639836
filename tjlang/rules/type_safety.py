"""Heuristic type-safety check, keyed on function names."""

from __future__ import annotations

from typing import List

from ..ast import Program
from ..issues import AnalysisRule, Issue, Severity


class TypeSafetyRule(AnalysisRule):
    """Warns about functions whose name marks them as type-sensitive."""

    name = "type-safety"

    def analyze_program(self, program: Program) -> List[Issue]:
        return [
            Issue(
                severity=Severity.WARNING,
                rule="type-safety",
                message=f"Function '{func.name}' may have type safety issues",
                location=f"Function '{func.name}'",
            )
            for func in program.functions()
            if func.body is not None
            and ("type" in func.name or "Type" in func.name)
        ]