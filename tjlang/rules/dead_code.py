"""Heuristic check for dead code, keyed on function names."""

from __future__ import annotations

from typing import List

from ..ast import Program
from ..issues import AnalysisRule, Issue, Severity


class DeadCodeRule(AnalysisRule):
    """Warns about functions whose name marks them as holding dead code."""

    name = "dead-code"

    def analyze_program(self, program: Program) -> List[Issue]:
        return [
            Issue(
                severity=Severity.WARNING,
                rule="dead-code",
                message=(
                    f"Function '{func.name}' may contain dead code after "
                    "return statements"
                ),
                location=f"Function '{func.name}'",
            )
            for func in program.functions()
            if func.body is not None
            and ("deadCode" in func.name or "DeadCode" in func.name)
        ]