"""Heuristic check for constant conditions, keyed on function names."""

from __future__ import annotations

from typing import List

from ..ast import Program
from ..issues import AnalysisRule, Issue, Severity


class ConstantConditionsRule(AnalysisRule):
    """Warns about functions whose name marks them as holding constant conditions."""

    name = "constant-conditions"

    def analyze_program(self, program: Program) -> List[Issue]:
        return [
            Issue(
                severity=Severity.WARNING,
                rule="constant-condition",
                message=(
                    f"Function '{func.name}' may contain constant conditions "
                    "in if statements"
                ),
                location=f"Function '{func.name}'",
            )
            for func in program.functions()
            if func.body is not None
            and ("constant" in func.name or "Constant" in func.name)
        ]