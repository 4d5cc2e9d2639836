"""Rule slot for statements that follow a return."""

from __future__ import annotations

from typing import List

from ..ast import Program
from ..issues import AnalysisRule, Issue


class UnreachableCodeRule(AnalysisRule):
    """Checks for unreachable statements.

    Reachability is not yet analysed, so this rule reports nothing.
    """

    name = "unreachable-code"

    def analyze_program(self, program: Program) -> List[Issue]:
        return []