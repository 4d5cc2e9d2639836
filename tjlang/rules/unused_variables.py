"""Rule slot for unused local variables."""

from __future__ import annotations

from typing import List

from ..ast import Program
from ..issues import AnalysisRule, Issue


class UnusedVariablesRule(AnalysisRule):
    """Checks for unused local variables.

    The syntax tree carries no variable declarations to compare references
    against, so this rule reports nothing.
    """

    name = "unused-variables"

    def analyze_program(self, program: Program) -> List[Issue]:
        return []