"""Reports functions with long parameter lists."""

from __future__ import annotations

from typing import List, Optional

from ..ast import FunctionDecl, Program
from ..issues import AnalysisRule, Issue, Severity

WARNING_THRESHOLD = 7
INFO_THRESHOLD = 5


def _check(func: FunctionDecl) -> Optional[Issue]:
    count = len(func.params)
    if count > WARNING_THRESHOLD:
        severity = Severity.WARNING
        message = (
            f"Function '{func.name}' has too many parameters ({count}). "
            "Consider using a struct or object to group related parameters"
        )
    elif count > INFO_THRESHOLD:
        severity = Severity.INFO
        message = (
            f"Function '{func.name}' has many parameters ({count}). "
            "Consider if some could be grouped together"
        )
    else:
        return None
    return Issue(
        severity=severity,
        rule="long-parameter-list",
        message=message,
        location=f"Function '{func.name}'",
    )


class LongParamsRule(AnalysisRule):
    """Flags functions taking more than five parameters."""

    name = "long-params"

    def analyze_program(self, program: Program) -> List[Issue]:
        return [
            issue
            for issue in (_check(func) for func in program.functions())
            if issue is not None
        ]