"""Complexity checks for functions.

Cyclomatic complexity and nesting depth are not yet measured from the
syntax tree; both count as 1, so only the function-name length check can
report anything.
"""

from __future__ import annotations

from typing import Iterator, List

from ..ast import FunctionDecl, Program
from ..issues import AnalysisRule, Issue, Severity

MAX_NAME_LENGTH = 20
MAX_COMPLEXITY = 10
MAX_NESTING = 4


def _cyclomatic_complexity(func: FunctionDecl) -> int:
    return 1


def _nesting_level(func: FunctionDecl) -> int:
    return 1


def _check(func: FunctionDecl) -> Iterator[Issue]:
    location = f"Function '{func.name}'"
    if len(func.name) > MAX_NAME_LENGTH:
        yield Issue(
            severity=Severity.INFO,
            rule="long-function-name",
            message=f"Function name '{func.name}' is quite long",
            location=location,
        )
    complexity = _cyclomatic_complexity(func)
    if complexity > MAX_COMPLEXITY:
        yield Issue(
            severity=Severity.WARNING,
            rule="high-complexity",
            message=(
                f"Function '{func.name}' has high cyclomatic complexity "
                f"({complexity})"
            ),
            location=location,
        )
    nesting = _nesting_level(func)
    if nesting > MAX_NESTING:
        yield Issue(
            severity=Severity.WARNING,
            rule="deep-nesting",
            message=f"Function '{func.name}' has deep nesting level ({nesting})",
            location=location,
        )


class ComplexityRule(AnalysisRule):
    """Flags overly complex functions."""

    name = "complexity"

    def analyze_program(self, program: Program) -> List[Issue]:
        issues: List[Issue] = []
        for func in program.functions():
            if func.body is not None:
                issues.extend(_check(func))
        return issues