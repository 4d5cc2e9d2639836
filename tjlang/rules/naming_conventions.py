"""Reports function and parameter names that are not camelCase."""

from __future__ import annotations

import string
from typing import Iterator, List

from ..ast import FunctionDecl, Program
from ..issues import AnalysisRule, Issue, Severity

_ALNUM = frozenset(string.ascii_letters + string.digits)
_SNAKE = frozenset(string.ascii_lowercase + string.digits + "_")


def starts_with_lower(name: str) -> bool:
    """Return True if ``name`` begins with an ASCII lower-case letter."""
    return bool(name) and name[0] in string.ascii_lowercase


def is_camel_case(name: str) -> bool:
    """Return True if ``name`` is letters and digits with no two capitals in a row.

    The first character is not taken into account for the capitals check.
    """
    if not name or not set(name) <= _ALNUM:
        return False
    rest = name[1:]
    return not any(
        first.isupper() and second.isupper() for first, second in zip(rest, rest[1:])
    )


def is_snake_case(name: str) -> bool:
    """Return True if ``name`` is made of lower-case letters, digits and underscores."""
    return bool(name) and set(name) <= _SNAKE


def _is_valid_name(name: str) -> bool:
    return starts_with_lower(name) and is_camel_case(name)


def _check(func: FunctionDecl) -> Iterator[Issue]:
    if not _is_valid_name(func.name):
        yield Issue(
            severity=Severity.INFO,
            rule="naming-convention",
            message=(
                f"Function '{func.name}' should use camelCase naming "
                "(e.g., 'calculateTotal')"
            ),
            location=f"Function '{func.name}'",
        )
    for param in func.params:
        if not _is_valid_name(param.name):
            yield Issue(
                severity=Severity.INFO,
                rule="naming-convention",
                message=(
                    f"Parameter '{param.name}' should use camelCase naming "
                    "(e.g., 'userName')"
                ),
                location=f"Function '{func.name}' parameter '{param.name}'",
            )


class NamingConventionsRule(AnalysisRule):
    """Suggests camelCase for function and parameter names."""

    name = "naming-conventions"

    def analyze_program(self, program: Program) -> List[Issue]:
        issues: List[Issue] = []
        for func in program.functions():
            issues.extend(_check(func))
        return issues