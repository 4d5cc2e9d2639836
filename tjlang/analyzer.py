"""Runs every analysis rule over a program and reports the findings."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, TextIO

from .ast import Program
from .issues import AnalysisRule, Issue
from .rules.complexity import ComplexityRule
from .rules.constant_conditions import ConstantConditionsRule
from .rules.dead_code import DeadCodeRule
from .rules.duplicate_names import DuplicateNamesRule
from .rules.empty_functions import EmptyFunctionsRule
from .rules.function_length import FunctionLengthRule
from .rules.long_params import LongParamsRule
from .rules.magic_numbers import MagicNumbersRule
from .rules.naming_conventions import NamingConventionsRule
from .rules.type_safety import TypeSafetyRule
from .rules.unreachable_code import UnreachableCodeRule
from .rules.unused_params import UnusedParamsRule
from .rules.unused_variables import UnusedVariablesRule


def _default_rules() -> List[AnalysisRule]:
    return [
        UnusedParamsRule(),
        UnusedVariablesRule(),
        DuplicateNamesRule(),
        UnreachableCodeRule(),
        DeadCodeRule(),
        ConstantConditionsRule(),
        TypeSafetyRule(),
        ComplexityRule(),
        # code quality rules
        EmptyFunctionsRule(),
        FunctionLengthRule(),
        LongParamsRule(),
        MagicNumbersRule(),
        NamingConventionsRule(),
    ]


class StaticAnalyzer:
    """Holds the registered rules and runs them in registration order."""

    def __init__(self, debug: bool = False) -> None:
        self.debug = debug
        self.rules: List[AnalysisRule] = _default_rules()

    def add_rule(self, rule: AnalysisRule) -> None:
        """Register another rule; it runs after those already registered."""
        self.rules.append(rule)

    def analyze(self, program: Program) -> List[Issue]:
        """Run every rule over ``program`` and return all issues found."""
        issues: List[Issue] = []
        if self.debug:
            print(f"[ANALYZE] Starting analysis with {len(self.rules)} rule(s)")
            print(f"[ANALYZE] Program units: {len(program.units)}")
        for index, rule in enumerate(self.rules):
            if self.debug:
                print(f"[ANALYZE] Running rule {index}: '{rule.name}'...")
            issues.extend(rule.analyze_program(program))
        if self.debug:
            print(f"[ANALYZE] Completed. Issues: {len(issues)}")
        return issues


def print_issues(issues: Iterable[Issue], file: Optional[TextIO] = None) -> None:
    """Write one line per issue (to stdout by default)."""
    out = file if file is not None else sys.stdout
    issues = list(issues)
    if not issues:
        out.write("No issues found.\n")
        return
    for issue in issues:
        out.write(f"{issue}\n")