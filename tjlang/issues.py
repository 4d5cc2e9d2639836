"""Findings reported by analysis rules, and the rule interface."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .ast import Program


class Severity(enum.Enum):
    """How serious an issue is."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class Issue:
    """One finding of an analysis rule."""

    severity: Severity = Severity.WARNING
    rule: str = ""
    message: str = ""
    location: str = ""

    def __str__(self) -> str:
        text = f"{self.severity.value}: [{self.rule}] {self.message}"
        if self.location:
            text += f" ({self.location})"
        return text


class AnalysisRule(abc.ABC):
    """A check run over a whole program."""

    name: str = ""

    @abc.abstractmethod
    def analyze_program(self, program: Program) -> List[Issue]:
        """Return the issues this rule finds in ``program``."""