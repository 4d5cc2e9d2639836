"""Collects syntax errors and analysis findings and reports them together."""

from __future__ import annotations

from typing import List, Optional, TextIO

from .formatter import AnalysisIssue, ErrorFormatter
from .formatter import SyntaxError as SyntaxErrorRecord
from .formatter import split_source_lines
from .issues import Issue


class UnifiedErrorListener:
    """Gathers parser errors and analysis issues against one source text."""

    def __init__(self) -> None:
        self.syntax_errors: List[SyntaxErrorRecord] = []
        self.analysis_issues: List[AnalysisIssue] = []
        self.source_code = ""
        self._source_lines: List[str] = []
        self._formatter = ErrorFormatter()

    def set_source_code(self, code: str) -> None:
        """Set the source text that errors refer to."""
        self.source_code = code
        self._source_lines = split_source_lines(code)
        self._formatter.set_source_code(code)

    def _source_line(self, line: int) -> str:
        if 0 < line <= len(self._source_lines):
            return self._source_lines[line - 1]
        return ""

    def syntax_error(
        self,
        line: int,
        char_position: int,
        msg: str,
        offending_text: Optional[str] = None,
    ) -> None:
        """Record a lexer or parser error."""
        text = offending_text if offending_text and offending_text != "<EOF>" else ""
        self.syntax_errors.append(
            SyntaxErrorRecord(line, char_position, msg, text, self._source_line(line))
        )

    def add_analysis_issue(
        self, issue: Issue, line: int = 0, char_position: int = 0
    ) -> None:
        """Record an analysis finding, optionally tied to a source position."""
        self.analysis_issues.append(
            AnalysisIssue(issue, line, char_position, self._source_line(line))
        )

    def has_errors(self) -> bool:
        return bool(self.syntax_errors or self.analysis_issues)

    def has_syntax_errors(self) -> bool:
        return bool(self.syntax_errors)

    def has_analysis_issues(self) -> bool:
        return bool(self.analysis_issues)

    def print_all_errors(self, filename: str, file: Optional[TextIO] = None) -> None:
        """Report syntax errors first, then analysis issues."""
        self.print_syntax_errors(filename, file)
        self.print_analysis_issues(filename, file)

    def print_syntax_errors(self, filename: str, file: Optional[TextIO] = None) -> None:
        for error in self.syntax_errors:
            self._formatter.print_syntax_error(filename, error, file)

    def print_analysis_issues(
        self, filename: str, file: Optional[TextIO] = None
    ) -> None:
        for issue in self.analysis_issues:
            self._formatter.print_analysis_issue(filename, issue, file)