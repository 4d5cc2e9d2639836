"""Coloured, boxed reports of syntax errors and analysis findings."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

from .issues import Issue, Severity

RED = "\033[31m"
BRIGHT_RED = "\033[91m"
YELLOW = "\033[33m"
BRIGHT_YELLOW = "\033[93m"
BLUE = "\033[34m"
BRIGHT_BLUE = "\033[94m"
CYAN = "\033[36m"
BRIGHT_CYAN = "\033[96m"
GREEN = "\033[32m"
MAGENTA = "\033[35m"
BOLD = "\033[1m"
DIM = "\033[2m"
RESET = "\033[0m"

_TAB_ADJUST = 7


@dataclass
class SyntaxError:  # noqa: A001 - the parser's own error record
    """A lexer or parser error at a source position."""

    line: int
    char_position: int
    msg: str
    offending_text: str = ""
    source_line: str = ""


@dataclass
class AnalysisIssue:
    """An analysis finding tied to a source position."""

    issue: Issue
    line: int = 0
    char_position: int = 0
    source_line: str = ""


_SEVERITY_STYLE = {
    Severity.ERROR: (BRIGHT_RED, "ERROR"),
    Severity.WARNING: (YELLOW, "WARNING"),
    Severity.INFO: (BLUE, "INFO"),
}


def split_source_lines(code: str) -> List[str]:
    """Split ``code`` into lines; a final newline does not start a new line."""
    lines = code.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class ErrorFormatter:
    """Writes error reports with source context to a text stream."""

    def __init__(self) -> None:
        self.source_lines: List[str] = []

    def set_source_code(self, code: str) -> None:
        """Remember the source text used for context lines."""
        self.source_lines = split_source_lines(code)

    def print_syntax_error(
        self, filename: str, error: SyntaxError, file: Optional[TextIO] = None
    ) -> None:
        """Write a report of a syntax error (to stderr by default)."""
        out = file if file is not None else sys.stderr
        self._header(out, filename, "SYNTAX ERROR", error.line, error.char_position, BRIGHT_RED)
        self._details(out, error.msg, BRIGHT_RED)
        if error.source_line:
            out.write(f"{BRIGHT_RED}|{RESET}\n")
            self.print_source_context(
                error.line, error.char_position, error.offending_text, out
            )
        out.write(f"{BRIGHT_RED}+--{RESET} {YELLOW}Details:{RESET}\n")
        if error.offending_text and error.offending_text != "<EOF>":
            out.write(
                f"   {MAGENTA}* {RESET}Offending token: "
                f"{BRIGHT_CYAN}'{error.offending_text}'{RESET}\n"
            )
        out.write("\n")

    def print_analysis_issue(
        self, filename: str, issue: AnalysisIssue, file: Optional[TextIO] = None
    ) -> None:
        """Write a report of an analysis finding (to stderr by default)."""
        out = file if file is not None else sys.stderr
        finding = issue.issue
        color, label = _SEVERITY_STYLE.get(finding.severity, (YELLOW, "WARNING"))
        self._header(out, filename, label, issue.line, issue.char_position, color)
        self._details(out, f"[{finding.rule}] {finding.message}", color)
        if issue.source_line:
            out.write(f"{color}|{RESET}\n")
            self.print_source_context(issue.line, issue.char_position, "", out)
        out.write(f"{color}+--{RESET} {YELLOW}Details:{RESET}\n")
        out.write(f"   {MAGENTA}* {RESET}Rule: {BRIGHT_CYAN}{finding.rule}{RESET}\n")
        if finding.location:
            out.write(f"   {GREEN}* {RESET}Location: {finding.location}\n")
        out.write("\n")

    def print_source_context(
        self,
        line: int,
        char_position: int,
        offending_text: str,
        file: Optional[TextIO] = None,
    ) -> None:
        """Write up to two lines either side of ``line``, with a marker under it."""
        out = file if file is not None else sys.stderr
        start = max(1, line - 2)
        end = min(len(self.source_lines), line + 2)
        for number in range(start, end + 1):
            content = self.source_lines[number - 1]
            if number == line:
                out.write(
                    f"{BRIGHT_RED}|{RESET} {BRIGHT_BLUE}{number:>3} | {RESET}{content}\n"
                )
                out.write(self._indicator(content, char_position, offending_text) + "\n")
            else:
                out.write(
                    f"{BRIGHT_RED}|{RESET} {DIM}{number:>3} | {RESET}{DIM}{content}{RESET}\n"
                )

    @staticmethod
    def _indicator(content: str, char_position: int, offending_text: str) -> str:
        spaces = char_position
        tabs = 0
        index = 0
        # The bound shrinks as tabs are found, so it is re-checked each step.
        while index < min(spaces, len(content)):
            if content[index] == "\t":
                tabs += 1
                spaces -= _TAB_ADJUST
            index += 1
        marker = f"{BRIGHT_RED}|{RESET}      {RESET}" + "\t" * tabs + " " * max(spaces, 0)
        if offending_text and offending_text != "<EOF>":
            marker += f"{BRIGHT_RED}{BOLD} ^ " + "~" * (len(offending_text) - 1) + RESET
        else:
            marker += f"{BRIGHT_RED}{BOLD} ^ {RESET}"
        return marker

    @staticmethod
    def _header(
        out: TextIO,
        filename: str,
        error_type: str,
        line: int,
        char_position: int,
        color: str,
    ) -> None:
        text = f"\n{color}{BOLD}+-- {error_type}{RESET} in {BRIGHT_CYAN}{filename}{RESET}"
        if line > 0:
            text += f" at line {BRIGHT_YELLOW}{line}{RESET}"
            if char_position > 0:
                text += f", column {BRIGHT_YELLOW}{char_position + 1}{RESET}"
        out.write(text + "\n")

    @staticmethod
    def _details(out: TextIO, message: str, color: str) -> None:
        out.write(f"{color}|{RESET} {color}{message}{RESET}\n")