"""Standalone syntax-error collector with suggestions and categories."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from .categories import syntax_error_category
from .formatter import (
    BLUE,
    BOLD,
    BRIGHT_BLUE,
    BRIGHT_CYAN,
    BRIGHT_RED,
    BRIGHT_YELLOW,
    GREEN,
    MAGENTA,
    RESET,
    YELLOW,
    ErrorFormatter,
    split_source_lines,
)
from .formatter import SyntaxError as SyntaxErrorRecord
from .suggestions import SuggestionEngine


class ErrorListener:
    """Records syntax errors and prints them with a fix suggestion and category."""

    def __init__(self) -> None:
        self.errors: List[SyntaxErrorRecord] = []
        self.source_code = ""
        self.source_lines: List[str] = []
        self._formatter = ErrorFormatter()
        self._suggestions = SuggestionEngine()

    def set_source_code(self, code: str) -> None:
        """Set the source text that errors refer to."""
        self.source_code = code
        self.source_lines = split_source_lines(code)
        self._formatter.set_source_code(code)

    def syntax_error(
        self,
        line: int,
        char_position: int,
        msg: str,
        offending_text: Optional[str] = None,
    ) -> None:
        """Record a lexer or parser error."""
        text = offending_text if offending_text and offending_text != "<EOF>" else ""
        source_line = (
            self.source_lines[line - 1] if 0 < line <= len(self.source_lines) else ""
        )
        self.errors.append(
            SyntaxErrorRecord(line, char_position, msg, text, source_line)
        )

    def has_errors(self) -> bool:
        return bool(self.errors)

    def print_errors(self, filename: str, file: Optional[TextIO] = None) -> None:
        """Write a report of every recorded error (to stderr by default)."""
        out = file if file is not None else sys.stderr
        for error in self.errors:
            self._print_error(out, filename, error)

    def _print_error(self, out: TextIO, filename: str, error: SyntaxErrorRecord) -> None:
        out.write(
            f"\n{BRIGHT_RED}{BOLD}+-- ERROR{RESET} in {BRIGHT_CYAN}{filename}{RESET}"
            f" at line {BRIGHT_YELLOW}{error.line}{RESET}, column "
            f"{BRIGHT_YELLOW}{error.char_position + 1}{RESET}\n"
        )
        out.write(f"{BRIGHT_RED}|{RESET} {BRIGHT_RED}{error.msg}{RESET}\n")
        if error.source_line:
            out.write(f"{BRIGHT_RED}|{RESET}\n")
            self._formatter.print_source_context(
                error.line, error.char_position, error.offending_text, out
            )
        out.write(f"{BRIGHT_RED}+--{RESET} {YELLOW}Details:{RESET}\n")
        if error.offending_text and error.offending_text != "<EOF>":
            out.write(
                f"   {MAGENTA}* {RESET}Offending token: "
                f"{BRIGHT_CYAN}'{error.offending_text}'{RESET}\n"
            )
        suggestion = self._suggestions.get_syntax_suggestion(
            error.msg, error.offending_text
        )
        if suggestion:
            out.write(f"   {GREEN}* {RESET}Suggestion: {suggestion}\n")
        category = syntax_error_category(error.msg)
        out.write(f"   {BLUE}* {RESET}Category: {BRIGHT_BLUE}{category}{RESET}\n")
        out.write("\n")