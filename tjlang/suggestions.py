"""Fix suggestions for syntax errors and analysis findings."""

from typing import Callable, Dict

Handler = Callable[[str, str], str]

_SYNTAX_SUGGESTIONS = (
    (")", "Add a closing parenthesis ')' to match the opening parenthesis"),
    ("{", "Add an opening brace '{'"),
    ("}", "Add a closing brace '}'"),
    (":", "Add a colon ':'"),
    ("->", "Add return type arrow '->' before the return type"),
    ("def", "Add 'def' keyword to declare a function"),
)


def _fixed(text: str) -> Handler:
    return lambda message, context: text


def _by_phrase(cases, fallback: str) -> Handler:
    def handler(message: str, context: str) -> str:
        return next((text for phrase, text in cases if phrase in message), fallback)

    return handler


_complexity = _by_phrase(
    (
        ("high cyclomatic complexity",
         "Break down the function into smaller, more focused functions. "
         "Consider extracting complex logic into helper functions."),
        ("deep nesting",
         "Reduce nesting by using early returns, guard clauses, or "
         "extracting nested logic into separate functions."),
    ),
    "Consider simplifying the function structure to improve readability and maintainability.",
)

_constant_condition = _by_phrase(
    (
        ("always true",
         "The condition always evaluates to true. Consider removing the if "
         "statement or using a more dynamic condition."),
        ("always false",
         "The condition always evaluates to false. This code block will "
         "never execute and should be removed."),
    ),
    "The condition has a constant value. Consider using a more dynamic "
    "expression or removing the conditional.",
)


class SuggestionEngine:
    """Looks up a suggestion for a rule or a parser message."""

    def __init__(self) -> None:
        self._suggestions: Dict[str, Handler] = {
            "unused-parameter": _fixed(
                "Remove the unused parameter or use it in the function body. "
                "Consider prefixing with underscore if intentionally unused."),
            "duplicate-function": _fixed(
                "Rename one of the functions to have a unique name. Consider using "
                "more descriptive names that reflect their different purposes."),
            "duplicate-parameter": _fixed(
                "Rename one of the duplicate parameters to have a unique name. "
                "Each parameter should have a distinct identifier."),
            "high-complexity": _complexity,
            "deep-nesting": _complexity,
            "long-function-name": _fixed(
                "Consider using a shorter, more descriptive function name"),
            "dead-code": _fixed(
                "Remove the unreachable code after the return statement. This code "
                "will never be executed and may indicate a logic error."),
            "constant-condition": _constant_condition,
            "type-mismatch": _fixed(
                "Ensure type compatibility between operands. Consider explicit "
                "type conversion or using compatible types."),
        }

    def get_suggestion(self, rule: str, message: str, context: str = "") -> str:
        """Return the suggestion for ``rule``, or an empty string if there is none."""
        handler = self._suggestions.get(rule)
        return handler(message, context) if handler else ""

    def get_syntax_suggestion(self, msg: str, offending_text: str) -> str:
        """Return a suggestion for a parser message, or an empty string."""
        for token, suggestion in _SYNTAX_SUGGESTIONS:
            if f"missing '{token}'" in msg:
                return suggestion
        if "token recognition error" in msg:
            return f"Remove or replace the invalid character '{offending_text}'"
        if "mismatched input" in msg:
            return "Check syntax around this position - expected different token"
        return ""

    def get_analysis_suggestion(self, rule: str, message: str) -> str:
        """Return the suggestion for an analysis finding."""
        return self.get_suggestion(rule, message, "")