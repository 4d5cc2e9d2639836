"""Classification of syntax errors, analysis rules and severities."""

_SYNTAX_CATEGORIES = (
    ("token recognition error", "Lexical Error"),
    ("missing", "Syntax Error - Missing Token"),
    ("mismatched input", "Syntax Error - Unexpected Token"),
    ("no viable alternative", "Syntax Error - Invalid Grammar"),
)

_QUALITY_GROUPS = {
    "Unused Code": ("unused-parameter", "unused-variable"),
    "Naming Issues": ("duplicate-function", "duplicate-parameter"),
    "Complexity": ("high-complexity", "deep-nesting", "long-function-name"),
    "Dead Code": ("dead-code", "unreachable-code"),
    "Logic Issues": ("constant-condition",),
}

_ANALYSIS_CATEGORIES = {
    rule: f"Code Quality - {group}"
    for group, rules in _QUALITY_GROUPS.items()
    for rule in rules
}
_ANALYSIS_CATEGORIES.update(dict.fromkeys(("type-mismatch", "type-safety"), "Type Safety"))

_SEVERITY_DETAILS = {
    "ERROR": "a critical issue that must be fixed",
    "WARNING": "a potential issue that should be addressed",
    "INFO": "an informational message about code style or best practices",
}


def syntax_error_category(msg: str) -> str:
    """Return the category of a parser or lexer error message."""
    return next(
        (category for needle, category in _SYNTAX_CATEGORIES if needle in msg),
        "Parse Error",
    )


def analysis_error_category(rule: str) -> str:
    """Return the category of an analysis rule identifier."""
    return _ANALYSIS_CATEGORIES.get(rule, "Static Analysis")


def severity_description(severity: str) -> str:
    """Describe a severity given by its upper-case name."""
    detail = _SEVERITY_DETAILS.get(severity)
    return f"This is {detail}" if detail else "Unknown severity level"