"""Syntax tree, static analysis rules, error reporting and JSON output for TJ programs."""

__version__ = "0.1.0"