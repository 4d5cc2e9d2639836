import io

from tjlang.error_listener import ErrorListener

SOURCE = "def f()\n  return 1\n}\n"


def _listener():
    listener = ErrorListener()
    listener.set_source_code(SOURCE)
    return listener


def _printed(listener):
    out = io.StringIO()
    listener.print_errors("prog.tj", out)
    return out.getvalue()


def test_source_lines_split():
    listener = _listener()
    assert listener.source_lines == ["def f()", "  return 1", "}"]
    assert listener.source_code == SOURCE


def test_no_errors_initially():
    listener = _listener()
    assert not listener.has_errors()
    assert _printed(listener) == ""


def test_records_error_with_source_line():
    listener = _listener()
    listener.syntax_error(1, 7, "missing ':'", "return")
    assert listener.has_errors()
    error = listener.errors[0]
    assert error.source_line == "def f()"
    assert error.offending_text == "return"


def test_eof_and_out_of_range():
    listener = _listener()
    listener.syntax_error(42, 0, "mismatched input", "<EOF>")
    error = listener.errors[0]
    assert error.offending_text == ""
    assert error.source_line == ""


def test_report_contains_suggestion_and_category():
    listener = _listener()
    listener.syntax_error(1, 7, "missing ':' at 'return'", "return")
    text = _printed(listener)
    assert "+-- ERROR" in text
    assert "prog.tj" in text
    assert "Suggestion: Add a colon ':'" in text
    assert "Syntax Error - Missing Token" in text
    assert "'return'" in text


def test_report_shows_context_lines():
    listener = _listener()
    listener.syntax_error(2, 2, "mismatched input", "return")
    text = _printed(listener)
    assert "  1 | " in text
    assert "  2 | " in text
    assert "  3 | " in text
    assert "return 1" in text
    assert "Check syntax around this position - expected different token" in text


def test_token_recognition_error_suggestion():
    listener = _listener()
    listener.syntax_error(1, 0, "token recognition error at: '$'", "$")
    text = _printed(listener)
    assert "Remove or replace the invalid character '$'" in text
    assert "Lexical Error" in text


def test_unknown_message_has_category_but_no_suggestion():
    listener = _listener()
    listener.syntax_error(1, 0, "something odd", None)
    text = _printed(listener)
    assert "Suggestion:" not in text
    assert "Offending token" not in text
    assert "Parse Error" in text


def test_column_is_one_based():
    listener = _listener()
    listener.syntax_error(3, 0, "extraneous input", "}")
    assert "column \033[93m1\033[0m" in _printed(listener)


def test_prints_to_stderr_by_default(capsys):
    listener = _listener()
    listener.syntax_error(1, 0, "no viable alternative", "def")
    listener.print_errors("prog.tj")
    assert "Syntax Error - Invalid Grammar" in capsys.readouterr().err