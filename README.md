# tjlang

`tjlang` models the syntax tree of the TJ language, runs a set of static
analysis rules over it, formats syntax errors and analysis findings as
coloured terminal reports, and writes a compact JSON summary of a program.

## Modules

- `tjlang.ast`: the node dataclasses. `Program` holds `units` and has
  `functions()`, which returns the top-level `FunctionDecl`s in order.
  Statements include `Block`, `IfStmt`, `WhileStmt`, `ForStmt`, `MatchStmt`,
  `AssignStmt` and `ReturnStmt`; expressions include `Identifier`,
  `IntLiteral`, `FloatLiteral`, `StringLiteral`, `BoolLiteral`, `BinaryExpr`,
  `UnaryExpr`, `CallExpr`, `MemberExpr`, `IndexExpr` and the collection
  literals; declarations include `StructDecl`, `EnumDecl`, `InterfaceDecl`,
  `TypeAlias` and `ImplBlock`. Types are `Type` with a `TypeKind`.
- `tjlang.issues`: `Issue` (severity, rule, message, location), `Severity`
  (`INFO`, `WARNING`, `ERROR`) and the abstract `AnalysisRule`, whose
  `analyze_program(program)` returns a list of issues.
- `tjlang.rules`: one module per check:
  - `unused_params.UnusedParamsRule` – parameters never mentioned in the
    body (`unused-parameter`); `collect_identifiers(node)` gives the names a
    node refers to.
  - `duplicate_names.DuplicateNamesRule` – repeated function names and
    repeated parameter names (errors).
  - `empty_functions.EmptyFunctionsRule` – functions with no body or an
    empty body.
  - `long_params.LongParamsRule` – info above 5 parameters, warning above 7.
  - `magic_numbers.MagicNumbersRule` – integer literals other than 0, 1, 2
    and non-zero floats in function bodies; `is_magic_number(literal)`.
  - `naming_conventions.NamingConventionsRule` – function and parameter
    names that are not camelCase starting lower-case; also
    `is_camel_case`, `is_snake_case` and `starts_with_lower`.
  - `complexity.ComplexityRule` – reports function names longer than 20
    characters (`long-function-name`).
  - `dead_code.DeadCodeRule`, `constant_conditions.ConstantConditionsRule`,
    `type_safety.TypeSafetyRule` – name-based heuristics: they flag
    functions with a body whose name contains `deadCode`/`DeadCode`,
    `constant`/`Constant`, or `type`/`Type` respectively.
  - `function_length.FunctionLengthRule` – counts statements with
    `count_statements(node)` but reports nothing.
  - `unused_variables.UnusedVariablesRule` and
    `unreachable_code.UnreachableCodeRule` – report nothing.
- `tjlang.analyzer`: `StaticAnalyzer(debug=False)` registers all of the
  rules above; `add_rule(rule)` appends another, and `analyze(program)` runs
  them in order and returns every issue. With `debug=True` it prints
  progress lines to stdout. `print_issues(issues, file=None)` writes one
  line per issue, or `No issues found.`.
- `tjlang.formatter`: `ErrorFormatter` with `set_source_code`,
  `print_syntax_error`, `print_analysis_issue` and `print_source_context`;
  the records `SyntaxError` and `AnalysisIssue`. Output goes to stderr
  unless a `file` is given.
- `tjlang.unified_listener`: `UnifiedErrorListener` collects syntax errors
  (`syntax_error(line, char_position, msg, offending_text)`) and analysis
  findings (`add_analysis_issue(issue, line=0, char_position=0)`), and prints
  them with `print_all_errors`, `print_syntax_errors` or
  `print_analysis_issues`; `has_errors`, `has_syntax_errors` and
  `has_analysis_issues` tell what was collected.
- `tjlang.error_listener`: `ErrorListener`, a syntax-error collector whose
  reports add a fix suggestion and an error category.
- `tjlang.categories`: `syntax_error_category(msg)`,
  `analysis_error_category(rule)` and `severity_description(severity)` (for
  `"ERROR"`, `"WARNING"` or `"INFO"`).
- `tjlang.suggestions`: `SuggestionEngine` with `get_suggestion`,
  `get_syntax_suggestion` and `get_analysis_suggestion`.
- `tjlang.serializer`: `ast_to_json(program)` and
  `write_ast_to_file(program, file_path)`.

## Example

```python
import sys

from tjlang.analyzer import StaticAnalyzer, print_issues
from tjlang.ast import Block, FunctionDecl, Identifier, Param, Program, ReturnStmt

program = Program(units=[
    FunctionDecl(
        name="add",
        params=[Param(name="a"), Param(name="b")],
        body=Block(stmts=[ReturnStmt(value=Identifier(name="a"))]),
    ),
])

issues = StaticAnalyzer().analyze(program)
print_issues(issues, sys.stdout)
# warning: [unused-parameter] Parameter 'b' is never used (add)
```

## Reporting

Call `set_source_code` on an `UnifiedErrorListener`, add errors and issues,
then call `print_all_errors(filename)`. Syntax errors come first, then
analysis issues, each with a header giving the line and column, up to two
source lines either side of the reported line, and a caret under the
reported column.

## Writing the AST

`write_ast_to_file(program, path)` creates missing parent directories and
writes `{"program":{"units":[...]}}`. Functions carry their name, parameters
and return type; structs, enums, interfaces and type aliases carry their kind
and name; impl blocks carry their type name. It raises `OSError` if the file
cannot be written.

## What this package does not do

It does not read or parse TJ source text: there is no lexer or parser, so
syntax errors must be reported to the listeners by the caller, and programs
are built directly from the `tjlang.ast` classes. It installs no
command-line tool.