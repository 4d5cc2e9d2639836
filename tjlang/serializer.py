"""Writing a program's top-level declarations as compact JSON."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from .ast import (
    EnumDecl,
    FunctionDecl,
    ImplBlock,
    InterfaceDecl,
    Node,
    Program,
    StructDecl,
    Type,
    TypeAlias,
)

_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def _escape(text: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def _quoted(text: str) -> str:
    return f'"{_escape(text)}"'


def _type_json(type_: Type) -> str:
    args = ",".join(_type_json(arg) for arg in type_.args)
    return f'{{"kind":"{type_.kind.name}","name":{_quoted(type_.name)},"args":[{args}]}}'


def _optional_type_json(type_) -> str:
    return "null" if type_ is None else _type_json(type_)


def _function_json(func: FunctionDecl) -> str:
    params = ",".join(
        f'{{"name":{_quoted(p.name)},"type":{_optional_type_json(p.type)}}}'
        for p in func.params
    )
    return (
        f'{{"kind":"FunctionDecl","name":{_quoted(func.name)},'
        f'"params":[{params}],"returnType":{_optional_type_json(func.return_type)}}}'
    )


def _unit_json(unit: Node) -> str:
    if isinstance(unit, FunctionDecl):
        return _function_json(unit)
    for cls in (StructDecl, EnumDecl, InterfaceDecl, TypeAlias):
        if isinstance(unit, cls):
            return f'{{"kind":"{cls.__name__}","name":{_quoted(unit.name)}}}'
    if isinstance(unit, ImplBlock):
        return f'{{"kind":"ImplBlock","type":{_quoted(unit.type_name)}}}'
    return '{"kind":"Unknown"}'


def ast_to_json(program: Program) -> str:
    """Return the JSON text describing ``program``'s units."""
    units = ",".join(_unit_json(unit) for unit in program.units)
    return f'{{"program":{{"units":[{units}]}}}}'


def write_ast_to_file(program: Program, file_path: Union[str, os.PathLike]) -> None:
    """Write ``program`` as JSON to ``file_path``, creating parent directories.

    Raises OSError if the file cannot be written.
    """
    path = Path(file_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        pass  # opening the file below reports the real failure
    path.write_bytes(ast_to_json(program).encode("utf-8"))