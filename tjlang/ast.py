"""Syntax tree node definitions for TJ programs."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


class Node:
    """Base class of every syntax tree node."""


class Expr(Node):
    """Base class of expressions."""


class Stmt(Node):
    """Base class of statements."""


class TypeKind(enum.Enum):
    """The shape of a type annotation."""

    PRIMITIVE = "PRIMITIVE"
    TUPLE = "TUPLE"
    VEC = "VEC"
    SET = "SET"
    MAP = "MAP"
    FUNCTION = "FUNCTION"
    UNION = "UNION"
    OPTION = "OPTION"
    RESULT = "RESULT"
    STRUCT = "STRUCT"
    ENUM = "ENUM"
    INTERFACE = "INTERFACE"
    GENERIC = "GENERIC"
    NAMED = "NAMED"


@dataclass
class Type(Node):
    """A type annotation.

    For functions, ``args[:-1]`` are the parameter types and ``args[-1]`` is
    the return type; for tuples and unions ``args`` holds the member types.
    """

    kind: TypeKind
    name: str = ""
    args: List[Type] = field(default_factory=list)
    constraints: List[Type] = field(default_factory=list)


@dataclass
class Identifier(Expr):
    name: str = ""


@dataclass
class IntLiteral(Expr):
    value: int = 0


@dataclass
class FloatLiteral(Expr):
    value: float = 0.0


@dataclass
class StringLiteral(Expr):
    value: str = ""


@dataclass
class BoolLiteral(Expr):
    value: bool = False


@dataclass
class VecLiteral(Expr):
    elements: List[Expr] = field(default_factory=list)
    element_type: Optional[Type] = None


@dataclass
class SetLiteral(Expr):
    elements: List[Expr] = field(default_factory=list)
    element_type: Optional[Type] = None


@dataclass
class MapLiteral(Expr):
    entries: List[Tuple[Expr, Expr]] = field(default_factory=list)
    key_type: Optional[Type] = None
    value_type: Optional[Type] = None


@dataclass
class TupleLiteral(Expr):
    elements: List[Expr] = field(default_factory=list)
    element_types: List[Type] = field(default_factory=list)


@dataclass
class StructLiteral(Expr):
    type_name: str = ""
    fields: List[Tuple[str, Expr]] = field(default_factory=list)


@dataclass
class EnumVariant(Expr):
    enum_name: str = ""
    variant_name: str = ""
    args: List[Expr] = field(default_factory=list)


@dataclass
class CallExpr(Expr):
    callee: Optional[Expr] = None
    args: List[Expr] = field(default_factory=list)
    named_args: List[Tuple[str, Expr]] = field(default_factory=list)
    has_named: bool = False


@dataclass
class MemberExpr(Expr):
    obj: Optional[Expr] = None
    member: str = ""


@dataclass
class IndexExpr(Expr):
    obj: Optional[Expr] = None
    index: Optional[Expr] = None


@dataclass
class UnaryExpr(Expr):
    op: str = ""
    operand: Optional[Expr] = None


@dataclass
class BinaryExpr(Expr):
    op: str = ""
    lhs: Optional[Expr] = None
    rhs: Optional[Expr] = None


class PatternKind(enum.Enum):
    """The shape of a match pattern."""

    LITERAL = "LITERAL"
    VARIABLE = "VARIABLE"
    TYPED_VARIABLE = "TYPED_VARIABLE"
    TRAIT_GUARD = "TRAIT_GUARD"
    TUPLE = "TUPLE"
    STRUCT = "STRUCT"
    ENUM_VARIANT = "ENUM_VARIANT"
    WILDCARD = "WILDCARD"


@dataclass
class Pattern(Node):
    kind: PatternKind
    name: str = ""
    type: Optional[Type] = None
    trait_name: str = ""
    sub_patterns: List[Pattern] = field(default_factory=list)
    literal: Optional[Expr] = None


@dataclass
class Block(Stmt):
    stmts: List[Stmt] = field(default_factory=list)


@dataclass
class IfStmt(Stmt):
    condition: Optional[Expr] = None
    then_block: Block = field(default_factory=Block)
    elif_branches: List[Tuple[Expr, Block]] = field(default_factory=list)
    else_block: Optional[Block] = None


@dataclass
class WhileStmt(Stmt):
    condition: Optional[Expr] = None
    body: Block = field(default_factory=Block)


@dataclass
class ForStmt(Stmt):
    variable: str = ""
    variable_type: Optional[Type] = None
    iterable: Optional[Expr] = None
    body: Block = field(default_factory=Block)


@dataclass
class MatchStmt(Stmt):
    expression: Optional[Expr] = None
    arms: List[Tuple[Pattern, Block]] = field(default_factory=list)
    guards: List[Expr] = field(default_factory=list)


@dataclass
class AssignStmt(Stmt):
    name: str = ""
    value: Optional[Expr] = None


@dataclass
class ReturnStmt(Stmt):
    value: Optional[Expr] = None


@dataclass
class Param:
    name: str
    type: Optional[Type] = None


@dataclass
class GenericParam:
    name: str
    constraints: List[str] = field(default_factory=list)


@dataclass
class StructDecl(Node):
    name: str = ""
    generic_params: List[GenericParam] = field(default_factory=list)
    fields: List[Tuple[str, Type]] = field(default_factory=list)


@dataclass
class EnumDecl(Node):
    name: str = ""
    generic_params: List[GenericParam] = field(default_factory=list)
    variants: List[Tuple[str, List[Type]]] = field(default_factory=list)


@dataclass
class InterfaceDecl(Node):
    name: str = ""
    extends: List[str] = field(default_factory=list)
    methods: List[Tuple[str, Type]] = field(default_factory=list)


@dataclass
class TypeAlias(Node):
    name: str = ""
    generic_params: List[GenericParam] = field(default_factory=list)
    aliased_type: Optional[Type] = None


@dataclass
class FunctionDecl(Node):
    name: str = ""
    generic_params: List[GenericParam] = field(default_factory=list)
    params: List[Param] = field(default_factory=list)
    return_type: Optional[Type] = None
    body: Optional[Block] = None


@dataclass
class ImplBlock(Node):
    type_name: str = ""
    interface_name: str = ""
    methods: List[FunctionDecl] = field(default_factory=list)


@dataclass
class Program(Node):
    """A whole source file: functions, types, interfaces and impl blocks."""

    units: List[Node] = field(default_factory=list)

    def functions(self) -> List[FunctionDecl]:
        """Return the top-level function declarations, in source order."""
        return [unit for unit in self.units if isinstance(unit, FunctionDecl)]