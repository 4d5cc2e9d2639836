from tjlang.ast import (
    AssignStmt,
    BinaryExpr,
    Block,
    EnumDecl,
    Expr,
    FunctionDecl,
    Identifier,
    IfStmt,
    ImplBlock,
    IntLiteral,
    Param,
    Pattern,
    PatternKind,
    Program,
    ReturnStmt,
    Stmt,
    StructDecl,
    Type,
    TypeKind,
    VecLiteral,
)


def test_functions_filters_units_in_order():
    f1 = FunctionDecl(name="first")
    f2 = FunctionDecl(name="second")
    program = Program(units=[f1, StructDecl(name="Point"), f2, EnumDecl(name="E")])
    assert program.functions() == [f1, f2]


def test_functions_ignores_impl_methods():
    impl = ImplBlock(type_name="Point", methods=[FunctionDecl(name="area")])
    program = Program(units=[impl])
    assert program.functions() == []


def test_empty_program_has_no_functions():
    assert Program().functions() == []
    assert Program().units == []


def test_default_lists_are_not_shared():
    a = Block()
    b = Block()
    a.stmts.append(ReturnStmt())
    assert b.stmts == []
    assert len(a.stmts) == 1


def test_expression_hierarchy():
    expr = BinaryExpr(op="+", lhs=Identifier(name="x"), rhs=IntLiteral(value=3))
    assert isinstance(expr, Expr)
    assert isinstance(expr.lhs, Expr)
    assert expr.rhs.value == 3


def test_statement_hierarchy():
    stmt = IfStmt(condition=Identifier(name="c"), then_block=Block(stmts=[AssignStmt(name="y")]))
    assert isinstance(stmt, Stmt)
    assert isinstance(stmt.then_block, Stmt)
    assert stmt.else_block is None
    assert stmt.then_block.stmts[0].name == "y"


def test_function_type_layout():
    fn_type = Type(
        TypeKind.FUNCTION,
        args=[Type(TypeKind.PRIMITIVE, "int"), Type(TypeKind.PRIMITIVE, "bool")],
    )
    assert fn_type.args[-1].name == "bool"
    assert fn_type.constraints == []


def test_type_built_from_kind_name():
    named = Type(TypeKind["NAMED"], "Point")
    assert named == Type(TypeKind.NAMED, "Point")
    assert named.kind.value == "NAMED"
    assert named.args == []


def test_pattern_defaults():
    pattern = Pattern(PatternKind.WILDCARD)
    assert pattern.name == ""
    assert pattern.sub_patterns == []
    assert pattern.type is None


def test_nodes_compare_by_value():
    assert Param("x", Type(TypeKind.PRIMITIVE, "int")) == Param("x", Type(TypeKind.PRIMITIVE, "int"))
    assert VecLiteral(elements=[IntLiteral(1)]) == VecLiteral(elements=[IntLiteral(1)])
    assert FunctionDecl(name="a") != FunctionDecl(name="b")