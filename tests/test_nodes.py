import pytest

from dragontiger.location import NO_LOCATION
from dragontiger.nodes import (
    Assign,
    BinaryOperator,
    Break,
    ForLoop,
    FunCall,
    FunDecl,
    Identifier,
    IfThenElse,
    IntegerLiteral,
    Let,
    Operator,
    Sequence,
    StringLiteral,
    Type,
    VarDecl,
    Visitor,
    WhileLoop,
)
from dragontiger.symbols import Symbol


def lit(value):
    return IntegerLiteral(NO_LOCATION, value)


class Collector(Visitor):
    def visit_integer_literal(self, node):
        return node.value

    def visit_binary_operator(self, node):
        return (self.visit(node.left), str(node.op), self.visit(node.right))

    def visit_if_then_else(self, node):
        return "ite"

    def visit_sequence(self, node):
        return [self.visit(e) for e in node.exprs]


@pytest.mark.parametrize(
    "op, text",
    [
        (Operator.PLUS, "+"),
        (Operator.NEQ, "<>"),
        (Operator.GE, ">="),
    ],
)
def test_operator_strings_follow_source_table(op, text):
    expr = BinaryOperator(NO_LOCATION, lit(1), lit(2), op)
    assert expr.accept(Collector()) == (1, text, 2)
    assert expr.op.__str__() == text


def test_operator_table_has_ten_entries():
    names = [Operator.__str__(op) for op in Operator]
    assert names == ["+", "-", "*", "/", "=", "<>", "<", "<=", ">", ">="]


def test_visitor_dispatches_by_class():
    expr = BinaryOperator(NO_LOCATION, lit(1), lit(2), Operator.PLUS)
    assert Collector().visit(expr) == (1, "+", 2)


def test_accept_and_visit_agree():
    expr = Sequence(NO_LOCATION, [lit(3), lit(4)])
    collector = Collector()
    assert expr.accept(collector) == collector.visit(expr) == [3, 4]


def test_compound_class_name_dispatch():
    ite = IfThenElse(NO_LOCATION, lit(1), lit(2), lit(3))
    assert Collector().visit(ite) == "ite"


def test_unhandled_node_raises_type_error():
    with pytest.raises(TypeError):
        Collector().visit(Break(NO_LOCATION))


def test_set_type_once():
    node = lit(5)
    assert node.type is Type.UNDEF
    node.set_type(Type.INT)
    assert node.type is Type.INT
    with pytest.raises(ValueError):
        node.set_type(Type.STRING)


def test_set_type_rejects_undef():
    with pytest.raises(ValueError):
        lit(5).set_type(Type.UNDEF)


def test_integer_literal_must_fit_32_bits():
    assert lit(2**31 - 1).value == 2**31 - 1
    with pytest.raises(ValueError):
        lit(2**31)


def test_strings_become_symbols():
    assert StringLiteral(NO_LOCATION, "abc").value is Symbol("abc")
    assert Identifier(NO_LOCATION, "x").name is Symbol("x")
    assert FunCall(NO_LOCATION, [], "f").func_name is Symbol("f")


def test_var_decl_defaults():
    decl = VarDecl(NO_LOCATION, "x", None, lit(1))
    assert decl.depth == -1
    assert decl.read_only is False
    assert decl.escapes is False
    assert decl.type_name is None


def test_decl_set_depth_once():
    decl = VarDecl(NO_LOCATION, "x", "int", lit(1))
    assert decl.type_name is Symbol("int")
    decl.set_depth(2)
    assert decl.depth == 2
    with pytest.raises(ValueError):
        decl.set_depth(3)


def test_identifier_bind():
    decl = VarDecl(NO_LOCATION, "x", None, lit(1))
    ident = Identifier(NO_LOCATION, "x")
    ident.bind(decl, 1)
    assert ident.decl is decl
    assert ident.depth == 1
    with pytest.raises(ValueError):
        ident.bind(decl, 1)


def test_identifier_bind_rejects_missing_decl():
    with pytest.raises(ValueError):
        Identifier(NO_LOCATION, "x").bind(None, 0)


def test_fun_call_bind():
    fun = FunDecl(NO_LOCATION, "f", None, [], lit(0))
    call = FunCall(NO_LOCATION, [lit(1)], "f")
    call.bind(fun, 0)
    assert call.decl is fun
    assert call.depth == 0


def test_fun_decl_external_name():
    fun = FunDecl(NO_LOCATION, "f", None, [], lit(0))
    assert fun.external_name == Symbol()
    fun.set_external_name("f_1")
    assert fun.external_name is Symbol("f_1")
    with pytest.raises(ValueError):
        fun.set_external_name("f_2")


def test_fun_decl_rejects_null_external_name():
    fun = FunDecl(NO_LOCATION, "f", None, [], lit(0))
    with pytest.raises(ValueError):
        fun.set_external_name(Symbol())


def test_fun_decl_parent_and_escaping():
    outer = FunDecl(NO_LOCATION, "outer", None, [], lit(0))
    inner = FunDecl(NO_LOCATION, "inner", None, [], lit(0))
    inner.set_parent(outer)
    assert inner.parent is outer
    assert inner.escaping_decls == []
    assert inner.escaping_decls is not outer.escaping_decls
    with pytest.raises(ValueError):
        inner.set_parent(outer)


def test_break_set_loop():
    brk = Break(NO_LOCATION)
    loop = WhileLoop(NO_LOCATION, lit(1), brk)
    brk.set_loop(loop)
    assert brk.loop is loop
    with pytest.raises(ValueError):
        brk.set_loop(loop)


def test_structure_of_let_and_for():
    var = VarDecl(NO_LOCATION, "i", None, lit(0))
    loop = ForLoop(NO_LOCATION, var, lit(10), Sequence(NO_LOCATION, []))
    assign = Assign(NO_LOCATION, Identifier(NO_LOCATION, "i"), lit(1))
    let = Let(NO_LOCATION, (var,), Sequence(NO_LOCATION, [loop, assign]))
    assert let.decls == [var]
    assert let.sequence.exprs[0].variable is var
    assert let.sequence.exprs[1].lhs.name is Symbol("i")


def test_nodes_compare_by_identity():
    assert lit(1) != lit(1)
    node = lit(1)
    assert node == node
    assert {node: "x"}[node] == "x"