"""Abstract syntax tree of the Tiger language."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from .location import Location
from .symbols import Symbol

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class Type(Enum):
    UNDEF = 0
    INT = 1
    STRING = 2
    VOID = 3


class Operator(Enum):
    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    DIVIDE = "/"
    EQ = "="
    NEQ = "<>"
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="

    def __str__(self) -> str:
        return self.value


class Visitor:
    """Base visitor; nodes dispatch to ``visit_<snake_case_class_name>``."""

    def visit(self, node):
        return node.accept(self)

    def generic_visit(self, node):
        raise TypeError(f"{type(self).__name__} cannot visit {type(node).__name__}")


def _snake_case(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def _as_symbol(value) -> Symbol:
    return Symbol(value)


def _as_optional_symbol(value) -> Symbol | None:
    return None if value is None else Symbol(value)


@dataclass(eq=False)
class Node:
    loc: Location
    type: Type = field(default=Type.UNDEF, init=False)

    _visit_name = "node"

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._visit_name = _snake_case(cls.__name__)

    def accept(self, visitor):
        handler = getattr(visitor, "visit_" + self._visit_name, None)
        if handler is None:
            return visitor.generic_visit(self)
        return handler(self)

    def set_type(self, node_type: Type) -> None:
        if self.type is not Type.UNDEF:
            raise ValueError("type is already set")
        if node_type is Type.UNDEF:
            raise ValueError("cannot set type to UNDEF")
        self.type = node_type


@dataclass(eq=False)
class Expr(Node):
    pass


@dataclass(eq=False)
class Decl(Node):
    name: Symbol
    type_name: Symbol | None
    depth: int = field(default=-1, init=False)

    def __post_init__(self) -> None:
        self.name = _as_symbol(self.name)
        self.type_name = _as_optional_symbol(self.type_name)

    def set_depth(self, depth: int) -> None:
        if self.depth != -1:
            raise ValueError("depth is already set")
        if depth == -1:
            raise ValueError("cannot set depth to -1")
        self.depth = depth


@dataclass(eq=False)
class IntegerLiteral(Expr):
    value: int

    def __post_init__(self) -> None:
        if not _INT32_MIN <= self.value <= _INT32_MAX:
            raise ValueError(f"integer literal {self.value} does not fit in 32 bits")


@dataclass(eq=False)
class StringLiteral(Expr):
    value: Symbol

    def __post_init__(self) -> None:
        self.value = _as_symbol(self.value)


@dataclass(eq=False)
class BinaryOperator(Expr):
    left: Expr
    right: Expr
    op: Operator


@dataclass(eq=False)
class Sequence(Expr):
    exprs: list[Expr]

    def __post_init__(self) -> None:
        self.exprs = list(self.exprs)


@dataclass(eq=False)
class Let(Expr):
    decls: list[Decl]
    sequence: Sequence

    def __post_init__(self) -> None:
        self.decls = list(self.decls)


@dataclass(eq=False)
class Identifier(Expr):
    name: Symbol
    decl: VarDecl | None = field(default=None, init=False, repr=False)
    depth: int = field(default=-1, init=False)

    def __post_init__(self) -> None:
        self.name = _as_symbol(self.name)

    def bind(self, decl: VarDecl, depth: int) -> None:
        """Record the declaration this identifier refers to and its depth."""
        _bind(self, decl, depth)


@dataclass(eq=False)
class IfThenElse(Expr):
    condition: Expr
    then_part: Expr
    else_part: Expr


@dataclass(eq=False)
class VarDecl(Decl):
    expr: Expr | None
    read_only: bool = False
    escapes: bool = field(default=False, init=False)


@dataclass(eq=False)
class FunDecl(Decl):
    params: list[VarDecl]
    expr: Expr | None
    is_external: bool = False
    external_name: Symbol = field(default=Symbol(), init=False)
    parent: FunDecl | None = field(default=None, init=False, repr=False)
    escaping_decls: list[VarDecl] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        self.params = list(self.params)

    def set_external_name(self, external_name) -> None:
        external_name = Symbol(external_name)
        if self.external_name != Symbol():
            raise ValueError("external name is already set")
        if external_name == Symbol():
            raise ValueError("cannot set a null external name")
        self.external_name = external_name

    def set_parent(self, parent: FunDecl) -> None:
        if self.parent is not None:
            raise ValueError("parent is already set")
        if parent is None:
            raise ValueError("parent must be a function declaration")
        self.parent = parent


@dataclass(eq=False)
class FunCall(Expr):
    args: list[Expr]
    func_name: Symbol
    decl: FunDecl | None = field(default=None, init=False, repr=False)
    depth: int = field(default=-1, init=False)

    def __post_init__(self) -> None:
        self.args = list(self.args)
        self.func_name = _as_symbol(self.func_name)

    def bind(self, decl: FunDecl, depth: int) -> None:
        """Record the called function's declaration and the call depth."""
        _bind(self, decl, depth)


@dataclass(eq=False)
class Loop(Expr):
    pass


@dataclass(eq=False)
class WhileLoop(Loop):
    condition: Expr
    body: Expr


@dataclass(eq=False)
class ForLoop(Loop):
    variable: VarDecl
    high: Expr
    body: Expr


@dataclass(eq=False)
class Break(Expr):
    loop: Loop | None = field(default=None, init=False, repr=False)

    def set_loop(self, loop: Loop) -> None:
        if self.loop is not None:
            raise ValueError("loop is already set")
        if loop is None:
            raise ValueError("loop must be a loop node")
        self.loop = loop


@dataclass(eq=False)
class Assign(Expr):
    lhs: Identifier
    rhs: Expr


def _bind(node, decl, depth: int) -> None:
    if node.decl is not None:
        raise ValueError("declaration is already set")
    if decl is None:
        raise ValueError("declaration must not be None")
    if node.depth != -1:
        raise ValueError("depth is already set")
    if depth == -1:
        raise ValueError("cannot set depth to -1")
    node.decl = decl
    node.depth = depth