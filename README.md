# dragontiger

Building blocks for a compiler of the Tiger language: interned symbols,
source positions and ranges, and the abstract syntax tree with a visitor
protocol.

It is a library with three modules:

- `dragontiger.symbols`: `Symbol`
- `dragontiger.location`: `Position`, `Location`, `NO_LOCATION`
- `dragontiger.nodes`: `Type`, `Operator`, `Visitor` and the tree nodes

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Symbols

`Symbol` interns strings. Two symbols made from the same text are the same
object, and symbols compare by identity. `Symbol()` is the null symbol,
standing for the absence of a name; it prints as `<null>`. Passing a
`Symbol` returns it unchanged, and anything other than a string or `None`
raises `TypeError`.

```python
from dragontiger.symbols import Symbol

assert Symbol("x") is Symbol("x")
assert str(Symbol()) == "<null>"
assert Symbol("x").text == "x"
```

## Locations

`Position(filename, line, column)` is a point in a file; it prints as
`file:line.column`, or `line.column` when there is no file name.
`Location(begin, end)` is a range whose end column is exclusive; when
`end` is omitted it equals `begin`. Both are frozen dataclasses.

```python
from dragontiger.location import Location, NO_LOCATION, Position

loc = Location(Position("a.tig", 1, 1), Position("a.tig", 1, 5))
assert str(loc) == "a.tig:1.1-4"
assert str(Location()) == "1.1"
assert str(NO_LOCATION) == "<none>:0.0"
```

`NO_LOCATION` stands for the absence of a location, as for primitive
declarations.

## The tree

Every node takes a `Location` first. The expression nodes are
`IntegerLiteral`, `StringLiteral`, `BinaryOperator`, `Sequence`, `Let`,
`Identifier`, `IfThenElse`, `FunCall`, `WhileLoop`, `ForLoop`, `Break`
and `Assign`; the declarations are `VarDecl` and `FunDecl`. Names given as
strings are turned into `Symbol`s. `IntegerLiteral` rejects values that do
not fit in a signed 32-bit integer with `ValueError`.

```python
from dragontiger.location import Location
from dragontiger.nodes import (
    BinaryOperator, IfThenElse, IntegerLiteral, Operator, Sequence,
)

loc = Location()
tree = IfThenElse(
    loc,
    BinaryOperator(loc, IntegerLiteral(loc, 1), IntegerLiteral(loc, 2), Operator.LT),
    Sequence(loc, [IntegerLiteral(loc, 10)]),
    IntegerLiteral(loc, 20),
)
```

`Operator` members print as their Tiger spelling (`str(Operator.NEQ)` is
`<>`). `Type` has `UNDEF`, `INT`, `STRING` and `VOID`.

### Annotations

The fields that semantic passes fill in can each be set once; setting one
twice, or to its "unset" value, raises `ValueError`:

- `Node.set_type(node_type)`
- `Decl.set_depth(depth)`
- `Identifier.bind(decl, depth)` and `FunCall.bind(decl, depth)`
- `FunDecl.set_external_name(name)` and `FunDecl.set_parent(parent)`
- `Break.set_loop(loop)`

`VarDecl.escapes` and `FunDecl.escaping_decls` are plain attributes.

### Visitors

`node.accept(visitor)` calls the visitor's `visit_<name>` method, where
`<name>` is the node's class name in snake case (`visit_if_then_else`,
`visit_fun_call`, ...), and returns its result. Subclass `Visitor`, whose
`visit(node)` does the same and whose `generic_visit` raises `TypeError`
for node kinds the subclass does not handle.

```python
from dragontiger.nodes import Visitor

class Count(Visitor):
    def visit_integer_literal(self, node):
        return 1

    def visit_binary_operator(self, node):
        return self.visit(node.left) + self.visit(node.right)

    def visit_sequence(self, node):
        return sum(self.visit(e) for e in node.exprs)

    def visit_if_then_else(self, node):
        return sum(map(self.visit, (node.condition, node.then_part, node.else_part)))

assert Count().visit(tree) == 4
```

## What it does not do

There is no lexer or parser: trees are built by hand from the node
classes. The package has no command-line program, and offers no
pretty-printer, evaluator or error-reporting helpers; those are left to
visitors and code built on top of it.