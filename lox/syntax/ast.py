"""Abstract syntax tree for lox. Two closed families of immutable nodes: expressions (Expr) and statements (Stmt).

Grammar covered by these nodes:

```
<program>     ::= <declaration>* EOF
<declaration> ::= "var" IDENTIFIER ( "=" <expression> )? ";" | <statement>
<statement>   ::= "print" <expression> ";" | "{" <declaration>* "}" | <expression> ";"
<expression>  ::= IDENTIFIER "=" <expression> | <equality>
<equality>    ::= <comparison> ( ( "!=" | "==" ) <comparison> )*
<comparison>  ::= <addition> ( ( ">" | ">=" | "<" | "<=" ) <addition> )*
<addition>    ::= <multiplication> ( ( "-" | "+" ) <multiplication> )*
<multiplication> ::= <unary> ( ( "/" | "*" ) <unary> )*
<unary>       ::= ( "!" | "-" ) <unary> | <primary>
<primary>     ::= NUMBER | STRING | "true" | "false" | "nil" | IDENTIFIER | "(" <expression> ")"
```

Consumers dispatch on node type (see NodeVisitor), so adding a node means adding a handler to every visitor.
"""

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from lox.syntax.token import Token


class Expr:
    """Superclass of all expression nodes."""


class Stmt:
    """Superclass of all statement nodes."""


@dataclass(frozen=True)
class Literal(Expr):
    value: Any


@dataclass(frozen=True)
class Grouping(Expr):
    expression: Expr


@dataclass(frozen=True)
class Unary(Expr):
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Variable(Expr):
    name: Token


@dataclass(frozen=True)
class Assign(Expr):
    name: Token
    value: Expr


@dataclass(frozen=True)
class Expression(Stmt):
    expression: Expr


@dataclass(frozen=True)
class Print(Stmt):
    expression: Expr


@dataclass(frozen=True)
class Var(Stmt):
    name: Token
    initializer: Optional[Expr]


@dataclass(frozen=True)
class Block(Stmt):
    statements: Tuple[Stmt, ...]


EXPRS = (Literal, Grouping, Unary, Binary, Variable, Assign)
STMTS = (Expression, Print, Var, Block)


class NodeVisitor:
    """Dispatches a node to the visit_<node class name> method of a subclass. Subclasses must handle every node class
    in EXPRS and STMTS they can be given; a missing handler is an internal error.
    """

    def visit(self, node):
        method = getattr(self, f"visit_{type(node).__name__.lower()}", None)
        if method is None:
            raise TypeError(f"{type(self).__name__} cannot handle {type(node).__name__}")
        return method(node)
