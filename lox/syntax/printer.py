"""Renders an AST in parenthesized prefix form, e.g. `-123 * (45.67)` becomes `(* (- 123) (group 45.67))`. Used for the
--ast debug dump and in tests.
"""

from lox.runtime.interpreter import stringify
from lox.syntax.ast import NodeVisitor


class AstPrinter(NodeVisitor):

    def print(self, node):
        return self.visit(node)

    def visit_binary(self, expr):
        return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_grouping(self, expr):
        return self.parenthesize("group", expr.expression)

    def visit_literal(self, expr):
        return stringify(expr.value)

    def visit_unary(self, expr):
        return self.parenthesize(expr.operator.lexeme, expr.right)

    def visit_variable(self, expr):
        return expr.name.lexeme

    def visit_assign(self, expr):
        return self.parenthesize(f"= {expr.name.lexeme}", expr.value)

    def visit_expression(self, stmt):
        return self.parenthesize(";", stmt.expression)

    def visit_print(self, stmt):
        return self.parenthesize("print", stmt.expression)

    def visit_var(self, stmt):
        if stmt.initializer is None:
            return f"(var {stmt.name.lexeme})"
        return self.parenthesize(f"var {stmt.name.lexeme}", stmt.initializer)

    def visit_block(self, stmt):
        return self.parenthesize("block", *stmt.statements)

    def parenthesize(self, name, *nodes):
        result = f"({name}"
        for node in nodes:
            result += " " + self.visit(node)
        return result + ")"
