"""Tree-walking interpreter for lox. Evaluates expressions and executes statements directly off the AST.

Runtime values are plain Python values:
- nil     -> None
- boolean -> bool
- number  -> float
- string  -> str

Note that bool is a subclass of int in Python, so all type checks here are exact (`type(x) is float`) and equality never
falls back to Python's own `True == 1.0`.
"""

import math
import sys
from decimal import Decimal

from lox.lang.error import LoxRuntimeError
from lox.runtime.environment import Environment
from lox.syntax.ast import NodeVisitor
from lox.syntax.token import TokenType


def is_number(value):
    return type(value) is float


def is_string(value):
    return type(value) is str


def is_truthy(value):
    """nil and false are falsy, everything else (0 and "" included) is truthy."""
    if value is None:
        return False
    if type(value) is bool:
        return value
    return True


def is_equal(a, b):
    if a is None and b is None:
        return True
    if a is None:
        return False
    return type(a) is type(b) and a == b


def stringify(value):
    """Text form of a runtime value, as written by print."""
    if value is None:
        return "nil"
    if type(value) is bool:
        return "true" if value else "false"
    if is_number(value):
        return stringify_number(value)
    return str(value)


def stringify_number(value):
    """Plain decimal text between 1e-6 and 1e21, exponent form outside it. Integral values have no decimal point and
    -0 prints as 0.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    if 1e-6 <= abs(value) < 1e21:
        # repr keeps the shortest round-tripping digits, normalize drops a trailing ".0"
        return format(Decimal(repr(value)).normalize(), "f")

    mantissa, exponent = repr(value).split("e")
    if mantissa.endswith(".0"):
        mantissa = mantissa[:-2]
    exponent = int(exponent)
    return f"{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"


class Interpreter(NodeVisitor):
    """Runs statement lists against one global Environment, which persists between interpret calls."""

    def __init__(self, error_handler, out=None):
        self.error_handler = error_handler
        self.out = out

        self.globals = Environment()
        self.environment = self.globals

    def interpret(self, statements):
        """Executes statements in order. The first runtime error is reported and the rest of the batch is skipped."""
        try:
            for stmt in statements:
                self.execute(stmt)
        except LoxRuntimeError as error:
            self.error_handler.runtime_error(error)

    def evaluate(self, expr):
        return self.visit(expr)

    def execute(self, stmt):
        self.visit(stmt)

    def execute_block(self, statements, environment):
        previous = self.environment
        try:
            self.environment = environment
            for stmt in statements:
                self.execute(stmt)
        finally:
            self.environment = previous

    # statements

    def visit_expression(self, stmt):
        self.evaluate(stmt.expression)

    def visit_print(self, stmt):
        value = self.evaluate(stmt.expression)
        print(stringify(value), file=self.out if self.out is not None else sys.stdout)

    def visit_var(self, stmt):
        value = None
        if stmt.initializer is not None:
            value = self.evaluate(stmt.initializer)
        self.environment.define(stmt.name.lexeme, value)

    def visit_block(self, stmt):
        self.execute_block(stmt.statements, Environment(self.environment))

    # expressions

    def visit_literal(self, expr):
        return expr.value

    def visit_grouping(self, expr):
        return self.evaluate(expr.expression)

    def visit_variable(self, expr):
        return self.environment.get(expr.name)

    def visit_assign(self, expr):
        value = self.evaluate(expr.value)
        self.environment.assign(expr.name, value)
        return value

    def visit_unary(self, expr):
        right = self.evaluate(expr.right)
        operator = expr.operator.type

        if operator is TokenType.BANG:
            return not is_truthy(right)
        if operator is TokenType.MINUS:
            Interpreter.check_number_operand(expr.operator, right)
            return -right

        raise LoxRuntimeError(expr.operator, f"Unknown unary operator '{expr.operator.lexeme}'.")

    def visit_binary(self, expr):
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        operator = expr.operator.type

        if operator is TokenType.PLUS:
            return Interpreter.add(expr.operator, left, right)
        if operator is TokenType.EQUAL_EQUAL:
            return is_equal(left, right)
        if operator is TokenType.BANG_EQUAL:
            return not is_equal(left, right)

        if operator is TokenType.SLASH:
            if is_number(right) and right == 0:
                raise LoxRuntimeError(expr.operator, "Cannot divide by zero.")
            Interpreter.check_number_operands(expr.operator, left, right)
            return left / right

        arithmetic = Interpreter.ARITHMETIC.get(operator)
        if arithmetic is None:
            raise LoxRuntimeError(expr.operator, f"Unknown binary operator '{expr.operator.lexeme}'.")

        Interpreter.check_number_operands(expr.operator, left, right)
        return arithmetic(left, right)

    ARITHMETIC = {
        TokenType.MINUS: lambda a, b: a - b,
        TokenType.STAR: lambda a, b: a * b,
        TokenType.GREATER: lambda a, b: a > b,
        TokenType.GREATER_EQUAL: lambda a, b: a >= b,
        TokenType.LESS: lambda a, b: a < b,
        TokenType.LESS_EQUAL: lambda a, b: a <= b,
    }

    @staticmethod
    def add(operator, left, right):
        """+ on two numbers or two strings. A string and a number concatenate, the number in its printed form."""
        if is_number(left) and is_number(right):
            return left + right
        if is_string(left) and is_string(right):
            return left + right
        if is_string(left) and is_number(right):
            return left + stringify(right)
        if is_number(left) and is_string(right):
            return stringify(left) + right

        raise LoxRuntimeError(operator, "Operands must be two numbers or two string.")

    @staticmethod
    def check_number_operand(operator, operand):
        if not is_number(operand):
            raise LoxRuntimeError(operator, "Operand must be a number.")

    @staticmethod
    def check_number_operands(operator, left, right):
        if not (is_number(left) and is_number(right)):
            raise LoxRuntimeError(operator, "Operands must be numbers.")
