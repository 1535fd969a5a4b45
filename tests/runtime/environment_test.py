import unittest

from lox.lang.error import LoxRuntimeError
from lox.runtime.environment import Environment
from lox.syntax.token import Token, TokenType


def name(lexeme):
    return Token(TokenType.IDENTIFIER, lexeme, None, 1)


class EnvironmentTestCase(unittest.TestCase):

    def test_define_get(self):
        env = Environment()
        env.define("a", 1.0)
        self.assertEqual(1.0, env.get(name("a")))

        env.define("a", "redefined")
        self.assertEqual("redefined", env.get(name("a")))

        env.define("b", None)
        self.assertIsNone(env.get(name("b")))

    def test_enclosing(self):
        outer = Environment()
        outer.define("a", 1.0)
        outer.define("b", 2.0)

        inner = Environment(outer)
        inner.define("a", 10.0)

        self.assertEqual(10.0, inner.get(name("a")))
        self.assertEqual(2.0, inner.get(name("b")))
        self.assertEqual(1.0, outer.get(name("a")))

        inner.assign(name("b"), 20.0)
        self.assertEqual(20.0, outer.get(name("b")))
        self.assertNotIn("b", inner.values)

        inner.assign(name("a"), 100.0)
        self.assertEqual(1.0, outer.get(name("a")))

    def test_undefined(self):
        env = Environment(Environment())
        for action in (lambda: env.get(name("x")), lambda: env.assign(name("x"), 1.0)):
            with self.assertRaises(LoxRuntimeError) as context:
                action()
            self.assertEqual("Undefined variable 'x'.", context.exception.msg)
            self.assertEqual("x", context.exception.token.lexeme)


if __name__ == '__main__':
    unittest.main()
