import io
import unittest

from lox.lang.error import ErrorHandler
from lox.syntax.scanner import Scanner
from lox.syntax.token import Token, TokenType


def scan(source):
    error_handler = ErrorHandler(stream=io.StringIO())
    return Scanner(source, error_handler).scan_tokens(), error_handler


def types(source):
    tokens, __ = scan(source)
    return [token.type for token in tokens]


class ScannerTestCase(unittest.TestCase):

    def test_punctuation(self):
        cases = {
            "(){},.-+;*/": [TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN, TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE,
                            TokenType.COMMA, TokenType.DOT, TokenType.MINUS, TokenType.PLUS, TokenType.SEMICOLON,
                            TokenType.STAR, TokenType.SLASH],
            "! != = == < <= > >=": [TokenType.BANG, TokenType.BANG_EQUAL, TokenType.EQUAL, TokenType.EQUAL_EQUAL,
                                    TokenType.LESS, TokenType.LESS_EQUAL, TokenType.GREATER, TokenType.GREATER_EQUAL],
            "!==": [TokenType.BANG_EQUAL, TokenType.EQUAL],
            "===": [TokenType.EQUAL_EQUAL, TokenType.EQUAL],
        }
        for case, expected in cases.items():
            self.assertEqual(expected + [TokenType.EOF], types(case), case)

    def test_keywords_and_identifiers(self):
        cases = {
            "var": TokenType.VAR,
            "print": TokenType.PRINT,
            "nil": TokenType.NIL,
            "while": TokenType.WHILE,
            "variable": TokenType.IDENTIFIER,
            "_x1": TokenType.IDENTIFIER,
            "Print": TokenType.IDENTIFIER,
            "orchid": TokenType.IDENTIFIER,
        }
        for case, expected in cases.items():
            tokens, __ = scan(case)
            self.assertEqual(expected, tokens[0].type, case)
            self.assertEqual(case, tokens[0].lexeme, case)
            self.assertIsNone(tokens[0].literal, case)

    def test_numbers(self):
        cases = {"123": 123.0, "1.5": 1.5, "0.25": 0.25, "007": 7.0}
        for case, expected in cases.items():
            tokens, __ = scan(case)
            self.assertEqual(Token(TokenType.NUMBER, case, expected, 1), tokens[0], case)

        # a trailing '.' isn't part of the number
        self.assertEqual([TokenType.NUMBER, TokenType.DOT, TokenType.EOF], types("1."))
        self.assertEqual([TokenType.NUMBER, TokenType.DOT, TokenType.IDENTIFIER, TokenType.EOF], types("1.x"))

    def test_strings(self):
        tokens, error_handler = scan("\"hello world\"")
        self.assertEqual(Token(TokenType.STRING, "\"hello world\"", "hello world", 1), tokens[0])
        self.assertFalse(error_handler.had_error)

        tokens, __ = scan("\"a\nb\" x")
        self.assertEqual("a\nb", tokens[0].literal)
        self.assertEqual(2, tokens[1].line)

        tokens, __ = scan("\"\"")
        self.assertEqual("", tokens[0].literal)

    def test_unterminated_string(self):
        tokens, error_handler = scan("\"abc")
        self.assertTrue(error_handler.had_error)
        self.assertEqual(1, len(error_handler.diagnostics))
        self.assertEqual("Unterminated string.", error_handler.diagnostics[0].message)
        self.assertEqual(1, error_handler.diagnostics[0].line)
        self.assertEqual([Token(TokenType.EOF, "", None, 1)], tokens)

    def test_comments(self):
        cases = {
            "// nothing here": [],
            "1 // one\n2": [TokenType.NUMBER, TokenType.NUMBER],
            "1 /* two\nlines */ 2": [TokenType.NUMBER, TokenType.NUMBER],
            "/**/": [],
            "1 /* never closed": [TokenType.NUMBER],
            "4 / 2": [TokenType.NUMBER, TokenType.SLASH, TokenType.NUMBER],
        }
        for case, expected in cases.items():
            tokens, error_handler = scan(case)
            self.assertEqual(expected + [TokenType.EOF], [token.type for token in tokens], case)
            self.assertFalse(error_handler.had_error, case)

    def test_lines(self):
        tokens, __ = scan("a\n\nb /* \n */ c\r\n\td")
        self.assertEqual([1, 3, 4, 5, 5], [token.line for token in tokens])

    def test_unexpected_characters(self):
        tokens, error_handler = scan("var x = 1 @#;")
        self.assertTrue(error_handler.had_error)
        self.assertEqual(["Unexpected character."] * 2, [d.message for d in error_handler.diagnostics])
        self.assertEqual([TokenType.VAR, TokenType.IDENTIFIER, TokenType.EQUAL, TokenType.NUMBER, TokenType.SEMICOLON,
                          TokenType.EOF], [token.type for token in tokens])

    def test_report_format(self):
        stream = io.StringIO()
        Scanner("\n$", ErrorHandler(stream=stream)).scan_tokens()
        self.assertIn("[line 2]", stream.getvalue())
        self.assertIn("Unexpected character.", stream.getvalue())


if __name__ == '__main__':
    unittest.main()
