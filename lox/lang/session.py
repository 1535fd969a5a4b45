"""Session control for lox. A Session drives the whole pipeline (scan, parse, interpret) for a script file or for
single lines typed into the shell, keeping one global scope alive across runs.
"""

from lox.lang.error import LoxError
from lox.runtime.interpreter import Interpreter
from lox.syntax.parser import Parser
from lox.syntax.printer import AstPrinter
from lox.syntax.scanner import Scanner


class Session:
    """Governs a lox session. Variables defined by one run are visible to the next."""
    EX_DATAERR = 65   # scan or parse error
    EX_NOINPUT = 66   # script could not be read
    EX_SOFTWARE = 70  # runtime error

    def __init__(self, error_handler, out=None):
        self.error_handler = error_handler
        self.interpreter = Interpreter(error_handler, out)

    def run(self, source):
        """Runs source. Nothing is interpreted if scanning or parsing reported an error."""
        statements = self.parse(source)
        if self.error_handler.had_error:
            return
        self.interpreter.interpret(statements)

    def run_file(self, path):
        """Reads path and runs it. Raises LoxError if path can't be read."""
        self.run(Session.read(path))

    def parse(self, source):
        tokens = self.tokens(source)
        return Parser(tokens, self.error_handler).parse()

    def tokens(self, source):
        return Scanner(source, self.error_handler).scan_tokens()

    def ast(self, tokens):
        """Statements parsed from tokens, rendered one per line, for debugging."""
        printer = AstPrinter()
        statements = Parser(tokens, self.error_handler).parse()
        return "\n".join(printer.print(stmt) for stmt in statements)

    def exit_status(self):
        """Process exit status for the run(s) so far."""
        if self.error_handler.had_error:
            return Session.EX_DATAERR
        if self.error_handler.had_runtime_error:
            return Session.EX_SOFTWARE
        return 0

    @staticmethod
    def read(path):
        try:
            with open(path, "r", encoding="utf-8") as file:
                return file.read()
        except (OSError, UnicodeDecodeError):
            raise LoxError(f"'{path}' could not be opened", exit_status=Session.EX_NOINPUT)
