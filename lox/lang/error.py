"""Error handling for the lox language. Scan and parse errors are reported and accumulated, runtime errors abort the
running batch. ErrorHandler is the single sink for all of them: each pipeline stage gets one injected, so two sessions
never share error state. If an error that isn't a LoxError makes it all the way to ErrorHandler, it is assumed to be an
internal issue.
"""

import sys
from dataclasses import dataclass

from termcolor import colored

from lox.syntax.token import TokenType


class LoxError(Exception):
    """Driver-level lox error (unreadable script, bad invocation). Carries a message only."""

    def __init__(self, msg, exit_status=1):
        super().__init__(msg)
        self.msg = msg
        self.exit_status = exit_status


class ParseError(LoxError):
    """Raised by the parser to unwind to the enclosing declaration, which synchronizes. Already reported by the time it
    is raised.
    """

    def __init__(self):
        super().__init__("parse error")


class LoxRuntimeError(LoxError):
    """Error raised while interpreting: operand checks, division by zero, undefined variables."""

    def __init__(self, token, msg):
        super().__init__(msg)
        self.token = token


@dataclass(frozen=True)
class Diagnostic:
    kind: str
    line: int
    where: str
    message: str

    def __str__(self):
        label = "Runtime error" if self.kind == ErrorHandler.RUNTIME else "Error"
        return f"[line {self.line}] {label}{self.where}: {self.message}"


class ErrorHandler:
    """Collects lexical, syntax and runtime errors, prints them and keeps the sticky flags a driver checks after a run.
    Also a context manager that reports errors escaping the driver.
    """
    STATIC = "static"
    RUNTIME = "runtime"

    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, stream=None, fatal=False):
        self.stream = stream
        self.fatal = fatal

        self.had_error = False
        self.had_runtime_error = False
        self.diagnostics = []

    @property
    def _stream(self):
        return self.stream if self.stream is not None else sys.stderr

    @staticmethod
    def where(token):
        """Positional context of token for error messages."""
        if token.type is TokenType.EOF:
            return " at end"
        return f" at '{token.lexeme}'"

    def error(self, line, message):
        """Reports a lexical error on line."""
        self._report(Diagnostic(ErrorHandler.STATIC, line, "", message))

    def token_error(self, token, message):
        """Reports a syntax error at token."""
        self._report(Diagnostic(ErrorHandler.STATIC, token.line, ErrorHandler.where(token), message))

    def runtime_error(self, error):
        """Reports a LoxRuntimeError raised by the interpreter."""
        token = error.token
        self._report(Diagnostic(ErrorHandler.RUNTIME, token.line, ErrorHandler.where(token), error.msg))

    def reset(self, runtime=False):
        """Clears the static error flag. With runtime, also clears the runtime flag and the recorded diagnostics, which
        is what the shell does between lines.
        """
        self.had_error = False
        if runtime:
            self.had_runtime_error = False
            self.diagnostics = []

    def _report(self, diagnostic):
        if diagnostic.kind == ErrorHandler.RUNTIME:
            self.had_runtime_error = True
            label = colored("Runtime error", ErrorHandler.WARNING, attrs=["bold"])
        else:
            self.had_error = True
            label = colored("Error", ErrorHandler.ERROR, attrs=["bold"])

        self.diagnostics.append(diagnostic)

        line = colored(f"[line {diagnostic.line}] ", attrs=["bold"])
        print(f"{line}{label}{diagnostic.where}: {diagnostic.message}", file=self._stream)

    def throw(self, error, internal=False):
        """Prints a driver-level error. Exits with the error's status if this handler is fatal."""
        error_msg = ""
        if internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg, file=self._stream)

        if self.fatal:
            sys.exit(error.exit_status)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(LoxError("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is not None and issubclass(exc_type, LoxError):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(LoxError(f"unknown error: '{exc_type.__name__}: {exc_val}'"), internal=True)
            do_exit = True

        return not do_exit
