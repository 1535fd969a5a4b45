"""Lexical scoping for lox: a chain of frames, each mapping names to values and linking to its enclosing frame."""

from lox.lang.error import LoxRuntimeError


class Environment:
    """One scope frame. enclosing is None for the global frame."""

    def __init__(self, enclosing=None):
        self.enclosing = enclosing
        self.values = {}

    def define(self, name, value):
        """Binds name in this frame. Redefining an existing name just overwrites it."""
        self.values[name] = value

    def get(self, name):
        """Returns the value bound to token name in the nearest frame that has it."""
        env = self._resolve(name)
        return env.values[name.lexeme]

    def assign(self, name, value):
        """Rebinds token name in the nearest frame that has it. Never creates a new binding."""
        env = self._resolve(name)
        env.values[name.lexeme] = value

    def _resolve(self, name):
        env = self
        while env is not None:
            if name.lexeme in env.values:
                return env
            env = env.enclosing
        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    def __repr__(self):
        return f"Environment(values={self.values}, enclosing={self.enclosing!r})"
