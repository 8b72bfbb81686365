"""Runtime environment for minischeme.

An Environment maps symbol names to values and links to an optional `outer`
environment. Lookup walks outward and the innermost binding wins, which gives
lexical shadowing. The environment with no outer link is the global one.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from minischeme import LispValue
from minischeme.errors import SchemeInternalError, SchemeUndefinedSymbol
from minischeme.types.symbol import Symbol


class Environment:
    """One frame of bindings plus the link to its enclosing frame."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    @staticmethod
    def _key(name: Symbol | str) -> str:
        if isinstance(name, Symbol):
            return name.name
        if isinstance(name, str):
            return name
        raise SchemeInternalError(f"Cannot bind {name!r}: not a symbol")

    def define(self, name: Symbol | str, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, replacing any existing binding."""
        self.vars[self._key(name)] = value

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        key = self._key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol | str) -> LispValue:
        """Return the innermost value bound to `name`.

        Raises SchemeUndefinedSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise SchemeUndefinedSymbol(f"Undefined symbol: {self._key(name)}")
        return env.vars[self._key(name)]

    def root(self) -> Environment:
        """Return the global environment at the end of the chain."""
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def __contains__(self, name: Symbol | str) -> bool:
        return self.find(name) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            frames = []
            env: Optional[Environment] = self
            while env is not None:
                with StringIO() as frame:
                    env._write_vars(frame)
                    frames.append(frame.getvalue())
                env = env.outer
            buffer.write(" -> ".join(frames))
            buffer.write(">")
            return buffer.getvalue()
