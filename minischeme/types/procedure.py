"""Callable values: built-in functions, special forms and closures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from minischeme import LispValue, SExpression

if TYPE_CHECKING:
    from minischeme.types.environment import Environment


class Procedure:
    """Common base of every callable variant. Procedures are shared, never copied."""

    __slots__ = ()

    def __copy__(self): return self

    def __deepcopy__(self, memo): return self


class Builtin(Procedure):
    """A primitive function invoked with an already-evaluated argument list."""

    __slots__ = ("name", "handler")

    def __init__(self, name: str, handler: Callable[[LispValue], LispValue]):
        self.name = name
        self.handler = handler

    def __repr__(self):
        return f"#<builtin {self.name}>"


class SpecialForm(Procedure):
    """A syntactic form invoked with the raw argument list and the calling env."""

    __slots__ = ("name", "handler")

    def __init__(self, name: str, handler: Callable[..., LispValue]):
        self.name = name
        self.handler = handler

    def __repr__(self):
        return f"#<special-form {self.name}>"


class Closure(Procedure):
    """A lambda: parameter list and body closed over its defining environment.

    `formals` is kept exactly as written; it is only checked to be a proper
    list of symbols when the closure is invoked.
    """

    __slots__ = ("env", "formals", "body")

    def __init__(self, env: Environment, formals: SExpression, body: SExpression):
        self.env = env
        self.formals = formals
        self.body = body

    def __repr__(self):
        return "#<closure>"
