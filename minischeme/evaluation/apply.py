"""Application engine for minischeme.

Built-ins are called with the evaluated argument list. Closures get one new
environment, a child of the environment they captured (never the caller's),
with each formal parameter bound to its argument; the body is evaluated
there. Only fixed arity is supported.
"""

from __future__ import annotations

import logging

from minischeme import EvaluatorFn, LispValue
from minischeme.errors import SchemeSyntaxError, SchemeTypeError
from minischeme.printer import to_string
from minischeme.types.environment import Environment
from minischeme.types.lists import is_list, list_length, to_python_list
from minischeme.types.procedure import Builtin, Closure
from minischeme.types.symbol import Symbol

logger = logging.getLogger(__name__)


def closure_formals(fn: Closure) -> list[Symbol]:
    """The closure's parameter symbols, checked at call time."""
    if not is_list(fn.formals):
        raise SchemeSyntaxError(
            f"Lambda parameter list must be a proper list, got {to_string(fn.formals)}"
        )
    formals = to_python_list(fn.formals)
    for param in formals:
        if not isinstance(param, Symbol):
            raise SchemeSyntaxError(f"Lambda parameter must be a symbol, got {to_string(param)}")
    return formals


def bind_arguments(formals: list[Symbol], args: list[LispValue], closure_env: Environment) -> Environment:
    """Return a child of `closure_env` binding each formal to its argument, in order."""
    local_env = Environment(outer=closure_env)
    for name, value in zip(formals, args):
        local_env.define(name, value)
    return local_env


def apply_closure(fn: Closure, args: LispValue, evaluate_fn: EvaluatorFn) -> LispValue:
    formals = closure_formals(fn)
    arity = len(formals)
    argcount = list_length(args, "argument list")
    if argcount != arity:
        raise SchemeSyntaxError(f"Lambda function expected {arity} arguments, got {argcount}")

    new_env = bind_arguments(formals, to_python_list(args), fn.env)
    logger.debug("Invoking closure with %d argument(s)", argcount)
    return evaluate_fn(fn.body, new_env)


def apply(head: LispValue, args: LispValue, evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a built-in or a closure to an evaluated argument list."""
    match head:
        case Builtin():
            return head.handler(args)
        case Closure():
            return apply_closure(head, args, evaluate_fn)
    raise SchemeTypeError(f"Cannot apply non-function {to_string(head)}")
