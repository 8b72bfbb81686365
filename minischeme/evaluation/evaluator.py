"""Core evaluator for minischeme.

Plain structural recursion: literals evaluate to themselves, symbols are
looked up, and a list is an application whose head decides whether the rest
is evaluated first (functions) or handed over raw (special forms). There is
no tail-call elimination, so nesting depth is bounded by the host stack.
"""

from __future__ import annotations

from minischeme import SExpression, LispValue
from minischeme.errors import SchemeInternalError, SchemeSyntaxError, SchemeTypeError
from minischeme.evaluation.apply import apply
from minischeme.printer import to_string
from minischeme.types.environment import Environment
from minischeme.types.lists import is_list, iter_list, make_list
from minischeme.types.nil import NilType
from minischeme.types.pair import Pair
from minischeme.types.procedure import Builtin, Closure, Procedure, SpecialForm
from minischeme.types.scheme_string import SchemeString
from minischeme.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    match expr:
        case Symbol():
            return env.lookup(expr)
        case Pair():
            return evaluate_list(expr, env)
        case int() | SchemeString() | NilType() | Procedure():
            # bool is an int subclass, so booleans land here too
            return expr
    raise SchemeInternalError(f"Cannot evaluate non-Scheme object {expr!r}")


def evaluate_list(expr: Pair, env: Environment) -> LispValue:
    if not expr.is_list():
        raise SchemeSyntaxError(f"Syntax error: cannot evaluate dotted pair {to_string(expr)}")

    operator = evaluate(expr.car, env)
    tail = expr.cdr

    match operator:
        case Builtin() | Closure():
            return apply(operator, evaluate_args(tail, env), evaluate)
        case SpecialForm():
            # the form decides what to evaluate, and where
            return operator.handler(tail, env, evaluate)
    raise SchemeTypeError(f"Expected function or special form, got {to_string(expr.car)}")


def evaluate_args(args: SExpression, env: Environment) -> LispValue:
    """Evaluate each element of a proper list, left to right, into a new list."""
    if not is_list(args):
        raise SchemeSyntaxError(f"Syntax error in argument list {to_string(args)}")
    return make_list([evaluate(arg, env) for arg in iter_list(args)])
