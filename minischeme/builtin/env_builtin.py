"""Built-in functions for the minischeme global environment.

Every built-in receives one proper list of already-evaluated arguments.
Arithmetic works on integers only; wrong argument counts are syntax errors
and wrong argument kinds are type errors.
"""
from __future__ import annotations

import re
from typing import Iterator

from minischeme import LispValue
from minischeme.errors import SchemeArithmeticError, SchemeSyntaxError, SchemeTypeError
from minischeme.evaluation.special_forms import SPECIAL_FORMS
from minischeme.printer import to_string
from minischeme.types.environment import Environment
from minischeme.types.lists import is_list, list_length, to_python_list
from minischeme.types.nil import NilType
from minischeme.types.pair import Pair
from minischeme.types.procedure import Builtin
from minischeme.types.scheme_string import SchemeString
from minischeme.types.symbol import Symbol
from minischeme.types.values import copy_value, values_equal

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _arguments(expr: LispValue, name: str, minimum: int = 0, exact: int | None = None) -> list[LispValue]:
    """Unpack the argument list of built-in `name`, checking its shape and count."""
    if not is_list(expr):
        raise SchemeSyntaxError(f"{name} expects a flat list of arguments")
    count = list_length(expr)
    if exact is not None and count != exact:
        raise SchemeSyntaxError(f"{name} expects exactly {exact} argument(s), got {count}")
    if count < minimum:
        raise SchemeSyntaxError(f"{name} expects at least {minimum} arguments, got {count}")
    return to_python_list(expr)


def to_integer(value: LispValue, name: str) -> int:
    """Coerce an argument for arithmetic.

    Integers pass through. Strings read their leading integer, or 0 when
    there is none, and the empty list counts as 0. Anything else, booleans
    included, is a type error.
    """
    if isinstance(value, bool):
        raise SchemeTypeError(f"All arguments to {name} must be integers, got {to_string(value)}")
    if isinstance(value, int):
        return value
    if isinstance(value, SchemeString):
        m = _LEADING_INT.match(value.value)
        return int(m.group(1)) if m else 0
    if isinstance(value, NilType):
        return 0
    raise SchemeTypeError(f"All arguments to {name} must be integers, got {to_string(value)}")


def _integers(expr: LispValue, name: str, minimum: int) -> Iterator[int]:
    return (to_integer(x, name) for x in _arguments(expr, name, minimum=minimum))


# -------------------------------
# Arithmetic
# -------------------------------
def add(expr: LispValue) -> int:
    """Sum of all arguments; (+) is 0."""
    return sum(_integers(expr, "+", 0))


def sub(expr: LispValue) -> int:
    """First argument minus each of the rest, left to right."""
    first, *rest = _integers(expr, "-", 2)
    for x in rest:
        first -= x
    return first


def mul(expr: LispValue) -> int:
    """Product of at least two arguments."""
    result, *rest = _integers(expr, "*", 2)
    for x in rest:
        result *= x
    return result


def div(expr: LispValue) -> int:
    """Integer (floor) division, left to right."""
    result, *rest = _integers(expr, "/", 2)
    for x in rest:
        if x == 0:
            raise SchemeArithmeticError("Division by zero")
        result //= x
    return result


# -------------------------------
# Equality
# -------------------------------
def equals(expr: LispValue) -> bool:
    a, b = _arguments(expr, "=", exact=2)
    return values_equal(a, b)


# -------------------------------
# Pairs and lists
# -------------------------------
def cons(expr: LispValue) -> Pair:
    car_value, cdr_value = _arguments(expr, "cons", exact=2)
    return Pair(car_value, cdr_value)


def _pair_argument(expr: LispValue, name: str) -> Pair:
    (value,) = _arguments(expr, name, exact=1)
    if not isinstance(value, Pair):
        raise SchemeTypeError(f"{name} expects a pair as its argument, got {to_string(value)}")
    return value


def car(expr: LispValue) -> LispValue:
    return _pair_argument(expr, "car").car


def cdr(expr: LispValue) -> LispValue:
    return _pair_argument(expr, "cdr").cdr


def list_builtin(expr: LispValue) -> LispValue:
    """A fresh copy of the argument list, sharing no pairs with the caller."""
    if not is_list(expr):
        raise SchemeSyntaxError("list expects a flat list of arguments")
    return copy_value(expr)


BUILTINS = {
    Symbol("+"): Builtin("+", add),
    Symbol("-"): Builtin("-", sub),
    Symbol("*"): Builtin("*", mul),
    Symbol("/"): Builtin("/", div),
    Symbol("="): Builtin("=", equals),
    Symbol("list"): Builtin("list", list_builtin),
    Symbol("cons"): Builtin("cons", cons),
    Symbol("car"): Builtin("car", car),
    Symbol("cdr"): Builtin("cdr", cdr),
}


def register(env: Environment) -> None:
    """Install the built-in functions and special forms into `env`.

    Each is bound once; redefining the name later loses the original.
    """
    for name, fn in BUILTINS.items():
        env.define(name, fn)
    for name, form in SPECIAL_FORMS.items():
        env.define(name, form)
