"""The closed set of Scheme values and the operations that dispatch on it.

Variants:
- Integer       -> int (never bool)
- Boolean       -> bool
- SchemeString  -> SchemeString
- Symbol        -> Symbol
- empty list    -> Nil
- cons cell     -> Pair
- procedures    -> Builtin, SpecialForm, Closure
"""

from __future__ import annotations

from typing import Union

from minischeme.errors import SchemeInternalError
from minischeme.types.nil import NilType
from minischeme.types.pair import Pair
from minischeme.types.procedure import Builtin, Closure, Procedure, SpecialForm
from minischeme.types.scheme_string import SchemeString
from minischeme.types.symbol import Symbol

Value = Union[int, bool, SchemeString, Symbol, NilType, Pair, Builtin, SpecialForm, Closure]


def copy_value(value: Value) -> Value:
    """Deep copy for pairs, identity for every other variant."""
    match value:
        case Pair():
            # walk the cdr spine iteratively; recurse only into cars
            cars = []
            node: Value = value
            while isinstance(node, Pair):
                cars.append(copy_value(node.car))
                node = node.cdr
            result = copy_value(node)
            for car in reversed(cars):
                result = Pair(car, result)
            return result
        case int() | SchemeString() | Symbol() | NilType() | Procedure():
            return value
    raise SchemeInternalError(f"Cannot copy non-Scheme object {value!r}")


def values_equal(a: Value, b: Value) -> bool:
    """Structural equality as used by the `=` built-in.

    Scalars compare by value, an integer never equals a boolean, pairs compare
    element-wise and procedures compare by identity.
    """
    while isinstance(a, Pair) and isinstance(b, Pair):
        if not values_equal(a.car, b.car):
            return False
        a, b = a.cdr, b.cdr
    match a:
        case bool():
            return isinstance(b, bool) and a == b
        case int():
            return isinstance(b, int) and not isinstance(b, bool) and a == b
        case SchemeString() | Symbol() | NilType():
            return a == b
        case Pair():
            return False
        case Procedure():
            return a is b
    raise SchemeInternalError(f"Cannot compare non-Scheme object {a!r}")
