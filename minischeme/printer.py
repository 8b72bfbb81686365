"""Textual rendering of values.

The output of `to_string` is what the driver prints, so it must stay exact:
integers in decimal, booleans as #t/#f, strings wrapped in double quotes, the
empty list as (), proper lists space separated and dotted tails as (a . b).
"""

from __future__ import annotations

from minischeme import LispValue
from minischeme.errors import SchemeInternalError
from minischeme.types.nil import NilType
from minischeme.types.pair import Pair
from minischeme.types.procedure import Builtin, Closure, SpecialForm
from minischeme.types.scheme_string import SchemeString
from minischeme.types.symbol import Symbol


def to_string(value: LispValue) -> str:
    match value:
        case bool():
            return "#t" if value else "#f"
        case int():
            return str(value)
        case SchemeString():
            return '"' + value.value + '"'
        case Symbol():
            return value.name
        case NilType():
            return "()"
        case Pair():
            return _pair_to_string(value)
        case Builtin():
            return f"#<builtin {value.name}>"
        case SpecialForm():
            return f"#<special-form {value.name}>"
        case Closure():
            return "#<closure>"
    raise SchemeInternalError(f"Cannot render non-Scheme object {value!r}")


def _pair_to_string(pair: Pair) -> str:
    items = []
    node: LispValue = pair
    while isinstance(node, Pair):
        items.append(to_string(node.car))
        node = node.cdr
    if isinstance(node, NilType):
        return "(" + " ".join(items) + ")"
    return "(" + " ".join(items) + " . " + to_string(node) + ")"
