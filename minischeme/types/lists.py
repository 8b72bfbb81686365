"""List utilities shared by the evaluator, special forms and built-ins.

All of them accept any value: Nil is the empty list, a Pair chain ending in
Nil is a proper list and everything else is rejected with a syntax error.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from minischeme import LispValue
from minischeme.errors import SchemeSyntaxError
from minischeme.printer import to_string
from minischeme.types.nil import Nil, NilType
from minischeme.types.pair import Pair


def is_list(value: LispValue) -> bool:
    """Proper-list predicate: Nil, or a Pair chain ending in Nil."""
    if isinstance(value, NilType):
        return True
    return isinstance(value, Pair) and value.is_list()


def iter_list(value: LispValue, what: str = "list") -> Iterator[LispValue]:
    if not is_list(value):
        raise SchemeSyntaxError(f"Expected a proper {what}, got {to_string(value)}")
    return iter(value)


def list_length(value: LispValue, what: str = "list") -> int:
    if not is_list(value):
        raise SchemeSyntaxError(f"Expected a proper {what}, got {to_string(value)}")
    return len(value)


def make_list(items: Iterable[LispValue]) -> LispValue:
    """Build a proper list from Python values, preserving order."""
    items = list(items)
    result: LispValue = Nil
    for item in reversed(items):
        result = Pair(item, result)
    return result


def to_python_list(value: LispValue, what: str = "list") -> list[LispValue]:
    return list(iter_list(value, what))
