"""The cons cell.

Lists are chains of Pairs ending in Nil. A chain ending in anything else is a
dotted pair: printable, but it has no length and cannot be iterated.
"""

from __future__ import annotations

from typing import Iterator

from minischeme import LispValue
from minischeme.errors import SchemeInternalError, SchemeSyntaxError
from minischeme.types.nil import NilType
from minischeme.types.procedure import Procedure
from minischeme.types.scheme_string import SchemeString
from minischeme.types.symbol import Symbol

# int covers bool
_ATOM_TYPES = (int, SchemeString, Symbol, NilType, Procedure)


class Pair:
    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue):
        for field in (car, cdr):
            if not isinstance(field, (_ATOM_TYPES, Pair)):
                raise SchemeInternalError(
                    f"Non-Scheme object found its way into a Pair: {field!r}"
                )
        self.car = car
        self.cdr = cdr

    def is_list(self) -> bool:
        """True if following cdrs from here ends in Nil."""
        tail = self.cdr
        while isinstance(tail, Pair):
            tail = tail.cdr
        return isinstance(tail, NilType)

    def __bool__(self) -> bool:
        # never empty, dotted or not
        return True

    def __iter__(self) -> Iterator[LispValue]:
        if not self.is_list():
            raise SchemeSyntaxError("Iteration only works over proper lists")
        node = self
        while isinstance(node, Pair):
            yield node.car
            node = node.cdr

    def __len__(self) -> int:
        if not self.is_list():
            raise SchemeSyntaxError("Cannot count a non-list pair")
        count = 0
        node = self
        while isinstance(node, Pair):
            count += 1
            node = node.cdr
        return count

    def __repr__(self) -> str:
        from minischeme.printer import to_string
        return to_string(self)
