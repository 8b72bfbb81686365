from __future__ import annotations


class SchemeString:
    """A string literal. Kept apart from host `str` so it renders with its quotes."""

    __slots__ = ("value",)

    def __init__(self, value: str):
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SchemeString) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("string", self.value))

    def __repr__(self):
        return f"SchemeString({self.value!r})"

    def __str__(self):
        return '"' + self.value + '"'
