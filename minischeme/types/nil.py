from __future__ import annotations


class NilType:
    """The empty list. A zero-length proper list, so it sizes and iterates like one."""

    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "()"

    def __len__(self): return 0

    def __iter__(self):
        return iter(())

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)

    def __copy__(self): return self

    def __deepcopy__(self, memo): return self


Nil = NilType()
