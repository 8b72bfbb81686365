"""Value model and environment for minischeme.

Re-exports the variant classes so callers can write
``from minischeme.types import Pair, Symbol, Nil``.
"""

from minischeme.types.symbol import Symbol
from minischeme.types.nil import Nil, NilType
from minischeme.types.scheme_string import SchemeString
from minischeme.types.procedure import Procedure, Builtin, SpecialForm, Closure
from minischeme.types.pair import Pair
from minischeme.types.environment import Environment

__all__ = [
    "Symbol",
    "Nil",
    "NilType",
    "SchemeString",
    "Procedure",
    "Builtin",
    "SpecialForm",
    "Closure",
    "Pair",
    "Environment",
]
