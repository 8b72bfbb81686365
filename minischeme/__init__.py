# Core type aliases for the minischeme data model.
#
# Runtime values are a closed set of variants (see minischeme.types.values):
# Python int and bool stand for Scheme integers and booleans, everything else
# has its own class under minischeme.types.
#
# Naming guidance:
# - SExpression: use in reader/printer code for code-as-data.
# - LispValue:  use in evaluator/runtime code for evaluated values.

import sys
from typing import Any, Callable

__version__ = "0.1.0"

# Integers are unbounded; reading and printing them must not hit the host's
# decimal conversion cap.
sys.set_int_max_str_digits(0)

LispValue = Any
SExpression = LispValue

# Evaluator function type handed to special forms and closure application
EvaluatorFn = Callable[..., LispValue]
