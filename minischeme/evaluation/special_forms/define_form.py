import logging

from minischeme import EvaluatorFn
from minischeme import SExpression, LispValue
from minischeme.errors import SchemeSyntaxError
from minischeme.printer import to_string
from minischeme.types.environment import Environment
from minischeme.types.symbol import Symbol
from minischeme.evaluation.special_forms.syntax import form_arguments

logger = logging.getLogger(__name__)


def define_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    The value is evaluated in the calling environment but always bound in the
    global one, however deeply nested the call is. Returns the bound value.
    """
    name, val_expr = form_arguments(tail, 2, "define")
    if not isinstance(name, Symbol):
        raise SchemeSyntaxError(f"Syntax error in define: {to_string(name)} is not a symbol")

    value = evaluate_fn(val_expr, env)
    env.root().define(name, value)
    logger.debug("define %s", name)
    return value
