from minischeme import EvaluatorFn
from minischeme import SExpression, LispValue
from minischeme.errors import SchemeSyntaxError
from minischeme.printer import to_string
from minischeme.types.environment import Environment
from minischeme.types.lists import is_list, list_length, to_python_list
from minischeme.types.symbol import Symbol
from minischeme.evaluation.special_forms.syntax import form_arguments


def let_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let ((name value) ...) body)
    Every value expression sees the environment the let was evaluated in, not
    the bindings made before it in the same let.
    """
    definitions, body = form_arguments(tail, 2, "let")
    if not is_list(definitions):
        raise SchemeSyntaxError(f"Syntax error in let: bindings must be a list, got {to_string(definitions)}")

    local_env = Environment(outer=env)
    for definition in to_python_list(definitions):
        if not is_list(definition) or list_length(definition) != 2:
            raise SchemeSyntaxError(f"Syntax error in let: bad binding {to_string(definition)}")
        name, val_expr = to_python_list(definition)
        if not isinstance(name, Symbol):
            raise SchemeSyntaxError(f"Syntax error in let: {to_string(name)} is not a symbol")
        local_env.define(name, evaluate_fn(val_expr, env))

    return evaluate_fn(body, local_env)
