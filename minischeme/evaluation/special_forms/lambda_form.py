from minischeme import EvaluatorFn
from minischeme import SExpression, LispValue
from minischeme.types.environment import Environment
from minischeme.types.procedure import Closure
from minischeme.evaluation.special_forms.syntax import form_arguments


def lambda_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body): capture the defining environment, evaluate
    # nothing yet. Parameters are checked when the closure is called.
    params, body = form_arguments(tail, 2, "lambda")
    return Closure(env, params, body)
