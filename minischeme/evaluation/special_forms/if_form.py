from minischeme import EvaluatorFn
from minischeme import SExpression, LispValue
from minischeme.types.environment import Environment
from minischeme.evaluation.special_forms.syntax import form_arguments


def if_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (if test consequent alternative)
    Only #f is false. The untaken branch is never evaluated.
    """
    test, consequent, alternative = form_arguments(tail, 3, "if")

    if evaluate_fn(test, env) is False:
        return evaluate_fn(alternative, env)
    return evaluate_fn(consequent, env)
