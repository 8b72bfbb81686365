import pytest

from minischeme.errors import (
    SchemeInternalError,
    SchemeSyntaxError,
    SchemeTypeError,
    SchemeUndefinedSymbol,
)
from minischeme.evaluation.evaluator import evaluate, evaluate_args
from minischeme.printer import to_string
from minischeme.types.environment import Environment
from minischeme.types.lists import make_list
from minischeme.types.nil import Nil
from minischeme.types.pair import Pair
from minischeme.types.procedure import Builtin, Closure, SpecialForm
from minischeme.types.scheme_string import SchemeString
from minischeme.types.symbol import Symbol


def test_self_evaluating_literals(env):
    closure = Closure(env, Nil, 1)
    literals = [1, -3, True, False, SchemeString("hello"), Nil, closure, Builtin("f", len)]
    for literal in literals:
        assert evaluate(literal, env) is literal
        assert evaluate(literal, Environment()) is literal


def test_symbol_lookup(env):
    env.define(Symbol("x"), 42)
    assert evaluate(Symbol("x"), env) == 42
    with pytest.raises(SchemeUndefinedSymbol):
        evaluate(Symbol("z"), env)


def test_function_call(env):
    expr = make_list([Symbol("+"), 1, 2, 3])
    assert evaluate(expr, env) == 6


def test_arguments_are_evaluated_into_a_new_list(env):
    env.define(Symbol("a"), 10)
    args = make_list([Symbol("a"), make_list([Symbol("+"), 1, 1]), SchemeString("s")])
    result = evaluate_args(args, env)
    assert to_string(result) == '(10 2 "s")'
    assert result is not args


def test_argument_list_must_be_proper(env):
    with pytest.raises(SchemeSyntaxError):
        evaluate_args(Pair(1, 2), env)
    with pytest.raises(SchemeSyntaxError):
        evaluate(Pair(Symbol("+"), Pair(1, 2)), env)


def test_special_forms_receive_raw_arguments(env):
    seen = []

    def capture(tail, call_env, evaluate_fn):
        seen.append((tail, call_env))
        return 7

    env.define(Symbol("capture"), SpecialForm("capture", capture))
    expr = make_list([Symbol("capture"), Symbol("undefined-thing"), make_list([Symbol("car"), 1])])
    assert evaluate(expr, env) == 7
    tail, call_env = seen[0]
    assert tail is expr.cdr
    assert call_env is env


def test_non_function_in_operator_position(env):
    with pytest.raises(SchemeTypeError, match="Expected function or special form, got 1"):
        evaluate(make_list([1, 2]), env)
    with pytest.raises(SchemeTypeError):
        evaluate(make_list([SchemeString("f")]), env)


def test_operator_position_is_evaluated(env):
    expr = make_list([make_list([Symbol("lambda"), make_list([Symbol("x")]), Symbol("x")]), 9])
    assert evaluate(expr, env) == 9


def test_non_scheme_object_is_rejected(env):
    with pytest.raises(SchemeInternalError):
        evaluate("plain python string", env)
    with pytest.raises(SchemeInternalError):
        evaluate(None, env)


def test_evaluation_in_isolated_environments():
    first = Environment()
    second = Environment()
    first.define(Symbol("x"), 1)
    assert evaluate(Symbol("x"), first) == 1
    with pytest.raises(SchemeUndefinedSymbol):
        evaluate(Symbol("x"), second)
