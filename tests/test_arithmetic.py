import pytest

from minischeme.errors import SchemeArithmeticError, SchemeSyntaxError, SchemeTypeError


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", "6"),
        ("(+)", "0"),
        ("(+ 5)", "5"),
        ("(- 10 3 2)", "5"),
        ("(* 2 3 4)", "24"),
        ("(/ 12 3)", "4"),
        ("(/ 100 5 2)", "10"),
        ("(/ 7 2)", "3"),
        ("(/ -7 2)", "-4"),
        ("(+ (* 2 3) (- 10 4))", "12"),
        ("(/ (+ 20 10) (* 2 5))", "3"),
        ("(+ -1 5 -3)", "1"),
        ("(- -10 -5)", "-5"),
        ("(* 1 2 3 4 5 6)", "720"),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", "57"),
        ('(+ "12" 3)', "15"),
        ('(+ "abc" 3)', "3"),
        ('(* "-4x" 2)', "-8"),
        ("(+ () 1)", "1"),
        ("(* () 5)", "0"),
    ],
)
def test_integer_arithmetic(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize("source", ["(- 5)", "(* 2)", "(/ 8)", "(-)"])
def test_fold_operators_need_two_arguments(run, source):
    with pytest.raises(SchemeSyntaxError):
        run(source)


def test_division_by_zero_is_an_arithmetic_error(run):
    with pytest.raises(SchemeArithmeticError):
        run("(/ 10 0)")
    with pytest.raises(ArithmeticError):
        run("(/ 10 2 0)")


@pytest.mark.parametrize("source", ["(+ #t 1)", "(* 2 (list 1))", "(- 3 car)"])
def test_non_integer_arguments_are_type_errors(run, source):
    with pytest.raises(SchemeTypeError):
        run(source)


def test_integers_are_unbounded(run):
    # squaring 10 thirteen times gives 10**8192
    source = "(define sq (lambda (n) (* n n))) " + "(sq " * 13 + "10" + ")" * 13
    assert run(source) == "1" + "0" * 8192


def test_long_integer_literal_reads_and_prints(run):
    digits = "9" * 5000
    assert run(digits) == digits
    assert run(f"(+ {digits} 1)") == "1" + "0" * 5000
