import io

import pytest

from minischeme import config
from minischeme.__main__ import main
from minischeme.errors import SchemeArithmeticError, SchemeTypeError
from minischeme.interpreter import Interpreter
from minischeme.printer import to_string
from minischeme.types.nil import Nil


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", "6"),
        ("(define square (lambda (n) (* n n))) (square 5)", "25"),
        ("(if (= 1 1) 10 20)", "10"),
        ("(car (cons 1 2))", "1"),
        ("(cdr (cons 1 2))", "2"),
        ("(let ((x 3) (y 4)) (+ x y))", "7"),
    ],
)
def test_end_to_end_scenarios(run, source, expected):
    assert run(source) == expected


def test_division_by_zero_aborts(run):
    with pytest.raises(SchemeArithmeticError):
        run("(/ 10 0)")


def test_eval_result_shapes():
    interp = Interpreter()
    assert interp.eval("") is Nil
    assert interp.eval("(+ 1 1)") == 2
    results = interp.eval("(define a 1) (+ a 1)")
    assert [to_string(r) for r in results] == ["1", "2"]


def test_definitions_persist_across_calls():
    interp = Interpreter()
    interp.eval("(define counter 41)")
    assert interp.eval("(+ counter 1)") == 42


def test_prelude():
    interp = Interpreter(prelude="(define double (lambda (x) (* x 2)))")
    assert interp.eval("(double 21)") == 42


def test_interpreters_do_not_share_globals():
    first = Interpreter()
    first.eval("(define + -)")
    assert Interpreter().eval("(+ 5 3)") == 8


def test_run_writes_transcript():
    out = io.StringIO()
    Interpreter().run("(define x 2)\n(+ x 3)\n(list x \"s\" #t)", out)
    assert out.getvalue() == (
        "(define x 2)\n"
        "  => 2\n"
        "(+ x 3)\n"
        "  => 5\n"
        '(list x "s" #t)\n'
        '  => (2 "s" #t)\n'
    )


def test_run_stops_at_first_error():
    out = io.StringIO()
    with pytest.raises(SchemeTypeError):
        Interpreter().run("(+ 1 2) (car 1) (+ 3 4)", out)
    assert out.getvalue() == "(+ 1 2)\n  => 3\n(car 1)\n"


# ------------------ command line driver ------------------

def test_cli_prints_transcript(tmp_path, capsys):
    source = tmp_path / "prog.scm"
    source.write_text("(define square (lambda (n) (* n n)))\n(square 5)\n")
    assert main([str(source)]) == 0
    out = capsys.readouterr().out
    assert out == (
        "(define square (lambda (n) (* n n)))\n"
        "  => #<closure>\n"
        "(square 5)\n"
        "  => 25\n"
    )


def test_cli_aborts_on_error(tmp_path, capsys):
    source = tmp_path / "bad.scm"
    source.write_text("(+ 1 1)\n(/ 10 0)\n(+ 2 2)\n")
    assert main([str(source)]) == 1
    captured = capsys.readouterr()
    assert captured.out == "(+ 1 1)\n  => 2\n(/ 10 0)\n"
    assert "Error: Division by zero" in captured.err


def test_cli_reports_reader_errors(tmp_path, capsys):
    source = tmp_path / "unbalanced.scm"
    source.write_text("(+ 1 2")
    assert main([str(source)]) == 1
    assert "Unmatched '('" in capsys.readouterr().err


def test_cli_reports_runaway_recursion(tmp_path, capsys):
    source = tmp_path / "loop.scm"
    source.write_text("(define loop (lambda (n) (loop n)))\n(loop 1)\n")
    assert main([str(source)]) == 1
    assert "maximum recursion depth exceeded" in capsys.readouterr().err


def test_cli_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.scm")]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_cli_requires_exactly_one_file():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


# ------------------ configuration ------------------

def test_config_defaults(monkeypatch):
    monkeypatch.delenv("MINISCHEME_LOG_LEVEL", raising=False)
    monkeypatch.delenv("MINISCHEME_LOG_FILE", raising=False)
    monkeypatch.delenv("MINISCHEME_RECURSION_LIMIT", raising=False)
    assert config.get_log_level() == "WARNING"
    assert config.get_log_file() is None
    assert config.get_recursion_limit() is None


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv("MINISCHEME_LOG_LEVEL", "debug")
    monkeypatch.setenv("MINISCHEME_RECURSION_LIMIT", "5000")
    assert config.get_log_level() == "DEBUG"
    assert config.get_recursion_limit() == 5000


@pytest.mark.parametrize("raw", ["lots", "0", "-3"])
def test_bad_recursion_limit(monkeypatch, raw):
    monkeypatch.setenv("MINISCHEME_RECURSION_LIMIT", raw)
    with pytest.raises(ValueError):
        config.get_recursion_limit()


def test_cli_prints_huge_integers(tmp_path, capsys):
    source = tmp_path / "big.scm"
    source.write_text("(define sq (lambda (n) (* n n)))\n" + "(sq " * 13 + "10" + ")" * 13 + "\n")
    assert main([str(source)]) == 0
    assert capsys.readouterr().out.endswith("  => 1" + "0" * 8192 + "\n")
