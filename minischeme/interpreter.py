from __future__ import annotations

import logging
from typing import Iterator, TextIO

from minischeme import LispValue, SExpression
from minischeme.builtin.env_builtin import register
from minischeme.evaluation.evaluator import evaluate
from minischeme.printer import to_string
from minischeme.reader.parser import read_all
from minischeme.types.environment import Environment
from minischeme.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates minischeme code against one global environment.
    Definitions persist across calls on the same instance.
    """

    def __init__(self, prelude: str | None = None):
        self.env: Environment = Environment()
        register(self.env)

        if prelude:
            self.eval_prelude(prelude)

    def read(self, code: str) -> Iterator[SExpression]:
        return read_all(code)

    def evaluate(self, expr: SExpression) -> LispValue:
        logger.debug("Evaluating %s", to_string(expr))
        return evaluate(expr, self.env)

    def eval_prelude(self, code: str) -> None:
        """Evaluate a string of code for its definitions only."""
        for expr in self.read(code):
            self.evaluate(expr)

    def eval(self, code: str) -> LispValue | list[LispValue]:
        """Evaluate every expression in `code`.

        Returns Nil for no expressions, the value for one, else a list of values.
        """
        results = [self.evaluate(expr) for expr in self.read(code)]
        if not results:
            return Nil
        if len(results) == 1:
            return results[0]
        return results

    def run(self, code: str, out: TextIO) -> None:
        """Write the transcript for `code`: each expression, then "  => " and its value.

        The first error propagates and stops the run; nothing is printed for
        the expression that failed beyond its input line.
        """
        for expr in self.read(code):
            out.write(to_string(expr) + "\n")
            result = self.evaluate(expr)
            out.write("  => " + to_string(result) + "\n")
