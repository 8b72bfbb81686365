import pytest

from minischeme.builtin.env_builtin import register
from minischeme.interpreter import Interpreter
from minischeme.printer import to_string
from minischeme.types.environment import Environment


@pytest.fixture
def env():
    """Fresh global environment with builtins and special forms loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(interp):
    """Evaluate every expression in a source string and render the last result."""
    def _run(source: str) -> str:
        result = None
        for expr in interp.read(source):
            result = interp.evaluate(expr)
        return to_string(result)
    return _run
