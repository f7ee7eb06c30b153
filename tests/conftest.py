import pytest

from schemey.types.environment import Environment
from schemey.builtin.primitives import register
from schemey.evaluation.evaluator import evaluate
from schemey.reader.parser import read_all
from schemey.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh environment with primitives loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate every expression of a source string in `env`, returning the last value."""
    def _run(source: str):
        result = []
        for expr in read_all(source):
            result = evaluate(expr, env)
        return result
    return _run
