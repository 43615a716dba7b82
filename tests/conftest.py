import pytest

from mlisp.builtin.env_builtin import default_env
from mlisp.interpreter import Interpreter
from mlisp.reader.tokenizer import tokenize
from mlisp.reader.parser import parse
from mlisp.evaluation.evaluator import evaluate


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    return default_env()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate each source string in order against one environment; return the last value."""
    def _run(*sources):
        result = None
        for source in sources:
            expr, _ = parse(tokenize(source))
            result = evaluate(expr, env)
        return result
    return _run
