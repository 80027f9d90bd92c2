import pytest

from ballgame.interpreter import Interpreter


@pytest.fixture
def interp():
    """Interpreter with reference (unmatched-kind) bracket handling."""
    return Interpreter(strict_brackets=False)


@pytest.fixture
def run(interp):
    """Evaluate source and render the result, or the error, as a user sees it."""
    return interp.eval_string
