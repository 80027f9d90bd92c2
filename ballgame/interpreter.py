from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from ballgame import LispValue, SExpression
from ballgame.config import strict_brackets_enabled
from ballgame.evaluation.evaluator import evaluate
from ballgame.printer import show_val
from ballgame.reader.parser import read_expr
from ballgame.types.errors import BallgameError

logger = logging.getLogger(__name__)

TOO_DEEP = "Expression nested too deeply"


@contextmanager
def nesting_guard() -> Iterator[None]:
    """Report host stack exhaustion as a Ballgame error.

    Reading, evaluating and rendering all recurse once per level of nesting.
    """
    try:
        yield
    except RecursionError:
        raise BallgameError(TOO_DEEP) from None


class Interpreter:
    """
    Reads and evaluates one Ballgame expression per call.
    Holds no state between calls beyond its reader options, so a single
    instance may serve any number of independent inputs.
    """

    def __init__(self, strict_brackets: bool | None = None):
        if strict_brackets is None:
            strict_brackets = strict_brackets_enabled()
        self.strict_brackets = strict_brackets

    def read(self, code: str) -> SExpression:
        with nesting_guard():
            return read_expr(code, self.strict_brackets)

    def evaluate(self, expr: SExpression) -> LispValue:
        with nesting_guard():
            return evaluate(expr)

    def show(self, value: LispValue) -> str:
        with nesting_guard():
            return show_val(value)

    def eval(self, code: str) -> LispValue:
        return self.evaluate(self.read(code))

    def eval_string(self, code: str) -> str:
        """Evaluate ``code`` and render the result, or the error it raised."""
        try:
            return self.show(self.eval(code))
        except BallgameError as err:
            logger.debug("error evaluating %r: %s", code, err)
            return str(err)


_default = Interpreter(strict_brackets=False)


def eval_string(code: str) -> str:
    return _default.eval_string(code)
