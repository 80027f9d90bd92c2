"""Error taxonomy shared by the reader and the evaluator.

Every error is a BallgameError; ``str(err)`` is the rendered,
human-readable line shown to the user.
"""

from __future__ import annotations

from typing import Sequence

from ballgame import LispValue
from ballgame.printer import render_list, show_val


class BallgameError(Exception):
    """Base class for all Ballgame errors, also used for generic failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BallgameArityError(BallgameError):
    """Raised when a primitive receives the wrong number of arguments."""

    def __init__(self, expected: int, found: Sequence[LispValue]):
        self.expected = expected
        self.found = list(found)
        super().__init__(f"Expected {expected} args: found values {render_list(self.found)}")


class BallgameTypeError(BallgameError):
    """Raised when a value cannot be unpacked to the kind a primitive needs."""

    def __init__(self, expected: str, found: LispValue):
        self.expected = expected
        self.found = found
        super().__init__(f"Invalid type: expected {expected}, found {show_val(found)}")


class BallgameSyntaxError(BallgameError):
    """Raised when the reader cannot parse its input."""

    def __init__(self, details: str, line: int | None = None, column: int | None = None):
        self.details = details
        self.line = line
        self.column = column
        super().__init__(f"Parse error at {details}")


class BallgameSpecialFormError(BallgameError):
    """Raised when a form matches neither a special form nor an application."""

    def __init__(self, message: str, form: LispValue):
        self.form = form
        super().__init__(f"{message}: {show_val(form)}")
        self.message = message


class BallgameNotFunctionError(BallgameError):
    """Raised when an application names no known primitive."""

    def __init__(self, message: str, name: str):
        self.name = name
        super().__init__(f'{message}: "{name}"')
        self.message = message


class BallgameUnboundSymbol(BallgameError):
    """Raised when a symbol is used before it is bound (reserved: no variables yet)."""

    def __init__(self, message: str, name: str):
        self.name = name
        super().__init__(f"{message}: {name}")
        self.message = message
