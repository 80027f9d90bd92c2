"""Unpackers: coerce Ballgame values to host types for use inside primitives.

Each unpacker either returns the host value or raises BallgameTypeError.
"""
from __future__ import annotations

import re

from ballgame import LispValue
from ballgame.printer import int_text
from ballgame.types.errors import BallgameError, BallgameTypeError

# Leading integer lexeme of a string, e.g. "  42abc" -> 42, "0x1f" -> 31.
# A decimal that runs into a fraction or exponent ("5.5", "1e3") is not one.
_LEADING_INT = re.compile(
    r"\s*(?P<sign>-?)"
    r"(?:0[xX](?P<hex>[0-9a-fA-F]+)"
    r"|0[oO](?P<oct>[0-7]+)"
    r"|(?P<dec>[0-9]+)(?![0-9]|\.[0-9]|[eE][-+]?[0-9]))"
)


def _leading_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    if match["hex"]:
        number = int(match["hex"], 16)
    elif match["oct"]:
        number = int(match["oct"], 8)
    else:
        try:
            number = int(match["dec"])
        except ValueError:
            raise BallgameError("Integer too large to convert") from None
    return -number if match["sign"] else number


def unpack_num(value: LispValue) -> int:
    """Integer as itself, numeric-looking string, or singleton list of either."""
    if isinstance(value, bool):
        raise BallgameTypeError("number", value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        number = _leading_int(value)
        if number is None:
            raise BallgameTypeError("number", value)
        return number
    if isinstance(value, list) and len(value) == 1:
        return unpack_num(value[0])
    raise BallgameTypeError("number", value)


def unpack_str(value: LispValue) -> str:
    """Strings as themselves; integers and booleans by their host text."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value)  # "True" / "False"
    if isinstance(value, int):
        return int_text(value)
    raise BallgameTypeError("string", value)


def unpack_bool(value: LispValue) -> bool:
    if isinstance(value, bool):
        return value
    raise BallgameTypeError("boolean", value)
