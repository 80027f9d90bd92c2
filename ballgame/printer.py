"""Canonical textual rendering of Ballgame values.

  - strings  -> "contents"   (quotes re-added, contents not re-escaped)
  - symbols  -> name
  - numbers  -> native decimal text
  - booleans -> #t / #f
  - chars    -> #\\a, #\\space, ...
  - lists    -> (a b c)
"""

from __future__ import annotations

from typing import Iterable

from ballgame import LispValue
from ballgame.types.character import Character
from ballgame.types.symbol import Symbol


def show_val(value: LispValue) -> str:
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "#t" if value else "#f"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, (Symbol, Character)):
        return str(value)
    if isinstance(value, int):
        return int_text(value)
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, list):
        return f"({render_list(value)})"
    raise TypeError(f"Not a Ballgame value: {value!r}")


def render_list(values: Iterable[LispValue]) -> str:
    """Space-joined rendering of each value."""
    return " ".join(show_val(v) for v in values)


def int_text(value: int) -> str:
    """Decimal text of an integer, within the interpreter's int/str digit limit."""
    try:
        return str(value)
    except ValueError:
        # errors renders through this module, so import at call time
        from ballgame.types.errors import BallgameError

        raise BallgameError("Integer too large to render") from None
