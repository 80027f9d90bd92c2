"""Structural equality for Ballgame values.

- eqv?   : same kind and same value for booleans, integers, strings and
           symbols; lists compare positionally. Everything else is #f.
- equal? : lists compare positionally with equal?; other pairs are equal if
           they unpack to the same number, string or boolean, or are eqv?.
"""
from __future__ import annotations

from typing import Sequence

from ballgame import LispValue
from ballgame.types.errors import BallgameArityError, BallgameTypeError
from ballgame.types.symbol import Symbol
from ballgame.builtin.unpack import unpack_bool, unpack_num, unpack_str

# bool first: bool is an int subclass
EQV_KINDS = (bool, int, str, Symbol)

UNPACKERS = (unpack_num, unpack_str, unpack_bool)


def is_eqv(left: LispValue, right: LispValue) -> bool:
    if isinstance(left, list) and isinstance(right, list):
        return len(left) == len(right) and all(map(is_eqv, left, right))
    for kind in EQV_KINDS:
        if isinstance(left, kind) or isinstance(right, kind):
            return isinstance(left, kind) and isinstance(right, kind) and left == right
    return False


def unpack_equals(left: LispValue, right: LispValue, unpacker) -> bool:
    """True if both sides unpack with ``unpacker`` to equal values; failed unpacks are False."""
    try:
        return unpacker(left) == unpacker(right)
    except BallgameTypeError:
        return False


def is_equal(left: LispValue, right: LispValue) -> bool:
    if isinstance(left, list) and isinstance(right, list):
        return len(left) == len(right) and all(map(is_equal, left, right))
    if any(unpack_equals(left, right, unpacker) for unpacker in UNPACKERS):
        return True
    return is_eqv(left, right)


def eqv(args: Sequence[LispValue]) -> bool:
    """(eqv? a b) / (eq? a b)"""
    if len(args) != 2:
        raise BallgameArityError(2, args)
    return is_eqv(args[0], args[1])


def equal(args: Sequence[LispValue]) -> bool:
    """(equal? a b)"""
    if len(args) != 2:
        raise BallgameArityError(2, args)
    return is_equal(args[0], args[1])
