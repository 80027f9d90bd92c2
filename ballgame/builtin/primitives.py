"""Built-in primitive functions for the Ballgame evaluator.

This module defines arithmetic, comparison, boolean, string and list
primitives. Each primitive receives the already-evaluated argument list.
The PRIMITIVES table is built once at import time and is read-only.
"""
from __future__ import annotations

import functools
import operator
from types import MappingProxyType
from typing import Any, Callable, Mapping, Sequence

from ballgame import LispValue, PrimitiveFn
from ballgame.types.errors import BallgameArityError, BallgameError, BallgameTypeError
from ballgame.builtin.equality import equal, eqv
from ballgame.builtin.unpack import unpack_bool, unpack_num, unpack_str


# -------------------------------
# Integer division family
# -------------------------------
def quot(n: int, d: int) -> int:
    """Integer division truncated toward zero."""
    q = abs(n) // abs(d)
    return q if (n < 0) == (d < 0) else -q


def rem(n: int, d: int) -> int:
    """Remainder of quot; takes the sign of the dividend."""
    return n - d * quot(n, d)


# -------------------------------
# Adapters
# -------------------------------
def numeric_binop(op: Callable[[int, int], int]) -> PrimitiveFn:
    """Left-fold ``op`` over two or more integer arguments."""

    def fold(args: Sequence[LispValue]) -> int:
        if len(args) < 2:
            raise BallgameArityError(2, args)
        values = [unpack_num(arg) for arg in args]
        try:
            return functools.reduce(op, values)
        except ZeroDivisionError:
            raise BallgameError("Division by zero")

    return fold


def bool_binop(
    unpacker: Callable[[LispValue], Any], op: Callable[[Any, Any], bool]
) -> PrimitiveFn:
    """Compare exactly two arguments after unpacking each with ``unpacker``."""

    def compare(args: Sequence[LispValue]) -> bool:
        if len(args) != 2:
            raise BallgameArityError(2, args)
        left = unpacker(args[0])
        right = unpacker(args[1])
        return bool(op(left, right))

    return compare


def num_bool_binop(op) -> PrimitiveFn:
    return bool_binop(unpack_num, op)


def str_bool_binop(op) -> PrimitiveFn:
    return bool_binop(unpack_str, op)


def bool_bool_binop(op) -> PrimitiveFn:
    return bool_binop(unpack_bool, op)


# -------------------------------
# List operations
# -------------------------------
def car(args: Sequence[LispValue]) -> LispValue:
    """First element of a non-empty list."""
    match list(args):
        case [[first, *_]]:
            return first
        case [bad]:
            raise BallgameTypeError("pair", bad)
        case _:
            raise BallgameArityError(1, args)


def cdr(args: Sequence[LispValue]) -> LispValue:
    """All but the first element of a non-empty list."""
    match list(args):
        case [[_, *rest]]:
            return rest
        case [bad]:
            raise BallgameTypeError("pair", bad)
        case _:
            raise BallgameArityError(1, args)


def cons(args: Sequence[LispValue]) -> LispValue:
    """Prepend onto a list, or pair two non-list values into a two-element list."""
    match list(args):
        case [head, list() as tail]:
            return [head, *tail]
        case [first, second]:
            return [first, second]
        case _:
            raise BallgameArityError(2, args)


# -------------------------------
# Registration
# -------------------------------
PRIMITIVES: Mapping[str, PrimitiveFn] = MappingProxyType({
    "+": numeric_binop(operator.add),
    "*": numeric_binop(operator.mul),
    "-": numeric_binop(operator.sub),
    "/": numeric_binop(operator.floordiv),
    "mod": numeric_binop(operator.mod),
    "quotient": numeric_binop(quot),
    "remainder": numeric_binop(rem),
    "=": num_bool_binop(operator.eq),
    "<": num_bool_binop(operator.lt),
    ">": num_bool_binop(operator.gt),
    "!=": num_bool_binop(operator.ne),
    ">=": num_bool_binop(operator.ge),
    "<=": num_bool_binop(operator.le),
    "and": bool_bool_binop(operator.and_),
    "or": bool_bool_binop(operator.or_),
    "string=?": str_bool_binop(operator.eq),
    "string>?": str_bool_binop(operator.gt),
    "string<?": str_bool_binop(operator.lt),
    "string<=?": str_bool_binop(operator.le),
    "string>=?": str_bool_binop(operator.ge),
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "eq?": eqv,
    "eqv?": eqv,
    "equal?": equal,
})
