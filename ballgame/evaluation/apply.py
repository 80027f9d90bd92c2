"""Application engine for Ballgame.

Looks a function name up in the primitive table and applies it to the
already-evaluated arguments.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ballgame import LispValue
from ballgame.builtin.primitives import PRIMITIVES
from ballgame.types.errors import BallgameNotFunctionError

logger = logging.getLogger(__name__)


def apply(name: str, args: Sequence[LispValue]) -> LispValue:
    fn = PRIMITIVES.get(name)
    if fn is None:
        raise BallgameNotFunctionError("Unrecognized primitive function args", name)
    logger.debug("apply %s to %d args", name, len(args))
    return fn(args)
