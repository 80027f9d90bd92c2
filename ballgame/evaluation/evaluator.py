"""Core evaluator for the Ballgame interpreter.

Evaluation is a pure tree reduction: literals evaluate to themselves, quote
and if are dispatched to special-form handlers, and every other list headed
by a symbol is a primitive application. There is no environment.
"""

from __future__ import annotations

import logging

from ballgame import LispValue, SExpression
from ballgame.evaluation.apply import apply
from ballgame.evaluation.special_forms import SPECIAL_FORMS
from ballgame.types.character import Character
from ballgame.types.errors import BallgameSpecialFormError
from ballgame.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression) -> LispValue:
    match expr:
        # --- Atoms return as-is ---
        case bool() | int() | float() | str() | Character():
            return expr

        case [Symbol() as head, *tail_args]:
            special = SPECIAL_FORMS.get(head)
            if special is not None and len(tail_args) == special.arity:
                logger.debug("special form %s", head)
                return special.handler(tail_args, evaluate)
            args = [evaluate(arg) for arg in tail_args]
            return apply(head.id, args)

    raise BallgameSpecialFormError("Unrecognized special form", expr)
