"""Registry of special forms for the Ballgame evaluator.

Maps Symbols to handlers that implement non-standard evaluation rules. A form
is only special when its argument count matches; otherwise the evaluator
treats it as ordinary application.
"""

from typing import Callable, NamedTuple

from ballgame import EvaluatorFn, LispValue, SExpression
from ballgame.types.symbol import Symbol
from ballgame.evaluation.special_forms.quote_form import quote_form
from ballgame.evaluation.special_forms.if_form import if_form


class SpecialForm(NamedTuple):
    arity: int
    handler: Callable[[list[SExpression], EvaluatorFn], LispValue]


SPECIAL_FORMS = {
    Symbol("quote"): SpecialForm(1, quote_form),
    Symbol("if"): SpecialForm(3, if_form),
}
