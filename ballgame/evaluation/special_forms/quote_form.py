from ballgame import EvaluatorFn, LispValue, SExpression


def quote_form(tail: list[SExpression], evaluate_fn: EvaluatorFn) -> LispValue:
    return tail[0]
