from ballgame import EvaluatorFn, LispValue, SExpression


def if_form(tail: list[SExpression], evaluate_fn: EvaluatorFn) -> LispValue:
    pred, conseq, alt = tail
    # Only #f is false; every other value, booleans or not, picks the consequent
    if evaluate_fn(pred) is False:
        return evaluate_fn(alt)
    return evaluate_fn(conseq)
