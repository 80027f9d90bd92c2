# Core type aliases for Ballgame's data model.
# We use plain Python types (int, float, str, bool, list) plus the Symbol and
# Character classes to represent both code (forms) and runtime values.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable, Sequence

# Runtime value alias
LispValue = Any
# Forms alias (used interchangeably with LispValue)
SExpression = LispValue

# Evaluator function type: passed to special forms
EvaluatorFn = Callable[[SExpression], LispValue]

# Primitive function type: already-evaluated arguments in, value out
PrimitiveFn = Callable[[Sequence[LispValue]], LispValue]
