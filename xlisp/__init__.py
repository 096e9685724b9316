# Core type aliases for xlisp's data model.
# Code and data share plain Python types: call forms are lists, `[...]` is a
# Vector, strings/numbers/booleans are themselves, symbols are Symbol.
#
# Naming guidance:
# - SExpression: use in reader/macro code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type passed to special forms: evaluate(expr, scope, macros)
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.3.0"
