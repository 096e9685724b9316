"""Application engine for xlisp.

Centralizes how a head value is applied to arguments:
- Lambda: bind formals in a fresh frame and run the body; a RecurSignal
  returned from the body re-runs it with the new arguments instead of
  growing the Python stack.
- SpecialForm: receives the (already evaluated) values wrapped in quote.
- Python callables registered as builtins: called as fn(scope, args).
"""

from __future__ import annotations

from xlisp import LispValue, EvaluatorFn, SExpression
from xlisp.errors import XlispTypeError
from xlisp.printer import to_string
from xlisp.types.lambda_fn import Lambda
from xlisp.types.nil import Nil
from xlisp.types.recur import RecurSignal
from xlisp.types.special_form import SpecialForm
from xlisp.types.symbol import Symbol

QUOTE = Symbol("quote")


def evaluate_body(
    forms: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn
) -> LispValue:
    """Evaluate `forms` in order and return the last value (nil when empty)."""
    result: LispValue = Nil
    for form in forms:
        result = evaluate_fn(form, scope, macros)
    return result


def apply_lambda(fn: Lambda, args: list[LispValue], macros, evaluate_fn: EvaluatorFn) -> LispValue:
    call_scope = fn.extend_scope(list(args))
    result = evaluate_body(fn.body, call_scope, macros, evaluate_fn)
    while isinstance(result, RecurSignal):
        call_scope = fn.extend_scope(list(result.args))
        result = evaluate_body(fn.body, call_scope, macros, evaluate_fn)
    return result


def apply(
    head: LispValue,
    args: list[LispValue],
    scope,
    macros,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lambda, special form or Python builtin to evaluated `args`."""
    if isinstance(head, Lambda):
        return apply_lambda(head, args, macros, evaluate_fn)
    if isinstance(head, SpecialForm):
        return head.invoke([[QUOTE, a] for a in args], scope, macros, evaluate_fn)
    if callable(head):
        return head(scope, list(args))
    raise XlispTypeError(f"{to_string(head)} is not invokable")
