"""Threading special forms: -> and ->>.

(-> x (f a) g) evaluates as (g (f x a)); ->> splices at the end instead,
so (->> x (f a)) is (f a x). Each step is evaluated as soon as it is built.
"""

from __future__ import annotations

from xlisp import SExpression, LispValue, EvaluatorFn
from xlisp.errors import XlispArityError, XlispTypeError
from xlisp.evaluation.apply import apply
from xlisp.evaluation.predicates import is_call_form, is_invokable
from xlisp.printer import to_string
from xlisp.types.symbol import Symbol
from xlisp.types.vector import Vector

LIST = Symbol("list")
QUOTE = Symbol("quote")


def _as_form(value: LispValue) -> SExpression:
    """Re-express a step's value so splicing it into the next call is inert."""
    if isinstance(value, Vector):
        return Vector(_as_form(v) for v in value)
    if isinstance(value, list):
        return [LIST, *(_as_form(v) for v in value)]
    if isinstance(value, Symbol) and not value.is_keyword:
        return [QUOTE, value]
    return value


def _invokable_step(form: SExpression, scope, macros, evaluate_fn: EvaluatorFn):
    if isinstance(form, Symbol):
        value = evaluate_fn(form, scope, macros)
    else:
        value = form
    if not is_invokable(value):
        raise XlispTypeError(f"{to_string(value)} is not invokable")
    return value


def thread_call(
    tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn, last: bool
) -> LispValue:
    if len(tail) < 2:
        name = "->>" if last else "->"
        raise XlispArityError(f"{name} requires an expression and at least one form")

    res: SExpression = tail[0]
    for form in tail[1:]:
        if is_call_form(form):
            if last:
                call = [*form, res]
            else:
                call = [form[0], res, *form[1:]]
            res = _as_form(evaluate_fn(call, scope, macros))
        else:
            fn = _invokable_step(form, scope, macros, evaluate_fn)
            arg = evaluate_fn(res, scope, macros)
            res = _as_form(apply(fn, [arg], scope, macros, evaluate_fn))

    if is_call_form(res) or isinstance(res, Vector):
        return evaluate_fn(res, scope, macros)
    return res


def thread_first_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn) -> LispValue:
    """(-> x forms...): insert the running value as the first argument."""
    return thread_call(tail, scope, macros, evaluate_fn, last=False)


def thread_last_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn) -> LispValue:
    """(->> x forms...): insert the running value as the last argument."""
    return thread_call(tail, scope, macros, evaluate_fn, last=True)
