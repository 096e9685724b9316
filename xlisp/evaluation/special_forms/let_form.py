from __future__ import annotations

from xlisp import EvaluatorFn, SExpression, LispValue
from xlisp.errors import XlispArityError, XlispBindingError
from xlisp.evaluation.apply import evaluate_body
from xlisp.types.scope import Scope
from xlisp.types.symbol import Symbol
from xlisp.types.vector import Vector


def parse_bindings(form: SExpression, construct: str) -> list[tuple[Symbol, SExpression]]:
    """Turn `[a 1 b (+ a 1)]` into [(a, 1), (b, (+ a 1))]."""
    if not isinstance(form, Vector):
        raise XlispBindingError(f"{construct} bindings must be a vector, got {form!r}")
    if len(form) % 2 != 0:
        raise XlispBindingError(f"{construct} bindings must contain an even number of forms")

    bindings = []
    for i in range(0, len(form), 2):
        name = form[i]
        if not isinstance(name, Symbol):
            raise XlispBindingError(f"item at {i} must be a symbol, not {name!r}")
        bindings.append((name, form[i + 1]))
    return bindings


def bind_sequentially(bindings, scope: Scope, macros, evaluate_fn: EvaluatorFn) -> None:
    """Evaluate each init in `scope` and bind it before the next is evaluated."""
    for name, init in bindings:
        scope.bind(name, evaluate_fn(init, scope, macros))


def let_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn) -> LispValue:
    """(let [name init ...] body...) with sequential bindings."""
    if not tail:
        raise XlispArityError("let requires a bindings vector")
    bindings = parse_bindings(tail[0], "let")
    let_scope = Scope(outer=scope)
    bind_sequentially(bindings, let_scope, macros, evaluate_fn)
    return evaluate_body(tail[1:], let_scope, macros, evaluate_fn)
