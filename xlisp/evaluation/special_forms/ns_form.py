from xlisp import EvaluatorFn, SExpression, LispValue
from xlisp.errors import XlispArityError, XlispTypeError
from xlisp.types.symbol import Symbol


def ns_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn) -> LispValue:
    """(ns name): switch the current namespace; the name is not evaluated."""
    if len(tail) != 1:
        raise XlispArityError("ns expects exactly one namespace name")
    name = tail[0]
    if isinstance(name, list) and len(name) == 2 and name[0] == Symbol("quote"):
        name = name[1]
    if not isinstance(name, Symbol):
        raise XlispTypeError(f"namespace name must be a symbol, got {name!r}")
    scope.root().switch_namespace(name)
    return name
