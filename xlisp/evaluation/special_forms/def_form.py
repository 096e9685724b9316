from xlisp import EvaluatorFn, SExpression, LispValue
from xlisp.errors import XlispArityError, XlispInvalidSymbol
from xlisp.types.symbol import Symbol


def def_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (def name value)
    Always binds in the namespaced Environment, even when evaluated inside a
    loop or function frame. Returns the qualified symbol.
    """
    if len(tail) != 2:
        raise XlispArityError("def requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise XlispInvalidSymbol(f"def name must be a symbol, got {name!r}")
    value = evaluate_fn(val_expr, scope, macros)
    qualified = scope.root().bind(name, value)
    return Symbol(str(qualified))
