from xlisp import EvaluatorFn, SExpression, LispValue
from xlisp.errors import XlispArityError


def eval_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn) -> LispValue:
    """(eval expr): evaluate expr, then evaluate the resulting form."""
    if len(tail) != 1:
        raise XlispArityError("eval expects exactly one argument")
    form = evaluate_fn(tail[0], scope, macros)
    return evaluate_fn(form, scope, macros)
