from xlisp import EvaluatorFn, SExpression, LispValue
from xlisp.errors import XlispArityError
from xlisp.types.lambda_fn import Lambda, parse_formals


def fn_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn) -> LispValue:
    """(fn [params] body...): a closure over the current scope."""
    if not tail:
        raise XlispArityError("fn requires at least a parameter vector")

    formals, rest = parse_formals(tail[0])
    return Lambda(formals, list(tail[1:]), scope, rest)
