from xlisp import EvaluatorFn, SExpression, LispValue
from xlisp.errors import XlispArityError
from xlisp.evaluation.predicates import is_truthy
from xlisp.types.nil import Nil


def if_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) not in (2, 3):
        raise XlispArityError("if requires a condition, a then-expression and an optional else")

    if is_truthy(evaluate_fn(tail[0], scope, macros)):
        return evaluate_fn(tail[1], scope, macros)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], scope, macros)
    return Nil
