from xlisp import EvaluatorFn, SExpression, LispValue
from xlisp.evaluation.apply import evaluate_body


def do_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn) -> LispValue:
    """(do form...): evaluate in order, return the last value (nil if none)."""
    return evaluate_body(tail, scope, macros, evaluate_fn)
