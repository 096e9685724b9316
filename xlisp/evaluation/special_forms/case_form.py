from __future__ import annotations

from xlisp import SExpression, LispValue, EvaluatorFn
from xlisp.errors import XlispArityError, XlispNoMatchError
from xlisp.evaluation.predicates import is_equal
from xlisp.printer import to_string


def case_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (case subject test1 result1 test2 result2 ... [default])

    The subject is evaluated once. Tests are literals compared as data, never
    evaluated; only the chosen result (or the trailing default) is evaluated.
    """
    if len(tail) < 2:
        raise XlispArityError("case requires a subject and at least one clause")

    subject = evaluate_fn(tail[0], scope, macros)
    clauses = tail[1:]

    has_default = len(clauses) % 2 == 1
    if has_default:
        default = clauses[-1]
        clauses = clauses[:-1]

    for i in range(0, len(clauses), 2):
        if is_equal(subject, clauses[i]):
            return evaluate_fn(clauses[i + 1], scope, macros)

    if has_default:
        return evaluate_fn(default, scope, macros)
    raise XlispNoMatchError(f"no matching clause for '{to_string(subject)}'")
