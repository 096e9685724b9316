"""Iteration over collections: doseq, and the time wrapper."""

from __future__ import annotations

import logging
import time

from xlisp import SExpression, LispValue, EvaluatorFn
from xlisp.errors import XlispArityError, XlispBindingError, XlispTypeError
from xlisp.evaluation.apply import evaluate_body
from xlisp.evaluation.predicates import is_nil
from xlisp.evaluation.special_forms.let_form import parse_bindings
from xlisp.printer import to_string
from xlisp.types.nil import Nil
from xlisp.types.scope import Scope

logger = logging.getLogger(__name__)


class DoSeqEval:
    """Implements (doseq [var coll] body...)."""

    def __init__(self, varspec: SExpression, body: list[SExpression], evaluate_fn: EvaluatorFn):
        bindings = parse_bindings(varspec, "doseq")
        if len(bindings) != 1:
            raise XlispBindingError("doseq takes exactly one [name coll] binding")
        self.var_name, self.coll_expr = bindings[0]
        self.body = body
        self.evaluate_fn = evaluate_fn

    def eval(self, scope, macros) -> LispValue:
        coll = self.evaluate_fn(self.coll_expr, scope, macros)
        if is_nil(coll):
            return Nil
        if not isinstance(coll, (list, tuple, str)):
            raise XlispTypeError("doseq requires a sequence")

        last_value: LispValue = Nil
        for item in coll:
            local = Scope(outer=scope)
            local.bind(self.var_name, item)
            last_value = evaluate_body(self.body, local, macros, self.evaluate_fn)
        return last_value


def doseq_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn) -> LispValue:
    if not tail:
        raise XlispArityError("doseq requires a binding vector")
    return DoSeqEval(tail[0], list(tail[1:]), evaluate_fn).eval(scope, macros)


def time_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn) -> LispValue:
    """(time form...): evaluate the forms and print how long they took."""
    start = time.perf_counter()
    result = evaluate_body(tail, scope, macros, evaluate_fn)
    elapsed = time.perf_counter() - start
    logger.debug("time: %s took %.6fs", to_string(tail), elapsed)
    print(f"Elapsed time: {elapsed * 1000:.3f}ms")
    return result
