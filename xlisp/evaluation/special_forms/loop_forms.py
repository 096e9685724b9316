"""Iteration special forms: loop and recur.

`(loop [name init ...] body...)` binds its names in a child frame and runs
the body. When the body evaluates to a RecurSignal, produced by
`(recur expr...)` in tail position, the names are rebound by position and
the body runs again in the same frame. The Python stack never grows with
the iteration count.
"""

from __future__ import annotations

from xlisp import SExpression, LispValue, EvaluatorFn
from xlisp.errors import XlispArityError
from xlisp.evaluation.apply import evaluate_body
from xlisp.evaluation.special_forms.let_form import parse_bindings, bind_sequentially
from xlisp.types.recur import RecurSignal
from xlisp.types.scope import Scope
from xlisp.types.symbol import Symbol


class LoopEval:
    """A parsed loop: the binding names/inits and the body forms."""

    def __init__(
        self,
        bindings: list[tuple[Symbol, SExpression]],
        body: list[SExpression],
        evaluate_fn: EvaluatorFn,
    ):
        self.bindings = bindings
        self.body = body
        self.evaluate_fn: EvaluatorFn = evaluate_fn

    def eval(self, scope, macros) -> LispValue:
        loop_scope = Scope(outer=scope)
        bind_sequentially(self.bindings, loop_scope, macros, self.evaluate_fn)

        result = evaluate_body(self.body, loop_scope, macros, self.evaluate_fn)
        while isinstance(result, RecurSignal):
            if len(result.args) != len(self.bindings):
                raise XlispArityError(
                    f"recur expects {len(self.bindings)} arguments, got {len(result.args)}"
                )
            for (name, _), value in zip(self.bindings, result.args):
                loop_scope.bind(name, value)
            result = evaluate_body(self.body, loop_scope, macros, self.evaluate_fn)
        return result


def parse_loop(tail: list[SExpression], evaluate_fn: EvaluatorFn) -> LoopEval:
    if len(tail) < 2:
        raise XlispArityError("loop requires at least bindings and one body form")
    return LoopEval(parse_bindings(tail[0], "loop"), list(tail[1:]), evaluate_fn)


def loop_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn) -> LispValue:
    """Special form (loop [bindings] body...)."""
    return parse_loop(tail, evaluate_fn).eval(scope, macros)


def recur_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn) -> RecurSignal:
    """Special form (recur expr...).

    Every argument is evaluated against the current bindings before the
    signal is returned, so the next iteration sees a consistent generation.
    """
    return RecurSignal([evaluate_fn(arg, scope, macros) for arg in tail])
