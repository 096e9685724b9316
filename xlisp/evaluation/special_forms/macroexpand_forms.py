"""Special forms exposing the macro expander to Lisp code.

macroexpand-1: expand a single step at the head position if it is a macro.
macroexpand: fully expand a form (except inside quote/quasiquote).

Both return the expansion and do not evaluate it. A single leading quote on
the argument is unwrapped, so (macroexpand '(when x y)) works as expected.
"""

from xlisp import SExpression, EvaluatorFn
from xlisp.errors import XlispArityError
from xlisp.types.symbol import Symbol


def _unquoted(tail: list[SExpression], name: str) -> SExpression:
    if len(tail) != 1:
        raise XlispArityError(f"{name} expects exactly 1 argument")
    form = tail[0]
    if isinstance(form, list) and len(form) == 2 and form[0] == Symbol("quote"):
        form = form[1]
    return form


def macroexpand1_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn):
    return macros.expand_1(_unquoted(tail, "macroexpand-1"), evaluate_fn, scope)


def macroexpand_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn):
    return macros.macro_expand_all(_unquoted(tail, "macroexpand"), evaluate_fn, scope)
