"""Special form: defmacro.

Defines a macro transformer in the macro environment using a fn-like body.
"""

from __future__ import annotations

from xlisp import EvaluatorFn, SExpression, LispValue
from xlisp.errors import XlispInvalidSymbol, XlispArityError
from xlisp.types.lambda_fn import Lambda, parse_formals
from xlisp.types.symbol import Symbol


def defmacro_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn) -> LispValue:
    """(defmacro name [params] body...): register a macro, return its name."""
    if len(tail) < 3:
        raise XlispArityError("defmacro requires a name, a parameter vector and a body")

    macro_name = tail[0]
    if not isinstance(macro_name, Symbol):
        raise XlispInvalidSymbol(f"Macro name must be a Symbol, got {macro_name}")

    formals, rest = parse_formals(tail[1])
    macros.define_macro(macro_name, Lambda(formals, list(tail[2:]), scope, rest))
    return macro_name
