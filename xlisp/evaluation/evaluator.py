"""Core evaluator for xlisp.

Dispatches macros, special forms, and function application. Head symbols are
resolved through the scope chain, so special forms and builtins are ordinary
bindings in the `core` namespace and may be shadowed per namespace.
"""

from __future__ import annotations

from xlisp import SExpression, LispValue
from xlisp.evaluation.apply import apply
from xlisp.types.macro_environment import MacroEnvironment
from xlisp.types.special_form import SpecialForm
from xlisp.types.symbol import Symbol
from xlisp.types.vector import Vector


def evaluate(
    expr: SExpression, scope, macros: MacroEnvironment | None = None
) -> LispValue:
    """Evaluate `expr` in `scope` and return its value."""
    if macros is None:
        macros = MacroEnvironment()

    if isinstance(expr, Symbol):
        # Keywords are self-evaluating
        if expr.is_keyword:
            return expr
        return scope.resolve(expr)

    if isinstance(expr, Vector):
        return Vector(evaluate(x, scope, macros) for x in expr)

    if isinstance(expr, list):
        if not expr:
            return []
        head, *tail_args = expr

        if macros.is_macro(head):
            expanded = macros.expand_1(expr, evaluate, scope)
            return evaluate(expanded, scope, macros)

        fn = evaluate(head, scope, macros)
        if isinstance(fn, SpecialForm):
            return fn.invoke(tail_args, scope, macros, evaluate)

        args = [evaluate(arg, scope, macros) for arg in tail_args]
        return apply(fn, args, scope, macros, evaluate)

    # --- Atoms return as-is ---
    return expr


def expand(scope, expr: SExpression, macros: MacroEnvironment) -> tuple[SExpression, bool]:
    """Macro-expand the head of `expr`; reports whether any expansion happened."""
    return macros.expand(expr, evaluate, scope)
