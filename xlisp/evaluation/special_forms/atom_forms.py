from __future__ import annotations

from xlisp import SExpression, LispValue, EvaluatorFn
from xlisp.errors import XlispArityError, XlispResolutionError
from xlisp.evaluation.apply import apply
from xlisp.evaluation.predicates import is_invokable
from xlisp.printer import to_string
from xlisp.types.atom import Atom


def swap_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (swap! atom f & args)

    Replaces the atom's value with (f value args...) and returns it. Both
    operands are resolved and checked before the atom is touched; the
    read-apply-write runs under the atom's lock so concurrent swaps on the
    same atom never lose an update.
    """
    if len(tail) < 2:
        raise XlispArityError("swap! requires an atom and a function")

    atom = evaluate_fn(tail[0], scope, macros)
    fn = evaluate_fn(tail[1], scope, macros)
    extra = [evaluate_fn(arg, scope, macros) for arg in tail[2:]]

    if not isinstance(atom, Atom):
        raise XlispResolutionError(f"unable to resolve atom: {to_string(atom)}")
    if not is_invokable(fn):
        raise XlispResolutionError(f"unable to resolve function: {to_string(fn)}")

    return atom.update_state(
        lambda value: apply(fn, [value, *extra], scope, macros, evaluate_fn)
    )
