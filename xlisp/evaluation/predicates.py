"""Value predicates shared by the evaluator, special forms and builtins."""

from __future__ import annotations

from xlisp import LispValue, SExpression
from xlisp.types.lambda_fn import Lambda
from xlisp.types.nil import NilType
from xlisp.types.special_form import SpecialForm
from xlisp.types.vector import Vector


def is_call_form(expr: SExpression) -> bool:
    """A non-empty list; vectors are data, never calls."""
    return isinstance(expr, list) and not isinstance(expr, Vector) and len(expr) > 0


def is_invokable(value: LispValue) -> bool:
    return isinstance(value, (Lambda, SpecialForm)) or callable(value)


def is_nil(value: LispValue) -> bool:
    return value is None or isinstance(value, NilType)


def is_truthy(value: LispValue) -> bool:
    """Only nil and false are falsey; 0, "" and () are true."""
    return not (is_nil(value) or value is False)


def is_equal(a, b) -> bool:
    """Deep equality for Lisp values, element-wise for lists and vectors."""
    if a is b:
        return True
    if is_nil(a) and is_nil(b):
        return True
    if isinstance(a, list) and isinstance(b, list):
        if isinstance(a, Vector) != isinstance(b, Vector):
            return False
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if type(a) != type(b):
        return False
    return a == b
