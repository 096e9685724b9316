from __future__ import annotations
from typing import Callable

from xlisp import LispValue, SExpression

# handler(tail, scope, macros, evaluate_fn) -> value; `tail` is unevaluated.
SpecialFormHandler = Callable[..., LispValue]


class SpecialForm:
    """A bindable value whose handler receives its argument forms unevaluated."""

    __slots__ = ("name", "handler")

    def __init__(self, name: str, handler: SpecialFormHandler):
        self.name = name
        self.handler = handler

    def invoke(self, tail: list[SExpression], scope, macros, evaluate_fn) -> LispValue:
        return self.handler(tail, scope, macros, evaluate_fn)

    def __repr__(self):
        return f"#<special-form {self.name}>"
