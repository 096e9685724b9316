"""Lambda function representation and argument binding for xlisp."""

from __future__ import annotations

from io import StringIO
from typing import Optional

from xlisp import SExpression, LispValue
from xlisp.errors import XlispArityError, XlispBindingError
from xlisp.types.scope import Scope
from xlisp.types.symbol import Symbol

REST_MARKER = Symbol("&")


def parse_formals(params: SExpression) -> tuple[list[Symbol], Optional[Symbol]]:
    """Split a parameter vector `[a b & more]` into positional names and rest."""
    if not isinstance(params, list):
        raise XlispBindingError(f"parameter list must be a vector, got {params!r}")
    formals: list[Symbol] = []
    rest: Optional[Symbol] = None
    items = list(params)
    for i, p in enumerate(items):
        if p == REST_MARKER:
            if i != len(items) - 2 or not isinstance(items[i + 1], Symbol):
                raise XlispBindingError("'&' must be followed by exactly one symbol")
            rest = items[i + 1]
            break
        if not isinstance(p, Symbol):
            raise XlispBindingError(f"parameter must be a symbol, got {p!r}")
        formals.append(p)
    return formals, rest


class Lambda:
    """A first-class function: formals, body forms and the closure scope."""

    __slots__ = ("formals", "rest", "body", "scope")

    def __init__(
        self,
        formals: list[Symbol],
        body: list[SExpression],
        scope,
        rest: Optional[Symbol] = None,
    ):
        self.formals: list[Symbol] = formals
        self.rest: Optional[Symbol] = rest
        self.body: list[SExpression] = body
        self.scope = scope

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<fn [")
            names = [str(f) for f in self.formals]
            if self.rest is not None:
                names += ["&", str(self.rest)]
            buffer.write(" ".join(names))
            buffer.write("]>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def check_arity(self, count: int) -> None:
        arity = len(self.formals)
        if count < arity or (self.rest is None and count > arity):
            expected = f"at least {arity}" if self.rest is not None else str(arity)
            raise XlispArityError(f"wrong number of args: expected {expected}, got {count}")

    def extend_scope(self, args: list[LispValue]) -> Scope:
        """Bind `args` to the formals in a fresh frame over the closure scope."""
        self.check_arity(len(args))
        call_scope = Scope(outer=self.scope)
        for name, value in zip(self.formals, args):
            call_scope.bind(name, value)
        if self.rest is not None:
            call_scope.bind(self.rest, list(args[len(self.formals):]))
        return call_scope
