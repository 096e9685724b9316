"""Nested binding frames.

A Scope holds the locals introduced by `let`, `loop`, `doseq` and function
calls, and chains to an outer scope. The chain always ends at the namespaced
Environment, which is the only root.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from xlisp import LispValue
from xlisp.types.symbol import Symbol

if TYPE_CHECKING:
    from xlisp.types.environment import Environment


class Scope:
    """A child frame; lookups fall through to `outer` on a miss."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Scope | Environment):
        self.vars: dict[str, LispValue] = {}
        self.outer: Scope | Environment = outer

    def bind(self, name: Symbol | str, value: LispValue) -> None:
        """Bind `name` in this frame only, shadowing outer bindings."""
        self.vars[str(name)] = value

    def resolve(self, name: Symbol | str) -> LispValue:
        key = str(name)
        scope = self
        while isinstance(scope, Scope):
            if key in scope.vars:
                return scope.vars[key]
            scope = scope.outer
        return scope.resolve(name)

    def is_bound(self, name: Symbol | str) -> bool:
        key = str(name)
        scope = self
        while isinstance(scope, Scope):
            if key in scope.vars:
                return True
            scope = scope.outer
        return scope.is_bound(name)

    def parent(self) -> Scope | Environment:
        return self.outer

    def root(self) -> Environment:
        scope = self
        while isinstance(scope, Scope):
            scope = scope.outer
        return scope

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Scope {")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
            buffer.write("} -> ...>")
            return buffer.getvalue()
