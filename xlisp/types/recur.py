from __future__ import annotations
from typing import Iterable

from xlisp import LispValue


class RecurSignal:
    """Result of `(recur ...)`: "run the enclosing loop again with these values".

    A distinct type rather than a list headed by the symbol `recur`, so user
    data that happens to look like `(recur 1 2)` is never mistaken for it.
    The arguments are already evaluated.
    """

    __slots__ = ("args",)

    def __init__(self, args: Iterable[LispValue]):
        self.args: tuple[LispValue, ...] = tuple(args)

    def __eq__(self, other) -> bool:
        return isinstance(other, RecurSignal) and self.args == other.args

    def __hash__(self) -> int:
        return hash(("recur", self.args))

    def __repr__(self):
        return f"RecurSignal({list(self.args)!r})"
