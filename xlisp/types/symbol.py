from __future__ import annotations
import sys
from typing import NamedTuple

from xlisp.errors import XlispInvalidSymbol

NS_SEPARATOR = "/"


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def __eq__(self, other: Symbol) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id

    @property
    def is_keyword(self) -> bool:
        return self.id.startswith(":") and len(self.id) > 1


class QualifiedSymbol(NamedTuple):
    """A (namespace, name) pair keying one binding in the Environment."""

    namespace: str
    name: str

    def __str__(self):
        return f"{self.namespace}{NS_SEPARATOR}{self.name}"


def split_symbol(symbol: str | Symbol, current_ns: str) -> QualifiedSymbol:
    """Parse `symbol` into a QualifiedSymbol, defaulting to `current_ns`.

    `/` alone names the division operator in the current namespace, and
    `core//` qualifies it. Anything with a second separator is rejected.
    """
    text = str(symbol)
    if text == NS_SEPARATOR:
        return QualifiedSymbol(current_ns, text)

    parts = text.split(NS_SEPARATOR, 1)
    if len(parts) < 2:
        return QualifiedSymbol(current_ns, text)

    ns, name = parts
    if NS_SEPARATOR in name and name != NS_SEPARATOR:
        raise XlispInvalidSymbol(f"invalid qualified symbol: '{text}'")
    return QualifiedSymbol(ns, name)
