"""Namespaced root environment for xlisp.

The Environment maps QualifiedSymbol -> value for the whole process. Bare
symbols are qualified with the current namespace; a lookup that misses in the
current namespace falls back to the base namespace (`core`), so every
namespace sees the standard library without copying it.

Reads (`resolve`, `is_bound`, `current_namespace`) share a reader lock;
`bind` and `switch_namespace` take it exclusively.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Mapping, Optional

from xlisp import LispValue
from xlisp.config import BASE_NS, get_default_namespace
from xlisp.errors import XlispAccessError, XlispUnboundSymbol
from xlisp.types.rwlock import ReadWriteLock
from xlisp.types.symbol import QualifiedSymbol, Symbol, split_symbol

logger = logging.getLogger(__name__)

NS_MARKER = "*ns*"
NS_SWITCH = "ns"


class Environment:
    """Process-wide symbol table with namespace-aware bind/resolve."""

    __slots__ = ("_lock", "_bindings", "_current_ns", "check_ns")

    def __init__(self, namespace: Optional[str] = None, check_ns: bool = False):
        self._lock = ReadWriteLock()
        self._bindings: dict[QualifiedSymbol, LispValue] = {}
        self._current_ns: str = namespace or get_default_namespace()
        # When set, bindings may only be created in the current namespace.
        self.check_ns: bool = check_ns

    @property
    def current_namespace(self) -> str:
        with self._lock.shared():
            return self._current_ns

    def bind(self, symbol: Symbol | str, value: LispValue) -> QualifiedSymbol:
        """Bind `symbol` to `value`, overwriting any previous value.

        Raises XlispAccessError if namespace checking is enabled and the
        symbol is qualified with a namespace other than the current one.
        """
        with self._lock.exclusive():
            return self._bind_locked(symbol, value)

    def bind_all(self, mapping: Mapping[Symbol | str, LispValue]) -> None:
        """Bulk-bind a mapping under a single write lock."""
        with self._lock.exclusive():
            for k, v in mapping.items():
                self._bind_locked(k, v)

    def resolve(self, symbol: Symbol | str) -> LispValue:
        """Look up `symbol` in the current namespace, then in the base one.

        Raises XlispUnboundSymbol if neither has it.
        """
        text = str(symbol)
        if text == NS_SWITCH:
            text = f"{BASE_NS}/{NS_SWITCH}"

        with self._lock.shared():
            qualified = split_symbol(text, self._current_ns)
            return self._resolve_any(
                text, qualified, qualified._replace(namespace=BASE_NS)
            )

    def is_bound(self, symbol: Symbol | str) -> bool:
        try:
            self.resolve(symbol)
        except XlispUnboundSymbol:
            return False
        return True

    def switch_namespace(self, symbol: Symbol | str) -> None:
        """Make `symbol` the current namespace and rebind `*ns*` inside it."""
        name = str(symbol)
        marker = symbol if isinstance(symbol, Symbol) else Symbol(name)
        with self._lock.exclusive():
            self._current_ns = name
            self._bind_locked(NS_MARKER, marker)
        logger.debug("Switched namespace to %s", name)

    def namespaces(self) -> list[str]:
        """Names of all namespaces holding at least one binding."""
        with self._lock.shared():
            return sorted({k.namespace for k in self._bindings})

    def parent(self) -> None:
        """Always None: the Environment is the root scope."""
        return None

    def root(self) -> Environment:
        return self

    def _bind_locked(self, symbol: Symbol | str, value: LispValue) -> QualifiedSymbol:
        qualified = split_symbol(symbol, self._current_ns)
        if self.check_ns and qualified.namespace != self._current_ns:
            raise XlispAccessError(
                f"cannot bind '{symbol}' outside current namespace '{self._current_ns}'"
            )
        self._bindings[qualified] = value
        return qualified

    def _resolve_any(self, text: str, *candidates: QualifiedSymbol) -> LispValue:
        for qualified in candidates:
            try:
                return self._bindings[qualified]
            except KeyError:
                continue
        raise XlispUnboundSymbol(f"unable to resolve symbol: {text}")

    def __str__(self) -> str:
        return f"<Environment ns={self.current_namespace}>"

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write(f"<Environment ns={self.current_namespace} {{")
            with self._lock.shared():
                buffer.write(
                    ", ".join(f"{k}: {v!r}" for k, v in self._bindings.items())
                )
            buffer.write("}>")
            return buffer.getvalue()
