"""Asynchronous evaluation: future and deref.

(future expr) evaluates expr on its own thread against the scope it was
spawned in and returns a FutureHandle at once. (deref f) blocks until the
value arrives. The first deref of a binding caches the value in the
Environment under a key derived from the symbol, so every later deref of
that binding returns the same value instead of waiting on a closed handle.
A failed computation is logged and re-raised by deref as XlispFutureError.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from xlisp import SExpression, LispValue, EvaluatorFn
from xlisp.errors import XlispArityError, XlispTypeError, XlispUnboundSymbol
from xlisp.printer import to_string
from xlisp.types.atom import Atom
from xlisp.types.future import FutureHandle
from xlisp.types.symbol import Symbol, split_symbol

logger = logging.getLogger(__name__)


def deref_cache_key(symbol: Symbol, current_ns: str) -> Symbol:
    # `f` and `user/f` name the same binding, so both map to one key.
    qualified = split_symbol(symbol, current_ns)
    return Symbol(f"__deref__{qualified.namespace}.{qualified.name}__result__")


def spawn(expr: SExpression, scope, macros, evaluate_fn: EvaluatorFn) -> FutureHandle:
    handle = FutureHandle()

    def run() -> None:
        try:
            value = evaluate_fn(expr, scope, macros)
        except Exception as exc:
            logger.exception("future failed evaluating %s", to_string(expr))
            handle.fail(exc)
        else:
            logger.debug("future delivered %s", to_string(expr))
            handle.deliver(value)

    threading.Thread(target=run, name="xlisp-future", daemon=True).start()
    return handle


def deref(scope, symbol: Optional[Symbol], handle: LispValue) -> LispValue:
    """Join `handle`, caching its value under `symbol`'s derived key."""
    if isinstance(handle, Atom):
        return handle.value
    if not isinstance(handle, FutureHandle):
        raise XlispTypeError(f"cannot deref {to_string(handle)}")

    env = scope.root()
    key = deref_cache_key(symbol, env.current_namespace) if symbol is not None else None

    def cache(value: LispValue) -> None:
        if key is not None:
            env.bind(key, value)

    value, delivered = handle.take(on_first=cache)
    if delivered:
        return value
    if key is None:
        raise XlispUnboundSymbol("future was already consumed and has no cached value")
    return env.resolve(key)


def future_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn) -> FutureHandle:
    """Special form (future expr)."""
    if len(tail) != 1:
        raise XlispArityError("future expects exactly one expression")
    return spawn(tail[0], scope, macros, evaluate_fn)


def deref_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn) -> LispValue:
    """Special form (deref ref): the symbol itself names the cache entry."""
    if len(tail) != 1:
        raise XlispArityError("deref expects exactly one argument")
    form = tail[0]
    symbol = form if isinstance(form, Symbol) and not form.is_keyword else None
    return deref(scope, symbol, evaluate_fn(form, scope, macros))
