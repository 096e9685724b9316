"""One-shot result handle for `(future ...)`.

The producer thread calls `deliver` or `fail` exactly once. The first
consumer to `take` receives the value and closes the handle; later consumers
are told it is closed and must fall back to the value cached by `deref`.
A failure is not consumed: every `take` re-raises it.
"""

from __future__ import annotations

import threading
from typing import Callable, Optional

from xlisp import LispValue
from xlisp.errors import XlispFutureError
from xlisp.types.nil import Nil


class FutureHandle:
    __slots__ = ("_done", "_lock", "_value", "_error", "_closed")

    def __init__(self):
        self._done = threading.Event()
        self._lock = threading.Lock()
        self._value: LispValue = Nil
        self._error: Optional[BaseException] = None
        self._closed = False

    def deliver(self, value: LispValue) -> None:
        self._value = value
        self._done.set()

    def fail(self, error: BaseException) -> None:
        self._error = error
        self._done.set()

    @property
    def realized(self) -> bool:
        """True once the computation finished; never blocks."""
        return self._done.is_set()

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    def take(
        self, on_first: Optional[Callable[[LispValue], None]] = None
    ) -> tuple[LispValue, bool]:
        """Block until delivery, then return `(value, True)` once.

        Every later call returns `(Nil, False)`. `on_first` runs with the
        value before the handle closes, so a consumer that sees it closed can
        rely on whatever `on_first` recorded. Raises XlispFutureError if the
        computation failed.
        """
        self._done.wait()
        if self._error is not None:
            raise XlispFutureError(
                f"future failed: {self._error}"
            ) from self._error
        with self._lock:
            if self._closed:
                return Nil, False
            if on_first is not None:
                on_first(self._value)
            self._closed = True
        return self._value, True

    def __repr__(self):
        if not self.realized:
            state = "pending"
        elif self._error is not None:
            state = "failed"
        else:
            state = "realized"
        return f"#<future {state}>"
