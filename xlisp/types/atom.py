from __future__ import annotations

import threading
from typing import Callable

from xlisp import LispValue
from xlisp.errors import XlispTypeError


class Atom:
    """A shared single-value cell.

    The value only changes through `update_state`, which runs the whole
    read-compute-write under the atom's own lock. Updates to one atom are
    serialized; distinct atoms never contend. An update function may read
    the atom but must not update it again.
    """

    __slots__ = ("_value", "_lock", "_updating")

    def __init__(self, value: LispValue):
        self._value = value
        self._lock = threading.RLock()
        self._updating = False

    @property
    def value(self) -> LispValue:
        with self._lock:
            return self._value

    def update_state(self, fn: Callable[[LispValue], LispValue]) -> LispValue:
        """Replace the value with `fn(value)` and return the new value.

        If `fn` raises, the value is left unchanged. Raises XlispTypeError
        if `fn` tries to update this atom from within its own update.
        """
        with self._lock:
            # Only the lock-holding thread can observe the flag set.
            if self._updating:
                raise XlispTypeError("atom update re-entered")
            self._updating = True
            try:
                new_value = fn(self._value)
                self._value = new_value
            finally:
                self._updating = False
            return new_value

    def __repr__(self):
        return f"#<atom {self._value!r}>"
