"""Textual form of xlisp values, used by `str`, `print` and error messages."""

from __future__ import annotations

from xlisp import LispValue
from xlisp.types.lambda_fn import Lambda
from xlisp.types.nil import NilType
from xlisp.types.recur import RecurSignal
from xlisp.types.symbol import Symbol
from xlisp.types.vector import Vector

_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\t": "\\t", "\r": "\\r"}


def _escape(text: str) -> str:
    return "".join(_ESCAPES.get(c, c) for c in text)


def to_string(value: LispValue, readably: bool = True) -> str:
    """Render `value` as xlisp source text.

    With `readably`, strings are quoted and escaped; otherwise they print raw.
    """
    if value is None or isinstance(value, NilType):
        return "nil"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, str):
        return f'"{_escape(value)}"' if readably else value
    if isinstance(value, Symbol):
        return value.id
    if isinstance(value, Vector):
        return "[" + " ".join(to_string(v, readably) for v in value) + "]"
    if isinstance(value, (list, tuple)):
        return "(" + " ".join(to_string(v, readably) for v in value) + ")"
    if isinstance(value, RecurSignal):
        return "(recur" + "".join(" " + to_string(v, readably) for v in value.args) + ")"
    if isinstance(value, Lambda):
        return str(value)
    if callable(value):
        return f"#<builtin {getattr(value, '__name__', type(value).__name__)}>"
    return repr(value) if not isinstance(value, (int, float)) else str(value)
