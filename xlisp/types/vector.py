from __future__ import annotations


class Vector(list):
    """A `[...]` literal.

    Subclasses list so sequence builtins work on it unchanged, but the
    evaluator treats it as data whose elements are evaluated, never as a call.
    """

    __slots__ = ()

    def __repr__(self):
        return f"Vector({list.__repr__(self)})"
