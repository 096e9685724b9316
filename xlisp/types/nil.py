from __future__ import annotations


class NilType:
    """The `nil` value. Falsey, equal only to itself, sorts before everything."""

    __slots__ = ()

    def __repr__(self): return "nil"
    def __bool__(self): return False
    def __hash__(self): return hash(NilType)

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __lt__(self, other):
        return not isinstance(other, NilType)

    def __le__(self, other):
        return True  # nil <= anything

    def __gt__(self, other):
        return False

    def __ge__(self, other):
        return isinstance(other, NilType)


Nil = NilType()
