"""Built-in functions for the xlisp runtime.

Every builtin is a Python callable `fn(scope, args)` receiving evaluated
arguments. `register` binds them, together with the special forms, into the
base namespace so every other namespace sees them.
"""
from __future__ import annotations

import logging
import operator
import time
from typing import Any

from xlisp import LispValue, __version__
from xlisp.config import BASE_NS
from xlisp.errors import XlispArityError, XlispThrownError, XlispTypeError, XlispUnboundSymbol
from xlisp.evaluation.predicates import is_equal, is_nil, is_truthy
from xlisp.evaluation.special_forms import SPECIAL_FORMS
from xlisp.printer import to_string
from xlisp.types.atom import Atom
from xlisp.types.environment import Environment
from xlisp.types.future import FutureHandle
from xlisp.types.nil import Nil
from xlisp.types.special_form import SpecialForm
from xlisp.types.symbol import Symbol
from xlisp.types.vector import Vector

logger = logging.getLogger(__name__)


def _check_arity(name: str, args: list, expected: int) -> None:
    if len(args) != expected:
        raise XlispArityError(f"{name} requires exactly {expected} argument(s), got {len(args)}")


def _numbers(name: str, args: list[LispValue]) -> list[LispValue]:
    for a in args:
        if isinstance(a, bool) or not isinstance(a, (int, float)):
            raise XlispTypeError(f"All arguments to {name} must be numbers, got {to_string(a)}")
    return args


# -------------------------------
# Arithmetic
# -------------------------------
def add(scope, args: list[LispValue]) -> LispValue:
    """Sum of all arguments; 0 with none."""
    return sum(_numbers("+", args))


def sub(scope, args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise XlispArityError("- requires at least 1 argument")
    first, *rest = _numbers("-", args)
    if not rest:
        return -first
    for x in rest:
        first -= x
    return first


def mul(scope, args: list[LispValue]) -> LispValue:
    result = 1
    for x in _numbers("*", args):
        result *= x
    return result


def div(scope, args: list[LispValue]) -> LispValue:
    """Divide left-to-right; with one arg returns the reciprocal."""
    if not args:
        raise XlispArityError("/ requires at least 1 argument")
    first, *rest = _numbers("/", args)
    try:
        if not rest:
            return 1 / first
        for x in rest:
            first /= x
        return first
    except ZeroDivisionError:
        raise XlispTypeError("Division by zero")


def mod(scope, args: list[LispValue]) -> LispValue:
    _check_arity("mod", args, 2)
    n, d = _numbers("mod", args)
    if d == 0:
        raise XlispTypeError("Modulo by zero")
    return n % d


def inc(scope, args: list[LispValue]) -> LispValue:
    _check_arity("inc", args, 1)
    return _numbers("inc", args)[0] + 1


def dec(scope, args: list[LispValue]) -> LispValue:
    _check_arity("dec", args, 1)
    return _numbers("dec", args)[0] - 1


# -------------------------------
# Comparison and logic
# -------------------------------
def equals(scope, args: list[LispValue]) -> bool:
    """True if all arguments are equal (or zero/one arg)."""
    return all(is_equal(args[0], other) for other in args[1:]) if args else True


def not_equals(scope, args: list[LispValue]) -> bool:
    return not equals(scope, args)


def _chain(name: str, args: list[LispValue], op) -> bool:
    try:
        return all(op(a, b) for a, b in zip(args, args[1:]))
    except TypeError:
        raise XlispTypeError(f"Cannot compare arguments to {name}: {to_string(args)}")


def lt(scope, args: list[LispValue]) -> bool:
    """Chainable less-than: a0 < a1 < a2 ..."""
    return _chain("<", args, operator.lt)


def lte(scope, args: list[LispValue]) -> bool:
    return _chain("<=", args, operator.le)


def gt(scope, args: list[LispValue]) -> bool:
    return _chain(">", args, operator.gt)


def gte(scope, args: list[LispValue]) -> bool:
    return _chain(">=", args, operator.ge)


def logical_not(scope, args: list[LispValue]) -> bool:
    _check_arity("not", args, 1)
    return not is_truthy(args[0])


def logical_and(scope, args: list[LispValue]) -> bool:
    return all(is_truthy(a) for a in args)


def logical_or(scope, args: list[LispValue]) -> bool:
    return any(is_truthy(a) for a in args)


# -------------------------------
# Sequences
# -------------------------------
def _as_seq(name: str, value: LispValue) -> list[LispValue]:
    if is_nil(value):
        return []
    if isinstance(value, (list, tuple, str)):
        return list(value)
    raise XlispTypeError(f"{name} expects a sequence, got {to_string(value)}")


def list_builtin(scope, args: list[LispValue]) -> list[LispValue]:
    return list(args)


def vector_builtin(scope, args: list[LispValue]) -> Vector:
    return Vector(args)


def first(scope, args: list[LispValue]) -> LispValue:
    """First element, or nil for an empty sequence or nil."""
    _check_arity("first", args, 1)
    seq = _as_seq("first", args[0])
    return seq[0] if seq else Nil


def rest(scope, args: list[LispValue]) -> list[LispValue]:
    """All but the first element; an empty list when nothing remains."""
    _check_arity("rest", args, 1)
    return _as_seq("rest", args[0])[1:]


def next_builtin(scope, args: list[LispValue]) -> LispValue:
    """Like rest, but nil when nothing remains."""
    _check_arity("next", args, 1)
    tail = _as_seq("next", args[0])[1:]
    return tail if tail else Nil


def cons(scope, args: list[LispValue]) -> list[LispValue]:
    _check_arity("cons", args, 2)
    head, tail = args
    return [head, *_as_seq("cons", tail)]


def count(scope, args: list[LispValue]) -> int:
    _check_arity("count", args, 1)
    return len(_as_seq("count", args[0]))


def concat(scope, args: list[LispValue]) -> list[LispValue]:
    """Concatenate sequences; nil counts as empty."""
    result: list[LispValue] = []
    for item in args:
        result.extend(_as_seq("concat", item))
    return result


def range_builtin(scope, args: list[LispValue]) -> list[int]:
    """(range end), (range start end) or (range start end step)."""
    if not 1 <= len(args) <= 3:
        raise XlispArityError("range takes 1 to 3 arguments")
    for a in args:
        if isinstance(a, bool) or not isinstance(a, int):
            raise XlispTypeError("range arguments must be integers")
    return list(range(*args))


def realize(scope, args: list[LispValue]) -> list[LispValue]:
    """Materialize any sequence as a list."""
    _check_arity("realize", args, 1)
    return _as_seq("realize", args[0])


def is_empty(scope, args: list[LispValue]) -> bool:
    _check_arity("empty?", args, 1)
    return len(_as_seq("empty?", args[0])) == 0


def nil_p(scope, args: list[LispValue]) -> bool:
    _check_arity("nil?", args, 1)
    return is_nil(args[0])


def symbol_p(scope, args: list[LispValue]) -> bool:
    _check_arity("symbol?", args, 1)
    return isinstance(args[0], Symbol) and not args[0].is_keyword


def keyword_p(scope, args: list[LispValue]) -> bool:
    _check_arity("keyword?", args, 1)
    return isinstance(args[0], Symbol) and args[0].is_keyword


# -------------------------------
# Strings and output
# -------------------------------
def make_string(scope, args: list[LispValue]) -> str:
    """Concatenate the printed forms of args, strings unquoted; nil is ""."""
    return "".join("" if is_nil(a) else to_string(a, readably=False) for a in args)


def print_builtin(scope, args: list[LispValue]) -> LispValue:
    """Print space-separated values followed by a newline; returns nil."""
    print(" ".join(to_string(a, readably=False) for a in args))
    return Nil


def format_builtin(scope, args: list[LispValue]) -> str:
    """(format template args...) using Python str.format placeholders."""
    if not args:
        return ""
    template, *values = args
    if not isinstance(template, str):
        raise XlispTypeError("format template must be a string")
    try:
        return template.format(*[to_string(v, readably=False) if isinstance(v, Symbol) else v for v in values])
    except (IndexError, KeyError, ValueError) as e:
        raise XlispTypeError(f"Format error: {e}")


def printf(scope, args: list[LispValue]) -> LispValue:
    print(format_builtin(scope, args), end="")
    return Nil


# -------------------------------
# Reflection and errors
# -------------------------------
def type_of(scope, args: list[LispValue]) -> str:
    _check_arity("type", args, 1)
    value = args[0]
    if is_nil(value):
        return "nil"
    return type(value).__name__


def _symbol_arg(name: str, args: list[LispValue]) -> Symbol:
    _check_arity(name, args, 1)
    if not isinstance(args[0], Symbol):
        raise XlispTypeError(f"{name} expects a symbol, got {to_string(args[0])}")
    return args[0]


def bound_p(scope, args: list[LispValue]) -> bool:
    return scope.is_bound(_symbol_arg("bound?", args))


def resolve(scope, args: list[LispValue]) -> LispValue:
    """Value bound to the symbol, or nil when unbound."""
    try:
        return scope.resolve(_symbol_arg("resolve", args))
    except XlispUnboundSymbol:
        return Nil


def throw(scope, args: list[LispValue]) -> LispValue:
    raise XlispThrownError(make_string(scope, args))


# -------------------------------
# Concurrency
# -------------------------------
def make_atom(scope, args: list[LispValue]) -> Atom:
    _check_arity("atom", args, 1)
    return Atom(args[0])


def future_realized(scope, args: list[LispValue]) -> bool:
    """Non-blocking: true once the future's computation has finished."""
    _check_arity("realized?", args, 1)
    handle = args[0]
    if not isinstance(handle, FutureHandle):
        raise XlispTypeError(f"realized? expects a future, got {to_string(handle)}")
    return handle.realized


def sleep(scope, args: list[LispValue]) -> LispValue:
    """(sleep ms)"""
    _check_arity("sleep", args, 1)
    time.sleep(_numbers("sleep", args)[0] / 1000)
    return Nil


BUILTINS: dict[str, Any] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "mod": mod,
    "inc": inc,
    "dec": dec,
    "=": equals,
    "not=": not_equals,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "not": logical_not,
    "and": logical_and,
    "or": logical_or,
    "list": list_builtin,
    "vector": vector_builtin,
    "first": first,
    "rest": rest,
    "next": next_builtin,
    "cons": cons,
    "count": count,
    "concat": concat,
    "range": range_builtin,
    "realize": realize,
    "empty?": is_empty,
    "nil?": nil_p,
    "symbol?": symbol_p,
    "keyword?": keyword_p,
    "str": make_string,
    "print": print_builtin,
    "format": format_builtin,
    "printf": printf,
    "type": type_of,
    "bound?": bound_p,
    "resolve": resolve,
    "throw": throw,
    "atom": make_atom,
    "realized?": future_realized,
    "sleep": sleep,
}


def register(env: Environment) -> None:
    """Bind all builtins and special forms into the base namespace."""
    mapping: dict[str, LispValue] = {
        f"{BASE_NS}/{name}": fn for name, fn in BUILTINS.items()
    }
    mapping.update(
        {
            f"{BASE_NS}/{name}": SpecialForm(name, handler)
            for name, handler in SPECIAL_FORMS.items()
        }
    )
    mapping[f"{BASE_NS}/*version*"] = __version__
    env.bind_all(mapping)
    logger.debug("Registered %d core bindings", len(mapping))
