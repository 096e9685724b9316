import threading

import pytest

from xlisp.errors import XlispAccessError, XlispInvalidSymbol, XlispUnboundSymbol
from xlisp.types.environment import Environment
from xlisp.types.scope import Scope
from xlisp.types.symbol import QualifiedSymbol, Symbol


def test_bind_qualifies_with_current_namespace(env):
    qualified = env.bind(Symbol("x"), 1)
    assert qualified == QualifiedSymbol("user", "x")
    assert env.resolve(Symbol("x")) == 1
    assert env.resolve("user/x") == 1


def test_rebinding_overwrites(env):
    env.bind("x", 1)
    env.bind("x", 2)
    assert env.resolve("x") == 2


def test_rebinding_same_value_is_idempotent(env):
    env.bind("x", 7)
    env.bind("x", 7)
    assert env.resolve("x") == 7
    assert env.namespaces() == ["user"]


def test_falls_back_to_core(env):
    env.bind("core/inc", "core-inc")
    assert env.resolve("inc") == "core-inc"


def test_current_namespace_shadows_core(env):
    env.bind("core/x", "core")
    env.bind("x", "user")
    assert env.resolve("x") == "user"
    assert env.resolve("core/x") == "core"


def test_qualified_lookup_in_other_namespace_falls_back_by_name(env):
    env.bind("core/y", 3)
    assert env.resolve("other/y") == 3


def test_switching_namespace_hides_bindings(env):
    env.bind("x", 1)
    env.switch_namespace(Symbol("other"))
    assert env.current_namespace == "other"
    with pytest.raises(XlispUnboundSymbol):
        env.resolve("x")
    assert env.resolve("user/x") == 1


def test_switch_binds_ns_marker(env):
    env.switch_namespace("other")
    assert env.resolve("*ns*") == Symbol("other")
    assert env.resolve("other/*ns*") == Symbol("other")


def test_bare_ns_resolves_in_core(env):
    env.bind("core/ns", "switcher")
    env.switch_namespace("other")
    assert env.resolve("ns") == "switcher"


def test_unbound_symbol(env):
    with pytest.raises(XlispUnboundSymbol):
        env.resolve("missing")
    assert not env.is_bound("missing")


def test_malformed_symbol(env):
    with pytest.raises(XlispInvalidSymbol):
        env.bind("a/b/c", 1)
    with pytest.raises(XlispInvalidSymbol):
        env.resolve("a/b/c")


def test_check_ns_rejects_foreign_binds():
    env = Environment(namespace="user", check_ns=True)
    with pytest.raises(XlispAccessError):
        env.bind("other/x", 1)
    assert env.bind("user/x", 1) == QualifiedSymbol("user", "x")
    assert not env.is_bound("other/x")


def test_bind_all(env):
    env.bind_all({"core/a": 1, "core/b": 2, "c": 3})
    assert [env.resolve(s) for s in ("a", "b", "c")] == [1, 2, 3]
    assert env.namespaces() == ["core", "user"]


def test_scope_shadows_and_falls_through(env):
    env.bind("x", 1)
    env.bind("y", 2)
    scope = Scope(env)
    scope.bind(Symbol("x"), 10)
    inner = Scope(scope)
    assert inner.resolve("x") == 10
    assert inner.resolve("y") == 2
    assert inner.root() is env
    assert inner.is_bound("x") and not inner.is_bound("z")


def test_concurrent_resolve_during_binds(env):
    env.bind("x", 0)
    errors = []

    def reader():
        for _ in range(2000):
            try:
                assert env.resolve("x") in (0, 1)
            except Exception as exc:  # noqa: BLE001
                errors.append(exc)

    def writer():
        for i in range(2000):
            env.bind("x", i % 2)
            env.bind(f"k{i}", i)

    threads = [threading.Thread(target=reader) for _ in range(4)]
    threads.append(threading.Thread(target=writer))
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert not errors
    assert env.resolve("k1999") == 1999
