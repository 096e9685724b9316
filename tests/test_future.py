import time

import pytest

from xlisp.errors import XlispFutureError, XlispTypeError, XlispUnboundSymbol
from xlisp.types.future import FutureHandle
from xlisp.types.nil import Nil


def test_future_returns_handle_immediately(itp):
    handle = itp.eval("(future (do (sleep 50) 1))")
    assert isinstance(handle, FutureHandle)
    assert handle.take() == (1, True)


def test_deref_blocks_for_value(itp):
    itp.eval("(def f (future (+ 1 2)))")
    assert itp.eval("(deref f)") == 3


def test_deref_caches_by_symbol(itp):
    itp.eval("(def f (future (list 1 2)))")
    first = itp.eval("(deref f)")
    second = itp.eval("(deref f)")
    assert first == [1, 2]
    assert first is second
    assert itp.eval("__deref__user.f__result__") is first


def test_bare_and_qualified_names_share_cache(itp):
    itp.eval("(def f (future (list 5)))")
    first = itp.eval("(deref f)")
    assert itp.eval("(deref user/f)") is first
    itp.eval("(def g (future 6))")
    assert itp.eval("(deref user/g)") == 6
    assert itp.eval("(deref g)") == 6


def test_future_sees_spawning_scope(itp):
    assert itp.eval("(let [x 20] (deref (future (* x 2))))") == 40


def test_realized(itp):
    itp.eval("(def slow (future (do (sleep 200) :done)))")
    assert itp.eval("(realized? slow)") is False
    assert itp.eval("(deref slow)") == itp.eval(":done")
    assert itp.eval("(realized? slow)") is True


def test_realized_rejects_non_future(itp):
    with pytest.raises(XlispTypeError):
        itp.eval("(realized? 1)")


def test_failure_surfaces_on_deref(itp):
    itp.eval('(def bad (future (throw "kaput")))')
    with pytest.raises(XlispFutureError, match="kaput"):
        itp.eval("(deref bad)")
    with pytest.raises(XlispFutureError):
        itp.eval("(deref bad)")


def test_deref_of_plain_value(itp):
    with pytest.raises(XlispTypeError):
        itp.eval("(deref 1)")


def test_anonymous_handle_consumed_once(itp):
    handle = itp.eval("(future 1)")
    assert handle.take() == (1, True)
    assert handle.take() == (Nil, False)
    assert handle.closed


def test_deref_of_closed_handle_without_cache(itp):
    itp.eval("(def g (future 1))")
    itp.eval("(resolve 'g)").take()
    with pytest.raises(XlispUnboundSymbol):
        itp.eval("(deref g)")


def test_concurrent_futures_run_in_parallel(itp):
    start = time.monotonic()
    itp.eval("(def a (future (do (sleep 300) 1)))")
    itp.eval("(def b (future (do (sleep 300) 2)))")
    assert itp.eval("(+ (deref a) (deref b))") == 3
    assert time.monotonic() - start < 0.55
