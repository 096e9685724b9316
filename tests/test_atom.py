import threading

import pytest
from hypothesis import given, settings, strategies as st

from xlisp.errors import XlispResolutionError, XlispTypeError
from xlisp.interpreter import Interpreter
from xlisp.types.atom import Atom


def test_swap_returns_new_value(itp):
    itp.eval("(def a (atom 1))")
    assert itp.eval("(swap! a inc)") == 2
    assert itp.eval("(deref a)") == 2


def test_swap_with_extra_args(itp):
    itp.eval("(def a (atom 10))")
    assert itp.eval("(swap! a + 1 2)") == 13


def test_swap_with_lambda(itp):
    itp.eval("(def a (atom [1]))")
    assert itp.eval("(swap! a (fn [v] (cons 0 v)))") == [0, 1]


def test_reset_from_prelude(itp):
    itp.eval("(def a (atom 1))")
    assert itp.eval("(reset! a :done)") == itp.eval(":done")


def test_swap_requires_atom(itp):
    itp.eval("(def n 3)")
    with pytest.raises(XlispResolutionError):
        itp.eval("(swap! n inc)")


def test_swap_requires_function(itp):
    itp.eval("(def a (atom 0))")
    with pytest.raises(XlispResolutionError):
        itp.eval("(swap! a 5)")
    assert itp.eval("(deref a)") == 0


def test_failed_update_leaves_value(itp):
    itp.eval("(def a (atom 1))")
    with pytest.raises(Exception):
        itp.eval('(swap! a (fn [v] (throw "bad")))')
    assert itp.eval("(deref a)") == 1


def test_nested_swap_on_same_atom_is_rejected(itp):
    itp.eval("(def a (atom 0))")
    with pytest.raises(XlispTypeError, match="re-entered"):
        itp.eval("(swap! a (fn [v] (do (swap! a inc) (+ v 10))))")
    assert itp.eval("(deref a)") == 0
    assert itp.eval("(swap! a inc)") == 1


def test_update_may_read_and_swap_other_atoms(itp):
    itp.eval("(def a (atom 1))")
    itp.eval("(def b (atom 0))")
    assert itp.eval("(swap! a (fn [v] (+ v (deref a) (swap! b inc))))") == 3


def test_update_state_serializes_python_threads():
    atom = Atom(0)

    def work():
        for _ in range(500):
            atom.update_state(lambda v: v + 1)

    threads = [threading.Thread(target=work) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert atom.value == 4000


@settings(max_examples=5, deadline=None)
@given(st.integers(1, 6), st.integers(1, 40), st.integers(-5, 5))
def test_concurrent_swaps_from_futures(n, m, initial):
    itp = Interpreter(prelude=None)
    itp.eval(f"(def counter (atom {initial}))")
    itp.eval(
        "(def work (fn [m] (loop [i 0] (if (< i m) (do (swap! counter inc) (recur (inc i))) i))))"
    )
    handles = [itp.eval(f"(future (work {m}))") for _ in range(n)]
    for h in handles:
        h.take()
    assert itp.eval("(deref counter)") == n * m + initial
