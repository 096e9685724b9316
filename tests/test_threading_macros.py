import pytest

from xlisp.errors import XlispArityError, XlispTypeError, XlispUnboundSymbol
from xlisp.types.symbol import Symbol
from xlisp.types.vector import Vector


@pytest.mark.parametrize(
    "code,expected",
    [
        ("(-> 5 (+ 1) (* 2))", 12),
        ("(->> 5 (+ 1) (* 2))", 12),
        ("(-> 10 (- 3))", 7),
        ("(->> 10 (- 3))", -7),
        ("(-> 10 (- 3) (- 2))", 5),
        ("(->> 10 (- 3) (- 2))", 9),
        ("(-> 4 inc inc)", 6),
        ("(->> [1 2 3] (cons 0) count)", 4),
    ],
)
def test_threading(itp, code, expected):
    assert itp.eval(code) == expected


def test_list_results_stay_data(itp):
    assert itp.eval("(->> (list 1 2) (cons 0) (concat (list -1)))") == [-1, 0, 1, 2]
    assert itp.eval("(-> (list 3 4) rest)") == [4]


def test_symbol_results_stay_quoted(itp):
    assert itp.eval("(-> 'abc (list 1))") == [Symbol("abc"), 1]


def test_steps_see_lexical_scope(itp):
    assert itp.eval("(let [n 3] (-> n (* n) (+ n)))") == 12


def test_vector_results_come_back_as_values(itp):
    assert itp.eval("(-> (list 1 2) (vector))") == Vector([[1, 2]])
    assert itp.eval("(-> 'a (vector))") == Vector([Symbol("a")])
    assert itp.eval("(->> [1 2] (cons 0) (vector 9))") == Vector([9, [0, 1, 2]])


def test_lambda_step(itp):
    itp.eval("(def twice (fn [x] (* 2 x)))")
    assert itp.eval("(-> 5 twice (twice))") == 20


def test_threading_requires_a_form(itp):
    with pytest.raises(XlispArityError):
        itp.eval("(-> 1)")


def test_non_invokable_step(itp):
    itp.eval("(def seven 7)")
    with pytest.raises(XlispTypeError):
        itp.eval("(-> 1 seven)")


def test_unbound_step(itp):
    with pytest.raises(XlispUnboundSymbol):
        itp.eval("(-> 1 nope)")
