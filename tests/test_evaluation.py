import pytest

from xlisp import errors
from xlisp.builtin.env_builtin import register
from xlisp.evaluation.evaluator import evaluate
from xlisp.types.environment import Environment
from xlisp.types.lambda_fn import Lambda
from xlisp.types.nil import Nil
from xlisp.types.symbol import Symbol
from xlisp.types.vector import Vector


@pytest.fixture
def core_env():
    env = Environment(namespace="user")
    register(env)
    env.bind(Symbol("x"), 42)
    env.bind(Symbol("y"), 100)
    return env


def test_self_evaluating_literals(core_env):
    assert evaluate(1, core_env) == 1
    assert evaluate(3.14, core_env) == 3.14
    assert evaluate("hello", core_env) == "hello"
    assert evaluate(Nil, core_env) is Nil
    assert evaluate(Symbol(":k"), core_env) == Symbol(":k")


def test_symbol_lookup(core_env):
    assert evaluate(Symbol("x"), core_env) == 42
    assert evaluate(Symbol("user/y"), core_env) == 100
    with pytest.raises(errors.XlispUnboundSymbol):
        evaluate(Symbol("z"), core_env)


def test_quote(core_env):
    assert evaluate([Symbol("quote"), [1, 2, 3]], core_env) == [1, 2, 3]


def test_builtin_call(core_env):
    assert evaluate([Symbol("+"), 1, 2, 3], core_env) == 6
    assert evaluate([Symbol("core/+"), Symbol("x"), 1], core_env) == 43


def test_vector_elements_are_evaluated(core_env):
    result = evaluate(Vector([Symbol("x"), [Symbol("inc"), 1]]), core_env)
    assert isinstance(result, Vector)
    assert result == [42, 2]


def test_fn_and_call(core_env):
    lam = evaluate([Symbol("fn"), Vector([Symbol("a"), Symbol("b")]),
                    [Symbol("+"), Symbol("a"), Symbol("b")]], core_env)
    assert isinstance(lam, Lambda)
    assert evaluate([lam, 2, 3], core_env) == 5


def test_def_binds_and_returns_qualified_symbol(core_env):
    assert evaluate([Symbol("def"), Symbol("w"), 5], core_env) == Symbol("user/w")
    assert evaluate(Symbol("w"), core_env) == 5


def test_if_expression(core_env):
    assert evaluate([Symbol("if"), True, 1, 2], core_env) == 1
    assert evaluate([Symbol("if"), Nil, 1, 2], core_env) == 2
    assert evaluate([Symbol("if"), False, 1], core_env) is Nil


def test_errors(core_env):
    with pytest.raises(errors.XlispArityError):
        evaluate([Symbol("def")], core_env)
    with pytest.raises(errors.XlispTypeError):
        evaluate([1, 2], core_env)


def test_interpreter_eval_results(itp):
    assert itp.eval("") is Nil
    assert itp.eval("(+ 1 2)") == 3
    assert itp.eval("1 2 3") == [1, 2, 3]


def test_let_is_sequential(itp):
    assert itp.eval("(let [a 1 b (+ a 1)] (* a b))") == 2


def test_bad_let_bindings(itp):
    with pytest.raises(errors.XlispBindingError):
        itp.eval("(let [a] a)")
    with pytest.raises(errors.XlispBindingError):
        itp.eval("(let (a 1) a)")


def test_fn_arity(itp):
    with pytest.raises(errors.XlispArityError):
        itp.eval("((fn [a b] a) 1)")
    assert itp.eval("((fn [a & more] more) 1 2 3)") == [2, 3]


def test_environment_survives_errors(itp):
    itp.eval("(def keep 1)")
    with pytest.raises(errors.XlispUnboundSymbol):
        itp.eval("(+ keep missing)")
    assert itp.eval("keep") == 1


def test_ns_form(itp):
    itp.eval("(def x 1)")
    assert itp.eval("(ns other)") is not None
    assert itp.eval("*ns*") == Symbol("other")
    with pytest.raises(errors.XlispUnboundSymbol):
        itp.eval("x")
    assert itp.eval("user/x") == 1
    assert itp.eval("(+ 1 1)") == 2


def test_builtins(itp):
    assert itp.eval("(str \"a\" 1 :k nil)") == "a1:k"
    assert itp.eval("(count [1 2 3])") == 3
    assert itp.eval("(cons 0 (list 1 2))") == [0, 1, 2]
    assert itp.eval("(concat [1] nil (list 2))") == [1, 2]
    assert itp.eval("(range 3)") == [0, 1, 2]
    assert itp.eval("(first nil)") is Nil
    assert itp.eval("(rest [1])") == []
    assert itp.eval("(empty? [])") is True
    assert itp.eval("(= [1 2] [1 2])") is True
    assert itp.eval("(= [1 2] (list 1 2))") is False
    assert itp.eval("(< 1 2 3)") is True
    assert itp.eval("(mod 7 3)") == 1
    assert itp.eval("(bound? 'inc)") is True
    assert itp.eval("(resolve 'nope)") is Nil


def test_throw(itp):
    with pytest.raises(errors.XlispThrownError, match="boom 1"):
        itp.eval('(throw "boom " 1)')


def test_print(itp, capsys):
    assert itp.eval('(print "hi" 1 [2])') is Nil
    assert capsys.readouterr().out == "hi 1 [2]\n"


def test_prelude_helpers(itp):
    assert itp.eval("(defn sq [x] (* x x)) (sq 4)")[-1] == 16
    assert itp.eval("(when true 1 2)") == 2
    assert itp.eval("(when false 1)") is Nil
    assert itp.eval("(cond false 1 (= 1 1) 2 :else 3)") == 2
    assert itp.eval("(second [1 2 3])") == 2


def test_prelude_lives_in_core(itp):
    assert itp.eval("(bound? 'core/identity)") is True
    itp.eval("(ns other)")
    assert itp.eval("(identity 5)") == 5
