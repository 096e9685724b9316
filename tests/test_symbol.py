import pytest
from hypothesis import given, strategies as st

from xlisp.errors import XlispInvalidSymbol
from xlisp.types.symbol import QualifiedSymbol, Symbol, split_symbol

names = st.from_regex(r"[a-z*+!?<>=\-][a-z0-9*+!?<>=\-]{0,8}", fullmatch=True)


def test_symbols_are_interned_by_name():
    assert Symbol("abc") == Symbol("abc")
    assert hash(Symbol("abc")) == hash(Symbol("abc"))
    assert Symbol("abc") != "abc"


def test_keyword_detection():
    assert Symbol(":a").is_keyword
    assert not Symbol(":").is_keyword
    assert not Symbol("a").is_keyword


@pytest.mark.parametrize(
    "text,expected",
    [
        ("x", QualifiedSymbol("user", "x")),
        ("core/x", QualifiedSymbol("core", "x")),
        ("/", QualifiedSymbol("user", "/")),
        ("core//", QualifiedSymbol("core", "/")),
    ],
)
def test_split_symbol(text, expected):
    assert split_symbol(text, "user") == expected


@pytest.mark.parametrize("text", ["a/b/c", "ns/x/"])
def test_second_separator_is_rejected(text):
    with pytest.raises(XlispInvalidSymbol):
        split_symbol(text, "user")


@given(names)
def test_bare_name_takes_current_namespace(name):
    assert split_symbol(Symbol(name), "user") == QualifiedSymbol("user", name)


@given(names, names)
def test_qualified_round_trip(ns, name):
    qualified = split_symbol(f"{ns}/{name}", "user")
    assert qualified == QualifiedSymbol(ns, name)
    assert str(qualified) == f"{ns}/{name}"
