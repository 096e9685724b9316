import pytest

from xlisp.interpreter import Interpreter
from xlisp.types.environment import Environment


@pytest.fixture
def itp():
    """Interpreter with the packaged prelude, in the `user` namespace."""
    return Interpreter(namespace="user")


@pytest.fixture
def bare_itp():
    """Interpreter without a prelude."""
    return Interpreter(prelude=None, namespace="user")


@pytest.fixture
def env():
    return Environment(namespace="user")
