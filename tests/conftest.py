import pytest

from lisplib.interpreter import Interpreter
from lisplib.types.environment import Environment


@pytest.fixture
def env():
    """Fresh, empty environment for each test."""
    return Environment()


@pytest.fixture
def interp():
    """Interpreter session with its own environment."""
    return Interpreter()
