import pytest

from bprog.interpreter import Interpreter

# Every test gets its own interpreter. Operator errors reported on the side
# channel are collected in `reported` as (word, kind) pairs so tests can
# assert on the recovery behaviour as well as the final value.


@pytest.fixture
def reported():
    return []


@pytest.fixture
def interp(reported):
    return Interpreter(on_error=lambda word, error: reported.append((word, error.kind)))


@pytest.fixture
def run(interp):
    """Evaluate a line and return what the front end would print."""
    return interp.eval_to_text
