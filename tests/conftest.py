"""
Test bootstrap:
- Make the tests directory importable so ``helpers`` resolves
- Provide one instance of each sidechain object variant
"""
import pathlib
import sys

import pytest

TESTS_DIR = pathlib.Path(__file__).parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from helpers.factories import mk_deposit, mk_wt, mk_wtprime  # noqa: E402


@pytest.fixture
def wt():
    """A withdrawal request."""
    return mk_wt()


@pytest.fixture
def wtprime():
    """A withdrawal bundle."""
    return mk_wtprime()


@pytest.fixture
def deposit():
    """A deposit."""
    return mk_deposit()


@pytest.fixture
def all_objects(wt, wtprime, deposit):
    """One object of each variant."""
    return [wt, wtprime, deposit]
