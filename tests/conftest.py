import pytest

from maglev import MaglevTable

SIZE_N = 5
LOOKUP_SIZE_M = 13  # must be prime


@pytest.fixture
def names():
    return [f"backend-{i}" for i in range(SIZE_N)]


@pytest.fixture
def lookup_keys():
    return [f"IP{i}" for i in range(1024)]


@pytest.fixture
def table(names):
    return MaglevTable(names, LOOKUP_SIZE_M)
