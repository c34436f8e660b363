import pytest

from maglev.errors import DuplicateBackend, InvalidTableSize, NotFound, TableFull, TooManyBackends
from maglev.state.backend_set import BackendSet


def test_names_are_sorted_copy():
    names = ["c", "a", "b"]
    backends = BackendSet(names, 13)
    assert backends.names == ("a", "b", "c")
    assert names == ["c", "a", "b"]


def test_too_many_backends_checked_before_table_size():
    with pytest.raises(TooManyBackends):
        BackendSet([f"backend-{i}" for i in range(5)], 4)


def test_invalid_table_size():
    with pytest.raises(InvalidTableSize):
        BackendSet(["a"], 12)


def test_add_keeps_order_and_receiver():
    backends = BackendSet(["a", "c"], 13)
    added = backends.add("b")
    assert added.names == ("a", "b", "c")
    assert backends.names == ("a", "c")


def test_add_duplicate():
    with pytest.raises(DuplicateBackend):
        BackendSet(["a"], 13).add("a")


def test_add_when_full():
    backends = BackendSet(["a", "b", "c"], 3)
    with pytest.raises(TableFull):
        backends.add("d")


def test_remove():
    backends = BackendSet(["a", "b", "c"], 13)
    assert backends.remove("b").names == ("a", "c")
    assert backends.remove("a").remove("b").remove("c").names == ()


def test_remove_missing():
    backends = BackendSet(["a", "c"], 13)
    with pytest.raises(NotFound):
        backends.remove("b")
    with pytest.raises(NotFound):
        backends.remove("z")


def test_not_found_is_key_error():
    with pytest.raises(KeyError):
        BackendSet([], 13).remove("a")


def test_membership():
    backends = BackendSet(["b", "a"], 13)
    assert "a" in backends
    assert "z" not in backends
    assert 1 not in backends
    assert len(backends) == 2
    assert list(backends) == ["a", "b"]
