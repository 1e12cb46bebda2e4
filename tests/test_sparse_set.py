import pytest

from pengin.sparse_set import SparseSet


@pytest.fixture
def filled():
    s = SparseSet()
    s.emplace(10, "a")
    s.emplace(20, "b")
    s.emplace(30, "c")
    return s


def test_emplace_and_lookup(filled):
    assert len(filled) == 3
    assert filled[20] == "b"
    assert 30 in filled
    assert 40 not in filled


def test_iteration_follows_insertion(filled):
    assert list(filled) == ["a", "b", "c"]
    assert filled.keys() == [10, 20, 30]
    assert list(filled.items()) == [(10, "a"), (20, "b"), (30, "c")]


def test_remove_swaps_last_into_slot(filled):
    filled.remove(10)
    assert filled.values() == ["c", "b"]
    assert filled.key_at(0) == 30
    assert filled[30] == "c"
    assert 10 not in filled


def test_remove_last(filled):
    filled.remove(30)
    assert filled.keys() == [10, 20]
    assert filled[20] == "b"


def test_keys_and_values_stay_aligned(filled):
    filled.remove(20)
    filled.emplace(40, "d")
    for key, value in filled.items():
        assert filled[key] == value


def test_duplicate_key_rejected(filled):
    with pytest.raises(KeyError):
        filled.emplace(10, "z")
    assert filled[10] == "a"


def test_missing_key_errors(filled):
    with pytest.raises(KeyError):
        filled[99]
    with pytest.raises(KeyError):
        filled.remove(99)


def test_key_at_out_of_range(filled):
    with pytest.raises(IndexError):
        filled.key_at(3)


def test_clear(filled):
    filled.clear()
    assert len(filled) == 0
    assert list(filled) == []
    assert 10 not in filled


def test_emplace_returns_value():
    s = SparseSet()
    value = [1, 2]
    assert s.emplace("k", value) is value