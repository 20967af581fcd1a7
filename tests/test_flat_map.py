import pytest

from novakit.flat_map import FlatMap


def test_empty():
    m = FlatMap()
    assert len(m) == 0
    assert m.items() == []


def test_init_sorts_keys():
    m = FlatMap([("c", 3), ("a", 1), ("b", 2)])
    assert m.keys() == ["a", "b", "c"]
    assert m.values() == [1, 2, 3]
    assert list(m) == ["a", "b", "c"]
    assert list(reversed(m)) == ["c", "b", "a"]


def test_at_found_and_missing():
    m = FlatMap([(5, "five"), (1, "one")])
    assert m.at(5) == "five"
    with pytest.raises(KeyError, match="flat_map out of range"):
        m.at(3)


def test_insert_does_not_overwrite():
    m = FlatMap()
    assert m.insert("k", 1) == (1, True)
    assert m.insert("k", 2) == (1, False)
    assert m.at("k") == 1
    assert len(m) == 1


def test_init_first_duplicate_wins():
    m = FlatMap([("k", 1), ("k", 2)])
    assert m.items() == [("k", 1)]


def test_contains():
    m = FlatMap([(1, "a"), (3, "c")])
    assert 3 in m
    assert 2 not in m


def test_getitem_with_factory_inserts_default():
    m = FlatMap(default_factory=int)
    assert m["x"] == 0
    assert "x" in m
    assert len(m) == 1


def test_getitem_without_factory_raises():
    m = FlatMap([(1, "a")])
    assert m[1] == "a"
    with pytest.raises(KeyError):
        m[2]


def test_items_stay_sorted_after_inserts():
    m = FlatMap()
    for key in [9, 4, 7, 1, 8]:
        m.insert(key, str(key))
    keys = m.keys()
    assert keys == sorted(keys)
    assert all(v == str(k) for k, v in m.items())


def test_keys_returns_copy():
    m = FlatMap([(1, "a")])
    m.keys().append(2)
    assert m.keys() == [1]