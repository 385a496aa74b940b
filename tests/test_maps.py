import pytest
from hypothesis import given, strategies as st

from boringkit.entity import cmp_int
from boringkit.maps import HashedMap, HashedSet, TreeMap, TreeSet


def collide(key, slot_size):
    return 0


def test_map_set_and_get():
    for m in (TreeMap(), HashedMap(), HashedMap(collide, 4)):
        assert m.set("a", 1) is True
        assert m.set("b", 2) is True
        assert m.get("a") == 1
        assert m.get("b") == 2
        assert len(m) == 2


def test_map_overwrite_keeps_size():
    for m in (TreeMap(), HashedMap(), HashedMap(collide, 4)):
        m.set("k", "old")
        assert m.set("k", "new") is False
        assert m.get("k") == "new"
        assert len(m) == 1


def test_map_multi_part_keys():
    for m in (TreeMap(), HashedMap(), HashedMap(collide, 4)):
        m.set(1, 2, "x")
        m.set(1, 3, "y")
        assert m.get(1, 2) == "x"
        assert m.get(1, 3) == "y"
        assert m.has(1, 2)
        assert not m.has(2, 1)
        assert sorted(m) == [(1, 2), (1, 3)]


def test_map_delete():
    for m in (TreeMap(), HashedMap(), HashedMap(collide, 4)):
        m.set("a", 10)
        m.set("b", 20)
        assert m.delete("a") == 10
        assert not m.has("a")
        assert len(m) == 1
        with pytest.raises(KeyError):
            m.delete("a")


def test_map_missing_key():
    for m in (TreeMap(), HashedMap(), HashedMap(collide, 4)):
        with pytest.raises(KeyError):
            m.get("nothing")
        assert m.has("nothing") is False


def test_map_arity_errors():
    m = TreeMap()
    with pytest.raises(TypeError):
        m.set("only")
    with pytest.raises(TypeError):
        m.get()


def test_map_entities_carry_key_and_value():
    m = TreeMap()
    m.set("a", "b", 5)
    (entity,) = list(m.entities())
    assert entity.key() == ("a", "b")
    assert entity.value() == 5


def test_treemap_orders_keys():
    m = TreeMap(cmp_int)
    for key in [5, 3, 9, 1]:
        m.set(key, str(key))
    assert list(m) == [1, 3, 5, 9]


def test_treemap_reverse_compare():
    m = TreeMap(lambda a, b: -cmp_int(a, b))
    for key in [2, 7, 4]:
        m.set(key, key)
    assert list(m) == [7, 4, 2]


@given(st.lists(st.tuples(st.integers(-50, 50), st.integers())))
def test_treemap_matches_dict(pairs):
    m = TreeMap()
    expected = {}
    for key, value in pairs:
        m.set(key, value)
        expected[key] = value
    assert list(m) == sorted(expected)
    assert {k: m.get(k) for k in m} == expected


@given(st.lists(st.integers(-20, 20)), st.lists(st.integers(-20, 20)))
def test_hashedmap_delete_matches_dict(added, removed):
    m = HashedMap(slot_size=7)
    expected = {}
    for key in added:
        m.set(key, key * 2)
        expected[key] = key * 2
    for key in removed:
        if key in expected:
            assert m.delete(key) == expected.pop(key)
        else:
            with pytest.raises(KeyError):
                m.delete(key)
    assert sorted(m) == sorted(expected)
    assert len(m) == len(expected)


def test_set_add_and_has():
    for s in (TreeSet(), HashedSet(), HashedSet(collide, 4)):
        assert s.add("x") is True
        assert s.add("x") is False
        assert s.has("x")
        assert not s.has("y")
        assert len(s) == 1


def test_set_get_and_delete():
    for s in (TreeSet(), HashedSet(), HashedSet(collide, 4)):
        s.add("x")
        assert s.get("x") == "x"
        assert s.delete("x") == "x"
        assert len(s) == 0
        with pytest.raises(KeyError):
            s.get("x")
        with pytest.raises(KeyError):
            s.delete("x")


def test_set_keeps_first_stored_key():
    s = TreeSet(lambda a, b: cmp_int(a.lower() == "a", b.lower() == "a"))
    s.add("A")
    s.add("a")
    assert list(s) == ["A"]
    assert s.get("a") == "A"


def test_set_union():
    first = TreeSet()
    second = HashedSet()
    for key in [1, 2]:
        first.add(key)
    for key in [2, 3]:
        second.add(key)
    first.union(second)
    assert list(first) == [1, 2, 3]


def test_set_intersects():
    a = TreeSet()
    b = TreeSet()
    c = HashedSet()
    for key in [1, 2, 3]:
        a.add(key)
    b.add(3)
    c.add(4)
    assert a.intersects(b)
    assert b.intersects(a)
    assert not a.intersects(c)


@given(st.lists(st.integers(-30, 30)))
def test_treeset_iterates_sorted_unique(keys):
    s = TreeSet()
    for key in keys:
        s.add(key)
    assert list(s) == sorted(set(keys))