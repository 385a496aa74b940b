import pytest
from hypothesis import given, strategies as st

from boringkit.entity import Entity, cmp_float, cmp_int


def test_key_and_value_parts():
    entity = Entity(["k1", "k2", 10], 2)
    assert entity.key() == ("k1", "k2")
    assert entity.value() == 10
    assert entity.number == 3


def test_default_value_index_makes_all_key():
    entity = Entity.of("a", "b")
    assert entity.value_index == 2
    assert entity.key() == ("a", "b")
    with pytest.raises(IndexError):
        entity.value()


def test_invalid_value_index_rejected():
    with pytest.raises(ValueError):
        Entity([1, 2], 3)
    with pytest.raises(ValueError):
        Entity([1, 2], -1)


def test_copy_is_independent():
    original = Entity(["k", 1], 1)
    duplicate = original.copy()
    duplicate.values[1] = 2
    assert original.value() == 1
    assert duplicate.value() == 2
    assert original.key_equals(duplicate)


def test_copy_value_from_overwrites_value_fields():
    target = Entity(["k", 1, 2], 1)
    source = Entity(["other", 8, 9], 1)
    target.copy_value_from(source)
    assert target.values == ["k", 8, 9]


def test_copy_value_from_shape_mismatch_raises():
    target = Entity(["k", 1], 1)
    with pytest.raises(ValueError):
        target.copy_value_from(Entity(["k", 1, 2], 1))
    with pytest.raises(ValueError):
        target.copy_value_from(Entity(["k", 1], 2))
    keys_only = Entity(["k", 1])
    with pytest.raises(ValueError):
        keys_only.copy_value_from(Entity(["j", 2]))


def test_value_equals():
    assert Entity(["a", 1], 1).value_equals(Entity(["b", 1], 1))
    assert not Entity(["a", 1], 1).value_equals(Entity(["a", 2], 1))
    assert not Entity(["a", 1], 1).value_equals(Entity(["a", 1, 1], 1))


def test_key_equals_ignores_value_count():
    assert Entity(["a", 1], 1).key_equals(Entity(["a"]))
    assert not Entity(["a", 1], 1).key_equals(Entity(["b", 1], 1))
    assert not Entity(["a", "b"], 1).key_equals(Entity(["a", "b"], 2))


def test_cmp_int():
    assert cmp_int(3, 3) == 0
    assert cmp_int(4, 3) == 1
    assert cmp_int(2, 3) == -1


def test_cmp_float():
    assert cmp_float(1.5, 1.5) == 0
    assert cmp_float(2.5, 1.5) == 1
    assert cmp_float(0.5, 1.5) == -1


@given(st.integers(), st.integers())
def test_cmp_int_is_antisymmetric(a, b):
    assert cmp_int(a, b) == -cmp_int(b, a)


@given(st.lists(st.integers(), min_size=1), st.data())
def test_copy_round_trip(values, data):
    index = data.draw(st.integers(min_value=0, max_value=len(values)))
    entity = Entity(values, index)
    duplicate = entity.copy()
    assert duplicate == entity
    assert duplicate.key_equals(entity)
    assert duplicate.value_equals(entity)