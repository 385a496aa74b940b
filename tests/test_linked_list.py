import itertools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from boringkit.linked_list import LinkedList, ListNode
from boringkit.sorting import three_way


def test_append_and_iterate():
    lst = LinkedList()
    lst.append(1)
    lst.append(2)
    lst.appendleft(0)
    assert list(lst) == [0, 1, 2]
    assert len(lst) == 3
    assert list(reversed(lst)) == [2, 1, 0]


def test_init_from_iterable_and_extend():
    lst = LinkedList("ab")
    lst.extend("cd")
    assert list(lst) == ["a", "b", "c", "d"]
    assert len(lst) == 4


def test_empty_list_boundaries():
    lst = LinkedList()
    assert lst.first() is None
    assert lst.last() is None
    assert list(lst) == []
    with pytest.raises(IndexError):
        lst.pop()
    with pytest.raises(IndexError):
        lst.popleft()


def test_first_last_successor_predecessor():
    lst = LinkedList([10, 20, 30])
    first = lst.first()
    last = lst.last()
    assert first.value == 10
    assert last.value == 30
    assert lst.successor(first).value == 20
    assert lst.predecessor(last).value == 20
    assert lst.successor(last) is None
    assert lst.predecessor(first) is None


def test_insert_before_node():
    lst = LinkedList([1, 3])
    node = lst.search(3)
    new = lst.insert_before(node, 2)
    assert new.value == 2
    assert list(lst) == [1, 2, 3]
    lst.insert_before(None, 4)
    assert list(lst) == [1, 2, 3, 4]


def test_search_found_and_missing():
    lst = LinkedList([5, 6, 7, 6])
    found = lst.search(6)
    assert found is lst.successor(lst.first())
    assert lst.search(42) is None


def test_search_from_start_node():
    lst = LinkedList([5, 6, 7, 6])
    first_six = lst.search(6)
    later = lst.search(6, three_way, lst.successor(first_six))
    assert later is lst.last()


def test_search_with_custom_compare():
    lst = LinkedList([("a", 1), ("b", 2)])

    def by_key(item, key):
        return three_way(item[0], key)

    assert lst.search("b", by_key).value == ("b", 2)


def test_remove_returns_value_and_unlinks():
    lst = LinkedList([1, 2, 3])
    middle = lst.search(2)
    assert lst.remove(middle) == 2
    assert list(lst) == [1, 3]
    assert len(lst) == 2
    with pytest.raises(ValueError):
        lst.remove(middle)


def test_foreign_node_rejected():
    a = LinkedList([1])
    b = LinkedList([1])
    with pytest.raises(ValueError):
        b.remove(a.first())
    with pytest.raises(ValueError):
        b.insert_before(ListNode(3), 4)


def test_pop_and_popleft():
    lst = LinkedList([1, 2, 3])
    assert lst.pop() == 3
    assert lst.popleft() == 1
    assert list(lst) == [2]


def test_nodes_allows_removal_during_iteration():
    lst = LinkedList(range(6))
    for node in lst.nodes():
        if node.value % 2:
            lst.remove(node)
    assert list(lst) == [0, 2, 4]


def test_nodes_from_start():
    lst = LinkedList([1, 2, 3, 4])
    start = lst.search(3)
    assert [n.value for n in lst.nodes(start)] == [3, 4]


@given(st.lists(st.integers()))
def test_sort_matches_sorted(values):
    lst = LinkedList(values)
    lst.sort()
    assert list(lst) == sorted(values)
    assert len(lst) == len(values)


def test_sort_descending():
    lst = LinkedList([3, 1, 2])
    lst.sort(lambda a, b: three_way(b, a))
    assert list(lst) == [3, 2, 1]


def test_wring_removes_duplicates_with_callback():
    lst = LinkedList([1, 1, 2, 2, 2, 3, 1])
    removed = []
    count = lst.wring(three_way, removed.append)
    assert list(lst) == [1, 2, 3, 1]
    assert removed == [1, 2, 2]
    assert count == 3


@given(st.lists(st.integers(min_value=0, max_value=3)))
def test_wring_equals_groupby(values):
    lst = LinkedList(values)
    lst.wring()
    assert list(lst) == [key for key, _ in itertools.groupby(values)]
    assert list(reversed(lst)) == list(lst)[::-1]