import pytest

from fmtkit.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_add_back_keeps_order():
    lst = LinkedList()
    for item in ["a", "b", "c"]:
        lst.add_back(item)
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_add_front_reverses_order():
    lst = LinkedList()
    for item in [1, 2, 3]:
        lst.add_front(item)
    assert list(lst) == [3, 2, 1]


def test_add_front_returns_new_head():
    lst = LinkedList([2])
    node = lst.add_front(1)
    assert lst.head is node
    assert node.next.content == 2


def test_last_is_tail_node():
    lst = LinkedList([1, 2, 3])
    tail = lst.last()
    assert isinstance(tail, Node) and tail.content == 3
    assert tail.next is None


def test_constructor_from_iterable():
    assert list(LinkedList(range(4))) == [0, 1, 2, 3]


def test_clear_deletes_each_content():
    deleted = []
    lst = LinkedList(["x", "y", "z"])
    lst.clear(deleted.append)
    assert deleted == ["x", "y", "z"]
    assert len(lst) == 0
    assert lst.head is None


def test_iterate_visits_in_order():
    seen = []
    LinkedList([5, 6, 7]).iterate(seen.append)
    assert seen == [5, 6, 7]


def test_map_builds_new_list():
    deleted = []
    source = LinkedList([1, 2, 3])
    mapped = source.map(lambda x: x * 10, deleted.append)
    assert list(mapped) == [10, 20, 30]
    assert list(source) == [1, 2, 3]
    assert deleted == []


def test_map_empty_list():
    assert len(LinkedList().map(str, lambda _: None)) == 0


def test_map_failure_deletes_partial_result():
    deleted = []

    def f(x):
        if x == 3:
            raise RuntimeError("boom")
        return -x

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(f, deleted.append)
    assert deleted == [-1, -2]


def test_map_requires_functions():
    with pytest.raises(TypeError):
        LinkedList([1]).map(None, lambda _: None)