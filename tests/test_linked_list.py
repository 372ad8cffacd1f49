import pytest

from algodrills.linked_list import LinkedList, Node

VALUES = [2, 3, 4, 578, 73737]


def test_builds_in_order():
    assert list(LinkedList(VALUES)) == VALUES


def test_length_and_membership():
    linked = LinkedList([1, 2, 3, 4, 5, 474, 57])
    assert len(linked) == 7
    assert 69 not in linked
    assert 474 in linked


def test_empty_list():
    linked = LinkedList([])
    assert len(linked) == 0
    assert list(linked) == []


def test_insert_at_length_appends():
    linked = LinkedList(VALUES)
    linked.insert(5, 56)
    assert list(linked) == VALUES + [56]
    assert len(linked) == 6


def test_insert_first_prepends():
    linked = LinkedList(VALUES)
    linked.insert(1, 56)
    assert list(linked) == [56] + VALUES


def test_insert_middle():
    linked = LinkedList(VALUES)
    linked.insert(3, 56)
    assert list(linked) == VALUES[:2] + [56] + VALUES[2:]


def test_insert_into_empty_raises():
    with pytest.raises(IndexError):
        LinkedList([]).insert(1, 5)


def test_insert_beyond_length_raises():
    linked = LinkedList(VALUES)
    with pytest.raises(IndexError):
        linked.insert(6, 1)
    assert list(linked) == VALUES


def test_remove_last_position():
    linked = LinkedList(VALUES)
    assert linked.remove(5) == 73737
    assert list(linked) == VALUES[:4]


def test_remove_middle_and_first():
    linked = LinkedList(VALUES)
    assert linked.remove(3) == 4
    assert list(linked) == [2, 3, 578, 73737]
    assert linked.remove(1) == 2
    assert list(linked) == [3, 578, 73737]
    assert len(linked) == 3


def test_remove_beyond_length_raises():
    with pytest.raises(IndexError):
        LinkedList(VALUES).remove(6)


def test_remove_first_and_last():
    linked = LinkedList(VALUES)
    assert linked.remove_first() == 2
    assert linked.remove_last() == 73737
    assert list(linked) == [3, 4, 578]


def test_remove_last_single_node():
    linked = LinkedList([7])
    assert linked.remove_last() == 7
    assert len(linked) == 0
    with pytest.raises(IndexError):
        linked.remove_first()


def test_node_links():
    tail = Node(2)
    head = Node(1, tail)
    assert head.next is tail
    assert tail.next is None