import pytest

from algobox.circular_list import CircularLinkedList


def test_insert_at_tail_keeps_order():
    items = CircularLinkedList()
    for value in [1, 2, 3, 4]:
        items.insert_at_tail(value)
    assert list(items) == [1, 2, 3, 4]
    assert len(items) == 4


def test_source_sequence():
    items = CircularLinkedList([1, 2, 3, 4])
    items.insert_at_head(5)
    assert list(items) == [5, 1, 2, 3, 4]
    items.delete(5)
    assert list(items) == [5, 1, 2, 3]


def test_insert_at_head_into_empty():
    items = CircularLinkedList()
    items.insert_at_head(7)
    assert list(items) == [7]


def test_delete_at_head():
    items = CircularLinkedList(["a", "b", "c"])
    assert items.delete_at_head() == "a"
    assert list(items) == ["b", "c"]


def test_delete_last_then_append():
    items = CircularLinkedList([1, 2, 3])
    assert items.delete(3) == 3
    items.insert_at_tail(9)
    assert list(items) == [1, 2, 9]


def test_delete_middle():
    items = CircularLinkedList([1, 2, 3])
    assert items.delete(2) == 2
    assert list(items) == [1, 3]


def test_delete_only_element_empties_list():
    items = CircularLinkedList([4])
    assert items.delete(1) == 4
    assert len(items) == 0
    assert list(items) == []


def test_delete_from_empty_raises():
    with pytest.raises(IndexError):
        CircularLinkedList().delete_at_head()


@pytest.mark.parametrize("position", [0, 4, -1])
def test_delete_out_of_range(position):
    items = CircularLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        items.delete(position)
    assert list(items) == [1, 2, 3]


def test_str_joins_values():
    assert str(CircularLinkedList([1, 2, 3])) == "1 2 3"