import pytest

from algolab.maxheap import (
    HeapItem,
    MaxPriorityQueue,
    left_child,
    parent,
    right_child,
)

ELEMENTS = [HeapItem(4, 4), HeapItem(2, 2), HeapItem(8, 8), HeapItem(7, 7)]


@pytest.fixture
def filled():
    queue = MaxPriorityQueue(len(ELEMENTS) // 2)
    for item in ELEMENTS:
        queue.insert(HeapItem(item.priority, item.data))
    return queue


def test_make_queue():
    queue = MaxPriorityQueue(2)
    assert queue.capacity == 2
    assert len(queue) == 0


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        MaxPriorityQueue(-1)


def test_parent():
    assert parent(2) == 0
    assert parent(9) == 4
    assert parent(4) == 1
    assert parent(0) == -1


@pytest.mark.parametrize("index,expected", [(0, 1), (2, 5), (3, 7), (6, 13)])
def test_left_child(index, expected):
    assert left_child(index) == expected


@pytest.mark.parametrize("index,expected", [(0, 2), (2, 6), (3, 8), (6, 14)])
def test_right_child(index, expected):
    assert right_child(index) == expected


def test_sift_up():
    queue = MaxPriorityQueue(2)
    queue.items.append(HeapItem(4, 4))
    queue.sift_up(0)
    assert queue.items[0].priority == 4
    queue.items.append(HeapItem(2, 2))
    queue.sift_up(1)
    assert queue.items[0].priority == 4


def test_insert(filled):
    assert len(filled) == 4
    assert [item.priority for item in filled.items] == [8, 7, 4, 2]
    assert filled.capacity == 4


def test_peek_max(filled):
    assert filled.peek_max().priority == 8
    assert len(filled) == 4


def test_sift_down(filled):
    items = filled.items
    items[0], items[-1] = items[-1], items[0]
    filled.sift_down(0)
    assert filled.peek_max().priority == 7
    filled.sift_up(len(filled) - 3)
    assert filled.items[0].priority == 8


def test_remove_max(filled):
    filled.remove_max()
    assert len(filled) == 3
    assert filled.peek_max().priority == 7
    filled.remove_max()
    assert len(filled) == 2
    assert filled.peek_max().priority == 4
    filled.remove_max()
    assert len(filled) == 1
    assert filled.peek_max().priority == 2
    filled.remove_max()
    assert len(filled) == 0


def test_remove_max_returns_items_in_descending_order():
    queue = MaxPriorityQueue(1)
    priorities = [5, 1, 9, 3, 9, 0, 6, 2]
    for p in priorities:
        queue.insert(HeapItem(p, str(p)))
    out = [queue.remove_max() for _ in priorities]
    assert [item.priority for item in out] == sorted(priorities, reverse=True)
    assert all(item.data == str(item.priority) for item in out)


def test_empty_queue_errors():
    queue = MaxPriorityQueue(2)
    with pytest.raises(IndexError):
        queue.peek_max()
    with pytest.raises(IndexError):
        queue.remove_max()


def test_zero_capacity_grows():
    queue = MaxPriorityQueue(0)
    queue.insert(HeapItem(3))
    queue.insert(HeapItem(5))
    assert queue.peek_max().priority == 5
    assert queue.capacity >= len(queue)