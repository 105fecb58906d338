import pytest

from dsakit.array_queue import ArrayQueue, QueueOverflowError, QueueUnderflowError

VALUES = [10, 1, 11, 0, 20]


def _filled(values, capacity=5):
    queue = ArrayQueue(capacity)
    for value in values:
        queue.enqueue(value)
    return queue


def test_dequeue_returns_values_in_arrival_order():
    queue = _filled(VALUES)
    assert [queue.dequeue() for _ in VALUES] == VALUES
    assert len(queue) == 0


def test_iteration_and_length():
    queue = _filled(VALUES[:3])
    assert list(queue) == VALUES[:3]
    assert len(queue) == 3


def test_default_capacity_is_five():
    queue = _filled(VALUES)
    with pytest.raises(QueueOverflowError):
        queue.enqueue(99)
    assert list(queue) == VALUES


def test_freed_front_slots_are_not_reused():
    queue = _filled([1, 2, 3], capacity=3)
    assert queue.dequeue() == 1
    with pytest.raises(OverflowError):
        queue.enqueue(4)
    assert list(queue) == [2, 3]


def test_emptying_resets_both_ends():
    queue = _filled([1, 2], capacity=2)
    queue.dequeue()
    queue.dequeue()
    queue.enqueue(3)
    queue.enqueue(4)
    assert list(queue) == [3, 4]


def test_underflow_on_empty_queue():
    with pytest.raises(QueueUnderflowError):
        ArrayQueue().dequeue()


def test_underflow_after_draining():
    queue = _filled([5])
    assert queue.dequeue() == 5
    with pytest.raises(IndexError):
        queue.dequeue()


def test_str_of_empty_queue():
    assert str(ArrayQueue()) == "Queue is Empty"


def test_str_lists_items_front_to_rear():
    assert str(_filled([10, 1, 11])) == "Queue: 10 1 11"


def test_rejects_negative_capacity():
    with pytest.raises(ValueError):
        ArrayQueue(-1)