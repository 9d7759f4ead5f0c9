import pytest

from dstructs.circular_deque import CircularDeque, main
from dstructs.circular_queue import QueueEmptyError, QueueFullError


def test_add_front_and_rear_order():
    deque = CircularDeque(5)
    deque.add_rear("b")
    deque.add_front("a")
    deque.add_rear("c")
    assert list(deque) == ["a", "b", "c"]
    assert len(deque) == 3


def test_delete_front_and_rear():
    deque = CircularDeque(5)
    for value in (1, 2, 3, 4):
        deque.add_rear(value)
    assert deque.delete_front() == 1
    assert deque.delete_rear() == 4
    assert list(deque) == [2, 3]


def test_stack_behaviour_from_front():
    deque = CircularDeque(4)
    values = ["w", "x", "y", "z"]
    for value in values:
        deque.add_front(value)
    assert [deque.delete_front() for _ in values] == list(reversed(values))
    assert deque.is_empty()


def test_full_raises_on_both_ends():
    deque = CircularDeque(2)
    deque.add_rear(1)
    deque.add_front(0)
    assert deque.is_full()
    with pytest.raises(QueueFullError):
        deque.add_rear(2)
    with pytest.raises(QueueFullError):
        deque.add_front(2)


def test_empty_raises_on_both_ends():
    deque = CircularDeque(2)
    with pytest.raises(QueueEmptyError):
        deque.delete_front()
    with pytest.raises(QueueEmptyError):
        deque.delete_rear()


def test_mixed_wraparound_matches_list_model():
    deque = CircularDeque(3)
    model = []
    for step in range(30):
        if len(model) == 3:
            if step % 2:
                assert deque.delete_rear() == model.pop()
            else:
                assert deque.delete_front() == model.pop(0)
        if step % 3:
            deque.add_front(step)
            model.insert(0, step)
        else:
            deque.add_rear(step)
            model.append(step)
        assert list(deque) == model


def test_format_empty():
    assert CircularDeque().format() == "큐가 비어 있습니다."


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == "큐 내용:  10 8 6 4 2 1 3 5 7 9"