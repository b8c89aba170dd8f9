import operator

import pytest

from algokit.min_queue import MonotoneQueue, MonotoneStack

VALUES = [5, 3, 8, 1, 9, 2, 7, 4, 6, 0, 3, 3]


def test_stack_tracks_minimum_while_pushing():
    s = MonotoneStack()
    for k, v in enumerate(VALUES):
        s.push(v)
        assert s.extreme() == min(VALUES[:k + 1])
        assert s.top() == v


def test_stack_tracks_minimum_while_popping():
    s = MonotoneStack()
    for v in VALUES:
        s.push(v)
    for k in reversed(range(len(VALUES))):
        assert s.extreme() == min(VALUES[:k + 1])
        assert s.pop() == VALUES[k]
    assert len(s) == 0


def test_stack_with_greater_tracks_maximum():
    s = MonotoneStack(operator.gt)
    for v in VALUES:
        s.push(v)
    assert s.extreme() == max(VALUES)


def test_stack_empty_errors():
    s = MonotoneStack()
    with pytest.raises(IndexError):
        s.pop()
    with pytest.raises(IndexError):
        s.top()
    with pytest.raises(IndexError):
        s.extreme()


def test_queue_sliding_window_minimum():
    q = MonotoneQueue()
    window = 3
    for i, v in enumerate(VALUES):
        q.push(v)
        if len(q) > window:
            assert q.pop() == VALUES[i - window]
        lo = max(0, i - window + 1)
        assert q.extreme() == min(VALUES[lo:i + 1])
        assert q.front() == VALUES[lo]


def test_queue_fifo_and_max():
    q = MonotoneQueue(operator.gt)
    for v in VALUES:
        q.push(v)
    assert len(q) == len(VALUES)
    out = []
    for k in range(len(VALUES)):
        assert q.extreme() == max(VALUES[k:])
        out.append(q.pop())
    assert out == VALUES
    assert len(q) == 0


def test_queue_empty_errors():
    q = MonotoneQueue()
    with pytest.raises(IndexError):
        q.pop()
    with pytest.raises(IndexError):
        q.front()
    with pytest.raises(IndexError):
        q.extreme()