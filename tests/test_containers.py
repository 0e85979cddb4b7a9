from hypothesis import given
from hypothesis import strategies as st

from ftkit.containers import Queue, Stack


def test_new_queue_is_empty():
    q = Queue()
    assert q.is_empty() is True
    assert len(q) == 0


def test_empty_queue_gives_none():
    q = Queue()
    assert q.dequeue() is None
    assert q.peek() is None


def test_queue_peek_does_not_remove():
    q = Queue()
    q.enqueue("first")
    q.enqueue("second")
    assert q.peek() == "first"
    assert len(q) == 2
    assert q.dequeue() == "first"
    assert q.peek() == "second"


def test_queue_empties_after_last_dequeue():
    q = Queue()
    q.enqueue(1)
    assert q.dequeue() == 1
    assert q.is_empty() is True
    q.enqueue(2)
    assert q.peek() == 2


@given(st.lists(st.integers()))
def test_queue_is_fifo(items):
    q = Queue()
    for item in items:
        q.enqueue(item)
    assert len(q) == len(items)
    out = [q.dequeue() for _ in items]
    assert out == items
    assert q.is_empty() is True


def test_new_stack_is_empty():
    s = Stack()
    assert s.is_empty() is True
    assert len(s) == 0


def test_empty_stack_gives_none():
    s = Stack()
    assert s.pop() is None
    assert s.peek() is None


def test_stack_peek_does_not_remove():
    s = Stack()
    s.push("bottom")
    s.push("top")
    assert s.peek() == "top"
    assert len(s) == 2
    assert s.pop() == "top"
    assert s.peek() == "bottom"


@given(st.lists(st.integers()))
def test_stack_is_lifo(items):
    s = Stack()
    for item in items:
        s.push(item)
    assert len(s) == len(items)
    out = [s.pop() for _ in items]
    assert out == list(reversed(items))
    assert s.is_empty() is True