import pytest

from dsakit.arraystack import DEFAULT_CAPACITY, ArrayStack


def test_lifo_order():
    stack = ArrayStack()
    for value in [1, 2, 3]:
        stack.push(value)
    assert stack.peek() == 3
    assert [stack.pop() for _ in range(3)] == [3, 2, 1]
    assert stack.is_empty()


def test_fills_then_doubles():
    stack = ArrayStack()
    for value in range(DEFAULT_CAPACITY):
        stack.push(value)
    assert stack.is_full()
    assert stack.capacity == DEFAULT_CAPACITY
    stack.push(99)
    assert not stack.is_full()
    assert stack.capacity == 2 * DEFAULT_CAPACITY
    assert len(stack) == DEFAULT_CAPACITY + 1


def test_shrinks_when_mostly_empty():
    stack = ArrayStack(8)
    stack.push("a")
    stack.push("b")
    assert stack.pop() == "b"
    assert stack.capacity == 4


def test_length_never_exceeds_capacity():
    stack = ArrayStack(3)
    for value in range(50):
        stack.push(value)
        assert len(stack) <= stack.capacity
    while not stack.is_empty():
        stack.pop()
        assert len(stack) <= stack.capacity
    assert stack.capacity >= 1


def test_empty_errors():
    stack = ArrayStack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


def test_bad_capacity():
    with pytest.raises(ValueError):
        ArrayStack(0)