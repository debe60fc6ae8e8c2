import pytest

from dsakit.stacks import Stack, StackOverflowError, StackUnderflowError


def test_driver_sequence():
    stack = Stack()
    assert stack.is_empty() is True
    with pytest.raises(StackUnderflowError):
        stack.pop()
    stack.push(100)
    stack.push(200)
    assert stack.pop() == 200
    stack.push(300)
    assert stack.pop() == 300
    for value in (400, 500, 600, 700):
        stack.push(value)
    assert stack.is_full() is True
    assert len(stack) == stack.capacity


def test_overflow_raises_and_keeps_contents():
    stack = Stack(capacity=2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(StackOverflowError):
        stack.push(3)
    assert stack.pop() == 2
    assert stack.pop() == 1


def test_peek_does_not_remove():
    stack = Stack()
    stack.push("a")
    assert stack.peek() == "a"
    assert len(stack) == 1
    assert stack.pop() == "a"
    with pytest.raises(StackUnderflowError):
        stack.peek()


def test_lifo_order():
    stack = Stack(capacity=10)
    values = list(range(10))
    for v in values:
        stack.push(v)
    assert [stack.pop() for _ in values] == values[::-1]
    assert stack.is_empty()


def test_default_capacity_is_five():
    stack = Stack()
    assert stack.capacity == 5


def test_invalid_capacity():
    with pytest.raises(ValueError):
        Stack(capacity=0)


def test_underflow_is_index_error():
    with pytest.raises(IndexError):
        Stack().pop()