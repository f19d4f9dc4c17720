import pytest

from dstextbook.stacks import (
    STACK_SIZE,
    ArrayStack,
    LinkedStack,
    StackEmptyError,
    StackFullError,
)


@pytest.mark.parametrize("factory", [ArrayStack, LinkedStack])
def test_pop_returns_items_in_reverse(factory):
    stack = factory()
    for item in (1, 2, 3):
        stack.push(item)
    assert stack.peek() == 3
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert stack.is_empty()


@pytest.mark.parametrize("factory", [ArrayStack, LinkedStack])
def test_peek_does_not_remove(factory):
    stack = factory()
    stack.push(7)
    assert stack.peek() == 7
    assert len(stack) == 1


@pytest.mark.parametrize("factory", [ArrayStack, LinkedStack])
def test_empty_pop_and_peek_raise(factory):
    stack = factory()
    with pytest.raises(StackEmptyError):
        stack.pop()
    with pytest.raises(StackEmptyError):
        stack.peek()


def test_array_stack_full():
    stack = ArrayStack(capacity=2)
    stack.push(1)
    stack.push(2)
    assert stack.is_full()
    with pytest.raises(StackFullError):
        stack.push(3)
    assert list(stack) == [1, 2]


def test_array_stack_default_capacity():
    stack = ArrayStack()
    for item in range(STACK_SIZE):
        stack.push(item)
    with pytest.raises(StackFullError):
        stack.push(STACK_SIZE)
    assert len(stack) == STACK_SIZE


def test_array_stack_renders_bottom_to_top():
    stack = ArrayStack()
    for item in (1, 2, 3):
        stack.push(item)
    assert str(stack) == "STACK [ 1 2 3 ]"


def test_linked_stack_renders_top_to_bottom():
    stack = LinkedStack()
    for item in (1, 2, 3):
        stack.push(item)
    assert list(stack) == [3, 2, 1]
    assert str(stack) == "STACK [ 3 2 1 ]"


@pytest.mark.parametrize("factory", [ArrayStack, LinkedStack])
def test_empty_render(factory):
    assert str(factory()) == "STACK [ ]"


def test_invalid_capacity():
    with pytest.raises(ValueError):
        ArrayStack(capacity=0)