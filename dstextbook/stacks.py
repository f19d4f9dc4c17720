"""Array-backed and linked stacks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

STACK_SIZE = 100


class StackEmptyError(Exception):
    """Raised when popping or peeking an empty stack."""


class StackFullError(Exception):
    """Raised when pushing onto a full stack."""


class ArrayStack:
    """A stack stored in a bounded array; iterates from bottom to top."""

    def __init__(self, capacity: int = STACK_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def push(self, item: Any) -> None:
        """Put ``item`` on top."""
        if self.is_full():
            raise StackFullError("stack is full")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __str__(self) -> str:
        return _render(self)


@dataclass(eq=False)
class _StackNode:
    data: Any
    link: _StackNode | None = field(default=None, repr=False)


class LinkedStack:
    """An unbounded stack of linked nodes; iterates from top to bottom."""

    def __init__(self) -> None:
        self._top: _StackNode | None = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, item: Any) -> None:
        """Put ``item`` on top."""
        self._top = _StackNode(item, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        node = self._top
        self._top = node.link
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        return self._top.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._top
        while node is not None:
            yield node.data
            node = node.link

    def __str__(self) -> str:
        return _render(self)


def _render(stack: ArrayStack | LinkedStack) -> str:
    return "STACK [ " + "".join(f"{item} " for item in stack) + "]"