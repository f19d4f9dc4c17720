"""Array, circular, linked and double-ended queues."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

Q_SIZE = 4
CQ_SIZE = 4


class QueueEmptyError(Exception):
    """Raised when removing from or peeking into an empty queue."""


class QueueFullError(Exception):
    """Raised when adding to a full queue."""


def _render(title: str, items: Iterator[Any]) -> str:
    return f"{title} : [" + "".join(f"{item:>3}" for item in items) + " ]"


class ArrayQueue:
    """A linear queue in a bounded array.

    Slots freed at the front are never reused, so the queue counts as full
    once ``capacity`` items have been enqueued in total.
    """

    def __init__(self, capacity: int = Q_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def is_empty(self) -> bool:
        return self._front == len(self._slots)

    def is_full(self) -> bool:
        return len(self._slots) == self.capacity

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        item = self._slots[self._front]
        self._front += 1
        return item

    def peek(self) -> Any:
        """Return the front item without removing it."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._slots[self._front]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front:])

    def __str__(self) -> str:
        return _render("Queue", iter(self))


class CircularQueue:
    """A circular queue in a bounded array; one slot is always left unused."""

    def __init__(self, capacity: int = CQ_SIZE) -> None:
        if capacity < 2:
            raise ValueError("capacity must be at least 2")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._rear = 0

    def is_empty(self) -> bool:
        return self._front == self._rear

    def is_full(self) -> bool:
        return (self._rear + 1) % self.capacity == self._front

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the rear."""
        if self.is_full():
            raise QueueFullError("circular queue is full")
        self._rear = (self._rear + 1) % self.capacity
        self._slots[self._rear] = item

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if self.is_empty():
            raise QueueEmptyError("circular queue is empty")
        self._front = (self._front + 1) % self.capacity
        item = self._slots[self._front]
        self._slots[self._front] = None
        return item

    def peek(self) -> Any:
        """Return the front item without removing it."""
        if self.is_empty():
            raise QueueEmptyError("circular queue is empty")
        return self._slots[(self._front + 1) % self.capacity]

    def __iter__(self) -> Iterator[Any]:
        index = (self._front + 1) % self.capacity
        stop = (self._rear + 1) % self.capacity
        while index != stop:
            yield self._slots[index]
            index = (index + 1) % self.capacity

    def __str__(self) -> str:
        return _render("Circular Queue", iter(self))


@dataclass(eq=False)
class _QNode:
    data: Any
    link: _QNode | None = field(default=None, repr=False)


class LinkedQueue:
    """An unbounded queue of linked nodes."""

    def __init__(self) -> None:
        self._front: _QNode | None = None
        self._rear: _QNode | None = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._front is None

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the rear."""
        node = _QNode(item)
        if self._rear is None:
            self._front = node
        else:
            self._rear.link = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        node = self._front
        if node is None:
            raise QueueEmptyError("linked queue is empty")
        self._front = node.link
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        """Return the front item without removing it."""
        if self._front is None:
            raise QueueEmptyError("linked queue is empty")
        return self._front.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.data
            node = node.link

    def __str__(self) -> str:
        return _render("Linked Queue", iter(self))


@dataclass(eq=False)
class _DQNode:
    data: Any
    llink: _DQNode | None = field(default=None, repr=False)
    rlink: _DQNode | None = field(default=None, repr=False)


class Deque:
    """A double-ended queue of doubly linked nodes."""

    def __init__(self) -> None:
        self._front: _DQNode | None = None
        self._rear: _DQNode | None = None

    def is_empty(self) -> bool:
        return self._front is None

    def insert_front(self, item: Any) -> None:
        """Add ``item`` before the front."""
        node = _DQNode(item)
        if self._front is None:
            self._front = self._rear = node
        else:
            node.rlink = self._front
            self._front.llink = node
            self._front = node

    def insert_rear(self, item: Any) -> None:
        """Add ``item`` after the rear."""
        node = _DQNode(item)
        if self._rear is None:
            self._front = self._rear = node
        else:
            node.llink = self._rear
            self._rear.rlink = node
            self._rear = node

    def delete_front(self) -> Any:
        """Remove and return the front item."""
        node = self._front
        if node is None:
            raise QueueEmptyError("deque is empty")
        self._front = node.rlink
        if self._front is None:
            self._rear = None
        else:
            self._front.llink = None
        return node.data

    def delete_rear(self) -> Any:
        """Remove and return the rear item."""
        node = self._rear
        if node is None:
            raise QueueEmptyError("deque is empty")
        self._rear = node.llink
        if self._rear is None:
            self._front = None
        else:
            self._rear.rlink = None
        return node.data

    def peek_front(self) -> Any:
        """Return the front item without removing it."""
        if self._front is None:
            raise QueueEmptyError("deque is empty")
        return self._front.data

    def peek_rear(self) -> Any:
        """Return the rear item without removing it."""
        if self._rear is None:
            raise QueueEmptyError("deque is empty")
        return self._rear.data

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.data
            node = node.rlink

    def __str__(self) -> str:
        return _render("DeQue", iter(self))