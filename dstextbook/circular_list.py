"""Circular singly linked list of short strings."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class CircularNode:
    """A node of a circular list; the last node links back to the head."""

    data: str
    link: CircularNode | None = field(default=None, repr=False)


class CircularLinkedList:
    """A circular singly linked list reachable from ``head``."""

    def __init__(self, items: Iterable[str] = ()) -> None:
        self.head: CircularNode | None = None
        for item in items:
            self.insert_middle(self._last(), item)

    def _nodes(self) -> Iterator[CircularNode]:
        if self.head is None:
            return
        node = self.head
        while True:
            yield node
            node = node.link
            if node is self.head:
                break

    def _last(self) -> CircularNode | None:
        last = None
        for last in self._nodes():
            pass
        return last

    def insert_first(self, x: str) -> CircularNode:
        """Insert ``x`` as the new head."""
        node = CircularNode(x)
        last = self._last()
        if last is None:
            node.link = node
        else:
            node.link = self.head
            last.link = node
        self.head = node
        return node

    def insert_middle(self, pre: CircularNode | None, x: str) -> CircularNode:
        """Insert ``x`` after ``pre``; into an empty list ``pre`` is ignored."""
        node = CircularNode(x)
        if self.head is None:
            node.link = node
            self.head = node
        elif pre is None:
            raise ValueError("a predecessor node is required in a non-empty list")
        else:
            node.link = pre.link
            pre.link = node
        return node

    def delete(self, old: CircularNode | None) -> None:
        """Unlink ``old``. A one-node list is emptied whatever ``old`` is."""
        if self.head is None:
            return
        if self.head.link is self.head:
            self.head = None
            return
        if old is None:
            return
        pre = next((node for node in self._nodes() if node.link is old), None)
        if pre is None:
            raise ValueError("node is not in this list")
        pre.link = old.link
        if old is self.head:
            self.head = old.link

    def search(self, x: str) -> CircularNode | None:
        """Return the first node holding ``x``, or None."""
        return next((node for node in self._nodes() if node.data == x), None)

    def __iter__(self) -> Iterator[str]:
        return (node.data for node in self._nodes())

    def __str__(self) -> str:
        return f"CL = ({', '.join(self)})"