"""Singly linked list of short strings."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class ListNode:
    """A node holding one value and a link to the next node."""

    data: str
    link: ListNode | None = field(default=None, repr=False)


class LinkedList:
    """A singly linked list reachable from ``head``."""

    def __init__(self, items: Iterable[str] = ()) -> None:
        self.head: ListNode | None = None
        for item in items:
            self.insert_last(item)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.link

    def insert_first(self, x: str) -> ListNode:
        """Insert ``x`` as the first node."""
        self.head = ListNode(x, self.head)
        return self.head

    def insert_middle(self, pre: ListNode | None, x: str) -> ListNode:
        """Insert ``x`` after ``pre``; first when ``pre`` is None or the list is empty."""
        if self.head is None:
            node = ListNode(x)
            self.head = node
        elif pre is None:
            node = ListNode(x, self.head)
            self.head = node
        else:
            node = ListNode(x, pre.link)
            pre.link = node
        return node

    def insert_last(self, x: str) -> ListNode:
        """Insert ``x`` as the last node."""
        node = ListNode(x)
        if self.head is None:
            self.head = node
            return node
        last = self.head
        while last.link is not None:
            last = last.link
        last.link = node
        return node

    def delete(self, node: ListNode | None) -> None:
        """Unlink ``node``. A one-node list is emptied whatever ``node`` is."""
        if self.head is None:
            return
        if self.head.link is None:
            self.head = None
            return
        if node is None:
            return
        if node is self.head:
            self.head = node.link
            return
        for pre in self._nodes():
            if pre.link is node:
                pre.link = node.link
                return
        raise ValueError("node is not in this list")

    def search(self, x: str) -> ListNode | None:
        """Return the first node holding ``x``, or None."""
        return next((node for node in self._nodes() if node.data == x), None)

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous = None
        node = self.head
        while node is not None:
            node.link, previous, node = previous, node, node.link
        self.head = previous

    def clear(self) -> None:
        """Drop every node."""
        self.head = None

    def __iter__(self) -> Iterator[str]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return f"L = ({', '.join(self)})"