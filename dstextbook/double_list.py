"""Doubly linked list of short strings."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class DoubleNode:
    """A node with links to its predecessor and successor."""

    data: str
    llink: DoubleNode | None = field(default=None, repr=False)
    rlink: DoubleNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list reachable from ``head``."""

    def __init__(self, items: Iterable[str] = ()) -> None:
        self.head: DoubleNode | None = None
        last = None
        for item in items:
            last = self.insert(last, item)

    def _nodes(self) -> Iterator[DoubleNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.rlink

    def insert(self, pre: DoubleNode | None, x: str) -> DoubleNode:
        """Insert ``x`` after ``pre``; into an empty list ``pre`` is ignored."""
        node = DoubleNode(x)
        if self.head is None:
            self.head = node
        elif pre is None:
            raise ValueError("a predecessor node is required in a non-empty list")
        else:
            node.rlink = pre.rlink
            pre.rlink = node
            node.llink = pre
            if node.rlink is not None:
                node.rlink.llink = node
        return node

    def delete(self, old: DoubleNode | None) -> None:
        """Unlink ``old``; nothing happens for None or an empty list."""
        if self.head is None or old is None:
            return
        if not any(node is old for node in self._nodes()):
            raise ValueError("node is not in this list")
        if old.llink is None:
            self.head = old.rlink
        else:
            old.llink.rlink = old.rlink
        if old.rlink is not None:
            old.rlink.llink = old.llink
        old.llink = old.rlink = None

    def search(self, x: str) -> DoubleNode | None:
        """Return the first node holding ``x``, or None."""
        return next((node for node in self._nodes() if node.data == x), None)

    def __iter__(self) -> Iterator[str]:
        return (node.data for node in self._nodes())

    def __str__(self) -> str:
        return f"DL = ({', '.join(self)})"