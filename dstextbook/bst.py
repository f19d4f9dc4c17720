"""Binary search tree with search, insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


class DuplicateKeyError(Exception):
    """Raised when inserting a key that the tree already holds."""


@dataclass(eq=False)
class BSTNode:
    """A search tree node holding ``key``."""

    key: Any
    left: BSTNode | None = field(default=None, repr=False)
    right: BSTNode | None = field(default=None, repr=False)


def search_with_count(root: BSTNode | None, key: Any) -> tuple[BSTNode | None, int]:
    """Search from ``root`` and return the node found (or None) and the comparison count.

    Each visited node counts once; a failed search counts one more step.
    """
    count = 0
    node = root
    while node is not None:
        count += 1
        if key < node.key:
            node = node.left
        elif key == node.key:
            return node, count
        else:
            node = node.right
    return None, count + 1


def _inorder(node: BSTNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.key
        yield from _inorder(node.right)


class BinarySearchTree:
    """An unbalanced binary search tree of unique keys."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.root: BSTNode | None = None
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> BSTNode:
        """Insert ``key`` as a new leaf and return its node."""
        node = BSTNode(key)
        if self.root is None:
            self.root = node
            return node
        parent = self.root
        while True:
            if key < parent.key:
                if parent.left is None:
                    parent.left = node
                    return node
                parent = parent.left
            elif key > parent.key:
                if parent.right is None:
                    parent.right = node
                    return node
                parent = parent.right
            else:
                raise DuplicateKeyError(f"key {key!r} is already in the tree")

    def search(self, key: Any) -> BSTNode | None:
        """Return the node holding ``key``, or None."""
        return search_with_count(self.root, key)[0]

    def search_with_count(self, key: Any) -> tuple[BSTNode | None, int]:
        """Return the node holding ``key`` (or None) and the comparison count."""
        return search_with_count(self.root, key)

    def delete(self, key: Any) -> None:
        """Remove ``key``.

        A node with two children takes the largest key of its left subtree.
        """
        parent: BSTNode | None = None
        node = self.root
        while node is not None and node.key != key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is None:
            raise KeyError(key)

        if node.left is not None and node.right is not None:
            succ_parent = node
            succ = node.left
            while succ.right is not None:
                succ_parent = succ
                succ = succ.right
            if succ_parent.left is succ:
                succ_parent.left = succ.left
            else:
                succ_parent.right = succ.left
            node.key = succ.key
            return

        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def inorder(self) -> list[Any]:
        """Return the keys in ascending order."""
        return list(_inorder(self.root))

    def __iter__(self) -> Iterator[Any]:
        return _inorder(self.root)

    def __contains__(self, key: object) -> bool:
        return self.search(key) is not None