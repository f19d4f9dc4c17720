"""AVL tree: rotations, balance factors and balanced insertion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from dstextbook.bst import BSTNode, DuplicateKeyError, search_with_count


def ll_rotate(parent: BSTNode) -> BSTNode:
    """Rotate right around ``parent``; return the new subtree root."""
    child = parent.left
    parent.left = child.right
    child.right = parent
    return child


def rr_rotate(parent: BSTNode) -> BSTNode:
    """Rotate left around ``parent``; return the new subtree root."""
    child = parent.right
    parent.right = child.left
    child.left = parent
    return child


def lr_rotate(parent: BSTNode) -> BSTNode:
    """Left-rotate the left child, then right-rotate ``parent``."""
    parent.left = rr_rotate(parent.left)
    return ll_rotate(parent)


def rl_rotate(parent: BSTNode) -> BSTNode:
    """Right-rotate the right child, then left-rotate ``parent``."""
    parent.right = ll_rotate(parent.right)
    return rr_rotate(parent)


def get_height(node: BSTNode | None) -> int:
    """Return the number of levels in the subtree at ``node``."""
    if node is None:
        return 0
    return max(get_height(node.left), get_height(node.right)) + 1


def get_bf(node: BSTNode | None) -> int:
    """Return the left height minus the right height."""
    if node is None:
        return 0
    return get_height(node.left) - get_height(node.right)


def rebalance(node: BSTNode) -> BSTNode:
    """Rotate ``node`` if it is out of balance; return the subtree root."""
    bf = get_bf(node)
    if bf > 1:
        return ll_rotate(node) if get_bf(node.left) > 0 else lr_rotate(node)
    if bf < -1:
        return rr_rotate(node) if get_bf(node.right) < 0 else rl_rotate(node)
    return node


def _insert(node: BSTNode | None, key: Any) -> BSTNode:
    if node is None:
        return BSTNode(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        raise DuplicateKeyError(f"key {key!r} is already in the tree")
    return rebalance(node)


def _inorder(node: BSTNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.key
        yield from _inorder(node.right)


class AVLTree:
    """A height-balanced binary search tree of unique keys."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.root: BSTNode | None = None
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Insert ``key`` and rebalance along the insertion path."""
        self.root = _insert(self.root, key)

    def search_with_count(self, key: Any) -> tuple[BSTNode | None, int]:
        """Return the node holding ``key`` (or None) and the comparison count."""
        return search_with_count(self.root, key)

    def height(self) -> int:
        return get_height(self.root)

    def inorder(self) -> list[Any]:
        """Return the keys in ascending order."""
        return list(_inorder(self.root))

    def __iter__(self) -> Iterator[Any]:
        return _inorder(self.root)

    def __contains__(self, key: object) -> bool:
        return search_with_count(self.root, key)[0] is not None