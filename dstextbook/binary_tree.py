"""Linked binary trees: traversals, folder sizes and right-threaded in-order walks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding ``data``."""

    data: Any
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)


def _preorder(root: TreeNode | None) -> Iterator[Any]:
    if root is not None:
        yield root.data
        yield from _preorder(root.left)
        yield from _preorder(root.right)


def _inorder(root: TreeNode | None) -> Iterator[Any]:
    if root is not None:
        yield from _inorder(root.left)
        yield root.data
        yield from _inorder(root.right)


def _postorder(root: TreeNode | None) -> Iterator[Any]:
    if root is not None:
        yield from _postorder(root.left)
        yield from _postorder(root.right)
        yield root.data


def preorder(root: TreeNode | None) -> list[Any]:
    """Return the node values in preorder (node, left, right)."""
    return list(_preorder(root))


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the node values in inorder (left, node, right)."""
    return list(_inorder(root))


def postorder(root: TreeNode | None) -> list[Any]:
    """Return the node values in postorder (left, right, node)."""
    return list(_postorder(root))


def folder_size(root: TreeNode | None) -> int:
    """Return the total of the sizes stored in the subtree at ``root``."""
    return sum(_postorder(root))


@dataclass(eq=False)
class ThreadedNode:
    """A node whose right link is a thread to its inorder successor when flagged."""

    data: Any
    left: ThreadedNode | None = field(default=None, repr=False)
    right: ThreadedNode | None = field(default=None, repr=False)
    is_thread_right: bool = False


def find_thread_successor(node: ThreadedNode) -> ThreadedNode | None:
    """Return the inorder successor of ``node``, or None for the last node."""
    successor = node.right
    if successor is None or node.is_thread_right:
        return successor
    while successor.left is not None:
        successor = successor.left
    return successor


def thread_inorder(root: ThreadedNode | None) -> list[Any]:
    """Walk a right-threaded tree in inorder without recursion or a stack."""
    if root is None:
        return []
    node: ThreadedNode | None = root
    while node.left is not None:
        node = node.left
    values = []
    while node is not None:
        values.append(node.data)
        node = find_thread_successor(node)
    return values