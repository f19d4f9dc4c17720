"""Shell, merge, radix and tree sorts, with the intermediate states they pass through."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from dstextbook.bst import BinarySearchTree, DuplicateKeyError
from dstextbook.queues import LinkedQueue

RADIX = 10
DIGIT = 2


def interval_sort(values: list[int], begin: int, end: int, interval: int) -> None:
    """Insertion-sort in place the elements at ``begin, begin + interval, ...`` up to ``end``."""
    if interval < 1:
        raise ValueError("interval must be positive")
    if begin < 0 or end >= len(values):
        raise IndexError("begin and end must lie inside the list")
    for i in range(begin + interval, end + 1, interval):
        item = values[i]
        j = i - interval
        while j >= begin and item < values[j]:
            values[j + interval] = values[j]
            j -= interval
        values[j + interval] = item


def shell_sort_steps(values: Iterable[int]) -> list[tuple[int, tuple[int, ...]]]:
    """Shell-sort a copy of ``values`` and return ``(interval, state)`` after each pass.

    Intervals start at half the length and halve until 1.
    """
    items = list(values)
    steps: list[tuple[int, tuple[int, ...]]] = []
    interval = len(items) // 2
    while interval >= 1:
        for start in range(interval):
            interval_sort(items, start, len(items) - 1, interval)
        steps.append((interval, tuple(items)))
        interval //= 2
    return steps


def shell_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by shell sort."""
    items = list(values)
    steps = shell_sort_steps(items)
    return list(steps[-1][1]) if steps else items


def _merge(items: list[int], m: int, middle: int, n: int) -> None:
    left = items[m : middle + 1]
    right = items[middle + 1 : n + 1]
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    items[m : n + 1] = merged


def merge_sort_steps(values: Iterable[int]) -> list[tuple[int, ...]]:
    """Merge-sort a copy of ``values`` and return the whole list after each merge."""
    items = list(values)
    steps: list[tuple[int, ...]] = []

    def sort(m: int, n: int) -> None:
        if m < n:
            middle = (m + n) // 2
            sort(m, middle)
            sort(middle + 1, n)
            _merge(items, m, middle, n)
            steps.append(tuple(items))

    sort(0, len(items) - 1)
    return steps


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by merge sort."""
    items = list(values)
    steps = merge_sort_steps(items)
    return list(steps[-1]) if steps else items


def _digits_needed(items: Sequence[int], radix: int) -> int:
    largest = max(items, default=0)
    digits = 1
    while largest >= radix:
        largest //= radix
        digits += 1
    return digits


def radix_sort_steps(
    values: Iterable[int], radix: int = RADIX, digits: int | None = DIGIT
) -> list[tuple[int, ...]]:
    """LSD radix-sort a copy of ``values`` and return the list after each digit pass.

    Only the lowest ``digits`` digits are used; with ``digits=None`` as many
    passes are made as the largest value needs.
    """
    items = list(values)
    if radix < 2:
        raise ValueError("radix must be at least 2")
    if any(item < 0 for item in items):
        raise ValueError("radix sort takes non-negative integers only")
    if digits is None:
        digits = _digits_needed(items, radix)
    if digits < 1:
        raise ValueError("digits must be positive")
    buckets = [LinkedQueue() for _ in range(radix)]
    steps: list[tuple[int, ...]] = []
    factor = 1
    for _ in range(digits):
        for item in items:
            buckets[(item // factor) % radix].enqueue(item)
        items = [bucket.dequeue() for bucket in buckets for _ in range(len(bucket))]
        steps.append(tuple(items))
        factor *= radix
    return steps


def radix_sort(
    values: Iterable[int], radix: int = RADIX, digits: int | None = DIGIT
) -> list[int]:
    """Return the values after all radix-sort passes."""
    return list(radix_sort_steps(values, radix, digits)[-1])


def tree_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order via a binary search tree.

    Repeated values are kept once, as the tree holds unique keys.
    """
    tree = BinarySearchTree()
    for value in values:
        try:
            tree.insert(value)
        except DuplicateKeyError:
            continue
    return tree.inorder()