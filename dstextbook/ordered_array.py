"""Insertion and deletion in a bounded, ordered array list."""

from __future__ import annotations

MAX_SIZE = 10


class CapacityError(Exception):
    """Raised when an insertion would exceed the list capacity."""


def insert_element(values: list[int], x: int) -> int:
    """Insert ``x`` in place and return how many elements were shifted.

    ``x`` goes after the first element ``values[i]`` with
    ``values[i] <= x <= values[i + 1]``; with no such pair it is appended.
    """
    if len(values) >= MAX_SIZE:
        raise CapacityError(f"list already holds {MAX_SIZE} elements")
    position = next(
        (i + 1 for i, (low, high) in enumerate(zip(values, values[1:])) if low <= x <= high),
        len(values),
    )
    moves = len(values) - position
    values.insert(position, x)
    return moves


def delete_element(values: list[int], x: int) -> int:
    """Remove the first ``x`` in place and return how many elements were shifted."""
    try:
        position = values.index(x)
    except ValueError:
        raise ValueError(f"{x} is not in the list") from None
    del values[position]
    return len(values) - position