"""Recursion and array exercises: string length, 3-D arrays, factorial, Fibonacci, Hanoi."""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterable, Sequence

STUDENT_FIELDS = 3


def string_length(text: str) -> int:
    """Return the number of characters before the first NUL (or the whole text)."""
    return len(text.split("\0", 1)[0])


def enumerate_3d(
    values: Iterable[int],
    shape: tuple[int, int, int] = (3, 3, 4),
    blocks: int = 2,
) -> list[tuple[int, int, int, int]]:
    """List ``(i, j, k, value)`` for the first ``blocks`` planes of a zero-padded 3-D array.

    ``values`` fill the array in row-major order; missing cells are 0.
    """
    depth, rows, cols = shape
    size = depth * rows * cols
    flat = list(values)
    if len(flat) > size:
        raise ValueError(f"{len(flat)} values do not fit an array of shape {shape}")
    if not 0 <= blocks <= depth:
        raise ValueError(f"blocks must be between 0 and {depth}")
    flat.extend([0] * (size - len(flat)))
    cells = itertools.product(range(blocks), range(rows), range(cols))
    return [(i, j, k, value) for (i, j, k), value in zip(cells, flat)]


def format_students(records: Iterable[Sequence[str]]) -> str:
    """Render (name, department, id) records as numbered, tab-indented blocks."""
    blocks = []
    for number, fields in enumerate(records, start=1):
        if len(fields) != STUDENT_FIELDS:
            raise ValueError(f"student record needs {STUDENT_FIELDS} fields, got {len(fields)}")
        lines = [f"학생{number}", *(f"\t{field}" for field in fields)]
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def _check_positive(n: int) -> None:
    if n < 1:
        raise ValueError("n must be a positive integer")


def factorial_trace(n: int) -> list[str]:
    """Return the call and return messages of a recursive factorial of ``n``, in order."""
    _check_positive(n)
    trace = [f"fact({k})함수 호출!" for k in range(n, 0, -1)]
    value = 1
    for k in range(1, n + 1):
        value *= k
        trace.append(f"fact({k})값 {value} 반환!")
    return trace


def factorial(n: int) -> int:
    """Return ``n!`` for a positive ``n``."""
    _check_positive(n)
    return math.prod(range(1, n + 1))


def fibo(n: int) -> int:
    """Term ``n`` of f(n) = f(n-1) + f(n-2) seeded with f(0) = 0, f(-1) = 2, f(n < -1) = 1."""
    if n == 0:
        return 0
    if n < -1:
        return 1
    if n == -1:
        return fibo(-2) + fibo(-3)
    before, current = fibo(-1), 0
    for _ in range(n):
        before, current = current, current + before
    return current


def fibonacci_series(n: int) -> list[int]:
    """Return the first ``n`` terms, starting at term 0."""
    return [fibo(i) for i in range(n)]


def hanoi_moves(
    n: int, source: str = "A", via: str = "B", target: str = "C"
) -> list[tuple[int, str, str]]:
    """Return the (disk, from, to) moves of the recursive disk procedure.

    Both recursive steps keep the same pegs, so every move goes from
    ``source`` to ``target``.
    """
    _check_positive(n)
    moves: list[tuple[int, str, str]] = []

    def solve(disk: int) -> None:
        if disk == 1:
            moves.append((1, source, target))
            return
        solve(disk - 1)
        moves.append((disk, source, target))
        solve(disk - 1)

    solve(n)
    return moves