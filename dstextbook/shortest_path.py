"""Dijkstra and Floyd shortest paths on a weighted adjacency matrix."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

INF = 10000

WEIGHT: tuple[tuple[int, ...], ...] = (
    (0, 10, 5, INF, INF),
    (INF, 0, 2, 1, INF),
    (INF, 3, 0, 9, 2),
    (INF, INF, INF, 0, 4),
    (7, INF, INF, 6, 0),
)


@dataclass(frozen=True)
class DijkstraStep:
    """The settled vertices and current distances after one step."""

    step: int
    visited: tuple[int, ...]
    distance: tuple[int, ...]


def _check_square(weight: Sequence[Sequence[int]]) -> int:
    n = len(weight)
    if n == 0 or any(len(row) != n for row in weight):
        raise ValueError("weight must be a non-empty square matrix")
    return n


def dijkstra_steps(
    weight: Sequence[Sequence[int]] = WEIGHT, start: int = 0
) -> list[DijkstraStep]:
    """Run Dijkstra's algorithm from ``start`` and record the state after each step.

    ``INF`` marks a missing edge. The walk stops early when no unsettled
    vertex is reachable.
    """
    n = _check_square(weight)
    if not 0 <= start < n:
        raise ValueError(f"start vertex {start} is out of range")
    distance = list(weight[start])
    settled = [False] * n
    settled[start] = True
    distance[start] = 0

    def record(step: int) -> DijkstraStep:
        visited = tuple(v for v, done in enumerate(settled) if done)
        return DijkstraStep(step, visited, tuple(distance))

    steps = [record(0)]
    for step in range(1, n):
        candidates = [(distance[v], v) for v in range(n) if not settled[v] and distance[v] < INF]
        if not candidates:
            break
        _, u = min(candidates)
        settled[u] = True
        for w in range(n):
            if not settled[w] and distance[u] + weight[u][w] < distance[w]:
                distance[w] = distance[u] + weight[u][w]
        steps.append(record(step))
    return steps


def dijkstra(weight: Sequence[Sequence[int]] = WEIGHT, start: int = 0) -> list[int]:
    """Return the shortest distance from ``start`` to every vertex."""
    return list(dijkstra_steps(weight, start)[-1].distance)


def floyd_steps(weight: Sequence[Sequence[int]] = WEIGHT) -> list[list[list[int]]]:
    """Run Floyd's algorithm and return the matrix before and after each intermediate vertex."""
    n = _check_square(weight)
    a = [list(row) for row in weight]
    steps = [[row[:] for row in a]]
    for k in range(n):
        for v in range(n):
            for w in range(n):
                if a[v][k] + a[k][w] < a[v][w]:
                    a[v][w] = a[v][k] + a[k][w]
        steps.append([row[:] for row in a])
    return steps


def floyd(weight: Sequence[Sequence[int]] = WEIGHT) -> list[list[int]]:
    """Return the matrix of shortest distances between every pair of vertices."""
    return floyd_steps(weight)[-1]


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render a matrix with four-column cells, ``*`` standing for ``INF``."""
    return "\n".join(
        "".join("   *" if cell == INF else f"{cell:4d}" for cell in row) for row in matrix
    )