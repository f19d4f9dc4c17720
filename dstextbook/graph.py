"""Graphs as adjacency matrices and adjacency lists, with depth- and breadth-first search."""

from __future__ import annotations

from collections.abc import Iterator

from dstextbook.queues import LinkedQueue
from dstextbook.stacks import LinkedStack

MAX_VERTEX = 30


class GraphError(Exception):
    """Raised for too many vertices or for edges between unknown vertices."""


def vertex_label(v: int) -> str:
    """Return the letter used to show vertex ``v`` (0 is ``A``)."""
    return chr(ord("A") + v)


class _VertexCount:
    """Vertex bookkeeping shared by both graph representations."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self.n = 0

    def _add_vertex(self) -> int:
        if self.n + 1 > self.capacity:
            raise GraphError(f"a graph holds at most {self.capacity} vertices")
        self.n += 1
        return self.n - 1

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self.n:
            raise GraphError(f"vertex {v} is not in the graph")


class AdjacencyMatrixGraph(_VertexCount):
    """A graph whose edges are stored as 0/1 entries of a square matrix."""

    def __init__(self, vertices: int = 0, capacity: int = MAX_VERTEX) -> None:
        super().__init__(capacity)
        self._matrix = [[0] * capacity for _ in range(capacity)]
        for _ in range(vertices):
            self.insert_vertex()

    def insert_vertex(self) -> int:
        """Add a vertex and return its number."""
        return self._add_vertex()

    def insert_edge(self, u: int, v: int) -> None:
        """Add the directed edge ``<u, v>``; add both directions for an undirected edge."""
        self._check_vertex(u)
        self._check_vertex(v)
        self._matrix[u][v] = 1

    def rows(self) -> list[list[int]]:
        """Return the ``n`` by ``n`` adjacency matrix."""
        return [row[: self.n] for row in self._matrix[: self.n]]

    def __str__(self) -> str:
        return "\n".join(
            "\t\t" + "".join(f"{cell:2d}" for cell in row) for row in self.rows()
        )


class AdjacencyListGraph(_VertexCount):
    """A graph whose edges are kept in per-vertex lists, newest edge first."""

    def __init__(self, vertices: int = 0, capacity: int = MAX_VERTEX) -> None:
        super().__init__(capacity)
        self._adjacent: list[list[int]] = []
        for _ in range(vertices):
            self.insert_vertex()

    def insert_vertex(self) -> int:
        """Add a vertex and return its number."""
        vertex = self._add_vertex()
        self._adjacent.append([])
        return vertex

    def insert_edge(self, u: int, v: int) -> None:
        """Put ``v`` at the front of the list of ``u``."""
        self._check_vertex(u)
        self._check_vertex(v)
        self._adjacent[u].insert(0, v)

    def neighbors(self, u: int) -> list[int]:
        """Return the vertices adjacent to ``u`` in list order."""
        self._check_vertex(u)
        return list(self._adjacent[u])

    def _first_unvisited(self, v: int, visited: set[int]) -> int | None:
        return next((w for w in self._adjacent[v] if w not in visited), None)

    def dfs(self, start: int) -> list[int]:
        """Return the vertices in depth-first order from ``start``.

        Backtracking rescans each vertex popped from the stack; the start
        vertex sits at the bottom and is not rescanned once the walk returns
        to it.
        """
        self._check_vertex(start)
        stack = LinkedStack()
        stack.push(start)
        visited = {start}
        order = [start]
        v = start
        while not stack.is_empty():
            while (w := self._first_unvisited(v, visited)) is not None:
                stack.push(w)
                visited.add(w)
                order.append(w)
                v = w
            v = stack.pop()
        return order

    def bfs(self, start: int) -> list[int]:
        """Return the vertices in breadth-first order from ``start``."""
        self._check_vertex(start)
        queue = LinkedQueue()
        visited = {start}
        order = [start]
        queue.enqueue(start)
        while not queue.is_empty():
            v = queue.dequeue()
            for w in self._adjacent[v]:
                if w not in visited:
                    visited.add(w)
                    order.append(w)
                    queue.enqueue(w)
        return order

    def _lines(self) -> Iterator[str]:
        for u, adjacent in enumerate(self._adjacent):
            arrows = "".join(f" -> {vertex_label(w)}" for w in adjacent)
            yield f"\t\t정점 {vertex_label(u)}의 인접 리스트{arrows}"

    def __str__(self) -> str:
        return "\n".join(self._lines())