"""Undirected graphs stored as adjacency lists and as adjacency matrices."""

from __future__ import annotations

from collections import deque


def _check_vertex(vertex: int, vertices: int) -> None:
    if not 0 <= vertex < vertices:
        raise IndexError(f"invalid vertex {vertex}")


class AdjacencyList:
    """An undirected graph keeping, for each vertex, its neighbours newest first."""

    def __init__(self, vertices: int = 4) -> None:
        if vertices < 0:
            raise ValueError("vertex count must not be negative")
        self.vertices = vertices
        self._adjacent: list[deque[int]] = [deque() for _ in range(vertices)]

    def add_edge(self, i: int, j: int) -> None:
        """Connect ``i`` and ``j``; each is put at the front of the other's list."""
        _check_vertex(i, self.vertices)
        _check_vertex(j, self.vertices)
        self._adjacent[i].appendleft(j)
        self._adjacent[j].appendleft(i)

    def neighbours(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex``, most recently added first."""
        _check_vertex(vertex, self.vertices)
        return list(self._adjacent[vertex])

    def __str__(self) -> str:
        return "\n".join(
            f"{vertex}: {' '.join(str(n) for n in adjacent)}".rstrip()
            for vertex, adjacent in enumerate(self._adjacent)
        )


class AdjacencyMatrix:
    """An undirected graph stored as a square 0/1 matrix."""

    def __init__(self, vertices: int = 4) -> None:
        if vertices < 0:
            raise ValueError("vertex count must not be negative")
        self.vertices = vertices
        self._matrix = [[0] * vertices for _ in range(vertices)]

    def add_edge(self, i: int, j: int) -> None:
        """Connect ``i`` and ``j`` in both directions."""
        _check_vertex(i, self.vertices)
        _check_vertex(j, self.vertices)
        self._matrix[i][j] = 1
        self._matrix[j][i] = 1

    def rows(self) -> list[list[int]]:
        """Return a copy of the matrix as a list of rows."""
        return [list(row) for row in self._matrix]

    def __str__(self) -> str:
        return "\n".join(" ".join(str(cell) for cell in row) for row in self._matrix)