"""Graphs stored as an adjacency matrix or as adjacency sets."""

from __future__ import annotations


def _check_vertex_count(vertices: int) -> None:
    if vertices < 0:
        raise ValueError(f"vertex count must not be negative, got {vertices}")


class GraphMatrix:
    """A directed graph whose edges are flags in a square matrix."""

    def __init__(self, vertices: int) -> None:
        _check_vertex_count(vertices)
        self._matrix = [[False] * vertices for _ in range(vertices)]

    @property
    def vertices(self) -> int:
        return len(self._matrix)

    def _check(self, a: int, b: int) -> None:
        for vertex in (a, b):
            if not 0 <= vertex < len(self._matrix):
                raise IndexError(f"invalid vertex {vertex}")

    def add_edge(self, a: int, b: int) -> None:
        """Add the edge a -> b; raise ValueError if it is already present."""
        self._check(a, b)
        if self._matrix[a][b]:
            raise ValueError(f"edge {a} - {b} already present")
        self._matrix[a][b] = True

    def remove_edge(self, a: int, b: int) -> None:
        """Remove the edge a -> b; raise KeyError if it does not exist."""
        self._check(a, b)
        if not self._matrix[a][b]:
            raise KeyError((a, b))
        self._matrix[a][b] = False

    def has_edge(self, a: int, b: int) -> bool:
        self._check(a, b)
        return self._matrix[a][b]

    def edges(self) -> list[tuple[int, int]]:
        """Every edge, ordered by source vertex and then by target."""
        return [
            (i, j)
            for i, row in enumerate(self._matrix)
            for j, present in enumerate(row)
            if present
        ]


class GraphList:
    """An undirected graph whose neighbours are kept in a set per vertex."""

    def __init__(self, vertices: int) -> None:
        _check_vertex_count(vertices)
        self._adjacent: list[set[int]] = [set() for _ in range(vertices)]

    @property
    def vertices(self) -> int:
        return len(self._adjacent)

    def _check(self, *vertices: int) -> None:
        for vertex in vertices:
            if not 0 <= vertex < len(self._adjacent):
                raise IndexError(f"invalid vertex {vertex}")

    def add_edge(self, a: int, b: int) -> None:
        """Join ``a`` and ``b``; adding an existing edge changes nothing."""
        self._check(a, b)
        self._adjacent[a].add(b)
        self._adjacent[b].add(a)

    def remove_edge(self, a: int, b: int) -> None:
        """Remove the edge a - b; raise KeyError if it does not exist."""
        self._check(a, b)
        if b not in self._adjacent[a]:
            raise KeyError((a, b))
        self._adjacent[a].discard(b)
        self._adjacent[b].discard(a)

    def has_edge(self, a: int, b: int) -> bool:
        self._check(a, b)
        return b in self._adjacent[a]

    def neighbours(self, vertex: int) -> list[int]:
        """Neighbours of ``vertex`` in ascending order."""
        self._check(vertex)
        return sorted(self._adjacent[vertex])

    def adjacency(self) -> list[tuple[int, ...]]:
        """The ascending neighbours of every vertex, indexed by vertex."""
        return [tuple(sorted(neighbours)) for neighbours in self._adjacent]