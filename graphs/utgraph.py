"""Undirected simple graph stored in a packed symmetric matrix.

Off-diagonal cell ``(a, b)`` holds ``1`` when the edge ``{a, b}`` exists and
``0`` otherwise. Diagonal cell ``(a, a)`` caches the degree of ``a``, so degree
queries never rescan the row.

Typical use builds the graph once and then only queries it::

    graph = UTGraph(3).with_edges([(0, 2), (1, 2)])
    graph.is_star()      # True
    graph.path(0, 1)     # [0, 2, 1]
"""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from graphs.errors import (
    DuplicateEdgeError,
    EmptyGraphError,
    GraphError,
    GraphInvariantError,
    SelfLoopError,
    VertexIndexError,
)
from graphs.symmat import SymMatrix

Edge = Tuple[int, int]


def _blacklist_contains(blacklist: List[int], vertex: int) -> bool:
    idx = bisect_left(blacklist, vertex)
    return idx < len(blacklist) and blacklist[idx] == vertex


def _blacklist_insert(blacklist: List[int], vertex: int) -> None:
    idx = bisect_left(blacklist, vertex)
    if idx == len(blacklist) or blacklist[idx] != vertex:
        blacklist.insert(idx, vertex)


class UTGraph:
    """Upper triangular graph: an undirected graph on vertices ``0..N-1``."""

    def __init__(self, vertex_count: int) -> None:
        self._edges = 0
        self._adj_mat = SymMatrix(vertex_count, 0, dtype=np.int64)

    @classmethod
    def from_edges(cls, vertex_count: int, edges: Sequence[Edge]) -> "UTGraph":
        """Build a graph with ``vertex_count`` vertices and the given ``edges``."""

        return cls(vertex_count).with_edges(edges)

    def with_edges(self, edges: Sequence[Edge]) -> "UTGraph":
        """Connect every pair of ``edges`` in order and return ``self``.

        Meant to run once, right after construction.
        """

        if self._edges:
            raise GraphError("Edges can only be applied to a graph without edges.")
        for a, b in edges:
            self.connect(a, b)
        self._edges = len(edges)
        return self

    def __repr__(self) -> str:
        return f"UTGraph(vertex_count={self.vertex_count}, edge_count={self.edge_count})"

    # ------------------------------------------------------------------
    # Size
    # ------------------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        return self._adj_mat.size

    @property
    def edge_count(self) -> int:
        return self._edges

    @property
    def matrix(self) -> SymMatrix:
        """Underlying packed adjacency matrix (diagonal holds degrees)."""

        return self._adj_mat

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def connect(self, a: int, b: int) -> None:
        """Add the edge ``{a, b}``."""

        if a == b:
            raise SelfLoopError("Cannot connect a vertex to itself.")
        if self.connected(a, b):
            raise DuplicateEdgeError(f"The edge ({a}, {b}) already exists!")
        self._adj_mat.set(a, b, 1)
        self._adj_mat.get_mut(a, a)[0] += 1
        self._adj_mat.get_mut(b, b)[0] += 1
        self._edges += 1

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _check_vertex(self, a: int) -> None:
        if not 0 <= a < self.vertex_count:
            raise VertexIndexError(
                f"Invalid vertex {a} for a graph of {self.vertex_count} vertices."
            )

    def connected(self, a: int, b: int) -> bool:
        """Return ``True`` when ``a`` and ``b`` are distinct adjacent vertices."""

        cell = self._adj_mat.get(a, b)
        if cell is None:
            raise VertexIndexError(f"Invalid edge ({a}, {b}).")
        return a != b and cell == 1

    def degree(self, a: int) -> Optional[int]:
        """Return the degree of ``a`` or ``None`` when ``a`` is not a vertex."""

        return self._adj_mat.get(a, a)

    def degrees(self) -> List[int]:
        return self._adj_mat.diagonal().tolist()

    def max_degree(self) -> int:
        if self.vertex_count == 0:
            raise EmptyGraphError("The maximum degree of a graph without vertices is undefined.")
        return int(self._adj_mat.diagonal().max())

    def is_star(self) -> bool:
        """Return ``True`` when one hub is adjacent to every other vertex.

        A star on ``N`` vertices has exactly ``N - 1`` edges; graphs failing
        that count are rejected without scanning. Otherwise the first vertex of
        degree ``N - 1`` is the hub, and every vertex met before it must be a
        leaf.
        """

        max_deg = self.vertex_count - 1
        if self._edges != max_deg:
            return False

        for deg in self.degrees():
            if deg == max_deg:
                return True
            if deg != 1:
                return False
        raise GraphInvariantError(
            f"{self._edges} edges on {self.vertex_count} vertices without a hub or a non-leaf."
        )

    def neighborhood(self, a: int) -> List[int]:
        """Return the neighbours of ``a`` in ascending order."""

        self._check_vertex(a)
        row = self._adj_mat.row(a)
        row[a] = 0
        return np.flatnonzero(row == 1).tolist()

    def edges(self) -> List[Edge]:
        """Return every edge as ``(a, b)`` with ``a < b``, in ascending order."""

        return [(a, b) for a in range(self.vertex_count) for b in self.neighborhood(a) if a < b]

    def path(self, a: int, b: int) -> Optional[List[int]]:
        """Return a walk from ``a`` to ``b`` or ``None`` when ``b`` is unreachable.

        Depth-first search with backtracking. Neighbours are tried in ascending
        order and a vertex enters the blacklist once it has been left, either by
        descending into one of its neighbours or by backtracking out of it, so
        it is never pushed again. The walk found is deterministic but not
        necessarily the shortest.

        ``path(a, a)`` is the single-vertex walk ``[a]``.
        """

        self._check_vertex(a)
        self._check_vertex(b)
        if a == b:
            return [a]

        path_stack = [a]
        blacklist: List[int] = []

        while path_stack:
            curr_vert = path_stack[-1]
            if self.connected(curr_vert, b):
                path_stack.append(b)
                return path_stack

            new_vert = next(
                (v for v in self.neighborhood(curr_vert) if not _blacklist_contains(blacklist, v)),
                None,
            )
            if new_vert is not None:
                path_stack.append(new_vert)
                blacklisted = curr_vert
            else:
                blacklisted = path_stack.pop()

            _blacklist_insert(blacklist, blacklisted)
        return None

    def has_path(self, a: int, b: int) -> bool:
        return self.path(a, b) is not None


def build_graph(vertex_count: int, edges: Iterable[Edge]) -> UTGraph:
    """Two-step factory accepting any iterable of pairs."""

    return UTGraph.from_edges(vertex_count, list(edges))


__all__ = ["Edge", "UTGraph", "build_graph"]
