"""Conversions between :class:`graphs.UTGraph` and NetworkX / numpy.

NetworkX graphs may carry arbitrary hashable labels; they are mapped to the
consecutive integers ``0..N-1`` following the sorted node order. The
``reference_*`` predicates compute the same invariants as the packed graph
directly on a NetworkX graph and serve as an independent cross-check.
"""

from __future__ import annotations

from typing import Dict, Hashable, List, Tuple

import networkx as nx
import numpy as np

from graphs.errors import SelfLoopError
from graphs.utgraph import UTGraph


def get_sorted_nodes(G: nx.Graph) -> List[Hashable]:
    """Return the graph nodes in a deterministic sorted order."""

    return sorted(G.nodes())


def to_networkx(graph: UTGraph) -> nx.Graph:
    """Return a NetworkX graph with nodes ``0..N-1`` and the same edges."""

    G = nx.Graph()
    G.add_nodes_from(range(graph.vertex_count))
    G.add_edges_from(graph.edges())
    return G


def from_networkx(G: nx.Graph) -> Tuple[UTGraph, Dict[Hashable, int]]:
    """Return the packed graph equivalent to ``G`` and the label mapping used."""

    if nx.number_of_selfloops(G):
        raise SelfLoopError("NetworkX graph contains self-loops.")
    mapping = {node: index for index, node in enumerate(get_sorted_nodes(G))}
    edges = sorted(tuple(sorted((mapping[u], mapping[v]))) for u, v in G.edges())
    return UTGraph(len(mapping)).with_edges(edges), mapping


def adjacency_matrix(graph: UTGraph) -> np.ndarray:
    """Return the dense 0/1 adjacency matrix (the degree diagonal is cleared)."""

    dense = graph.matrix.to_dense()
    np.fill_diagonal(dense, 0)
    return dense


def reference_max_degree(G: nx.Graph) -> int:
    """Return the maximum vertex degree in ``G``."""

    if G.number_of_nodes() == 0:
        raise ValueError("The maximum degree of a graph without vertices is undefined.")
    return max(degree for _, degree in G.degree())


def reference_is_star(G: nx.Graph) -> bool:
    """Return ``True`` when ``G`` is a star graph."""

    n = G.number_of_nodes()
    if n == 0:
        return False
    if n == 1:
        return True
    if not nx.is_connected(G):
        return False

    degrees = [degree for _, degree in G.degree()]
    # A star has one hub of degree n-1 and n-1 leaves (two leaves when n == 2).
    if n == 2:
        return G.number_of_edges() == 1
    return (n - 1) in degrees and degrees.count(1) == n - 1


def is_walk(graph: UTGraph, walk: List[int]) -> bool:
    """Return ``True`` when consecutive vertices of ``walk`` are adjacent."""

    return all(graph.connected(u, v) for u, v in zip(walk, walk[1:]))


__all__ = [
    "adjacency_matrix",
    "from_networkx",
    "get_sorted_nodes",
    "is_walk",
    "reference_is_star",
    "reference_max_degree",
    "to_networkx",
]
