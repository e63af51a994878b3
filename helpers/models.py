"""Catalog of small example graphs used by the tests and the benchmarks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from graphs.utgraph import Edge, UTGraph


@dataclass(frozen=True)
class GraphData:
    """Vertex count and edge list of one catalog graph."""

    verts: int
    edges: Tuple[Edge, ...]

    def build(self) -> UTGraph:
        return UTGraph(self.verts).with_edges(self.edges)


#    [2]
#    / \
# [0]   [1]
GRAPH1 = GraphData(verts=3, edges=((0, 2), (1, 2)))

#     [0]       [5]
#    / | \
# [1] [2] [3]
#       \ /
#       [4]
GRAPH2 = GraphData(verts=6, edges=((0, 1), (0, 2), (0, 3), (2, 4), (3, 4)))

# [0] [1] [2] [3]
GRAPH3 = GraphData(verts=4, edges=())

# [0]   [1]
#   \   /
#    [2]
#     |
#    [3]
GRAPH4 = GraphData(verts=4, edges=((0, 2), (1, 2), (3, 2)))

# [0]---[1]
#   \   /
#    [2]
#     |
#    [3]
GRAPH5 = GraphData(verts=4, edges=((0, 2), (1, 2), (3, 2), (0, 1)))

#     [0]     _[5]--[6]--[7]   [11]
#    / | \   /      / \
# [1] [2] [3]     [8] [9]
#       \ /         \ /
#       [4]--------[10]
GRAPH6 = GraphData(
    verts=12,
    edges=(
        (0, 1),
        (0, 2),
        (0, 3),
        (2, 3),
        (3, 4),
        (3, 5),
        (5, 6),
        (6, 7),
        (6, 8),
        (6, 9),
        (8, 10),
        (9, 10),
        (10, 4),
    ),
)

GRAPHS: Tuple[GraphData, ...] = (GRAPH1, GRAPH2, GRAPH3, GRAPH4, GRAPH5, GRAPH6)


def get_model(index: int) -> GraphData:
    """Return the catalog entry at ``index``."""

    if not 0 <= index < len(GRAPHS):
        raise ValueError(f"Unknown catalog graph {index}; expected 0..{len(GRAPHS) - 1}")
    return GRAPHS[index]


__all__ = [
    "GRAPHS",
    "GraphData",
    "get_model",
]
