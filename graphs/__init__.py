from .errors import (
    DuplicateEdgeError,
    EmptyGraphError,
    GraphError,
    GraphInvariantError,
    MatrixIndexError,
    SelfLoopError,
    VertexIndexError,
)
from .symmat import SymMatrix
from .utgraph import UTGraph, build_graph

__all__ = [
    "DuplicateEdgeError",
    "EmptyGraphError",
    "GraphError",
    "GraphInvariantError",
    "MatrixIndexError",
    "SelfLoopError",
    "SymMatrix",
    "UTGraph",
    "VertexIndexError",
    "build_graph",
]
