"""Exceptions raised when a caller breaks the graph or matrix contract.

Absence (an unknown vertex passed to ``degree``, no route found by ``path``)
is reported with ``None``. Everything below is a programming error on the
caller side and is raised immediately.
"""


class GraphError(Exception):
    """Base class of every contract violation."""


class SelfLoopError(GraphError, ValueError):
    """Raised when a vertex is connected to itself."""


class DuplicateEdgeError(GraphError, ValueError):
    """Raised when an edge is added twice."""


class MatrixIndexError(GraphError, IndexError):
    """Raised when a matrix cell outside the allocated range is written."""


class VertexIndexError(MatrixIndexError):
    """Raised when a vertex index does not belong to the graph."""


class EmptyGraphError(GraphError, ValueError):
    """Raised by queries that are undefined on a graph without vertices."""


class GraphInvariantError(GraphError, RuntimeError):
    """Raised when the degree bookkeeping contradicts itself."""


__all__ = [
    "DuplicateEdgeError",
    "EmptyGraphError",
    "GraphError",
    "GraphInvariantError",
    "MatrixIndexError",
    "SelfLoopError",
    "VertexIndexError",
]
