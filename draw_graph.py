"""Utility script to render a catalog graph and the path found between two vertices.

Usage example::

    python draw_graph.py --graph 5 --source 0 --target 6

Edges along the walk returned by :meth:`graphs.UTGraph.path` are drawn in red.
"""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

import networkx as nx
from matplotlib import pyplot as plt

from graphs.utgraph import UTGraph
from helpers.interop import to_networkx
from helpers.models import get_model


def render_graph(
    graph: UTGraph,
    path: Optional[List[int]] = None,
    ax: Optional[plt.Axes] = None,
    *,
    seed: int = 42,
) -> plt.Axes:
    """Draw ``graph`` on ``ax`` (a new figure when omitted) highlighting ``path``."""

    if ax is None:
        _, ax = plt.subplots()
    G = to_networkx(graph)
    positions = nx.spring_layout(G, seed=seed)
    path = path or []
    path_edges = {frozenset(pair) for pair in zip(path, path[1:])}
    edge_colors = ["red" if frozenset(edge) in path_edges else "grey" for edge in G.edges()]
    node_colors = ["orange" if node in path else "skyblue" for node in G.nodes()]
    nx.draw(
        G,
        pos=positions,
        ax=ax,
        with_labels=True,
        node_color=node_colors,
        edge_color=edge_colors,
    )
    return ax


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Draw a catalog graph and a path between two vertices")
    parser.add_argument("--graph", type=int, default=5, help="Catalog graph index")
    parser.add_argument("--source", type=int, default=0, help="First vertex of the path")
    parser.add_argument("--target", type=int, default=6, help="Last vertex of the path")
    args = parser.parse_args(argv)

    try:
        graph = get_model(args.graph).build()
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    path = graph.path(args.source, args.target)

    if path is None:
        print(f"No path between {args.source} and {args.target}.")
        status = "NO PATH"
    else:
        print(f"Path: {' -> '.join(str(v) for v in path)}")
        status = f"{len(path) - 1} edges"

    ax = render_graph(graph, path)
    ax.set_title(f"Graph {args.graph}: {args.source} to {args.target} ({status})")
    plt.show()


if __name__ == "__main__":
    main()
