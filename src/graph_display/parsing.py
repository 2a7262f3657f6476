"""
Edge-list text reader.

Builds a Graph from a plain-text description with one entry per line::

    a b      edge a -> b (declares both vertices)
    c        isolated vertex c

Blank lines are skipped, and lines with more than two tokens are ignored.
Vertices are numbered in order of first appearance and the tokens become
the vertex labels.
"""

from __future__ import annotations

from .graph import Graph


def parse_edge_list(text: str, directed: bool = False) -> Graph:
    """
    Parse an edge-list description into a labelled Graph.

    Args:
        text: Multi-line description
        directed: Value of the resulting graph's directed flag

    Returns:
        New Graph with labels in first-appearance order
    """
    index: dict[str, int] = {}
    raw_edges: list[tuple[str, str]] = []

    for line in text.splitlines():
        parts = line.split()
        if len(parts) == 1:
            index.setdefault(parts[0], len(index))
        elif len(parts) == 2:
            u, v = parts
            index.setdefault(u, len(index))
            index.setdefault(v, len(index))
            raw_edges.append((u, v))

    labels = list(index)
    edges = [(index[u], index[v]) for u, v in raw_edges]
    return Graph(len(labels), edges, directed=directed, labels=labels)


__all__ = ["parse_edge_list"]
