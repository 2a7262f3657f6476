"""
Graph model for the display engine.

A Graph is a vertex count plus an ordered list of (u, v) edges. The
``directed`` flag and the optional labels are presentation-only: the
similarity matrix derived from the edges is always symmetric.
"""

from __future__ import annotations

import warnings
from typing import Iterable, Optional, Sequence, cast

import numpy as np

from .types import Edge
from .validation import (
    GraphStructureWarning,
    InvalidGraphError,
    validate_edge_indices,
)


class Graph:
    """
    Vertex count, directed edge list and optional vertex labels.

    Example:
        graph = Graph(3)
        graph.add_edge(0, 1)
        graph.add_edge(1, 2)
        graph.similarity_matrix()
    """

    def __init__(
        self,
        n: int = 0,
        edges: Optional[Iterable[Sequence[int]]] = None,
        *,
        directed: bool = False,
        labels: Optional[Sequence[str]] = None,
    ) -> None:
        """
        Initialize graph.

        Args:
            n: Number of vertices (>= 0)
            edges: Initial (u, v) pairs
            directed: Whether edges are drawn with arrows
            labels: Vertex labels, either empty or exactly n long

        Raises:
            InvalidGraphError: If n is negative or labels have the wrong length
            InvalidLinkError: If an edge references a missing vertex
        """
        if n < 0:
            raise InvalidGraphError(f"Vertex count must be non-negative, got {n}")

        self._n: int = int(n)
        self._edges: list[Edge] = []
        self.directed: bool = bool(directed)
        self._labels: list[str] = []

        if labels is not None and len(labels):
            self.labels = labels
        if edges is not None:
            for u, v in edges:
                self.add_edge(u, v)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def n(self) -> int:
        """Get the number of vertices."""
        return self._n

    @property
    def edges(self) -> list[Edge]:
        """Get a copy of the edge list."""
        return list(self._edges)

    @property
    def labels(self) -> list[str]:
        """Get vertex labels (empty when the graph is unlabelled)."""
        return list(self._labels)

    @labels.setter
    def labels(self, value: Sequence[str]) -> None:
        """Set vertex labels; must be empty or one per vertex."""
        if len(value) and len(value) != self._n:
            raise InvalidGraphError(
                f"Expected {self._n} labels or none, got {len(value)}"
            )
        self._labels = [str(label) for label in value]

    # -------------------------------------------------------------------------
    # Building
    # -------------------------------------------------------------------------

    def add_vertex(self, label: Optional[str] = None) -> int:
        """
        Append a vertex and return its index.

        On a labelled graph the new vertex gets ``label`` or, if omitted,
        its decimal index.
        """
        index = self._n
        self._n += 1
        if label is not None and not self._labels:
            # Promote an unlabelled graph to a labelled one
            self._labels = [str(i) for i in range(index)]
        if self._labels:
            self._labels.append(str(label) if label is not None else str(index))
        return index

    def add_edge(self, u: int, v: int) -> None:
        """
        Append edge (u, v).

        Raises:
            InvalidLinkError: If u or v is not a vertex of this graph
        """
        validate_edge_indices([(u, v)], self._n, strict=True)
        self._edges.append((u, v))

    def label(self, i: int) -> str:
        """Get the display label of vertex i."""
        if self._labels:
            return self._labels[i]
        return str(i)

    def copy(self) -> Graph:
        """Return an independent copy of this graph."""
        return Graph(
            self._n,
            self._edges,
            directed=self.directed,
            labels=self._labels,
        )

    # -------------------------------------------------------------------------
    # Derived data
    # -------------------------------------------------------------------------

    def has_self_loops(self) -> bool:
        """True if any edge joins a vertex to itself."""
        return any(u == v for u, v in self._edges)

    def similarity_matrix(self) -> np.ndarray:
        """
        Compute the symmetric 0/1 similarity (adjacency) matrix.

        Edge direction is ignored and duplicate edges collapse to a single
        entry. Self-loops are left out so the diagonal stays zero; a
        GraphStructureWarning is issued when any are dropped.
        """
        n = self._n
        A = np.zeros((n, n), dtype=np.float64)

        loops = 0
        for u, v in self._edges:
            if u == v:
                loops += 1
                continue
            A[u, v] = 1.0
            A[v, u] = 1.0

        if loops:
            warnings.warn(
                f"Ignoring {loops} self-loop edge(s) in the similarity matrix.",
                GraphStructureWarning,
                stacklevel=2,
            )

        return cast(np.ndarray, A)

    def __len__(self) -> int:
        return self._n

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return (
            self._n == other._n
            and self._edges == other._edges
            and self.directed == other.directed
            and self._labels == other._labels
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph(n={self._n}, edges={len(self._edges)}, {kind})"


__all__ = ["Graph"]
