"""
Spectrum of a graph's similarity matrix.

Uses inertia-based bisection on the symmetric 0/1 adjacency matrix, so
only symmetric matrices are supported. The result is cached until the
graph changes.
"""

from __future__ import annotations

import warnings
from typing import Optional

from ..graph import Graph
from ..validation import PerformanceWarning
from .bisection import INTERVAL_TOLERANCE, bisect_eigenvalues
from .inertia import PIVOT_TOLERANCE


class SpectralSolver:
    """
    Memoized eigenvalue solver for a graph's similarity matrix.

    compute() runs the bisection search once and then returns the cached
    spectrum until the graph is replaced or invalidate() is called.

    Example:
        solver = SpectralSolver(Graph(2, [(0, 1)]))
        solver.compute()   # [-1.0, 1.0] (to within the interval tolerance)
        solver.compute()   # cached, no recomputation
    """

    def __init__(
        self,
        graph: Optional[Graph] = None,
        *,
        pivot_tolerance: float = PIVOT_TOLERANCE,
        interval_tolerance: float = INTERVAL_TOLERANCE,
        warn_threshold: int = 300,
    ) -> None:
        """
        Initialize solver.

        Args:
            graph: Graph whose spectrum is computed (defaults to an empty graph)
            pivot_tolerance: Values below this count as zero during reduction
            interval_tolerance: Bisection stops on intervals narrower than this
            warn_threshold: Vertex count above which compute() issues a
                PerformanceWarning. The search costs O(n^4) in the worst case.
        """
        self._graph: Graph = graph.copy() if graph is not None else Graph(0)
        self._pivot_tolerance: float = max(0.0, float(pivot_tolerance))
        self._interval_tolerance: float = max(0.0, float(interval_tolerance))
        self._warn_threshold: int = max(0, int(warn_threshold))

        self._eigenvalues: list[float] = []
        self._valid: bool = False
        self._computations: int = 0

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def graph(self) -> Graph:
        """Get a copy of the graph the spectrum is computed for."""
        return self._graph.copy()

    @graph.setter
    def graph(self, value: Graph) -> None:
        """Snapshot a new graph and drop the cached spectrum."""
        self._graph = value.copy()
        self.invalidate()

    @property
    def pivot_tolerance(self) -> float:
        return self._pivot_tolerance

    @pivot_tolerance.setter
    def pivot_tolerance(self, value: float) -> None:
        self._pivot_tolerance = max(0.0, float(value))
        self.invalidate()

    @property
    def interval_tolerance(self) -> float:
        return self._interval_tolerance

    @interval_tolerance.setter
    def interval_tolerance(self, value: float) -> None:
        self._interval_tolerance = max(0.0, float(value))
        self.invalidate()

    @property
    def warn_threshold(self) -> int:
        return self._warn_threshold

    @warn_threshold.setter
    def warn_threshold(self, value: int) -> None:
        self._warn_threshold = max(0, int(value))

    @property
    def is_valid(self) -> bool:
        """True while the cached spectrum matches the current graph."""
        return self._valid

    @property
    def computation_count(self) -> int:
        """Number of times the spectrum was actually computed."""
        return self._computations

    # -------------------------------------------------------------------------
    # Computation
    # -------------------------------------------------------------------------

    def invalidate(self) -> None:
        """Drop the cached spectrum; the next compute() recomputes it."""
        self._valid = False

    def compute(self) -> list[float]:
        """
        Get all eigenvalues of the similarity matrix in ascending order.

        Returns:
            Copy of the cached spectrum (exactly n values)
        """
        if self._valid:
            return list(self._eigenvalues)

        n = self._graph.n
        if n > self._warn_threshold:
            warnings.warn(
                f"Computing the spectrum of a {n}-vertex graph by bisection "
                "may be slow (O(n^4) worst case).",
                PerformanceWarning,
                stacklevel=2,
            )

        matrix = self._graph.similarity_matrix()
        self._eigenvalues = bisect_eigenvalues(
            matrix,
            interval_tolerance=self._interval_tolerance,
            pivot_tolerance=self._pivot_tolerance,
        )
        self._valid = True
        self._computations += 1
        return list(self._eigenvalues)


__all__ = ["SpectralSolver"]
