"""
Input validation utilities for the graph display engine.

Provides centralized validation functions for graphs, edges, canvas size,
vertex indices and other parameters. Raises descriptive exceptions on
invalid input.
"""

from __future__ import annotations

from typing import Any, Sequence


class ValidationError(ValueError):
    """Base exception for validation errors."""

    pass


class InvalidCanvasSizeError(ValidationError):
    """Raised when canvas dimensions are invalid."""

    pass


class InvalidGraphError(ValidationError):
    """Raised when a graph is malformed (vertex count, labels)."""

    pass


class InvalidLinkError(ValidationError):
    """Raised when an edge references invalid vertices."""

    pass


class InvalidVertexError(IndexError):
    """Raised when a vertex index is outside the current graph."""

    pass


class PerformanceWarning(UserWarning):
    """Issued when an operation is expected to be slow for the input size."""

    pass


class GraphStructureWarning(UserWarning):
    """Issued when the graph has structure that is silently adjusted."""

    pass


def validate_canvas_size(size: Sequence[float]) -> tuple[float, float]:
    """
    Validate canvas size dimensions.

    Args:
        size: [width, height] sequence

    Returns:
        Validated (width, height) tuple

    Raises:
        InvalidCanvasSizeError: If dimensions are invalid
    """
    if len(size) < 2:
        raise InvalidCanvasSizeError(
            f"Canvas size must have 2 elements [width, height], got {len(size)}"
        )

    width, height = float(size[0]), float(size[1])

    if width <= 0:
        raise InvalidCanvasSizeError(f"Canvas width must be positive, got {width}")
    if height <= 0:
        raise InvalidCanvasSizeError(f"Canvas height must be positive, got {height}")

    return width, height


def validate_edge_indices(
    edges: Sequence[Any],
    vertex_count: int,
    strict: bool = True,
) -> list[tuple[int, str]]:
    """
    Validate that all edge endpoints are within bounds.

    Args:
        edges: Sequence of (u, v) pairs
        vertex_count: Number of vertices in the graph
        strict: If True, raises on invalid. If False, returns list of issues.

    Returns:
        List of (edge_index, issue_description) tuples

    Raises:
        InvalidLinkError: If strict=True and invalid edges found
    """
    issues: list[tuple[int, str]] = []

    for i, edge in enumerate(edges):
        if len(edge) != 2:
            issues.append((i, f"Edge {i}: expected (u, v) pair, got {edge!r}"))
            continue

        for name, idx in zip(("source", "target"), edge):
            if not isinstance(idx, int) or isinstance(idx, bool):
                issues.append((i, f"Edge {i}: {name} {idx!r} is not an integer index"))
            elif idx < 0 or idx >= vertex_count:
                issues.append(
                    (i, f"Edge {i}: {name} index {idx} out of bounds [0, {vertex_count})")
                )

    if strict and issues:
        msg = "Invalid edge indices:\n" + "\n".join(issue[1] for issue in issues)
        raise InvalidLinkError(msg)

    return issues


def validate_vertex_index(index: int, vertex_count: int) -> int:
    """
    Validate a vertex index against the current vertex count.

    Negative indices are rejected rather than wrapped.

    Raises:
        InvalidVertexError: If index is outside [0, vertex_count)
    """
    if not isinstance(index, int) or isinstance(index, bool):
        raise InvalidVertexError(f"Vertex index must be an integer, got {index!r}")
    if index < 0 or index >= vertex_count:
        raise InvalidVertexError(f"Vertex index {index} out of bounds [0, {vertex_count})")
    return index


def validate_iterations(iterations: int) -> int:
    """
    Validate iteration count is non-negative.

    Zero iterations is a legal no-op.

    Raises:
        ValidationError: If iterations < 0
    """
    if iterations < 0:
        raise ValidationError(f"iterations must be >= 0, got {iterations}")
    return int(iterations)


__all__ = [
    "ValidationError",
    "InvalidCanvasSizeError",
    "InvalidGraphError",
    "InvalidLinkError",
    "InvalidVertexError",
    "PerformanceWarning",
    "GraphStructureWarning",
    "validate_canvas_size",
    "validate_edge_indices",
    "validate_vertex_index",
    "validate_iterations",
]
