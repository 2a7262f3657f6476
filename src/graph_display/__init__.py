"""
graph-display: Interactive force-directed graph drawing with spectra.

This package provides the engine behind an interactive graph viewer:
vertex positions that converge toward a readable drawing, and the
eigenvalues of the graph's adjacency matrix.

Components:
- force: Eades-style force-directed layout driven by an animation loop
- spectral: Eigenvalues by bisection on inertia counts
- display: Orchestrator tying both to a graph, pointer input and a renderer
"""

__version__ = "0.1.0"

# Base classes for building layouts
from .base import (
    BaseLayout,
    IterativeLayout,
)

# Orchestrator
from .display import DisplaySnapshot, GraphDisplay

# Force-directed layouts
from .force import EadesLayout

# Graph model and text input
from .graph import Graph
from .parsing import parse_edge_list

# Initial placement
from .placement import disk_placement, polygon_placement

# Spectral analysis
from .spectral import (
    Inertia,
    SpectralSolver,
    bisect_eigenvalues,
    inertia,
)
from .types import (
    Edge,
    Event,
    EventType,
    SizeType,
    Vector2D,
)

# Validation utilities
from .validation import (
    GraphStructureWarning,
    InvalidCanvasSizeError,
    InvalidGraphError,
    InvalidLinkError,
    InvalidVertexError,
    PerformanceWarning,
    ValidationError,
    validate_canvas_size,
    validate_edge_indices,
    validate_vertex_index,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Vector2D",
    "Edge",
    "EventType",
    "Event",
    "SizeType",
    # Graph model
    "Graph",
    "parse_edge_list",
    # Base classes
    "BaseLayout",
    "IterativeLayout",
    # Layout
    "EadesLayout",
    "polygon_placement",
    "disk_placement",
    # Spectral
    "SpectralSolver",
    "bisect_eigenvalues",
    "inertia",
    "Inertia",
    # Orchestrator
    "GraphDisplay",
    "DisplaySnapshot",
    # Validation
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
]
