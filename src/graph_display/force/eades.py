"""
Eades spring-embedder layout with velocity integration.

Based on the spring model from:
"A Heuristic for Graph Drawing" by Peter Eades (1984)

The simulation treats the graph as a physical system where:
- Adjacent vertices are joined by logarithmic springs
- Non-adjacent vertices repel with an inverse-square force
- The four canvas borders push vertices back inside
- Velocity is damped and integrated every iteration

Forces for one iteration are always computed from a single snapshot of
positions and velocities, then applied to every vertex at once.
"""

from __future__ import annotations

import random
from typing import Optional

import numpy as np

from ..base import IterativeLayout
from ..graph import Graph
from ..placement import disk_placement, polygon_placement
from ..types import EventCallback, EventType, SizeType, Vector2D
from ..validation import validate_vertex_index

# Distance floor for force computation
EPS = 1e-6

# Extra clamp padding for locked vertices (they are drawn with a thicker outline)
LOCKED_PADDING = 2.0


class EadesLayout(IterativeLayout):
    """
    Force-directed layout engine driven by an external animation loop.

    Owns per-vertex position, velocity and three flags (locked, dragging,
    paused) as parallel arrays indexed by vertex. Locked vertices never
    move. Dragged vertices are positioned by the caller through
    set_position() and are skipped by the simulation. The paused flag is
    stored and migrated but has no effect on the physics.

    Example:
        graph = Graph(6, [(i, (i + 1) % 6) for i in range(6)])
        layout = EadesLayout(graph=graph, size=(800, 600), random_seed=1)

        layout.run_iterations(100)
        for i, p in enumerate(layout.positions):
            print(f"Vertex {i}: ({p.x:.1f}, {p.y:.1f})")
    """

    def __init__(
        self,
        *,
        graph: Optional[Graph] = None,
        size: SizeType = (800.0, 600.0),
        vertex_radius: float = 20.0,
        random_seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        on_start: Optional[EventCallback] = None,
        on_tick: Optional[EventCallback] = None,
        on_end: Optional[EventCallback] = None,
        # IterativeLayout parameters
        iterations_per_step: int = 2,
        # Eades-specific parameters
        spring_strength: float = 20.0,
        spring_length: float = 100.0,
        repulsion: float = 50000.0,
        step_size: float = 0.3,
        wall_repulsion: float = 100000.0,
        damping: float = 0.2,
        spawn_fraction: float = 0.12,
    ) -> None:
        """
        Initialize Eades layout and place vertices on a polygon.

        Args:
            graph: Graph to lay out
            size: Canvas size as (width, height)
            vertex_radius: Drawn vertex radius, used for clamping and hit tests
            random_seed: Seed for a private random generator
            rng: Random generator to use instead (takes precedence over random_seed)
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
            iterations_per_step: Iterations run by each step() call
            spring_strength: Spring force multiplier (c1).
            spring_length: Base of the spring rest length (c2). The rest
                length is spring_length + vertex count + edge count.
            repulsion: Inverse-square repulsion between non-adjacent vertices (c3).
            step_size: Force-to-velocity integration factor (c4).
            wall_repulsion: Inverse-square repulsion from each canvas border (c5).
            damping: Fraction of the velocity opposed every iteration.
            spawn_fraction: Radius of the spawn disk for new vertices, as a
                fraction of min(width, height).
        """
        super().__init__(
            graph=graph,
            size=size,
            vertex_radius=vertex_radius,
            random_seed=random_seed,
            rng=rng,
            on_start=on_start,
            on_tick=on_tick,
            on_end=on_end,
            iterations_per_step=iterations_per_step,
        )

        # Eades-specific configuration
        self._spring_strength: float = float(spring_strength)
        self._spring_length: float = max(0.0, float(spring_length))
        self._repulsion: float = max(0.0, float(repulsion))
        self._step_size: float = max(0.0, float(step_size))
        self._wall_repulsion: float = max(0.0, float(wall_repulsion))
        self._damping: float = max(0.0, float(damping))
        self._spawn_fraction: float = max(0.0, float(spawn_fraction))

        # Per-vertex state (parallel arrays, always of length graph.n)
        self._pos: np.ndarray = np.zeros((0, 2), dtype=np.float64)
        self._vel: np.ndarray = np.zeros((0, 2), dtype=np.float64)
        self._locked: np.ndarray = np.zeros(0, dtype=bool)
        self._dragging: np.ndarray = np.zeros(0, dtype=bool)
        self._paused: np.ndarray = np.zeros(0, dtype=bool)

        # Derived from the graph, refreshed on rebuild
        self._adjacency: np.ndarray = np.zeros((0, 0), dtype=bool)
        self._edge_count: int = 0

        self.reset()

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def spring_strength(self) -> float:
        """Get spring force multiplier (c1)."""
        return self._spring_strength

    @spring_strength.setter
    def spring_strength(self, value: float) -> None:
        self._spring_strength = float(value)

    @property
    def spring_length(self) -> float:
        """Get base spring rest length (c2)."""
        return self._spring_length

    @spring_length.setter
    def spring_length(self, value: float) -> None:
        self._spring_length = max(0.0, float(value))

    @property
    def repulsion(self) -> float:
        """Get vertex repulsion constant (c3)."""
        return self._repulsion

    @repulsion.setter
    def repulsion(self, value: float) -> None:
        self._repulsion = max(0.0, float(value))

    @property
    def step_size(self) -> float:
        """Get force-to-velocity integration factor (c4)."""
        return self._step_size

    @step_size.setter
    def step_size(self, value: float) -> None:
        self._step_size = max(0.0, float(value))

    @property
    def wall_repulsion(self) -> float:
        """Get border repulsion constant (c5)."""
        return self._wall_repulsion

    @wall_repulsion.setter
    def wall_repulsion(self, value: float) -> None:
        self._wall_repulsion = max(0.0, float(value))

    @property
    def damping(self) -> float:
        """Get velocity damping factor."""
        return self._damping

    @damping.setter
    def damping(self, value: float) -> None:
        self._damping = max(0.0, float(value))

    @property
    def spawn_fraction(self) -> float:
        """Get spawn disk radius as a fraction of the smaller canvas side."""
        return self._spawn_fraction

    @spawn_fraction.setter
    def spawn_fraction(self, value: float) -> None:
        self._spawn_fraction = max(0.0, float(value))

    @property
    def spring_rest_length(self) -> float:
        """Distance at which the spring force changes sign."""
        return self._spring_length + self._graph.n + self._edge_count

    # -------------------------------------------------------------------------
    # Per-vertex state
    # -------------------------------------------------------------------------

    @property
    def positions(self) -> list[Vector2D]:
        """Get a snapshot of all vertex positions."""
        return [Vector2D(float(x), float(y)) for x, y in self._pos]

    @property
    def velocities(self) -> list[Vector2D]:
        """Get a snapshot of all vertex velocities."""
        return [Vector2D(float(x), float(y)) for x, y in self._vel]

    @property
    def locked(self) -> list[bool]:
        return [bool(v) for v in self._locked]

    @property
    def dragging(self) -> list[bool]:
        return [bool(v) for v in self._dragging]

    @property
    def paused(self) -> list[bool]:
        return [bool(v) for v in self._paused]

    def position(self, i: int) -> Vector2D:
        validate_vertex_index(i, self._graph.n)
        return Vector2D(float(self._pos[i, 0]), float(self._pos[i, 1]))

    def velocity(self, i: int) -> Vector2D:
        validate_vertex_index(i, self._graph.n)
        return Vector2D(float(self._vel[i, 0]), float(self._vel[i, 1]))

    def is_locked(self, i: int) -> bool:
        validate_vertex_index(i, self._graph.n)
        return bool(self._locked[i])

    def set_locked(self, i: int, value: bool) -> None:
        validate_vertex_index(i, self._graph.n)
        self._locked[i] = bool(value)

    def toggle_locked(self, i: int) -> bool:
        """Flip the locked flag of vertex i and return the new value."""
        validate_vertex_index(i, self._graph.n)
        self._locked[i] = not self._locked[i]
        return bool(self._locked[i])

    def is_dragging(self, i: int) -> bool:
        validate_vertex_index(i, self._graph.n)
        return bool(self._dragging[i])

    def set_dragging(self, i: int, value: bool) -> None:
        """Mark vertex i as positioned by the caller (or release it)."""
        validate_vertex_index(i, self._graph.n)
        self._dragging[i] = bool(value)

    def is_paused(self, i: int) -> bool:
        validate_vertex_index(i, self._graph.n)
        return bool(self._paused[i])

    def set_paused(self, i: int, value: bool) -> None:
        validate_vertex_index(i, self._graph.n)
        self._paused[i] = bool(value)

    # -------------------------------------------------------------------------
    # Placement
    # -------------------------------------------------------------------------

    def _bounds(self, pad: float) -> tuple[float, float, float, float]:
        """Allowed (min_x, min_y, max_x, max_y) for a vertex center."""
        r = self._vertex_radius
        w, h = self._canvas_size
        return (r + 1 + pad, r + 1 + pad, w - r - 3 - pad, h - r - 3 - pad)

    def clamp_inside(self, p: Vector2D, locked: bool = False) -> Vector2D:
        """
        Restrict a point to the drawable area of the canvas.

        Locked vertices get 2 extra units of padding on every side.
        """
        min_x, min_y, max_x, max_y = self._bounds(LOCKED_PADDING if locked else 0.0)
        x = min(max(p.x, min_x), max_x)
        y = min(max(p.y, min_y), max_y)
        return Vector2D(x, y)

    def _clamp_array(self, points: np.ndarray, pad: float) -> np.ndarray:
        min_x, min_y, max_x, max_y = self._bounds(pad)
        lower = np.array([min_x, min_y])
        upper = np.array([max_x, max_y])
        return np.minimum(np.maximum(points, lower), upper)

    def set_position(self, i: int, x: float, y: float) -> None:
        """
        Move vertex i to (x, y), clamped inside the canvas, and stop it.

        Used by callers dragging a vertex.
        """
        validate_vertex_index(i, self._graph.n)
        p = self.clamp_inside(Vector2D(float(x), float(y)), locked=False)
        self._pos[i] = (p.x, p.y)
        self._vel[i] = 0.0

    def find_vertex_at(self, x: float, y: float) -> Optional[int]:
        """
        Find the topmost vertex whose disk contains (x, y).

        Later vertices are drawn on top, so the scan runs from the highest
        index down.

        Returns:
            Vertex index, or None if no vertex is hit
        """
        query = Vector2D(float(x), float(y))
        for i in range(len(self._pos) - 1, -1, -1):
            center = Vector2D(float(self._pos[i, 0]), float(self._pos[i, 1]))
            if query.distance(center) < self._vertex_radius:
                return i
        return None

    # -------------------------------------------------------------------------
    # Lifecycle Methods
    # -------------------------------------------------------------------------

    def _adopt(self, graph: Graph) -> None:
        """Take a private snapshot of graph and refresh data derived from it."""
        self._graph = graph.copy()
        self._adjacency = self._graph.similarity_matrix() != 0
        self._edge_count = len(self._graph.edges)

    def reset(self) -> EadesLayout:
        """
        Place every vertex on the initial polygon and clear all state.

        Returns:
            self for chaining
        """
        self._adopt(self._graph)
        n = self._graph.n
        width, height = self._canvas_size

        self._pos = polygon_placement(n, width, height)
        self._vel = np.zeros((n, 2), dtype=np.float64)
        self._locked = np.zeros(n, dtype=bool)
        self._dragging = np.zeros(n, dtype=bool)
        self._paused = np.zeros(n, dtype=bool)
        self._iteration = 0

        self.trigger({"type": EventType.start, "vertex_count": n})
        return self

    def rebuild(self, graph: Graph) -> EadesLayout:
        """
        Adopt a new graph while keeping the state of surviving vertices.

        Vertices below the old vertex count keep their position, velocity
        and flags. New vertices start at rest, unflagged, at a random point
        in the spawn disk. Trailing state is dropped when the graph shrinks.

        Returns:
            self for chaining
        """
        old_n = len(self._pos)
        new_n = graph.n
        keep = min(old_n, new_n)
        width, height = self._canvas_size

        pos = np.empty((new_n, 2), dtype=np.float64)
        vel = np.zeros((new_n, 2), dtype=np.float64)
        locked = np.zeros(new_n, dtype=bool)
        dragging = np.zeros(new_n, dtype=bool)
        paused = np.zeros(new_n, dtype=bool)

        pos[:keep] = self._pos[:keep]
        vel[:keep] = self._vel[:keep]
        locked[:keep] = self._locked[:keep]
        dragging[:keep] = self._dragging[:keep]
        paused[:keep] = self._paused[:keep]

        if new_n > keep:
            pos[keep:] = disk_placement(
                new_n - keep, width, height, self._rng, self._spawn_fraction
            )

        self._pos = pos
        self._vel = vel
        self._locked = locked
        self._dragging = dragging
        self._paused = paused
        self._adopt(graph)
        return self

    def tick(self) -> None:
        """Perform one synchronous force iteration."""
        n = self._graph.n
        if n == 0:
            return

        pos = self._pos
        vel = self._vel

        force = self._pairwise_forces(pos) + self._wall_forces(pos) - self._damping * vel

        moving = ~self._dragging
        vel[moving] += force[moving] * self._step_size

        frozen = self._locked | self._dragging
        vel[frozen] = 0.0

        free = ~frozen
        if free.any():
            pos[free] = self._clamp_array(pos[free] + vel[free], 0.0)

    # -------------------------------------------------------------------------
    # Forces
    # -------------------------------------------------------------------------

    def _pairwise_forces(self, pos: np.ndarray) -> np.ndarray:
        """Spring attraction along edges, repulsion between all other pairs."""
        # delta[i, j] points from vertex i to vertex j
        delta = pos[np.newaxis, :, :] - pos[:, np.newaxis, :]
        dist = np.sqrt(np.einsum("ijk,ijk->ij", delta, delta))
        dist = np.maximum(dist, EPS)

        spring = self._spring_strength * np.log(dist / self.spring_rest_length)
        repel = -self._repulsion / (dist * dist)
        magnitude = np.where(self._adjacency, spring, repel)
        np.fill_diagonal(magnitude, 0.0)

        return np.einsum("ij,ijk->ik", magnitude / dist, delta)

    def _wall_forces(self, pos: np.ndarray) -> np.ndarray:
        """Inverse-square push away from each of the four canvas borders."""
        width, height = self._canvas_size
        force = np.zeros_like(pos)

        walls = (
            (0, 0.0 - pos[:, 0]),
            (0, width - pos[:, 0]),
            (1, 0.0 - pos[:, 1]),
            (1, height - pos[:, 1]),
        )
        for axis, gap in walls:
            d = np.maximum(np.abs(gap), EPS)
            force[:, axis] -= (gap / d) * (self._wall_repulsion / (d * d))

        return force


__all__ = ["EadesLayout", "EPS", "LOCKED_PADDING"]
