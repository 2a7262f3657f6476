"""
Display orchestrator.

GraphDisplay pairs an EadesLayout with a SpectralSolver over the same
graph. It forwards topology changes to both, turns pointer input into
drag and lock operations, and hands read-only snapshots to a renderer.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from .force.eades import EadesLayout
from .graph import Graph
from .spectral.solver import SpectralSolver
from .types import Edge, EventCallback, Vector2D


@dataclass(frozen=True)
class DisplaySnapshot:
    """Everything a renderer needs to draw one frame."""

    positions: tuple[Vector2D, ...]
    locked: tuple[bool, ...]
    dragging: tuple[bool, ...]
    edges: tuple[Edge, ...]
    directed: bool
    labels: tuple[str, ...]
    vertex_radius: float
    eigenvalues: Optional[tuple[float, ...]] = None


class GraphDisplay:
    """
    Owns the layout engine and spectral solver for one displayed graph.

    A single thread is expected to drive both the animation loop (step())
    and external edits (rebuild(), pointer events).

    Example:
        display = GraphDisplay(graph, 800, 600, vertex_radius=20)
        display.step()                     # once per animation frame
        frame = display.snapshot()

        display.rebuild(new_graph)         # keeps existing vertex state
        display.compute_spectrum()         # cached until the next rebuild
    """

    def __init__(
        self,
        graph: Graph,
        width: float,
        height: float,
        vertex_radius: float = 20.0,
        *,
        random_seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        iterations_per_step: int = 2,
        click_threshold: float = 4.0,
        warn_threshold: int = 300,
        on_tick: Optional[EventCallback] = None,
    ) -> None:
        """
        Initialize display with a polygon placement of graph.

        Args:
            graph: Initial graph
            width: Canvas width
            height: Canvas height
            vertex_radius: Drawn vertex radius
            random_seed: Seed for the placement of vertices added later
            rng: Random generator to use instead of random_seed
            iterations_per_step: Layout iterations per animation frame
            click_threshold: Pointer travel (in canvas units) separating a
                click, which toggles the lock, from a drag
            warn_threshold: Vertex count above which computing the spectrum warns
            on_tick: Callback fired after every batch of layout iterations
        """
        self._layout: EadesLayout = EadesLayout(
            graph=graph,
            size=(width, height),
            vertex_radius=vertex_radius,
            random_seed=random_seed,
            rng=rng,
            on_tick=on_tick,
            iterations_per_step=iterations_per_step,
        )
        self._solver: SpectralSolver = SpectralSolver(graph, warn_threshold=warn_threshold)
        self._click_threshold: float = max(0.0, float(click_threshold))
        self._show_spectrum: bool = False

        # Pointer interaction state
        self._held: Optional[int] = None
        self._press_point: Optional[Vector2D] = None

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def graph(self) -> Graph:
        """Get a copy of the displayed graph; pass an edited copy to rebuild()."""
        return self._layout.graph

    @property
    def layout(self) -> EadesLayout:
        return self._layout

    @property
    def solver(self) -> SpectralSolver:
        return self._solver

    @property
    def vertex_radius(self) -> float:
        return self._layout.vertex_radius

    @property
    def click_threshold(self) -> float:
        return self._click_threshold

    @click_threshold.setter
    def click_threshold(self, value: float) -> None:
        self._click_threshold = max(0.0, float(value))

    @property
    def directed(self) -> bool:
        return self.graph.directed

    @directed.setter
    def directed(self, value: bool) -> None:
        """Change arrow rendering only; layout state and spectrum are kept."""
        graph = self._layout.graph
        graph.directed = bool(value)
        self._layout.rebuild(graph)

    def set_directed(self, value: bool) -> None:
        self.directed = value

    @property
    def show_spectrum(self) -> bool:
        """Whether snapshots include the spectrum."""
        return self._show_spectrum

    @show_spectrum.setter
    def show_spectrum(self, value: bool) -> None:
        self._show_spectrum = bool(value)

    def toggle_spectrum(self) -> bool:
        """Flip show_spectrum and return the new value."""
        self._show_spectrum = not self._show_spectrum
        return self._show_spectrum

    # -------------------------------------------------------------------------
    # Topology
    # -------------------------------------------------------------------------

    def rebuild(self, graph: Graph) -> None:
        """
        Replace the displayed graph.

        Existing vertices keep their layout state, new ones appear near the
        canvas center, and the cached spectrum is dropped. A pointer hold on
        a vertex that no longer exists is cancelled.
        """
        self._layout.rebuild(graph)
        self._solver.graph = graph
        if self._held is not None and self._held >= graph.n:
            self._held = None
            self._press_point = None

    update_graph = rebuild

    def reset(self) -> None:
        """Return every vertex to the initial polygon placement."""
        self._layout.reset()
        self._held = None
        self._press_point = None

    # -------------------------------------------------------------------------
    # Simulation
    # -------------------------------------------------------------------------

    def step(self) -> None:
        """Advance the layout by one animation frame."""
        self._layout.step()

    def run_iterations(self, k: int) -> None:
        self._layout.run_iterations(k)

    def stop(self) -> None:
        """Freeze the drawing: step() does nothing until resume()."""
        self._layout.stop()

    def resume(self) -> None:
        self._layout.resume()

    # -------------------------------------------------------------------------
    # Vertex operations
    # -------------------------------------------------------------------------

    def find_vertex_at(self, x: float, y: float) -> Optional[int]:
        return self._layout.find_vertex_at(x, y)

    def set_position(self, i: int, x: float, y: float) -> None:
        self._layout.set_position(i, x, y)

    def toggle_locked(self, i: int) -> bool:
        return self._layout.toggle_locked(i)

    def set_dragging(self, i: int, value: bool) -> None:
        self._layout.set_dragging(i, value)

    # -------------------------------------------------------------------------
    # Pointer interaction
    # -------------------------------------------------------------------------

    def press(self, x: float, y: float) -> Optional[int]:
        """
        Start holding the vertex under (x, y), if any.

        Returns:
            Index of the held vertex, or None
        """
        vertex = self._layout.find_vertex_at(x, y)
        if vertex is not None:
            self._layout.set_dragging(vertex, True)
            self._held = vertex
            self._press_point = Vector2D(float(x), float(y))
        return vertex

    def move(self, x: float, y: float) -> None:
        """Drag the held vertex once the pointer left the click radius."""
        if self._held is None or self._press_point is None:
            return
        if self._press_point.distance(Vector2D(float(x), float(y))) > self._click_threshold:
            self._layout.set_position(self._held, x, y)

    def release(self, x: float, y: float) -> None:
        """
        Let go of the held vertex.

        A release within the click radius of the press toggles the lock.
        """
        if self._held is not None and self._press_point is not None:
            travel = self._press_point.distance(Vector2D(float(x), float(y)))
            if travel < self._click_threshold:
                self._layout.toggle_locked(self._held)
            self._layout.set_dragging(self._held, False)
        self._held = None
        self._press_point = None

    @property
    def held_vertex(self) -> Optional[int]:
        """Vertex currently held by the pointer."""
        return self._held

    # -------------------------------------------------------------------------
    # Spectrum
    # -------------------------------------------------------------------------

    def compute_spectrum(self) -> list[float]:
        """Get the ascending eigenvalues of the similarity matrix (cached)."""
        return self._solver.compute()

    def spectrum_lines(self, precision: int = 4) -> list[str]:
        """
        Format the spectrum for a text panel.

        Returns:
            A heading followed by one fixed-point line per eigenvalue
        """
        lines = ["Eigenvalues:"]
        for value in self.compute_spectrum():
            # Avoid printing "-0.0000" for values that round to zero
            text = f"{value:.{precision}f}"
            if float(text) == 0.0:
                text = f"{0.0:.{precision}f}"
            lines.append(text)
        return lines

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def snapshot(self) -> DisplaySnapshot:
        """
        Capture the current frame.

        The spectrum is included (and computed if needed) only while
        show_spectrum is set.
        """
        graph = self.graph
        eigenvalues = tuple(self.compute_spectrum()) if self._show_spectrum else None
        return DisplaySnapshot(
            positions=tuple(self._layout.positions),
            locked=tuple(self._layout.locked),
            dragging=tuple(self._layout.dragging),
            edges=tuple(graph.edges),
            directed=graph.directed,
            labels=tuple(graph.label(i) for i in range(graph.n)),
            vertex_radius=self._layout.vertex_radius,
            eigenvalues=eigenvalues,
        )


__all__ = ["DisplaySnapshot", "GraphDisplay"]
