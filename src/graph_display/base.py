"""
Base classes for layout engines.

This module provides abstract base classes that define the common interface
and shared functionality for layout engines:

- BaseLayout: Abstract base with event system, graph and canvas management
- IterativeLayout: For animated layouts driven by an external tick loop
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from typing_extensions import Self

from .graph import Graph
from .types import Event, EventCallback, EventType, SizeType
from .validation import validate_canvas_size, validate_iterations


class BaseLayout(ABC):
    """
    Abstract base class for layout engines.

    Provides shared infrastructure:
    - Event system (start/tick/end events)
    - Current graph
    - Canvas size and vertex radius
    - Injectable random source

    The random source is a ``random.Random`` instance owned by the layout
    (or passed in by the caller), never the module-level generator.
    """

    def __init__(
        self,
        *,
        graph: Optional[Graph] = None,
        size: SizeType = (1.0, 1.0),
        vertex_radius: float = 20.0,
        random_seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        on_start: Optional[EventCallback] = None,
        on_tick: Optional[EventCallback] = None,
        on_end: Optional[EventCallback] = None,
    ) -> None:
        """
        Initialize layout with configuration.

        Args:
            graph: Graph to lay out (defaults to an empty graph)
            size: Canvas size as (width, height)
            vertex_radius: Radius of a drawn vertex, used for clamping and hit tests
            random_seed: Seed for a private random generator
            rng: Random generator to use instead (takes precedence over random_seed)
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
        """
        self._graph: Graph = graph.copy() if graph is not None else Graph(0)
        self._canvas_size: tuple[float, float] = (1.0, 1.0)
        self._vertex_radius: float = 20.0
        self._events: dict[EventType, EventCallback] = {}
        self._random_seed: Optional[int] = random_seed
        self._owns_rng: bool = rng is None
        self._rng: random.Random = rng if rng is not None else random.Random(random_seed)

        self.size = size
        self.vertex_radius = vertex_radius

        # Register event callbacks
        if on_start:
            self._events[EventType.start] = on_start
        if on_tick:
            self._events[EventType.tick] = on_tick
        if on_end:
            self._events[EventType.end] = on_end

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def graph(self) -> Graph:
        """
        Get a copy of the current graph.

        The layout keeps its own snapshot, so editing the returned graph has
        no effect until it is passed to rebuild().
        """
        return self._graph.copy()

    @property
    def vertex_count(self) -> int:
        """Get the number of vertices in the current graph."""
        return self._graph.n

    @property
    def size(self) -> tuple[float, float]:
        """Get canvas size as (width, height)."""
        return self._canvas_size

    @size.setter
    def size(self, value: SizeType) -> None:
        """
        Set canvas size.

        Args:
            value: (width, height) tuple, list, or sequence

        Raises:
            InvalidCanvasSizeError: If width or height is not positive.
        """
        width, height = validate_canvas_size(value)
        self._canvas_size = (width, height)

    @property
    def width(self) -> float:
        return self._canvas_size[0]

    @property
    def height(self) -> float:
        return self._canvas_size[1]

    @property
    def vertex_radius(self) -> float:
        """Get drawn vertex radius."""
        return self._vertex_radius

    @vertex_radius.setter
    def vertex_radius(self, value: float) -> None:
        """Set drawn vertex radius (non-negative)."""
        self._vertex_radius = max(0.0, float(value))

    @property
    def random_seed(self) -> Optional[int]:
        """Get the seed the private random generator was created with."""
        return self._random_seed

    @random_seed.setter
    def random_seed(self, value: Optional[int]) -> None:
        """
        Reseed the random generator.

        A generator created by the layout is reseeded in place. A generator
        passed in by the caller is left untouched and replaced by a private
        one seeded with value.
        """
        self._random_seed = value
        if self._owns_rng:
            self._rng.seed(value)
        else:
            self._rng = random.Random(value)
            self._owns_rng = True

    @property
    def rng(self) -> random.Random:
        """Get the random generator used for placement."""
        return self._rng

    # -------------------------------------------------------------------------
    # Event System
    # -------------------------------------------------------------------------

    def on(self, event: EventType | str, callback: EventCallback) -> Self:
        """
        Subscribe to a layout event.

        Args:
            event: Event type (EventType enum or string name)
            callback: Function to call when event fires

        Returns:
            self (for chaining)
        """
        if isinstance(event, str):
            event = EventType[event]
        self._events[event] = callback
        return self

    def trigger(self, event: Event) -> None:
        """
        Trigger an event, calling the registered callback.

        Args:
            event: Event payload with type and optional data
        """
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    # -------------------------------------------------------------------------
    # Lifecycle Methods
    # -------------------------------------------------------------------------

    @abstractmethod
    def reset(self) -> Self:
        """
        Discard all per-vertex state and compute a fresh initial placement.

        Returns:
            self (for chaining)
        """
        pass

    @abstractmethod
    def rebuild(self, graph: Graph) -> Self:
        """
        Adopt a new graph, migrating per-vertex state where possible.

        Returns:
            self (for chaining)
        """
        pass


class IterativeLayout(BaseLayout):
    """
    Base class for layouts advanced by an external animation loop.

    The loop calls step() once per frame, which runs a fixed small number
    of iterations. run_iterations(k) runs exactly k iterations regardless
    of whether the layout is stopped.

    Example:
        layout = SomeForceLayout(graph=graph, size=(800, 600))
        while animating:
            layout.step()
            draw(layout.positions)
    """

    def __init__(
        self,
        *,
        graph: Optional[Graph] = None,
        size: SizeType = (1.0, 1.0),
        vertex_radius: float = 20.0,
        random_seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        on_start: Optional[EventCallback] = None,
        on_tick: Optional[EventCallback] = None,
        on_end: Optional[EventCallback] = None,
        # IterativeLayout-specific parameters
        iterations_per_step: int = 2,
    ) -> None:
        """
        Initialize iterative layout.

        Args:
            graph: Graph to lay out
            size: Canvas size as (width, height)
            vertex_radius: Drawn vertex radius
            random_seed: Seed for a private random generator
            rng: Random generator to use instead
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
            iterations_per_step: Iterations run by each step() call
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
        )
        self._iterations_per_step: int = validate_iterations(iterations_per_step)
        self._running: bool = True
        self._iteration: int = 0

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def iterations_per_step(self) -> int:
        """Get number of iterations per step() call."""
        return self._iterations_per_step

    @iterations_per_step.setter
    def iterations_per_step(self, value: int) -> None:
        """Set number of iterations per step() call."""
        self._iterations_per_step = validate_iterations(value)

    @property
    def running(self) -> bool:
        """True unless the layout has been stopped."""
        return self._running

    @property
    def iteration(self) -> int:
        """Total iterations run since the last reset."""
        return self._iteration

    # -------------------------------------------------------------------------
    # Lifecycle Methods
    # -------------------------------------------------------------------------

    @abstractmethod
    def tick(self) -> None:
        """Perform one iteration of the layout."""
        pass

    def run_iterations(self, k: int) -> Self:
        """
        Run exactly k iterations, then fire one tick event.

        Returns:
            self (for chaining)

        Raises:
            ValidationError: If k is negative
        """
        k = validate_iterations(k)
        for _ in range(k):
            self.tick()
        self._iteration += k
        self.trigger(
            {
                "type": EventType.tick,
                "iterations": k,
                "vertex_count": self.vertex_count,
            }
        )
        return self

    def step(self) -> Self:
        """Advance one animation frame (no-op while stopped)."""
        if not self._running:
            return self
        return self.run_iterations(self._iterations_per_step)

    def resume(self) -> Self:
        """Let step() advance the layout again."""
        self._running = True
        self.trigger({"type": EventType.start, "vertex_count": self.vertex_count})
        return self

    def stop(self) -> Self:
        """Freeze the layout: step() becomes a no-op until resume()."""
        self._running = False
        self.trigger({"type": EventType.end, "vertex_count": self.vertex_count})
        return self


__all__ = [
    "BaseLayout",
    "IterativeLayout",
]
