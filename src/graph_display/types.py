"""
Common types for the graph display engine.

This module provides the fundamental value types shared by the layout
engine, the spectral solver and the display orchestrator:
- Vector2D: Immutable 2D point/vector
- EventType: Layout lifecycle events
- Event: Event payload for callbacks
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Iterator, Optional, Sequence, TypedDict, Union


class EventType(IntEnum):
    """
    Layout lifecycle events.

    - start: Layout was (re)initialized
    - tick: Fired once per run_iterations() call (for animation)
    - end: Layout was stopped
    """

    start = 0
    tick = 1
    end = 2


class Event(TypedDict, total=False):
    """Event payload passed to event listeners."""

    type: EventType
    iterations: int
    vertex_count: int


@dataclass(frozen=True)
class Vector2D:
    """
    Immutable 2D point/vector.

    All operations return new vectors. Operators are provided for the
    common cases (``a + b``, ``a - b``, ``a * c``, ``-a``).
    """

    x: float = 0.0
    y: float = 0.0

    def add(self, v: Vector2D) -> Vector2D:
        return Vector2D(self.x + v.x, self.y + v.y)

    def sub(self, v: Vector2D) -> Vector2D:
        return Vector2D(self.x - v.x, self.y - v.y)

    def scale(self, c: float) -> Vector2D:
        return Vector2D(self.x * c, self.y * c)

    def dot(self, v: Vector2D) -> float:
        return self.x * v.x + self.y * v.y

    def cross(self, v: Vector2D) -> float:
        """Z component of the 3D cross product."""
        return self.x * v.y - self.y * v.x

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def distance(self, v: Vector2D) -> float:
        return self.sub(v).norm()

    def angle(self) -> float:
        """Angle from the positive x axis, in radians."""
        return math.atan2(self.y, self.x)

    def rotate(self, theta: float) -> Vector2D:
        """Rotate counter-clockwise by ``theta`` radians."""
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        return Vector2D(self.x * cos_t - self.y * sin_t, self.x * sin_t + self.y * cos_t)

    def project(self, v: Vector2D) -> Vector2D:
        """
        Project this vector onto ``v``.

        Projection onto the zero vector is the zero vector.
        """
        denom = v.dot(v)
        if denom == 0:
            return Vector2D(0.0, 0.0)
        return v.scale(self.dot(v) / denom)

    def __add__(self, other: Vector2D) -> Vector2D:
        return self.add(other)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return self.sub(other)

    def __mul__(self, c: float) -> Vector2D:
        return self.scale(c)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Vector2D(x={self.x:.2f}, y={self.y:.2f})"


# Type aliases for callbacks
EventCallback = Callable[[Optional[Event]], None]

Edge = tuple[int, int]
"""Directed edge as (source, target) vertex indices."""

SizeType = Union[tuple[float, float], list[float], Sequence[float]]
"""Canvas size: (width, height) tuple, list, or sequence."""


__all__ = [
    "EventType",
    "Event",
    "EventCallback",
    "Vector2D",
    "Edge",
    "SizeType",
]
