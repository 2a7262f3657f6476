"""
Initial vertex placement.

- polygon_placement: all vertices evenly spaced on a circle (first layout)
- disk_placement: uniformly random points in a small disk around the
  canvas center (vertices added by a rebuild)
"""

from __future__ import annotations

import math
import random

import numpy as np

# Gap between the polygon and the canvas border, split over both sides
POLYGON_MARGIN = 100.0


def polygon_placement(n: int, width: float, height: float) -> np.ndarray:
    """
    Place n vertices on a regular polygon centered in the canvas.

    Angles are measured from the top of the circle: vertex i sits at
    ``i * theta + theta / 2`` with ``x = sin(angle)`` and ``y = cos(angle)``.
    For odd n the center moves down by half the gap between the circle and
    the polygon's flat side so the drawing looks balanced.

    Args:
        n: Number of vertices
        width: Canvas width
        height: Canvas height

    Returns:
        (n, 2) array of positions
    """
    positions = np.zeros((n, 2), dtype=np.float64)
    if n == 0:
        return positions

    radius = (min(width, height) - POLYGON_MARGIN) / 2
    cx = width / 2
    cy = height / 2
    theta = 2 * math.pi / n

    if n % 2 == 1:
        cy += (radius - radius * math.cos(theta / 2)) / 2

    for i in range(n):
        angle = i * theta + theta / 2
        positions[i, 0] = cx + math.sin(angle) * radius
        positions[i, 1] = cy + math.cos(angle) * radius

    return positions


def disk_placement(
    count: int,
    width: float,
    height: float,
    rng: random.Random,
    fraction: float = 0.12,
) -> np.ndarray:
    """
    Place vertices uniformly at random inside a disk at the canvas center.

    The disk radius is ``fraction * min(width, height)``. Taking the square
    root of the radial sample keeps the density uniform over the area.

    Returns:
        (count, 2) array of positions
    """
    positions = np.zeros((count, 2), dtype=np.float64)
    spread = min(width, height) * fraction
    cx = width / 2
    cy = height / 2

    for i in range(count):
        angle = rng.random() * 2 * math.pi
        r = spread * math.sqrt(rng.random())
        positions[i, 0] = cx + r * math.cos(angle)
        positions[i, 1] = cy + r * math.sin(angle)

    return positions


__all__ = [
    "POLYGON_MARGIN",
    "polygon_placement",
    "disk_placement",
]
