"""
Eigenvalue search by bisection on inertia counts.

Every open interval (lo, hi) on the stack carries two counts: how many
eigenvalues are known to lie at or below lo (``below``) and at or above hi
(``above``). The remaining ``n - below - above`` eigenvalues are inside
the interval. Splitting at the midpoint and taking the inertia of
A - mid*I tells how many fall on each side and how many sit exactly at
mid. Intervals that become narrower than the tolerance are reported as a
cluster of equal eigenvalues at their midpoint, which is how repeated
eigenvalues are resolved.

The search is iterative so graphs with many repeated eigenvalues cannot
exhaust the call stack.
"""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from .inertia import PIVOT_TOLERANCE, Inertia, inertia, shifted

# Intervals narrower than this are collapsed to a single cluster
INTERVAL_TOLERANCE = 1e-6


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def bisect_eigenvalues(
    matrix: np.ndarray,
    lo: Optional[float] = None,
    hi: Optional[float] = None,
    *,
    interval_tolerance: float = INTERVAL_TOLERANCE,
    pivot_tolerance: float = PIVOT_TOLERANCE,
    inertia_fn: Optional[Callable[[np.ndarray], Inertia]] = None,
) -> list[float]:
    """
    Find all eigenvalues of a symmetric matrix.

    The default search interval is [-n, n], which contains the spectrum of
    any n x n 0/1 matrix with zero diagonal. Callers with other matrices
    must pass bounds that enclose every eigenvalue.

    Args:
        matrix: Symmetric (n, n) matrix
        lo: Lower end of the search interval (default -n)
        hi: Upper end of the search interval (default n)
        interval_tolerance: Width below which an interval becomes a cluster
        pivot_tolerance: Zero tolerance of the inertia routine
        inertia_fn: Replacement inertia routine, called with A - mid*I

    Returns:
        Exactly n eigenvalues in ascending order, with multiplicity
    """
    A = np.asarray(matrix, dtype=np.float64)
    n = A.shape[0]
    if n == 0:
        return []

    lo = float(-n) if lo is None else float(lo)
    hi = float(n) if hi is None else float(hi)

    def count(mu: float) -> Inertia:
        B = shifted(A, mu)
        if inertia_fn is not None:
            return inertia_fn(B)
        return inertia(B, tol=pivot_tolerance, overwrite=True)

    eigenvalues: list[float] = []
    stack: list[tuple[float, float, int, int]] = [(lo, hi, 0, 0)]

    while stack:
        left, right, below, above = stack.pop()
        inside = n - below - above
        if inside <= 0:
            continue

        mid = (left + right) / 2
        if abs(right - left) < interval_tolerance:
            eigenvalues.extend([mid] * inside)
            continue

        negative, zero, _ = count(mid)

        # Inertia of a nearly singular shift can be off by one; keep the
        # counts consistent with what is already known about this interval.
        less = _clamp(negative, below, n - above)
        upto = _clamp(negative + zero, less, n - above)

        eigenvalues.extend([mid] * (upto - less))
        stack.append((mid, right, upto, above))
        stack.append((left, mid, below, n - less))

    eigenvalues.sort()
    return eigenvalues


__all__ = ["INTERVAL_TOLERANCE", "bisect_eigenvalues"]
