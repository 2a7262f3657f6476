"""
Spectral analysis of graph similarity matrices.

This module computes the eigenvalues of a symmetric matrix by bisection,
using inertia counts from a congruence reduction instead of an
eigen-decomposition.
"""

from .bisection import INTERVAL_TOLERANCE, bisect_eigenvalues
from .inertia import PIVOT_TOLERANCE, Inertia, inertia, shifted
from .solver import SpectralSolver

__all__ = [
    "SpectralSolver",
    "bisect_eigenvalues",
    "inertia",
    "shifted",
    "Inertia",
    "INTERVAL_TOLERANCE",
    "PIVOT_TOLERANCE",
]
