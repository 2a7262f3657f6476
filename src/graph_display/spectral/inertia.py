"""
Inertia of a symmetric matrix by congruence reduction.

By Sylvester's law of inertia, the numbers of negative, zero and positive
eigenvalues of a symmetric matrix B are preserved by any congruence
B -> P B P^T with P invertible. Reducing B to diagonal form with symmetric
row/column operations therefore yields its inertia from the signs of the
diagonal, without computing a single eigenvalue.

Applied to the shifted matrix A - mu*I, the inertia counts the eigenvalues
of A below, at and above mu.
"""

from __future__ import annotations

import math
from typing import NamedTuple, cast

import numpy as np

# Entries with absolute value below this are treated as zero
PIVOT_TOLERANCE = 1e-9


class Inertia(NamedTuple):
    """Counts of negative, zero and positive eigenvalues."""

    negative: int
    zero: int
    positive: int


def shifted(matrix: np.ndarray, mu: float) -> np.ndarray:
    """Return a float64 copy of ``matrix - mu * I``."""
    B = np.array(matrix, dtype=np.float64)
    B[np.diag_indices_from(B)] -= mu
    return cast(np.ndarray, B)


def _repair_zero_pivot(B: np.ndarray, k: int, tol: float) -> None:
    """
    Make B[k, k] nonzero by a congruence, if column k allows it.

    Adds (or subtracts) row i to row k and column i to column k for the
    first i > k with B[i, k] != 0. The new pivot is
    ``B[k, k] +/- 2 * B[i, k] + B[i, i]``; at least one sign gives a
    nonzero value whenever B[i, k] is nonzero.
    """
    n = B.shape[0]
    for i in range(k + 1, n):
        off = B[i, k]
        if abs(off) < tol:
            continue
        for sign in (1.0, -1.0):
            if abs(B[k, k] + 2 * sign * off + B[i, i]) >= tol:
                B[k, :] += sign * B[i, :]
                B[:, k] += sign * B[:, i]
                return
    # Column k is numerically zero below the diagonal: zero eigenvalue


def inertia(
    matrix: np.ndarray,
    tol: float = PIVOT_TOLERANCE,
    overwrite: bool = False,
) -> Inertia:
    """
    Compute the inertia of a symmetric matrix.

    For each pivot k the matrix is scaled so the pivot becomes +/-1, then
    every later row and column is cleared below/right of the pivot with
    the same multipliers, which keeps the matrix symmetric. A zero pivot
    is first repaired from a later row; if none can help, column k counts
    as a zero eigenvalue and is left alone.

    Args:
        matrix: Symmetric (n, n) matrix
        tol: Absolute tolerance for treating a value as zero
        overwrite: Reduce ``matrix`` in place (must already be float64)

    Returns:
        Inertia(negative, zero, positive)

    Raises:
        ValueError: If the matrix is not square
    """
    B = matrix if overwrite else np.array(matrix, dtype=np.float64)
    if B.ndim != 2 or B.shape[0] != B.shape[1]:
        raise ValueError(f"Expected a square matrix, got shape {B.shape}")

    n = B.shape[0]
    for k in range(n):
        if abs(B[k, k]) < tol:
            _repair_zero_pivot(B, k, tol)
        if abs(B[k, k]) < tol:
            continue

        scale = math.sqrt(abs(B[k, k]))
        B[k, k:] /= scale
        B[k:, k] /= scale

        pivot = B[k, k]
        beta = B[k + 1 :, k] / pivot
        gamma = B[k, k + 1 :] / pivot
        B[k + 1 :, :] -= np.outer(beta, B[k, :])
        B[:, k + 1 :] -= np.outer(B[:, k], gamma)

    diagonal = np.diag(B)
    negative = int(np.sum(diagonal <= -tol))
    positive = int(np.sum(diagonal >= tol))
    return Inertia(negative, n - negative - positive, positive)


__all__ = ["Inertia", "PIVOT_TOLERANCE", "inertia", "shifted"]
