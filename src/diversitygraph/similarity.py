from __future__ import annotations

"""
Distance utilities for the diversitygraph project.

Responsibilities:
- Euclidean distance between two attribute vectors
- Pairwise distance matrix over an attribute matrix using scikit-learn
- Nearest-peer lookups used for hover text in the figure

Main entry points:
- distance(a, b)
- build_distance_matrix(vectors)
"""

from typing import List, Sequence

import logging
import math

import numpy as np
from sklearn.metrics import pairwise_distances

logger = logging.getLogger(__name__)


class VectorLengthMismatchError(ValueError):
    """Raised when two attribute vectors do not have the same length."""


# ---------------------------------------------------------------------------
# Distance
# ---------------------------------------------------------------------------


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Euclidean distance between two attribute vectors.

    Vectors must have the same length; coordinates are compared by position,
    so both must come from the same field order.

    Raises
    ------
    VectorLengthMismatchError
        If len(a) != len(b).
    """
    if len(a) != len(b):
        raise VectorLengthMismatchError(
            f"Cannot compare vectors of length {len(a)} and {len(b)}"
        )

    total = 0.0
    for x, y in zip(a, b):
        diff = float(x) - float(y)
        total += diff * diff

    return math.sqrt(total)


def build_distance_matrix(vectors: Sequence[Sequence[float]]) -> np.ndarray:
    """
    Build the pairwise distance matrix between attribute vectors.

    Uses scikit-learn's pairwise_distances with `distance` as the metric so
    that matrix entries match the graph edge weights exactly.

    Returns
    -------
    np.ndarray
        Array of shape (n, n); entry (i, j) is distance(vectors[i], vectors[j]).
    """
    if len(vectors) == 0:
        return np.zeros((0, 0), dtype=float)

    lengths = {len(v) for v in vectors}
    if len(lengths) != 1:
        raise VectorLengthMismatchError(
            f"Attribute vectors have mixed lengths: {sorted(lengths)}"
        )

    X = np.asarray(vectors, dtype=float)

    logger.info(
        "Computing pairwise distances for %d vectors of length %d",
        X.shape[0],
        X.shape[1],
    )

    return pairwise_distances(X, metric=distance)


# ---------------------------------------------------------------------------
# Nearest peers
# ---------------------------------------------------------------------------


def nearest_peers(dist_matrix: np.ndarray) -> List[int]:
    """
    Return, for each row, the index of the closest other row.

    A single-row matrix has no peer; its entry is -1. Ties go to the lowest
    index.
    """
    if dist_matrix.ndim != 2 or dist_matrix.shape[0] != dist_matrix.shape[1]:
        raise ValueError("dist_matrix must be square")

    n = dist_matrix.shape[0]
    if n < 2:
        return [-1] * n

    masked = dist_matrix.astype(float).copy()
    np.fill_diagonal(masked, np.inf)

    peers = [int(i) for i in np.argmin(masked, axis=1)]

    logger.debug("Computed nearest peers for %d rows", n)

    return peers
