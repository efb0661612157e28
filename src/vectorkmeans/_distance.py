import logging
from typing import Any, Sequence

import numpy as np

from ._exceptions import DimensionMismatchError
from ._vector import Transformer, Vector, quantify_as_float

logger = logging.getLogger(__name__)


def _fetch(vector: Vector, i: int) -> Any:
    try:
        return vector.dimension(i)
    except LookupError as err:
        # Counted as a zero contribution, the distance itself still succeeds.
        logger.debug("Could not fetch dimension %d of %r: %s", i, vector, err)
        return None


def transformed_distance(transform: Transformer | None, p: Vector, q: Vector) -> float:
    """Calculates the Euclidean distance between two vectors.

    sqrt((p1 - q1)^2 + (p2 - q2)^2 + ... + (pn - qn)^2)

    Args:
        transform (Transformer | None): Maps each raw dimension value to a float.
            When None, real numbers are used as is and anything else counts as 0.0.
        p (Vector): First vector.
        q (Vector): Second vector.

    Returns:
        float: The Euclidean distance between the two vectors.

    Raises:
        DimensionMismatchError: If the vectors have different lengths.
    """
    p_len, q_len = len(p), len(q)
    if p_len != q_len:
        raise DimensionMismatchError(f"len(p)={p_len} != len(q)={q_len}")

    p_values = np.empty(p_len)
    q_values = np.empty(q_len)
    for i in range(p_len):
        p_dim, q_dim = _fetch(p, i), _fetch(q, i)
        p_values[i] = 0.0 if p_dim is None else quantify_as_float(transform, p_dim)
        q_values[i] = 0.0 if q_dim is None else quantify_as_float(transform, q_dim)

    return float(np.sqrt(np.sum((p_values - q_values) ** 2)))


def euclidean_distance(p: Vector, q: Vector) -> float:
    """Calculates the untransformed Euclidean distance between two vectors."""
    return transformed_distance(None, p, q)


def distances(
    subject: Vector, centroids: Sequence[Vector], transform: Transformer | None = None
) -> list[float]:
    """Calculates the distance from ``subject`` to every centroid, in centroid order."""
    return [transformed_distance(transform, subject, centroid) for centroid in centroids]


def nearest(
    subject: Vector, centroids: Sequence[Vector], transform: Transformer | None = None
) -> int | None:
    """Finds the index of the centroid closest to ``subject``.

    Centroids are scanned in ascending index order and only a strictly smaller
    distance replaces the current best, so the lowest index wins a tie.

    Args:
        subject (Vector): The point to place.
        centroids (Sequence[Vector]): Candidate centroids.
        transform (Transformer | None): Passed through to the distance engine.

    Returns:
        int | None: Index of the closest centroid, or None when there are no centroids.
    """
    centroid_distances = distances(subject, centroids, transform)
    if not centroid_distances:
        return None

    best_index = 0
    best_distance = centroid_distances[0]
    for j, distance in enumerate(centroid_distances):
        if distance < best_distance:
            best_distance = distance
            best_index = j
    return best_index
