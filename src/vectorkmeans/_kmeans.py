import logging
import time
from dataclasses import dataclass, field

import numpy as np

from ._cluster import Cluster, clusters_equal
from ._distance import nearest
from ._exceptions import InvalidKError
from ._vector import Vector

logger = logging.getLogger(__name__)


@dataclass
class KMeansRequest:
    """Configuration of a single clustering run.

    Args:
        k (int): Number of centroids to pick. Must be at least 2 and below the number of points.
        points (list[Vector]): The points to cluster.
        seed (int | None, optional): Seed for the centroid selection. None or a
            non-positive seed uses the current time. Defaults to 0.
    """

    k: int
    points: list[Vector] = field(default_factory=list)
    seed: int | None = 0


def resolve_seed(seed: int | None) -> int:
    """Returns ``seed``, or the current Unix time when it is None or non-positive."""
    if seed is None or seed <= 0:
        return int(time.time())
    return int(seed)


def select_centroid_indices(points: list[Vector], k: int, seed: int) -> list[int]:
    """Picks the indices of ``k`` points with distinct signatures.

    The indices are taken in the order of a permutation seeded with ``seed``;
    an index whose point shares its signature with an already picked one is
    skipped.

    Args:
        points (list[Vector]): Points to choose from.
        k (int): Number of indices to pick.
        seed (int): Seed of the generator, local to this call.

    Returns:
        list[int]: ``k`` indices into ``points``.

    Raises:
        InvalidKError: If fewer than ``k`` distinct signatures exist.
    """
    rng = np.random.default_rng(seed)
    picked = []
    signatures = set()
    for i in rng.permutation(len(points)):
        signature = points[i].signature
        if signature in signatures:
            continue
        signatures.add(signature)
        picked.append(int(i))
        if len(picked) == k:
            return picked
    raise InvalidKError(f"k={k} > number of distinct points={len(signatures)}")


def assign_points(points: list[Vector], centroid_indices: list[int]) -> Cluster:
    """Runs one assignment pass over fixed centroids.

    Centroid points become keys of the cluster, in the order they were picked;
    a point with the same signature as a centroid is that centroid. Every
    other point is appended to the members of its nearest centroid.

    Args:
        points (list[Vector]): All points, in input order.
        centroid_indices (list[int]): Indices into ``points`` of the centroids.

    Returns:
        Cluster: The assignment produced by this pass.

    Raises:
        DimensionMismatchError: If a point and a centroid differ in length.
    """
    centroids = [points[i] for i in centroid_indices]
    centroid_signatures = {centroid.signature for centroid in centroids}

    cluster = Cluster()
    for centroid in centroids:
        cluster.add_centroid(centroid)
    for point in points:
        if point.signature in centroid_signatures:
            continue
        closest = nearest(point, centroids)
        cluster.add_member(centroids[closest], point)
    return cluster


def run_kmeans(request: KMeansRequest) -> Cluster:
    """Clusters ``request.points`` around ``request.k`` centroids picked among them.

    Centroids are drawn once, from a permutation seeded with ``request.seed``,
    and stay fixed. Points are then assigned to their nearest centroid until
    two consecutive passes produce the same cluster. With fixed centroids the
    second pass always repeats the first, so a run performs exactly two passes.

    Args:
        request (KMeansRequest): The run configuration.

    Returns:
        Cluster: Mapping of each centroid to the points closest to it.

    Raises:
        InvalidKError: If ``k < 2``, ``k >= len(points)`` or fewer than ``k`` points
            have distinct signatures.
        DimensionMismatchError: If the points do not all have the same length.
    """
    k = request.k
    points = list(request.points)

    if k < 2:
        raise InvalidKError("at least 2 centroids are to be picked")
    if k >= len(points):
        raise InvalidKError(f"k={k} >= len(points)={len(points)}")

    seed = resolve_seed(request.seed)
    centroid_indices = select_centroid_indices(points, k, seed)
    logger.debug("Seed %d picked centroid indices %s", seed, centroid_indices)

    last_cluster = None
    passes = 0
    while True:
        current_cluster = assign_points(points, centroid_indices)
        passes += 1
        converged = clusters_equal(last_cluster, current_cluster)
        logger.debug("Pass %d over %d points, converged: %s", passes, len(points), converged)
        if converged:
            break
        last_cluster = current_cluster

    last_cluster.passes = passes
    logger.info("Clustered %d points around %d centroids in %d passes", len(points), k, passes)
    return last_cluster


def kmeans(k: int, *points: Vector, seed: int | None = 0) -> Cluster:
    """Shorthand for ``run_kmeans(KMeansRequest(k, list(points), seed))``."""
    return run_kmeans(KMeansRequest(k=k, points=list(points), seed=seed))
