from ._cluster import Cluster, clusters_equal
from ._distance import distances, euclidean_distance, nearest, transformed_distance
from ._estimator import VectorKMeans
from ._exceptions import (
    DimensionIndexOutOfBoundsError,
    DimensionMismatchError,
    InvalidKError,
    KMeansError,
)
from ._kmeans import KMeansRequest, kmeans, run_kmeans
from ._vector import Coordinate, Transformer, Vector

__all__ = [
    "Cluster",
    "Coordinate",
    "DimensionIndexOutOfBoundsError",
    "DimensionMismatchError",
    "InvalidKError",
    "KMeansError",
    "KMeansRequest",
    "Transformer",
    "Vector",
    "VectorKMeans",
    "clusters_equal",
    "distances",
    "euclidean_distance",
    "kmeans",
    "nearest",
    "run_kmeans",
    "transformed_distance",
]
