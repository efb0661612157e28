import numbers

import numpy as np
import numpy.typing as npt
import pandas as pd
from sklearn.base import BaseEstimator, ClusterMixin

from ._distance import nearest
from ._kmeans import KMeansRequest, run_kmeans
from ._vector import Coordinate, Vector, quantify_as_float


def as_points(X: pd.DataFrame | npt.ArrayLike | list[Vector]) -> list[Vector]:
    """Converts estimator input into a list of vectors.

    Args:
        X (pd.DataFrame | npt.ArrayLike | list[Vector]): A DataFrame, a 2-D array-like
            or a sequence of vectors. Each row of tabular input becomes a Coordinate.

    Returns:
        list[Vector]: One vector per row.

    Raises:
        ValueError: If array-like input is not 2-D.
    """
    if isinstance(X, pd.DataFrame):
        return [Coordinate.from_iterable(row) for row in X.itertuples(index=False, name=None)]
    if not isinstance(X, np.ndarray):
        X = list(X)
        if X and all(isinstance(x, Vector) for x in X):
            return X
        X = np.asarray(X)
    if X.ndim != 2:
        raise ValueError(f"Expected 2D data, got an array of shape {X.shape}")
    return [Coordinate.from_iterable(row) for row in X]


class VectorKMeans(ClusterMixin, BaseEstimator):
    """K-means over fixed centroids picked among the samples.

    Read more in ``run_kmeans``. Centroids are input samples chosen once from a
    seeded permutation and never moved; each sample is labelled with the
    centroid closest to it.

    Args:
        n_clusters (int, optional): Number of centroids. Defaults to 8.
        random_state (int, optional): Seed for the centroid selection. None or a
            non-positive value seeds from the current time. Only integers are
            accepted, not ``np.random.RandomState`` instances. Defaults to None.

    Attributes:
        cluster_ (Cluster): The fitted assignment.
        centroids_ (list[Vector]): Centroids, in label order.
        centroid_indices_ (npt.NDArray): Input index of each centroid.
        cluster_centers_ (npt.NDArray): Centroid values of shape (n_clusters, n_features).
        labels_ (npt.NDArray): Label of each training sample.
        n_iter_ (int): Number of assignment passes performed.
    """

    def __init__(self, n_clusters: int = 8, *, random_state: int = None):
        self.n_clusters = n_clusters
        self.random_state = random_state

    def fit(self, X: pd.DataFrame | npt.ArrayLike, y: npt.ArrayLike = None):
        """Compute the clustering.

        Args:
            X (pd.DataFrame | npt.ArrayLike): Training instances of shape (n_samples, n_features),
                or a sequence of vectors.
            y (npt.ArrayLike): Ignored. Not used, present here for API consistency by convention.

        Returns:
            self (object): Fitted estimator.
        """
        if self.random_state is not None and (
            isinstance(self.random_state, bool)
            or not isinstance(self.random_state, numbers.Integral)
        ):
            raise ValueError(
                f"random_state must be an integer or None, got {type(self.random_state).__name__}"
            )

        points = as_points(X)
        cluster = run_kmeans(
            KMeansRequest(k=self.n_clusters, points=points, seed=self.random_state)
        )

        labels_by_signature = {}
        for label, (centroid, members) in enumerate(cluster.items()):
            labels_by_signature[centroid.signature] = label
            for member in members:
                labels_by_signature[member.signature] = label

        first_index = {}
        for i, point in enumerate(points):
            first_index.setdefault(point.signature, i)

        self.cluster_ = cluster
        self.centroids_ = cluster.centroids()
        self.centroid_indices_ = np.array([first_index[c.signature] for c in self.centroids_])
        self.cluster_centers_ = np.array(
            [[quantify_as_float(None, c.dimension(i)) for i in range(len(c))] for c in self.centroids_]
        )
        self.labels_ = np.array([labels_by_signature[p.signature] for p in points])
        self.n_iter_ = cluster.passes
        return self

    def predict(self, X: pd.DataFrame | npt.ArrayLike) -> np.ndarray:
        """
        Predict the closest centroid each sample in X belongs to.

        Args:
            X (pd.DataFrame | npt.ArrayLike): New data to predict.

        Returns:
            np.ndarray: Index of the centroid each sample belongs to.
        """
        if getattr(self, "centroids_", None) is None:
            raise ValueError("The model has not been trained yet. Please call 'fit' first.")
        return np.array([nearest(point, self.centroids_) for point in as_points(X)])
