# From root: python scripts/earthquakes.py --src all_week.geojson -k 10

import argparse
import json
import logging
from dataclasses import dataclass

import pandas as pd

from vectorkmeans import Vector, kmeans

logger = logging.getLogger("earthquakes")


@dataclass(frozen=True)
class QuakeVector:
    """A USGS earthquake feature clustered on where it happened."""

    latitude: float
    longitude: float
    depth: float
    place: str = ""
    magnitude: float | None = None

    def __len__(self) -> int:
        return 3

    def dimension(self, i: int) -> float:
        if i == 0:
            return self.latitude
        if i == 1:
            return self.longitude
        if i == 2:
            return self.depth
        raise IndexError(f"dimension {i} is not tracked")

    @property
    def signature(self) -> str:
        return f"{self.latitude:f}-{self.longitude:f}-{self.depth:f}"


def load_features(src: str) -> pd.DataFrame:
    """
    Load the features of a USGS GeoJSON feature collection.

    Args:
        src (str): Path of the GeoJSON file.

    Returns:
        pd.DataFrame: One row per feature with latitude, longitude, depth, place and magnitude.
    """
    with open(src, encoding="utf-8") as f:
        collection = json.load(f)

    df = pd.json_normalize(collection.get("features", []))
    if df.empty:
        return pd.DataFrame(columns=["latitude", "longitude", "depth", "place", "magnitude"])

    coordinates = pd.DataFrame(
        df["geometry.coordinates"].tolist(), columns=["longitude", "latitude", "depth"]
    )
    coordinates["place"] = df.get("properties.place", "")
    coordinates["magnitude"] = df.get("properties.mag")
    return coordinates


def features_to_vectors(df: pd.DataFrame) -> list[Vector]:
    return [
        QuakeVector(
            latitude=row.latitude,
            longitude=row.longitude,
            depth=row.depth,
            place="" if pd.isna(row.place) else row.place,
            magnitude=row.magnitude,
        )
        for row in df.itertuples(index=False)
    ]


def main() -> None:
    parser = argparse.ArgumentParser(description="Cluster USGS earthquakes by location and depth")
    parser.add_argument("--src", required=True, help="the path to load the earthquake data from")
    parser.add_argument("-k", type=int, default=10, help="number of centroids")
    parser.add_argument("--seed", type=int, default=0, help="seed, non-positive uses the clock")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    df = load_features(args.src)
    logger.info("Loaded %d features from %s", len(df), args.src)
    cluster = kmeans(args.k, *features_to_vectors(df), seed=args.seed)

    for centroid, members in cluster.items():
        print(f"\nStart of cluster:key: {centroid.latitude}, {centroid.longitude}, {centroid.depth}")
        for i, quake in enumerate(members):
            print(f"\t#{i}: {quake.latitude}, {quake.longitude}, {quake.depth} {quake.place}")
        print("\n")


if __name__ == "__main__":
    main()
