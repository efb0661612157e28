import dataclasses
import json
from collections.abc import Iterable, Mapping
from typing import Any, Callable, Hashable, Iterator

from ._vector import Vector


class Cluster(Mapping):
    """Assignment of points to the centroids they are closest to.

    Behaves as a read-only mapping from centroid vector to the list of its
    member vectors. Entries are stored under the centroid signature, so any
    vector with the same signature as a centroid can be used to look it up.
    A centroid without members maps to an empty list.

    Attributes:
        passes (int): Number of assignment passes the run that produced this
            cluster performed. 0 for clusters built by hand.
    """

    def __init__(self) -> None:
        self._entries: dict[Hashable, tuple[Vector, list[Vector]]] = {}
        self.passes = 0

    @classmethod
    def from_mapping(cls, mapping: Mapping | None) -> "Cluster":
        """Builds a cluster from a mapping of centroid to members (None for no members)."""
        cluster = cls()
        if mapping is None:
            return cluster
        for centroid, members in mapping.items():
            cluster.add_centroid(centroid)
            for member in members or ():
                cluster.add_member(centroid, member)
        return cluster

    def add_centroid(self, centroid: Vector) -> None:
        """Makes sure ``centroid`` is a key, with no members if it is new."""
        if centroid.signature not in self._entries:
            self._entries[centroid.signature] = (centroid, [])

    def add_member(self, centroid: Vector, member: Vector) -> None:
        """Appends ``member`` to the member list of ``centroid``."""
        self.add_centroid(centroid)
        self._entries[centroid.signature][1].append(member)

    def centroids(self) -> list[Vector]:
        return [centroid for centroid, _ in self._entries.values()]

    def signature_map(self) -> dict[Hashable, list[Vector]]:
        return {signature: members for signature, (_, members) in self._entries.items()}

    def __getitem__(self, centroid: Vector) -> list[Vector]:
        try:
            return self._entries[centroid.signature][1]
        except (KeyError, AttributeError):
            raise KeyError(centroid) from None

    def __iter__(self) -> Iterator[Vector]:
        return iter(self.centroids())

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        if not isinstance(other, Cluster) and not _holds_vectors(other):
            return False
        return clusters_equal(self, other)

    __hash__ = None

    def __repr__(self) -> str:
        entries = ", ".join(f"{centroid!r}: {members!r}" for centroid, members in self.items())
        return f"Cluster({{{entries}}})"

    def to_json(self, default: Callable[[Any], Any] | None = None) -> str:
        """Serializes the cluster to a JSON object.

        Each centroid is encoded on its own and its JSON text becomes the key;
        the value is the JSON list of its members.

        Args:
            default (Callable[[Any], Any] | None): Fallback encoder for values json
                cannot handle, passed through to ``json.dumps``.

        Returns:
            str: ``{"<json of centroid>": [<json of member>, ...], ...}``; ``{}`` when empty.

        Example:
            >>> Cluster.from_mapping({Coordinate(1, 2): [Coordinate(1, 3)]}).to_json()
            '{"[1, 2]": [[1, 3]]}'
        """
        entries = []
        for centroid, members in self.items():
            centroid_blob = json.dumps(_encode_vector(centroid, default), default=default)
            members_blob = json.dumps(
                [_encode_vector(member, default) for member in members], default=default
            )
            entries.append(f"{json.dumps(centroid_blob)}: {members_blob}")
        return "{" + ",".join(entries) + "}"


def _encode_vector(vector: Any, default: Callable[[Any], Any] | None) -> Any:
    to_json_value = getattr(vector, "to_json_value", None)
    if callable(to_json_value):
        return to_json_value()
    if dataclasses.is_dataclass(vector) and not isinstance(vector, type):
        return dataclasses.asdict(vector)
    if isinstance(vector, Vector):
        return [vector.dimension(i) for i in range(len(vector))]
    if default is not None:
        return default(vector)
    raise TypeError(f"Object of type {type(vector).__name__} is not a vector")


def _holds_vectors(mapping: Mapping) -> bool:
    for centroid, members in mapping.items():
        if not isinstance(centroid, Vector):
            return False
        if members is None:
            continue
        if not isinstance(members, Iterable) or not all(isinstance(m, Vector) for m in members):
            return False
    return True


def _signature_map(cluster: Mapping | None) -> dict[Hashable, list[Vector]]:
    if cluster is None:
        return {}
    if isinstance(cluster, Cluster):
        return cluster.signature_map()
    return {centroid.signature: members for centroid, members in cluster.items()}


def _members_equal(members_a: list[Vector] | None, members_b: list[Vector] | None) -> bool:
    if not members_a or not members_b:
        return not members_a and not members_b
    signatures_a = {member.signature for member in members_a}
    signatures_b = {member.signature for member in members_b}
    return signatures_a == signatures_b


def clusters_equal(cluster_a: Mapping | None, cluster_b: Mapping | None) -> bool:
    """Checks whether two clusters hold the same assignment.

    The comparison goes through signatures only, so it does not depend on the
    order centroids were inserted in or the order of members within a list.
    Member lists are compared as sets; empty and missing lists are equal.

    Args:
        cluster_a (Mapping | None): A cluster or any mapping of centroid to members.
        cluster_b (Mapping | None): The cluster to compare against.

    Returns:
        bool: True if both clusters have the same centroids with the same members.
    """
    if len(cluster_a or {}) != len(cluster_b or {}):
        return False

    signatures_a = _signature_map(cluster_a)
    signatures_b = _signature_map(cluster_b)
    for signature, members_a in signatures_a.items():
        if signature not in signatures_b:
            return False
        if not _members_equal(members_a, signatures_b[signature]):
            return False
    return True
