import numbers
from typing import Any, Callable, Hashable, Iterable, Protocol, runtime_checkable

import numpy as np

from ._exceptions import DimensionIndexOutOfBoundsError

Transformer = Callable[[Any], float]


@runtime_checkable
class Vector(Protocol):
    """The capabilities every clusterable item must provide.

    A vector has a fixed number of dimensions, exposes the raw value at each
    ordinal dimension and reports a signature. Two vectors with equal
    signatures are treated as the same point. Signatures may be memoized, so
    a vector must not be mutated once it has been handed to the engine.
    """

    def __len__(self) -> int:
        ...

    def dimension(self, i: int) -> Any:
        ...

    @property
    def signature(self) -> Hashable:
        ...


def quantify_as_float(transform: Transformer | None, value: Any) -> float:
    """Converts a raw dimension value into the float used for distances.

    Args:
        transform (Transformer | None): Applied to the value when given.
        value (Any): Raw dimension value.

    Returns:
        float: The transformed value, the value itself for real numbers, 0.0 otherwise.
    """
    if transform is not None:
        return float(transform(value))
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, numbers.Real):
        return float(value)
    return 0.0


class Coordinate:
    """An immutable point made of raw dimension values.

    Args:
        *dimens (Any): The value of each dimension, in order.

    Example:
        >>> Coordinate(23, 10, 15).dimension(1)
        10
    """

    def __init__(self, *dimens: Any) -> None:
        self._dimens = tuple(dimens)
        self._signature = None

    @classmethod
    def from_iterable(cls, values: Iterable[Any]) -> "Coordinate":
        """Builds a coordinate from any iterable, e.g. a numpy or pandas row.

        numpy scalars are unwrapped to their Python equivalents so that the
        signature does not depend on the array dtype wrapper.
        """
        return cls(*(v.item() if isinstance(v, np.generic) else v for v in values))

    def __len__(self) -> int:
        return len(self._dimens)

    def dimension(self, i: int) -> Any:
        """Returns the value at ordinal dimension ``i``.

        Raises:
            DimensionIndexOutOfBoundsError: If ``i`` is negative or not below the length.
        """
        if i < 0 or i >= len(self._dimens):
            raise DimensionIndexOutOfBoundsError(
                f"dimension index {i} out of bounds for length {len(self._dimens)}"
            )
        return self._dimens[i]

    @property
    def signature(self) -> str:
        if self._signature is None:
            self._signature = "-".join(repr(dimen) for dimen in self._dimens)
        return self._signature

    @property
    def dimens(self) -> tuple:
        return self._dimens

    def to_json_value(self) -> list:
        return list(self._dimens)

    def __iter__(self):
        return iter(self._dimens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.signature == other.signature

    def __hash__(self) -> int:
        return hash(self.signature)

    def __repr__(self) -> str:
        return f"Coordinate{self._dimens!r}"
