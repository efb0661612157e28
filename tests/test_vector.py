from fractions import Fraction

import numpy as np
import pytest

from vectorkmeans import Coordinate, DimensionIndexOutOfBoundsError, Vector
from vectorkmeans._vector import quantify_as_float


def test_coordinate_dimensions():
    c = Coordinate(23, 10.5, "x")

    assert len(c) == 3
    assert c.dimension(0) == 23
    assert c.dimension(1) == 10.5
    assert c.dimension(2) == "x"


@pytest.mark.parametrize("index", [3, 10, -1])
def test_coordinate_dimension_out_of_bounds(index):
    with pytest.raises(DimensionIndexOutOfBoundsError):
        Coordinate(1, 2, 3).dimension(index)


def test_out_of_bounds_is_an_index_error():
    with pytest.raises(IndexError):
        Coordinate().dimension(0)


def test_signature_depends_on_content_only():
    assert Coordinate(1, 2.5, 3).signature == Coordinate(1, 2.5, 3).signature
    assert Coordinate(1, 2, 3).signature != Coordinate(1, 2, 4).signature
    assert Coordinate(1, 2.5).signature == "1-2.5"


def test_signature_is_memoized():
    c = Coordinate(4, 5)
    assert c.signature is c.signature


def test_from_iterable_unwraps_numpy_scalars():
    from_array = Coordinate.from_iterable(np.array([1.5, 2.0]))
    assert from_array.signature == Coordinate(1.5, 2.0).signature
    assert from_array == Coordinate(1.5, 2.0)


def test_coordinate_is_a_vector(people):
    assert isinstance(Coordinate(1, 2), Vector)
    assert isinstance(people[0], Vector)
    assert not isinstance([1, 2], Vector)


@pytest.mark.parametrize(
    "value, expected",
    [
        (3, 3.0),
        (2.5, 2.5),
        (np.float32(1.5), 1.5),
        (np.int64(7), 7.0),
        (Fraction(1, 4), 0.25),
        (None, 0.0),
        ("12", 0.0),
        (True, 0.0),
    ],
)
def test_quantify_without_transform(value, expected):
    assert quantify_as_float(None, value) == expected


def test_quantify_with_transform():
    assert quantify_as_float(lambda v: float(len(v)), "abcd") == 4.0
